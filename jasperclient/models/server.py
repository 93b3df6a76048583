"""
Server information reported by ``/rest_v2/serverInfo``.
"""

import re
from dataclasses import dataclass
from typing import Any, Dict, Optional


class VersionCodes:
    UNKNOWN = 0.0
    EMERALD = 5.0
    EMERALD_MR1 = 5.2
    EMERALD_MR2 = 5.5
    EMERALD_MR3 = 5.6
    AMBER = 6.0


@dataclass
class ServerInfo:
    """Edition and version of the server; all fields empty for servers without the service."""

    build: Optional[str] = None
    edition: Optional[str] = None
    edition_name: Optional[str] = None
    expiration: Optional[str] = None
    features: Optional[str] = None
    license_type: Optional[str] = None
    version: Optional[str] = None
    date_format_pattern: Optional[str] = None
    datetime_format_pattern: Optional[str] = None

    EDITION_PRO = "PRO"
    EDITION_CE = "CE"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ServerInfo":
        return cls(
            build=data.get("build"),
            edition=data.get("edition"),
            edition_name=data.get("editionName"),
            expiration=data.get("expiration"),
            features=data.get("features"),
            license_type=data.get("licenseType"),
            version=data.get("version"),
            date_format_pattern=data.get("dateFormatPattern"),
            datetime_format_pattern=data.get("datetimeFormatPattern"),
        )

    @property
    def version_code(self) -> float:
        """``major.minor`` of the version string as a number, e.g. "5.5.0" gives 5.5."""
        if not self.version:
            return VersionCodes.UNKNOWN
        match = re.match(r"(\d+)(?:\.(\d+))?", self.version.strip())
        if not match:
            return VersionCodes.UNKNOWN
        return float(f"{match.group(1)}.{match.group(2) or 0}")

    @property
    def is_pro(self) -> bool:
        return self.edition == self.EDITION_PRO
