"""
Connection profile for a JasperReports Server instance.
"""

import base64
from dataclasses import dataclass, field
from typing import Optional

from .utils.security import mask_sensitive_value


@dataclass
class ServerProfile:
    """Server URL plus the credentials used for HTTP basic authentication."""

    server_url: str
    username: str
    password: str = field(repr=False)
    organization: Optional[str] = None
    alias: Optional[str] = None

    def __post_init__(self):
        self.server_url = self.server_url.rstrip("/")
        if self.organization is not None and not self.organization.strip():
            self.organization = None
        if self.alias is None:
            self.alias = self.server_url

    @property
    def username_with_org_id(self) -> str:
        """Username as the server expects it: ``user|organization`` for multi-tenant servers."""
        if self.organization:
            return f"{self.username}|{self.organization}"
        return self.username

    def basic_auth_header(self) -> str:
        credentials = f"{self.username_with_org_id}:{self.password}".encode("utf-8")
        return "Basic " + base64.b64encode(credentials).decode("ascii")

    def describe(self) -> str:
        """Human readable summary with the password masked."""
        return f"{self.alias} ({self.username_with_org_id}:{mask_sensitive_value(self.password)}@{self.server_url})"
