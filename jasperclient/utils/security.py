"""
Masking of sensitive values (passwords, auth headers) before they reach logs.
"""

import re
from typing import Any, Dict

SENSITIVE_PATTERNS = [
    r".*PASSWORD.*",
    r".*SECRET.*",
    r".*TOKEN.*",
    r".*AUTH.*",
    r".*CREDENTIAL.*",
]

_sensitive_regex = [re.compile(pattern, re.IGNORECASE) for pattern in SENSITIVE_PATTERNS]


def is_sensitive_key(key: str) -> bool:
    """Check if a setting or header name indicates it contains sensitive data."""
    return any(pattern.match(key) for pattern in _sensitive_regex)


def mask_sensitive_value(value: str, show_chars: int = 2) -> str:
    """Mask a sensitive value for safe logging/display."""
    if not value or len(value) <= show_chars * 2:
        return "***"

    return f"{value[:show_chars]}{'*' * (len(value) - show_chars * 2)}{value[-show_chars:]}"


def mask_sensitive_dict(data: Dict[str, Any]) -> Dict[str, Any]:
    """Return a copy of ``data`` with sensitive string values masked."""
    masked = {}
    for key, value in data.items():
        if isinstance(value, str) and is_sensitive_key(key):
            masked[key] = mask_sensitive_value(value)
        else:
            masked[key] = value
    return masked
