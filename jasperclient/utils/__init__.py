"""Shared helpers: retry policy and masking of sensitive values."""

from .retry_decorator import rest_call_retry, retry_with_backoff
from .security import mask_sensitive_dict, mask_sensitive_value

__all__ = [
    "rest_call_retry",
    "retry_with_backoff",
    "mask_sensitive_dict",
    "mask_sensitive_value",
]
