"""
Custom exception hierarchy for the JasperReports Server client.
"""

from typing import Any, Dict, Optional


class JasperClientError(Exception):
    """Base exception for all client errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}


class ConfigurationError(JasperClientError):
    """Configuration-related errors."""

    pass


class RestClientError(JasperClientError):
    """Any failure while talking to the server."""

    pass


class HttpStatusError(RestClientError):
    """The server answered with a non-successful HTTP status."""

    def __init__(self, message: str, status_code: int, response_body: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.status_code = status_code
        self.response_body = response_body


class AuthenticationError(HttpStatusError):
    """Invalid credentials (HTTP 401)."""

    def __init__(self, message: str = "Authentication failed", **kwargs):
        kwargs.setdefault("status_code", 401)
        super().__init__(message, **kwargs)


class AccessDeniedError(HttpStatusError):
    """Authenticated user may not access the resource (HTTP 403)."""

    def __init__(self, message: str = "Access denied", **kwargs):
        kwargs.setdefault("status_code", 403)
        super().__init__(message, **kwargs)


class ResourceNotFoundError(HttpStatusError):
    """Requested resource does not exist (HTTP 404)."""

    def __init__(self, message: str = "Resource not found", **kwargs):
        kwargs.setdefault("status_code", 404)
        super().__init__(message, **kwargs)


class ResourceAccessError(RestClientError):
    """I/O error: connection failure, timeout or local file problem."""

    def __init__(self, message: str, url: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.url = url


class ResponseParseError(RestClientError):
    """Response body could not be mapped to the expected type."""

    def __init__(self, message: str, content_type: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.content_type = content_type


class TaskError(JasperClientError):
    """Misuse of the async task API."""

    def __init__(self, message: str, task_id: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.task_id = task_id


_STATUS_ERRORS = {
    401: AuthenticationError,
    403: AccessDeniedError,
    404: ResourceNotFoundError,
}


def error_for_status(status_code: int, url: str, response_body: Optional[str] = None) -> HttpStatusError:
    """Build the most specific HttpStatusError for a status code."""
    error_class = _STATUS_ERRORS.get(status_code, HttpStatusError)
    message = f"HTTP {status_code} for {url}"
    return error_class(message, status_code=status_code, response_body=response_body, details={"url": url})
