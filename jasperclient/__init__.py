"""
jasperclient - JasperReports Server client SDK

REST access to repository resources, reports, input controls and report
executions, plus an async task manager that runs server calls on worker
threads while driving a progress dialog.
"""

__version__ = "1.9.0"
__author__ = "jasperclient developers"
__license__ = "LGPL-3.0-or-later"

__title__ = "jasperclient"
__description__ = "JasperReports Server REST client with async task management"

from .config import ConfigurationManager
from .exceptions import (
    AccessDeniedError,
    AuthenticationError,
    ConfigurationError,
    HttpStatusError,
    JasperClientError,
    ResourceAccessError,
    ResourceNotFoundError,
    ResponseParseError,
    RestClientError,
    TaskError,
)
from .rest_client import JasperRestClient
from .server_profile import ServerProfile

# Define public API
__all__ = [
    "__version__",
    "__author__",
    "__license__",
    "AccessDeniedError",
    "AuthenticationError",
    "ConfigurationError",
    "ConfigurationManager",
    "HttpStatusError",
    "JasperClientError",
    "JasperRestClient",
    "ResourceAccessError",
    "ResourceNotFoundError",
    "ResponseParseError",
    "RestClientError",
    "ServerProfile",
    "TaskError",
]
