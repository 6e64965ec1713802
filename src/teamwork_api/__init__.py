"""
Teamwork API client for Python

Main entry point for the package
"""

from teamwork_api.client import TeamworkClient
from teamwork_api.exceptions import (
    TeamworkError,
    ErrorKind,
    NetworkErrorCode,
    ResponseError,
    TransportError,
    EndpointNotImplementedError,
    ConfigError,
    ValidationError,
)

# HTTP Client
from teamwork_api.client import (
    HttpClient,
    HttpMethod,
    HttpAuditEntry,
    PendingRequest,
    ApiResult,
    Success,
    Failure,
    is_status_ok,
)

# Configuration
from teamwork_api.config import (
    TeamworkConfig,
    ConfigLoader,
    ConfigValidator,
    ENV_VAR_MAPPING,
    ConfigDefaults,
)

__version__ = "0.1.0"

__all__ = [
    # Client
    "TeamworkClient",
    # HTTP Client
    "HttpClient",
    "HttpMethod",
    "HttpAuditEntry",
    "PendingRequest",
    "ApiResult",
    "Success",
    "Failure",
    "is_status_ok",
    # Exceptions
    "TeamworkError",
    "ErrorKind",
    "NetworkErrorCode",
    "ResponseError",
    "TransportError",
    "EndpointNotImplementedError",
    "ConfigError",
    "ValidationError",
    # Configuration
    "TeamworkConfig",
    "ConfigLoader",
    "ConfigValidator",
    "ENV_VAR_MAPPING",
    "ConfigDefaults",
]
