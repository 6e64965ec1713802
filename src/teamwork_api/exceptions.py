"""Exception classes for the Teamwork API client"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional


class ErrorKind(str, Enum):
    """Failure kinds reported by the client"""
    RESPONSE_ERROR = "response-error"
    TRANSPORT_ERROR = "transport-error"
    NOT_IMPLEMENTED = "not-implemented"
    CONFIG_ERROR = "config-error"
    UNKNOWN = "unknown"


class NetworkErrorCode(str, Enum):
    """Network error codes for transport failures"""
    TIMEOUT = "NET01"
    CONNECTION_ERROR = "NET02"
    SSL_ERROR = "NET04"
    UNKNOWN = "NET10"


class TeamworkError(Exception):
    """
    Base exception for Teamwork API errors

    All errors in the package extend from this class.
    """

    kind = ErrorKind.UNKNOWN

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        status_code: Optional[int] = None,
        details: Optional[Any] = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.status_code = status_code
        self.details = details
        self.timestamp = datetime.now(timezone.utc)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary"""
        return {
            "name": self.__class__.__name__,
            "message": str(self),
            "kind": self.kind.value,
            "code": self.code,
            "status_code": self.status_code,
            "timestamp": self.timestamp.isoformat(),
            "details": self.details,
        }

    def get_description(self) -> str:
        """Get human-readable error description"""
        parts = [str(self)]

        if self.code:
            parts.insert(0, f"[{self.code}]")

        if self.status_code:
            parts.append(f"(HTTP {self.status_code})")

        return " ".join(parts)


class ResponseError(TeamworkError):
    """The server answered with a status code outside 2xx"""

    kind = ErrorKind.RESPONSE_ERROR

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        details: Optional[Any] = None,
    ) -> None:
        super().__init__(
            message,
            code=ErrorKind.RESPONSE_ERROR.value,
            status_code=status_code,
            details=details,
        )


class TransportError(TeamworkError):
    """
    The HTTP call itself could not complete (DNS, refused connection, timeout)
    """

    kind = ErrorKind.TRANSPORT_ERROR

    def __init__(
        self,
        message: str,
        network_code: str = NetworkErrorCode.UNKNOWN.value,
        details: Optional[Any] = None,
    ) -> None:
        super().__init__(message, code=network_code, details=details)
        self.network_code = network_code

    @classmethod
    def timeout(cls, message: str = "Request timed out") -> "TransportError":
        """Create a timeout error"""
        return cls(message, network_code=NetworkErrorCode.TIMEOUT.value)

    @classmethod
    def connection_error(
        cls, message: str = "Connection error"
    ) -> "TransportError":
        """Create a connection error"""
        return cls(message, network_code=NetworkErrorCode.CONNECTION_ERROR.value)

    @classmethod
    def ssl_error(cls, message: str = "SSL/TLS error") -> "TransportError":
        """Create an SSL error"""
        return cls(message, network_code=NetworkErrorCode.SSL_ERROR.value)


class EndpointNotImplementedError(TeamworkError):
    """Raised when unwrapping the result of an unimplemented endpoint"""

    kind = ErrorKind.NOT_IMPLEMENTED

    def __init__(self, endpoint: str) -> None:
        super().__init__(
            f"Endpoint not implemented: {endpoint}",
            code=ErrorKind.NOT_IMPLEMENTED.value,
        )
        self.endpoint = endpoint


class ConfigError(TeamworkError):
    """Configuration error"""

    kind = ErrorKind.CONFIG_ERROR

    def __init__(
        self,
        message: str,
        code: str = "CONFIG01",
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, code=code, details=details)


class ValidationError(ConfigError):
    """Configuration validation error"""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, code="VALIDATION_ERROR", details=details)
        self.field = field
