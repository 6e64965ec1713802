"""
Normalized call results

Every fetch produces exactly one ApiResult: a Success carrying the decoded
payload, or a Failure carrying the error kind, a message, the HTTP status
(when a response was received) and the decoded body for diagnostics.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

from teamwork_api.exceptions import (
    EndpointNotImplementedError,
    ErrorKind,
    ResponseError,
    TeamworkError,
    TransportError,
)


@dataclass(frozen=True)
class Success:
    """Successful (2xx) response"""
    data: Any

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> Any:
        """Return the decoded payload"""
        return self.data

    def to_dict(self) -> Dict[str, Any]:
        return {"ok": True, "data": self.data}


@dataclass(frozen=True)
class Failure:
    """Failed call: non-2xx response, transport error or unimplemented endpoint"""
    kind: ErrorKind
    message: str
    status_code: Optional[int] = None
    data: Any = None
    code: Optional[str] = None

    @property
    def ok(self) -> bool:
        return False

    def to_exception(self) -> TeamworkError:
        """Build the exception matching this failure"""
        if self.kind == ErrorKind.RESPONSE_ERROR:
            return ResponseError(
                self.message, status_code=self.status_code, details=self.data
            )
        if self.kind == ErrorKind.TRANSPORT_ERROR:
            if self.code:
                return TransportError(self.message, network_code=self.code)
            return TransportError(self.message)
        if self.kind == ErrorKind.NOT_IMPLEMENTED:
            return EndpointNotImplementedError(self.code or self.message)
        return TeamworkError(
            self.message, code=self.code, status_code=self.status_code,
            details=self.data,
        )

    def unwrap(self) -> Any:
        """Raise the exception matching this failure"""
        raise self.to_exception()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "ok": False,
            "kind": self.kind.value,
            "message": self.message,
            "status_code": self.status_code,
            "code": self.code,
            "data": self.data,
        }


ApiResult = Union[Success, Failure]


def not_implemented(endpoint: str) -> Failure:
    """Result returned by endpoint methods that have no implementation"""
    return Failure(
        kind=ErrorKind.NOT_IMPLEMENTED,
        message=f"Endpoint not implemented: {endpoint}",
        code=endpoint,
    )
