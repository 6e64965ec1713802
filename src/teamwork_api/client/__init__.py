"""
HTTP Client module for the Teamwork API
"""

from teamwork_api.client.http_client import (
    HttpClient,
    HttpMethod,
    HttpAuditEntry,
    PendingRequest,
    basic_auth_header,
    is_status_ok,
)
from teamwork_api.client.result import ApiResult, Failure, Success
from teamwork_api.client.teamwork_client import TeamworkClient

__all__ = [
    "TeamworkClient",
    "HttpClient",
    "HttpMethod",
    "HttpAuditEntry",
    "PendingRequest",
    "basic_auth_header",
    "is_status_ok",
    "ApiResult",
    "Success",
    "Failure",
]
