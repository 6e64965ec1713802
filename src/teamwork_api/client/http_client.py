"""
HTTP transport layer for the Teamwork API
Builds authenticated requests and normalizes every round trip into an ApiResult
"""

import base64
import json
import logging
import time
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from types import MappingProxyType
from typing import (
    Any,
    Callable,
    Dict,
    Mapping,
    Optional,
    Union,
)

import requests
from requests.adapters import HTTPAdapter

from teamwork_api.config.teamwork_config import TeamworkConfig
from teamwork_api.client.query import add_query_args, encode_query
from teamwork_api.client.result import ApiResult, Failure, Success
from teamwork_api.exceptions import ErrorKind, NetworkErrorCode


# Logger for this module
logger = logging.getLogger(__name__)


JSON_CONTENT_TYPE = "application/json"

# Request body: nothing, a raw key-value mapping, or a JSON-encoded string
RequestBody = Union[None, Mapping[str, Any], str]


class HttpMethod(str, Enum):
    """HTTP method types supported"""
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    PATCH = "PATCH"


@dataclass(frozen=True)
class PendingRequest:
    """
    A fully built request, ready to be fetched

    Produced by HttpClient.build_request and never modified afterwards.
    Holding a reference to its client allows the fluent
    ``client.build_request(...).fetch()`` style.
    """
    method: HttpMethod
    path: str
    headers: Mapping[str, str]
    body: RequestBody = None
    timeout: float = 20
    client: Optional["HttpClient"] = field(default=None, repr=False, compare=False)

    def fetch(self) -> ApiResult:
        """Send this request through the client that built it"""
        if self.client is None:
            raise RuntimeError("PendingRequest is not bound to a client")
        return self.client.fetch(self)


@dataclass
class HttpAuditEntry:
    """Audit log entry for HTTP requests"""
    timestamp: str
    method: str
    url: str
    headers: Dict[str, str]
    body: Optional[Any] = None
    status_code: Optional[int] = None
    response: Optional[Any] = None
    duration: int = 0  # milliseconds
    success: bool = False
    error: Optional[str] = None


# Sensitive fields that should be redacted in logs
SENSITIVE_FIELDS = [
    "authorization",
    "password",
    "api_key",
    "apikey",
    "token",
]


def is_status_ok(code: Optional[int]) -> bool:
    """Check if an HTTP status code is a success (2xx)"""
    return code is not None and 200 <= code < 300


def basic_auth_header(username: str, password: str) -> str:
    """Build the Basic scheme Authorization header value"""
    credentials = f"{username}:{password}".encode("utf-8")
    return "Basic " + base64.b64encode(credentials).decode("ascii")


def decode_body(response: requests.Response) -> Any:
    """Decode a JSON response body; empty or invalid JSON yields None"""
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return None


class HttpClient:
    """
    HTTP Client for the Teamwork API

    Requests are built in one step and sent in another:

    Example:
        >>> client = HttpClient.from_credentials(
        ...     "https://example.teamwork.com", "api-key", "X"
        ... )
        >>> result = client.build_request("/projects.json").fetch()
        >>> if result.ok:
        ...     print(result.data)
    """

    def __init__(
        self,
        config: TeamworkConfig,
        session: Optional[requests.Session] = None,
    ) -> None:
        """
        Create a new HTTP client instance

        Args:
            config: Client configuration
            session: Optional pre-configured requests session
        """
        self.config = config

        # Audit logging callback
        self._audit_log_callback: Optional[Callable[[HttpAuditEntry], None]] = None

        self._session = session if session is not None else self._create_session()

    @classmethod
    def from_credentials(
        cls,
        base_uri: str,
        username: str,
        password: str,
        **options: Any,
    ) -> "HttpClient":
        """Create a client from a base URI and a credential pair"""
        session = options.pop("session", None)
        config = TeamworkConfig(
            base_uri=base_uri, username=username, password=password, **options
        )
        return cls(config, session=session)

    def _create_session(self) -> requests.Session:
        """Create requests session with connection pooling"""
        session = requests.Session()

        adapter = HTTPAdapter(
            pool_connections=10,
            pool_maxsize=10,
            max_retries=0,
        )

        session.mount("http://", adapter)
        session.mount("https://", adapter)

        return session

    def _build_headers(self) -> Dict[str, str]:
        """Build the request headers from scratch"""
        return {
            "Content-Type": self.config.content_type,
            "Authorization": basic_auth_header(
                self.config.username, self.config.password
            ),
        }

    def build_request(
        self,
        path: str,
        args: Optional[Mapping[str, Any]] = None,
        method: Union[HttpMethod, str] = HttpMethod.GET,
    ) -> PendingRequest:
        """
        Prepare an API request without sending it

        GET requests carry their non-empty args as a query string. Other
        methods send args as a JSON document when the content type is JSON,
        or as a raw mapping otherwise, form-encoded when sent.

        Args:
            path: API route, appended verbatim to the base URI
            args: Arguments to pass into the API call
            method: HTTP method to use

        Returns:
            PendingRequest that can be fetched
        """
        if not isinstance(method, HttpMethod):
            method = HttpMethod(method.upper())
        args = args if args is not None else {}
        headers = self._build_headers()

        body: RequestBody = None
        if method == HttpMethod.GET:
            path = add_query_args(path, args)
        elif headers["Content-Type"] == JSON_CONTENT_TYPE:
            body = json.dumps(args)
        else:
            body = args

        return PendingRequest(
            method=method,
            path=path,
            headers=MappingProxyType(headers),
            body=body,
            timeout=self.config.timeout,
            client=self,
        )

    def fetch(self, request: PendingRequest) -> ApiResult:
        """
        Send a built request and classify the response

        Never raises for HTTP error statuses or transport failures; both are
        returned as a Failure.

        Args:
            request: Request produced by build_request

        Returns:
            Success with the decoded body, or Failure
        """
        url = f"{self.config.base_uri}{request.path}"
        headers = dict(request.headers)
        payload: Any = request.body
        if isinstance(payload, Mapping):
            payload = encode_query(payload)
        start_time = time.time()

        logger.debug(f"{request.method.value} {url}")

        try:
            prepared = requests.Request(
                method=request.method.value,
                url=url,
                headers=headers,
                data=payload,
            ).prepare()
            response = self._session.send(prepared, timeout=request.timeout)
        except requests.exceptions.RequestException as e:
            failure = self._transport_failure(e)
            logger.warning(
                f"{request.method.value} {url} failed: {failure.message}"
            )
            self._log_audit(self._create_audit_entry(
                request, url, start_time, error=failure.message
            ))
            return failure

        status_code = response.status_code
        data = decode_body(response)

        self._log_audit(self._create_audit_entry(
            request, url, start_time, status_code=status_code, response=data
        ))

        if not is_status_ok(status_code):
            logger.warning(f"{request.method.value} {url} returned {status_code}")
            return Failure(
                kind=ErrorKind.RESPONSE_ERROR,
                message=f"Status: {status_code}",
                status_code=status_code,
                data=data,
                code=ErrorKind.RESPONSE_ERROR.value,
            )

        return Success(data)

    def _transport_failure(self, error: Exception) -> Failure:
        """Normalize a requests exception into a transport Failure"""
        if isinstance(error, requests.exceptions.Timeout):
            code, message = NetworkErrorCode.TIMEOUT, "Request timed out"
        elif isinstance(error, requests.exceptions.SSLError):
            code, message = NetworkErrorCode.SSL_ERROR, f"SSL error: {error}"
        elif isinstance(error, requests.exceptions.ConnectionError):
            code, message = (
                NetworkErrorCode.CONNECTION_ERROR, f"Connection error: {error}"
            )
        else:
            code, message = NetworkErrorCode.UNKNOWN, f"Request error: {error}"

        return Failure(
            kind=ErrorKind.TRANSPORT_ERROR,
            message=message,
            code=code.value,
        )

    def _redact_sensitive_data(self, obj: Any) -> Any:
        """Redact sensitive data from object for logging"""
        if isinstance(obj, list):
            return [self._redact_sensitive_data(item) for item in obj]

        if isinstance(obj, Mapping):
            redacted = {}
            for key, value in obj.items():
                lower_key = str(key).lower()
                if any(name in lower_key for name in SENSITIVE_FIELDS):
                    redacted[key] = "[REDACTED]"
                else:
                    redacted[key] = self._redact_sensitive_data(value)
            return redacted

        return obj

    def _create_audit_entry(
        self,
        request: PendingRequest,
        url: str,
        start_time: float,
        status_code: Optional[int] = None,
        response: Optional[Any] = None,
        error: Optional[str] = None,
    ) -> HttpAuditEntry:
        """Create audit log entry"""
        body: Any = request.body
        if isinstance(body, str):
            try:
                body = json.loads(body)
            except ValueError:
                pass

        return HttpAuditEntry(
            timestamp=datetime.now(timezone.utc).isoformat(),
            method=request.method.value,
            url=url,
            headers=self._redact_sensitive_data(request.headers),
            body=self._redact_sensitive_data(body),
            status_code=status_code,
            response=self._redact_sensitive_data(response),
            duration=int((time.time() - start_time) * 1000),
            success=error is None and is_status_ok(status_code),
            error=error,
        )

    def _log_audit(self, entry: HttpAuditEntry) -> None:
        """Log audit entry"""
        if self.config.enable_audit_log and self._audit_log_callback:
            try:
                self._audit_log_callback(entry)
            except Exception:
                logger.exception(
                    f"Audit log callback failed for {entry.method} {entry.url}"
                )

    def set_audit_log_callback(
        self, callback: Callable[[HttpAuditEntry], None]
    ) -> None:
        """Set audit log callback"""
        self._audit_log_callback = callback

    @property
    def base_uri(self) -> str:
        """Get base URI"""
        return self.config.base_uri

    def close(self) -> None:
        """Close the HTTP session"""
        self._session.close()

    def __enter__(self) -> "HttpClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
