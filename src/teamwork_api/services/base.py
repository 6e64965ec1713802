"""Shared plumbing for endpoint services"""

from typing import Any, Mapping, Optional, Union

from teamwork_api.client.http_client import HttpClient, HttpMethod
from teamwork_api.client.result import ApiResult


Args = Optional[Mapping[str, Any]]
ResourceId = Union[int, str]


class BaseService:
    """
    Base class for endpoint groups

    Endpoint methods pick a path and a verb and hand them to the client;
    path parameters are inserted into the route as given, without escaping.
    """

    def __init__(self, client: HttpClient) -> None:
        self._client = client

    def _call(
        self,
        path: str,
        args: Args = None,
        method: HttpMethod = HttpMethod.GET,
    ) -> ApiResult:
        return self._client.build_request(path, args, method).fetch()
