"""Task endpoints"""

from teamwork_api.client.result import ApiResult, not_implemented
from teamwork_api.services.base import Args, BaseService


class TaskService(BaseService):

    def get_tasks(self, args: Args = None) -> ApiResult:
        """Not implemented; returns a not-implemented Failure without I/O"""
        return not_implemented("get_tasks")
