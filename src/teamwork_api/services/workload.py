"""Workload endpoint"""

from teamwork_api.client.result import ApiResult
from teamwork_api.services.base import Args, BaseService


class WorkloadService(BaseService):

    def get_workload(self, args: Args = None) -> ApiResult:
        return self._call("/workload.json", args)
