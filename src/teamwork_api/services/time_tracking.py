"""Time tracking endpoints"""

from teamwork_api.client.http_client import HttpMethod
from teamwork_api.client.result import ApiResult
from teamwork_api.services.base import Args, BaseService, ResourceId


class TimeTrackingService(BaseService):
    """Time entries and time totals"""

    def get_time_entries(self, args: Args = None) -> ApiResult:
        """
        List time entries across all projects

        Args:
            args: Query filters such as ``fromdate``, ``todate``, ``page``
        """
        return self._call("/time_entries.json", args)

    def get_project_time_entries(
        self, project_id: ResourceId, args: Args = None
    ) -> ApiResult:
        return self._call(f"/projects/{project_id}/time_entries.json", args)

    def get_time_entry(self, entry_id: ResourceId) -> ApiResult:
        return self._call(f"/time_entries/{entry_id}.json")

    def create_time_entry(self, project_id: ResourceId, args: Args = None) -> ApiResult:
        """Log time on a project from a ``{"time-entry": {...}}`` document"""
        return self._call(
            f"/projects/{project_id}/time_entries.json", args, HttpMethod.POST
        )

    def update_time_entry(self, entry_id: ResourceId, args: Args = None) -> ApiResult:
        return self._call(f"/time_entries/{entry_id}.json", args, HttpMethod.PUT)

    def delete_time_entry(self, entry_id: ResourceId) -> ApiResult:
        return self._call(f"/time_entries/{entry_id}.json", method=HttpMethod.DELETE)

    def get_time_totals(self, args: Args = None) -> ApiResult:
        return self._call("/time/total.json", args)

    def get_project_time_totals(
        self, project_id: ResourceId, args: Args = None
    ) -> ApiResult:
        return self._call(f"/projects/{project_id}/time/total.json", args)
