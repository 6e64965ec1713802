"""Project endpoints"""

from teamwork_api.client.http_client import HttpMethod
from teamwork_api.client.result import ApiResult
from teamwork_api.services.base import Args, BaseService, ResourceId


class ProjectService(BaseService):
    """Projects: list, read, create, update, delete and starring"""

    def get_projects(self, args: Args = None) -> ApiResult:
        """
        List all projects

        Args:
            args: Query filters, e.g. ``{"status": "ACTIVE"}``
        """
        return self._call("/projects.json", args)

    def get_project(self, project_id: ResourceId, args: Args = None) -> ApiResult:
        """Get a single project"""
        return self._call(f"/projects/{project_id}.json", args)

    def create_project(self, args: Args = None) -> ApiResult:
        """Create a project from a ``{"project": {...}}`` document"""
        return self._call("/projects.json", args, HttpMethod.POST)

    def update_project(self, project_id: ResourceId, args: Args = None) -> ApiResult:
        return self._call(f"/projects/{project_id}.json", args, HttpMethod.PUT)

    def delete_project(self, project_id: ResourceId) -> ApiResult:
        return self._call(f"/projects/{project_id}.json", method=HttpMethod.DELETE)

    def get_starred_projects(self) -> ApiResult:
        return self._call("/projects/starred.json")

    def star_project(self, project_id: ResourceId) -> ApiResult:
        return self._call(f"/projects/{project_id}/star.json", method=HttpMethod.PUT)

    def unstar_project(self, project_id: ResourceId) -> ApiResult:
        return self._call(
            f"/projects/{project_id}/unstar.json", method=HttpMethod.PUT
        )
