"""Trashcan endpoints"""

from teamwork_api.client.result import ApiResult
from teamwork_api.services.base import BaseService, ResourceId


class TrashcanService(BaseService):
    """Deleted items of a project and their restoration"""

    def get_project_trashcan(self, project_id: ResourceId) -> ApiResult:
        return self._call(f"/trashcan/projects/{project_id}.json")

    def restore_item(self, resource: str, item_id: ResourceId) -> ApiResult:
        """
        Restore a deleted item

        Args:
            resource: Resource collection name, e.g. ``"tasks"`` or ``"files"``
            item_id: Id of the deleted item
        """
        return self._call(f"/trashcan/{resource}/{item_id}/restore.json")
