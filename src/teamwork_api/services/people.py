"""People endpoints"""

from teamwork_api.client.http_client import HttpMethod
from teamwork_api.client.result import ApiResult, not_implemented
from teamwork_api.services.base import Args, BaseService, ResourceId


class PeopleService(BaseService):
    """People on the site, per company and per project"""

    def get_people(self, args: Args = None) -> ApiResult:
        return self._call("/people.json", args)

    def get_person(self, person_id: ResourceId, args: Args = None) -> ApiResult:
        return self._call(f"/people/{person_id}.json", args)

    def get_current_person(self) -> ApiResult:
        """Get the person the credentials belong to"""
        return self._call("/me.json")

    def create_person(self, args: Args = None) -> ApiResult:
        """Create a person from a ``{"person": {...}}`` document"""
        return self._call("/people.json", args, HttpMethod.POST)

    def update_person(self, person_id: ResourceId, args: Args = None) -> ApiResult:
        return self._call(f"/people/{person_id}.json", args, HttpMethod.PUT)

    def delete_person(self, person_id: ResourceId) -> ApiResult:
        return self._call(f"/people/{person_id}.json", method=HttpMethod.DELETE)

    def get_project_people(self, project_id: ResourceId) -> ApiResult:
        return self._call(f"/projects/{project_id}/people.json")

    def get_company_people(self, company_id: ResourceId) -> ApiResult:
        return self._call(f"/companies/{company_id}/people.json")

    def add_person_to_project(
        self, project_id: ResourceId, person_id: ResourceId
    ) -> ApiResult:
        return self._call(
            f"/projects/{project_id}/people/{person_id}.json",
            method=HttpMethod.POST,
        )

    def remove_person_from_project(
        self, project_id: ResourceId, person_id: ResourceId
    ) -> ApiResult:
        return self._call(
            f"/projects/{project_id}/people/{person_id}.json",
            method=HttpMethod.DELETE,
        )

    def get_people_available_for_calendar_event(
        self, event_id: ResourceId
    ) -> ApiResult:
        """Not implemented; returns a not-implemented Failure without I/O"""
        return not_implemented("get_people_available_for_calendar_event")

    def get_people_avail_for_message(self, message_id: ResourceId) -> ApiResult:
        """Not implemented; returns a not-implemented Failure without I/O"""
        return not_implemented("get_people_avail_for_message")
