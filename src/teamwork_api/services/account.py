"""Account, authentication, timezone and activity endpoints"""

from teamwork_api.client.result import ApiResult
from teamwork_api.services.base import Args, BaseService, ResourceId


class AccountService(BaseService):

    def get_account(self) -> ApiResult:
        return self._call("/account.json")

    def authenticate(self) -> ApiResult:
        """Check the credentials and return the account they belong to"""
        return self._call("/authenticate.json")

    def get_timezones(self) -> ApiResult:
        return self._call("/timezones.json")

    def get_latest_activity(self, args: Args = None) -> ApiResult:
        return self._call("/latestActivity.json", args)

    def get_project_latest_activity(
        self, project_id: ResourceId, args: Args = None
    ) -> ApiResult:
        return self._call(f"/projects/{project_id}/latestActivity.json", args)
