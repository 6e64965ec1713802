"""Company endpoints"""

from teamwork_api.client.http_client import HttpMethod
from teamwork_api.client.result import ApiResult
from teamwork_api.services.base import Args, BaseService, ResourceId


class CompanyService(BaseService):
    """Companies on the site and per project"""

    def get_companies(self, args: Args = None) -> ApiResult:
        return self._call("/companies.json", args)

    def get_company(self, company_id: ResourceId) -> ApiResult:
        return self._call(f"/companies/{company_id}.json")

    def create_company(self, args: Args = None) -> ApiResult:
        """Create a company from a ``{"company": {...}}`` document"""
        return self._call("/companies.json", args, HttpMethod.POST)

    def update_company(self, company_id: ResourceId, args: Args = None) -> ApiResult:
        return self._call(f"/companies/{company_id}.json", args, HttpMethod.PUT)

    def delete_company(self, company_id: ResourceId) -> ApiResult:
        return self._call(f"/companies/{company_id}.json", method=HttpMethod.DELETE)

    def get_project_companies(self, project_id: ResourceId) -> ApiResult:
        return self._call(f"/projects/{project_id}/companies.json")
