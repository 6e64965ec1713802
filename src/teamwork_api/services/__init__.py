"""Services module initialization"""

from teamwork_api.services.base import BaseService
from teamwork_api.services.projects import ProjectService
from teamwork_api.services.companies import CompanyService
from teamwork_api.services.people import PeopleService
from teamwork_api.services.time_tracking import TimeTrackingService
from teamwork_api.services.workload import WorkloadService
from teamwork_api.services.trashcan import TrashcanService
from teamwork_api.services.account import AccountService
from teamwork_api.services.tasks import TaskService

__all__ = [
    "BaseService",
    "ProjectService",
    "CompanyService",
    "PeopleService",
    "TimeTrackingService",
    "WorkloadService",
    "TrashcanService",
    "AccountService",
    "TaskService",
]
