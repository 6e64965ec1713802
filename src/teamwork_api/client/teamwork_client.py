"""
Teamwork API client

Main entry point: wires one HttpClient to the endpoint services.
"""

from pathlib import Path
from typing import Optional, Union

import requests

from teamwork_api.client.http_client import HttpClient
from teamwork_api.config.config_loader import ConfigLoader
from teamwork_api.config.teamwork_config import ConfigDefaults, TeamworkConfig
from teamwork_api.services import (
    AccountService,
    CompanyService,
    PeopleService,
    ProjectService,
    TaskService,
    TimeTrackingService,
    TrashcanService,
    WorkloadService,
)


class TeamworkClient:
    """
    Client for the Teamwork Projects API

    Example:
        >>> with TeamworkClient("https://example.teamwork.com", "api-key", "X") as tw:
        ...     result = tw.projects.get_projects({"status": "ACTIVE"})
        ...     if result.ok:
        ...         print(result.data["projects"])
        ...     else:
        ...         print(result.message, result.data)
    """

    def __init__(
        self,
        base_uri: str,
        username: str,
        password: str,
        *,
        timeout: float = ConfigDefaults.TIMEOUT,
        content_type: str = ConfigDefaults.CONTENT_TYPE,
        session: Optional[requests.Session] = None,
    ) -> None:
        config = TeamworkConfig(
            base_uri=base_uri,
            username=username,
            password=password,
            timeout=timeout,
            content_type=content_type,
        )
        self._setup(HttpClient(config, session=session))

    @classmethod
    def from_config(
        cls,
        config: TeamworkConfig,
        session: Optional[requests.Session] = None,
    ) -> "TeamworkClient":
        """Create a client from a resolved TeamworkConfig"""
        client = cls.__new__(cls)
        client._setup(HttpClient(config, session=session))
        return client

    @classmethod
    def from_environment(
        cls,
        file: Optional[Union[str, Path]] = None,
        strict: bool = True,
    ) -> "TeamworkClient":
        """
        Create a client from TEAMWORK_* environment variables

        Args:
            file: Optional JSON config file; environment values override it
            strict: Validate the merged configuration
        """
        config = ConfigLoader().load(file=file, env=True, strict=strict)
        return cls.from_config(config)

    def _setup(self, http: HttpClient) -> None:
        self.http = http
        self.projects = ProjectService(http)
        self.companies = CompanyService(http)
        self.people = PeopleService(http)
        self.time = TimeTrackingService(http)
        self.workload = WorkloadService(http)
        self.trashcan = TrashcanService(http)
        self.account = AccountService(http)
        self.tasks = TaskService(http)

    @property
    def config(self) -> TeamworkConfig:
        return self.http.config

    def close(self) -> None:
        """Close the underlying HTTP session"""
        self.http.close()

    def __enter__(self) -> "TeamworkClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
