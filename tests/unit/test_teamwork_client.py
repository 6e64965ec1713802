"""
TeamworkClient Unit Tests
"""

import pytest

from teamwork_api.client.teamwork_client import TeamworkClient
from teamwork_api.config.teamwork_config import TeamworkConfig
from teamwork_api.exceptions import ValidationError
from teamwork_api.services import ProjectService, TaskService


BASE_URI = "https://example.teamwork.com"


class TestTeamworkClient:

    def test_construct_from_credentials(self):
        client = TeamworkClient(BASE_URI, "u", "p")
        assert client.config.base_uri == BASE_URI
        assert client.config.username == "u"
        assert client.config.password == "p"
        assert client.config.timeout == 20
        client.close()

    def test_services_share_http_client(self, teamwork: TeamworkClient):
        assert isinstance(teamwork.projects, ProjectService)
        assert isinstance(teamwork.tasks, TaskService)
        assert teamwork.projects._client is teamwork.http
        assert teamwork.people._client is teamwork.http

    def test_from_config(self, session, adapter):
        config = TeamworkConfig(base_uri=BASE_URI, username="u", password="p", timeout=7)
        adapter.queue(200, {"account": {}})

        client = TeamworkClient.from_config(config, session=session)
        client.account.get_account()

        assert client.config is config
        assert adapter.timeouts == [7]

    def test_from_environment(self, monkeypatch):
        monkeypatch.setenv("TEAMWORK_BASE_URI", BASE_URI)
        monkeypatch.setenv("TEAMWORK_USERNAME", "env-key")
        monkeypatch.setenv("TEAMWORK_PASSWORD", "X")

        with TeamworkClient.from_environment() as client:
            assert client.config.base_uri == BASE_URI
            assert client.config.username == "env-key"

    def test_from_environment_strict(self, monkeypatch):
        monkeypatch.delenv("TEAMWORK_BASE_URI", raising=False)
        monkeypatch.delenv("TEAMWORK_USERNAME", raising=False)

        with pytest.raises(ValidationError):
            TeamworkClient.from_environment()

    def test_context_manager_closes_session(self, session, adapter):
        with TeamworkClient(BASE_URI, "u", "p", session=session) as client:
            adapter.queue(200, {"projects": []})
            assert client.projects.get_projects().ok
