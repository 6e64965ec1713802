"""
Usage Examples for the Teamwork API client
Demonstrates configuration and the request/result flow
"""

import logging

from teamwork_api import (
    ConfigLoader,
    ConfigValidator,
    Failure,
    HttpMethod,
    TeamworkClient,
    TeamworkError,
)


# =============================================================================
# Example 1: Direct Construction
# =============================================================================

def list_active_projects() -> None:
    """List projects using explicit credentials"""
    with TeamworkClient("https://example.teamwork.com", "your-api-key", "X") as tw:
        result = tw.projects.get_projects({"status": "ACTIVE"})

        if isinstance(result, Failure):
            print(f"Request failed: {result.message} {result.data}")
            return

        for project in result.data.get("projects", []):
            print(f"  - {project['name']}")


# =============================================================================
# Example 2: Environment Configuration
# =============================================================================

def env_config_example() -> None:
    """
    Build the client from environment variables

    Set these environment variables before running:

    export TEAMWORK_BASE_URI="https://example.teamwork.com"
    export TEAMWORK_USERNAME="your-api-key"
    export TEAMWORK_PASSWORD="X"
    """
    with TeamworkClient.from_environment() as tw:
        result = tw.account.authenticate()
        print(result.to_dict())


# =============================================================================
# Example 3: Raw Requests and Exceptions
# =============================================================================

def raw_request_example() -> None:
    """Call a route that has no endpoint method and raise on failure"""
    config = ConfigLoader().load(
        config={"base_uri": "https://example.teamwork.com", "username": "your-api-key"},
        env=False,
    )
    with TeamworkClient.from_config(config) as tw:
        request = tw.http.build_request(
            "/projects/42/tasklists.json", {"name": "Launch"}, HttpMethod.POST
        )
        try:
            print(request.fetch().unwrap())
        except TeamworkError as e:
            print(e.get_description())


# =============================================================================
# Example 4: Configuration Validation
# =============================================================================

def validation_example() -> None:
    """Validate configuration before use"""
    result = ConfigValidator().validate({"base_uri": "example.teamwork.com"})

    if not result.valid:
        print("Configuration validation failed:")
        for error in result.errors:
            print(f"  - {error.field}: {error.message}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)

    print("=== Teamwork API Examples ===\n")

    print("4. Configuration Validation:")
    validation_example()
