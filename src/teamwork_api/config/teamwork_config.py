"""
Teamwork API Configuration Types
Type-safe configuration objects for the client
"""

from pydantic import BaseModel, Field


class ConfigDefaults:
    """Default configuration values"""
    TIMEOUT = 20  # seconds
    CONTENT_TYPE = "application/json"
    ENABLE_AUDIT_LOG = False


# Environment variable mapping
ENV_VAR_MAPPING = {
    "TEAMWORK_BASE_URI": "base_uri",
    "TEAMWORK_USERNAME": "username",
    "TEAMWORK_PASSWORD": "password",
    "TEAMWORK_TIMEOUT": "timeout",
    "TEAMWORK_CONTENT_TYPE": "content_type",
    "TEAMWORK_ENABLE_AUDIT_LOG": "enable_audit_log",
}


class TeamworkConfig(BaseModel):
    """
    Connection configuration for the Teamwork API

    Construction performs no validation of the values themselves; run the
    ConfigValidator (or ConfigLoader.resolve with strict=True) for that.
    """

    base_uri: str = Field(
        default="",
        description="Site root, e.g. https://example.teamwork.com",
    )
    username: str = Field(
        default="",
        description="Basic auth username (the API key for token auth)",
    )
    password: str = Field(
        default="",
        description="Basic auth password",
    )
    timeout: float = Field(
        default=ConfigDefaults.TIMEOUT,
        description="Request timeout in seconds",
    )
    content_type: str = Field(
        default=ConfigDefaults.CONTENT_TYPE,
        description="Content-Type header sent with every request",
    )
    enable_audit_log: bool = Field(
        default=ConfigDefaults.ENABLE_AUDIT_LOG,
        description="Emit audit entries to the registered callback",
    )

    model_config = {
        "frozen": True,
    }
