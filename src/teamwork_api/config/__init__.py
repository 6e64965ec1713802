"""
Configuration module
"""

from teamwork_api.config.teamwork_config import (
    TeamworkConfig,
    ENV_VAR_MAPPING,
    ConfigDefaults,
)
from teamwork_api.config.config_loader import ConfigLoader
from teamwork_api.config.config_validator import (
    ConfigValidator,
    ValidationResult,
    ValidationErrorDetail,
)

__all__ = [
    "TeamworkConfig",
    "ENV_VAR_MAPPING",
    "ConfigDefaults",
    "ConfigLoader",
    "ConfigValidator",
    "ValidationResult",
    "ValidationErrorDetail",
]
