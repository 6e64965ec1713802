"""
Configuration Validator
Opt-in strict checks for Teamwork client configuration
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from teamwork_api.exceptions import ValidationError


MAX_TIMEOUT = 300  # seconds


@dataclass
class ValidationErrorDetail:
    """Validation error detail"""
    field: str
    message: str
    value: Optional[Any] = None


@dataclass
class ValidationResult:
    """Validation result"""
    valid: bool
    errors: List[ValidationErrorDetail] = field(default_factory=list)


class ConfigValidator:
    """
    ConfigValidator class
    Validates a configuration dictionary with clear error messages
    """

    def __init__(self) -> None:
        self._errors: List[ValidationErrorDetail] = []

    def validate(self, config: Dict[str, Any]) -> ValidationResult:
        """
        Validate the entire configuration dictionary

        Args:
            config: Configuration dictionary to validate

        Returns:
            ValidationResult with any errors
        """
        self._errors = []

        self._validate_required(config)
        self._validate_formats(config)
        self._validate_ranges(config)

        return ValidationResult(
            valid=len(self._errors) == 0,
            errors=self._errors.copy()
        )

    def validate_or_raise(self, config: Dict[str, Any]) -> None:
        """
        Validate and raise if invalid

        Raises:
            ValidationError: If configuration is invalid
        """
        result = self.validate(config)
        if not result.valid:
            error_messages = "; ".join(
                f"{e.field}: {e.message}" for e in result.errors
            )
            raise ValidationError(
                f"Configuration validation failed: {error_messages}",
                field=result.errors[0].field,
            )

    def _validate_required(self, config: Dict[str, Any]) -> None:
        """Validate required fields are present and non-empty"""
        for field_name in ("base_uri", "username"):
            value = config.get(field_name)
            if value is None:
                self._errors.append(ValidationErrorDetail(
                    field=field_name,
                    message=f"{field_name} is required"
                ))
            elif isinstance(value, str) and value.strip() == "":
                self._errors.append(ValidationErrorDetail(
                    field=field_name,
                    message=f"{field_name} cannot be empty",
                    value=value
                ))

    def _validate_formats(self, config: Dict[str, Any]) -> None:
        """Validate field formats"""
        base_uri = config.get("base_uri")
        if isinstance(base_uri, str) and base_uri.strip() != "":
            if not base_uri.startswith(("http://", "https://")):
                self._errors.append(ValidationErrorDetail(
                    field="base_uri",
                    message="base_uri must be a valid HTTP/HTTPS URL",
                    value=base_uri
                ))

        content_type = config.get("content_type")
        if content_type is not None:
            if not isinstance(content_type, str) or content_type.strip() == "":
                self._errors.append(ValidationErrorDetail(
                    field="content_type",
                    message="content_type must be a non-empty string",
                    value=content_type
                ))

    def _validate_ranges(self, config: Dict[str, Any]) -> None:
        """Validate numeric ranges"""
        timeout = config.get("timeout")
        if timeout is not None:
            if (
                isinstance(timeout, bool)
                or not isinstance(timeout, (int, float))
                or timeout <= 0
            ):
                self._errors.append(ValidationErrorDetail(
                    field="timeout",
                    message="timeout must be a positive number (seconds)",
                    value=timeout
                ))
            elif timeout > MAX_TIMEOUT:
                self._errors.append(ValidationErrorDetail(
                    field="timeout",
                    message=f"timeout should not exceed {MAX_TIMEOUT}s",
                    value=timeout
                ))
