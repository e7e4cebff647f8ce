"""Exception hierarchy for the app configuration validation package.

Configuration defects are never raised by validators; they are collected as
records in a :class:`~appconfig_validation.result.ValidationResult`. The
exceptions here cover misuse of the framework and the explicit
``raise_if_invalid()`` escalation path.

Example:
    ```python
    from appconfig_validation.exceptions import AppConfigError

    try:
        result.raise_if_invalid()
    except AppConfigError as e:
        logger.error("Rejected app config: %s", e)
        for error in e.context.get("errors", []):
            logger.error("  %s", error)
    ```
"""

from typing import Any, Dict


class AppConfigError(Exception):
    """Base exception for all appconfig_validation errors.

    Attributes:
        context: Dictionary containing contextual information about the error
        details: Alias for context

    Args:
        message: Human-readable error message
        context: Optional dictionary with error context
        details: Alternative to context (both are supported)
    """

    def __init__(
        self,
        message: str,
        context: Dict[str, Any] | None = None,
        details: Dict[str, Any] | None = None,
    ):
        super().__init__(message)
        # Details takes precedence if both are provided
        self.context = details or context or {}
        self.details = self.context


class ConfigurationError(AppConfigError):
    """Raised when the validation framework itself is set up incorrectly.

    Example:
        ```python
        raise ConfigurationError(
            "Validator already registered",
            context={"name": "risk_score_classification"}
        )
        ```
    """

    pass


class SerializationError(AppConfigError):
    """Raised when a mapping cannot be turned into a configuration object.

    Example:
        ```python
        raise SerializationError(
            "Missing required key",
            context={"key": "label", "type": "RiskScoreClass"}
        )
        ```
    """

    pass


class InvalidConfigurationError(AppConfigError):
    """Raised when a caller escalates a non-empty validation result.

    The serialized validation errors are available as ``context["errors"]``.
    """

    pass


__all__ = [
    "AppConfigError",
    "ConfigurationError",
    "SerializationError",
    "InvalidConfigurationError",
]
