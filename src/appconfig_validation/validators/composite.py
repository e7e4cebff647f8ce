"""Runs several section validators as one app configuration check.

Example:
    ```python
    validator = ApplicationConfigurationValidator()
    validator.register(
        "risk_score_classification",
        RiskScoreClassificationValidator(classification),
    )
    result = validator.validate()
    result.raise_if_invalid("App config rejected")
    ```
"""

from __future__ import annotations

import logging

from ..exceptions import ConfigurationError
from ..result import ValidationResult
from .base import AppConfigurationValidator

logger = logging.getLogger(__name__)


class ApplicationConfigurationValidator:
    """Collects named section validators and merges their results.

    Sections are validated in registration order, so the merged result
    lists errors section by section. The composite is itself an
    :class:`AppConfigurationValidator` and can be nested.
    """

    def __init__(self, validators: dict[str, AppConfigurationValidator] | None = None) -> None:
        self._validators: dict[str, AppConfigurationValidator] = {}
        for name, validator in (validators or {}).items():
            self.register(name, validator)

    def register(self, name: str, validator: AppConfigurationValidator) -> None:
        """Register a section validator under a unique name.

        Raises:
            ConfigurationError: If the name is taken or the object has no
                ``validate()`` method.
        """
        if name in self._validators:
            raise ConfigurationError(
                f"Validator '{name}' is already registered",
                context={"name": name, "registered": list(self._validators)},
            )
        if not isinstance(validator, AppConfigurationValidator):
            raise ConfigurationError(
                f"Validator '{name}' does not provide validate()",
                context={"name": name, "type": type(validator).__name__},
            )
        self._validators[name] = validator
        logger.debug("Registered validator: %s", name)

    @property
    def names(self) -> list[str]:
        return list(self._validators)

    def validate(self) -> ValidationResult:
        """Validate every registered section.

        Returns:
            Merged ValidationResult of all sections
        """
        result = ValidationResult()
        for name, validator in self._validators.items():
            try:
                section_result = validator.validate()
            except Exception:
                logger.exception("Validator '%s' raised an exception", name)
                raise
            if not section_result:
                logger.warning("Validator '%s' reported %d error(s)", name, len(section_result))
            result = result.merge(section_result)
        return result
