"""Structural validation of app configuration sections.

This package checks already-parsed app configuration objects and reports
every defect it finds in one pass:

- **Model**: Read-only ``RiskScoreClass`` / ``RiskScoreClassification`` value objects
- **Validators**: ``RiskScoreClassificationValidator`` and a composite for many sections
- **Results**: ``ValidationResult`` collecting typed ``ValidationError`` records
- **Exceptions**: Context-carrying errors for framework misuse and escalation

Example:
    ```python
    from appconfig_validation import (
        RiskScoreClass,
        RiskScoreClassification,
        RiskScoreClassificationValidator,
    )

    classification = RiskScoreClassification([RiskScoreClass("LOW", 0, 255)])
    result = RiskScoreClassificationValidator(classification).validate()
    assert result.is_empty()
    ```
"""

from appconfig_validation.exceptions import (
    AppConfigError,
    ConfigurationError,
    InvalidConfigurationError,
    SerializationError,
)
from appconfig_validation.model import RiskScoreClass, RiskScoreClassification
from appconfig_validation.result import (
    ErrorType,
    RiskScoreClassificationValidationError,
    ValidationError,
    ValidationResult,
)
from appconfig_validation.validators import (
    RISK_SCORE_VALUE_RANGE,
    AppConfigurationValidator,
    ApplicationConfigurationValidator,
    RiskScoreClassificationValidator,
    is_blank,
    is_well_formed_url,
)

__version__ = "1.0.0"

__all__ = [
    # Version
    "__version__",
    # Exceptions
    "AppConfigError",
    "ConfigurationError",
    "InvalidConfigurationError",
    "SerializationError",
    # Model
    "RiskScoreClass",
    "RiskScoreClassification",
    # Results
    "ErrorType",
    "RiskScoreClassificationValidationError",
    "ValidationError",
    "ValidationResult",
    # Validators
    "RISK_SCORE_VALUE_RANGE",
    "AppConfigurationValidator",
    "ApplicationConfigurationValidator",
    "RiskScoreClassificationValidator",
    "is_blank",
    "is_well_formed_url",
]
