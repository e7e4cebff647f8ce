"""Section validators for the app configuration."""

from .base import AppConfigurationValidator
from .composite import ApplicationConfigurationValidator
from .risk_score_classification import (
    RISK_SCORE_VALUE_RANGE,
    RiskScoreClassificationValidator,
    is_blank,
    is_well_formed_url,
)

__all__ = [
    "AppConfigurationValidator",
    "ApplicationConfigurationValidator",
    "RISK_SCORE_VALUE_RANGE",
    "RiskScoreClassificationValidator",
    "is_blank",
    "is_well_formed_url",
]
