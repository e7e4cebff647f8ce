"""Pytest configuration and fixtures for appconfig_validation tests."""

from pathlib import Path

import pytest
import yaml

from appconfig_validation.model import RiskScoreClass, RiskScoreClassification

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def sample_classification_dict():
    """Sample classification mapping as loaded from a YAML app config."""
    with open(FIXTURES_DIR / "risk-score-classification.yaml", encoding="utf-8") as f:
        return yaml.safe_load(f)


@pytest.fixture
def sample_classification(sample_classification_dict):
    """Valid two-class classification built from the YAML sample."""
    return RiskScoreClassification.from_dict(sample_classification_dict)


@pytest.fixture
def make_class():
    """Factory for risk score classes with valid defaults."""

    def _make(label="LOW", min_risk_level=0, max_risk_level=255, url=""):
        return RiskScoreClass(label, min_risk_level, max_risk_level, url)

    return _make
