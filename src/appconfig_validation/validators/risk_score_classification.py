"""Validation of the risk score classification section.

The classification splits the risk score range ``[0, RISK_SCORE_VALUE_RANGE - 1]``
into labeled classes. Every class is checked on its own (label, bounds, URL,
ordering) and the classification as a whole is checked for covering exactly
``RISK_SCORE_VALUE_RANGE`` values.

The coverage check only sums the class widths. Overlaps and gaps that cancel
each other out are not detected.
"""

from __future__ import annotations

import logging
import re
import unicodedata
from urllib.parse import urlsplit

from ..model import RiskScoreClassification
from ..result import ErrorType, RiskScoreClassificationValidationError, ValidationResult

logger = logging.getLogger(__name__)

#: Number of possible total risk score values, ``0 ... RISK_SCORE_VALUE_RANGE - 1``.
RISK_SCORE_VALUE_RANGE = 256

# Protocols a java.net.URL accepts out of the box
SUPPORTED_URL_SCHEMES = frozenset({"http", "https", "ftp", "file", "jar", "mailto"})

_SCHEME_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*$")

# Java's Character.isWhitespace: separators other than the non-breaking ones,
# plus these control characters
_CONTROL_WHITESPACE = frozenset("\t\n\x0b\x0c\r\x1c\x1d\x1e\x1f")
_NON_BREAKING_SPACES = frozenset("\u00a0\u2007\u202f")
_SEPARATOR_CATEGORIES = frozenset({"Zs", "Zl", "Zp"})


def _is_whitespace(char: str) -> bool:
    if char in _CONTROL_WHITESPACE:
        return True
    if char in _NON_BREAKING_SPACES:
        return False
    return unicodedata.category(char) in _SEPARATOR_CATEGORIES


def is_blank(value: str) -> bool:
    """Return True if ``value`` is empty or whitespace only.

    Non-breaking spaces (U+00A0, U+2007, U+202F) count as content, so
    ``"\\u00a0"`` is not blank.
    """
    return all(_is_whitespace(char) for char in value)


def _port_text(netloc: str) -> str:
    host_port = netloc.rpartition("@")[2]
    if host_port.startswith("["):
        host_port = host_port.partition("]")[2]
    return host_port.partition(":")[2]


def is_well_formed_url(url: str) -> bool:
    """Check whether ``url`` has a supported scheme and a parseable authority.

    Any port must be all digits (its size is not limited) and ``jar`` URLs
    must contain the ``!/`` entry separator.

    Args:
        url: Candidate URL

    Returns:
        True if the URL is syntactically well formed
    """
    url = url.strip()
    try:
        parts = urlsplit(url)
    except ValueError:
        return False
    if not parts.scheme or not _SCHEME_PATTERN.match(parts.scheme):
        return False
    scheme = parts.scheme.lower()
    if scheme not in SUPPORTED_URL_SCHEMES:
        return False
    port = _port_text(parts.netloc)
    if port and not (port.isascii() and port.isdigit()):
        return False
    if scheme == "jar" and "!/" not in url:
        return False
    return True


class RiskScoreClassificationValidator:
    """Validates the values of a :class:`RiskScoreClassification`.

    The validator is stateless apart from the classification it was built
    with, so one instance can be validated repeatedly or from several
    threads.

    Example:
        ```python
        validator = RiskScoreClassificationValidator(classification)
        result = validator.validate()
        if not result:
            print(result)
        ```
    """

    def __init__(self, risk_score_classification: RiskScoreClassification):
        self._classification = risk_score_classification

    @property
    def classification(self) -> RiskScoreClassification:
        return self._classification

    def validate(self) -> ValidationResult:
        """Run all checks and collect every defect found.

        Per-class errors come first, in class order, followed by at most one
        partitioning error.

        Returns:
            A new ValidationResult; empty if the classification is valid
        """
        errors = ValidationResult()

        self._validate_values(errors)
        self._validate_value_range_coverage(errors)

        logger.debug(
            "Validated %d risk score classes: %d error(s)",
            len(self._classification),
            len(errors),
        )
        return errors

    def _validate_values(self, errors: ValidationResult) -> None:
        for risk_score_class in self._classification:
            min_risk_level = risk_score_class.min_risk_level
            max_risk_level = risk_score_class.max_risk_level

            self._validate_label(risk_score_class.label, errors)
            self._validate_risk_score_value_bounds(min_risk_level, errors)
            self._validate_risk_score_value_bounds(max_risk_level, errors)
            self._validate_url(risk_score_class.url, errors)

            if min_risk_level > max_risk_level:
                errors.add(
                    RiskScoreClassificationValidationError(
                        "minRiskLevel, maxRiskLevel",
                        f"{min_risk_level}, {max_risk_level}",
                        ErrorType.MIN_GREATER_THAN_MAX,
                    )
                )

    @staticmethod
    def _validate_label(label: str, errors: ValidationResult) -> None:
        if is_blank(label):
            errors.add(RiskScoreClassificationValidationError("label", label, ErrorType.BLANK_LABEL))

    @staticmethod
    def _validate_risk_score_value_bounds(value: int, errors: ValidationResult) -> None:
        if value < 0 or value > RISK_SCORE_VALUE_RANGE - 1:
            errors.add(
                RiskScoreClassificationValidationError(
                    "minRiskLevel/maxRiskLevel", value, ErrorType.VALUE_OUT_OF_BOUNDS
                )
            )

    @staticmethod
    def _validate_url(url: str, errors: ValidationResult) -> None:
        # The URL is optional
        if not is_blank(url) and not is_well_formed_url(url):
            errors.add(RiskScoreClassificationValidationError("url", url, ErrorType.INVALID_URL))

    def _validate_value_range_coverage(self, errors: ValidationResult) -> None:
        partition_sum = sum(risk_score_class.width for risk_score_class in self._classification)

        if partition_sum != RISK_SCORE_VALUE_RANGE:
            errors.add(
                RiskScoreClassificationValidationError(
                    "covered value range", partition_sum, ErrorType.INVALID_PARTITIONING
                )
            )
