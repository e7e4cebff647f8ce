"""Validation result types.

Validators never raise for bad configuration content. Each defect becomes a
:class:`ValidationError` record appended to a :class:`ValidationResult`,
and the caller decides what to do with the collected records.

Example:
    ```python
    result = validator.validate()
    if not result:
        for error in result:
            print(error.field_name, error.rejected_value, error.error_type.name)
    ```
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Any

from .exceptions import InvalidConfigurationError


class ErrorType(Enum):
    """Kinds of defects reported for a risk score classification."""

    BLANK_LABEL = "blank_label"
    VALUE_OUT_OF_BOUNDS = "value_out_of_bounds"
    INVALID_URL = "invalid_url"
    MIN_GREATER_THAN_MAX = "min_greater_than_max"
    INVALID_PARTITIONING = "invalid_partitioning"


@dataclass(frozen=True)
class ValidationError:
    """A single configuration defect.

    This is a record, not an exception. ``rejected_value`` is always kept
    in string form, so ``ValidationError("x", 5, ...)`` stores ``"5"``.

    Attributes:
        field_name: Name of the offending field (or fields).
        rejected_value: The offending value, stringified.
        error_type: Kind of defect.
    """

    field_name: str
    rejected_value: str
    error_type: Enum

    def __post_init__(self) -> None:
        if not isinstance(self.rejected_value, str):
            object.__setattr__(self, "rejected_value", str(self.rejected_value))

    def __str__(self) -> str:
        return (
            f"{type(self).__name__}{{field_name={self.field_name!r}, "
            f"rejected_value={self.rejected_value!r}, "
            f"error_type={self.error_type.name}}}"
        )

    def to_dict(self) -> dict[str, str]:
        return {
            "field_name": self.field_name,
            "rejected_value": self.rejected_value,
            "error_type": self.error_type.name,
        }


@dataclass(frozen=True)
class RiskScoreClassificationValidationError(ValidationError):
    """Defect found in a risk score classification."""

    error_type: ErrorType


class ValidationResult:
    """Ordered collection of validation errors.

    A fresh instance is created for every ``validate()`` call. Errors keep
    the order in which they were added; an empty result means the validated
    configuration passed every check.
    """

    def __init__(self, errors: list[ValidationError] | None = None):
        self._errors: list[ValidationError] = list(errors or [])

    def add(self, error: ValidationError) -> ValidationResult:
        """Append an error (fluent API).

        Args:
            error: The error record to append

        Returns:
            Self for chaining
        """
        self._errors.append(error)
        return self

    def merge(self, other: ValidationResult) -> ValidationResult:
        """Combine two results into a new one.

        Args:
            other: Result whose errors follow this result's errors

        Returns:
            New ValidationResult; neither input is modified
        """
        return ValidationResult(self._errors + other._errors)

    def is_empty(self) -> bool:
        return not self._errors

    @property
    def valid(self) -> bool:
        return self.is_empty()

    @property
    def errors(self) -> tuple[ValidationError, ...]:
        return tuple(self._errors)

    def __bool__(self) -> bool:
        """Allow 'if result:' usage to check validity."""
        return self.valid

    def __len__(self) -> int:
        return len(self._errors)

    def __iter__(self) -> Iterator[ValidationError]:
        return iter(list(self._errors))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValidationResult):
            return NotImplemented
        return self._errors == other._errors

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"ValidationResult(errors={self._errors!r})"

    def __str__(self) -> str:
        if not self._errors:
            return "ValidationResult{no errors}"
        lines = [f"ValidationResult{{{len(self._errors)} error(s)}}:"]
        lines.extend(f"  {error}" for error in self._errors)
        return "\n".join(lines)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "valid": self.valid,
            "errors": [error.to_dict() for error in self._errors],
        }

    def raise_if_invalid(self, message: str = "Configuration is invalid") -> None:
        """Escalate a non-empty result to an exception.

        Raises:
            InvalidConfigurationError: If any errors were collected.
        """
        if self._errors:
            raise InvalidConfigurationError(
                f"{message}: {len(self._errors)} error(s)",
                context={"errors": [error.to_dict() for error in self._errors]},
            )
