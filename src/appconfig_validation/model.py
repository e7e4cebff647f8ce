"""Risk score classification value objects.

A classification partitions the risk score range into labeled classes. The
objects here are read-only; they are handed to validators as-is and are
never corrected or normalized.

Example:
    ```python
    from appconfig_validation.model import RiskScoreClass, RiskScoreClassification

    classification = RiskScoreClassification([
        RiskScoreClass("LOW", 0, 127, "https://www.example.com/low"),
        RiskScoreClass("HIGH", 128, 255, "https://www.example.com/high"),
    ])

    data = classification.to_dict()
    restored = RiskScoreClassification.from_dict(data)
    assert restored == classification
    ```
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any

from .exceptions import SerializationError


def _lookup(data: Mapping[str, Any], *keys: str) -> Any:
    """Return the value of the first present key, or None."""
    for key in keys:
        if key in data:
            return data[key]
    return None


def _require_int(data: Mapping[str, Any], snake_key: str, camel_key: str) -> int:
    value = _lookup(data, snake_key, camel_key)
    if value is None:
        raise SerializationError(
            f"Missing required key '{snake_key}'",
            context={"key": snake_key, "type": "RiskScoreClass"},
        )
    # bool is an int subclass, but True/False is never a risk level
    if isinstance(value, bool) or not isinstance(value, int):
        raise SerializationError(
            f"Key '{snake_key}' must be an integer",
            context={"key": snake_key, "value": repr(value), "type": "RiskScoreClass"},
        )
    return value


@dataclass(frozen=True)
class RiskScoreClass:
    """One labeled partition of the risk score range.

    Attributes:
        label: Human-readable class name, e.g. ``"LOW"``.
        min_risk_level: Lowest risk score covered by the class (inclusive).
        max_risk_level: Highest risk score covered by the class (inclusive).
        url: Optional advisory URL; blank when absent.
    """

    label: str
    min_risk_level: int
    max_risk_level: int
    url: str = ""

    @property
    def width(self) -> int:
        """Number of risk score values covered, ``max - min + 1``.

        Not clamped: a class with ``min > max`` has a width of zero or less.
        """
        return self.max_risk_level - self.min_risk_level + 1

    def to_dict(self) -> dict[str, Any]:
        return {
            "label": self.label,
            "min_risk_level": self.min_risk_level,
            "max_risk_level": self.max_risk_level,
            "url": self.url,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> RiskScoreClass:
        """Create a class from its mapping form.

        Both ``min_risk_level``/``max_risk_level`` and the camelCase
        ``minRiskLevel``/``maxRiskLevel`` keys are accepted.

        Raises:
            SerializationError: If a required key is missing or a risk level
                is not an integer.
        """
        if not isinstance(data, Mapping):
            raise SerializationError(
                "RiskScoreClass data must be a mapping",
                context={"type": type(data).__name__},
            )
        label = data.get("label")
        if label is None:
            raise SerializationError(
                "Missing required key 'label'",
                context={"key": "label", "type": "RiskScoreClass"},
            )
        url = data.get("url")
        return cls(
            label=str(label),
            min_risk_level=_require_int(data, "min_risk_level", "minRiskLevel"),
            max_risk_level=_require_int(data, "max_risk_level", "maxRiskLevel"),
            url="" if url is None else str(url),
        )


@dataclass(frozen=True)
class RiskScoreClassification:
    """Ordered collection of risk score classes.

    Order only affects iteration (and therefore error ordering), not
    validity.
    """

    risk_score_classes: tuple[RiskScoreClass, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not isinstance(self.risk_score_classes, tuple):
            object.__setattr__(self, "risk_score_classes", tuple(self.risk_score_classes))

    def __len__(self) -> int:
        return len(self.risk_score_classes)

    def __iter__(self) -> Iterator[RiskScoreClass]:
        return iter(self.risk_score_classes)

    @classmethod
    def of(cls, classes: Iterable[RiskScoreClass]) -> RiskScoreClassification:
        return cls(tuple(classes))

    def to_dict(self) -> dict[str, Any]:
        return {"risk_score_classes": [c.to_dict() for c in self.risk_score_classes]}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> RiskScoreClassification:
        """Create a classification from its mapping form.

        A missing ``risk_score_classes`` (or ``riskScoreClasses``) key yields
        an empty classification.

        Raises:
            SerializationError: If the classes entry is not a list or one of
                its items is malformed.
        """
        if not isinstance(data, Mapping):
            raise SerializationError(
                "RiskScoreClassification data must be a mapping",
                context={"type": type(data).__name__},
            )
        classes = _lookup(data, "risk_score_classes", "riskScoreClasses")
        if classes is None:
            return cls()
        if not isinstance(classes, list):
            raise SerializationError(
                "'risk_score_classes' must be a list",
                context={"key": "risk_score_classes", "type": type(classes).__name__},
            )
        return cls(tuple(RiskScoreClass.from_dict(item) for item in classes))
