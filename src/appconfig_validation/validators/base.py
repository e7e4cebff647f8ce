"""Contract shared by all app configuration section validators."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ..result import ValidationResult


@runtime_checkable
class AppConfigurationValidator(Protocol):
    """Anything that validates one app configuration section.

    Implementations hold the section they check and return a freshly built
    :class:`~appconfig_validation.result.ValidationResult` from every
    ``validate()`` call. They must not raise for defective content; defects
    are reported as result entries.

    Example:
        ```python
        class LabelValidator:
            def __init__(self, labels: list[str]):
                self._labels = labels

            def validate(self) -> ValidationResult:
                result = ValidationResult()
                for label in self._labels:
                    if not label.strip():
                        result.add(ValidationError("label", label, ErrorType.BLANK_LABEL))
                return result

        isinstance(LabelValidator([]), AppConfigurationValidator)
        # True
        ```
    """

    def validate(self) -> ValidationResult: ...
