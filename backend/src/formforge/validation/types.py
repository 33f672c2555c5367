"""Core types for the formforge validation system.

- Outcome: what a single predicate returns (Pass or Fail with a reason)
- FieldUpdate: one value change reported by the rendering layer
- FieldResult: every check applied to one field value
- FormResult: the aggregate over a form's fields
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from formforge.schema.types import Field


@dataclass(frozen=True)
class Outcome:
    """Result of applying one validator to one value.

    Use the ``Pass`` constant and ``Fail(reason)`` helper rather than
    constructing this directly.
    """

    passed: bool
    reason: str = ""

    def __bool__(self) -> bool:
        return self.passed


Pass = Outcome(passed=True)


def Fail(reason: str) -> Outcome:
    return Outcome(passed=False, reason=reason)


# Predicate signature: (value, field) -> Outcome
Predicate = Callable[[str, Field], Outcome]


# Reserved failure name for a non-empty select value outside its options.
NOT_AN_OPTION = "not-an-option"


@dataclass(frozen=True)
class FieldUpdate:
    """A field value change coming from the rendering layer."""

    field_name: str
    value: str


@dataclass(frozen=True)
class FieldResult:
    """Validation result for a single field.

    Attributes:
        field_name: The field this result describes
        satisfies_required: False when a required field fails its kind's emptiness
            rule (blank text, or a select value outside its options)
        failed_validators: Names of the validators that failed
        reasons: Failure reason per failed validator name
    """

    field_name: str
    satisfies_required: bool = True
    failed_validators: frozenset[str] = frozenset()
    reasons: dict[str, str] = field(default_factory=dict, compare=False, hash=False)

    @property
    def valid(self) -> bool:
        return self.satisfies_required and not self.failed_validators

    def to_dict(self) -> dict[str, Any]:
        return {
            "field": self.field_name,
            "valid": self.valid,
            "satisfiesRequired": self.satisfies_required,
            "failedValidators": sorted(self.failed_validators),
            "reasons": dict(self.reasons),
        }


@dataclass(frozen=True)
class FormResult:
    """Aggregate validation result for a form.

    A form is valid iff every one of its fields is valid.
    """

    form_name: str
    fields: tuple[FieldResult, ...] = ()

    @property
    def valid(self) -> bool:
        return all(r.valid for r in self.fields)

    @property
    def invalid_fields(self) -> list[str]:
        return [r.field_name for r in self.fields if not r.valid]

    def get(self, field_name: str) -> FieldResult | None:
        for r in self.fields:
            if r.field_name == field_name:
                return r
        return None

    def to_dict(self) -> dict[str, Any]:
        return {
            "form": self.form_name,
            "valid": self.valid,
            "invalidFields": self.invalid_fields,
            "fields": [r.to_dict() for r in self.fields],
        }
