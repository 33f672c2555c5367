"""Validation dispatch for formforge.

The Dispatcher borrows an immutable FormSet and a ValidatorRegistry and turns
field value snapshots (or a stream of updates) from the rendering layer into
FieldResult / FormResult data.

Per field:
1. Required check, using the field kind's own emptiness rule
2. Text fields: every named validator runs, in declared order, with no
   short-circuiting, so all violated rules are reported in one pass
3. Select fields: options membership only

Validation failures are returned as data. Configuration faults (an
unregistered validator name, a predicate that raises) are raised and abort
the run.
"""

import logging
from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from formforge.errors import ValidatorCrashed
from formforge.schema.types import Field, FormSet, SelectField
from formforge.validation.registry import ValidatorRegistry
from formforge.validation.types import (
    NOT_AN_OPTION,
    FieldResult,
    FieldUpdate,
    FormResult,
    Outcome,
)

logger = logging.getLogger(__name__)


def _as_text(value: Any) -> str:
    """Normalize a raw value from the rendering layer to a string."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return str(value)


class Dispatcher:
    """Runs field validation for the forms of a FormSet.

    The dispatcher keeps no per-run state, so one instance may serve any
    number of concurrent validate_* calls.

    Args:
        form_set: The loaded schema (never mutated)
        registry: Validator names → predicates
        strict: If true, check at construction that every validator name the
            schema references is registered
    """

    def __init__(
        self,
        form_set: FormSet,
        registry: ValidatorRegistry,
        strict: bool = False,
    ):
        self.form_set = form_set
        self.registry = registry
        if strict:
            self.check_wiring()

    def check_wiring(self) -> None:
        """Resolve every validator name referenced by the schema.

        Raises:
            UnregisteredValidator: For the first name with no registration
        """
        for name in self.form_set.validator_names():
            self.registry.resolve(name)

    # -------------------------------------------------------------------------
    # Single field
    # -------------------------------------------------------------------------

    def check_field(self, field: Field, value: Any) -> FieldResult:
        """Validate one value against a field definition."""
        text = _as_text(value)
        satisfies_required = field.satisfies_required(text)

        failed: list[str] = []
        reasons: dict[str, str] = {}

        if isinstance(field, SelectField):
            # Named validations do not apply to select fields.
            if text and not field.is_option(text) and not field.required:
                failed.append(NOT_AN_OPTION)
                reasons[NOT_AN_OPTION] = f"'{text}' is not a valid option for {field.name}"
        else:
            for name in field.rule_names():
                predicate = self.registry.resolve(name)
                outcome = self._apply(name, predicate, text, field)
                if not outcome.passed:
                    failed.append(name)
                    reasons[name] = outcome.reason

        return FieldResult(
            field_name=field.name,
            satisfies_required=satisfies_required,
            failed_validators=frozenset(failed),
            reasons=reasons,
        )

    def _apply(self, name: str, predicate, value: str, field: Field) -> Outcome:
        try:
            outcome = predicate(value, field)
        except Exception as e:
            raise ValidatorCrashed(name, field.name, e) from e
        if not isinstance(outcome, Outcome):
            raise ValidatorCrashed(
                name,
                field.name,
                TypeError(f"expected Outcome, got {type(outcome).__name__}"),
            )
        return outcome

    def validate_field(self, form_name: str, field_name: str, value: Any) -> FieldResult:
        """Validate a single field of a form.

        Raises:
            FormNotFound / FieldNotFound: Unknown form or field
            UnregisteredValidator: A validator name has no registration
        """
        return self.check_field(self.form_set.field(form_name, field_name), value)

    # -------------------------------------------------------------------------
    # Whole forms
    # -------------------------------------------------------------------------

    def validate_form(self, form_name: str, values: Mapping[str, Any]) -> FormResult:
        """Validate every field of a form against a value snapshot.

        Fields missing from ``values`` are validated as empty strings.
        Keys that name no field of the form are ignored.
        """
        form = self.form_set.form(form_name)

        unknown = set(values) - set(form.field_names())
        if unknown:
            logger.debug(
                "Ignoring values for unknown fields of '%s': %s",
                form_name,
                ", ".join(sorted(unknown)),
            )

        results = tuple(
            self.check_field(field, values.get(field.name, "")) for field in form.fields
        )
        result = FormResult(form_name=form.name, fields=results)
        if not result.valid:
            logger.debug(
                "Form '%s' invalid: %s", form_name, ", ".join(result.invalid_fields)
            )
        return result

    def validate_all(
        self, values_by_form: Mapping[str, Mapping[str, Any]]
    ) -> dict[str, FormResult]:
        """Validate every form of the set, in set order.

        Forms absent from ``values_by_form`` are validated with no values.
        """
        for name in values_by_form:
            if name not in self.form_set.form_names():
                logger.warning("Ignoring values for unknown form '%s'", name)
        return {
            form.name: self.validate_form(form.name, values_by_form.get(form.name, {}))
            for form in self.form_set.forms
        }

    def dispatch(
        self, form_name: str, updates: Iterable[FieldUpdate]
    ) -> Iterator[FieldResult]:
        """Validate a stream of field updates, yielding one result per update.

        The form is looked up immediately, so an unknown form name raises
        FormNotFound here rather than on the first update.
        """
        form = self.form_set.form(form_name)

        def results() -> Iterator[FieldResult]:
            for update in updates:
                yield self.check_field(form.field(update.field_name), update.value)

        return results()
