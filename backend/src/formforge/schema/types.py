"""Immutable types for form schemas.

A FormSet holds ordered Forms; a Form holds ordered Fields. Every field kind
is a frozen dataclass carrying its own emptiness rule (satisfies_required)
and the validator names that apply to it (rule_names). All collections are
tuples so a loaded FormSet can be shared across threads without locking.
"""

from dataclasses import dataclass
from typing import Any

from formforge.errors import FieldNotFound, FormNotFound


@dataclass(frozen=True)
class Field:
    """Base for all field kinds."""

    name: str
    required: bool = False

    kind = ""

    def satisfies_required(self, value: str) -> bool:
        """True when the required constraint holds for this value."""
        raise NotImplementedError("Field kinds must implement satisfies_required()")

    def rule_names(self) -> tuple[str, ...]:
        """Names of the registry validators that apply to this field."""
        return ()

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.kind, "name": self.name, "required": self.required}


@dataclass(frozen=True)
class TextField(Field):
    """Free-text input checked by named validators.

    An empty validations tuple means the value is format-unchecked and only
    the required flag applies.
    """

    validations: tuple[str, ...] = ()

    kind = "text"

    def satisfies_required(self, value: str) -> bool:
        if not self.required:
            return True
        return value.strip() != ""

    def rule_names(self) -> tuple[str, ...]:
        return self.validations

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.kind,
            "name": self.name,
            "validations": list(self.validations),
            "required": self.required,
        }


@dataclass(frozen=True)
class SelectField(Field):
    """A choice among a fixed, ordered list of options."""

    options: tuple[str, ...] = ()

    kind = "select"

    def satisfies_required(self, value: str) -> bool:
        if not self.required:
            return True
        return value in self.options

    def is_option(self, value: str) -> bool:
        return value in self.options

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.kind,
            "name": self.name,
            "options": list(self.options),
            "required": self.required,
        }


@dataclass(frozen=True)
class Form:
    """A named, ordered collection of fields."""

    name: str
    fields: tuple[Field, ...] = ()

    def field(self, name: str) -> Field:
        for f in self.fields:
            if f.name == name:
                return f
        raise FieldNotFound(self.name, name)

    def field_names(self) -> list[str]:
        return [f.name for f in self.fields]

    def validator_names(self) -> list[str]:
        """Every validator name referenced by this form, first-seen order."""
        seen: dict[str, None] = {}
        for f in self.fields:
            for rule in f.rule_names():
                seen.setdefault(rule, None)
        return list(seen)

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "fields": [f.to_dict() for f in self.fields]}


@dataclass(frozen=True)
class FormSet:
    """The whole schema document: an ordered sequence of uniquely named forms."""

    forms: tuple[Form, ...] = ()

    def form(self, name: str) -> Form:
        for f in self.forms:
            if f.name == name:
                return f
        raise FormNotFound(name)

    def field(self, form_name: str, field_name: str) -> Field:
        return self.form(form_name).field(field_name)

    def form_names(self) -> list[str]:
        return [f.name for f in self.forms]

    def validator_names(self) -> list[str]:
        seen: dict[str, None] = {}
        for form in self.forms:
            for rule in form.validator_names():
                seen.setdefault(rule, None)
        return list(seen)

    def __iter__(self):
        return iter(self.forms)

    def __len__(self) -> int:
        return len(self.forms)

    def to_dict(self) -> dict[str, Any]:
        return {"forms": [f.to_dict() for f in self.forms]}
