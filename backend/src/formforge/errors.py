"""Error hierarchy for formforge.

Two disjoint classes of problems exist:

- Configuration faults (ConfigurationError and subclasses): the form
  definition or the validator wiring is broken. Always raised.
- Validation failures: user input does not satisfy a field. These are never
  raised; they are reported as FieldResult / FormResult data.

Lookups of unknown forms or fields raise NotFound subclasses.
"""


class ConfigurationError(Exception):
    """The schema or validator wiring itself is broken."""
    pass


class SchemaError(ConfigurationError):
    """A schema document violates a structural or consistency invariant."""
    pass


class MalformedSchema(SchemaError):
    """Missing keys, wrong value types, or an unparsable document."""
    pass


class DuplicateFormName(SchemaError):
    """Two forms in one set share a name."""

    def __init__(self, form_name: str):
        self.form_name = form_name
        super().__init__(f"Duplicate form name '{form_name}'")


class DuplicateFieldName(SchemaError):
    """Two fields in one form share a name."""

    def __init__(self, form_name: str, field_name: str):
        self.form_name = form_name
        self.field_name = field_name
        super().__init__(
            f"Duplicate field name '{field_name}' in form '{form_name}'"
        )


class EmptyOptionList(SchemaError):
    """A select field declares no options."""

    def __init__(self, form_name: str, field_name: str):
        self.form_name = form_name
        self.field_name = field_name
        super().__init__(
            f"Select field '{field_name}' in form '{form_name}' has no options"
        )


class DuplicateOption(SchemaError):
    """A select field lists the same option twice."""

    def __init__(self, form_name: str, field_name: str, option: str):
        self.form_name = form_name
        self.field_name = field_name
        self.option = option
        super().__init__(
            f"Select field '{field_name}' in form '{form_name}' "
            f"lists option '{option}' more than once"
        )


class UnknownFieldKind(SchemaError):
    """A field declares a type tag with no registered parser."""

    def __init__(self, form_name: str, field_name: str, kind: str, known: list[str]):
        self.form_name = form_name
        self.field_name = field_name
        self.kind = kind
        super().__init__(
            f"Field '{field_name}' in form '{form_name}' has unknown type '{kind}'. "
            "Known types: " + ", ".join(known)
        )


class UnregisteredValidator(ConfigurationError):
    """A field references a validator name nothing has registered."""

    def __init__(self, name: str, available: list[str] | None = None):
        self.name = name
        message = f"Validator '{name}' is not registered."
        if available is not None:
            message += " Available validators: " + (", ".join(available) or "(none)")
        super().__init__(message)


class ValidatorCrashed(ConfigurationError):
    """A registered predicate raised instead of returning an outcome."""

    def __init__(self, name: str, field_name: str, error: Exception):
        self.name = name
        self.field_name = field_name
        super().__init__(
            f"Validator '{name}' raised on field '{field_name}': {error}"
        )


class NotFound(LookupError):
    """A lookup by name found nothing."""
    pass


class FormNotFound(NotFound):
    """No form with the given name exists in the set."""

    def __init__(self, form_name: str):
        self.form_name = form_name
        super().__init__(f"Form '{form_name}' not found")


class FieldNotFound(NotFound):
    """No field with the given name exists in the form."""

    def __init__(self, form_name: str, field_name: str):
        self.form_name = form_name
        self.field_name = field_name
        super().__init__(f"Field '{field_name}' not found in form '{form_name}'")
