"""Built-in validators for formforge.

Ready-to-use predicates for the validator names used by the bundled sample
forms. None of them is mandatory: hosts may register their own predicates
under the same names to override them.

Available validators:
- is-blank: Fails when the value is empty or whitespace only
- isnt-phone-number: Fails when a non-blank value is not a phone number
- isnt-valid-email: Fails when a non-blank value is not an email address

The format validators pass on blank values. Blankness is the concern of
"is-blank" and of the field's required flag.
"""

import re

from formforge.schema.types import Field
from formforge.validation.registry import ValidatorRegistry
from formforge.validation.types import Fail, Outcome, Pass


# =============================================================================
# Format Patterns
# =============================================================================

# Email: Basic RFC 5322 compliant pattern
EMAIL_PATTERN = re.compile(
    r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$"
)

# Phone: Flexible pattern supporting international formats
PHONE_PATTERN = re.compile(
    r"^[\+]?[(]?[0-9]{1,3}[)]?[-\s\.]?[(]?[0-9]{1,4}[)]?[-\s\.]?[0-9]{1,4}[-\s\.]?[0-9]{1,9}$"
)


# =============================================================================
# Predicates
# =============================================================================


def is_blank(value: str, field: Field) -> Outcome:
    if value.strip() == "":
        return Fail(f"{field.name} must not be blank")
    return Pass


def isnt_phone_number(value: str, field: Field) -> Outcome:
    value = value.strip()
    if value and not PHONE_PATTERN.match(value):
        return Fail(f"{field.name} must be a valid phone number")
    return Pass


def isnt_valid_email(value: str, field: Field) -> Outcome:
    value = value.strip()
    if value and not EMAIL_PATTERN.match(value):
        return Fail(f"{field.name} must be a valid email address")
    return Pass


BUILTIN_VALIDATORS = {
    "is-blank": is_blank,
    "isnt-phone-number": isnt_phone_number,
    "isnt-valid-email": isnt_valid_email,
}


def register_builtin_validators(registry: ValidatorRegistry) -> ValidatorRegistry:
    """Register all built-in validators.

    Call this at application startup, before registering host overrides.
    Returns the registry for chaining.
    """
    for name, predicate in BUILTIN_VALIDATORS.items():
        registry.register(name, predicate)
    return registry


def builtin_registry() -> ValidatorRegistry:
    """A fresh registry holding only the built-in validators."""
    return register_builtin_validators(ValidatorRegistry())
