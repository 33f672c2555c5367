"""Built-in validators for formforge.

This module provides ready-to-use predicates that can be referenced from
field ``validations`` in a form schema.
"""

from formforge.validation.validators.builtins import (
    BUILTIN_VALIDATORS,
    EMAIL_PATTERN,
    PHONE_PATTERN,
    builtin_registry,
    is_blank,
    isnt_phone_number,
    isnt_valid_email,
    register_builtin_validators,
)

__all__ = [
    "BUILTIN_VALIDATORS",
    "EMAIL_PATTERN",
    "PHONE_PATTERN",
    "builtin_registry",
    "is_blank",
    "isnt_phone_number",
    "isnt_valid_email",
    "register_builtin_validators",
]
