"""formforge validation system.

Usage:
    from formforge.schema import load_file
    from formforge.validation import Dispatcher, ValidatorRegistry
    from formforge.validation.validators import register_builtin_validators

    # At application startup
    registry = register_builtin_validators(ValidatorRegistry())
    dispatcher = Dispatcher(load_file(path), registry, strict=True)

    result = dispatcher.validate_form("contact-information", {"email": "a@b.co"})
"""

from formforge.validation.dispatcher import Dispatcher
from formforge.validation.registry import ValidatorRegistry
from formforge.validation.types import (
    NOT_AN_OPTION,
    Fail,
    FieldResult,
    FieldUpdate,
    FormResult,
    Outcome,
    Pass,
    Predicate,
)

__all__ = [
    # Types
    "Fail",
    "FieldResult",
    "FieldUpdate",
    "FormResult",
    "NOT_AN_OPTION",
    "Outcome",
    "Pass",
    "Predicate",
    # Registry
    "ValidatorRegistry",
    # Dispatch
    "Dispatcher",
]
