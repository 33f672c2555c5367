"""Form schema module: typed, immutable form definitions and their loader."""

from formforge.schema.loader import (
    dump,
    format_document,
    list_field_kinds,
    load,
    load_file,
    register_field_kind,
    save_file,
)
from formforge.schema.types import Field, Form, FormSet, SelectField, TextField

__all__ = [
    "Field",
    "Form",
    "FormSet",
    "SelectField",
    "TextField",
    "dump",
    "format_document",
    "list_field_kinds",
    "load",
    "load_file",
    "register_field_kind",
    "save_file",
]
