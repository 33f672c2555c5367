"""Load, check, and serialize form schema documents.

The document format is a mapping with a top-level ``forms`` list:

    forms:
      - name: personal-information
        fields:
          - {type: text, name: last-name, validations: [is-blank], required: true}
          - {type: select, name: gender, options: [male, female], required: true}

``load`` is all-or-nothing: either every invariant holds and a FormSet is
returned, or a SchemaError is raised and nothing is built.
"""

import json
import logging
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any

import yaml

from formforge.errors import (
    DuplicateFieldName,
    DuplicateFormName,
    DuplicateOption,
    EmptyOptionList,
    MalformedSchema,
    UnknownFieldKind,
)
from formforge.schema.types import Field, Form, FormSet, SelectField, TextField

logger = logging.getLogger(__name__)

# Field parser signature: (form_name, field_dict) -> Field
FieldParser = Callable[[str, Mapping[str, Any]], Field]

_FIELD_PARSERS: dict[str, FieldParser] = {}


def register_field_kind(kind: str, parser: FieldParser) -> None:
    """Register a parser for a field ``type`` tag.

    Unlike validators, field kinds are a schema-level decision: registering
    an existing tag replaces its parser, which changes what ``load`` accepts.
    """
    if kind in _FIELD_PARSERS:
        logger.debug("Replacing parser for field kind '%s'", kind)
    _FIELD_PARSERS[kind] = parser


def list_field_kinds() -> list[str]:
    return sorted(_FIELD_PARSERS)


# =============================================================================
# Field parsers
# =============================================================================


def _require_str(data: Mapping[str, Any], key: str, where: str) -> str:
    value = data.get(key)
    if not isinstance(value, str) or value == "":
        raise MalformedSchema(f"{where}: '{key}' must be a non-empty string")
    return value


def _get_required(data: Mapping[str, Any], where: str) -> bool:
    required = data.get("required", False)
    if not isinstance(required, bool):
        raise MalformedSchema(f"{where}: 'required' must be a boolean")
    return required


def _get_str_list(data: Mapping[str, Any], key: str, where: str) -> list[str]:
    values = data.get(key, [])
    if values is None:
        return []
    if isinstance(values, str) or not isinstance(values, (list, tuple)):
        raise MalformedSchema(f"{where}: '{key}' must be a list of strings")
    for value in values:
        if isinstance(value, bool):
            # YAML 1.1 reads bare yes/no/on/off as booleans.
            raise MalformedSchema(
                f"{where}: '{key}' must be a list of strings; "
                f"{value!r} is a YAML boolean, quote it (e.g. \"yes\")"
            )
        if not isinstance(value, str):
            raise MalformedSchema(f"{where}: '{key}' must be a list of strings")
    return list(values)


def _parse_text_field(form_name: str, data: Mapping[str, Any]) -> TextField:
    name = data["name"]
    where = f"form '{form_name}', field '{name}'"
    # Duplicate rule names collapse to their first occurrence.
    validations = tuple(dict.fromkeys(_get_str_list(data, "validations", where)))
    return TextField(
        name=name,
        required=_get_required(data, where),
        validations=validations,
    )


def _parse_select_field(form_name: str, data: Mapping[str, Any]) -> SelectField:
    name = data["name"]
    where = f"form '{form_name}', field '{name}'"
    options = _get_str_list(data, "options", where)
    if not options:
        raise EmptyOptionList(form_name, name)
    seen: set[str] = set()
    for option in options:
        if option in seen:
            raise DuplicateOption(form_name, name, option)
        seen.add(option)
    return SelectField(
        name=name,
        required=_get_required(data, where),
        options=tuple(options),
    )


register_field_kind("text", _parse_text_field)
register_field_kind("select", _parse_select_field)


# =============================================================================
# Load / dump
# =============================================================================


def _resolve_field(form_name: str, index: int, data: Any) -> Field:
    if not isinstance(data, Mapping):
        raise MalformedSchema(f"form '{form_name}', field #{index}: must be a mapping")
    name = _require_str(data, "name", f"form '{form_name}', field #{index}")
    kind = data.get("type")
    if not isinstance(kind, str):
        raise MalformedSchema(f"form '{form_name}', field '{name}': 'type' must be a string")

    parser = _FIELD_PARSERS.get(kind)
    if parser is None:
        raise UnknownFieldKind(form_name, name, kind, list_field_kinds())
    return parser(form_name, data)


def _resolve_form(index: int, data: Any) -> Form:
    if not isinstance(data, Mapping):
        raise MalformedSchema(f"form #{index}: must be a mapping")
    name = _require_str(data, "name", f"form #{index}")

    raw_fields = data.get("fields", [])
    if not isinstance(raw_fields, (list, tuple)):
        raise MalformedSchema(f"form '{name}': 'fields' must be a list")

    fields: list[Field] = []
    seen: set[str] = set()
    for i, raw_field in enumerate(raw_fields):
        field = _resolve_field(name, i, raw_field)
        if field.name in seen:
            raise DuplicateFieldName(name, field.name)
        seen.add(field.name)
        fields.append(field)

    return Form(name=name, fields=tuple(fields))


def load(raw: Mapping[str, Any]) -> FormSet:
    """Build a FormSet from a parsed schema document.

    Raises:
        MalformedSchema: Missing keys or wrong value types
        DuplicateFormName: Two forms share a name
        DuplicateFieldName: Two fields in one form share a name
        EmptyOptionList: A select field has no options
        DuplicateOption: A select field repeats an option
        UnknownFieldKind: A field's type has no registered parser
    """
    if not isinstance(raw, Mapping):
        raise MalformedSchema("Schema document must be a mapping with a 'forms' key")
    if "forms" not in raw:
        raise MalformedSchema("Schema document has no 'forms' key")

    raw_forms = raw["forms"]
    if not isinstance(raw_forms, (list, tuple)):
        raise MalformedSchema("'forms' must be a list")

    forms: list[Form] = []
    seen: set[str] = set()
    for i, raw_form in enumerate(raw_forms):
        form = _resolve_form(i, raw_form)
        if form.name in seen:
            raise DuplicateFormName(form.name)
        seen.add(form.name)
        forms.append(form)

    return FormSet(forms=tuple(forms))


def dump(form_set: FormSet) -> dict[str, Any]:
    """Serialize a FormSet back to the document format accepted by load()."""
    return form_set.to_dict()


# =============================================================================
# Files
# =============================================================================


def _is_json(path: Path) -> bool:
    return path.suffix.lower() == ".json"


def read_document(path: Path) -> Any:
    """Parse a YAML or JSON schema document without checking it."""
    try:
        with path.open(encoding="utf-8") as fh:
            if _is_json(path):
                return json.load(fh)
            return yaml.safe_load(fh)
    except OSError as exc:
        raise MalformedSchema(f"Cannot read schema file {path}: {exc}") from exc
    except (yaml.YAMLError, json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise MalformedSchema(f"Cannot parse schema file {path}: {exc}") from exc


def load_file(path: Path) -> FormSet:
    """Load a FormSet from a ``.yaml``/``.yml`` or ``.json`` file."""
    path = Path(path)
    raw = read_document(path)
    if raw is None:
        raise MalformedSchema(f"Schema file {path} is empty")
    form_set = load(raw)
    logger.info(
        "Loaded %d form(s) from %s: %s",
        len(form_set),
        path,
        ", ".join(form_set.form_names()),
    )
    return form_set


def format_document(form_set: FormSet, fmt: str = "yaml") -> str:
    """Render a FormSet as YAML or JSON text."""
    data = dump(form_set)
    if fmt == "json":
        return json.dumps(data, indent=2) + "\n"
    if fmt == "yaml":
        return yaml.safe_dump(data, sort_keys=False)
    raise ValueError(f"Unsupported format '{fmt}'. Use 'yaml' or 'json'.")


def save_file(form_set: FormSet, path: Path) -> None:
    """Write a FormSet to disk; the format follows the file suffix."""
    path = Path(path)
    fmt = "json" if _is_json(path) else "yaml"
    path.write_text(format_document(form_set, fmt), encoding="utf-8")
