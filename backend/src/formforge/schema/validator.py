"""
schema/validator.py — JSON Schema check for form set documents.

Reports every structural problem in a document at once, before the semantic
``load`` step (which stops at the first broken invariant).

Usage:
    from formforge.schema.validator import validate_document, validate_file

    issues = validate_file(Path("forms.yaml"))
    for issue in issues:
        print(issue)
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any

from jsonschema import Draft202012Validator
from jsonschema.exceptions import ValidationError
from referencing import Registry, Resource
from referencing.jsonschema import DRAFT202012

from formforge.errors import MalformedSchema
from formforge.schema.loader import read_document

logger = logging.getLogger(__name__)

_SCHEMAS_DIR = Path(__file__).parent / "schemas"
_DOCUMENT_SCHEMA = "formset.schema.json"


@dataclass
class SchemaIssue:
    """A single structural finding in a schema document."""

    source: str
    message: str
    path: str = ""          # e.g. "forms[0]/fields[2]/options"
    severity: str = "error" # "error" | "warning"

    def __str__(self) -> str:
        loc = f" at {self.path}" if self.path else ""
        return f"[{self.severity.upper()}] {self.source}{loc}: {self.message}"


def _load_schema(name: str) -> dict[str, Any]:
    with (_SCHEMAS_DIR / name).open() as fh:
        return json.load(fh)


@lru_cache(maxsize=1)
def _load_registry() -> Registry:
    """Build a jsonschema Registry containing the bundled schemas."""
    resources = []
    for name in ("_defs.schema.json", _DOCUMENT_SCHEMA):
        schema = _load_schema(name)
        resources.append(
            (schema["$id"], Resource(contents=schema, specification=DRAFT202012))
        )
    return Registry().with_resources(resources)


def _json_path(error: ValidationError) -> str:
    """Convert a jsonschema error path to a readable string."""
    parts = []
    for p in error.absolute_path:
        if isinstance(p, int):
            parts.append(f"[{p}]")
        else:
            parts.append(str(p))
    return "/".join(parts).replace("/[", "[")


def _option_warnings(raw: Any, source: str) -> list[SchemaIssue]:
    """Warn about select options that look like several options in one string.

    Options are atomic; ``["phone, email"]`` is one option, not two.
    """
    issues: list[SchemaIssue] = []
    forms = raw.get("forms") if isinstance(raw, dict) else None
    if not isinstance(forms, list):
        return issues
    for i, form in enumerate(forms):
        fields = form.get("fields") if isinstance(form, dict) else None
        if not isinstance(fields, list):
            continue
        for j, field in enumerate(fields):
            if not isinstance(field, dict) or field.get("type") != "select":
                continue
            options = field.get("options")
            if not isinstance(options, list):
                continue
            for k, option in enumerate(options):
                if isinstance(option, str) and "," in option:
                    issues.append(
                        SchemaIssue(
                            source=source,
                            message=(
                                f"Option '{option}' contains a comma; options are "
                                "not split, list them separately"
                            ),
                            path=f"forms[{i}]/fields[{j}]/options[{k}]",
                            severity="warning",
                        )
                    )
    return issues


def validate_document(raw: Any, source: str = "<document>") -> list[SchemaIssue]:
    """Check a parsed document against the form set JSON Schema.

    Returns:
        A list of SchemaIssue objects: schema violations as errors, suspicious
        but accepted content as warnings. Empty when the document is clean.
    """
    if raw is None:
        return [SchemaIssue(source=source, message="Document is empty")]

    validator = Draft202012Validator(
        _load_schema(_DOCUMENT_SCHEMA), registry=_load_registry()
    )
    issues = [
        SchemaIssue(source=source, message=error.message, path=_json_path(error))
        for error in sorted(validator.iter_errors(raw), key=_json_path)
    ]
    issues.extend(_option_warnings(raw, source))
    if issues:
        logger.debug("%s: %d structural issue(s)", source, len(issues))
    return issues


def validate_file(path: Path) -> list[SchemaIssue]:
    """Parse a YAML/JSON file and check it against the JSON Schema."""
    try:
        raw = read_document(path)
    except MalformedSchema as exc:
        return [SchemaIssue(source=str(path), message=str(exc))]
    return validate_document(raw, source=str(path))
