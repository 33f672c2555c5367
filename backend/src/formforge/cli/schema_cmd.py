"""Schema CLI commands — validate and dump."""

from pathlib import Path

import click

from formforge.errors import SchemaError
from formforge.schema.loader import format_document, load_file
from formforge.schema.validator import validate_file


def resolve_schema_path(ctx: click.Context, path: Path | None) -> Path:
    """Use the given path, falling back to FORMFORGE_SCHEMA_PATH / ./forms.yaml."""
    if path is not None:
        return path
    default = ctx.obj.schema_path
    if not default.exists():
        click.echo(f"Error: Schema file not found at {default}", err=True)
        raise SystemExit(1)
    return default


@click.group()
def schema():
    """Schema commands."""
    pass


@schema.command()
@click.argument(
    "path",
    required=False,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.pass_context
def validate(ctx, path: Path | None):
    """Validate a form schema document."""
    path = resolve_schema_path(ctx, path)

    # ── Structural (JSON Schema) validation ─────────────────────────────────
    issues = validate_file(path)
    for issue in issues:
        colour = "red" if issue.severity == "error" else "yellow"
        click.echo(click.style(str(issue), fg=colour))

    errors = [i for i in issues if i.severity == "error"]
    if errors:
        click.echo(
            click.style(f"\n{len(errors)} schema error(s) found", fg="red", bold=True)
        )
        raise SystemExit(1)

    warnings = [i for i in issues if i.severity == "warning"]
    if warnings:
        click.echo(click.style(f"{len(warnings)} warning(s) found.", fg="yellow"))

    # ── Semantic (loader) validation ─────────────────────────────────────────
    try:
        form_set = load_file(path)
    except SchemaError as e:
        click.echo(click.style(f"\nSemantic validation failed: {e}", fg="red"), err=True)
        raise SystemExit(1)

    click.echo(f"\nLoaded {len(form_set)} form(s):")
    for form in form_set:
        rules = form.validator_names()
        suffix = f", validators: {', '.join(rules)}" if rules else ""
        click.echo(f"  ✓ {form.name} ({len(form.fields)} fields{suffix})")

    click.echo(click.style("\nSchema is valid.", fg="green", bold=True))


@schema.command()
@click.argument(
    "path",
    required=False,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--format",
    "fmt",
    type=click.Choice(["yaml", "json"]),
    default="yaml",
    show_default=True,
    help="Output format.",
)
@click.pass_context
def dump(ctx, path: Path | None, fmt: str):
    """Print the normalized schema document."""
    path = resolve_schema_path(ctx, path)
    try:
        form_set = load_file(path)
    except SchemaError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)
    click.echo(format_document(form_set, fmt), nl=False)
