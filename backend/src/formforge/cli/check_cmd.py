"""Check CLI commands — run validation for a form from the command line."""

import json
from pathlib import Path

import click

from formforge.cli.schema_cmd import resolve_schema_path
from formforge.errors import ConfigurationError, NotFound
from formforge.schema.loader import load_file
from formforge.validation.dispatcher import Dispatcher
from formforge.validation.validators import BUILTIN_VALIDATORS, builtin_registry


def _parse_values(pairs: tuple[str, ...]) -> dict[str, str]:
    values: dict[str, str] = {}
    for pair in pairs:
        if "=" not in pair:
            raise click.BadParameter(
                f"'{pair}' is not FIELD=VALUE", param_hint="--value"
            )
        name, value = pair.split("=", 1)
        values[name.strip()] = value
    return values


@click.command()
@click.argument("form_name")
@click.option(
    "--schema",
    "schema_path",
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Schema document (defaults to FORMFORGE_SCHEMA_PATH or ./forms.yaml).",
)
@click.option(
    "-v",
    "--value",
    "pairs",
    multiple=True,
    help="Field value as FIELD=VALUE. Repeatable.",
)
@click.option("--json", "as_json", is_flag=True, default=False, help="Emit JSON.")
@click.pass_context
def check(ctx, form_name: str, schema_path: Path | None, pairs: tuple[str, ...], as_json: bool):
    """Validate field values for FORM_NAME using the built-in validators."""
    path = resolve_schema_path(ctx, schema_path)
    values = _parse_values(pairs)

    try:
        dispatcher = Dispatcher(load_file(path), builtin_registry(), strict=ctx.obj.strict)
        result = dispatcher.validate_form(form_name, values)
    except ConfigurationError as e:
        click.echo(click.style(f"Configuration error: {e}", fg="red"), err=True)
        raise SystemExit(2)
    except NotFound as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(2)

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
    else:
        for field_result in result.fields:
            if field_result.valid:
                click.echo(click.style(f"  ✓ {field_result.field_name}", fg="green"))
                continue
            problems = []
            if not field_result.satisfies_required:
                problems.append("required")
            problems.extend(
                field_result.reasons.get(name, name)
                for name in sorted(field_result.failed_validators)
            )
            click.echo(
                click.style(f"  ✗ {field_result.field_name}: {'; '.join(problems)}", fg="red")
            )

        if result.valid:
            click.echo(click.style(f"\nForm '{form_name}' is valid.", fg="green", bold=True))
        else:
            click.echo(
                click.style(
                    f"\nForm '{form_name}' is invalid: {', '.join(result.invalid_fields)}",
                    fg="red",
                    bold=True,
                )
            )

    if not result.valid:
        raise SystemExit(1)


@click.command()
def validators():
    """List the built-in validator names."""
    for name in sorted(BUILTIN_VALIDATORS):
        click.echo(name)
