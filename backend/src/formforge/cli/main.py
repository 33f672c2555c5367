"""formforge CLI entry point."""

import click

from formforge.config import FormforgeConfig


@click.group()
@click.pass_context
def cli(ctx):
    """formforge — declarative form schemas and validation."""
    config = FormforgeConfig.from_env()
    config.configure_logging()
    ctx.obj = config


# Register subcommand groups
from formforge.cli.check_cmd import check, validators  # noqa: E402
from formforge.cli.schema_cmd import schema  # noqa: E402

cli.add_command(schema)
cli.add_command(check)
cli.add_command(validators)
