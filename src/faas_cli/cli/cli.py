import logging
import os

import click

from faas_cli.cli.commands.template import template_group
from faas_cli.core.context import create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags

# Enable debug logging if FAAS_DEBUG environment variable is set
if os.getenv("FAAS_DEBUG"):
    logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="faas-cli")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Manage OpenFaaS function templates."""
    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context()


cli.add_command(template_group)


def main() -> None:
    """CLI entry point used by the `faas-cli` console script."""
    cli()
