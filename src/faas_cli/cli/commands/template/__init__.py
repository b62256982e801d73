"""Template command group."""

import click

from faas_cli.cli.alias import AliasedGroup, register_with_aliases
from faas_cli.cli.commands.template.describe_cmd import describe_template
from faas_cli.cli.commands.template.list_cmd import list_templates_cmd


@click.group("template")
def template_group() -> None:
    """OpenFaaS template store commands."""
    pass


@click.group("store", cls=AliasedGroup)
def store_group() -> None:
    """List and describe templates from a template store."""
    pass


register_with_aliases(store_group, list_templates_cmd)  # Has @alias("ls")
store_group.add_command(describe_template)

template_group.add_command(store_group)
