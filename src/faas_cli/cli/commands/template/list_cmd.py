"""Command to list templates from a template store."""

from dataclasses import dataclass

import click

from faas_cli.cli.alias import alias
from faas_cli.cli.commands.template.shared import fetch_templates_or_exit, store_url_for, url_option
from faas_cli.cli.output import machine_output
from faas_cli.core.context import FaasContext
from faas_cli.core.display_utils import format_templates_output
from faas_cli.core.template_store import ALL_PLATFORMS


@dataclass(frozen=True)
class StoreListOptions:
    """Flags of `template store list`."""

    url: str | None
    platform: str
    verbose: bool


def list_templates(ctx: FaasContext, options: StoreListOptions) -> str:
    """Fetch the store and return the listing text to print.

    Exits with status 1 if the store cannot be fetched or decoded. An
    unsupported platform is not a failure; see format_templates_output.
    """
    store_url = store_url_for(ctx, options.url)
    templates = fetch_templates_or_exit(ctx, store_url)
    return format_templates_output(templates, options.verbose, options.platform)


@alias("ls")
@click.command("list")
@click.option(
    "-v", "--verbose", is_flag=True, default=False, help="Shows additional language and platform"
)
@url_option
@click.option(
    "-p",
    "--platform",
    type=str,
    default=ALL_PLATFORMS,
    help="Shows only templates for the given platform (armhf, arm64 or x86_64)",
)
@click.pass_obj
def list_templates_cmd(ctx: FaasContext, verbose: bool, url: str | None, platform: str) -> None:
    """List templates from the official store or a custom URL.

    Set the OPENFAAS_TEMPLATE_STORE_URL environment variable to change the
    default store location.

    \b
    Examples:
      faas-cli template store list
      faas-cli template store ls
      faas-cli template store ls --url=https://raw.githubusercontent.com/openfaas/store/master/templates.json
      faas-cli template store ls --verbose
      faas-cli template store list --platform arm64
    """
    options = StoreListOptions(url=url, platform=platform, verbose=verbose)
    machine_output(list_templates(ctx, options), nl=False)
