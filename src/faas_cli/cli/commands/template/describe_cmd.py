"""Command to show the details of one template from a template store."""

from dataclasses import dataclass

import click

from faas_cli.cli.commands.template.shared import fetch_templates_or_exit, store_url_for, url_option
from faas_cli.cli.ensure import Ensure
from faas_cli.cli.output import machine_output
from faas_cli.core.context import FaasContext
from faas_cli.core.display_utils import find_template, format_template_details


@dataclass(frozen=True)
class StoreDescribeOptions:
    """Arguments and flags of `template store describe`."""

    name: str
    url: str | None


def describe_template_text(ctx: FaasContext, options: StoreDescribeOptions) -> str:
    store_url = store_url_for(ctx, options.url)
    templates = fetch_templates_or_exit(ctx, store_url)
    template = Ensure.not_none(
        find_template(templates, options.name),
        f"template with name: `{options.name}` does not exist in the repository",
    )
    return format_template_details(template)


@click.command("describe")
@click.argument("name")
@url_option
@click.pass_obj
def describe_template(ctx: FaasContext, name: str, url: str | None) -> None:
    """Describe a template from the store.

    \b
    Examples:
      faas-cli template store describe golang-http
      faas-cli template store describe haskell --url https://raw.githubusercontent.com/custom/store/master/templates.json
    """
    options = StoreDescribeOptions(name=name, url=url)
    machine_output(describe_template_text(ctx, options), nl=False)
