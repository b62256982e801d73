"""Helpers shared by the template store commands."""

import logging

import click

from faas_cli.cli.ensure import Ensure
from faas_cli.core.config import DEFAULT_TEMPLATES_STORE, resolve_store_url
from faas_cli.core.context import FaasContext
from faas_cli.core.template_store import TemplateInfo, TemplateStoreError, get_templates_info

logger = logging.getLogger(__name__)

url_option = click.option(
    "-u",
    "--url",
    "url",
    type=str,
    default=None,
    show_default=DEFAULT_TEMPLATES_STORE,
    help=(
        "Use as alternative store for templates. "
        "Overrides the OPENFAAS_TEMPLATE_STORE_URL environment variable."
    ),
)


def store_url_for(ctx: FaasContext, flag_url: str | None) -> str:
    """Resolve the store URL from the flag, the environment and the default."""
    store_url = resolve_store_url(
        flag_url or "", ctx.store_config.store_url, DEFAULT_TEMPLATES_STORE
    )
    logger.debug("Resolved template store URL: %s", store_url)
    return store_url


def fetch_templates_or_exit(ctx: FaasContext, store_url: str) -> list[TemplateInfo]:
    """Get the store's templates, exiting with a styled error on failure."""
    try:
        return get_templates_info(ctx.template_store, store_url)
    except TemplateStoreError as e:
        Ensure.fail(f"error while getting templates info: {e}")
