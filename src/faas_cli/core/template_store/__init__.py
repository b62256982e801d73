"""Template store access: fetching, decoding and error types."""

from faas_cli.core.template_store.abc import TemplateStore
from faas_cli.core.template_store.errors import (
    BodyReadError,
    DecodeError,
    EmptyBodyError,
    RequestConstructionError,
    TemplateStoreError,
    TransportError,
    UnexpectedStatusError,
)
from faas_cli.core.template_store.fake import FakeTemplateStore
from faas_cli.core.template_store.parsing import decode_templates, encode_templates
from faas_cli.core.template_store.real import RealTemplateStore
from faas_cli.core.template_store.types import (
    ALL_PLATFORMS,
    AVAILABLE_PLATFORMS,
    TemplateInfo,
)

__all__ = [
    "ALL_PLATFORMS",
    "AVAILABLE_PLATFORMS",
    "BodyReadError",
    "DecodeError",
    "EmptyBodyError",
    "FakeTemplateStore",
    "RealTemplateStore",
    "RequestConstructionError",
    "TemplateInfo",
    "TemplateStore",
    "TemplateStoreError",
    "TransportError",
    "UnexpectedStatusError",
    "decode_templates",
    "encode_templates",
    "get_templates_info",
]


def get_templates_info(store: TemplateStore, url: str) -> list[TemplateInfo]:
    """Fetch and decode the store document at url."""
    return decode_templates(store.fetch(url))
