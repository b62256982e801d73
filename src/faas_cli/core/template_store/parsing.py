"""Decoding of store documents into TemplateInfo records."""

import json
import logging
from typing import Any

from faas_cli.core.template_store.errors import DecodeError
from faas_cli.core.template_store.types import JSON_FIELDS, TemplateInfo

logger = logging.getLogger(__name__)


def decode_templates(data: bytes) -> list[TemplateInfo]:
    """Parse a store document into templates, keeping the store's order.

    Args:
        data: Response body; must be a JSON array of objects (or nulls)

    Returns:
        One TemplateInfo per array element. Missing keys, JSON null values
        and null elements become empty strings; unknown keys are ignored.

    Raises:
        DecodeError: If data is not valid JSON, not an array, or an element
            is not an object with string values for the known keys
    """
    try:
        parsed = json.loads(data)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise DecodeError(str(e)) from e

    if not isinstance(parsed, list):
        raise DecodeError(f"cannot unmarshal {_json_type(parsed)} into list of templates")

    templates = [_template_from_json(index, entry) for index, entry in enumerate(parsed)]
    logger.debug("Decoded %d templates", len(templates))
    return templates


def encode_templates(templates: list[TemplateInfo]) -> bytes:
    """Encode templates as a store document."""
    return json.dumps([template.to_json_dict() for template in templates]).encode("utf-8")


def _template_from_json(index: int, entry: Any) -> TemplateInfo:
    # A null element decodes to a template with every field empty
    if entry is None:
        entry = {}
    if not isinstance(entry, dict):
        raise DecodeError(f"cannot unmarshal {_json_type(entry)} into template at index {index}")

    values: dict[str, str] = {}
    for attr, key in JSON_FIELDS.items():
        value = entry.get(key)
        if value is None:
            value = ""
        if not isinstance(value, str):
            raise DecodeError(
                f"cannot unmarshal {_json_type(value)} into field {key!r} "
                f"of template at index {index}"
            )
        values[attr] = value

    return TemplateInfo(**values)


def _json_type(value: Any) -> str:
    """Name the JSON type of a decoded value for error messages."""
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, int | float):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return "null"
