"""Type definitions for the template store."""

from dataclasses import dataclass

# Sentinel platform value meaning "do not filter"
ALL_PLATFORMS = "allPlatforms"

AVAILABLE_PLATFORMS = ("armhf", "x86_64", "arm64")


@dataclass(frozen=True)
class TemplateInfo:
    """A template which is part of the store.

    Attribute names differ from the store's JSON keys; see JSON_FIELDS.
    """

    name: str
    platform: str
    language: str
    source: str
    description: str
    repository: str
    official: str

    def to_json_dict(self) -> dict[str, str]:
        """Encode as a store JSON object."""
        return {key: getattr(self, attr) for attr, key in JSON_FIELDS.items()}


# TemplateInfo attribute -> store JSON key
JSON_FIELDS: dict[str, str] = {
    "name": "template",
    "platform": "platform",
    "language": "language",
    "source": "source",
    "description": "description",
    "repository": "repo",
    "official": "official",
}
