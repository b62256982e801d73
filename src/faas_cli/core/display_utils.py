"""Display formatting for template store listings.

All functions are pure (no I/O) and return the exact text to print.
"""

from faas_cli.core.tabwriter import align_tabs
from faas_cli.core.template_store.types import ALL_PLATFORMS, AVAILABLE_PLATFORMS, TemplateInfo

BASIC_HEADER = ("NAME", "SOURCE", "DESCRIPTION")
VERBOSE_HEADER = ("NAME", "LANGUAGE", "PLATFORM", "SOURCE", "DESCRIPTION")


def unsupported_platform_message(platform: str) -> str:
    return (
        "Currently supported platforms are: armhf, arm64 and x86_64. "
        f"Unable to find: {platform}"
    )


def check_existing_platform(platform: str) -> str | None:
    """Return the unsupported-platform message, or None if platform is known."""
    if platform in AVAILABLE_PLATFORMS:
        return None
    return unsupported_platform_message(platform)


def filter_templates_by_platform(
    templates: list[TemplateInfo], platform: str
) -> list[TemplateInfo]:
    """Keep templates built for platform, in their original order.

    ALL_PLATFORMS keeps every template.
    """
    if platform == ALL_PLATFORMS:
        return list(templates)
    return [template for template in templates if template.platform == platform]


def format_templates_output(templates: list[TemplateInfo], verbose: bool, platform: str) -> str:
    """Render the template listing.

    An unsupported platform does not raise: the returned text is then the
    unsupported-platform message (framed by blank lines) instead of a table,
    and callers print it like any other listing.

    Args:
        templates: Templates in store order
        verbose: Include LANGUAGE and PLATFORM columns
        platform: Platform to filter on, or ALL_PLATFORMS

    Returns:
        Column-aligned table preceded and followed by a blank line
    """
    if platform != ALL_PLATFORMS:
        message = check_existing_platform(platform)
        if message is not None:
            return f"\n{message}\n\n"

    shown = filter_templates_by_platform(templates, platform)
    if verbose:
        rows = [VERBOSE_HEADER] + [
            (t.name, t.language, t.platform, t.source, t.description) for t in shown
        ]
    else:
        rows = [BASIC_HEADER] + [(t.name, t.source, t.description) for t in shown]

    lines = ["\t".join(row) + "\n" for row in rows]
    return align_tabs("\n" + "".join(lines) + "\n")


def format_template_details(template: TemplateInfo) -> str:
    """Render every field of one template as aligned `Label: value` lines."""
    rows = [
        ("Name:", template.name),
        ("Platform:", template.platform),
        ("Language:", template.language),
        ("Source:", template.source),
        ("Description:", template.description),
        ("Repository:", template.repository),
        ("Official Template:", template.official),
    ]
    lines = [f"{label}\t{value}\n" for label, value in rows]
    return align_tabs("\n" + "".join(lines) + "\n")


def find_template(templates: list[TemplateInfo], name: str) -> TemplateInfo | None:
    """Return the first template called name, or None."""
    for template in templates:
        if template.name == name:
            return template
    return None
