"""Command alias support.

Aliases are attached with the @alias decorator and registered with
register_with_aliases(), which adds the command under every alias name.
AliasedGroup keeps alias names out of the help listing.
"""

from collections.abc import Callable

import click

_ALIASES_ATTR = "_faas_aliases"


def alias(*names: str) -> Callable[[click.Command], click.Command]:
    """Attach alias names to a click command.

    Must be applied on top of the @click.command decorator.
    """

    def decorator(cmd: click.Command) -> click.Command:
        setattr(cmd, _ALIASES_ATTR, tuple(names))
        return cmd

    return decorator


def get_aliases(cmd: click.Command) -> tuple[str, ...]:
    return getattr(cmd, _ALIASES_ATTR, ())


def register_with_aliases(group: click.Group, cmd: click.Command, name: str | None = None) -> None:
    """Add cmd to group under its primary name and each of its aliases."""
    group.add_command(cmd, name=name)
    for alias_name in get_aliases(cmd):
        group.add_command(cmd, name=alias_name)


class AliasedGroup(click.Group):
    """Group that hides alias registrations from `--help`."""

    def list_commands(self, ctx: click.Context) -> list[str]:
        return sorted(
            name for name, cmd in self.commands.items() if name not in get_aliases(cmd)
        )

    def format_commands(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        rows: list[tuple[str, str]] = []
        for name in self.list_commands(ctx):
            cmd = self.get_command(ctx, name)
            if cmd is None or cmd.hidden:
                continue
            aliases = get_aliases(cmd)
            label = f"{name} ({', '.join(aliases)})" if aliases else name
            rows.append((label, cmd.get_short_help_str(formatter.width)))

        if rows:
            with formatter.section("Commands"):
                formatter.write_dl(rows)
