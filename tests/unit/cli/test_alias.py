"""Tests for command alias registration."""

import click
from click.testing import CliRunner

from faas_cli.cli.alias import AliasedGroup, alias, get_aliases, register_with_aliases


def _build_group() -> click.Group:
    @click.group(cls=AliasedGroup)
    def group() -> None:
        """Test group."""

    @alias("ls", "l")
    @click.command("list")
    def list_cmd() -> None:
        """List things."""
        click.echo("listed")

    @click.command("show")
    def show_cmd() -> None:
        """Show a thing."""

    register_with_aliases(group, list_cmd)
    group.add_command(show_cmd)
    return group


def test_alias_decorator_records_names() -> None:
    @alias("ls")
    @click.command("list")
    def cmd() -> None:
        pass

    assert get_aliases(cmd) == ("ls",)


def test_command_without_aliases() -> None:
    @click.command("plain")
    def cmd() -> None:
        pass

    assert get_aliases(cmd) == ()


def test_alias_invokes_same_command() -> None:
    group = _build_group()
    runner = CliRunner()

    for name in ("list", "ls", "l"):
        result = runner.invoke(group, [name])
        assert result.exit_code == 0
        assert result.output == "listed\n"


def test_help_lists_primary_names_with_aliases() -> None:
    result = CliRunner().invoke(_build_group(), ["--help"])

    assert result.exit_code == 0
    assert "list (ls, l)" in result.output
    assert "show" in result.output
    # Aliases are not listed as separate commands
    command_lines = [line.strip() for line in result.output.splitlines()]
    assert not any(line.startswith("ls ") for line in command_lines)
