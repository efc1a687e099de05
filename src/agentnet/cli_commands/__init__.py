"""CLI subcommand registration."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all subcommands on the CLI group."""
    from agentnet.cli_commands.agents import agents
    from agentnet.cli_commands.export import export
    from agentnet.cli_commands.graph import cycles, diagram, summary
    from agentnet.cli_commands.validate import validate

    cli.add_command(validate)
    cli.add_command(summary)
    cli.add_command(diagram)
    cli.add_command(cycles)
    cli.add_command(export)
    cli.add_command(agents)
