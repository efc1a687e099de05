"""Shared CLI helpers: loading with error reporting, and output formatters."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import TYPE_CHECKING

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from agentnet.core.network.config import LoaderConfig
from agentnet.core.network.errors import NetworkLoadError

if TYPE_CHECKING:
    from agentnet.core.network.models import CompiledNetwork, CompilerDiagnostic, CompileResult
    from agentnet.core.presentation.agents import AgentDefinition

console = Console(soft_wrap=True)

network_dir_argument = click.argument(
    "network_dir", type=click.Path(exists=True, file_okay=False)
)
extension_option = click.option(
    "--ext",
    "extension",
    default=".md",
    show_default=True,
    help="File extension of network documents.",
)


def load_or_exit(network_dir: str, extension: str) -> CompileResult:
    """Load and compile *network_dir*, exiting with status 1 on a load error."""
    from agentnet.core.network.compiler import load_and_compile

    try:
        return load_and_compile(Path(network_dir), config=LoaderConfig(extension=extension))
    except NetworkLoadError as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        sys.exit(1)


def compile_or_exit(network_dir: str, extension: str) -> CompiledNetwork:
    """Like :func:`load_or_exit` but also exits when linking fails."""
    result = load_or_exit(network_dir, extension)
    if not result.success:
        print_diagnostics(result.errors)
        sys.exit(1)
    return result.network


def print_diagnostics(diagnostics: list[CompilerDiagnostic]) -> None:
    console.print("[red]✗ Network has errors:[/red]")
    for diagnostic in diagnostics:
        console.print(f"  - {escape(diagnostic.message)}")


def print_agents_table(network: CompiledNetwork) -> None:
    """Pretty-print the agents of a compiled network as a table."""
    table = Table(title="Agents")
    table.add_column("Name", style="cyan")
    table.add_column("Mode")
    table.add_column("Variant")
    table.add_column("Role")
    table.add_column("Delegates")
    table.add_column("Skills")

    for agent_id, agent in network.agents.items():
        fm = agent.front_matter
        table.add_row(
            agent_id,
            "primary" if fm.primary else "subagent",
            fm.variant,
            _truncate(fm.role),
            ", ".join(network.delegation_graph[agent_id]) or "-",
            ", ".join(network.skill_graph[agent_id]) or "-",
        )

    console.print(table)


def print_definitions(definitions: list[AgentDefinition]) -> None:
    """Print rendered agent definitions, prompt included."""
    for definition in definitions:
        config = definition.config
        console.print(f"[bold cyan]@{escape(definition.name)}[/bold cyan] ({config.mode})")
        console.print(f"  Model: {escape(config.model)}")
        console.print(f"  Temperature: {config.temperature}")
        console.rule()
        click.echo(config.prompt)
        console.print()


def _truncate(text: str, max_len: int = 60) -> str:
    if len(text) <= max_len:
        return text
    return text[: max_len - 3] + "..."
