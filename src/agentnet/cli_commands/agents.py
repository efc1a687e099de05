"""``agentnet agents`` — list agents and render their runtime definitions."""

from __future__ import annotations

import sys

import click
from rich.markup import escape

from agentnet.cli_commands._output import (
    compile_or_exit,
    console,
    extension_option,
    network_dir_argument,
    print_agents_table,
    print_definitions,
)


@click.group()
def agents() -> None:
    """Inspect the agents of a network."""


@agents.command("list")
@network_dir_argument
@extension_option
def list_agents(network_dir: str, extension: str) -> None:
    """List the agents of the network in NETWORK_DIR."""
    network = compile_or_exit(network_dir, extension)

    if not network.agents:
        console.print("[yellow]No agents found.[/yellow]")
        return

    print_agents_table(network)


@agents.command("render")
@network_dir_argument
@extension_option
@click.option("--provider", "-p", required=True, help="Provider preset from the manifest.")
@click.option("--name", "names", multiple=True, help="Only render these agents.")
@click.option(
    "--format",
    "fmt",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format.",
)
def render_agents(
    network_dir: str,
    extension: str,
    provider: str,
    names: tuple[str, ...],
    fmt: str,
) -> None:
    """Render runtime definitions (model, temperature, prompt) for each agent."""
    from agentnet.core.network.errors import UnknownProviderError
    from agentnet.core.presentation.agents import build_agent_definitions

    network = compile_or_exit(network_dir, extension)

    try:
        definitions = build_agent_definitions(network, provider)
    except UnknownProviderError as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        sys.exit(1)

    if names:
        unknown = [name for name in names if name not in network.agents]
        if unknown:
            console.print(f"[red]Unknown agent(s):[/red] {escape(', '.join(unknown))}")
            sys.exit(1)
        definitions = [d for d in definitions if d.name in names]

    if fmt == "json":
        console.print_json(data=[d.model_dump() for d in definitions])
    else:
        print_definitions(definitions)
