"""``agentnet summary`` / ``diagram`` / ``cycles`` — render a compiled network."""

from __future__ import annotations

import click

from agentnet.cli_commands._output import (
    compile_or_exit,
    console,
    extension_option,
    network_dir_argument,
)


@click.command()
@network_dir_argument
@extension_option
def summary(network_dir: str, extension: str) -> None:
    """Print a text overview of the network in NETWORK_DIR."""
    from agentnet.core.presentation.render import generate_network_summary

    network = compile_or_exit(network_dir, extension)
    click.echo(generate_network_summary(network))


@click.command()
@network_dir_argument
@extension_option
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, writable=True),
    default=None,
    help="Write the diagram to a file instead of stdout.",
)
def diagram(network_dir: str, extension: str, output: str | None) -> None:
    """Print a Mermaid diagram of the network in NETWORK_DIR."""
    from pathlib import Path

    from agentnet.core.presentation.render import generate_mermaid_diagram

    network = compile_or_exit(network_dir, extension)
    text = generate_mermaid_diagram(network)

    if output is None:
        click.echo(text)
        return

    Path(output).write_text(text + "\n", encoding="utf-8")
    console.print(f"Diagram written to {output}", markup=False)


@click.command()
@network_dir_argument
@extension_option
def cycles(network_dir: str, extension: str) -> None:
    """List delegation cycles in the network in NETWORK_DIR."""
    from agentnet.core.network.cycles import detect_cycles, format_cycle

    network = compile_or_exit(network_dir, extension)
    found = detect_cycles(network.delegation_graph)

    if not found:
        console.print("[green]No delegation cycles found.[/green]")
        return

    console.print(f"[yellow]{len(found)} delegation cycle(s):[/yellow]")
    for cycle in found:
        console.print(f"  {format_cycle(cycle)}", markup=False)
