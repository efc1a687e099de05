"""``agentnet validate`` — check a network directory for structural errors."""

from __future__ import annotations

import sys
from pathlib import Path

import click
from rich.markup import escape

from agentnet.cli_commands._output import (
    console,
    extension_option,
    network_dir_argument,
    print_diagnostics,
)


@click.command()
@network_dir_argument
@extension_option
@click.option("--cycles", "check_cycles", is_flag=True, help="Treat delegation cycles as errors.")
@click.option(
    "--format",
    "fmt",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format.",
)
def validate(network_dir: str, extension: str, check_cycles: bool, fmt: str) -> None:
    """Load and link the network in NETWORK_DIR.

    Exits with status 0 when the network is valid and 1 otherwise.
    """
    from agentnet.core.network.compiler import load_and_compile
    from agentnet.core.network.config import LoaderConfig
    from agentnet.core.network.cycles import diagnose_cycles
    from agentnet.core.network.errors import NetworkLoadError

    try:
        result = load_and_compile(Path(network_dir), config=LoaderConfig(extension=extension))
    except NetworkLoadError as exc:
        if fmt == "json":
            error = {
                "type": "load_error",
                "message": str(exc),
                "source": exc.file_path,
                "target": None,
            }
            console.print_json(data={"valid": False, "errors": [error]})
        else:
            console.print(f"[red]Error:[/red] {escape(str(exc))}")
        sys.exit(1)

    if result.success:
        diagnostics = diagnose_cycles(result.network.delegation_graph) if check_cycles else []
    else:
        diagnostics = result.errors

    if fmt == "json":
        payload = {
            "valid": not diagnostics,
            "errors": [d.model_dump() for d in diagnostics],
        }
        if result.success:
            payload["agents"] = len(result.network.agents)
            payload["skills"] = len(result.network.skills)
        console.print_json(data=payload)
        if diagnostics:
            sys.exit(1)
        return

    if diagnostics:
        print_diagnostics(diagnostics)
        sys.exit(1)

    console.print("[green]✓ Network is valid[/green]")
    console.print(f"  Agents: {len(result.network.agents)}")
    console.print(f"  Skills: {len(result.network.skills)}")
