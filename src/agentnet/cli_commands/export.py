"""``agentnet export`` — dump a compiled network as JSON or YAML."""

from __future__ import annotations

import json

import click
import yaml

from agentnet.cli_commands._output import compile_or_exit, extension_option, network_dir_argument


@click.command()
@network_dir_argument
@extension_option
@click.option(
    "--format",
    "fmt",
    type=click.Choice(["json", "yaml"]),
    default="json",
    help="Output format.",
)
def export(network_dir: str, extension: str, fmt: str) -> None:
    """Export the compiled network in NETWORK_DIR.

    Front-matter keys keep their on-disk camelCase spelling.
    """
    network = compile_or_exit(network_dir, extension)
    data = network.model_dump(mode="json", by_alias=True)

    if fmt == "yaml":
        click.echo(yaml.safe_dump(data, sort_keys=False, allow_unicode=True), nl=False)
    else:
        click.echo(json.dumps(data, indent=2, ensure_ascii=False))
