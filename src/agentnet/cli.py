"""agentnet CLI entrypoint."""

from __future__ import annotations

import logging
import sys

import click
from rich.logging import RichHandler

from agentnet import __version__


def _configure_logging(verbose: bool) -> None:
    logger = logging.getLogger("agentnet")
    if not verbose or logger.handlers:
        return
    handler = RichHandler(show_path=False, markup=False)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)


@click.group()
@click.version_option(version=__version__, prog_name="agentnet")
@click.option("--verbose", "-v", is_flag=True, help="Log loader and compiler activity.")
@click.option("--trace", is_flag=True, help="Export tracing spans to the console.")
@click.option(
    "--otlp-endpoint",
    envvar="AGENTNET_OTLP_ENDPOINT",
    default=None,
    help="Export tracing spans to this OTLP/gRPC collector.",
)
def main(verbose: bool, trace: bool, otlp_endpoint: str | None) -> None:
    """agentnet — compile and inspect declarative agent networks."""
    _configure_logging(verbose)

    if trace or otlp_endpoint:
        from agentnet.utils.telemetry import configure_telemetry

        try:
            configure_telemetry(
                service_name="agentnet",
                export_to_console=trace,
                otlp_endpoint=otlp_endpoint,
            )
        except ImportError as exc:
            click.echo(f"Error: {exc}", err=True)
            sys.exit(1)


# Register subcommands
from agentnet.cli_commands import register_commands  # noqa: E402

register_commands(main)

if __name__ == "__main__":
    main()
