"""``deepgram-mcp serve``: run the JSON-RPC server on stdin/stdout."""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path

import click

from deepgram_mcp.cli_commands._output import err_console


@click.command()
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Optional YAML settings file.",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="INFO",
    help="Diagnostic log level (logs go to stderr).",
)
@click.option("--telemetry", is_flag=True, help="Export trace spans to stderr.")
@click.option(
    "--otlp-endpoint",
    default=None,
    help="Export trace spans via OTLP/gRPC to this endpoint.",
)
def serve(
    config_path: Path | None,
    log_level: str,
    telemetry: bool,
    otlp_endpoint: str | None,
) -> None:
    """Serve newline-delimited JSON-RPC requests over stdio.

    Requires DEEPGRAM_API_KEY in the environment (or ``api_key`` in the
    settings file).
    """
    from deepgram_mcp.config import ConfigError, load_settings
    from deepgram_mcp.protocol.errors import TransportError
    from deepgram_mcp.protocol.session import ThreadedLineReader
    from deepgram_mcp.server import serve as run_server
    from deepgram_mcp.utils.log import configure_logging

    configure_logging(log_level, console=err_console)

    try:
        settings = load_settings(config_path)
    except ConfigError as exc:
        err_console.print(f"[red]Configuration error:[/red] {exc}")
        sys.exit(1)

    if telemetry or otlp_endpoint:
        from deepgram_mcp.utils.telemetry import configure_telemetry

        try:
            configure_telemetry(export_to_console=telemetry, otlp_endpoint=otlp_endpoint)
        except ImportError as exc:
            err_console.print(f"[red]Telemetry error:[/red] {exc}")
            sys.exit(1)

    reader = ThreadedLineReader(sys.stdin.buffer)
    try:
        asyncio.run(run_server(settings, reader, sys.stdout.buffer))
    except TransportError as exc:
        err_console.print(f"[red]Transport error:[/red] {exc}")
        sys.exit(1)
