"""``deepgram-mcp tools``: inspect the tool catalogue."""

from __future__ import annotations

import json

import click

from deepgram_mcp.cli_commands._output import print_tools_table


@click.group()
def tools() -> None:
    """Inspect the tools this server exposes."""


@tools.command("list")
@click.option("--json", "as_json", is_flag=True, help="Print the tools/list result as JSON.")
def list_tools(as_json: bool) -> None:
    """List the registered tools without contacting Deepgram."""
    from deepgram_mcp.config import Settings
    from deepgram_mcp.server import build_registry
    from deepgram_mcp.speech.deepgram import DeepgramClient

    # Listing never calls the API, so a placeholder key is enough.
    settings = Settings(api_key="unused")
    registry = build_registry(DeepgramClient(settings), settings)
    descriptors = [d.to_wire() for d in registry.list_tools()]

    if as_json:
        click.echo(json.dumps({"tools": descriptors}, indent=2))
        return

    print_tools_table(descriptors)
