"""deepgram-mcp CLI entrypoint."""

from __future__ import annotations

import click

from deepgram_mcp import __version__


@click.group()
@click.version_option(version=__version__, prog_name="deepgram-mcp")
def main() -> None:
    """deepgram-mcp: Deepgram text-to-speech over MCP stdio."""


# Register subcommands
from deepgram_mcp.cli_commands import register_commands  # noqa: E402

register_commands(main)

if __name__ == "__main__":
    main()
