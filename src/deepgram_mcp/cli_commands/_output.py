"""Shared CLI output formatters.

``console`` writes to stdout and is only used by commands that do not speak
the protocol; ``err_console`` is safe to use while serving.
"""

from __future__ import annotations

from typing import Any

from rich.console import Console
from rich.table import Table

console = Console()
err_console = Console(stderr=True)


def print_tools_table(tools: list[dict[str, Any]]) -> None:
    """Pretty-print tool descriptors (wire form) as a table."""
    table = Table(title="Tools")
    table.add_column("Name", style="cyan")
    table.add_column("Description")
    table.add_column("Parameters")

    for tool in tools:
        schema = tool.get("inputSchema", {})
        required = set(schema.get("required", []))
        params = ", ".join(
            f"{name}*" if name in required else name
            for name in schema.get("properties", {})
        )
        table.add_row(
            tool.get("name", "?"),
            _truncate(tool.get("description", "")),
            params or "-",
        )

    console.print(table)
    console.print("[dim]* required[/dim]")


def _truncate(text: str, max_len: int = 80) -> str:
    if len(text) <= max_len:
        return text
    return text[: max_len - 3] + "..."
