"""Tool protocol: the interface every registry entry satisfies."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from deepgram_mcp.protocol.models import CallToolResult
    from deepgram_mcp.tools.arguments import ToolArguments
    from deepgram_mcp.tools.models import ToolDescriptor


@runtime_checkable
class Tool(Protocol):
    """A named, schema-described operation callable through ``tools/call``."""

    @property
    def descriptor(self) -> ToolDescriptor:
        """The static catalogue entry for this tool."""
        ...

    async def run(self, arguments: ToolArguments) -> CallToolResult:
        """Validate *arguments*, perform the work, and return its result."""
        ...
