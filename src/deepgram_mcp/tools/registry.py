"""ToolRegistry: the process-wide catalogue of invocable tools."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from deepgram_mcp.protocol.errors import UnknownToolError
from deepgram_mcp.utils.telemetry import ATTR_TOOL_NAME, get_tracer

if TYPE_CHECKING:
    from deepgram_mcp.protocol.models import CallToolResult
    from deepgram_mcp.tools.arguments import ToolArguments
    from deepgram_mcp.tools.base import Tool
    from deepgram_mcp.tools.models import ToolDescriptor

logger = logging.getLogger(__name__)
_tracer = get_tracer(__name__)


class ToolRegistry:
    """Maintains a name-to-tool map and invokes tools by name.

    Usage::

        registry = ToolRegistry()
        registry.register(TextToSpeechTool(client, settings))

        registry.list_tools()                      # descriptors, in order
        await registry.invoke("deepgram_text_to_speech", ToolArguments({...}))
    """

    def __init__(self) -> None:
        self._tools: dict[str, Tool] = {}

    def register(self, tool: Tool) -> None:
        """Add *tool* to the catalogue; names must be unique."""
        name = tool.descriptor.name
        if name in self._tools:
            msg = f"Tool already registered: {name}"
            raise ValueError(msg)
        self._tools[name] = tool

    def list_tools(self) -> list[ToolDescriptor]:
        """Return all descriptors in registration order."""
        return [tool.descriptor for tool in self._tools.values()]

    def get(self, name: str) -> Tool:
        """Look up a tool, raising :class:`UnknownToolError` if absent."""
        tool = self._tools.get(name)
        if tool is None:
            raise UnknownToolError(name)
        return tool

    async def invoke(self, name: str, arguments: ToolArguments) -> CallToolResult:
        """Run the named tool with *arguments*."""
        tool = self.get(name)
        logger.debug("Invoking tool %s with arguments %s", name, sorted(arguments))
        with _tracer.start_as_current_span("mcp.tool.invoke") as span:
            span.set_attribute(ATTR_TOOL_NAME, name)
            return await tool.run(arguments)

    def __len__(self) -> int:
        return len(self._tools)

    def __contains__(self, name: object) -> bool:
        return name in self._tools
