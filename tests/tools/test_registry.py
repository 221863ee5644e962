"""Tests for ToolRegistry."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from deepgram_mcp.config import Settings
from deepgram_mcp.protocol.errors import UnknownToolError
from deepgram_mcp.protocol.models import CallToolResult
from deepgram_mcp.tools.arguments import ToolArguments
from deepgram_mcp.tools.base import Tool
from deepgram_mcp.tools.models import ToolDescriptor
from deepgram_mcp.tools.registry import ToolRegistry
from deepgram_mcp.tools.text_to_speech import TextToSpeechTool


def _make_tool(name: str = "tool_a", text: str = "done") -> MagicMock:
    tool = MagicMock()
    tool.descriptor = ToolDescriptor(name=name, description=f"{name} tool")
    tool.run = AsyncMock(return_value=CallToolResult.from_text(text))
    return tool


class TestToolRegistry:
    def test_empty(self) -> None:
        registry = ToolRegistry()
        assert registry.list_tools() == []
        assert len(registry) == 0

    def test_list_preserves_registration_order(self) -> None:
        registry = ToolRegistry()
        for name in ("b", "a", "c"):
            registry.register(_make_tool(name))
        assert [d.name for d in registry.list_tools()] == ["b", "a", "c"]
        assert "a" in registry

    def test_duplicate_name_rejected(self) -> None:
        registry = ToolRegistry()
        registry.register(_make_tool("a"))
        with pytest.raises(ValueError, match="already registered"):
            registry.register(_make_tool("a"))

    def test_get_unknown(self) -> None:
        with pytest.raises(UnknownToolError):
            ToolRegistry().get("missing")

    async def test_invoke_routes_to_tool(self) -> None:
        registry = ToolRegistry()
        tool_a = _make_tool("a", "from a")
        tool_b = _make_tool("b", "from b")
        registry.register(tool_a)
        registry.register(tool_b)

        args = ToolArguments({"x": 1})
        result = await registry.invoke("b", args)

        assert result.content[0].text == "from b"
        tool_b.run.assert_awaited_once_with(args)
        tool_a.run.assert_not_awaited()

    async def test_invoke_unknown(self) -> None:
        with pytest.raises(UnknownToolError, match="Unknown tool: ghost"):
            await ToolRegistry().invoke("ghost", ToolArguments())

    async def test_invoke_propagates_tool_errors(self) -> None:
        registry = ToolRegistry()
        tool = _make_tool("a")
        tool.run = AsyncMock(side_effect=RuntimeError("boom"))
        registry.register(tool)
        with pytest.raises(RuntimeError, match="boom"):
            await registry.invoke("a", ToolArguments())


class TestToolProtocol:
    def test_text_to_speech_satisfies_protocol(
        self, synthesizer: MagicMock, settings: Settings
    ) -> None:
        assert isinstance(TextToSpeechTool(synthesizer, settings), Tool)
