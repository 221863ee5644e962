"""Tool catalogue: descriptors, argument extraction, registry, and tools."""

from deepgram_mcp.tools.arguments import ToolArguments, extract_object, extract_str
from deepgram_mcp.tools.base import Tool
from deepgram_mcp.tools.models import ToolDescriptor, ToolParameter
from deepgram_mcp.tools.registry import ToolRegistry
from deepgram_mcp.tools.text_to_speech import TextToSpeechTool

__all__ = [
    "TextToSpeechTool",
    "Tool",
    "ToolArguments",
    "ToolDescriptor",
    "ToolParameter",
    "ToolRegistry",
    "extract_object",
    "extract_str",
]
