"""Server assembly: wires settings, the Deepgram client, tools, and the session."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, BinaryIO

from deepgram_mcp import __version__
from deepgram_mcp.protocol.dispatcher import RequestDispatcher
from deepgram_mcp.protocol.models import ServerInfo
from deepgram_mcp.protocol.session import LineReader, SessionStats, StdioSession
from deepgram_mcp.speech.deepgram import DeepgramClient
from deepgram_mcp.tools.registry import ToolRegistry
from deepgram_mcp.tools.text_to_speech import TextToSpeechTool

if TYPE_CHECKING:
    from deepgram_mcp.config import Settings
    from deepgram_mcp.speech.provider import SpeechSynthesizer

logger = logging.getLogger(__name__)

SERVER_NAME = "deepgram-mcp"


def build_registry(synthesizer: SpeechSynthesizer, settings: Settings) -> ToolRegistry:
    """Return the registry holding every tool this server exposes."""
    registry = ToolRegistry()
    registry.register(TextToSpeechTool(synthesizer, settings))
    return registry


def build_dispatcher(synthesizer: SpeechSynthesizer, settings: Settings) -> RequestDispatcher:
    return RequestDispatcher(
        build_registry(synthesizer, settings),
        server_info=ServerInfo(name=SERVER_NAME, version=__version__),
    )


async def serve(settings: Settings, reader: LineReader, writer: BinaryIO) -> SessionStats:
    """Run one session over *reader*/*writer* until end of input."""
    async with DeepgramClient(settings) as client:
        dispatcher = build_dispatcher(client, settings)
        logger.debug("Serving methods: %s", ", ".join(dispatcher.methods))
        return await StdioSession(dispatcher, reader, writer).run()
