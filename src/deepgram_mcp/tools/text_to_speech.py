"""The ``deepgram_text_to_speech`` tool: synthesize text and save it to disk."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from deepgram_mcp.protocol.errors import ToolExecutionError
from deepgram_mcp.protocol.models import CallToolResult
from deepgram_mcp.speech.provider import SynthesisError
from deepgram_mcp.tools.models import ToolDescriptor, ToolParameter

if TYPE_CHECKING:
    from deepgram_mcp.config import Settings
    from deepgram_mcp.speech.provider import SpeechSynthesizer
    from deepgram_mcp.tools.arguments import ToolArguments

logger = logging.getLogger(__name__)

TOOL_NAME = "deepgram_text_to_speech"
DESCRIPTION = (
    "Generate an audio file from text using Deepgram's text-to-speech API. "
    "The audio will be saved as an MP3 file."
)


class TextToSpeechTool:
    """Generates speech through a :class:`SpeechSynthesizer` and writes the audio file."""

    def __init__(self, synthesizer: SpeechSynthesizer, settings: Settings) -> None:
        self._synthesizer = synthesizer
        self._settings = settings
        self._descriptor = ToolDescriptor.from_parameters(
            TOOL_NAME,
            DESCRIPTION,
            [
                ToolParameter(
                    name="text",
                    description="The text to convert to speech",
                    required=True,
                ),
                ToolParameter(
                    name="filename",
                    description=(
                        "The filename for the output audio file "
                        f"(optional, defaults to '{settings.default_filename}')"
                    ),
                    default=settings.default_filename,
                ),
            ],
        )

    @property
    def descriptor(self) -> ToolDescriptor:
        return self._descriptor

    async def run(self, arguments: ToolArguments) -> CallToolResult:
        text = arguments.require_str("text")
        filename = arguments.optional_str("filename", self._settings.default_filename)

        try:
            audio = await self._synthesizer.synthesize(text)
        except SynthesisError as exc:
            raise ToolExecutionError(TOOL_NAME, str(exc)) from exc

        target = self._settings.output_dir / filename
        try:
            target.write_bytes(audio)
        except OSError as exc:
            raise ToolExecutionError(TOOL_NAME, f"Cannot write {target}: {exc}") from exc

        logger.info("Wrote %d bytes of audio to %s", len(audio), target)
        return CallToolResult.from_text(
            f"Successfully generated audio file '{filename}' from text: \"{text}\""
        )
