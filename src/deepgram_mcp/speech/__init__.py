"""Speech synthesis collaborators."""

from deepgram_mcp.speech.deepgram import DeepgramClient
from deepgram_mcp.speech.provider import SpeechSynthesizer, SynthesisError

__all__ = [
    "DeepgramClient",
    "SpeechSynthesizer",
    "SynthesisError",
]
