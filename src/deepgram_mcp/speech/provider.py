"""SpeechSynthesizer protocol: the text-to-speech collaborator interface.

The text-to-speech tool only depends on this protocol, so tests and
alternative providers can stand in for :class:`DeepgramClient`.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


class SynthesisError(Exception):
    """The speech provider could not produce audio."""


@runtime_checkable
class SpeechSynthesizer(Protocol):
    """Turns text into encoded audio bytes."""

    async def synthesize(self, text: str) -> bytes:
        """Return the audio payload for *text*, raising :class:`SynthesisError` on failure."""
        ...
