"""DeepgramClient: calls the Deepgram ``/v1/speak`` text-to-speech endpoint."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import httpx

from deepgram_mcp.speech.provider import SynthesisError

if TYPE_CHECKING:
    from deepgram_mcp.config import Settings

logger = logging.getLogger(__name__)

SPEAK_PATH = "/v1/speak"


class DeepgramClient:
    """Async Deepgram text-to-speech client.

    Satisfies the :class:`~deepgram_mcp.speech.provider.SpeechSynthesizer` protocol.

    Usage::

        async with DeepgramClient(settings) as client:
            audio = await client.synthesize("Hello there")
    """

    def __init__(self, settings: Settings) -> None:
        self._settings = settings
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> DeepgramClient:
        self._client = httpx.AsyncClient(
            base_url=self._settings.base_url.rstrip("/"),
            headers={
                "Authorization": f"Token {self._settings.api_key}",
                "Content-Type": "application/json",
            },
            timeout=self._settings.request_timeout,
        )
        return self

    async def __aexit__(self, *_: object) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None

    def _http(self) -> httpx.AsyncClient:
        if self._client is None:
            msg = "DeepgramClient must be used as an async context manager"
            raise RuntimeError(msg)
        return self._client

    async def synthesize(self, text: str) -> bytes:
        """POST *text* to Deepgram and return the raw audio bytes."""
        logger.debug("Requesting speech for %d characters (model=%s)", len(text), self._settings.model)
        try:
            response = await self._http().post(
                SPEAK_PATH,
                params={"model": self._settings.model},
                json={"text": text},
            )
        except httpx.HTTPError as exc:
            raise SynthesisError(str(exc) or type(exc).__name__) from exc

        if not response.is_success:
            raise SynthesisError(f"Deepgram API error: {response.text}")

        return response.content
