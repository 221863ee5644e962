"""Tests for DeepgramClient with mocked httpx."""

from __future__ import annotations

import json
from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from deepgram_mcp.config import Settings
from deepgram_mcp.speech.deepgram import DeepgramClient
from deepgram_mcp.speech.provider import SpeechSynthesizer, SynthesisError


def _response(status: int = 200, content: bytes = b"audio", text: str = "") -> MagicMock:
    resp = MagicMock()
    resp.status_code = status
    resp.is_success = 200 <= status < 300
    resp.content = content
    resp.text = text
    return resp


def _mock_httpx_client(response: MagicMock | None = None) -> MagicMock:
    client = AsyncMock()
    client.post = AsyncMock(return_value=response or _response())
    client.aclose = AsyncMock()
    return client


@pytest.fixture
def deepgram_settings() -> Settings:
    return Settings(api_key="dg-secret")


class TestDeepgramClient:
    def test_satisfies_protocol(self, deepgram_settings: Settings) -> None:
        assert isinstance(DeepgramClient(deepgram_settings), SpeechSynthesizer)

    async def test_client_configuration(self, deepgram_settings: Settings) -> None:
        mock = _mock_httpx_client()
        with patch(
            "deepgram_mcp.speech.deepgram.httpx.AsyncClient", return_value=mock
        ) as client_cls:
            async with DeepgramClient(deepgram_settings):
                pass

        kwargs = client_cls.call_args.kwargs
        assert kwargs["base_url"] == "https://api.deepgram.com"
        assert kwargs["headers"]["Authorization"] == "Token dg-secret"
        assert kwargs["headers"]["Content-Type"] == "application/json"
        assert kwargs["timeout"] is None
        mock.aclose.assert_awaited_once()

    async def test_synthesize_posts_text(self, deepgram_settings: Settings) -> None:
        mock = _mock_httpx_client(_response(content=b"mp3-bytes"))
        with patch("deepgram_mcp.speech.deepgram.httpx.AsyncClient", return_value=mock):
            async with DeepgramClient(deepgram_settings) as client:
                audio = await client.synthesize("Hello")

        assert audio == b"mp3-bytes"
        mock.post.assert_awaited_once_with(
            "/v1/speak",
            params={"model": "aura-asteria-en"},
            json={"text": "Hello"},
        )

    async def test_model_from_settings(self) -> None:
        settings = Settings(api_key="k", model="aura-luna-en", request_timeout=10.0)
        mock = _mock_httpx_client()
        with patch(
            "deepgram_mcp.speech.deepgram.httpx.AsyncClient", return_value=mock
        ) as client_cls:
            async with DeepgramClient(settings) as client:
                await client.synthesize("x")

        assert mock.post.call_args.kwargs["params"] == {"model": "aura-luna-en"}
        assert client_cls.call_args.kwargs["timeout"] == 10.0

    async def test_error_status_uses_body(self, deepgram_settings: Settings) -> None:
        mock = _mock_httpx_client(_response(status=503, text="503 Service Unavailable"))
        with patch("deepgram_mcp.speech.deepgram.httpx.AsyncClient", return_value=mock):
            async with DeepgramClient(deepgram_settings) as client:
                with pytest.raises(SynthesisError, match="Deepgram API error: 503"):
                    await client.synthesize("Hello")

    async def test_network_error(self, deepgram_settings: Settings) -> None:
        mock = _mock_httpx_client()
        mock.post = AsyncMock(side_effect=httpx.ConnectError("connection refused"))
        with patch("deepgram_mcp.speech.deepgram.httpx.AsyncClient", return_value=mock):
            async with DeepgramClient(deepgram_settings) as client:
                with pytest.raises(SynthesisError, match="connection refused"):
                    await client.synthesize("Hello")

    async def test_requires_context_manager(self, deepgram_settings: Settings) -> None:
        with pytest.raises(RuntimeError, match="async context manager"):
            await DeepgramClient(deepgram_settings).synthesize("Hello")

    async def test_against_mock_transport(self, deepgram_settings: Settings) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, content=b"real-bytes")

        real_client_cls = httpx.AsyncClient

        def make_client(**kwargs: object) -> httpx.AsyncClient:
            return real_client_cls(transport=httpx.MockTransport(handler), **kwargs)  # type: ignore[arg-type]

        with patch("deepgram_mcp.speech.deepgram.httpx.AsyncClient", side_effect=make_client):
            async with DeepgramClient(deepgram_settings) as client:
                audio = await client.synthesize("Hi there")

        assert audio == b"real-bytes"
        [request] = seen
        assert request.method == "POST"
        assert request.url.path == "/v1/speak"
        assert request.url.params["model"] == "aura-asteria-en"
        assert request.headers["authorization"] == "Token dg-secret"
        assert json.loads(request.content) == {"text": "Hi there"}
