"""Shared fixtures: settings pointed at a temp dir and a stubbed synthesizer."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

from deepgram_mcp.config import Settings
from deepgram_mcp.protocol.dispatcher import RequestDispatcher
from deepgram_mcp.server import build_dispatcher


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(api_key="test-key", output_dir=tmp_path)


@pytest.fixture
def synthesizer() -> MagicMock:
    synth = MagicMock()
    synth.synthesize = AsyncMock(return_value=b"ID3-fake-audio")
    return synth


@pytest.fixture
def dispatcher(synthesizer: MagicMock, settings: Settings) -> RequestDispatcher:
    return build_dispatcher(synthesizer, settings)
