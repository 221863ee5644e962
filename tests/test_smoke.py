"""Smoke test to verify the project scaffolding works."""

from __future__ import annotations


def test_import() -> None:
    import deepgram_mcp

    assert deepgram_mcp.__version__ == "0.1.0"


def test_cli_entrypoint() -> None:
    from deepgram_mcp.cli import main

    assert callable(main)


def test_protocol_exports() -> None:
    from deepgram_mcp.protocol import (
        INTERNAL_ERROR,
        JsonRpcRequest,
        JsonRpcResponse,
        decode,
        encode,
    )

    assert INTERNAL_ERROR == -32603
    assert JsonRpcRequest is not None
    assert JsonRpcResponse is not None
    assert callable(decode)
    assert callable(encode)
