"""JSON-RPC protocol layer: wire models, line codec, and errors.

The dispatcher and session loop live in :mod:`deepgram_mcp.protocol.dispatcher`
and :mod:`deepgram_mcp.protocol.session`.
"""

from deepgram_mcp.protocol.codec import decode, encode, is_blank
from deepgram_mcp.protocol.errors import INTERNAL_ERROR, DecodeError, ServerError, TransportError
from deepgram_mcp.protocol.models import (
    CallToolResult,
    InitializeResult,
    JsonRpcError,
    JsonRpcRequest,
    JsonRpcResponse,
    ServerInfo,
    TextContent,
)

__all__ = [
    "INTERNAL_ERROR",
    "CallToolResult",
    "DecodeError",
    "InitializeResult",
    "JsonRpcError",
    "JsonRpcRequest",
    "JsonRpcResponse",
    "ServerError",
    "ServerInfo",
    "TextContent",
    "TransportError",
    "decode",
    "encode",
    "is_blank",
]
