"""MCP models: JSON-RPC 2.0 envelopes and MCP result payloads.

Implements the message format used by the Model Context Protocol for the
``initialize``, ``tools/list`` and ``tools/call`` methods.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import (
    BaseModel,
    Field,
    SerializerFunctionWrapHandler,
    StrictInt,
    StrictStr,
    model_serializer,
    model_validator,
)

JSONRPC_VERSION = "2.0"

# NaN and infinities are not JSON and would not echo back unchanged.
FiniteFloat = Annotated[float, Field(strict=True, allow_inf_nan=False)]

RequestId = StrictStr | StrictInt | FiniteFloat | None

# ---------------------------------------------------------------------------
# JSON-RPC 2.0 envelope
# ---------------------------------------------------------------------------


class JsonRpcRequest(BaseModel):
    """A JSON-RPC 2.0 request message as read from the wire."""

    jsonrpc: Literal["2.0"]
    id: RequestId = None
    method: StrictStr
    params: Any = None

    @property
    def has_id(self) -> bool:
        """Whether the request carried an ``id`` member (even ``null``)."""
        return "id" in self.model_fields_set


class JsonRpcError(BaseModel):
    """A JSON-RPC 2.0 error object."""

    code: int
    message: str
    data: Any = None


class JsonRpcResponse(BaseModel):
    """A JSON-RPC 2.0 response message.

    Exactly one of ``result`` and ``error`` is set. The unset member is left
    out of the serialized form, and so is ``id`` when the originating request
    had none.
    """

    jsonrpc: Literal["2.0"] = JSONRPC_VERSION
    id: RequestId = None
    result: dict[str, Any] | None = None
    error: JsonRpcError | None = None

    @model_validator(mode="after")
    def _exactly_one_outcome(self) -> JsonRpcResponse:
        if (self.result is None) == (self.error is None):
            msg = "a response carries exactly one of 'result' or 'error'"
            raise ValueError(msg)
        return self

    @model_serializer(mode="wrap")
    def _serialize(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        data: dict[str, Any] = handler(self)
        if "id" not in self.model_fields_set:
            data.pop("id", None)
        data.pop("error" if self.error is None else "result", None)
        return data

    @classmethod
    def success(cls, request: JsonRpcRequest, result: dict[str, Any]) -> JsonRpcResponse:
        """Build a result response correlated with *request*."""
        return cls(result=result, **_correlation(request))

    @classmethod
    def failure(cls, request: JsonRpcRequest, error: JsonRpcError) -> JsonRpcResponse:
        """Build an error response correlated with *request*."""
        return cls(error=error, **_correlation(request))


def _correlation(request: JsonRpcRequest) -> dict[str, Any]:
    return {"id": request.id} if request.has_id else {}


# ---------------------------------------------------------------------------
# MCP-specific payloads
# ---------------------------------------------------------------------------


class ServerInfo(BaseModel):
    """Name and version advertised in the ``initialize`` result."""

    name: str = "deepgram-mcp"
    version: str = "0.1.0"


class InitializeResult(BaseModel):
    """The static ``initialize`` result."""

    model_config = {"populate_by_name": True}

    protocol_version: str = Field(default="2024-11-05", alias="protocolVersion")
    capabilities: dict[str, Any] = Field(default_factory=lambda: {"tools": {}})
    server_info: ServerInfo = Field(default_factory=ServerInfo, alias="serverInfo")


class TextContent(BaseModel):
    """Plain text content part of a tool result."""

    type: Literal["text"] = "text"
    text: str


class CallToolResult(BaseModel):
    """The result of a successful ``tools/call``."""

    content: list[TextContent] = []

    @classmethod
    def from_text(cls, text: str) -> CallToolResult:
        """Create a result with a single text content part."""
        return cls(content=[TextContent(text=text)])
