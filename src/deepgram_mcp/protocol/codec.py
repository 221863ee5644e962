"""Line codec: one JSON-RPC message per line of UTF-8 text."""

from __future__ import annotations

from pydantic import ValidationError

from deepgram_mcp.protocol.errors import DecodeError
from deepgram_mcp.protocol.models import JsonRpcRequest, JsonRpcResponse


def is_blank(line: str | bytes) -> bool:
    """Return ``True`` for empty or whitespace-only lines."""
    return not line.strip()


def decode(line: str | bytes) -> JsonRpcRequest:
    """Parse a single line into a :class:`JsonRpcRequest`.

    Raises:
        DecodeError: If the line is not UTF-8, not JSON, or not a request.
    """
    if isinstance(line, bytes):
        try:
            line = line.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise DecodeError(str(exc)) from exc

    try:
        return JsonRpcRequest.model_validate_json(line.strip())
    except ValidationError as exc:
        raise DecodeError(_summarize(exc)) from exc


def encode(response: JsonRpcResponse) -> str:
    """Serialize *response* as compact single-line JSON (no terminator)."""
    # JSON escapes control characters inside strings, so the output never
    # contains a raw newline.
    return response.model_dump_json(by_alias=True)


def _summarize(exc: ValidationError) -> str:
    parts: list[str] = []
    for err in exc.errors(include_url=False):
        loc = ".".join(str(p) for p in err["loc"])
        parts.append(f"{loc}: {err['msg']}" if loc else err["msg"])
    return "; ".join(parts)
