"""Typed extraction of loosely-typed JSON values.

Request ``params`` and tool ``arguments`` arrive as arbitrary JSON. The
helpers here pull out exactly the shape a caller expects (string, object, or
absent) and raise a specific error otherwise, so the dispatcher and the tools
never coerce values ad hoc.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from deepgram_mcp.protocol.errors import MissingParameterError, TypeMismatchError


def extract_object(value: Any, field: str, *, default_empty: bool = False) -> dict[str, Any]:
    """Return *value* as a JSON object.

    ``None`` (absent) yields an empty dict when *default_empty* is set and
    :class:`MissingParameterError` otherwise.
    """
    if value is None:
        if default_empty:
            return {}
        raise MissingParameterError(field)
    if not isinstance(value, dict):
        raise TypeMismatchError(field, "object")
    return value


def extract_str(value: Any, field: str) -> str:
    """Return *value* as a string, raising if absent or not a string."""
    if value is None:
        raise MissingParameterError(field)
    if not isinstance(value, str):
        raise TypeMismatchError(field, "string")
    return value


class ToolArguments(Mapping[str, Any]):
    """Read-only view over the arguments of a single tool call.

    Keys the tool does not ask for are ignored.
    """

    def __init__(self, values: Mapping[str, Any] | None = None) -> None:
        self._values: dict[str, Any] = dict(values or {})

    def __getitem__(self, key: str) -> Any:
        return self._values[key]

    def __iter__(self):  # type: ignore[override]
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"ToolArguments({self._values!r})"

    def require_str(self, name: str) -> str:
        """Extract a required string argument."""
        return extract_str(self._values.get(name), name)

    def optional_str(self, name: str, default: str) -> str:
        """Extract an optional string argument, falling back to *default*."""
        value = self._values.get(name)
        if value is None:
            return default
        return extract_str(value, name)
