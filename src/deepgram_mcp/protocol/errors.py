"""Shared error types for the protocol layer.

Every error a handler can raise derives from :class:`ServerError` and carries
the JSON-RPC ``code`` it is reported with.
"""

INTERNAL_ERROR = -32603


class ServerError(Exception):
    """Base error for all server-side failures."""

    code: int = INTERNAL_ERROR


class DecodeError(ServerError):
    """A line could not be decoded into a JSON-RPC request."""

    def __init__(self, detail: str = "") -> None:
        self.detail = detail
        super().__init__("Failed to parse request" + (f": {detail}" if detail else ""))


class TransportError(ServerError):
    """Reading from or writing to the session streams failed."""


class UnknownMethodError(ServerError):
    """The request named a method the server does not implement."""

    def __init__(self, method: str) -> None:
        self.method = method
        super().__init__(f"Unknown method: {method}")


class UnknownToolError(ServerError):
    """Requested tool does not exist in the registry."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown tool: {name}")


class MissingParameterError(ServerError):
    """A required tool argument was not supplied."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Missing '{name}' parameter")


class TypeMismatchError(ServerError):
    """An argument was supplied with the wrong JSON type."""

    def __init__(self, name: str, expected: str) -> None:
        self.name = name
        self.expected = expected
        super().__init__(f"Parameter '{name}' must be of type {expected}")


class ToolExecutionError(ServerError):
    """A tool invocation failed in its collaborator (network, API, or disk)."""

    def __init__(self, name: str, detail: str = "") -> None:
        self.name = name
        self.detail = detail
        super().__init__(f"Tool execution failed: {name}" + (f": {detail}" if detail else ""))
