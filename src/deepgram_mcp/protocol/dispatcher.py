"""RequestDispatcher: maps a JSON-RPC method to its handler.

Every handler either returns a result payload or raises a
:class:`~deepgram_mcp.protocol.errors.ServerError`. :meth:`RequestDispatcher._run`
turns that into an explicit :class:`Ok` / :class:`Err` value, and
:meth:`RequestDispatcher._to_response` is the one place an outcome becomes a
wire response. Nothing raised by a handler escapes :meth:`dispatch`.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from opentelemetry import trace

from deepgram_mcp.protocol.errors import INTERNAL_ERROR, ServerError, UnknownMethodError
from deepgram_mcp.protocol.models import (
    InitializeResult,
    JsonRpcError,
    JsonRpcRequest,
    JsonRpcResponse,
    ServerInfo,
)
from deepgram_mcp.tools.arguments import ToolArguments, extract_object, extract_str
from deepgram_mcp.utils.telemetry import (
    ATTR_ERROR,
    ATTR_METHOD,
    ATTR_REQUEST_ID,
    ATTR_TOOL_NAME,
    get_tracer,
)

if TYPE_CHECKING:
    from deepgram_mcp.tools.registry import ToolRegistry

logger = logging.getLogger(__name__)
_tracer = get_tracer(__name__)

Handler = Callable[[JsonRpcRequest], Awaitable[dict[str, Any]]]


@dataclass(frozen=True)
class Ok:
    """A handler finished with a result payload."""

    value: dict[str, Any]


@dataclass(frozen=True)
class Err:
    """A handler failed; ``code`` and ``message`` go on the wire."""

    code: int
    message: str
    data: Any = None

    @classmethod
    def from_exception(cls, exc: ServerError) -> Err:
        return cls(code=exc.code, message=str(exc))


Outcome = Ok | Err


class RequestDispatcher:
    """Stateless router from method names to handlers.

    Usage::

        dispatcher = RequestDispatcher(registry)
        response = await dispatcher.dispatch(request)
    """

    def __init__(self, registry: ToolRegistry, *, server_info: ServerInfo | None = None) -> None:
        self._registry = registry
        self._server_info = server_info or ServerInfo()
        self._handlers: dict[str, Handler] = {
            "initialize": self._handle_initialize,
            "tools/list": self._handle_list_tools,
            "tools/call": self._handle_call_tool,
        }

    @property
    def methods(self) -> list[str]:
        """The method names this dispatcher answers."""
        return list(self._handlers)

    async def dispatch(self, request: JsonRpcRequest) -> JsonRpcResponse:
        """Handle *request* and return its response; never raises."""
        with _tracer.start_as_current_span("mcp.dispatch") as span:
            span.set_attribute(ATTR_METHOD, request.method)
            if request.has_id and request.id is not None:
                span.set_attribute(ATTR_REQUEST_ID, str(request.id))

            logger.debug("Dispatching %s (id=%r)", request.method, request.id)
            outcome = await self._run(request)

            span.set_attribute(ATTR_ERROR, isinstance(outcome, Err))
            return self._to_response(request, outcome)

    async def _run(self, request: JsonRpcRequest) -> Outcome:
        """Invoke the handler for *request* and capture its outcome."""
        handler = self._handlers.get(request.method)
        try:
            if handler is None:
                raise UnknownMethodError(request.method)
            return Ok(await handler(request))
        except ServerError as exc:
            return Err.from_exception(exc)
        except Exception as exc:
            logger.exception("Unhandled error while handling %s", request.method)
            return Err(code=INTERNAL_ERROR, message=str(exc) or type(exc).__name__)

    @staticmethod
    def _to_response(request: JsonRpcRequest, outcome: Outcome) -> JsonRpcResponse:
        """Map an outcome onto the JSON-RPC response envelope."""
        if isinstance(outcome, Ok):
            return JsonRpcResponse.success(request, outcome.value)

        logger.warning("Request %s (id=%r) failed: %s", request.method, request.id, outcome.message)
        return JsonRpcResponse.failure(
            request,
            JsonRpcError(code=outcome.code, message=outcome.message, data=outcome.data),
        )

    # ------------------------------------------------------------------
    # Handlers
    # ------------------------------------------------------------------

    async def _handle_initialize(self, request: JsonRpcRequest) -> dict[str, Any]:
        return InitializeResult(server_info=self._server_info).model_dump(by_alias=True)

    async def _handle_list_tools(self, request: JsonRpcRequest) -> dict[str, Any]:
        return {"tools": [d.to_wire() for d in self._registry.list_tools()]}

    async def _handle_call_tool(self, request: JsonRpcRequest) -> dict[str, Any]:
        params = extract_object(request.params, "params")
        name = extract_str(params.get("name"), "name")
        arguments = extract_object(params.get("arguments"), "arguments", default_empty=True)

        trace.get_current_span().set_attribute(ATTR_TOOL_NAME, name)
        result = await self._registry.invoke(name, ToolArguments(arguments))
        return result.model_dump()
