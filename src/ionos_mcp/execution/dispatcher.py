import asyncio
import json
import logging
from typing import Any, Mapping

import requests
from mcp.shared.exceptions import McpError
from mcp.types import METHOD_NOT_FOUND, ErrorData

from ..backends import IonosClients
from ..capabilities import CapabilityCatalog
from .handlers import HANDLERS, Handler
from .models import InvocationResult

logger = logging.getLogger(__name__)

REMOTE_ERROR_PREFIX = "IONOS API error: "


class UnknownCapabilityError(McpError):
    """Raised when a tool name has no handler; reported to the host as METHOD_NOT_FOUND."""

    def __init__(self, capability_name: str) -> None:
        self.capability_name = capability_name
        super().__init__(ErrorData(code=METHOD_NOT_FOUND, message=f"Unknown tool: {capability_name}"))


class Dispatcher:
    """Runs a named tool against the IONOS API and wraps the outcome in an envelope.

    Remote failures (any ``requests.RequestException``) become ``is_error``
    envelopes. Unknown tool names raise ``UnknownCapabilityError``; every other
    exception propagates to the transport unchanged.
    """

    def __init__(
        self,
        catalog: CapabilityCatalog,
        clients: IonosClients,
        handlers: Mapping[str, Handler] = HANDLERS,
    ) -> None:
        catalog_names = set(catalog.names())
        handler_names = set(handlers)
        if catalog_names != handler_names:
            missing_handlers = sorted(catalog_names - handler_names)
            undeclared_handlers = sorted(handler_names - catalog_names)
            raise ValueError(
                "catalog and handlers disagree: "
                f"missing handlers={missing_handlers}, undeclared handlers={undeclared_handlers}"
            )

        self.catalog = catalog
        self.clients = clients
        self._handlers = dict(handlers)

    async def invoke(self, capability_name: str, arguments: Any = None) -> InvocationResult:
        handler = self._handlers.get(capability_name)
        if handler is None:
            raise UnknownCapabilityError(capability_name)

        if arguments is None:
            arguments = {}

        try:
            body = await asyncio.to_thread(handler, self.clients, arguments)
        except requests.RequestException as exc:
            message = describe_remote_error(exc)
            logger.warning("%s failed: %s", capability_name, message)
            return InvocationResult.error(f"{REMOTE_ERROR_PREFIX}{message}")

        return InvocationResult.text(format_response_body(body))


def format_response_body(body: Any) -> str:
    return json.dumps(body, indent=2, ensure_ascii=False)


def describe_remote_error(exc: requests.RequestException) -> str:
    """Prefer the ``message`` of the API error body, else the transport error text."""
    message = _message_from_response(exc.response)
    if message:
        return message
    return str(exc) or exc.__class__.__name__


def _message_from_response(response: requests.Response | None) -> str | None:
    if response is None:
        return None
    try:
        body = response.json()
    except ValueError:
        return None

    # IONOS answers with either an error object or a list of them
    if isinstance(body, list) and body:
        body = body[0]
    if isinstance(body, dict):
        message = body.get("message")
        if message:
            return str(message)
    return None
