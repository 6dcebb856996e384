"""Tool handlers, dispatcher, and result envelope."""

from .dispatcher import Dispatcher, UnknownCapabilityError, describe_remote_error, format_response_body
from .handlers import HANDLERS, Handler
from .models import InvocationResult, TextContent

__all__ = [
    "Dispatcher",
    "HANDLERS",
    "Handler",
    "InvocationResult",
    "TextContent",
    "UnknownCapabilityError",
    "describe_remote_error",
    "format_response_body",
]
