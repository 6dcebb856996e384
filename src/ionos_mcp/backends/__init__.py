"""HTTP clients for the IONOS API surfaces."""

from .client import IonosClient, IonosClients
from .client_protocol import IonosClientProtocol

__all__ = ["IonosClient", "IonosClients", "IonosClientProtocol"]
