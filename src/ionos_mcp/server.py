import asyncio
import logging
import os
import signal
import sys
from typing import Any

from dotenv import load_dotenv
from mcp import types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server
from mcp.shared.exceptions import McpError

from . import __version__
from .backends import IonosClients
from .capabilities import CapabilityCatalog, CapabilityDescriptor
from .config import ServerConfig
from .execution import Dispatcher

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

load_dotenv()

SERVER_NAME = "ionos-mcp-server"


class IonosMCPServer:
    def __init__(
        self,
        config: ServerConfig,
        clients: IonosClients | None = None,
        catalog: CapabilityCatalog | None = None,
    ) -> None:
        self.config = config
        self.server: Server = Server(SERVER_NAME, version=__version__)

        self._setup_runtime(clients, catalog)
        self._register_handlers()

    def _setup_runtime(self, clients: IonosClients | None, catalog: CapabilityCatalog | None) -> None:
        self.clients = clients or IonosClients.from_config(self.config)
        self.capability_catalog = catalog or CapabilityCatalog()
        self.dispatcher = Dispatcher(catalog=self.capability_catalog, clients=self.clients)

    def _register_handlers(self) -> None:
        self.server.list_tools()(self.list_tools)
        # Registered directly rather than through Server.call_tool(): that
        # decorator validates arguments locally and turns every exception,
        # McpError included, into an isError result.
        self.server.request_handlers[types.CallToolRequest] = self._handle_call_tool

        for name in self.capability_catalog.names():
            logger.info("Registered tool: %s", name)

    async def list_tools(self) -> list[types.Tool]:
        return [self._descriptor_to_tool(descriptor) for descriptor in self.capability_catalog.list()]

    async def call_tool(self, name: str, arguments: dict[str, Any] | None = None) -> types.CallToolResult:
        result = await self.dispatcher.invoke(name, arguments)
        return result.to_call_tool_result()

    async def _handle_call_tool(self, request: types.CallToolRequest) -> types.ServerResult:
        name = request.params.name
        try:
            result = await self.call_tool(name, request.params.arguments)
        except McpError:
            raise
        except Exception:
            logger.exception("call_tool internal exception: %s", name)
            raise
        return types.ServerResult(result)

    @staticmethod
    def _descriptor_to_tool(descriptor: CapabilityDescriptor) -> types.Tool:
        return types.Tool(
            name=descriptor.name,
            description=descriptor.description,
            inputSchema=descriptor.input_schema.to_json_schema(),
            annotations=types.ToolAnnotations(
                readOnlyHint=descriptor.read_only,
                destructiveHint=descriptor.destructive,
            ),
        )

    def signal_handler(self, sig: int, frame: Any = None) -> None:
        """Handle SIGINT: close the clients and exit with status 0.

        The stdio transport reads stdin in a worker thread that cannot be
        cancelled, so waiting for the session to unwind would block until the
        host writes again.
        """
        logger.info("Received signal %s, initiating graceful shutdown...", sig)
        self.clients.close()
        logger.info("Server has shut down.")
        sys.stdout.flush()
        logging.shutdown()
        os._exit(0)

    async def _run_server(self) -> None:
        async with stdio_server() as (read_stream, write_stream):
            logger.info("IONOS MCP server running on stdio")
            await self.server.run(
                read_stream,
                write_stream,
                self.server.create_initialization_options(),
            )

    async def run(self) -> None:
        loop = asyncio.get_running_loop()
        loop.add_signal_handler(signal.SIGINT, self.signal_handler, signal.SIGINT)

        try:
            logger.info("Starting IONOS MCP server...")
            await self._run_server()
        except Exception as exc:
            logger.error("Server error: %s", exc)
            raise
        finally:
            loop.remove_signal_handler(signal.SIGINT)
            self.clients.close()
            logger.info("Server has shut down.")


def main() -> None:
    config = ServerConfig()
    logging.getLogger().setLevel(config.log_level)
    server = IonosMCPServer(config)
    asyncio.run(server.run())


if __name__ == "__main__":
    main()
