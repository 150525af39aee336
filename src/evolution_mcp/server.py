#!/usr/bin/env python3
"""
Evolution API MCP Server
Thin proxy layer that converts MCP tool calls into Evolution API HTTP calls

Runs over STDIO transport using the official MCP SDK. Logging always goes to
stderr because stdout carries the protocol.
"""

import asyncio
import logging
import os
import sys
from typing import List, Optional

# Official MCP SDK
from mcp.server import Server, NotificationOptions
from mcp.server.models import InitializationOptions
import mcp.server.stdio
import mcp.types as types

from . import __version__, tools
from .client import EvolutionClient
from .config import Settings, get_config_summary, load_settings
from .dispatcher import call_tool
from .errors import ConfigurationError

logger = logging.getLogger(__name__)

SERVER_NAME = "evolution-api"


class EvolutionMCPServer:
    """
    MCP server exposing the Evolution API tools

    This server:
    1. Holds one shared EvolutionClient for all tool calls
    2. Serves the fixed tool list on tools/list
    3. Routes tools/call through the dispatcher, which always answers with a
       well-formed CallToolResult
    """

    def __init__(self, settings: Settings, client: Optional[EvolutionClient] = None):
        self.settings = settings
        self.client = client if client is not None else EvolutionClient.from_settings(settings)
        self.server = Server(SERVER_NAME, version=__version__)
        self._register_handlers()

        logger.info(f"📋 Configuration: {get_config_summary(settings)}")

    def _register_handlers(self):
        @self.server.list_tools()
        async def handle_list_tools() -> List[types.Tool]:
            """List all available tools"""
            return tools.list_tools()

        # Registered directly rather than through @server.call_tool() so that an
        # absent argument bag reaches the dispatcher as None and the SDK does not
        # answer schema violations before the dispatcher does.
        self.server.request_handlers[types.CallToolRequest] = self.handle_call_tool

    async def handle_call_tool(self, req: types.CallToolRequest) -> types.ServerResult:
        """Handle tool execution requests"""
        result = await call_tool(req.params.name, req.params.arguments, self.client)
        return types.ServerResult(result)

    async def run(self):
        """Run the MCP server with STDIO transport until the host disconnects"""
        async with mcp.server.stdio.stdio_server() as (read_stream, write_stream):
            logger.info("Evolution API MCP Server running on stdio")
            await self.server.run(
                read_stream,
                write_stream,
                InitializationOptions(
                    server_name=SERVER_NAME,
                    server_version=__version__,
                    capabilities=self.server.get_capabilities(
                        notification_options=NotificationOptions(),
                        experimental_capabilities={}
                    )
                )
            )

    async def cleanup(self):
        """Clean up resources on shutdown"""
        logger.info("🛑 Shutting down Evolution API MCP Server")
        try:
            await self.client.aclose()
            logger.info("✅ HTTP client closed")
        except Exception as e:
            logger.error(f"❌ Error closing HTTP client: {e}")


async def serve(settings: Settings):
    """Create the server, run it and always release the HTTP client"""
    server = EvolutionMCPServer(settings)
    try:
        await server.run()
    finally:
        await server.cleanup()


def configure_logging(level: str):
    # Critical: log to stderr, never stdout, for MCP STDIO
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stderr
    )
    logging.getLogger().setLevel(getattr(logging, level.upper(), logging.INFO))


def main():
    """Main entry point for the Evolution API MCP server"""
    configure_logging(os.getenv("LOG_LEVEL", "INFO"))

    try:
        settings = load_settings()
    except ConfigurationError as e:
        logger.error(f"Error: {e}")
        sys.exit(1)

    configure_logging(settings.LOG_LEVEL)

    try:
        asyncio.run(serve(settings))
    except KeyboardInterrupt:
        logger.info("👋 Server shutdown requested")
    except Exception as e:
        logger.error(f"💥 Fatal error running server: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
