"""MCP server wiring: list_tools, call_tool and the stdio runner."""

import logging
from typing import Any

from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool

from kotlin_senior.config import Settings
from kotlin_senior.tools.dispatcher import Dispatcher

logger = logging.getLogger(__name__)


def create_server(dispatcher: Dispatcher, settings: Settings) -> Server:
    """
    Build an MCP server exposing every registered tool.

    Args:
        dispatcher: Dispatcher over a frozen registry
        settings: Server identity settings

    Returns:
        Low-level MCP server with tool handlers attached
    """
    server = Server(settings.server_name, version=settings.server_version)

    @server.list_tools()
    async def list_tools() -> list[Tool]:
        return [
            Tool(
                name=definition.name,
                description=definition.description,
                inputSchema=definition.input_schema(),
            )
            for definition in dispatcher.registry.definitions()
        ]

    # Required arguments are checked by the dispatcher, not the SDK
    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: dict[str, Any] | None) -> list[TextContent]:
        result = dispatcher.call(name, arguments or {})
        if not result.success:
            logger.warning(f"Tool {name} failed: {result.text}")
            raise result.error

        logger.info(f"Tool {name} completed ({len(result.text)} chars)")
        return [TextContent(type="text", text=result.text)]

    return server


async def run_stdio(server: Server) -> None:
    """Run the MCP server over stdio."""
    async with stdio_server() as (read_stream, write_stream):
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options(),
        )
