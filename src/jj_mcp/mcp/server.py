"""
MCP server adapter.

Binds a ToolService to an MCP server speaking JSON-RPC over stdio. Every
call produces exactly one text content block; calls rejected before running
(unknown tool, invalid parameters) are raised so the SDK reports them as
error results.
"""

import logging
from typing import Any, Dict, List, Optional

import mcp.types as types
from mcp.server import Server
from mcp.server.stdio import stdio_server

from jj_mcp import __version__
from jj_mcp.mcp.tools.errors import ToolInvocationError
from jj_mcp.mcp.tools.service import ToolService

logger = logging.getLogger(__name__)

SERVER_NAME = "jj-mcp-server"


class JJMCPServer:
    """MCP server exposing the jj tool set."""

    def __init__(self, service: ToolService, name: str = SERVER_NAME, version: str = __version__):
        """
        Initialize the server.

        Args:
            service: The tool service that executes calls
            name: Server name reported during the MCP handshake
            version: Server version reported during the MCP handshake
        """
        self.service = service
        self.server = Server(name, version=version)
        self._register_handlers()

    def _register_handlers(self) -> None:
        @self.server.list_tools()
        async def _list_tools() -> List[types.Tool]:
            return await self.list_tools()

        @self.server.call_tool()
        async def _call_tool(name: str, arguments: Optional[Dict[str, Any]]) -> List[types.TextContent]:
            return await self.call_tool(name, arguments)

    async def list_tools(self) -> List[types.Tool]:
        """Describe every registered tool for capability discovery."""
        return [
            types.Tool(
                name=definition["name"],
                description=definition["description"],
                inputSchema=definition["inputSchema"],
            )
            for definition in self.service.get_tool_definitions()
        ]

    async def call_tool(self, name: str, arguments: Optional[Dict[str, Any]]) -> List[types.TextContent]:
        """
        Run a tool and return its output as a single text block.

        Raises:
            ToolInvocationError: If the call was rejected before the tool ran
        """
        result = await self.service.execute_tool(name, arguments)
        if not result.success:
            raise ToolInvocationError(result.error or f"Tool '{name}' failed")

        text = self.service.formatter.to_text(result)
        return [types.TextContent(type="text", text=text)]

    async def run(self) -> None:
        """Serve requests over stdio until the client disconnects."""
        async with stdio_server() as (read_stream, write_stream):
            logger.info(f"{SERVER_NAME} running on stdio with {len(self.service.registry)} tools")
            await self.server.run(
                read_stream,
                write_stream,
                self.server.create_initialization_options(),
            )
