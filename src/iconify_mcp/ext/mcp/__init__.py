"""MCP protocol integration (FastMCP)."""

from .bridge import get_required_params, get_tool_properties, resource_to_handler, tool_to_handler
from .server import MCPServer, ToolServer, Transport, create_mcp_server, serve_mcp

__all__ = [
    "MCPServer",
    "ToolServer",
    "Transport",
    "create_mcp_server",
    "get_required_params",
    "get_tool_properties",
    "resource_to_handler",
    "serve_mcp",
    "tool_to_handler",
]
