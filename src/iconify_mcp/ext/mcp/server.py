"""MCP server for the Iconify handlers.

Example:
    >>> from iconify_mcp.ext.mcp import serve_mcp
    >>> serve_mcp(registry, transport="sse", port=8080)
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Literal

from fastmcp import FastMCP

from .bridge import get_required_params, get_tool_properties, resource_to_handler, tool_to_handler

if TYPE_CHECKING:
    from iconify_mcp.foundation.registry import HandlerRegistry

Transport = Literal["stdio", "sse", "streamable-http"]

logger = logging.getLogger("iconify_mcp.server")


# ═══════════════════════════════════════════════════════════════════════════════
# Abstract Server Protocol
# ═══════════════════════════════════════════════════════════════════════════════


class ToolServer(ABC):
    """Abstract base for server implementations.

    Subclasses implement a transport/protocol adapter while sharing the
    handler conversion logic from the bridge module.
    """

    __slots__ = ("_name", "_registry")

    def __init__(self, name: str, registry: HandlerRegistry) -> None:
        self._name = name
        self._registry = registry

    @property
    def name(self) -> str:
        return self._name

    @property
    def registry(self) -> HandlerRegistry:
        return self._registry

    @abstractmethod
    def run(self, **kwargs: object) -> None:
        """Start the server (blocking)."""
        ...

    def list_tools(self) -> list[dict[str, object]]:
        """List all available tools with wire-level schemas."""
        return [
            {
                "name": tool.metadata.name,
                "description": tool.metadata.description,
                "category": tool.metadata.category,
                "parameters": {
                    "type": "object",
                    "properties": get_tool_properties(tool),
                    "required": get_required_params(tool),
                },
            }
            for tool in self._registry
        ]

    def list_resources(self) -> list[dict[str, object]]:
        return [
            {
                "name": r.metadata.name,
                "uri": r.metadata.uri,
                "description": r.metadata.description,
                "mimeType": r.metadata.mime_type,
            }
            for r in self._registry.resources
        ]


# ═══════════════════════════════════════════════════════════════════════════════
# FastMCP Adapter
# ═══════════════════════════════════════════════════════════════════════════════


class MCPServer(ToolServer):
    """FastMCP-backed server for MCP clients.

    Example:
        >>> server = MCPServer("IconifyIntegration", registry)
        >>> server.run(transport="sse", port=8080)
    """

    __slots__ = ("_mcp",)

    def __init__(self, name: str, registry: HandlerRegistry) -> None:
        super().__init__(name, registry)
        self._mcp = self._create_server()

    def _create_server(self) -> FastMCP:
        mcp = FastMCP(self._name)
        self._register_tools(mcp)
        self._register_resources(mcp)
        return mcp

    def _register_tools(self, mcp: FastMCP) -> None:
        for tool in self._registry:
            mcp.tool(
                name=tool.metadata.name,
                description=tool.metadata.description,
            )(tool_to_handler(tool, self._registry))

    def _register_resources(self, mcp: FastMCP) -> None:
        for resource in self._registry.resources:
            meta = resource.metadata
            mcp.resource(
                meta.uri,
                name=meta.name,
                description=meta.description,
                mime_type=meta.mime_type,
            )(resource_to_handler(resource, self._registry))

    def run(
        self,
        transport: Transport = "stdio",
        *,
        host: str = "127.0.0.1",
        port: int = 8000,
    ) -> None:
        """Start MCP server.

        Args:
            transport: "stdio" (CLI), "sse" (HTTP), "streamable-http"
            host: Host for HTTP transports
            port: Port for HTTP transports
        """
        logger.info("Iconify Integration MCP Server running on %s", transport)
        if transport == "stdio":
            self._mcp.run()
        else:
            self._mcp.run(transport=transport, host=host, port=port)

    @property
    def fastmcp(self) -> FastMCP:
        """Access underlying FastMCP instance."""
        return self._mcp


# ═══════════════════════════════════════════════════════════════════════════════
# Factory Functions
# ═══════════════════════════════════════════════════════════════════════════════


def create_mcp_server(registry: HandlerRegistry, name: str = "IconifyIntegration") -> MCPServer:
    """Create MCP server without starting it."""
    return MCPServer(name, registry)


def serve_mcp(
    registry: HandlerRegistry,
    *,
    name: str = "IconifyIntegration",
    transport: Transport = "stdio",
    host: str = "127.0.0.1",
    port: int = 8000,
) -> None:
    """Expose handlers via the MCP protocol (blocking)."""
    MCPServer(name, registry).run(transport=transport, host=host, port=port)
