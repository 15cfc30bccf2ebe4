"""Tests for the MCP bridge and server wiring."""

import inspect

import pytest
from fastmcp import FastMCP
from fastmcp.exceptions import ToolError as MCPToolError
from mcp.types import TextContent

from iconify_mcp.ext.mcp import MCPServer, create_mcp_server, get_required_params, resource_to_handler, tool_to_handler
from iconify_mcp.foundation.registry import HandlerRegistry
from iconify_mcp.foundation.testing import MockIconifyAPI


class TestToolHandler:
    def test_signature_uses_wire_names(self, registry: HandlerRegistry) -> None:
        handler = tool_to_handler(registry.get_tool("get-icon-snippet"), registry)  # type: ignore[arg-type]
        params = inspect.signature(handler).parameters
        assert list(params) == ["iconSet", "iconName", "framework"]
        assert all(p.kind is inspect.Parameter.KEYWORD_ONLY for p in params.values())
        assert handler.__name__ == "get_icon_snippet"

    def test_defaults_carried(self, registry: HandlerRegistry) -> None:
        handler = tool_to_handler(registry.get_tool("search-icons"), registry)  # type: ignore[arg-type]
        params = inspect.signature(handler).parameters
        assert params["limit"].default == 10
        assert params["setId"].default is None
        assert params["query"].default is inspect.Parameter.empty

    def test_required_params(self, registry: HandlerRegistry) -> None:
        tool = registry.get_tool("unplugin-icons-config")
        assert sorted(get_required_params(tool)) == ["buildTool", "framework"]  # type: ignore[arg-type]

    @pytest.mark.asyncio
    async def test_returns_text_content(self, registry: HandlerRegistry) -> None:
        handler = tool_to_handler(registry.get_tool("get-icon-snippet"), registry)  # type: ignore[arg-type]
        result = await handler(iconSet="mdi", iconName="home", framework="react")
        assert len(result) == 1
        assert all(isinstance(block, TextContent) for block in result)
        assert "mdi:home" in result[0].text

    @pytest.mark.asyncio
    async def test_error_raises_protocol_tool_error(self, api: MockIconifyAPI, registry: HandlerRegistry) -> None:
        api.set_error("/mdi/home.svg", 500)
        handler = tool_to_handler(registry.get_tool("get-icon-snippet"), registry)  # type: ignore[arg-type]
        with pytest.raises(MCPToolError, match="Error getting snippet"):
            await handler(iconSet="mdi", iconName="home", framework="raw-svg")


class TestResourceHandler:
    def test_template_params(self, registry: HandlerRegistry) -> None:
        handler = resource_to_handler(registry.get_resource("icon-svg"), registry)  # type: ignore[arg-type]
        assert list(inspect.signature(handler).parameters) == ["setId", "iconName"]

    def test_static_resource_has_no_params(self, registry: HandlerRegistry) -> None:
        handler = resource_to_handler(registry.get_resource("usage-guidance"), registry)  # type: ignore[arg-type]
        assert not inspect.signature(handler).parameters

    @pytest.mark.asyncio
    async def test_reads_text(self, api: MockIconifyAPI, registry: HandlerRegistry) -> None:
        api.set_svg("mdi", "home", "<svg>OK</svg>")
        handler = resource_to_handler(registry.get_resource("icon-svg"), registry)  # type: ignore[arg-type]
        assert await handler(setId="mdi", iconName="home") == "<svg>OK</svg>"


class TestServer:
    def test_builds_fastmcp(self, registry: HandlerRegistry) -> None:
        server = create_mcp_server(registry)
        assert isinstance(server, MCPServer)
        assert isinstance(server.fastmcp, FastMCP)
        assert server.name == "IconifyIntegration"

    def test_listings(self, registry: HandlerRegistry) -> None:
        server = create_mcp_server(registry, name="Icons")
        tools = {t["name"]: t for t in server.list_tools()}
        assert set(tools) == {"search-icons", "get-icon-snippet", "icon-customization-guide", "unplugin-icons-config"}
        assert "setId" in tools["search-icons"]["parameters"]["properties"]  # type: ignore[index]
        resources = {r["name"]: r["mimeType"] for r in server.list_resources()}
        assert resources == {
            "icon-sets": "text/plain",
            "icon-set-details": "application/json",
            "icon-svg": "image/svg+xml",
            "usage-guidance": "text/markdown",
        }
