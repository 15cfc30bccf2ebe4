"""Tests for HandlerRegistry and the handler base classes."""

from typing import ClassVar

import pytest
from pydantic import BaseModel, ValidationError

from iconify_mcp.foundation.core import BaseResource, BaseTool, ResourceMetadata, ToolMetadata, ToolResponse
from iconify_mcp.foundation.registry import HandlerRegistry


class EchoParams(BaseModel):
    text: str


class EchoTool(BaseTool[EchoParams]):
    metadata: ClassVar[ToolMetadata] = ToolMetadata(name="echo", description="Echoes its input back")
    params_schema: ClassVar[type[EchoParams]] = EchoParams
    error_context: ClassVar[str] = "Echo failed"

    async def _run(self, params: EchoParams) -> str:
        if params.text == "boom":
            raise RuntimeError("exploded")
        return params.text


class GreetingResource(BaseResource):
    metadata: ClassVar[ResourceMetadata] = ResourceMetadata(
        name="greeting", uri="test://greet/{who}", description="Greets someone"
    )

    async def _read(self, **params: str) -> str:
        return f"hello {params['who']}"


class BrokenResource(BaseResource):
    metadata: ClassVar[ResourceMetadata] = ResourceMetadata(
        name="broken", uri="test://broken", description="Always fails", mime_type="application/json"
    )

    async def _read(self, **params: str) -> str:
        raise RuntimeError("disk on fire")


@pytest.fixture
def echo_registry() -> HandlerRegistry:
    registry = HandlerRegistry()
    registry.register_tool(EchoTool())
    registry.register_resource(GreetingResource())
    registry.register_resource(BrokenResource())
    return registry


class TestRegistration:
    def test_lookup(self, echo_registry: HandlerRegistry) -> None:
        assert isinstance(echo_registry.get_tool("echo"), EchoTool)
        assert isinstance(echo_registry.get_resource("greeting"), GreetingResource)
        assert echo_registry.get_tool("missing") is None
        assert "echo" in echo_registry
        assert "greeting" in echo_registry
        assert len(echo_registry) == 1

    def test_duplicate_tool_rejected(self, echo_registry: HandlerRegistry) -> None:
        with pytest.raises(ValueError, match="already registered"):
            echo_registry.register_tool(EchoTool())

    def test_duplicate_resource_rejected(self, echo_registry: HandlerRegistry) -> None:
        with pytest.raises(ValueError, match="already registered"):
            echo_registry.register_resource(GreetingResource())

    def test_metadata_name_must_be_kebab_case(self) -> None:
        with pytest.raises(ValidationError):
            ToolMetadata(name="Search_Icons", description="Not a valid wire name")

    def test_describe(self, echo_registry: HandlerRegistry) -> None:
        text = echo_registry.describe()
        assert "- **echo** (general): Echoes its input back" in text
        assert "- `test://greet/{who}` (greeting): Greets someone" in text


class TestInvoke:
    @pytest.mark.asyncio
    async def test_success(self, echo_registry: HandlerRegistry) -> None:
        response = await echo_registry.invoke("echo", {"text": "hi"})
        assert response == ToolResponse.of("hi")

    @pytest.mark.asyncio
    async def test_unknown_tool(self, echo_registry: HandlerRegistry) -> None:
        response = await echo_registry.invoke("nope", {})
        assert response.is_error
        assert "Tool 'nope' not found in registry" in response.text
        assert "[NOT_FOUND]" in response.text

    @pytest.mark.asyncio
    async def test_invalid_params(self, echo_registry: HandlerRegistry) -> None:
        response = await echo_registry.invoke("echo", {})
        assert response.is_error
        assert "Invalid parameters for echo: text: Field required" in response.text

    @pytest.mark.asyncio
    async def test_exception_becomes_in_band_error(self, echo_registry: HandlerRegistry) -> None:
        response = await echo_registry.invoke("echo", {"text": "boom"})
        assert response.is_error
        assert response.text.startswith("**Tool Error (echo):** Echo failed: exploded")

    @pytest.mark.asyncio
    async def test_prevalidated_model(self, echo_registry: HandlerRegistry) -> None:
        response = await echo_registry.invoke("echo", EchoParams(text="direct"))
        assert response.text == "direct"


class TestRead:
    @pytest.mark.asyncio
    async def test_template_expansion(self, echo_registry: HandlerRegistry) -> None:
        [content] = await echo_registry.read("greeting", who="world")
        assert content.uri == "test://greet/world"
        assert content.text == "hello world"
        assert content.mime_type == "text/plain"

    @pytest.mark.asyncio
    async def test_unknown_resource(self, echo_registry: HandlerRegistry) -> None:
        with pytest.raises(KeyError):
            await echo_registry.read("nope")

    @pytest.mark.asyncio
    async def test_failure_is_plain_text(self, echo_registry: HandlerRegistry) -> None:
        [content] = await echo_registry.read("broken")
        assert content.text == "Error reading broken: disk on fire"
        assert content.mime_type == "text/plain"

    def test_uri_params(self) -> None:
        meta = GreetingResource.metadata
        assert meta.uri_params == ["who"]
        assert meta.expand() == "test://greet/{who}"


class TestBuiltRegistry:
    def test_all_handlers_registered(self, registry: HandlerRegistry) -> None:
        assert [t.metadata.name for t in registry] == [
            "search-icons",
            "get-icon-snippet",
            "icon-customization-guide",
            "unplugin-icons-config",
        ]
        assert [r.metadata.uri for r in registry.resources] == [
            "iconify://collections",
            "iconify://collection/{setId}",
            "iconify://icon/{setId}/{iconName}.svg",
            "iconify://usage-guide",
        ]
