"""Bridge between registry handlers and MCP tool/resource primitives.

Converts tools and resources into plain async callables whose signatures
are derived from the params schema (tools) or URI template (resources), so
any FastMCP-style server can introspect and register them.
"""

from __future__ import annotations

import inspect
from typing import TYPE_CHECKING, Annotated, Any, Awaitable, Callable

from fastmcp.exceptions import ToolError as MCPToolError
from mcp.types import TextContent
from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from iconify_mcp.foundation.core import BaseResource, BaseTool
    from iconify_mcp.foundation.registry import HandlerRegistry


def _wire_name(name: str, alias: str | None) -> str:
    return alias or name


def _signature_for(schema: type[BaseModel]) -> tuple[inspect.Signature, dict[str, Any]]:
    """Keyword-only signature using wire names; constraints carried in Annotated."""
    params: list[inspect.Parameter] = []
    annotations: dict[str, Any] = {}
    for name, info in schema.model_fields.items():
        wire = _wire_name(name, info.alias)
        annotation = Annotated[(info.annotation, *info.metadata, Field(description=info.description))]
        default = inspect.Parameter.empty if info.is_required() else info.get_default(call_default_factory=True)
        params.append(inspect.Parameter(wire, inspect.Parameter.KEYWORD_ONLY, default=default, annotation=annotation))
        annotations[wire] = annotation
    return inspect.Signature(params), annotations


def tool_to_handler(tool: BaseTool[BaseModel], registry: HandlerRegistry) -> Callable[..., Awaitable[list[TextContent]]]:
    """Convert a registered tool into an MCP-compatible handler function.

    Creates a callable that:
    - Accepts keyword arguments named by the schema's wire aliases
    - Runs the tool through `registry.invoke` (validation, timing, logging)
    - Returns one TextContent per response block
    - Raises fastmcp's ToolError for in-band errors so clients see isError
    """
    name = tool.metadata.name

    async def handler(**kwargs: Any) -> list[TextContent]:
        response = await registry.invoke(name, kwargs)
        if response.is_error:
            raise MCPToolError(response.text)
        return [TextContent(type="text", text=text) for text in response.texts]

    signature, annotations = _signature_for(tool.params_schema)
    handler.__name__ = name.replace("-", "_")
    handler.__doc__ = tool.metadata.description
    handler.__signature__ = signature  # type: ignore[attr-defined]
    handler.__annotations__ = annotations
    return handler


def resource_to_handler(resource: BaseResource, registry: HandlerRegistry) -> Callable[..., Awaitable[str]]:
    """Convert a registered resource into a read function.

    Template resources get one keyword-only `str` parameter per URI
    placeholder; failures are already rendered in-band by the resource.
    """
    name = resource.metadata.name

    async def handler(**kwargs: str) -> str:
        contents = await registry.read(name, **kwargs)
        return "\n".join(c.text for c in contents)

    uri_params = resource.metadata.uri_params
    handler.__name__ = name.replace("-", "_")
    handler.__doc__ = resource.metadata.description
    handler.__signature__ = inspect.Signature(  # type: ignore[attr-defined]
        [inspect.Parameter(p, inspect.Parameter.KEYWORD_ONLY, annotation=str) for p in uri_params]
    )
    handler.__annotations__ = {p: str for p in uri_params}
    return handler


def get_tool_properties(tool: BaseTool[BaseModel]) -> dict[str, dict[str, object]]:
    """Extract cleaned property definitions (wire names) for MCP."""
    schema = tool.params_schema.model_json_schema(by_alias=True)
    properties = schema.get("properties", {})
    return {
        name: {k: v for k, v in prop.items() if k != "title"}
        for name, prop in properties.items()
    }


def get_required_params(tool: BaseTool[BaseModel]) -> list[str]:
    """Get list of required parameter wire names."""
    return tool.params_schema.model_json_schema(by_alias=True).get("required", [])
