"""Explicit registry for tool and resource handlers.

The registry provides:
- Tool and resource registration and lookup by name
- Validation of raw arguments against each tool's params schema
- Timed, logged invocation with failures rendered in-band
- Formatted descriptions for listings

It is built once per process and passed by reference to the transport.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Iterator

from pydantic import BaseModel, ValidationError

from iconify_mcp.foundation.core import BaseResource, BaseTool, ResourceContent, ToolResponse
from iconify_mcp.foundation.errors import ErrorCode, ToolError, format_validation_error

logger = logging.getLogger("iconify_mcp.registry")


class HandlerRegistry:
    """Tools and resources available to one server.

    Example:
        >>> registry = HandlerRegistry()
        >>> registry.register_tool(SearchIconsTool(client))
        >>> response = await registry.invoke("search-icons", {"query": "home"})
        >>> contents = await registry.read("icon-svg", setId="mdi", iconName="home")
    """

    __slots__ = ("_tools", "_resources")

    def __init__(self) -> None:
        self._tools: dict[str, BaseTool[BaseModel]] = {}
        self._resources: dict[str, BaseResource] = {}

    def register_tool(self, tool: BaseTool[BaseModel]) -> None:
        name = tool.metadata.name
        if name in self._tools:
            raise ValueError(f"Tool '{name}' already registered.")
        self._tools[name] = tool

    def register_resource(self, resource: BaseResource) -> None:
        name = resource.metadata.name
        if name in self._resources:
            raise ValueError(f"Resource '{name}' already registered.")
        self._resources[name] = resource

    def get_tool(self, name: str) -> BaseTool[BaseModel] | None:
        return self._tools.get(name)

    def get_resource(self, name: str) -> BaseResource | None:
        return self._resources.get(name)

    def __contains__(self, name: str) -> bool:
        return name in self._tools or name in self._resources

    def __len__(self) -> int:
        return len(self._tools)

    def __iter__(self) -> Iterator[BaseTool[BaseModel]]:
        return iter(self._tools.values())

    @property
    def tools(self) -> list[BaseTool[BaseModel]]:
        return list(self._tools.values())

    @property
    def resources(self) -> list[BaseResource]:
        return list(self._resources.values())

    # ─────────────────────────────────────────────────────────────────
    # Execution
    # ─────────────────────────────────────────────────────────────────

    async def invoke(self, name: str, params: dict[str, object] | BaseModel) -> ToolResponse:
        """Validate and run a tool; never raises for handler failures.

        Unknown tools and invalid parameters come back as in-band errors
        without reaching the tool.
        """
        if (tool := self._tools.get(name)) is None:
            return ToolResponse.from_error(
                ToolError.create(name, f"Tool '{name}' not found in registry", ErrorCode.NOT_FOUND)
            )

        try:
            validated = tool.validate(params) if isinstance(params, dict) else params
        except ValidationError as e:
            logger.info("[%s] rejected: %d validation error(s)", name, e.error_count())
            return ToolResponse.from_error(
                ToolError.create(name, format_validation_error(e, tool_name=name), ErrorCode.INVALID_PARAMS)
            )

        start = time.perf_counter()
        response = await tool.arun(validated)
        duration_ms = (time.perf_counter() - start) * 1000
        level = logging.WARNING if response.is_error else logging.INFO
        logger.log(level, "[%s] %s (%.1fms)", name, "ERROR" if response.is_error else "OK", duration_ms)
        return response

    async def read(self, name: str, **uri_params: str) -> list[ResourceContent]:
        """Read a resource by name.

        Raises:
            KeyError: no resource registered under `name`
        """
        if (resource := self._resources.get(name)) is None:
            raise KeyError(f"Resource '{name}' not found in registry")
        start = time.perf_counter()
        contents = await resource.read(**uri_params)
        logger.info("[%s] read (%.1fms)", name, (time.perf_counter() - start) * 1000)
        return contents

    # ─────────────────────────────────────────────────────────────────
    # Formatting
    # ─────────────────────────────────────────────────────────────────

    def describe(self) -> str:
        """Formatted listing of every tool and resource."""
        lines = [f"- **{t.metadata.name}** ({t.metadata.category}): {t.metadata.description}" for t in self._tools.values()]
        lines += [f"- `{r.metadata.uri}` ({r.metadata.name}): {r.metadata.description}" for r in self._resources.values()]
        return "\n".join(lines)
