"""Request handlers exposed over MCP, and the registry factory."""

from ..foundation.registry import HandlerRegistry
from ..upstream import IconifyClient
from .params import CustomizationGuideParams, IconSnippetParams, SearchIconsParams, UnpluginConfigParams
from .resources import IconSetDetailsResource, IconSetsResource, IconSvgResource, UsageGuideResource
from .tools import BROWSER_CACHE_NOTE, NO_RESULTS, CustomizationGuideTool, GetIconSnippetTool, SearchIconsTool, UnpluginConfigTool


def build_registry(client: IconifyClient) -> HandlerRegistry:
    """Registry with every tool and resource bound to `client`."""
    registry = HandlerRegistry()
    for tool in (
        SearchIconsTool(client),
        GetIconSnippetTool(client),
        CustomizationGuideTool(),
        UnpluginConfigTool(),
    ):
        registry.register_tool(tool)
    for resource in (
        IconSetsResource(client),
        IconSetDetailsResource(client),
        IconSvgResource(client),
        UsageGuideResource(),
    ):
        registry.register_resource(resource)
    return registry


__all__ = [
    "build_registry",
    "BROWSER_CACHE_NOTE",
    "NO_RESULTS",
    "CustomizationGuideParams",
    "IconSnippetParams",
    "SearchIconsParams",
    "UnpluginConfigParams",
    "CustomizationGuideTool",
    "GetIconSnippetTool",
    "SearchIconsTool",
    "UnpluginConfigTool",
    "IconSetDetailsResource",
    "IconSetsResource",
    "IconSvgResource",
    "UsageGuideResource",
]
