"""Tool handlers: search, snippet, customization guide, unplugin config."""

from __future__ import annotations

import asyncio
import logging
from typing import ClassVar

from ..domain import Framework, IconReference
from ..foundation.core import BaseTool, ToolMetadata, ToolResponse
from ..foundation.errors import UnparseableIdentifierError
from ..snippets import (
    build_snippet,
    generate_unplugin_config,
    get_customization_guide,
    get_layout_shift_css,
    get_setup_guidance,
)
from ..upstream import IconifyClient
from .params import CustomizationGuideParams, IconSnippetParams, SearchIconsParams, UnpluginConfigParams

logger = logging.getLogger("iconify_mcp.handlers")

NO_RESULTS = "No icons found for your query."
BROWSER_CACHE_NOTE = (
    "Note: Iconify API caches icon data in the browser for performance. "
    "Subsequent uses of the same icons will be faster."
)


class SearchIconsTool(BaseTool[SearchIconsParams]):
    """Search the directory, optionally attaching one snippet per hit.

    Snippets are generated concurrently and joined in upstream order; a
    failing entry gets an inline error line and never aborts the batch.
    """

    metadata: ClassVar[ToolMetadata] = ToolMetadata(
        name="search-icons",
        description=(
            "Searches for icons on Iconify and returns a list of matching icons. "
            "Can optionally provide integration snippets."
        ),
        category="search",
    )
    params_schema: ClassVar[type[SearchIconsParams]] = SearchIconsParams
    error_context: ClassVar[str] = "Error searching icons"

    def __init__(self, client: IconifyClient) -> None:
        self._client = client

    async def _entry(self, identifier: str, framework: Framework) -> str:
        head = f"- {identifier}\n"
        try:
            ref = IconReference.parse(identifier)
        except UnparseableIdentifierError:
            return f"{head}  Could not parse icon set/name from {identifier} for snippet generation.\n"
        try:
            snippet = await build_snippet(self._client, ref, framework)
        except Exception as e:
            logger.info("snippet for %s failed: %s", identifier, e)
            return f"{head}  Error generating snippet for {identifier}: {e}\n"
        return f"{head}  Snippet ({framework}): {snippet}\n"

    async def _run(self, params: SearchIconsParams) -> str:
        result = await self._client.search_icons(params.query, params.limit, params.set_id)
        if result.is_empty:
            return NO_RESULTS

        out = [f"Found {len(result.icons)} of {result.total} matching icons:\n"]
        if (fw := params.framework) is None:
            out += [f"- {icon}\n" for icon in result.icons]
        else:
            out += await asyncio.gather(*(self._entry(icon, fw) for icon in result.icons))
            out.append(f"\nSetup Guidance for {fw}:\n{get_setup_guidance(fw)}\n")
            out.append(f"\nCSS for Layout Shift Prevention:\n{get_layout_shift_css(fw)}\n")
        out.append(f"\n{BROWSER_CACHE_NOTE}\n")
        return "".join(out)


class GetIconSnippetTool(BaseTool[IconSnippetParams]):
    """Snippet for one icon with its setup guidance and layout-shift CSS.

    For raw SVG the fetched document is returned alone, unmodified.
    """

    metadata: ClassVar[ToolMetadata] = ToolMetadata(
        name="get-icon-snippet",
        description="Retrieves an integration snippet for a specific icon and framework.",
        category="snippets",
    )
    params_schema: ClassVar[type[IconSnippetParams]] = IconSnippetParams
    error_context: ClassVar[str] = "Error getting snippet"

    def __init__(self, client: IconifyClient) -> None:
        self._client = client

    async def _run(self, params: IconSnippetParams) -> ToolResponse:
        ref = IconReference(icon_set=params.icon_set, icon_name=params.icon_name)
        fw = params.framework
        snippet = await build_snippet(self._client, ref, fw)
        if fw is Framework.RAW_SVG:
            return ToolResponse.of(snippet)
        return ToolResponse.of(
            f"Snippet for {ref} ({fw}):\n{snippet}\n\n"
            f"Setup:\n{get_setup_guidance(fw)}\n\n"
            f"Layout Shift Prevention:\n{get_layout_shift_css(fw)}"
        )


class CustomizationGuideTool(BaseTool[CustomizationGuideParams]):
    metadata: ClassVar[ToolMetadata] = ToolMetadata(
        name="icon-customization-guide",
        description="Provides guidance on how to customize icons in different frameworks",
        category="guidance",
    )
    params_schema: ClassVar[type[CustomizationGuideParams]] = CustomizationGuideParams
    error_context: ClassVar[str] = "Error retrieving customization guide"

    async def _run(self, params: CustomizationGuideParams) -> str:
        return f"# Icon Customization Guide for {params.framework}\n\n{get_customization_guide(params.framework)}"


class UnpluginConfigTool(BaseTool[UnpluginConfigParams]):
    metadata: ClassVar[ToolMetadata] = ToolMetadata(
        name="unplugin-icons-config",
        description="Generates unplugin-icons configuration for different build tools and frameworks",
        category="guidance",
    )
    params_schema: ClassVar[type[UnpluginConfigParams]] = UnpluginConfigParams
    error_context: ClassVar[str] = "Error generating unplugin-icons configuration"

    async def _run(self, params: UnpluginConfigParams) -> str:
        return generate_unplugin_config(
            params.build_tool,
            params.framework,
            custom_collections=params.custom_collections,
            auto_import=params.auto_import,
        )
