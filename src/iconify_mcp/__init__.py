"""iconify_mcp - Iconify icon directory exposed as MCP tools and resources.

Search icons, read collection metadata and SVGs, and generate
framework-specific embedding snippets and setup guidance.

Quick Start:
    >>> from iconify_mcp import IconifyClient, build_registry
    >>> from iconify_mcp.ext.mcp import serve_mcp
    >>>
    >>> registry = build_registry(IconifyClient())
    >>> serve_mcp(registry)  # stdio

Direct use of the core:
    >>> from iconify_mcp import Framework, IconReference, render_snippet
    >>> render_snippet(IconReference(icon_set="mdi", icon_name="home"), Framework.REACT)
"""

from .domain import CollectionInfo, Framework, IconReference, SearchResult, to_pascal_case
from .foundation.config import IconifySettings, get_settings
from .foundation.core import BaseResource, BaseTool, ToolResponse
from .foundation.errors import ErrorCode, ToolError, UnparseableIdentifierError, UpstreamError
from .foundation.registry import HandlerRegistry
from .handlers import build_registry
from .snippets import (
    build_snippet,
    build_usage_guide,
    generate_unplugin_config,
    get_customization_guide,
    get_doc_link,
    get_layout_shift_css,
    get_setup_guidance,
    render_snippet,
)
from .upstream import IconifyClient

__version__ = "1.0.0"

__all__ = [
    "__version__",
    # Domain
    "CollectionInfo",
    "Framework",
    "IconReference",
    "SearchResult",
    "to_pascal_case",
    # Foundation
    "IconifySettings",
    "get_settings",
    "BaseResource",
    "BaseTool",
    "ToolResponse",
    "ErrorCode",
    "ToolError",
    "UnparseableIdentifierError",
    "UpstreamError",
    "HandlerRegistry",
    # Core
    "IconifyClient",
    "build_registry",
    "build_snippet",
    "build_usage_guide",
    "generate_unplugin_config",
    "get_customization_guide",
    "get_doc_link",
    "get_layout_shift_css",
    "get_setup_guidance",
    "render_snippet",
]
