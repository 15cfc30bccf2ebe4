"""Core handler abstractions.

- BaseTool: Abstract base class for all tools
- BaseResource: Abstract base class for readable resources
- ToolMetadata / ResourceMetadata: Wire names, descriptions, URIs
- ToolResponse / ContentBlock / ResourceContent: Handler results
"""

from .base import (
    BaseResource,
    BaseTool,
    ContentBlock,
    ResourceContent,
    ResourceMetadata,
    ToolMetadata,
    ToolResponse,
)

__all__ = [
    "BaseResource",
    "BaseTool",
    "ContentBlock",
    "ResourceContent",
    "ResourceMetadata",
    "ToolMetadata",
    "ToolResponse",
]
