"""Resource handlers: collections, collection details, SVG, usage guide."""

from __future__ import annotations

from typing import ClassVar

import orjson

from ..foundation.core import BaseResource, ResourceMetadata
from ..snippets import build_usage_guide
from ..upstream import IconifyClient


class IconSetsResource(BaseResource):
    metadata: ClassVar[ResourceMetadata] = ResourceMetadata(
        name="icon-sets",
        uri="iconify://collections",
        description="List of all available Iconify icon sets",
    )

    def __init__(self, client: IconifyClient) -> None:
        self._client = client

    async def _read(self, **params: str) -> str:
        collections = await self._client.list_collections()
        listing = "\n".join(f"- {prefix} ({info.name})" for prefix, info in collections.items())
        return f"Available Icon Sets:\n{listing}"

    def _error_text(self, exc: Exception, **params: str) -> str:
        return f"Error fetching icon sets: {exc}"


class IconSetDetailsResource(BaseResource):
    metadata: ClassVar[ResourceMetadata] = ResourceMetadata(
        name="icon-set-details",
        uri="iconify://collection/{setId}",
        description="Metadata for one icon set, as JSON",
        mime_type="application/json",
    )

    def __init__(self, client: IconifyClient) -> None:
        self._client = client

    async def _read(self, **params: str) -> str:
        data = await self._client.get_collection(params["setId"])
        return orjson.dumps(data, option=orjson.OPT_INDENT_2).decode()

    def _error_text(self, exc: Exception, **params: str) -> str:
        return f"Error fetching set {params.get('setId')}: {exc}"


class IconSvgResource(BaseResource):
    metadata: ClassVar[ResourceMetadata] = ResourceMetadata(
        name="icon-svg",
        uri="iconify://icon/{setId}/{iconName}.svg",
        description="Raw SVG markup for one icon",
        mime_type="image/svg+xml",
    )

    def __init__(self, client: IconifyClient) -> None:
        self._client = client

    async def _read(self, **params: str) -> str:
        return await self._client.fetch_svg(params["setId"], params["iconName"])

    def _error_text(self, exc: Exception, **params: str) -> str:
        return f"Error fetching SVG for {params.get('setId')}:{params.get('iconName')}: {exc}"


class UsageGuideResource(BaseResource):
    """Static guide; never touches the network."""

    metadata: ClassVar[ResourceMetadata] = ResourceMetadata(
        name="usage-guidance",
        uri="iconify://usage-guide",
        description="How to use Iconify icons with every supported framework",
        mime_type="text/markdown",
    )

    async def _read(self, **params: str) -> str:
        return build_usage_guide()
