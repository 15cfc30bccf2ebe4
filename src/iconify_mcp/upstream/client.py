"""Async client for the Iconify icon directory API.

One best-effort request per call: no retries, no caching. Any non-2xx
status or transport failure surfaces as `UpstreamError`.
"""

from __future__ import annotations

import logging
from types import TracebackType
from typing import Any, Self

import httpx
from pydantic import ValidationError

from ..domain import CollectionInfo, SearchResult
from ..foundation.config import DEFAULT_BASE_URL, DEFAULT_USER_AGENT, ApiSettings
from ..foundation.errors import ErrorCode, UpstreamError

logger = logging.getLogger("iconify_mcp.upstream")


class IconifyClient:
    """Thin typed wrapper over the four directory endpoints.

    The underlying `httpx.AsyncClient` is created on first use. Pass
    `transport` (e.g. `httpx.MockTransport`) or a ready `http_client` to
    route requests elsewhere; an injected client is not closed by `aclose()`.

    Example:
        >>> async with IconifyClient() as client:
        ...     result = await client.search_icons("home", limit=5)
    """

    __slots__ = ("base_url", "user_agent", "timeout", "_transport", "_client", "_owns_client")

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        *,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.user_agent = user_agent
        self.timeout = timeout
        self._transport = transport
        self._client = http_client
        self._owns_client = http_client is None

    @classmethod
    def from_settings(cls, settings: ApiSettings, **kwargs: Any) -> Self:
        return cls(settings.base_url, settings.user_agent, timeout=settings.timeout, **kwargs)

    # ─────────────────────────────────────────────────────────────────
    # HTTP Client
    # ─────────────────────────────────────────────────────────────────

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            kwargs: dict[str, Any] = {"headers": {"User-Agent": self.user_agent}}
            if self.timeout is not None:
                kwargs["timeout"] = self.timeout
            if self._transport is not None:
                kwargs["transport"] = self._transport
            self._client = httpx.AsyncClient(**kwargs)
        return self._client

    async def aclose(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def _get(self, path: str, params: dict[str, Any] | None = None) -> httpx.Response:
        url = f"{self.base_url}{path}"
        logger.debug("GET %s params=%s", url, params)
        try:
            response = await self._get_client().get(
                url, params=params, headers={"User-Agent": self.user_agent}
            )
        except httpx.HTTPError as e:
            logger.warning("GET %s failed: %s", url, e)
            raise UpstreamError(f"Request to {url} failed: {e}", url=url) from e
        if not response.is_success:
            logger.warning("GET %s -> %d %s", url, response.status_code, response.reason_phrase)
        return response

    @staticmethod
    def _json(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as e:
            raise UpstreamError(
                f"Invalid JSON from {response.request.url}: {e}",
                url=str(response.request.url),
                code=ErrorCode.PARSE_ERROR,
            ) from e

    @staticmethod
    def _status_error(response: httpx.Response, message: str, **extra: Any) -> UpstreamError:
        return UpstreamError(
            message,
            status_code=response.status_code,
            status_text=response.reason_phrase,
            url=str(response.request.url),
            **extra,
        )

    # ─────────────────────────────────────────────────────────────────
    # Endpoints
    # ─────────────────────────────────────────────────────────────────

    async def list_collections(self) -> dict[str, CollectionInfo]:
        """All available icon sets keyed by prefix."""
        response = await self._get("/collections")
        if not response.is_success:
            raise self._status_error(
                response, f"Iconify API error ({response.status_code}): {response.reason_phrase}"
            )
        data = self._json(response)
        if not isinstance(data, dict):
            raise UpstreamError(
                "Unexpected collections payload", url=str(response.request.url), code=ErrorCode.PARSE_ERROR
            )
        try:
            return {prefix: CollectionInfo.model_validate(info) for prefix, info in data.items()}
        except ValidationError as e:
            raise UpstreamError(
                f"Unexpected collections payload: {e}", url=str(response.request.url), code=ErrorCode.PARSE_ERROR
            ) from e

    async def get_collection(self, set_id: str) -> Any:
        """Raw metadata for one icon set."""
        response = await self._get("/collection", {"prefix": set_id})
        if not response.is_success:
            raise self._status_error(
                response,
                f"Iconify API error ({response.status_code}) for set {set_id}: {response.reason_phrase}",
                set_id=set_id,
            )
        return self._json(response)

    async def search_icons(self, query: str, limit: int = 10, set_id: str | None = None) -> SearchResult:
        params: dict[str, Any] = {"query": query, "limit": limit}
        if set_id:
            params["prefix"] = set_id
        response = await self._get("/search", params)
        if not response.is_success:
            raise self._status_error(
                response, f"Iconify API search error ({response.status_code}): {response.reason_phrase}"
            )
        try:
            return SearchResult.model_validate(self._json(response))
        except ValidationError as e:
            raise UpstreamError(
                f"Unexpected search payload: {e}", url=str(response.request.url), code=ErrorCode.PARSE_ERROR
            ) from e

    async def fetch_svg(self, icon_set: str, icon_name: str) -> str:
        """SVG markup for one icon, returned verbatim."""
        response = await self._get(f"/{icon_set}/{icon_name}.svg")
        if not response.is_success:
            body = response.text
            raise self._status_error(
                response,
                f"Failed to fetch SVG for {icon_set}:{icon_name} - "
                f"{response.status_code} {response.reason_phrase}. Body: {body}",
                body=body,
            )
        return response.text
