"""End-to-end tests for the tool handlers via the registry."""

import asyncio
from collections.abc import AsyncIterator

import httpx
import pytest
import pytest_asyncio

from iconify_mcp.domain import Framework
from iconify_mcp.foundation.registry import HandlerRegistry
from iconify_mcp.foundation.testing import MockIconifyAPI
from iconify_mcp.handlers import BROWSER_CACHE_NOTE, NO_RESULTS, build_registry
from iconify_mcp.snippets import get_layout_shift_css, get_setup_guidance
from iconify_mcp.upstream import IconifyClient


# ─────────────────────────────────────────────────────────────────────────────
# search-icons
# ─────────────────────────────────────────────────────────────────────────────


class TestSearchIcons:
    @pytest.mark.asyncio
    async def test_plain_listing(self, api: MockIconifyAPI, registry: HandlerRegistry) -> None:
        api.set_search(["mdi:home", "mdi:home-outline"], total=120)
        response = await registry.invoke("search-icons", {"query": "home", "limit": 2})

        assert not response.is_error
        text = response.text
        assert text == f"Found 2 of 120 matching icons:\n- mdi:home\n- mdi:home-outline\n\n{BROWSER_CACHE_NOTE}\n"
        entries = [line for line in text.splitlines() if line.startswith("- ")]
        assert entries == ["- mdi:home", "- mdi:home-outline"]
        assert "Snippet" not in text
        assert "Setup Guidance" not in text

    @pytest.mark.asyncio
    async def test_default_limit_and_prefix(self, api: MockIconifyAPI, registry: HandlerRegistry) -> None:
        api.set_search(["lucide:house"])
        await registry.invoke("search-icons", {"query": "house", "setId": "lucide"})
        params = api.last_request.url.params  # type: ignore[union-attr]
        assert params["limit"] == "10"
        assert params["prefix"] == "lucide"

    @pytest.mark.asyncio
    async def test_no_results(self, api: MockIconifyAPI, registry: HandlerRegistry) -> None:
        api.set_search([], total=0)
        response = await registry.invoke("search-icons", {"query": "zzzz"})
        assert response.text == NO_RESULTS
        assert not response.is_error

    @pytest.mark.asyncio
    @pytest.mark.parametrize("limit", [0, 101, -1])
    async def test_limit_out_of_range_rejected(
        self, api: MockIconifyAPI, registry: HandlerRegistry, limit: int
    ) -> None:
        response = await registry.invoke("search-icons", {"query": "home", "limit": limit})
        assert response.is_error
        assert "INVALID_PARAMS" in response.text
        assert api.request_count == 0

    @pytest.mark.asyncio
    async def test_unknown_framework_rejected(self, api: MockIconifyAPI, registry: HandlerRegistry) -> None:
        response = await registry.invoke("search-icons", {"query": "home", "framework": "angular"})
        assert response.is_error
        assert api.request_count == 0

    @pytest.mark.asyncio
    async def test_with_framework_snippets_and_guidance(self, api: MockIconifyAPI, registry: HandlerRegistry) -> None:
        api.set_search(["mdi:home", "lucide:house"])
        response = await registry.invoke("search-icons", {"query": "home", "framework": "react"})

        text = response.text
        assert text.index("- mdi:home\n  Snippet (react): ") < text.index("- lucide:house\n  Snippet (react): ")
        assert '<Icon icon="lucide:house" />' in text
        assert f"\nSetup Guidance for react:\n{get_setup_guidance(Framework.REACT)}\n" in text
        assert f"\nCSS for Layout Shift Prevention:\n{get_layout_shift_css(Framework.REACT)}\n" in text
        assert text.endswith(f"\n{BROWSER_CACHE_NOTE}\n")
        assert api.paths == ["/search"]

    @pytest.mark.asyncio
    async def test_unparseable_entry_is_inline(self, api: MockIconifyAPI, registry: HandlerRegistry) -> None:
        api.set_search(["mdi:home", "broken", "a:b:c"])
        response = await registry.invoke("search-icons", {"query": "home", "framework": "vue"})

        assert not response.is_error
        text = response.text
        assert "- broken\n  Could not parse icon set/name from broken for snippet generation.\n" in text
        assert "- a:b:c\n  Could not parse icon set/name from a:b:c for snippet generation.\n" in text
        assert "- mdi:home\n  Snippet (vue): " in text

    @pytest.mark.asyncio
    async def test_one_failing_snippet_does_not_abort_batch(
        self, api: MockIconifyAPI, registry: HandlerRegistry
    ) -> None:
        api.set_search(["mdi:home", "mdi:gone", "mdi:account"])
        api.set_svg("mdi", "home", "<svg>home</svg>")
        api.set_error("/mdi/gone.svg", 404, "missing")
        api.set_svg("mdi", "account", "<svg>account</svg>")

        response = await registry.invoke("search-icons", {"query": "x", "framework": "raw-svg"})

        assert not response.is_error
        text = response.text
        assert "- mdi:home\n  Snippet (raw-svg): <svg>home</svg>\n" in text
        assert "- mdi:gone\n  Error generating snippet for mdi:gone: Failed to fetch SVG for mdi:gone - 404 Not Found. Body: missing\n" in text
        assert "- mdi:account\n  Snippet (raw-svg): <svg>account</svg>\n" in text
        assert text.index("mdi:home") < text.index("mdi:gone") < text.index("mdi:account")
        assert sorted(api.paths) == ["/mdi/account.svg", "/mdi/gone.svg", "/mdi/home.svg", "/search"]

    @pytest.mark.asyncio
    async def test_upstream_failure_in_band(self, api: MockIconifyAPI, registry: HandlerRegistry) -> None:
        api.set_error("/search", 500)
        response = await registry.invoke("search-icons", {"query": "home"})
        assert response.is_error
        assert "Error searching icons: Iconify API search error (500): Internal Server Error" in response.text

    @pytest.mark.asyncio
    async def test_malformed_upstream_payload_not_blamed_on_caller(
        self, api: MockIconifyAPI, registry: HandlerRegistry
    ) -> None:
        api.set_response("/search", {"icons": "mdi:home"})
        response = await registry.invoke("search-icons", {"query": "home"})
        assert response.is_error
        assert "Error searching icons: Unexpected search payload" in response.text
        assert "[PARSE_ERROR]" in response.text
        assert "INVALID_PARAMS" not in response.text


SVG_PATHS = ["/a/b.svg", "/c/d.svg", "/e/f.svg"]


class SlowDirectory:
    """Search returns three icons; each SVG fetch blocks until released."""

    def __init__(self) -> None:
        self.started: list[str] = []
        self.cancelled: list[str] = []
        self.all_started = asyncio.Event()
        self.release = asyncio.Event()

    async def handler(self, request: httpx.Request) -> httpx.Response:
        path = request.url.path
        if path == "/search":
            return httpx.Response(200, json={"icons": ["a:b", "c:d", "e:f"], "total": 3})
        self.started.append(path)
        if len(self.started) == len(SVG_PATHS):
            self.all_started.set()
        try:
            await self.release.wait()
        except asyncio.CancelledError:
            self.cancelled.append(path)
            raise
        return httpx.Response(200, text=f"<svg>{path}</svg>")


@pytest.fixture
def slow() -> SlowDirectory:
    return SlowDirectory()


@pytest_asyncio.fixture
async def slow_registry(slow: SlowDirectory) -> AsyncIterator[HandlerRegistry]:
    async with IconifyClient(transport=httpx.MockTransport(slow.handler)) as client:
        yield build_registry(client)


class TestSearchFanOut:
    @pytest.mark.asyncio
    async def test_fetches_start_before_any_finishes(
        self, slow: SlowDirectory, slow_registry: HandlerRegistry
    ) -> None:
        task = asyncio.create_task(slow_registry.invoke("search-icons", {"query": "x", "framework": "raw-svg"}))
        await asyncio.wait_for(slow.all_started.wait(), timeout=2)
        assert sorted(slow.started) == SVG_PATHS
        assert not task.done()

        slow.release.set()
        response = await asyncio.wait_for(task, timeout=2)
        text = response.text
        assert text.index("<svg>/a/b.svg</svg>") < text.index("<svg>/c/d.svg</svg>") < text.index("<svg>/e/f.svg</svg>")

    @pytest.mark.asyncio
    async def test_cancellation_reaches_every_fetch(
        self, slow: SlowDirectory, slow_registry: HandlerRegistry
    ) -> None:
        task = asyncio.create_task(slow_registry.invoke("search-icons", {"query": "x", "framework": "raw-svg"}))
        await asyncio.wait_for(slow.all_started.wait(), timeout=2)

        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task
        assert sorted(slow.cancelled) == SVG_PATHS


# ─────────────────────────────────────────────────────────────────────────────
# get-icon-snippet
# ─────────────────────────────────────────────────────────────────────────────


class TestGetIconSnippet:
    @pytest.mark.asyncio
    async def test_react_without_fetch(self, api: MockIconifyAPI, registry: HandlerRegistry) -> None:
        response = await registry.invoke(
            "get-icon-snippet", {"iconSet": "mdi", "iconName": "home", "framework": "react"}
        )
        assert not response.is_error
        assert "mdi:home" in response.texts[0]
        assert api.request_count == 0

    @pytest.mark.asyncio
    async def test_single_block_with_header_setup_and_css(self, registry: HandlerRegistry) -> None:
        response = await registry.invoke(
            "get-icon-snippet", {"iconSet": "mdi", "iconName": "home", "framework": "vue"}
        )
        assert len(response.blocks) == 1
        text = response.text
        assert text.startswith("Snippet for mdi:home (vue):\n")
        assert text.endswith(
            f"\n\nSetup:\n{get_setup_guidance('vue')}\n\nLayout Shift Prevention:\n{get_layout_shift_css('vue')}"
        )

    @pytest.mark.asyncio
    async def test_raw_svg_exact(self, api: MockIconifyAPI, registry: HandlerRegistry) -> None:
        api.set_svg("mdi", "home", "<svg>OK</svg>")
        response = await registry.invoke(
            "get-icon-snippet", {"iconSet": "mdi", "iconName": "home", "framework": "raw-svg"}
        )
        assert not response.is_error
        assert response.text == "<svg>OK</svg>"
        assert response.texts == ["<svg>OK</svg>"]

    @pytest.mark.asyncio
    async def test_raw_svg_upstream_500(self, api: MockIconifyAPI, registry: HandlerRegistry) -> None:
        api.set_error("/mdi/home.svg", 500, "oops")
        response = await registry.invoke(
            "get-icon-snippet", {"iconSet": "mdi", "iconName": "home", "framework": "raw-svg"}
        )
        assert response.is_error
        assert "Error getting snippet: Failed to fetch SVG for mdi:home - 500 Internal Server Error. Body: oops" in response.text
        assert "UPSTREAM_ERROR" in response.text

    @pytest.mark.asyncio
    async def test_snake_case_names_accepted(self, registry: HandlerRegistry) -> None:
        response = await registry.invoke(
            "get-icon-snippet", {"icon_set": "mdi", "icon_name": "home", "framework": "ember"}
        )
        assert '<Icon @icon="mdi:home" />' in response.texts[0]

    @pytest.mark.asyncio
    async def test_missing_params_rejected(self, registry: HandlerRegistry) -> None:
        response = await registry.invoke("get-icon-snippet", {"iconSet": "mdi", "framework": "react"})
        assert response.is_error
        assert "iconName" in response.text


# ─────────────────────────────────────────────────────────────────────────────
# icon-customization-guide / unplugin-icons-config
# ─────────────────────────────────────────────────────────────────────────────


class TestGuidanceTools:
    @pytest.mark.asyncio
    async def test_customization_guide_heading(self, registry: HandlerRegistry) -> None:
        response = await registry.invoke("icon-customization-guide", {"framework": "svelte"})
        assert response.text.startswith("# Icon Customization Guide for svelte\n\n")

    @pytest.mark.asyncio
    async def test_unplugin_config_defaults(self, registry: HandlerRegistry) -> None:
        response = await registry.invoke("unplugin-icons-config", {"buildTool": "vite", "framework": "vue3"})
        assert not response.is_error
        assert "Components({" in response.text
        assert "customCollections" not in response.text

    @pytest.mark.asyncio
    async def test_unplugin_config_flags(self, registry: HandlerRegistry) -> None:
        response = await registry.invoke(
            "unplugin-icons-config",
            {"buildTool": "webpack", "framework": "react", "customCollections": True, "autoImport": False},
        )
        assert "customCollections: {" in response.text
        assert "AutoImport" not in response.text

    @pytest.mark.asyncio
    async def test_unplugin_config_rejects_unknown_tool(self, registry: HandlerRegistry) -> None:
        response = await registry.invoke("unplugin-icons-config", {"buildTool": "parcel", "framework": "vue3"})
        assert response.is_error
        assert "INVALID_PARAMS" in response.text
