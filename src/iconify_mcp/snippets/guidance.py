"""Framework-keyed documentation lookup.

All functions are total over arbitrary tags: unknown frameworks get a
fallback text instead of an exception.
"""

from __future__ import annotations

from ..domain import Framework
from . import customization, setup
from .frameworks import FRAMEWORKS, lookup

SETUP_UNAVAILABLE = "Setup guidance for this framework is not yet available."

USAGE_GUIDE_PREAMBLE = """\
# Iconify Usage Guide

## About Iconify
Iconify is a unified icon framework that provides access to over 200,000 icons from more than 150 open-source icon sets.

## Advantages of Iconify
- Icons load on demand - only icons you use are loaded
- Consistent API across different icon sets
- All icons are optimized SVG
- Easy switching between different icon sets
- No need to install multiple icon fonts

## Getting Started
1. Search for icons using the `search-icons` tool.
2. Get implementation snippets for your framework using the `get-icon-snippet` tool.
3. Follow the setup instructions below for your chosen implementation method.
"""

USAGE_GUIDE_EPILOGUE = "For more general information, visit https://iconify.design/docs/\n"


def get_setup_guidance(framework: str | Framework) -> str:
    spec = lookup(framework)
    return spec.setup if spec else SETUP_UNAVAILABLE


def get_layout_shift_css(framework: str | Framework) -> str:
    spec = lookup(framework)
    return spec.layout_css if spec else setup.ICON_CLASS_CSS


def get_doc_link(framework: str | Framework) -> str | None:
    spec = lookup(framework)
    return spec.doc_link if spec else None


def get_customization_guide(framework: str | Framework) -> str:
    spec = lookup(framework)
    return spec.customization if spec else customization.UNAVAILABLE


def render_usage_section(framework: Framework) -> str:
    """One `## <Name>` block: setup, layout-shift CSS, optional doc link."""
    spec = FRAMEWORKS[framework]
    link = f"\nFor more details, see: {spec.doc_link}" if spec.doc_link else ""
    return (
        f"## {spec.display_name}\n\n"
        f"### Setup\n{spec.setup}\n\n"
        f"### Preventing Layout Shifts\n```css\n{spec.layout_css}\n```\n"
        f"{link}\n"
    )


def build_usage_guide() -> str:
    """Full usage guide covering every framework in declaration order."""
    sections = "\n".join(render_usage_section(fw) for fw in Framework)
    return f"{USAGE_GUIDE_PREAMBLE}\n---\n{sections}\n---\n\n{USAGE_GUIDE_EPILOGUE}"
