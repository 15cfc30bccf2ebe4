"""Snippet rendering: (icon reference, framework) -> embeddable code."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..domain import Framework, IconReference, to_pascal_case
from .frameworks import lookup

if TYPE_CHECKING:
    from ..upstream import IconifyClient

UNSUPPORTED_FRAMEWORK = "Snippet generation for this framework is not yet supported."


def render_snippet(ref: IconReference, framework: str | Framework, svg: str | None = None) -> str:
    """Render the snippet for one icon.

    Non-raw frameworks are pure template substitution. `raw-svg` returns the
    already fetched document verbatim, so `svg` is required for it.

    Raises:
        ValueError: raw-svg requested without the SVG document
    """
    spec = lookup(framework)
    if spec is None:
        return UNSUPPORTED_FRAMEWORK
    if spec.template is None:
        if svg is None:
            raise ValueError(f"SVG document for {ref} must be fetched before rendering raw-svg")
        return svg
    return spec.template.substitute(
        icon_set=ref.icon_set,
        icon_name=ref.icon_name,
        symbol=to_pascal_case(ref.icon_name),
    )


async def build_snippet(client: IconifyClient, ref: IconReference, framework: str | Framework) -> str:
    """Fetch when the framework needs the SVG itself, then render."""
    spec = lookup(framework)
    svg = None
    if spec is not None and spec.needs_svg:
        svg = await client.fetch_svg(ref.icon_set, ref.icon_name)
    return render_snippet(ref, framework, svg)
