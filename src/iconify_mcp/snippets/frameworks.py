"""Per-framework data table: snippet template, setup, CSS, docs, customization.

Everything known about an integration method lives in one `FrameworkSpec`
row so adding a framework is a single edit here.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from string import Template

from ..domain import Framework
from . import customization, setup, templates

_COMPONENT_DOCS = "https://iconify.design/docs/icon-components/"


@dataclass(frozen=True, slots=True)
class FrameworkSpec:
    """Static description of one integration method.

    `template` is None for raw SVG, whose snippet is the fetched document.
    """
    display_name: str
    setup: str
    layout_css: str
    customization: str
    template: Template | None = None
    doc_link: str | None = None

    @property
    def needs_svg(self) -> bool:
        return self.template is None


def _component(framework: Framework, template: Template, usage: str = "Import and use the Icon component.") -> FrameworkSpec:
    package = f"@iconify/{framework.value}"
    doc_link = f"{_COMPONENT_DOCS}{framework.value}/"
    return FrameworkSpec(
        display_name=framework.value.capitalize(),
        setup=setup.component_setup(package, doc_link, usage),
        layout_css=setup.ICON_CLASS_CSS,
        customization=customization.component(framework.value),
        template=template,
        doc_link=doc_link,
    )


FRAMEWORKS: Mapping[Framework, FrameworkSpec] = {
    Framework.RAW_SVG: FrameworkSpec(
        display_name="Raw SVG",
        setup=setup.RAW_SVG_SETUP,
        layout_css=setup.RAW_SVG_CSS,
        customization=customization.RAW_SVG,
    ),
    Framework.UNPLUGIN_ICONS: FrameworkSpec(
        display_name="unplugin-icons",
        setup=setup.UNPLUGIN_ICONS_SETUP,
        layout_css=setup.ICON_CLASS_CSS,
        customization=customization.UNPLUGIN_ICONS,
        template=templates.UNPLUGIN_ICONS,
        doc_link="https://github.com/unplugin/unplugin-icons",
    ),
    Framework.WEB_COMPONENT: FrameworkSpec(
        display_name="IconifyIcon Web Component",
        setup=setup.WEB_COMPONENT_SETUP,
        layout_css=setup.WEB_COMPONENT_CSS,
        customization=customization.WEB_COMPONENT,
        template=templates.WEB_COMPONENT,
        doc_link=f"{_COMPONENT_DOCS}iconify-icon/",
    ),
    Framework.REACT: _component(Framework.REACT, templates.REACT),
    Framework.VUE: _component(Framework.VUE, templates.VUE),
    Framework.SVELTE: _component(Framework.SVELTE, templates.SVELTE),
    Framework.LIT: _component(Framework.LIT, templates.LIT),
    Framework.EMBER: _component(Framework.EMBER, templates.EMBER, "Use the Icon component in your templates."),
}

_missing = set(Framework) - set(FRAMEWORKS)
if _missing:
    raise ImportError(f"FRAMEWORKS table missing entries for: {sorted(_missing)}")


def lookup(framework: str | Framework) -> FrameworkSpec | None:
    """Table row for a framework tag, or None for an unknown tag."""
    try:
        return FRAMEWORKS[Framework(framework)]
    except ValueError:
        return None
