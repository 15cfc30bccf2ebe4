"""Snippet and guidance generation.

- render_snippet / build_snippet: (icon, framework) -> embeddable code
- FRAMEWORKS: per-framework template, setup text, CSS, doc link, customization
- get_setup_guidance / get_layout_shift_css / get_doc_link / get_customization_guide
- build_usage_guide: the full multi-framework usage guide
- generate_unplugin_config: unplugin-icons build configuration
"""

from .frameworks import FRAMEWORKS, FrameworkSpec, lookup
from .guidance import (
    SETUP_UNAVAILABLE,
    build_usage_guide,
    get_customization_guide,
    get_doc_link,
    get_layout_shift_css,
    get_setup_guidance,
    render_usage_section,
)
from .renderer import UNSUPPORTED_FRAMEWORK, build_snippet, render_snippet
from .unplugin_config import (
    BUILD_TOOLS,
    UNPLUGIN_FRAMEWORKS,
    BuildTool,
    UnpluginFramework,
    generate_unplugin_config,
)

__all__ = [
    "FRAMEWORKS",
    "FrameworkSpec",
    "lookup",
    "SETUP_UNAVAILABLE",
    "build_usage_guide",
    "get_customization_guide",
    "get_doc_link",
    "get_layout_shift_css",
    "get_setup_guidance",
    "render_usage_section",
    "UNSUPPORTED_FRAMEWORK",
    "build_snippet",
    "render_snippet",
    "BUILD_TOOLS",
    "UNPLUGIN_FRAMEWORKS",
    "BuildTool",
    "UnpluginFramework",
    "generate_unplugin_config",
]
