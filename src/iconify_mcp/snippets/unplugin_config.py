"""unplugin-icons configuration generator for build tool x framework pairs."""

from __future__ import annotations

from typing import Literal

BuildTool = Literal["vite", "webpack", "rollup", "esbuild"]
UnpluginFramework = Literal["vue2", "vue3", "react", "solid", "svelte"]

BUILD_TOOLS: tuple[BuildTool, ...] = ("vite", "webpack", "rollup", "esbuild")
UNPLUGIN_FRAMEWORKS: tuple[UnpluginFramework, ...] = ("vue2", "vue3", "react", "solid", "svelte")

_VUE = frozenset({"vue2", "vue3"})
_JSX = frozenset({"react", "solid"})

# ─────────────────────────────────────────────────────────────────────────────
# Fixed blocks
# ─────────────────────────────────────────────────────────────────────────────

_CUSTOM_COLLECTIONS = """\
      customCollections: {
        // key as the collection name
        'my-icons': {
          account: '<svg><!-- Your SVG content here --></svg>',
          // Load your custom icon lazily
          settings: () => fs.readFile('./path/to/settings.svg', 'utf-8'),
        },
        // Load from filesystem
        'my-fs-icons': FileSystemIconLoader(
          './assets/icons',
          svg => svg.replace(/^<svg /, '<svg fill="currentColor" ')
        ),
      },
      // Optional icon customizer
      iconCustomizer(collection, icon, props) {
        // Example: customize all icons in the 'mdi' collection
        if (collection === 'mdi') {
          props.width = '1.5em'
          props.height = '1.5em'
        }
      },
"""

_VUE_RESOLVER = """\
    Components({
      resolvers: [
        IconsResolver({
          prefix: 'i', // Use <i-mdi-home /> or customize with your preferred prefix
        }),
      ],
    }),
"""

_JSX_RESOLVER = """\
    AutoImport({
      resolvers: [
        IconsResolver({
          prefix: 'Icon', // Use <IconMdiHome /> in your JSX
          extension: 'jsx',
        }),
      ],
    }),
"""

_USAGE_VUE_AUTO = """\
/*
With auto-import, use icons directly in your template:

<template>
  <i-mdi-home />
  <i-mdi-account style="color: red; font-size: 24px;" />
</template>
*/
"""

_USAGE_VUE_MANUAL = """\
/*
Without auto-import, import icons manually:

<script setup>
import MdiHome from '~icons/mdi/home'
import MdiAccount from '~icons/mdi/account?width=24px&height=24px'
</script>

<template>
  <MdiHome />
  <MdiAccount style="color: red;" />
</template>
*/
"""

_USAGE_JSX_AUTO = """\
/*
With auto-import, use icons directly in your component:

function MyComponent() {
  return (
    <div>
      <IconMdiHome />
      <IconMdiAccount style={{ color: 'red', fontSize: '24px' }} />
    </div>
  )
}
*/
"""

_USAGE_JSX_MANUAL = """\
/*
Without auto-import, import icons manually:

import MdiHome from '~icons/mdi/home'
import MdiAccount from '~icons/mdi/account'

function MyComponent() {
  return (
    <div>
      <MdiHome />
      <MdiAccount style={{ color: 'red', fontSize: '24px' }} />
    </div>
  )
}
*/
"""

_USAGE_SVELTE = """\
/*
Svelte usage:

<script>
  import MdiHome from '~icons/mdi/home'
  import MdiAccount from '~icons/mdi/account'
</script>

<div>
  <MdiHome />
  <MdiAccount style="color: red; font-size: 24px;" />
</div>
*/
"""

# ─────────────────────────────────────────────────────────────────────────────
# Generation
# ─────────────────────────────────────────────────────────────────────────────


def _import(build_tool: BuildTool, name: str, module: str) -> str:
    if build_tool == "webpack":
        return f"const {name} = require('{module}')\n"
    return f"import {name} from '{module}'\n"


def _imports(build_tool: BuildTool, framework: UnpluginFramework, custom_collections: bool, auto_import: bool) -> str:
    lines = [f"// {build_tool}.config.js\n"]
    if build_tool == "esbuild":
        lines.append("import { build } from 'esbuild'\n")
    lines.append(_import(build_tool, "Icons", f"unplugin-icons/{build_tool}"))

    if auto_import:
        if build_tool == "esbuild":
            lines.append("// Note: Auto-import with esbuild may require additional setup\n")
        elif framework in _VUE:
            lines.append(_import(build_tool, "Components", f"unplugin-vue-components/{build_tool}"))
            lines.append(_import(build_tool, "IconsResolver", "unplugin-icons/resolver"))
        elif framework in _JSX:
            lines.append(_import(build_tool, "AutoImport", f"unplugin-auto-import/{build_tool}"))
            lines.append(_import(build_tool, "IconsResolver", "unplugin-icons/resolver"))

    if custom_collections:
        if build_tool == "webpack":
            lines.append("const { FileSystemIconLoader } = require('unplugin-icons/loaders')\n")
            lines.append("const fs = require('fs').promises\n")
        else:
            lines.append("import { FileSystemIconLoader } from 'unplugin-icons/loaders'\n")
            lines.append("import { promises as fs } from 'node:fs'\n")
    return "".join(lines)


def _usage(framework: UnpluginFramework, auto_import: bool) -> str:
    if framework in _VUE:
        return _USAGE_VUE_AUTO if auto_import else _USAGE_VUE_MANUAL
    if framework in _JSX:
        return _USAGE_JSX_AUTO if auto_import else _USAGE_JSX_MANUAL
    return _USAGE_SVELTE


def generate_unplugin_config(
    build_tool: BuildTool,
    framework: UnpluginFramework,
    *,
    custom_collections: bool = False,
    auto_import: bool = True,
) -> str:
    """Build a ready-to-paste unplugin-icons config plus usage examples.

    Raises:
        ValueError: unknown build tool or framework
    """
    if build_tool not in BUILD_TOOLS:
        raise ValueError(f"Unsupported build tool: {build_tool}")
    if framework not in UNPLUGIN_FRAMEWORKS:
        raise ValueError(f"Unsupported framework: {framework}")

    parts = [
        f"// unplugin-icons configuration for {build_tool} with {framework}\n\n",
        _imports(build_tool, framework, custom_collections, auto_import),
    ]

    match build_tool:
        case "webpack":
            parts.append("\nmodule.exports = {\n  plugins: [\n")
        case "esbuild":
            parts.append("\nbuild({\n  plugins: [\n")
        case _:
            parts.append("\nexport default {\n  plugins: [\n")

    parts.append("    Icons({\n")
    parts.append(f"      compiler: '{framework}',\n")
    parts.append("      scale: 1.2, // Scale of icons against 1em\n")
    if custom_collections:
        parts.append(_CUSTOM_COLLECTIONS)
    parts.append("    }),\n")

    # esbuild only gets the note in the import header, no resolver plugin
    if auto_import and build_tool != "esbuild":
        if framework in _VUE:
            parts.append(_VUE_RESOLVER)
        elif framework in _JSX:
            parts.append(_JSX_RESOLVER)

    if build_tool == "esbuild":
        parts.append("  ],\n  // other esbuild options\n});\n")
    else:
        parts.append("  ],\n};\n")

    parts.append("\n// Usage Examples:\n\n")
    parts.append(_usage(framework, auto_import))
    return "".join(parts)
