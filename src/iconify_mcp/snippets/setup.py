"""Setup instructions and layout-shift CSS per integration method."""

RAW_SVG_SETUP = "No specific setup needed. Just embed the SVG."

UNPLUGIN_ICONS_SETUP = """\
## Setup for unplugin-icons

1. Install the package:
```bash
npm install -D unplugin-icons
```

2. Configure in your build tool:

### For Vite:
```js
// vite.config.js
import Icons from 'unplugin-icons/vite'
import { FileSystemIconLoader } from 'unplugin-icons/loaders'

export default {
  plugins: [
    Icons({
      compiler: 'vue3', // or 'vue2', 'jsx', 'solid'
      // Optional: Custom collections
      customCollections: {
        // key as the collection name
        'my-icons': {
          account: '<svg><!-- ... --></svg>',
          // other icons
        },
        // Load from filesystem
        'my-fs-icons': FileSystemIconLoader('./assets/icons'),
      },
      // Optional: Customize icon properties
      iconCustomizer(collection, icon, props) {
        // Customize specific icons or entire collections
        if (collection === 'mdi' && icon === 'account') {
          props.width = '2em'
          props.height = '2em'
        }
      }
    }),
  ],
}
```

### For Webpack:
```js
// webpack.config.js
const Icons = require('unplugin-icons/webpack')

module.exports = {
  plugins: [
    Icons({
      compiler: 'jsx', // For React
      // other options
    }),
  ],
}
```

3. Use with auto-imports (recommended):

For Vue:
```js
// vite.config.js
import Components from 'unplugin-vue-components/vite'
import IconsResolver from 'unplugin-icons/resolver'

export default {
  plugins: [
    Components({
      resolvers: [
        IconsResolver(),
      ],
    }),
  ],
}
```

Then use icons in components without importing:
```vue
<template>
  <i-mdi-account />
</template>
```

For React/Solid:
```js
// vite.config.js
import AutoImport from 'unplugin-auto-import/vite'
import IconsResolver from 'unplugin-icons/resolver'

export default {
  plugins: [
    AutoImport({
      resolvers: [
        IconsResolver({
          prefix: 'Icon',
          extension: 'jsx',
        }),
      ],
    }),
  ],
}
```

For more details, see: https://github.com/unplugin/unplugin-icons"""

WEB_COMPONENT_SETUP = """\
Include the IconifyIcon web component script:
```html
<script src="https://cdn.jsdelivr.net/npm/iconify-icon@1.0.0/dist/iconify-icon.min.js"></script>
```
See: https://iconify.design/docs/icon-components/iconify-icon/"""


def component_setup(package: str, doc_link: str, usage: str = "Import and use the Icon component.") -> str:
    """Install-and-use text shared by the `@iconify/<framework>` components."""
    return f"Install '{package}':\n```bash\nnpm install {package}\n```\n{usage} See: {doc_link}"


WEB_COMPONENT_CSS = """\
/* Add this CSS to prevent layout shifts with iconify-icon web component */
iconify-icon {
  display: inline-block;
  width: 1em;
  height: 1em;
}"""

RAW_SVG_CSS = "/* No specific layout shift prevention needed for raw SVG */"

ICON_CLASS_CSS = """\
/* Add this CSS to ensure consistent icon sizing */
.iconify {
  display: inline-block;
  width: 1em;
  height: 1em;
}"""
