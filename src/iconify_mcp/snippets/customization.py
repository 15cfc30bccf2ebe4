"""Customization guides returned by the `icon-customization-guide` tool."""

RAW_SVG = """\
When using raw SVG, you can customize by directly modifying SVG attributes like width, height, fill, stroke, etc.

Example:
```html
<svg width="24" height="24" viewBox="0 0 24 24" fill="currentColor">
  <!-- icon contents -->
</svg>
```"""

WEB_COMPONENT = """\
The web component accepts various attributes for customization:

```html
<iconify-icon
  icon="mdi:home"
  style="color: red; font-size: 24px;"
  width="24"
  height="24"
  flip="horizontal"
  rotate="90deg"
></iconify-icon>
```

Available attributes:
- width, height: Size in pixels
- flip: horizontal, vertical, or both
- rotate: Rotation in degrees
- style: CSS properties like color, font-size"""


def component(framework: str) -> str:
    """Shared guide for the `@iconify/<framework>` Icon components."""
    is_vue = framework == "vue"
    fence = "html" if is_vue else "jsx"
    inline = ':inline="true"' if is_vue else "inline={true}"
    return f"""\
The Iconify component for {framework} accepts these common properties:

```{fence}
<Icon
  icon="mdi:home"
  color="red"
  width="24"
  height="24"
  flip="horizontal"
  rotate={{1}}
  {inline}
/>
```

Common properties:
- width, height: Size in pixels
- color: Icon color (CSS value)
- flip: "horizontal", "vertical", or "both"
- rotate: Rotation in 90° increments (1-3) or in degrees as string
- inline: boolean, shift icon to make it work with text"""


_UNPLUGIN_COMPONENTS = """\
When using unplugin-icons, customization depends on the components it generates:

```jsx
// In most frameworks:
<IconMdiHome style={{ color: 'red', fontSize: '24px' }} />

// For Vue with custom props support:
<IconMdiHome color="red" width="24" height="24" />
```

Consult unplugin-icons documentation for framework-specific customization options."""

UNPLUGIN_OPTIONS = """\
# Customization Options for unplugin-icons

## Query Parameters
You can customize individual icons using query parameters:

```js
// Different sizes for the same icon
import MdiAlarmNormal from '~icons/mdi/alarm'
import MdiAlarmLarge from '~icons/mdi/alarm?width=4em&height=4em'
import MdiAlarmSmall from '~icons/mdi/alarm?width=1em&height=1em'
```

## Global Customization
You can customize icons globally in your configuration:

```js
Icons({
  scale: 1.2, // Scale of icons against 1em
  defaultStyle: '', // Style applied to all icons
  defaultClass: '', // Class names applied to all icons
})
```

## Icon Customizer
For more fine-grained control, use the iconCustomizer function:

```js
Icons({
  iconCustomizer(collection, icon, props) {
    // Customize all icons in a collection
    if (collection === 'mdi') {
      props.width = '1.5em'
      props.height = '1.5em'
    }

    // Customize specific icons
    if (collection === 'mdi' && icon === 'account') {
      props.width = '2em'
      props.height = '2em'
    }
  }
})
```

## SVG Transformation
You can transform the SVG content directly:

```js
Icons({
  transform(svg, collection, icon) {
    // Add fill="currentColor" to specific icons
    if (collection === 'my-icons' && icon === 'logo') {
      return svg.replace(/^<svg /, '<svg fill="currentColor" ')
    }
    return svg
  }
})
```

## Custom Collections
You can define custom collections in your config:

```js
import { FileSystemIconLoader } from 'unplugin-icons/loaders'

Icons({
  customCollections: {
    // Inline SVG definitions
    'my-icons': {
      account: '<svg><!-- ... --></svg>',
      settings: () => fs.readFile('./path/to/settings.svg', 'utf-8'),
    },

    // Load from filesystem
    'fs-icons': FileSystemIconLoader(
      './assets/icons',
      svg => svg.replace(/^<svg /, '<svg fill="currentColor" ')
    ),

    // Custom loader with async function
    'remote-icons': async (iconName) => {
      return await fetch(`https://example.com/icons/${iconName}.svg`).then(res => res.text())
    }
  }
})
```"""

UNPLUGIN_ICONS = f"{_UNPLUGIN_COMPONENTS}\n\n{UNPLUGIN_OPTIONS}"

UNAVAILABLE = "Customization guidance not available for this framework."
