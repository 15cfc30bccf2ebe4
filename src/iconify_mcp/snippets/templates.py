"""Snippet templates per framework.

Placeholders (`string.Template` syntax): `$icon_set`, `$icon_name` and
`$symbol` (the PascalCase icon name). Examples inside the customization
sections are fixed and do not vary with the requested icon.
"""

from string import Template

UNPLUGIN_ICONS = Template("""\
// Method 1: Using virtual imports
import Icon$symbol from 'virtual:icons/$icon_set/$icon_name'
// Usage: <Icon$symbol />

// Method 2: Using the unified syntax (recommended)
import Icon$symbol from '~icons/$icon_set/$icon_name'
// Usage: <Icon$symbol />

// Custom size example
import CustomSizeIcon from '~icons/$icon_set/$icon_name?width=2em&height=2em'
// Usage: <CustomSizeIcon />

## Customization Options

When using unplugin-icons, customization depends on the components it generates:

```jsx
// Using class names:
<IconMdiHome className="text-red-500 text-2xl" />

// In most frameworks:
<IconMdiHome style={{ color: 'red', fontSize: '24px' }} />

// For Vue with custom props support:
<IconMdiHome color="red" width="24" height="24" />

// Flip, rotate and inline via query parameters:
import FlippedIcon from '~icons/mdi/home?flip=horizontal&rotate=90deg&inline=true'
```

Consult unplugin-icons documentation for framework-specific customization options.""")

WEB_COMPONENT = Template("""\
<iconify-icon icon="$icon_set:$icon_name"></iconify-icon>

## Customization Options

The web component accepts various attributes for customization:

```html
<iconify-icon
  icon="mdi:home"
  style="color: red; font-size: 24px;"
  width="24"
  height="24"
  flip="horizontal"
  rotate="90deg"
  inline
></iconify-icon>
```

Available attributes:
- width, height: Size in pixels
- flip: horizontal, vertical, or both
- rotate: Rotation in degrees
- inline: present to align the icon with surrounding text
- style: CSS properties like color, font-size""")

REACT = Template("""\
// Assuming you use @iconify/react
// import { Icon } from '@iconify/react';
// <Icon icon="$icon_set:$icon_name" />

## Customization Options

The Iconify component for React accepts these common properties:

```jsx
<Icon
  icon="mdi:home"
  color="red"
  width="24"
  height="24"
  flip="horizontal"
  rotate={1}
  inline={true}
/>
```

Common properties:
- width, height: Size in pixels
- color: Icon color (CSS value)
- flip: "horizontal", "vertical", or "both"
- rotate: Rotation in 90° increments (1-3) or in degrees as string
- inline: boolean, shift icon to make it work with text""")

VUE = Template("""\
// Assuming you use @iconify/vue
// import { Icon } from '@iconify/vue';
// <Icon icon="$icon_set:$icon_name" />

## Customization Options

The Iconify component for Vue accepts these common properties:

```html
<Icon
  icon="mdi:home"
  color="red"
  width="24"
  height="24"
  flip="horizontal"
  rotate="90deg"
  :inline="true"
/>
```

Common properties:
- width, height: Size in pixels
- color: Icon color (CSS value)
- flip: "horizontal", "vertical", or "both"
- rotate: Rotation in degrees as string
- inline: boolean, shift icon to make it work with text""")

SVELTE = Template("""\
<!-- Assuming you use @iconify/svelte -->
<script>
  import Icon from '@iconify/svelte';
</script>

<Icon icon="$icon_set:$icon_name" />

## Customization Options

The Iconify component for Svelte accepts these common properties:

```svelte
<Icon
  icon="mdi:home"
  color="red"
  width="24"
  height="24"
  flip="horizontal"
  rotate={1}
  inline={true}
/>
```

Common properties:
- width, height: Size in pixels
- color: Icon color (CSS value)
- flip: "horizontal", "vertical", or "both"
- rotate: Rotation in 90° increments (1-3) or in degrees as string
- inline: boolean, shift icon to make it work with text""")

LIT = Template("""\
// Assuming you use @iconify/lit
// import { Icon } from '@iconify/lit';
// // Usage in render(): html`<Icon icon="$icon_set:$icon_name" />`

## Customization Options

The Iconify component for Lit accepts these common properties:

```js
// In your render() method:
return html`
  <Icon
    .icon="mdi:home"
    .color="red"
    .width="24"
    .height="24"
    .flip="horizontal"
    .rotate="90deg"
    .inline="true"
  />
`;
```

Common properties:
- width, height: Size in pixels
- color: Icon color (CSS value)
- flip: "horizontal", "vertical", or "both"
- rotate: Rotation in degrees as string
- inline: boolean, shift icon to make it work with text""")

EMBER = Template("""\
{{! Assuming you use @iconify/ember }}
<Icon @icon="$icon_set:$icon_name" />

## Customization Options

The Iconify component for Ember accepts these common properties:

```handlebars
<Icon
  @icon="mdi:home"
  @color="red"
  @width="24"
  @height="24"
  @flip="horizontal"
  @rotate="90deg"
  @inline={{true}}
/>
```

Common properties:
- width, height: Size in pixels
- color: Icon color (CSS value)
- flip: "horizontal", "vertical", or "both"
- rotate: Rotation in degrees as string
- inline: boolean, shift icon to make it work with text""")
