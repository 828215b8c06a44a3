"""CSS custom properties for both modes.

Light-mode colour tokens and the surface tokens (radius, shadow, border)
go in `:root`; dark-mode colour tokens go in `[data-theme="dark"]`, so a
page switches theme by setting the attribute on <html>.

With --with-scales the 21-step scales are emitted first as
`--<scale>-<step>` variables in their own `:root` block.

Example:
    tonal-tool css --primary '#0052cc' > tokens.css
    tonal-tool css --contrast high-contrast --with-scales
"""

from tonal_tokens.core.types import Exporter, ThemeTokens, TokenMap

exporter = Exporter(name='css', help='CSS custom properties (:root + [data-theme="dark"]).')


def _declarations(tokens: TokenMap, indent: str = '  ') -> list[str]:
    return [f'{indent}{key}: {value};' for key, value in tokens.items()]


def render_scales(theme: ThemeTokens) -> str:
    lines = [':root {']
    for name, scale in theme.scales.items():
        lines.extend(f'  --{name}-{step}: {hex_};' for step, hex_ in sorted(scale.items()))
    lines.append('}')
    return '\n'.join(lines)


@exporter.render
def render(theme: ThemeTokens, args) -> str:
    blocks = []
    if getattr(args, 'with_scales', False):
        blocks.append(render_scales(theme))

    light = [':root {', '  /* Light Mode */']
    light.extend(_declarations(theme.light))
    light.append('')
    light.append('  /* Surface Tokens */')
    light.extend(_declarations(theme.surface))
    light.append('}')
    blocks.append('\n'.join(light))

    dark = ['[data-theme="dark"] {']
    dark.extend(_declarations(theme.dark))
    dark.append('}')
    blocks.append('\n'.join(dark))

    return '\n\n'.join(blocks) + '\n'
