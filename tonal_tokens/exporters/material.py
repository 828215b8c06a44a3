"""Reference Material-style tokens (tone 0-100 system).

Builds primary / secondary / error role tokens plus surface, outline and
inverse tokens from the fixed Material tone tables instead of the step
search used everywhere else. Handy for comparing the two systems side by
side; it is never used to produce the main token set.

Contrast levels: default uses the default tones, high-contrast and
extra-high both use the high-contrast tones.

Output is CSS: `:root` for light, `[data-theme="dark"]` for dark.

Example:
    tonal-tool material --primary '#6750a4'
"""

from tonal_tokens.core.tonal import create_material_tokens
from tonal_tokens.core.types import ContrastLevel, Exporter, Mode, ThemeTokens

exporter = Exporter(name='material', help='Reference Material-style tone tokens as CSS.')


@exporter.render
def render(theme: ThemeTokens, args) -> str:
    contrast = 'default' if theme.contrast is ContrastLevel.DEFAULT else 'high-contrast'
    seeds = theme.seeds
    blocks = []
    for mode, selector in ((Mode.LIGHT, ':root'), (Mode.DARK, '[data-theme="dark"]')):
        tokens = create_material_tokens(
            seeds.primary,
            seeds.secondary,
            seeds.error or seeds.primary,
            mode=mode.value,
            contrast=contrast,
        )
        lines = [f'{selector} {{']
        lines.extend(f'  {key}: {value};' for key, value in tokens.items())
        lines.append('}')
        blocks.append('\n'.join(lines))
    return '\n\n'.join(blocks) + '\n'
