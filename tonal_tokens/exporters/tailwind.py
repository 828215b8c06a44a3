"""Tailwind configuration, v3 or v4.

v4 (default): a CSS `@theme` block with every scale step as
`--color-<scale>-<step>`, the light semantic tokens and the surface
tokens; dark tokens go in a nested `@theme` under
`@media (prefers-color-scheme: dark)`.

v3: a `tailwind.config.js` body, `module.exports = {...}`, extending
`theme.colors` with one object per scale keyed by step.

Example:
    tonal-tool tailwind > theme.css
    tonal-tool tailwind --tailwind-version 3 > tailwind.config.js
"""

import json

from tonal_tokens.core.types import Exporter, ThemeTokens

exporter = Exporter(name='tailwind', help='Tailwind v4 @theme CSS or v3 module.exports config.')


def render_v3(theme: ThemeTokens) -> str:
    colors = {name: {str(step): hex_ for step, hex_ in sorted(scale.items())} for name, scale in theme.scales.items()}
    config = {'theme': {'extend': {'colors': colors}}}
    return f'module.exports = {json.dumps(config, indent=2)}\n'


def render_v4(theme: ThemeTokens) -> str:
    lines = ['@theme {']
    for name, scale in theme.scales.items():
        lines.extend(f'  --color-{name}-{step}: {hex_};' for step, hex_ in sorted(scale.items()))
    lines.append('')
    lines.append('  /* Semantic tokens - Light */')
    lines.extend(f'  {key}: {value};' for key, value in theme.light.items())
    lines.append('')
    lines.append('  /* Surface tokens */')
    lines.extend(f'  {key}: {value};' for key, value in theme.surface.items())
    lines.append('}')
    lines.append('')
    lines.append('@media (prefers-color-scheme: dark) {')
    lines.append('  @theme {')
    lines.extend(f'    {key}: {value};' for key, value in theme.dark.items())
    lines.append('  }')
    lines.append('}')
    return '\n'.join(lines) + '\n'


@exporter.render
def render(theme: ThemeTokens, args) -> str:
    version = str(getattr(args, 'tailwind_version', None) or '4')
    if version.lstrip('v') == '3':
        return render_v3(theme)
    return render_v4(theme)
