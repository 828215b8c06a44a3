"""SCSS variables.

Light tokens become `$color-primary`, dark tokens the same name with a
`-dark` suffix (`$color-primary-dark`), surface tokens keep their name.

Example:
    tonal-tool scss > _tokens.scss
"""

from tonal_tokens.core.types import Exporter, ThemeTokens

exporter = Exporter(name='scss', help='SCSS variables ($name, $name-dark).')


def variable_name(token: str) -> str:
    return '$' + token.removeprefix('--')


@exporter.render
def render(theme: ThemeTokens, args) -> str:
    lines = ['// Light Mode']
    lines.extend(f'{variable_name(key)}: {value};' for key, value in theme.light.items())
    lines.append('')
    lines.append('// Dark Mode')
    lines.extend(f'{variable_name(key)}-dark: {value};' for key, value in theme.dark.items())
    lines.append('')
    lines.append('// Surface Tokens')
    lines.extend(f'{variable_name(key)}: {value};' for key, value in theme.surface.items())
    return '\n'.join(lines) + '\n'
