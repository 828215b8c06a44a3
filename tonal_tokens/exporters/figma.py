"""Flat design-token JSON for Figma token plugins.

Every token becomes `<mode>/<name>` -> {"value": ..., "type": "color"},
with mode one of light, dark, surface.

Example:
    tonal-tool figma > figma-tokens.json
"""

import json

from tonal_tokens.core.types import Exporter, ThemeTokens

exporter = Exporter(name='figma', help='Figma token JSON (light/<name>, dark/<name>, surface/<name>).')


def figma_tokens(theme: ThemeTokens) -> dict[str, dict[str, str]]:
    out: dict[str, dict[str, str]] = {}
    for group, tokens in (('light', theme.light), ('dark', theme.dark), ('surface', theme.surface)):
        for key, value in tokens.items():
            out[f'{group}/{key}'] = {'value': value, 'type': 'color'}
    return out


@exporter.render
def render(theme: ThemeTokens, args) -> str:
    return json.dumps(figma_tokens(theme), indent=2) + '\n'
