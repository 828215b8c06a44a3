"""Complete token document as JSON.

Shape (stable, keys in generation order):

    {
      "tokens": {"light": {...}, "dark": {...}, "surface": {...}},
      "scales": {"primary": {"0": "#ffffff", ..., "1000": "#..."}, ...}
    }

Scales are listed in the order primary, secondary, neutral, error,
warning, success, info.

Example:
    tonal-tool json --primary '#0052cc' > tokens.json
"""

import json

from tonal_tokens.core.types import Exporter, ThemeTokens

exporter = Exporter(name='json', help='Token document {tokens: {light, dark, surface}, scales}.')


@exporter.render
def render(theme: ThemeTokens, args) -> str:
    return json.dumps(theme.to_document(), indent=2) + '\n'
