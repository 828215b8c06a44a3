"""Shape tokens: corner radii, elevation shadows and border widths.

Shadows reference the --shadow-color-alpha-* variables so a consumer can
retint them without touching the shadow geometry.
"""

from tonal_tokens.core.types import TokenMap

RADIUS_STRATEGIES: dict[str, TokenMap] = {
    'none': {
        '--radius-small-ui': '0px',
        '--radius-base-ui': '0px',
        '--radius-large-ui': '0px',
        '--radius-full': '0px',
    },
    'medium': {
        '--radius-small-ui': '4px',
        '--radius-base-ui': '8px',
        '--radius-large-ui': '12px',
        '--radius-full': '9999px',
    },
    # Pills for controls, but cards stay rounded rectangles
    'circular': {
        '--radius-small-ui': '9999px',
        '--radius-base-ui': '9999px',
        '--radius-large-ui': '16px',
        '--radius-full': '9999px',
    },
}

SHADOW_STRATEGIES: dict[str, TokenMap] = {
    'none': {
        '--shadow-sm': 'none',
        '--shadow-md': 'none',
        '--shadow-lg': 'none',
    },
    'subtle': {
        '--shadow-sm': '0 1px 2px 0 var(--shadow-color-alpha-10)',
        '--shadow-md': '0 4px 6px -1px var(--shadow-color-alpha-15), 0 2px 4px -2px var(--shadow-color-alpha-10)',
        '--shadow-lg': '0 10px 15px -3px var(--shadow-color-alpha-15), 0 4px 6px -4px var(--shadow-color-alpha-10)',
    },
    'strong': {
        '--shadow-sm': '0 2px 3px 0 var(--shadow-color-alpha-15)',
        '--shadow-md': '0 6px 8px -1px var(--shadow-color-alpha-20), 0 3px 5px -2px var(--shadow-color-alpha-15)',
        '--shadow-lg': '0 12px 18px -3px var(--shadow-color-alpha-20), 0 5px 8px -4px var(--shadow-color-alpha-15)',
    },
}

SHADOW_ALPHAS: TokenMap = {
    '--shadow-color-alpha-10': 'rgba(0, 0, 0, 0.07)',
    '--shadow-color-alpha-15': 'rgba(0, 0, 0, 0.1)',
    '--shadow-color-alpha-20': 'rgba(0, 0, 0, 0.12)',
}

BORDER_WIDTHS: TokenMap = {
    '--border-width-default': '1px',
    '--border-width-strong': '2px',
}

DEFAULT_RADIUS = 'medium'
DEFAULT_SHADOW = 'subtle'


def generate_surface_tokens(radius: str = DEFAULT_RADIUS, shadow: str = DEFAULT_SHADOW) -> TokenMap:
    """Unknown strategy names fall back to the defaults."""
    radius_tokens = RADIUS_STRATEGIES.get(radius, RADIUS_STRATEGIES[DEFAULT_RADIUS])
    shadow_tokens = SHADOW_STRATEGIES.get(shadow, SHADOW_STRATEGIES[DEFAULT_SHADOW])
    return {**SHADOW_ALPHAS, **shadow_tokens, **radius_tokens, **BORDER_WIDTHS}
