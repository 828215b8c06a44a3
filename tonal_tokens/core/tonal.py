"""Reference Material-style tone system.

An alternate tone (0-100) -> OKLCH lightness mapping with its own chroma
taper, tonal palettes at the Material tone stops, hue harmonisation, and
the Material role -> tone tables. Kept for comparison only: the step-based
pipeline in mapper.py never calls into this module.
"""

import math

from tonal_tokens.core import oklch
from tonal_tokens.core.types import TokenMap

TONES: tuple[int, ...] = (0, 10, 20, 30, 40, 50, 60, 70, 80, 90, 95, 99, 100)

HARMONIZE_RATIO = 1.0 / 6.0

MATERIAL_TONES: dict[str, dict[str, dict[str, int]]] = {
    'light': {
        'default': {
            'primary': 40,
            'onPrimary': 100,
            'primaryContainer': 90,
            'onPrimaryContainer': 10,
            'secondary': 40,
            'onSecondary': 100,
            'secondaryContainer': 90,
            'onSecondaryContainer': 10,
            'error': 40,
            'onError': 100,
            'errorContainer': 90,
            'onErrorContainer': 10,
            'surface': 98,
            'onSurface': 10,
            'surfaceVariant': 90,
            'onSurfaceVariant': 30,
            'outline': 50,
            'outlineVariant': 80,
            'inverseSurface': 20,
            'inverseOnSurface': 95,
            'inversePrimary': 80,
        },
        'high-contrast': {
            'primary': 30,
            'onPrimary': 100,
            'primaryContainer': 95,
            'onPrimaryContainer': 0,
            'secondary': 30,
            'onSecondary': 100,
            'secondaryContainer': 95,
            'onSecondaryContainer': 0,
            'error': 30,
            'onError': 100,
            'errorContainer': 95,
            'onErrorContainer': 0,
            'surface': 100,
            'onSurface': 0,
            'surfaceVariant': 95,
            'onSurfaceVariant': 10,
            'outline': 40,
            'outlineVariant': 70,
            'inverseSurface': 10,
            'inverseOnSurface': 100,
            'inversePrimary': 90,
        },
    },
    'dark': {
        'default': {
            'primary': 80,
            'onPrimary': 20,
            'primaryContainer': 30,
            'onPrimaryContainer': 90,
            'secondary': 80,
            'onSecondary': 20,
            'secondaryContainer': 30,
            'onSecondaryContainer': 90,
            'error': 80,
            'onError': 20,
            'errorContainer': 30,
            'onErrorContainer': 90,
            'surface': 6,
            'onSurface': 90,
            'surfaceVariant': 30,
            'onSurfaceVariant': 80,
            'outline': 60,
            'outlineVariant': 30,
            'inverseSurface': 90,
            'inverseOnSurface': 20,
            'inversePrimary': 40,
        },
        'high-contrast': {
            'primary': 90,
            'onPrimary': 10,
            'primaryContainer': 20,
            'onPrimaryContainer': 100,
            'secondary': 90,
            'onSecondary': 10,
            'secondaryContainer': 20,
            'onSecondaryContainer': 100,
            'error': 90,
            'onError': 10,
            'errorContainer': 20,
            'onErrorContainer': 100,
            'surface': 0,
            'onSurface': 100,
            'surfaceVariant': 10,
            'onSurfaceVariant': 90,
            'outline': 70,
            'outlineVariant': 40,
            'inverseSurface': 95,
            'inverseOnSurface': 0,
            'inversePrimary': 30,
        },
    },
}


def tone_to_lightness(tone: float) -> float:
    """Power curve (exponent 0.9) with exact endpoints."""
    if tone <= 0:
        return 0.0
    if tone >= 100:
        return 1.0
    return (tone / 100.0) ** 0.9


def _tone_chroma_multiplier(tone: float) -> float:
    if tone >= 95 or tone <= 5:
        return 0.3
    if tone >= 85 or tone <= 15:
        return 0.6
    if tone >= 75 or tone <= 25:
        return 0.8
    return 1.0


def apply_tone(color: str, tone: float) -> str:
    """Re-light `color` at `tone`, keeping its hue. Unparseable input is returned unchanged."""
    lch = oklch.to_oklch(color)
    if lch is None:
        return color
    _lightness, chroma, hue = lch
    if math.isnan(hue):
        hue, chroma = 0.0, 0.0
    return oklch.to_hex(tone_to_lightness(tone), chroma * _tone_chroma_multiplier(tone), hue)


def generate_tonal_palette(color: str) -> dict[int, str]:
    return {tone: apply_tone(color, tone) for tone in TONES}


def harmonize(color: str, target: str) -> str:
    """Move `color`'s hue 1/6 of the shortest way toward `target`'s hue."""
    source = oklch.to_oklch(color)
    goal = oklch.to_oklch(target)
    if source is None or goal is None or math.isnan(source[2]) or math.isnan(goal[2]):
        return color
    diff = goal[2] - source[2]
    while diff > 180:
        diff -= 360
    while diff < -180:
        diff += 360
    hue = (source[2] + diff * HARMONIZE_RATIO + 360) % 360
    return oklch.to_hex(source[0], source[1], hue)


def create_material_tokens(
    primary: str,
    secondary: str,
    error: str,
    mode: str = 'light',
    contrast: str = 'default',
) -> TokenMap:
    """Material-style role tokens. contrast is 'default' or 'high-contrast' (extra-high maps to high)."""
    t = MATERIAL_TONES[mode]['default' if contrast == 'default' else 'high-contrast']

    lch = oklch.to_oklch(primary)
    if lch is None or math.isnan(lch[2]):
        neutral = '#808080'
    else:
        # Neutral family: primary hue at very low chroma
        neutral = oklch.to_hex(lch[0], 0.02, lch[2])

    return {
        '--color-primary': apply_tone(primary, t['primary']),
        '--color-on-primary': apply_tone(primary, t['onPrimary']),
        '--color-primary-container': apply_tone(primary, t['primaryContainer']),
        '--color-on-primary-container': apply_tone(primary, t['onPrimaryContainer']),
        '--color-secondary': apply_tone(secondary, t['secondary']),
        '--color-on-secondary': apply_tone(secondary, t['onSecondary']),
        '--color-secondary-container': apply_tone(secondary, t['secondaryContainer']),
        '--color-on-secondary-container': apply_tone(secondary, t['onSecondaryContainer']),
        '--color-error': apply_tone(error, t['error']),
        '--color-on-error': apply_tone(error, t['onError']),
        '--color-error-container': apply_tone(error, t['errorContainer']),
        '--color-on-error-container': apply_tone(error, t['onErrorContainer']),
        '--color-surface': apply_tone(neutral, t['surface']),
        '--color-on-surface': apply_tone(neutral, t['onSurface']),
        '--color-surface-variant': apply_tone(neutral, t['surfaceVariant']),
        '--color-on-surface-variant': apply_tone(neutral, t['onSurfaceVariant']),
        '--color-outline': apply_tone(neutral, t['outline']),
        '--color-outline-variant': apply_tone(neutral, t['outlineVariant']),
        '--color-inverse-surface': apply_tone(neutral, t['inverseSurface']),
        '--color-inverse-on-surface': apply_tone(neutral, t['inverseOnSurface']),
        '--color-inverse-primary': apply_tone(primary, t['inversePrimary']),
    }