"""Perceptual colour adapter over coloraide.

Converts hex / CSS colour strings to OKLCH triples and back, and fits an
OKLCH colour into sRGB by reducing chroma (lightness and hue are held).
Unparseable input never raises here: parse functions return None and the
callers decide on a fallback.
"""

import math

from coloraide import Color

# Chroma below this is treated as achromatic (hue undefined)
ACHROMATIC_CHROMA = 1e-4

# Bisection iterations for chroma reduction; 0.4 / 2**24 is far below hex precision
_FIT_ITERATIONS = 24


def parse(value: str | None) -> Color | None:
    """Parse any CSS colour string (bare hex accepted). Returns None if unparseable."""
    if not value or not isinstance(value, str):
        return None
    text = value.strip()
    if not text.startswith('#') and len(text) in (3, 6) and all(ch in '0123456789abcdefABCDEF' for ch in text):
        text = f'#{text}'
    try:
        return Color(text)
    except (ValueError, TypeError):
        return None


def to_oklch(value: str | None) -> tuple[float, float, float] | None:
    """Return (L, C, H) with L in 0..1, C >= 0, H in degrees (NaN when achromatic)."""
    color = parse(value)
    if color is None:
        return None
    lch = color.convert('oklch')
    lightness = lch['lightness']
    chroma = lch['chroma']
    hue = lch['hue']
    if math.isnan(lightness):
        lightness = 0.0
    if math.isnan(chroma):
        chroma = 0.0
    if chroma < ACHROMATIC_CHROMA:
        hue = math.nan
    elif math.isnan(hue):
        hue = 0.0
    return (lightness, chroma, hue % 360.0)


def is_achromatic(value: str | None) -> bool:
    lch = to_oklch(value)
    return lch is None or math.isnan(lch[2])


def in_srgb_gamut(lightness: float, chroma: float, hue: float) -> bool:
    return _oklch(lightness, chroma, hue).in_gamut('srgb')


def clamp_chroma(lightness: float, chroma: float, hue: float) -> tuple[float, float, float]:
    """Reduce chroma until the colour is representable in sRGB. Lightness and hue are unchanged."""
    lightness = min(1.0, max(0.0, lightness))
    chroma = max(0.0, chroma)
    if math.isnan(hue) or chroma == 0.0 or in_srgb_gamut(lightness, chroma, hue):
        return (lightness, chroma, hue)
    low, high = 0.0, chroma
    for _ in range(_FIT_ITERATIONS):
        mid = (low + high) / 2.0
        if in_srgb_gamut(lightness, mid, hue):
            low = mid
        else:
            high = mid
    return (lightness, low, hue)


def to_hex(lightness: float, chroma: float, hue: float) -> str:
    """Gamut-clamp an OKLCH triple and format it as lowercase '#rrggbb'."""
    lightness, chroma, hue = clamp_chroma(lightness, chroma, hue)
    srgb = _oklch(lightness, chroma, hue).convert('srgb')
    srgb.clip()
    return srgb.to_string(hex=True)


def with_chroma(value: str, factor: float) -> str | None:
    """Scale the chroma of a colour; None if unparseable."""
    lch = to_oklch(value)
    if lch is None:
        return None
    lightness, chroma, hue = lch
    if math.isnan(hue):
        return to_hex(lightness, 0.0, 0.0)
    return to_hex(lightness, chroma * factor, hue)


def rotate_hue(value: str, degrees: float) -> str | None:
    """Rotate the hue of a colour, wrapped into [0, 360). Achromatic colours are returned as-is."""
    lch = to_oklch(value)
    if lch is None:
        return None
    lightness, chroma, hue = lch
    if math.isnan(hue):
        return to_hex(lightness, 0.0, 0.0)
    return to_hex(lightness, chroma, (hue + degrees) % 360.0)


def _oklch(lightness: float, chroma: float, hue: float) -> Color:
    return Color('oklch', [lightness, chroma, 0.0 if math.isnan(hue) else hue])
