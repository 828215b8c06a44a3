"""sRGB gamut checks for UI warnings. Token generation never rejects a colour, it clamps."""

from dataclasses import dataclass

from tonal_tokens.core import oklch


@dataclass
class GamutInfo:
    in_gamut: bool
    severity: str  # none | low | medium | high
    warning: str | None = None
    suggestion: str | None = None


def is_in_srgb_gamut(color: str) -> bool:
    parsed = oklch.parse(color)
    if parsed is None:
        return False
    return parsed.in_gamut('srgb')


def would_clip_in_srgb(lightness: float, chroma: float, hue: float) -> bool:
    """True if the OKLCH triple cannot be shown in sRGB without clipping."""
    return not oklch.in_srgb_gamut(lightness, chroma, hue)


def gamut_info(color: str) -> GamutInfo:
    lch = oklch.to_oklch(color)
    if lch is None:
        return GamutInfo(in_gamut=False, severity='high', warning='Invalid color')
    if is_in_srgb_gamut(color):
        return GamutInfo(in_gamut=True, severity='none')
    chroma = lch[1]
    if chroma > 0.3:
        severity = 'high'
    elif chroma > 0.2:
        severity = 'medium'
    else:
        severity = 'low'
    return GamutInfo(
        in_gamut=False,
        severity=severity,
        warning='Outside sRGB gamut - may appear different on older displays',
        suggestion='Reduce chroma or adjust lightness for better compatibility',
    )
