"""Shade scale generation: one seed colour -> 21 steps from white (0) to black (1000).

Every step has a fixed OKLCH lightness target. Chroma is the seed chroma times
a multiplier picked by lightness bucket, and hue is the seed hue. Each step is
gamut-clamped by chroma reduction, so hue stays constant across the scale.
"""

import math

from tonal_tokens.core import oklch
from tonal_tokens.core.types import STEPS, ShadeScale, Step

# Eased, not linear: roughly L = 1 - (step / 1000) ** 0.9, pinned to 0.05 at black for sRGB safety
LIGHTNESS: dict[Step, float] = {
    Step(0): 1.0,
    Step(50): 0.985,
    Step(100): 0.96,
    Step(150): 0.93,
    Step(200): 0.89,
    Step(250): 0.845,
    Step(300): 0.79,
    Step(350): 0.73,
    Step(400): 0.67,
    Step(450): 0.61,
    Step(500): 0.55,
    Step(550): 0.49,
    Step(600): 0.43,
    Step(650): 0.38,
    Step(700): 0.33,
    Step(750): 0.28,
    Step(800): 0.24,
    Step(850): 0.20,
    Step(900): 0.16,
    Step(950): 0.11,
    Step(1000): 0.05,
}

NEUTRAL_TINT_CHROMA = 0.02


def chroma_multiplier(lightness: float) -> float:
    """Chroma multiplier for a target lightness.

    Mid tones get 1.1 so dark-mode accents stay vivid; pastels and near-blacks
    are pulled down so they don't clip against the sRGB boundary.
    """
    if lightness > 0.90:
        return 0.3
    if lightness > 0.80:
        return 0.6
    if 0.65 <= lightness <= 0.77:
        return 1.1
    if lightness < 0.20:
        return 0.35
    if lightness < 0.30:
        return 0.65
    return 1.0


def generate_shades(seed: str | None) -> ShadeScale:
    """Build the 21-step scale for a seed colour.

    Returns an empty scale for an unparseable seed. An achromatic seed (grey,
    white, black) has no hue to carry, so it yields a pure grey scale.
    """
    lch = oklch.to_oklch(seed)
    if lch is None:
        return {}
    _lightness, chroma, hue = lch
    if math.isnan(hue):
        return generate_pure_neutrals()
    return {step: oklch.to_hex(lightness, chroma * chroma_multiplier(lightness), hue) for step, lightness in LIGHTNESS.items()}


def generate_tinted_neutrals(source: str | None, chroma: float = NEUTRAL_TINT_CHROMA) -> ShadeScale:
    """Low-chroma neutral scale borrowing its hue from `source`; pure grey if source has no hue."""
    if oklch.is_achromatic(source):
        return generate_pure_neutrals()
    hue = oklch.to_oklch(source)[2]
    return {step: oklch.to_hex(lightness, chroma, hue) for step, lightness in LIGHTNESS.items()}


def generate_pure_neutrals() -> ShadeScale:
    return {step: oklch.to_hex(lightness, 0.0, 0.0) for step, lightness in LIGHTNESS.items()}


def find_closest_step_in_scale(
    color: str | None,
    scale: ShadeScale,
    min_step: int = 300,
    max_step: int = 600,
) -> Step:
    """Step in [min_step, max_step] whose lightness is closest to `color`'s. Falls back to 500."""
    target = oklch.to_oklch(color)
    if target is None:
        return Step(500)
    closest = Step(500)
    best_diff = math.inf
    for step in STEPS:
        if step < min_step or step > max_step:
            continue
        lch = oklch.to_oklch(scale.get(step))
        if lch is None:
            continue
        diff = abs(lch[0] - target[0])
        if diff < best_diff:
            best_diff = diff
            closest = step
    return closest
