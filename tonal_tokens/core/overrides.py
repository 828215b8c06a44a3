"""Override pipeline: seed derivation and palette transforms applied around mapping.

Order of application in build_palette():

  0. harmony mode derives the secondary seed from primary (semantic seeds untouched)
  1. neutral scale regenerated from the tint source (or pure grey)
  2. saturation multiplier on every non-neutral scale
  3. temperature (hue) shift on every non-neutral scale, wrapped mod 360
  4. contrast-level saturation boost (x1.15 high, x1.3 extra-high)

Every transform re-clamps to the sRGB gamut. Unparseable seeds fall back to
the pure neutral scale so mapping always has 21 steps to work with.
"""

import math

from tonal_tokens.core import oklch
from tonal_tokens.core.shades import generate_pure_neutrals, generate_shades, generate_tinted_neutrals
from tonal_tokens.core.types import (
    SEMANTIC_ROLES,
    ContrastLevel,
    HarmonyMode,
    NeutralTintSource,
    OverrideSettings,
    PaletteSet,
    Role,
    SeedColors,
    ShadeScale,
)

HARMONY_ROTATION: dict[HarmonyMode, float] = {
    HarmonyMode.ANALOGOUS: 30.0,
    HarmonyMode.COMPLEMENTARY: 180.0,
    HarmonyMode.TRIADIC: 120.0,
}

CONTRAST_BOOST: dict[ContrastLevel, float] = {
    ContrastLevel.DEFAULT: 1.0,
    ContrastLevel.HIGH: 1.15,
    ContrastLevel.EXTRA_HIGH: 1.3,
}

# (hue, chroma factor) per semantic role, at L = 0.5
SEMANTIC_HUES: dict[Role, tuple[float, float]] = {
    Role.ERROR: (25.0, 0.9),
    Role.WARNING: (85.0, 1.0),
    Role.SUCCESS: (145.0, 0.8),
    Role.INFO: (260.0, 1.0),
}


def harmony_color(primary: str, mode: HarmonyMode) -> str | None:
    """Secondary seed for a harmony mode: primary rotated +30 / +180 / +120 degrees. None for NONE."""
    rotation = HARMONY_ROTATION.get(mode)
    if rotation is None:
        return None
    lch = oklch.to_oklch(primary)
    if lch is None:
        return None
    lightness, chroma, hue = lch
    if math.isnan(hue):
        hue = 0.0
    return oklch.to_hex(lightness, chroma, (hue + rotation) % 360.0)


def auto_semantic_seeds(primary: str | None) -> dict[Role, str]:
    """Error / warning / success / info seeds at fixed hues, chroma borrowed from primary."""
    lch = oklch.to_oklch(primary)
    base_chroma = lch[1] if lch is not None and lch[1] > 0.05 else 0.1
    return {role: oklch.to_hex(0.5, base_chroma * factor, hue) for role, (hue, factor) in SEMANTIC_HUES.items()}


def effective_seeds(seeds: SeedColors, settings: OverrideSettings) -> SeedColors:
    """Fill in derived seeds: harmony secondary, and auto semantics for unset semantic roles."""
    derived = harmony_color(seeds.primary, settings.harmony_mode)
    if derived is not None:
        seeds = seeds.with_color(Role.SECONDARY, derived)
    missing = [role for role in SEMANTIC_HUES if not seeds.get(role)]
    if missing:
        auto = auto_semantic_seeds(seeds.primary)
        for role in missing:
            seeds = seeds.with_color(role, auto[role])
    return seeds


def neutral_from_source(seeds: SeedColors, settings: OverrideSettings) -> ShadeScale:
    if settings.use_pure_neutrals or settings.neutral_tint_source is NeutralTintSource.PURE:
        return generate_pure_neutrals()
    if settings.neutral_tint_source is NeutralTintSource.SECONDARY:
        source = seeds.secondary
    elif settings.neutral_tint_source is NeutralTintSource.CUSTOM and settings.custom_neutral_tint:
        source = settings.custom_neutral_tint
    else:
        source = seeds.primary
    return generate_tinted_neutrals(source)


def _map_scale(scale: ShadeScale, transform) -> ShadeScale:
    adjusted: ShadeScale = {}
    for step, hex_ in scale.items():
        result = transform(hex_)
        adjusted[step] = result if result is not None else hex_
    return adjusted


def apply_saturation_multiplier(scale: ShadeScale, multiplier: float) -> ShadeScale:
    if multiplier == 1.0:
        return dict(scale)
    return _map_scale(scale, lambda hex_: oklch.with_chroma(hex_, multiplier))


def apply_temperature_shift(scale: ShadeScale, degrees: float) -> ShadeScale:
    if degrees == 0.0:
        return dict(scale)
    return _map_scale(scale, lambda hex_: oklch.rotate_hue(hex_, degrees))


def apply_contrast_saturation_boost(scale: ShadeScale, contrast: ContrastLevel) -> ShadeScale:
    """Compensate the perceived desaturation of high-contrast steps."""
    boost = CONTRAST_BOOST[contrast]
    if boost == 1.0:
        return dict(scale)
    return _map_scale(scale, lambda hex_: oklch.with_chroma(hex_, boost))


def build_palette(seeds: SeedColors, settings: OverrideSettings, contrast: ContrastLevel) -> PaletteSet:
    """Seeds + settings + contrast level -> the Palette Set the mapper consumes."""
    settings = settings.normalized()
    palette = PaletteSet(neutral=neutral_from_source(seeds, settings))
    for role in SEMANTIC_ROLES:
        scale = generate_shades(seeds.get(role))
        if not scale:
            palette.set_scale(role, generate_pure_neutrals())
            continue
        scale = apply_saturation_multiplier(scale, settings.saturation_multiplier)
        scale = apply_temperature_shift(scale, settings.temperature_shift)
        scale = apply_contrast_saturation_boost(scale, contrast)
        palette.set_scale(role, scale)
    return palette
