"""Semantic token mapping: shade scales -> flat `--color-*` token maps per mode.

Per role (primary, secondary, error, warning, success, info) and mode:

  base        pro-mode pinned step > stay-true closest step > contrast search
  on-base     best of the light or dark extremes, never a mid-scale step
  container   contrast search in a window placed opposite to the base step
  on-container  in-family extremes first, then neutral ones
  fix         always step 400 (hover 500, pressed 600), identical in both modes
  hover/pressed  base +/- a mode and contrast dependent delta

Mode-wide tokens (surface, outline ladder, focus, disabled, backdrop, shadow)
come from the neutral and primary scales.

Missing scale entries never raise: the nearest available step is used, or a
neutral grey when the whole scale is missing.
"""

from tonal_tokens.core.contrast import find_best_contrast, find_optimal_step_by_contrast
from tonal_tokens.core.shades import find_closest_step_in_scale
from tonal_tokens.core.types import (
    SEMANTIC_ROLES,
    ContrastLevel,
    Mode,
    OverrideSettings,
    PaletteSet,
    Role,
    SeedColors,
    ShadeScale,
    Step,
    TokenMap,
)

FALLBACK_COLOR = '#808080'

BASE_RANGE: dict[Mode, tuple[int, int]] = {
    Mode.LIGHT: (300, 500),
    Mode.DARK: (500, 700),
}

STAY_TRUE_RANGE = (300, 600)

# Stricter contrast levels push the container window toward mid-scale
_CONTAINER_SHIFT: dict[ContrastLevel, int] = {
    ContrastLevel.DEFAULT: 0,
    ContrastLevel.HIGH: 50,
    ContrastLevel.EXTRA_HIGH: 100,
}

_BACKDROP: dict[tuple[Mode, ContrastLevel], str] = {
    (Mode.LIGHT, ContrastLevel.DEFAULT): 'rgba(0, 0, 0, 0.4)',
    (Mode.DARK, ContrastLevel.DEFAULT): 'rgba(0, 0, 0, 0.6)',
    (Mode.LIGHT, ContrastLevel.HIGH): 'rgba(0, 0, 0, 0.6)',
    (Mode.DARK, ContrastLevel.HIGH): 'rgba(0, 0, 0, 0.8)',
    (Mode.LIGHT, ContrastLevel.EXTRA_HIGH): 'rgba(0, 0, 0, 0.75)',
    (Mode.DARK, ContrastLevel.EXTRA_HIGH): 'rgba(0, 0, 0, 0.9)',
}

# name: (targets per contrast level, light range, dark range)
_OUTLINES: dict[str, tuple[tuple[float, float, float], tuple[int, int], tuple[int, int]]] = {
    'subtle': ((2.0, 2.0, 2.0), (100, 200), (800, 900)),
    'default': ((3.0, 3.5, 4.5), (200, 400), (600, 800)),
    'hover': ((3.5, 4.0, 5.0), (300, 500), (500, 700)),
    'pressed': ((4.0, 4.5, 6.0), (400, 600), (400, 600)),
    'strong': ((4.5, 5.5, 7.0), (500, 700), (300, 500)),
}

_LEVEL_INDEX = {ContrastLevel.DEFAULT: 0, ContrastLevel.HIGH: 1, ContrastLevel.EXTRA_HIGH: 2}


def pick(scale: ShadeScale, step: int) -> str:
    """scale[step], or the nearest available step, or FALLBACK_COLOR for an empty scale."""
    if step in scale:
        return scale[step]
    if not scale:
        return FALLBACK_COLOR
    nearest = min(scale, key=lambda s: (abs(s - step), s))
    return scale[nearest]


def background(neutral: ShadeScale, mode: Mode) -> str:
    """Background used for contrast searches: neutral 0 in light mode, neutral 1000 in dark mode."""
    return pick(neutral, 0 if mode is Mode.LIGHT else 1000)


def surface(neutral: ShadeScale, mode: Mode) -> str:
    return pick(neutral, 0 if mode is Mode.LIGHT else 950)


def state_deltas(mode: Mode, contrast: ContrastLevel) -> tuple[int, int]:
    """(hover, pressed) step offsets. Dark mode moves less than light mode."""
    extra = contrast is ContrastLevel.EXTRA_HIGH
    if mode is Mode.LIGHT:
        return (150, 300) if extra else (100, 200)
    return (-100, -200) if extra else (-50, -100)


def resolve_base_step(
    role: Role,
    scale: ShadeScale,
    neutral: ShadeScale,
    mode: Mode,
    contrast: ContrastLevel,
    settings: OverrideSettings,
    seed: str | None = None,
) -> Step:
    pinned = settings.pinned_step(role, mode)
    if pinned is not None:
        return pinned
    if settings.stay_true_to_input_color and seed:
        return find_closest_step_in_scale(seed, scale, *STAY_TRUE_RANGE)
    return find_optimal_step_by_contrast(scale, background(neutral, mode), contrast.text_target, BASE_RANGE[mode])


def container_range(base: Step, mode: Mode, contrast: ContrastLevel) -> tuple[int, int]:
    """Window for the container search. A darker base gets a lighter container and vice versa."""
    shift = _CONTAINER_SHIFT[contrast]
    if mode is Mode.LIGHT:
        if base >= 600:
            low, high = 100, 150
        elif base >= 400:
            low, high = 150, 250
        else:
            low, high = 200, 300
        return (low + shift, high + shift)
    if base <= 400:
        low, high = 850, 900
    elif base <= 600:
        low, high = 750, 850
    else:
        low, high = 700, 800
    return (low - shift, high - shift)


def resolve_container_step(
    scale: ShadeScale,
    neutral: ShadeScale,
    base: Step,
    mode: Mode,
    contrast: ContrastLevel,
) -> Step:
    step_range = container_range(base, mode, contrast)
    return find_optimal_step_by_contrast(scale, background(neutral, mode), contrast.container_target, step_range)


def _light_extremes(scale: ShadeScale, neutral: ShadeScale) -> list[str]:
    return [pick(neutral, 0), pick(scale, 0), pick(scale, 50), pick(scale, 100)]


def _dark_extremes(scale: ShadeScale, neutral: ShadeScale) -> list[str]:
    return [pick(neutral, 1000), pick(scale, 1000), pick(scale, 950), pick(scale, 900)]


def on_color(scale: ShadeScale, neutral: ShadeScale, step: Step, target: float) -> str:
    """Text colour for a filled token at `step`: light extremes from 400 up, dark extremes below."""
    candidates = _light_extremes(scale, neutral) if step >= 400 else _dark_extremes(scale, neutral)
    return find_best_contrast(pick(scale, step), candidates, target)


def state_on_color(scale: ShadeScale, neutral: ShadeScale, step: Step, mode: Mode, target: float) -> str:
    """Text colour for a hover/pressed state. Light mode tries neutral first, dark mode the scale's own extremes."""
    candidates = _light_extremes(scale, neutral) if step >= 400 else _dark_extremes(scale, neutral)
    if mode is Mode.DARK:
        candidates = candidates[1:] + candidates[:1]
    return find_best_contrast(pick(scale, step), candidates, target)


def on_container_color(scale: ShadeScale, neutral: ShadeScale, step: Step, mode: Mode, target: float) -> str:
    if mode is Mode.LIGHT:
        candidates = [
            pick(scale, 1000),
            pick(scale, 900),
            pick(scale, 800),
            pick(neutral, 900),
            pick(neutral, 800),
            pick(neutral, 0),
        ]
    else:
        candidates = [
            pick(scale, 0),
            pick(scale, 100),
            pick(scale, 200),
            pick(neutral, 100),
            pick(neutral, 200),
            pick(neutral, 1000),
        ]
    return find_best_contrast(pick(scale, step), candidates, target)


def create_role_tokens(
    palette: PaletteSet,
    role: Role,
    mode: Mode,
    contrast: ContrastLevel,
    settings: OverrideSettings,
    seed: str | None = None,
) -> TokenMap:
    """All tokens for one role in one mode."""
    s = palette.scale(role)
    n = palette.neutral
    name = role.value
    target = contrast.text_target

    base = resolve_base_step(role, s, n, mode, contrast, settings, seed)
    container = resolve_container_step(s, n, base, mode, contrast)
    hover_delta, pressed_delta = state_deltas(mode, contrast)

    base_hover = base.offset(hover_delta)
    base_pressed = base.offset(pressed_delta)
    container_hover = container.offset(hover_delta)
    container_pressed = container.offset(pressed_delta)
    fix, fix_hover, fix_pressed = Step(400), Step(500), Step(600)

    return {
        f'--color-{name}': pick(s, base),
        f'--color-on-{name}': on_color(s, n, base, target),
        f'--color-{name}-hover': pick(s, base_hover),
        f'--color-on-{name}-hover': state_on_color(s, n, base_hover, mode, target),
        f'--color-{name}-pressed': pick(s, base_pressed),
        f'--color-on-{name}-pressed': state_on_color(s, n, base_pressed, mode, target),
        f'--color-{name}-container': pick(s, container),
        f'--color-on-{name}-container': on_container_color(s, n, container, mode, target),
        f'--color-{name}-container-hover': pick(s, container_hover),
        f'--color-on-{name}-container-hover': on_container_color(s, n, container_hover, mode, target),
        f'--color-{name}-container-pressed': pick(s, container_pressed),
        f'--color-on-{name}-container-pressed': on_container_color(s, n, container_pressed, mode, target),
        f'--color-{name}-fix': pick(s, fix),
        f'--color-on-{name}-fix': on_color(s, n, fix, target),
        f'--color-{name}-fix-hover': pick(s, fix_hover),
        f'--color-on-{name}-fix-hover': on_color(s, n, fix_hover, target),
        f'--color-{name}-fix-pressed': pick(s, fix_pressed),
        f'--color-on-{name}-fix-pressed': on_color(s, n, fix_pressed, target),
    }


def create_mode_tokens(palette: PaletteSet, mode: Mode, contrast: ContrastLevel) -> TokenMap:
    """Surface, text, outline, focus, disabled, backdrop and shadow tokens for one mode."""
    n = palette.neutral
    light = mode is Mode.LIGHT
    surface_hex = surface(n, mode)

    tokens: TokenMap = {
        '--color-background': pick(n, 50 if light else 1000),
        '--color-surface': surface_hex,
        '--color-surface-variant': pick(n, 100 if light else 900),
        '--color-surface-hover': pick(n, 50 if light else 900),
        '--color-surface-pressed': pick(n, 100 if light else 850),
        '--color-inverse-surface': pick(n, 950 if light else 0),
        '--color-on-surface-heading': pick(n, 950 if light else 50),
        '--color-on-surface-variant': pick(n, 800 if light else 100),
        '--color-on-surface-subtle': pick(n, 500),
        '--color-on-surface-inverse': pick(n, 0 if light else 1000),
        '--color-primary-inverse': pick(palette.primary, 300 if light else 500),
    }

    level = _LEVEL_INDEX[contrast]
    for name, (targets, light_range, dark_range) in _OUTLINES.items():
        step_range = light_range if light else dark_range
        step = find_optimal_step_by_contrast(n, surface_hex, targets[level], step_range)
        tokens[f'--color-outline-{name}'] = pick(n, step)

    focus_step = find_optimal_step_by_contrast(palette.primary, surface_hex, contrast.text_target, BASE_RANGE[mode])
    tokens['--color-focus'] = pick(palette.primary, focus_step)
    tokens['--color-disabled'] = pick(n, 100 if light else 850)
    tokens['--color-on-disabled'] = pick(n, 400 if light else 600)
    tokens['--color-shadow'] = pick(n, 1000)
    tokens['--color-backdrop'] = _BACKDROP[(mode, contrast)]
    return tokens


def generate_mode_tokens(
    palette: PaletteSet,
    mode: Mode,
    contrast: ContrastLevel = ContrastLevel.DEFAULT,
    settings: OverrideSettings | None = None,
    seeds: SeedColors | None = None,
) -> TokenMap:
    """Full token map for one mode. Roles are independent, so iteration order never changes a value."""
    settings = settings or OverrideSettings()
    tokens = create_mode_tokens(palette, mode, contrast)
    for role in SEMANTIC_ROLES:
        seed = seeds.get(role) if seeds else None
        tokens.update(create_role_tokens(palette, role, mode, contrast, settings, seed))
    return tokens


def generate_mapped_tokens(
    palette: PaletteSet,
    contrast: ContrastLevel = ContrastLevel.DEFAULT,
    settings: OverrideSettings | None = None,
    seeds: SeedColors | None = None,
) -> dict[Mode, TokenMap]:
    return {mode: generate_mode_tokens(palette, mode, contrast, settings, seeds) for mode in Mode}
