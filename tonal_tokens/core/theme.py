"""Theme generation entry point and the state update function around it.

generate_theme() is a pure function of (seeds, settings, contrast, surface
strategies). ThemeState + update() replace an ambient store: every event
produces a new state whose tokens are regenerated wholesale.
"""

from dataclasses import dataclass, field, replace
from typing import Any

from tonal_tokens.core.mapper import generate_mapped_tokens
from tonal_tokens.core.overrides import auto_semantic_seeds, build_palette, effective_seeds, harmony_color
from tonal_tokens.core.surface import DEFAULT_RADIUS, DEFAULT_SHADOW, generate_surface_tokens
from tonal_tokens.core.types import (
    ContrastLevel,
    Mode,
    OverrideSettings,
    Role,
    SeedColors,
    ThemeTokens,
    TokenMap,
)


def generate_theme(
    seeds: SeedColors | None = None,
    settings: OverrideSettings | None = None,
    contrast: ContrastLevel = ContrastLevel.DEFAULT,
    radius: str = DEFAULT_RADIUS,
    shadow: str = DEFAULT_SHADOW,
) -> ThemeTokens:
    """Seeds + overrides + contrast level -> complete light/dark/surface token maps and scales."""
    settings = (settings or OverrideSettings()).normalized()
    seeds = effective_seeds(seeds or SeedColors(), settings)
    palette = build_palette(seeds, settings, contrast)
    mapped = generate_mapped_tokens(palette, contrast, settings, seeds)
    return ThemeTokens(
        light=mapped[Mode.LIGHT],
        dark=mapped[Mode.DARK],
        surface=generate_surface_tokens(radius, shadow),
        scales=palette,
        contrast=contrast,
        seeds=seeds,
    )


# --- Events ---


@dataclass(frozen=True)
class SetSeed:
    role: Role
    color: str | None


@dataclass(frozen=True)
class UpdateSettings:
    changes: dict[str, Any]


@dataclass(frozen=True)
class SetContrast:
    contrast: ContrastLevel


@dataclass(frozen=True)
class SetMode:
    mode: Mode


@dataclass(frozen=True)
class SetSurface:
    radius: str | None = None
    shadow: str | None = None


Event = SetSeed | UpdateSettings | SetContrast | SetMode | SetSurface


@dataclass(frozen=True)
class ThemeState:
    """Inputs plus the tokens derived from them. `explicit` holds semantic roles the user picked by hand."""

    seeds: SeedColors = field(default_factory=SeedColors)
    settings: OverrideSettings = field(default_factory=OverrideSettings)
    contrast: ContrastLevel = ContrastLevel.DEFAULT
    mode: Mode = Mode.LIGHT
    radius: str = DEFAULT_RADIUS
    shadow: str = DEFAULT_SHADOW
    explicit: frozenset[Role] = frozenset()
    tokens: ThemeTokens | None = None

    @property
    def active_tokens(self) -> TokenMap:
        """Token map for the currently displayed mode."""
        if self.tokens is None:
            return {}
        return self.tokens.for_mode(self.mode)


def initial_state(seeds: SeedColors | None = None, settings: OverrideSettings | None = None) -> ThemeState:
    seeds = seeds or SeedColors()
    explicit = frozenset(role for role in Role if role not in (Role.PRIMARY, Role.SECONDARY) and seeds.get(role))
    return _regenerate(ThemeState(seeds=seeds, settings=settings or OverrideSettings(), explicit=explicit))


def _regenerate(state: ThemeState) -> ThemeState:
    tokens = generate_theme(state.seeds, state.settings, state.contrast, state.radius, state.shadow)
    return replace(state, tokens=tokens)


def update(state: ThemeState, event: Event) -> ThemeState:
    """Apply one event and regenerate. The input state is never modified."""
    if isinstance(event, SetSeed):
        seeds = state.seeds.with_color(event.role, event.color)
        explicit = state.explicit
        if event.role is Role.PRIMARY:
            # Semantic seeds follow primary unless the user set them
            auto = auto_semantic_seeds(event.color)
            for role, color in auto.items():
                if role not in explicit:
                    seeds = seeds.with_color(role, color)
            derived = harmony_color(seeds.primary, state.settings.harmony_mode)
            if derived is not None:
                seeds = seeds.with_color(Role.SECONDARY, derived)
        elif event.role is not Role.SECONDARY:
            if event.color:
                explicit = explicit | {event.role}
            else:
                explicit = explicit - {event.role}
                seeds = seeds.with_color(event.role, auto_semantic_seeds(seeds.primary)[event.role])
        return _regenerate(replace(state, seeds=seeds, explicit=explicit))

    if isinstance(event, UpdateSettings):
        settings = replace(state.settings, **event.changes).normalized()
        seeds = state.seeds
        if settings.harmony_mode is not state.settings.harmony_mode:
            derived = harmony_color(seeds.primary, settings.harmony_mode)
            if derived is not None:
                seeds = seeds.with_color(Role.SECONDARY, derived)
        return _regenerate(replace(state, settings=settings, seeds=seeds))

    if isinstance(event, SetContrast):
        return _regenerate(replace(state, contrast=event.contrast))

    if isinstance(event, SetMode):
        # Both modes are always generated; switching only changes which one is active
        return replace(state, mode=event.mode)

    if isinstance(event, SetSurface):
        return _regenerate(
            replace(
                state,
                radius=event.radius or state.radius,
                shadow=event.shadow or state.shadow,
            )
        )

    raise TypeError(f'Unknown theme event: {event!r}')

