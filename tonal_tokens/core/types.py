"""Shared types for tonal-tool: Step, Role, Mode, ContrastLevel, settings, palettes, tokens, Exporter."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any


class Step(int):
    """A position on the white (0) to black (1000) scale, always a multiple of 50."""

    @classmethod
    def snap(cls, value: float) -> Step:
        """Round to the nearest 50 and clamp into [0, 1000]."""
        snapped = math.floor(value / 50.0 + 0.5) * 50
        return cls(min(1000, max(0, snapped)))

    def offset(self, delta: int) -> Step:
        return Step.snap(int(self) + delta)

    def __repr__(self) -> str:
        return f'Step({int(self)})'

    def __str__(self) -> str:
        return str(int(self))


STEPS: tuple[Step, ...] = tuple(Step(v) for v in range(0, 1001, 50))


def _pinned(value: float | None) -> Step | None:
    """Snap a pinned tone onto the grid; a missing or non-finite tone pins nothing."""
    if value is None or not math.isfinite(value):
        return None
    return Step.snap(value)


def _finite(value: float, default: float) -> float:
    value = float(value)
    return value if math.isfinite(value) else default


ShadeScale = dict[Step, str]
TokenMap = dict[str, str]


class Role(Enum):
    PRIMARY = 'primary'
    SECONDARY = 'secondary'
    ERROR = 'error'
    WARNING = 'warning'
    SUCCESS = 'success'
    INFO = 'info'


SEMANTIC_ROLES: tuple[Role, ...] = tuple(Role)

# Export order of the palette scales
SCALE_NAMES: tuple[str, ...] = ('primary', 'secondary', 'neutral', 'error', 'warning', 'success', 'info')


class Mode(Enum):
    LIGHT = 'light'
    DARK = 'dark'


class ContrastLevel(Enum):
    DEFAULT = 'default'
    HIGH = 'high-contrast'
    EXTRA_HIGH = 'extra-high'

    @property
    def text_target(self) -> float:
        return {ContrastLevel.DEFAULT: 4.5, ContrastLevel.HIGH: 7.0, ContrastLevel.EXTRA_HIGH: 9.0}[self]

    @property
    def container_target(self) -> float:
        return {ContrastLevel.DEFAULT: 3.0, ContrastLevel.HIGH: 4.5, ContrastLevel.EXTRA_HIGH: 7.0}[self]


class HarmonyMode(Enum):
    NONE = 'none'
    ANALOGOUS = 'analogous'
    COMPLEMENTARY = 'complementary'
    TRIADIC = 'triadic'


class NeutralTintSource(Enum):
    PRIMARY = 'primary'
    SECONDARY = 'secondary'
    CUSTOM = 'custom'
    PURE = 'pure'


@dataclass(frozen=True)
class CustomTone:
    """Pro-mode pinned base step for one role, per mode."""

    light: int | None = None
    dark: int | None = None

    def for_mode(self, mode: Mode) -> Step | None:
        value = self.light if mode is Mode.LIGHT else self.dark
        return _pinned(value)


@dataclass(frozen=True)
class OverrideSettings:
    """User-owned regeneration settings. Never derived, never persisted by the core."""

    use_pure_neutrals: bool = False
    saturation_multiplier: float = 1.0
    temperature_shift: float = 0.0
    harmony_mode: HarmonyMode = HarmonyMode.NONE
    stay_true_to_input_color: bool = False
    pro_mode: bool = False
    custom_tones: dict[Role, CustomTone] = field(default_factory=dict)
    neutral_tint_source: NeutralTintSource = NeutralTintSource.PRIMARY
    custom_neutral_tint: str | None = None

    def normalized(self) -> OverrideSettings:
        """Clamp numeric fields into their documented ranges and snap custom tones to the step grid.

        Non-finite numbers fall back to the defaults; a non-finite tone is dropped.
        """
        tones = {}
        for role, tone in self.custom_tones.items():
            light, dark = tone.for_mode(Mode.LIGHT), tone.for_mode(Mode.DARK)
            tones[role] = CustomTone(
                light=None if light is None else int(light),
                dark=None if dark is None else int(dark),
            )
        return replace(
            self,
            saturation_multiplier=min(1.5, max(0.5, _finite(self.saturation_multiplier, 1.0))),
            temperature_shift=min(15.0, max(-15.0, _finite(self.temperature_shift, 0.0))),
            custom_tones=tones,
        )

    def pinned_step(self, role: Role, mode: Mode) -> Step | None:
        if not self.pro_mode:
            return None
        tone = self.custom_tones.get(role)
        return tone.for_mode(mode) if tone else None


@dataclass(frozen=True)
class SeedColors:
    """User-chosen seed colours. Semantic seeds left as None are derived from primary."""

    primary: str = '#0052cc'
    secondary: str = '#e87d00'
    error: str | None = None
    warning: str | None = None
    success: str | None = None
    info: str | None = None

    def get(self, role: Role) -> str | None:
        return getattr(self, role.value)

    def with_color(self, role: Role, color: str | None) -> SeedColors:
        return replace(self, **{role.value: color})


@dataclass
class PaletteSet:
    """One shade scale per role plus the neutral scale."""

    primary: ShadeScale = field(default_factory=dict)
    secondary: ShadeScale = field(default_factory=dict)
    neutral: ShadeScale = field(default_factory=dict)
    error: ShadeScale = field(default_factory=dict)
    warning: ShadeScale = field(default_factory=dict)
    success: ShadeScale = field(default_factory=dict)
    info: ShadeScale = field(default_factory=dict)

    def scale(self, role: Role) -> ShadeScale:
        return getattr(self, role.value)

    def set_scale(self, role: Role, scale: ShadeScale) -> None:
        setattr(self, role.value, scale)

    def items(self) -> Iterator[tuple[str, ShadeScale]]:
        for name in SCALE_NAMES:
            yield name, getattr(self, name)


@dataclass
class ThemeTokens:
    """Final generator output: per-mode colour tokens, surface tokens, the scales and the seeds they came from."""

    light: TokenMap = field(default_factory=dict)
    dark: TokenMap = field(default_factory=dict)
    surface: TokenMap = field(default_factory=dict)
    scales: PaletteSet = field(default_factory=PaletteSet)
    contrast: ContrastLevel = ContrastLevel.DEFAULT
    seeds: SeedColors = field(default_factory=SeedColors)

    def for_mode(self, mode: Mode) -> TokenMap:
        return self.light if mode is Mode.LIGHT else self.dark

    def to_document(self) -> dict[str, Any]:
        """Stable JSON shape: {tokens: {light, dark, surface}, scales: {name: {step: hex}}}."""
        return {
            'tokens': {
                'light': dict(self.light),
                'dark': dict(self.dark),
                'surface': dict(self.surface),
            },
            'scales': {name: {str(step): hex_ for step, hex_ in sorted(scale.items())} for name, scale in self.scales.items()},
        }


@dataclass
class Report:
    """Accumulates contrast audit rows for text/JSON output."""

    contrast: ContrastLevel = ContrastLevel.DEFAULT
    target: float = 4.5
    modes: dict[str, list[dict[str, Any]]] = field(default_factory=dict)
    pass_count: int = 0
    fail_count: int = 0

    def add(self, mode: Mode, row: dict[str, Any]) -> None:
        """Add one background/foreground pair for a mode."""
        self.modes.setdefault(mode.value, []).append(row)

    def record_pass(self) -> None:
        self.pass_count += 1

    def record_fail(self) -> None:
        self.fail_count += 1


class Exporter:
    """A self-registering output format.

    Usage in an exporter module:

        exporter = Exporter(name='css', help='CSS custom properties')

        @exporter.render
        def render(theme, args):
            return '...'
    """

    def __init__(self, name: str, help: str = ''):
        self.name = name
        self.help = help
        self._render_fn: Callable | None = None

    def render(self, fn: Callable) -> Callable:
        """Decorator to register the render function."""
        self._render_fn = fn
        return fn

    def execute(self, theme: ThemeTokens, args: Any) -> str:
        """Execute the exporter's render function."""
        if self._render_fn is None:
            raise RuntimeError(f'Exporter {self.name} has no render function')
        return self._render_fn(theme, args)
