"""Configuration loading for tonal-tool.

Load order (first wins):
  1. CLI flags, merged on top of the result by __main__.
  2. TONAL_* environment variables.
  3. tonal.json at --config path (if explicitly provided), otherwise the
     first tonal.json found walking up from cwd, stopping at .git (file or dir).

Walking stops at .git so we never pick up a config from outside the repo.

tonal.json keys (all optional):

  primary, secondary, error, warning, success, info   seed colours
  contrast       default | high-contrast | extra-high
  harmony        none | analogous | complementary | triadic
  saturation     0.5 .. 1.5
  temperature    -15 .. 15 (degrees of hue)
  neutral_tint   primary | secondary | pure | <any colour>
  pure_neutrals  true / false
  stay_true      true / false
  pro_mode       true / false (implied by tones)
  tones          {"primary": {"light": 400, "dark": 600}} or ["primary:light:400"]
  radius         none | medium | circular
  shadow         none | subtle | strong

Bad values are dropped with a warning instead of failing the run; only an
unreadable or malformed config file is an error.
"""

import json
import math
import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any

from tonal_tokens.core import oklch
from tonal_tokens.core.surface import DEFAULT_RADIUS, DEFAULT_SHADOW, RADIUS_STRATEGIES, SHADOW_STRATEGIES
from tonal_tokens.core.types import (
    ContrastLevel,
    CustomTone,
    HarmonyMode,
    Mode,
    NeutralTintSource,
    OverrideSettings,
    Role,
    SeedColors,
)

CONFIG_NAME = 'tonal.json'

ENV_VARS: dict[str, str] = {
    'TONAL_PRIMARY': 'primary',
    'TONAL_SECONDARY': 'secondary',
    'TONAL_ERROR': 'error',
    'TONAL_WARNING': 'warning',
    'TONAL_SUCCESS': 'success',
    'TONAL_INFO': 'info',
    'TONAL_CONTRAST': 'contrast',
    'TONAL_HARMONY': 'harmony',
    'TONAL_SATURATION': 'saturation',
    'TONAL_TEMPERATURE': 'temperature',
    'TONAL_NEUTRAL_TINT': 'neutral_tint',
    'TONAL_RADIUS': 'radius',
    'TONAL_SHADOW': 'shadow',
}

_SEED_KEYS = tuple(role.value for role in Role)
_KNOWN_KEYS = set(_SEED_KEYS) | {
    'contrast',
    'harmony',
    'saturation',
    'temperature',
    'neutral_tint',
    'pure_neutrals',
    'stay_true',
    'pro_mode',
    'tones',
    'radius',
    'shadow',
}
_TRUE = {'1', 'true', 'yes', 'on'}


@dataclass
class ThemeConfig:
    """Everything generate_theme() needs, plus the warnings collected while resolving it."""

    seeds: SeedColors = field(default_factory=SeedColors)
    settings: OverrideSettings = field(default_factory=OverrideSettings)
    contrast: ContrastLevel = ContrastLevel.DEFAULT
    radius: str = DEFAULT_RADIUS
    shadow: str = DEFAULT_SHADOW
    warnings: list[str] = field(default_factory=list)


def _find_config(start: Path) -> Path | None:
    """Walk up from start, return first tonal.json found, stop at .git boundary."""
    current = start.resolve()
    while True:
        candidate = current / CONFIG_NAME
        if candidate.is_file():
            return candidate
        # Stop at repo root. .git can be a dir (normal clone) or file (worktree)
        if (current / '.git').exists():
            return None
        parent = current.parent
        if parent == current:
            return None
        current = parent


def _parse_config(path: Path) -> dict[str, Any]:
    """Read a tonal.json file. Raises ValueError if it is not a JSON object."""
    try:
        data = json.loads(path.read_text(encoding='utf-8'))
    except json.JSONDecodeError as e:
        raise ValueError(f'{path}: invalid JSON ({e.msg} at line {e.lineno})') from e
    if not isinstance(data, dict):
        raise ValueError(f'{path}: expected a JSON object')
    return data


def _env_overrides(environ: Mapping[str, str] | None = None) -> dict[str, str]:
    """Collect TONAL_* variables that are set and non-empty."""
    environ = os.environ if environ is None else environ
    return {key: environ[var] for var, key in ENV_VARS.items() if environ.get(var)}


def load_config(
    config_file: str | None = None,
    environ: Mapping[str, str] | None = None,
) -> tuple[dict[str, Any], Path | None]:
    """Merge tonal.json and TONAL_* variables (environment wins).

    Returns the raw values and the config path that was loaded, or None if
    no file was found. An explicit config_file that does not exist raises
    FileNotFoundError.
    """
    if config_file:
        path: Path | None = Path(config_file)
        if not path.is_file():
            raise FileNotFoundError(f'config file not found: {config_file}')
    else:
        path = _find_config(Path.cwd())

    values = _parse_config(path) if path else {}
    values.update(_env_overrides(environ))
    return values, path


def _enum(cls: type[Enum], value: Any, key: str, warnings: list[str]) -> Any:
    """Look an enum member up by value ('high-contrast') or by name ('high_contrast', 'HIGH')."""
    text = str(value).strip()
    for member in cls:
        if member.value == text or member.name == text.upper().replace('-', '_'):
            return member
    choices = ', '.join(member.value for member in cls)
    warnings.append(f'ignoring {key}={value!r} (expected one of: {choices})')
    return None


def _number(value: Any, key: str, warnings: list[str]) -> float | None:
    try:
        number = float(value)
    except (TypeError, ValueError):
        warnings.append(f'ignoring {key}={value!r} (not a number)')
        return None
    if not math.isfinite(number):
        warnings.append(f'ignoring {key}={value!r} (not a finite number)')
        return None
    return number


def _flag(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in _TRUE
    return bool(value)


def parse_tone(text: str) -> tuple[Role, Mode, int]:
    """Parse 'ROLE:MODE:STEP' (e.g. 'primary:dark:600'). Raises ValueError."""
    parts = [p.strip() for p in text.split(':')]
    if len(parts) != 3:
        raise ValueError(f'expected ROLE:MODE:STEP, got {text!r}')
    role_name, mode_name, step = parts
    try:
        return Role(role_name.lower()), Mode(mode_name.lower()), int(step)
    except ValueError as e:
        raise ValueError(f'bad tone {text!r}: {e}') from e


def _tones(value: Any, warnings: list[str]) -> dict[Role, CustomTone]:
    pinned: dict[Role, dict[str, int | None]] = {}
    if isinstance(value, Mapping):
        for role_name, per_mode in value.items():
            role = _enum(Role, role_name, 'tones', warnings)
            if role is None:
                continue
            if not isinstance(per_mode, Mapping):
                warnings.append(f'ignoring tones for {role_name!r} (expected {{"light": N, "dark": N}})')
                continue
            entry = pinned.setdefault(role, {'light': None, 'dark': None})
            for mode in Mode:
                if per_mode.get(mode.value) is None:
                    continue
                number = _number(per_mode[mode.value], f'tones.{role.value}.{mode.value}', warnings)
                if number is not None:
                    entry[mode.value] = int(number)
    elif isinstance(value, (list, tuple)):
        for item in value:
            try:
                role, mode, step = parse_tone(str(item))
            except ValueError as e:
                warnings.append(f'ignoring tone: {e}')
                continue
            pinned.setdefault(role, {'light': None, 'dark': None})[mode.value] = step
    else:
        warnings.append(f'ignoring tones={value!r} (expected an object or a list)')
    return {role: CustomTone(light=entry['light'], dark=entry['dark']) for role, entry in pinned.items()}


def resolve(values: Mapping[str, Any]) -> ThemeConfig:
    """Turn raw config values into seeds, settings and strategies. Never raises on bad values."""
    config = ThemeConfig()
    warnings = config.warnings

    for key in values:
        if key not in _KNOWN_KEYS:
            warnings.append(f'ignoring unknown setting {key!r}')

    seeds = config.seeds
    for key in _SEED_KEYS:
        value = values.get(key)
        if value is None:
            continue
        if oklch.parse(str(value)) is None:
            warnings.append(f'ignoring {key}={value!r} (not a colour)')
            continue
        seeds = seeds.with_color(Role(key), str(value))
    config.seeds = seeds

    settings: dict[str, Any] = {}
    if values.get('contrast') is not None:
        contrast = _enum(ContrastLevel, values['contrast'], 'contrast', warnings)
        if contrast is not None:
            config.contrast = contrast
    if values.get('harmony') is not None:
        harmony = _enum(HarmonyMode, values['harmony'], 'harmony', warnings)
        if harmony is not None:
            settings['harmony_mode'] = harmony
    if values.get('saturation') is not None:
        saturation = _number(values['saturation'], 'saturation', warnings)
        if saturation is not None:
            settings['saturation_multiplier'] = saturation
    if values.get('temperature') is not None:
        temperature = _number(values['temperature'], 'temperature', warnings)
        if temperature is not None:
            settings['temperature_shift'] = temperature

    tint = values.get('neutral_tint')
    if tint is not None:
        text = str(tint).strip()
        if text.lower() in {source.value for source in NeutralTintSource}:
            settings['neutral_tint_source'] = NeutralTintSource(text.lower())
        elif oklch.parse(text) is not None:
            settings['neutral_tint_source'] = NeutralTintSource.CUSTOM
            settings['custom_neutral_tint'] = text
        else:
            warnings.append(f'ignoring neutral_tint={tint!r} (expected primary, secondary, pure or a colour)')

    if values.get('pure_neutrals') is not None:
        settings['use_pure_neutrals'] = _flag(values['pure_neutrals'])
    if values.get('stay_true') is not None:
        settings['stay_true_to_input_color'] = _flag(values['stay_true'])
    if values.get('pro_mode') is not None:
        settings['pro_mode'] = _flag(values['pro_mode'])
    if values.get('tones'):
        tones = _tones(values['tones'], warnings)
        if tones:
            settings['custom_tones'] = tones
            settings.setdefault('pro_mode', True)

    config.settings = OverrideSettings(**settings).normalized()

    radius = values.get('radius')
    if radius is not None:
        if isinstance(radius, str) and radius in RADIUS_STRATEGIES:
            config.radius = radius
        else:
            warnings.append(f'ignoring radius={radius!r} (expected one of: {", ".join(RADIUS_STRATEGIES)})')
    shadow = values.get('shadow')
    if shadow is not None:
        if isinstance(shadow, str) and shadow in SHADOW_STRATEGIES:
            config.shadow = shadow
        else:
            warnings.append(f'ignoring shadow={shadow!r} (expected one of: {", ".join(SHADOW_STRATEGIES)})')

    return config
