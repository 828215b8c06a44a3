"""Tests for tonal_tokens.core.mapper: semantic tokens from shade scales."""

import re

import pytest
from tonal_tokens.core.contrast import contrast_ratio
from tonal_tokens.core.mapper import (
    FALLBACK_COLOR,
    background,
    container_range,
    create_role_tokens,
    generate_mode_tokens,
    pick,
    resolve_base_step,
    state_deltas,
)
from tonal_tokens.core.overrides import build_palette
from tonal_tokens.core.shades import generate_pure_neutrals, generate_shades
from tonal_tokens.core.theme import generate_theme
from tonal_tokens.core.types import (
    ContrastLevel,
    CustomTone,
    Mode,
    OverrideSettings,
    PaletteSet,
    Role,
    SeedColors,
    Step,
)

HEX = re.compile(r'^#[0-9a-f]{6}$')

ROLE_SUFFIXES = [
    '',
    '-hover',
    '-pressed',
    '-container',
    '-container-hover',
    '-container-pressed',
    '-fix',
    '-fix-hover',
    '-fix-pressed',
]


@pytest.fixture(scope='module')
def blue_theme():
    return generate_theme(SeedColors(primary='#0052cc'))


@pytest.fixture(scope='module')
def blue_palette():
    settings = OverrideSettings()
    return build_palette(SeedColors(primary='#0052cc', secondary='#e87d00'), settings, ContrastLevel.DEFAULT)


class TestPick:
    def test_exact(self):
        assert pick({Step(500): '#123456'}, 500) == '#123456'

    def test_nearest(self):
        scale = {Step(400): '#111111', Step(700): '#777777'}
        assert pick(scale, 500) == '#111111'

    def test_nearest_tie_prefers_lower(self):
        scale = {Step(400): '#111111', Step(600): '#666666'}
        assert pick(scale, 500) == '#111111'

    def test_empty_scale(self):
        assert pick({}, 500) == FALLBACK_COLOR


class TestStateDeltas:
    def test_light(self):
        assert state_deltas(Mode.LIGHT, ContrastLevel.DEFAULT) == (100, 200)
        assert state_deltas(Mode.LIGHT, ContrastLevel.HIGH) == (100, 200)
        assert state_deltas(Mode.LIGHT, ContrastLevel.EXTRA_HIGH) == (150, 300)

    def test_dark(self):
        assert state_deltas(Mode.DARK, ContrastLevel.DEFAULT) == (-50, -100)
        assert state_deltas(Mode.DARK, ContrastLevel.EXTRA_HIGH) == (-100, -200)


class TestContainerRange:
    def test_light_inverse_to_base(self):
        assert container_range(Step(700), Mode.LIGHT, ContrastLevel.DEFAULT) == (100, 150)
        assert container_range(Step(500), Mode.LIGHT, ContrastLevel.DEFAULT) == (150, 250)
        assert container_range(Step(300), Mode.LIGHT, ContrastLevel.DEFAULT) == (200, 300)

    def test_dark_mirrored(self):
        assert container_range(Step(300), Mode.DARK, ContrastLevel.DEFAULT) == (850, 900)
        assert container_range(Step(500), Mode.DARK, ContrastLevel.DEFAULT) == (750, 850)
        assert container_range(Step(700), Mode.DARK, ContrastLevel.DEFAULT) == (700, 800)

    def test_stricter_levels_move_toward_mid_scale(self):
        assert container_range(Step(500), Mode.LIGHT, ContrastLevel.EXTRA_HIGH) == (250, 350)
        assert container_range(Step(500), Mode.DARK, ContrastLevel.EXTRA_HIGH) == (650, 750)


class TestBaseStep:
    def test_pinned_tone_wins(self, blue_palette):
        settings = OverrideSettings(pro_mode=True, custom_tones={Role.PRIMARY: CustomTone(light=437)})
        step = resolve_base_step(
            Role.PRIMARY,
            blue_palette.primary,
            blue_palette.neutral,
            Mode.LIGHT,
            ContrastLevel.DEFAULT,
            settings,
        )
        assert step == 450

    def test_pinned_tone_clamped(self, blue_palette):
        settings = OverrideSettings(pro_mode=True, custom_tones={Role.PRIMARY: CustomTone(dark=1200)})
        step = resolve_base_step(
            Role.PRIMARY,
            blue_palette.primary,
            blue_palette.neutral,
            Mode.DARK,
            ContrastLevel.DEFAULT,
            settings,
        )
        assert step == 1000

    def test_pinned_ignored_without_pro_mode(self, blue_palette):
        settings = OverrideSettings(pro_mode=False, custom_tones={Role.PRIMARY: CustomTone(light=100)})
        step = resolve_base_step(
            Role.PRIMARY,
            blue_palette.primary,
            blue_palette.neutral,
            Mode.LIGHT,
            ContrastLevel.DEFAULT,
            settings,
        )
        assert 300 <= step <= 500

    def test_stay_true(self, blue_palette):
        settings = OverrideSettings(stay_true_to_input_color=True)
        seed = blue_palette.primary[Step(350)]
        step = resolve_base_step(
            Role.PRIMARY,
            blue_palette.primary,
            blue_palette.neutral,
            Mode.LIGHT,
            ContrastLevel.DEFAULT,
            settings,
            seed,
        )
        assert step == 350

    def test_contrast_search_in_range(self, blue_palette):
        for mode, (low, high) in ((Mode.LIGHT, (300, 500)), (Mode.DARK, (500, 700))):
            step = resolve_base_step(
                Role.PRIMARY,
                blue_palette.primary,
                blue_palette.neutral,
                mode,
                ContrastLevel.DEFAULT,
                OverrideSettings(),
            )
            assert low <= step <= high


class TestRoleTokens:
    def test_all_names(self, blue_palette):
        tokens = create_role_tokens(blue_palette, Role.PRIMARY, Mode.LIGHT, ContrastLevel.DEFAULT, OverrideSettings())
        assert len(tokens) == 18
        for suffix in ROLE_SUFFIXES:
            assert f'--color-primary{suffix}' in tokens
            assert f'--color-on-primary{suffix}' in tokens

    def test_hover_pressed_light(self, blue_palette):
        settings = OverrideSettings(pro_mode=True, custom_tones={Role.PRIMARY: CustomTone(light=400)})
        tokens = create_role_tokens(blue_palette, Role.PRIMARY, Mode.LIGHT, ContrastLevel.DEFAULT, settings)
        assert tokens['--color-primary'] == blue_palette.primary[Step(400)]
        assert tokens['--color-primary-hover'] == blue_palette.primary[Step(500)]
        assert tokens['--color-primary-pressed'] == blue_palette.primary[Step(600)]

    def test_hover_pressed_dark(self, blue_palette):
        settings = OverrideSettings(pro_mode=True, custom_tones={Role.PRIMARY: CustomTone(dark=600)})
        tokens = create_role_tokens(blue_palette, Role.PRIMARY, Mode.DARK, ContrastLevel.DEFAULT, settings)
        assert tokens['--color-primary-hover'] == blue_palette.primary[Step(550)]
        assert tokens['--color-primary-pressed'] == blue_palette.primary[Step(500)]

    def test_hover_clamped_at_black(self, blue_palette):
        settings = OverrideSettings(pro_mode=True, custom_tones={Role.PRIMARY: CustomTone(light=950)})
        tokens = create_role_tokens(blue_palette, Role.PRIMARY, Mode.LIGHT, ContrastLevel.DEFAULT, settings)
        assert tokens['--color-primary-hover'] == blue_palette.primary[Step(1000)]
        assert tokens['--color-primary-pressed'] == blue_palette.primary[Step(1000)]

    def test_fix_is_mode_independent(self, blue_palette):
        light = create_role_tokens(blue_palette, Role.PRIMARY, Mode.LIGHT, ContrastLevel.DEFAULT, OverrideSettings())
        dark = create_role_tokens(blue_palette, Role.PRIMARY, Mode.DARK, ContrastLevel.DEFAULT, OverrideSettings())
        for suffix in ('-fix', '-fix-hover', '-fix-pressed'):
            assert light[f'--color-primary{suffix}'] == dark[f'--color-primary{suffix}']
            assert light[f'--color-on-primary{suffix}'] == dark[f'--color-on-primary{suffix}']
        assert light['--color-primary-fix'] == blue_palette.primary[Step(400)]

    def test_missing_scale_falls_back(self):
        palette = PaletteSet(neutral=generate_pure_neutrals())
        tokens = create_role_tokens(palette, Role.WARNING, Mode.LIGHT, ContrastLevel.DEFAULT, OverrideSettings())
        assert tokens['--color-warning'] == FALLBACK_COLOR
        for value in tokens.values():
            assert HEX.match(value)

    def test_on_colors_are_extremes(self, blue_palette):
        s = blue_palette.primary
        n = blue_palette.neutral
        extremes = {n[Step(0)], n[Step(1000)], s[Step(0)], s[Step(50)], s[Step(100)], s[Step(900)], s[Step(950)]}
        extremes.add(s[Step(1000)])
        for mode in Mode:
            tokens = create_role_tokens(blue_palette, Role.PRIMARY, mode, ContrastLevel.DEFAULT, OverrideSettings())
            for suffix in ('', '-hover', '-pressed', '-fix', '-fix-hover', '-fix-pressed'):
                assert tokens[f'--color-on-primary{suffix}'] in extremes


class TestModeTokens:
    def test_same_keys_both_modes(self, blue_theme):
        assert list(blue_theme.light) == list(blue_theme.dark)

    def test_every_role_present(self, blue_theme):
        for role in Role:
            for suffix in ROLE_SUFFIXES:
                assert f'--color-{role.value}{suffix}' in blue_theme.light
                assert f'--color-on-{role.value}{suffix}' in blue_theme.dark

    def test_mode_wide_tokens(self, blue_theme):
        for name in (
            '--color-background',
            '--color-surface',
            '--color-surface-variant',
            '--color-inverse-surface',
            '--color-on-surface-heading',
            '--color-outline-subtle',
            '--color-outline-default',
            '--color-outline-strong',
            '--color-focus',
            '--color-disabled',
            '--color-on-disabled',
            '--color-shadow',
            '--color-backdrop',
        ):
            assert name in blue_theme.light

    def test_values_are_colours(self, blue_theme):
        for tokens in (blue_theme.light, blue_theme.dark):
            for key, value in tokens.items():
                if key == '--color-backdrop':
                    assert value.startswith('rgba(')
                else:
                    assert HEX.match(value), (key, value)

    def test_dark_background_is_darkest_neutral(self, blue_theme):
        assert blue_theme.dark['--color-background'] == blue_theme.scales.neutral[Step(1000)]
        assert background(blue_theme.scales.neutral, Mode.LIGHT) == blue_theme.scales.neutral[Step(0)]

    def test_role_iteration_order_irrelevant(self, blue_palette):
        tokens = generate_mode_tokens(blue_palette, Mode.LIGHT)
        for role in reversed(list(Role)):
            single = create_role_tokens(blue_palette, role, Mode.LIGHT, ContrastLevel.DEFAULT, OverrideSettings())
            for key, value in single.items():
                assert tokens[key] == value


class TestScenarios:
    def test_primary_meets_text_target_on_surface(self, blue_theme):
        light = blue_theme.light
        assert contrast_ratio(light['--color-primary'], light['--color-surface']) >= 4.5

    def test_on_primary_is_pure_extreme(self, blue_theme):
        scales = blue_theme.scales
        allowed = {
            scales.primary[Step(0)],
            scales.primary[Step(1000)],
            scales.neutral[Step(0)],
            scales.neutral[Step(1000)],
        }
        assert blue_theme.light['--color-on-primary'] in allowed

    def test_extra_high_container_is_stricter(self, blue_theme):
        extra = generate_theme(SeedColors(primary='#0052cc'), contrast=ContrastLevel.EXTRA_HIGH)
        bg = blue_theme.scales.neutral[Step(0)]
        default_container = blue_theme.light['--color-primary-container']
        extra_container = extra.light['--color-primary-container']
        assert extra_container != default_container
        assert contrast_ratio(extra_container, bg) > contrast_ratio(default_container, bg)

    def test_invalid_primary_still_complete(self):
        theme = generate_theme(SeedColors(primary='not-a-colour'))
        assert theme.scales.primary == generate_pure_neutrals()
        assert list(theme.light) == list(generate_theme().light)

    def test_grey_seed_grey_tokens(self):
        theme = generate_theme(SeedColors(primary='#808080'))
        assert theme.scales.primary == generate_shades('#808080')
