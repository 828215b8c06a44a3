"""Tests for tonal_tokens.core.theme: generate_theme() and the update reducer."""

import json
import math

import pytest
from tonal_tokens.core.overrides import auto_semantic_seeds, harmony_color
from tonal_tokens.core.theme import (
    SetContrast,
    SetMode,
    SetSeed,
    SetSurface,
    UpdateSettings,
    generate_theme,
    initial_state,
    update,
)
from tonal_tokens.core.types import (
    SCALE_NAMES,
    ContrastLevel,
    CustomTone,
    HarmonyMode,
    Mode,
    OverrideSettings,
    Role,
    SeedColors,
    Step,
)


class TestGenerateTheme:
    def test_idempotent(self):
        seeds = SeedColors(primary='#0052cc', secondary='#e87d00')
        settings = OverrideSettings(saturation_multiplier=1.2, temperature_shift=5)
        a = generate_theme(seeds, settings, ContrastLevel.HIGH)
        b = generate_theme(seeds, settings, ContrastLevel.HIGH)
        assert json.dumps(a.to_document()) == json.dumps(b.to_document())

    def test_document_shape(self):
        doc = generate_theme().to_document()
        assert set(doc) == {'tokens', 'scales'}
        assert set(doc['tokens']) == {'light', 'dark', 'surface'}
        assert list(doc['scales']) == list(SCALE_NAMES)
        assert list(doc['scales']['primary']) == [str(v) for v in range(0, 1001, 50)]

    def test_surface_tokens(self):
        theme = generate_theme(radius='none', shadow='none')
        assert theme.surface['--radius-base-ui'] == '0px'
        assert theme.surface['--shadow-md'] == 'none'

    def test_contrast_recorded(self):
        assert generate_theme(contrast=ContrastLevel.EXTRA_HIGH).contrast is ContrastLevel.EXTRA_HIGH

    def test_effective_seeds_recorded(self):
        theme = generate_theme(SeedColors(primary='#0052cc'))
        assert theme.seeds.error == auto_semantic_seeds('#0052cc')[Role.ERROR]

    def test_for_mode(self):
        theme = generate_theme()
        assert theme.for_mode(Mode.LIGHT) is theme.light
        assert theme.for_mode(Mode.DARK) is theme.dark

    def test_non_finite_settings_fall_back_to_defaults(self):
        settings = OverrideSettings(
            saturation_multiplier=math.nan,
            temperature_shift=math.inf,
            pro_mode=True,
            custom_tones={Role.PRIMARY: CustomTone(light=math.nan, dark=math.inf)},
        )
        theme = generate_theme(settings=settings)
        assert theme.to_document() == generate_theme().to_document()


class TestReducer:
    @pytest.fixture(scope='class')
    def state(self):
        return initial_state(SeedColors(primary='#0052cc'))

    def test_initial_tokens(self, state):
        assert state.tokens is not None
        assert state.active_tokens is state.tokens.light

    def test_set_mode_keeps_tokens(self, state):
        dark = update(state, SetMode(Mode.DARK))
        assert dark.tokens is state.tokens
        assert dark.active_tokens is state.tokens.dark

    def test_input_state_unchanged(self, state):
        update(state, SetContrast(ContrastLevel.HIGH))
        assert state.contrast is ContrastLevel.DEFAULT

    def test_set_contrast_regenerates(self, state):
        high = update(state, SetContrast(ContrastLevel.HIGH))
        assert high.tokens.contrast is ContrastLevel.HIGH
        assert high.tokens.light != state.tokens.light

    def test_primary_rederives_auto_semantics(self, state):
        moved = update(state, SetSeed(Role.PRIMARY, '#d32f2f'))
        assert moved.seeds.primary == '#d32f2f'
        assert moved.seeds.error == auto_semantic_seeds('#d32f2f')[Role.ERROR]

    def test_explicit_semantic_survives_primary_change(self, state):
        pinned = update(state, SetSeed(Role.ERROR, '#ff0000'))
        assert Role.ERROR in pinned.explicit
        moved = update(pinned, SetSeed(Role.PRIMARY, '#2e7d32'))
        assert moved.seeds.error == '#ff0000'
        assert moved.seeds.info == auto_semantic_seeds('#2e7d32')[Role.INFO]

    def test_clearing_semantic_returns_to_auto(self, state):
        pinned = update(state, SetSeed(Role.WARNING, '#ffeb3b'))
        cleared = update(pinned, SetSeed(Role.WARNING, None))
        assert Role.WARNING not in cleared.explicit
        assert cleared.seeds.warning == auto_semantic_seeds('#0052cc')[Role.WARNING]

    def test_harmony_change_rewrites_secondary(self, state):
        changed = update(state, UpdateSettings({'harmony_mode': HarmonyMode.COMPLEMENTARY}))
        assert changed.seeds.secondary == harmony_color('#0052cc', HarmonyMode.COMPLEMENTARY)

    def test_primary_change_follows_harmony(self, state):
        triadic = update(state, UpdateSettings({'harmony_mode': HarmonyMode.TRIADIC}))
        moved = update(triadic, SetSeed(Role.PRIMARY, '#6750a4'))
        assert moved.seeds.secondary == harmony_color('#6750a4', HarmonyMode.TRIADIC)

    def test_settings_normalized(self, state):
        changed = update(state, UpdateSettings({'saturation_multiplier': 3.0}))
        assert changed.settings.saturation_multiplier == 1.5

    def test_pinned_tone_through_reducer(self, state):
        changed = update(
            state,
            UpdateSettings({'pro_mode': True, 'custom_tones': {Role.PRIMARY: CustomTone(light=620)}}),
        )
        assert changed.tokens.light['--color-primary'] == changed.tokens.scales.primary[Step(600)]

    def test_set_surface(self, state):
        changed = update(state, SetSurface(radius='circular'))
        assert changed.radius == 'circular'
        assert changed.shadow == state.shadow
        assert changed.tokens.surface['--radius-small-ui'] == '9999px'

    def test_unknown_event(self, state):
        with pytest.raises(TypeError):
            update(state, object())
