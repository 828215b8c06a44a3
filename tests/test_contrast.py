"""Tests for tonal_tokens.core.contrast: WCAG ratios and the two-phase step search."""

import pytest
from tonal_tokens.core.contrast import (
    DEFAULT_STEP,
    contrast_ratio,
    find_best_contrast,
    find_closest_step_by_contrast,
    find_first_meeting,
    find_highest_contrast,
    find_optimal_step_by_contrast,
    find_step_meeting_contrast,
    relative_luminance,
    wcag_level,
)
from tonal_tokens.core.types import Step

# #777777 is just under 4.5:1 on white, #595959 about 7:1
GREYS = {Step(300): '#777777', Step(400): '#595959', Step(500): '#000000'}


class TestRelativeLuminance:
    def test_white(self):
        assert relative_luminance('#ffffff') == pytest.approx(1.0)

    def test_black(self):
        assert relative_luminance('#000000') == pytest.approx(0.0)

    def test_invalid_counts_as_black(self):
        assert relative_luminance('nope') == 0.0


class TestContrastRatio:
    def test_black_on_white(self):
        assert contrast_ratio('#000000', '#ffffff') == pytest.approx(21.0)

    def test_symmetric(self):
        pairs = [('#0052cc', '#ffffff'), ('#e87d00', '#1a1a1a'), ('#777777', '#595959')]
        for a, b in pairs:
            assert contrast_ratio(a, b) == contrast_ratio(b, a)

    def test_identity(self):
        for color in ('#0052cc', '#ffffff', '#000000', '#e87d00'):
            assert contrast_ratio(color, color) == 1.0

    def test_known_grey(self):
        assert contrast_ratio('#767676', '#ffffff') == pytest.approx(4.54, abs=0.01)


class TestStepSearch:
    def test_meeting_picks_smallest_excess(self):
        assert find_step_meeting_contrast(GREYS, '#ffffff', 4.5, (300, 500)) == 400

    def test_meeting_none_when_unreachable(self):
        assert find_step_meeting_contrast(GREYS, '#ffffff', 30.0, (300, 500)) is None

    def test_closest_when_unreachable(self):
        assert find_closest_step_by_contrast(GREYS, '#ffffff', 30.0, (300, 500)) == 500

    def test_closest_empty_range(self):
        assert find_closest_step_by_contrast(GREYS, '#ffffff', 4.5, (600, 900)) == DEFAULT_STEP
        assert find_closest_step_by_contrast({}, '#ffffff', 4.5, (0, 1000)) == DEFAULT_STEP

    def test_optimal_prefers_meeting(self):
        assert find_optimal_step_by_contrast(GREYS, '#ffffff', 4.5, (300, 500)) == 400

    def test_optimal_falls_back_to_closest(self):
        assert find_optimal_step_by_contrast(GREYS, '#ffffff', 30.0, (300, 500)) == 500

    def test_range_is_inclusive(self):
        assert find_optimal_step_by_contrast(GREYS, '#ffffff', 4.5, (300, 300)) == 300

    def test_returns_step(self):
        assert isinstance(find_optimal_step_by_contrast(GREYS, '#ffffff', 4.5, (300, 500)), Step)


class TestFindBestContrast:
    def test_first_meeting_wins(self):
        candidates = ['#eeeeee', '#000000', '#111111']
        assert find_best_contrast('#ffffff', candidates, 4.5) == '#000000'

    def test_order_matters(self):
        candidates = ['#111111', '#000000']
        assert find_best_contrast('#ffffff', candidates, 4.5) == '#111111'

    def test_highest_when_none_meets(self):
        candidates = ['#777777', '#000000', '#ffffff']
        assert find_best_contrast('#808080', candidates, 21.0) == '#000000'

    def test_always_a_member(self):
        candidates = ['#123456', '#abcdef', '#fedcba']
        for bg in ('#000000', '#ffffff', '#808080', '#0052cc'):
            for target in (1.0, 4.5, 30.0):
                assert find_best_contrast(bg, candidates, target) in candidates

    def test_empty_candidates(self):
        with pytest.raises(ValueError):
            find_best_contrast('#ffffff', [], 4.5)

    def test_first_meeting_none(self):
        assert find_first_meeting('#ffffff', ['#eeeeee'], 4.5) is None

    def test_highest_tie_keeps_first(self):
        assert find_highest_contrast('#808080', ['#000000', '#000000']) == '#000000'


class TestWcagLevel:
    def test_levels(self):
        assert wcag_level(21.0) == 'AAA'
        assert wcag_level(7.0) == 'AAA'
        assert wcag_level(4.5) == 'AA'
        assert wcag_level(3.0) == 'AA-large'
        assert wcag_level(2.99) == 'fail'
