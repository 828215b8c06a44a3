"""WCAG 2.1 contrast: luminance, ratio, and step/candidate searches that never fail.

Two searches are kept apart on purpose so the always-succeeds guarantee is
visible in the API:

  find_*_meeting  -> first / closest candidate that reaches a target, or None
  find_closest_* / find_highest_contrast -> best available, never None

find_optimal_step_by_contrast and find_best_contrast compose the two.
"""

import math
from functools import lru_cache

from tonal_tokens.core import oklch
from tonal_tokens.core.types import STEPS, ShadeScale, Step

DEFAULT_STEP = Step(500)


@lru_cache(maxsize=4096)
def relative_luminance(color: str) -> float:
    """WCAG relative luminance of a colour. Unparseable colours count as black (0.0)."""
    parsed = oklch.parse(color)
    if parsed is None:
        return 0.0
    srgb = parsed.convert('srgb')
    srgb.clip()
    linear = []
    for channel in srgb.coords():
        c = 0.0 if math.isnan(channel) else channel
        linear.append(c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4)
    return 0.2126 * linear[0] + 0.7152 * linear[1] + 0.0722 * linear[2]


def contrast_ratio(a: str, b: str) -> float:
    """(lighter + 0.05) / (darker + 0.05). Symmetric, 1.0 for identical colours."""
    la = relative_luminance(a)
    lb = relative_luminance(b)
    return (max(la, lb) + 0.05) / (min(la, lb) + 0.05)


def _steps_in_range(scale: ShadeScale, step_range: tuple[int, int]) -> list[Step]:
    low, high = step_range
    return [step for step in STEPS if low <= step <= high and step in scale]


def find_step_meeting_contrast(
    scale: ShadeScale,
    background: str,
    target: float,
    step_range: tuple[int, int],
) -> Step | None:
    """Among in-range steps reaching `target`, the one whose ratio is closest to it. None if none reaches it."""
    best: Step | None = None
    best_diff = math.inf
    for step in _steps_in_range(scale, step_range):
        ratio = contrast_ratio(scale[step], background)
        if ratio >= target and ratio - target < best_diff:
            best_diff = ratio - target
            best = step
    return best


def find_closest_step_by_contrast(
    scale: ShadeScale,
    background: str,
    target: float,
    step_range: tuple[int, int],
) -> Step:
    """In-range step whose ratio is closest to `target`, met or not. DEFAULT_STEP if the range is empty."""
    best = DEFAULT_STEP
    best_diff = math.inf
    for step in _steps_in_range(scale, step_range):
        diff = abs(contrast_ratio(scale[step], background) - target)
        if diff < best_diff:
            best_diff = diff
            best = step
    return best


def find_optimal_step_by_contrast(
    scale: ShadeScale,
    background: str,
    target: float,
    step_range: tuple[int, int],
) -> Step:
    """Prefer a step that meets the target; otherwise the closest achievable one in range."""
    meeting = find_step_meeting_contrast(scale, background, target, step_range)
    if meeting is not None:
        return meeting
    return find_closest_step_by_contrast(scale, background, target, step_range)


def find_first_meeting(background: str, candidates: list[str], min_ratio: float) -> str | None:
    for candidate in candidates:
        if contrast_ratio(background, candidate) >= min_ratio:
            return candidate
    return None


def find_highest_contrast(background: str, candidates: list[str]) -> str:
    """Candidate with the highest ratio; ties keep the earlier candidate."""
    best = candidates[0]
    best_ratio = contrast_ratio(background, best)
    for candidate in candidates[1:]:
        ratio = contrast_ratio(background, candidate)
        if ratio > best_ratio:
            best, best_ratio = candidate, ratio
    return best


def find_best_contrast(background: str, candidates: list[str], min_ratio: float) -> str:
    """First candidate meeting `min_ratio`, else the highest-contrast candidate. Always a member of `candidates`."""
    if not candidates:
        raise ValueError('find_best_contrast needs at least one candidate')
    first = find_first_meeting(background, candidates, min_ratio)
    if first is not None:
        return first
    return find_highest_contrast(background, candidates)


def wcag_level(ratio: float) -> str:
    """Conformance label for normal-size text: AAA, AA, AA-large or fail."""
    if ratio >= 7.0:
        return 'AAA'
    if ratio >= 4.5:
        return 'AA'
    if ratio >= 3.0:
        return 'AA-large'
    return 'fail'
