"""Colour vision deficiency preview using fixed 3x3 RGB matrices.

Applied directly to 0-255 sRGB values, the way simple CSS/JS previews do it.
This is a preview aid, not a physiologically exact simulation. Token values
that are not hex colours (rgba backdrops, shadows) pass through unchanged.
"""

import re

import numpy as np

from tonal_tokens.core.types import TokenMap

MATRICES: dict[str, np.ndarray] = {
    # red-green, most common
    'deuteranopia': np.array(
        [
            [0.625, 0.375, 0.0],
            [0.7, 0.3, 0.0],
            [0.0, 0.3, 0.7],
        ]
    ),
    'protanopia': np.array(
        [
            [0.567, 0.433, 0.0],
            [0.558, 0.442, 0.0],
            [0.0, 0.242, 0.758],
        ]
    ),
    # blue-yellow, rare
    'tritanopia': np.array(
        [
            [0.95, 0.05, 0.0],
            [0.0, 0.433, 0.567],
            [0.0, 0.475, 0.525],
        ]
    ),
    # achromatopsia
    'grayscale': np.array(
        [
            [0.299, 0.587, 0.114],
            [0.299, 0.587, 0.114],
            [0.299, 0.587, 0.114],
        ]
    ),
}

LABELS: dict[str, str] = {
    'none': 'Normal Vision',
    'deuteranopia': 'Deuteranopia (Red-Green)',
    'protanopia': 'Protanopia (Red-Green)',
    'tritanopia': 'Tritanopia (Blue-Yellow)',
    'grayscale': 'Grayscale (Achromatopsia)',
}

_HEX_RE = re.compile(r'^#([0-9a-fA-F]{6})$')


def simulate(color: str, kind: str) -> str:
    """Transform one '#rrggbb' colour. 'none', unknown kinds and non-hex values are returned unchanged."""
    matrix = MATRICES.get(kind)
    m = _HEX_RE.match(color or '')
    if matrix is None or m is None:
        return color
    digits = m.group(1)
    rgb = np.array([int(digits[i : i + 2], 16) for i in (0, 2, 4)], dtype=float)
    out = np.clip(np.rint(matrix @ rgb), 0, 255).astype(int)
    return f'#{out[0]:02x}{out[1]:02x}{out[2]:02x}'


def apply_filter(tokens: TokenMap, kind: str) -> TokenMap:
    if kind == 'none':
        return dict(tokens)
    return {key: simulate(value, kind) for key, value in tokens.items()}
