"""WCAG contrast audit of every text/background token pair.

For each mode, pairs every `--color-on-<x>` token with `--color-<x>`
(plus heading/variant text on the surface and inverse text on the
inverse surface) and reports the contrast ratio, its WCAG level and
pass/fail against the active contrast level's text target:

  default        4.5:1
  high-contrast  7:1
  extra-high     9:1

Levels: AAA >= 7, AA >= 4.5, AA-large >= 3, otherwise fail.
`--color-on-disabled` is exempt (WCAG does not cover inactive controls).

Output is text by default, or --json / --csv.
With --fail-under-contrast the command exits 1 if any pair fails.

Example:
    tonal-tool audit --primary '#0052cc'
    tonal-tool audit --contrast extra-high --csv > audit.csv
    tonal-tool audit --fail-under-contrast
"""

from tonal_tokens.core.report import build_audit, format_csv, format_json, format_text
from tonal_tokens.core.types import Exporter, ThemeTokens

exporter = Exporter(name='audit', help='WCAG contrast audit of every text/background pair.')


@exporter.render
def render(theme: ThemeTokens, args) -> str:
    report = build_audit(theme)
    if getattr(args, 'json', False):
        return format_json(report) + '\n'
    if getattr(args, 'csv', False):
        return format_csv(report)
    return format_text(report) + '\n'
