"""Contrast audit builder and its text / JSON / CSV output."""

import csv
import io
import json
from typing import Any

from tonal_tokens.core.contrast import contrast_ratio, wcag_level
from tonal_tokens.core.types import Mode, Report, ThemeTokens, TokenMap


# WCAG exempts inactive components
_EXEMPT = {'--color-on-disabled'}

# Text tokens whose background is not named after them
_EXTRA_PAIRS = [
    ('--color-surface', '--color-on-surface-heading'),
    ('--color-surface', '--color-on-surface-variant'),
    ('--color-inverse-surface', '--color-on-surface-inverse'),
]


def token_pairs(tokens: TokenMap) -> list[tuple[str, str]]:
    """(background token, text token) for every `--color-on-*` token with a matching background."""
    pairs = []
    for name in tokens:
        if not name.startswith('--color-on-') or name in _EXEMPT:
            continue
        background = '--color-' + name[len('--color-on-') :]
        if background in tokens:
            pairs.append((background, name))
    for background, foreground in _EXTRA_PAIRS:
        if background in tokens and foreground in tokens:
            pairs.append((background, foreground))
    return pairs


def build_audit(theme: ThemeTokens) -> Report:
    """Check every text/background pair in both modes against the active text target."""
    target = theme.contrast.text_target
    report = Report(contrast=theme.contrast, target=target)
    for mode in Mode:
        tokens = theme.for_mode(mode)
        for background, foreground in token_pairs(tokens):
            ratio = contrast_ratio(tokens[background], tokens[foreground])
            passed = ratio >= target
            report.add(
                mode,
                {
                    'background': background,
                    'foreground': foreground,
                    'background_hex': tokens[background],
                    'foreground_hex': tokens[foreground],
                    'ratio': round(ratio, 2),
                    'level': wcag_level(ratio),
                    'pass': passed,
                },
            )
            if passed:
                report.record_pass()
            else:
                report.record_fail()
    return report


def format_text(report: Report) -> str:
    """Format audit as human-readable text."""
    lines = [f'tonal-tool: contrast audit ({report.contrast.value}, target {report.target}:1)', '']
    for mode_name, rows in report.modes.items():
        lines.append(f'\u2500\u2500 {mode_name}')
        for row in rows:
            mark = '\u2713' if row['pass'] else '\u2717'
            lines.append(
                f'  {row["foreground"]:<42} on {row["background"]:<36} '
                f'{row["ratio"]:>5.2f}:1  {row["level"]:<8} {mark}'
            )
        lines.append('')

    total = report.pass_count + report.fail_count
    if total > 0:
        lines.append(f'PASS {report.pass_count}/{total} pairs  FAIL {report.fail_count}/{total} pairs')
    return '\n'.join(lines)


def format_json(report: Report) -> str:
    """Format audit as JSON."""
    obj: dict[str, Any] = {
        'contrast': report.contrast.value,
        'target': report.target,
        'modes': report.modes,
        'summary': {
            'total': report.pass_count + report.fail_count,
            'pass': report.pass_count,
            'fail': report.fail_count,
        },
    }
    return json.dumps(obj, indent=2)


def format_csv(report: Report) -> str:
    """One row per pair: mode, foreground, background, hex values, ratio, level, pass."""
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator='\n')
    writer.writerow(['mode', 'foreground', 'background', 'foreground_hex', 'background_hex', 'ratio', 'level', 'pass'])
    for mode_name, rows in report.modes.items():
        for row in rows:
            writer.writerow(
                [
                    mode_name,
                    row['foreground'],
                    row['background'],
                    row['foreground_hex'],
                    row['background_hex'],
                    row['ratio'],
                    row['level'],
                    'yes' if row['pass'] else 'no',
                ]
            )
    return buf.getvalue()
