"""tonal-tool: Accessible light/dark design tokens from a few seed colours.

Usage: uv run tonal-tool <exporter> [options]

Exporters are auto-discovered from tonal_tokens/exporters/.
Each exporter module's docstring is its documentation.
Run `tonal-tool help <exporter>` for full module docs.

Configuration:
  CLI flags win over TONAL_* environment variables, which win over tonal.json.
  If --config is not given, tonal-tool looks for tonal.json starting from
  the current directory and walking up, stopping at the nearest .git boundary.
"""

import argparse
import sys
from dataclasses import replace

from tonal_tokens import registry
from tonal_tokens.config import ThemeConfig, load_config, resolve
from tonal_tokens.core.colorblind import LABELS, MATRICES, apply_filter
from tonal_tokens.core.gamut import gamut_info
from tonal_tokens.core.report import build_audit
from tonal_tokens.core.surface import RADIUS_STRATEGIES, SHADOW_STRATEGIES
from tonal_tokens.core.theme import generate_theme
from tonal_tokens.core.types import ContrastLevel, HarmonyMode, Role, ThemeTokens

PROG = 'tonal-tool'

# argparse dest -> config key
_CLI_KEYS = {
    'primary': 'primary',
    'secondary': 'secondary',
    'error': 'error',
    'warning': 'warning',
    'success': 'success',
    'info': 'info',
    'contrast': 'contrast',
    'harmony': 'harmony',
    'saturation': 'saturation',
    'temperature': 'temperature',
    'neutral_tint': 'neutral_tint',
    'radius': 'radius',
    'shadow': 'shadow',
    'tone': 'tones',
}

_SIMULATE_HELP = 'Preview the colour tokens as seen with a colour vision deficiency:\n' + '\n'.join(
    f'  {kind:<13} {LABELS[kind]}' for kind in sorted(MATRICES)
)


def _short_help(name: str) -> str:
    doc = (registry.module_for(name).__doc__ or '').strip()
    return doc.splitlines()[0] if doc else registry.get(name).help


def _build_parser() -> argparse.ArgumentParser:
    exporters = registry.all_exporters()

    epilog = (
        'Examples:\n'
        f"  {PROG} css --primary '#0052cc' > tokens.css\n"
        f'  {PROG} json --contrast high-contrast --harmony complementary\n'
        f'  {PROG} tailwind --tailwind-version 3 > tailwind.config.js\n'
        f'  {PROG} audit --contrast extra-high --fail-under-contrast\n'
        f'  {PROG} css --tone primary:light:400 --tone primary:dark:600\n'
        f'  {PROG} css --simulate deuteranopia\n'
        f'  {PROG} help audit\n'
        '\n'
        'Environment variables (override tonal.json, overridden by flags):\n'
        '  TONAL_PRIMARY TONAL_SECONDARY TONAL_ERROR TONAL_WARNING TONAL_SUCCESS TONAL_INFO\n'
        '  TONAL_CONTRAST TONAL_HARMONY TONAL_SATURATION TONAL_TEMPERATURE TONAL_NEUTRAL_TINT\n'
        '  TONAL_RADIUS TONAL_SHADOW\n'
    )
    parser = argparse.ArgumentParser(
        prog=PROG,
        description='Accessible light/dark design tokens from a few seed colours.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    # Global --config option before subcommand
    parser.add_argument(
        '--config',
        metavar='PATH',
        default=None,
        help='Path to tonal.json (default: walk up from cwd to .git boundary)',
    )
    sub = parser.add_subparsers(dest='exporter', help='Output format')

    # Auto-register each exporter as a subcommand using module docstring
    for name in sorted(exporters):
        p = sub.add_parser(name, help=_short_help(name), formatter_class=argparse.RawTextHelpFormatter)
        for role in Role:
            p.add_argument(f'--{role.value}', metavar='COLOUR', help=f'{role.value.capitalize()} seed colour')
        p.add_argument(
            '-c',
            '--contrast',
            help=f'Contrast level: {", ".join(level.value for level in ContrastLevel)} (default: default)',
        )
        p.add_argument('--harmony', help=f'Derive secondary from primary: {", ".join(m.value for m in HarmonyMode)}')
        p.add_argument('--saturation', help='Chroma multiplier for all colour scales, 0.5..1.5')
        p.add_argument('--temperature', help='Hue shift in degrees for all colour scales, -15..15')
        p.add_argument('--neutral-tint', metavar='SOURCE', help='Neutral tint: primary, secondary, pure or a colour')
        p.add_argument('--pure-neutrals', action='store_true', default=None, help='Use untinted grey neutrals')
        p.add_argument(
            '--stay-true',
            action='store_true',
            default=None,
            help='Base step = scale step closest in lightness to the seed, ignoring contrast',
        )
        p.add_argument(
            '-t',
            '--tone',
            action='append',
            metavar='ROLE:MODE:STEP',
            help='Pin a base step (enables pro mode), e.g. primary:dark:600. Repeatable.',
        )
        p.add_argument('--radius', help=f'Corner radius strategy: {", ".join(RADIUS_STRATEGIES)}')
        p.add_argument('--shadow', help=f'Shadow strategy: {", ".join(SHADOW_STRATEGIES)}')
        p.add_argument(
            '-s',
            '--simulate',
            choices=sorted(MATRICES),
            help=_SIMULATE_HELP,
        )
        p.add_argument('-j', '--json', action='store_true', help='JSON output (audit)')
        p.add_argument('--csv', action='store_true', help='CSV output (audit)')
        p.add_argument('--with-scales', action='store_true', help='Also emit the 21-step scales (css)')
        p.add_argument('--tailwind-version', choices=['3', '4'], default='4', help='Tailwind major version (tailwind)')
        p.add_argument(
            '-f',
            '--fail-under-contrast',
            action='store_true',
            help='Exit 1 if any text/background pair misses the contrast target (CI gating)',
        )

    # `help` subcommand: prints full module docstring for an exporter
    help_parser = sub.add_parser('help', help='Print full docs for an exporter')
    help_parser.add_argument('command', nargs='?', help='Exporter name')

    return parser


def _print_help(command: str | None) -> None:
    """Print full module docstring for an exporter."""
    exporters = registry.all_exporters()

    if command is None:
        print('Available exporters:\n')
        for name in sorted(exporters):
            print(f'  {name:<10} {_short_help(name)}')
        print(f'\nRun: {PROG} help <exporter> for full docs.')
        return

    if command not in exporters:
        print(f'Unknown exporter: {command}', file=sys.stderr)
        print(f'Available: {", ".join(sorted(exporters))}', file=sys.stderr)
        sys.exit(1)

    doc = (registry.module_for(command).__doc__ or '').strip()
    if not doc:
        print(f'(No module docs for {command!r})')
        return
    print(doc)


def _cli_values(args: argparse.Namespace) -> dict:
    """Flags the user actually passed, keyed like tonal.json."""
    values = {key: getattr(args, dest) for dest, key in _CLI_KEYS.items() if getattr(args, dest, None) is not None}
    if getattr(args, 'pure_neutrals', None):
        values['pure_neutrals'] = True
    if getattr(args, 'stay_true', None):
        values['stay_true'] = True
    return values


def _warn_gamut(config: ThemeConfig) -> None:
    """Seed colours outside sRGB are clamped by chroma; say so on stderr."""
    for role in Role:
        color = config.seeds.get(role)
        if not color:
            continue
        info = gamut_info(color)
        if not info.in_gamut:
            print(f'{PROG}: {role.value} seed {color}: {info.warning} ({info.severity})', file=sys.stderr)


def _simulate(theme: ThemeTokens, kind: str | None) -> ThemeTokens:
    if not kind:
        return theme
    return replace(theme, light=apply_filter(theme.light, kind), dark=apply_filter(theme.dark, kind))


def _check_fail_under_contrast(theme: ThemeTokens) -> bool:
    """Return True if any text/background pair misses the active contrast target."""
    report = build_audit(theme)
    if report.fail_count == 0:
        return False
    print(
        f'\nFAIL: {report.fail_count} pair(s) below {report.target}:1 ({report.contrast.value}):',
        file=sys.stderr,
    )
    for mode_name, rows in report.modes.items():
        for row in rows:
            if not row['pass']:
                print(f'  {mode_name}: {row["foreground"]} on {row["background"]} = {row["ratio"]}:1', file=sys.stderr)
    return True


def main() -> None:
    parser = _build_parser()
    args = parser.parse_args()

    if not args.exporter:
        parser.print_help()
        sys.exit(1)

    # Handle `help` subcommand
    if args.exporter == 'help':
        _print_help(getattr(args, 'command', None))
        return

    # Load tonal.json + TONAL_* before anything else, CLI flags always win
    try:
        values, config_path = load_config(config_file=args.config)
    except (OSError, ValueError) as e:
        print(f'Error: {e}', file=sys.stderr)
        sys.exit(1)
    if config_path:
        print(f'{PROG}: loaded {config_path}', file=sys.stderr)
    values.update(_cli_values(args))

    config = resolve(values)
    for warning in config.warnings:
        print(f'{PROG}: {warning}', file=sys.stderr)
    _warn_gamut(config)

    theme = generate_theme(config.seeds, config.settings, config.contrast, config.radius, config.shadow)

    exp = registry.get(args.exporter)
    sys.stdout.write(exp.execute(_simulate(theme, args.simulate), args))

    # CI gate: must happen after output so the artefact is written even on failure
    if args.fail_under_contrast and _check_fail_under_contrast(theme):
        sys.exit(1)


if __name__ == '__main__':
    main()
