# commands.py

import json
import logging
from pathlib import Path

import click
from dotenv import load_dotenv

from avatar import resolve_many
from config import ColorBasis, PaletteMode, load_avatar_config, load_log_level
from logging_config import setup_logging
from services.distribution_service import analyze
from services.export_service import dump_design_tokens

logger = logging.getLogger(__name__)


def _config_options(command):
    """Attach the options shared by every command that resolves avatars."""
    options = [
        click.option('--saturation', type=click.IntRange(0, 100), default=None, help='Saturation percentage.'),
        click.option('--lightness', type=click.IntRange(0, 100), default=None, help='Lightness percentage.'),
        click.option('--color-basis', type=click.Choice([basis.value for basis in ColorBasis]), default=None, help='Hash the initials or the full name.'),
        click.option('--palette', type=click.Choice([mode.value for mode in PaletteMode]), default=None, help='Full spectrum or 12 fixed hues.'),
        click.option('--contrast-level', type=click.FloatRange(1.0, 21.0), default=None, help='Nominal contrast ratio (4.5 for AA, 7 for AAA).'),
        click.option('--force-aaa', is_flag=True, default=False, help='Adjust lightness until contrast reaches 7:1.'),
        click.option('--log-level', default=None, help='Logging level (defaults to LOG_LEVEL).'),
    ]
    for option in reversed(options):
        command = option(command)
    return command


def _build_config(saturation, lightness, color_basis, palette, contrast_level, force_aaa):
    changes = {}
    if saturation is not None:
        changes['saturation'] = saturation
    if lightness is not None:
        changes['lightness'] = lightness
    if color_basis is not None:
        changes['color_basis'] = ColorBasis(color_basis)
    if palette is not None:
        changes['palette_mode'] = PaletteMode(palette)
    if contrast_level is not None:
        changes['min_contrast_ratio'] = contrast_level
    if force_aaa:
        changes['force_aaa'] = True

    try:
        return load_avatar_config().replace(**changes)
    except ValueError as exc:
        raise click.ClickException(str(exc)) from exc


def _prepare(log_level, **settings):
    setup_logging(log_level or load_log_level())
    return _build_config(**settings)


@click.group(name='avatar-palette')
def cli():
    """Deterministic, accessible avatar colors for display names."""
    load_dotenv()


@cli.command(name='resolve')
@click.argument('names', nargs=-1, required=True)
@_config_options
def resolve_command(names, log_level, **settings):
    """Print the avatar colors of each NAME as JSON."""

    config = _prepare(log_level, **settings)
    results = resolve_many(names, config)
    logger.info('Resolved %s names', len(results))
    click.echo(json.dumps([result.to_dict() for result in results], indent=2, ensure_ascii=False))


@cli.command(name='analyze')
@click.argument('names', nargs=-1, required=True)
@_config_options
def analyze_command(names, log_level, **settings):
    """Report how well the hues of NAMES are spread around the color wheel."""

    config = _prepare(log_level, **settings)
    report = analyze(resolve_many(names, config), config)
    payload = {
        'min-gap-degrees': round(report.min_gap_degrees, 1),
        'ideal-gap-degrees': round(report.ideal_gap_degrees, 1),
        'collision-count': report.collision_count,
        'warnings': [
            {'severity': entry.severity.value, 'code': entry.code, 'params': dict(entry.params)}
            for entry in report.warnings
        ],
    }
    click.echo(json.dumps(payload, indent=2, ensure_ascii=False))


@cli.command(name='export')
@click.argument('names', nargs=-1, required=True)
@click.option('--output', '-o', type=click.Path(dir_okay=False, path_type=Path), default=None, help='Write the tokens to this file instead of stdout.')
@_config_options
def export_command(names, output, log_level, **settings):
    """Export design tokens for NAMES."""

    config = _prepare(log_level, **settings)
    try:
        document = dump_design_tokens(names, config)
    except ValueError as exc:
        raise click.ClickException(str(exc)) from exc

    if output is None:
        click.echo(document)
        return

    output.write_text(document + '\n', encoding='utf-8')
    logger.info('Design tokens written to %s', output)
    click.echo(f'Design tokens written to {output}.')


if __name__ == '__main__':
    cli()
