"""Command-line entry point: render animated isolines of a metaball field."""

import argparse
import logging
import sys
from pathlib import Path

from domain.models import RenderSettings
from domain.profiles import load_profile, user_base_dir
from imaging.io import save_animation, save_png
from render.frame import render_animation
from shared.constants import LineStyle
from shared.diagnostics import check_animation_memory, log_memory_usage
from shared.progress import FrameProgress

logger = logging.getLogger(__name__)


def setup_logging(*, verbose: bool = False) -> Path:
    """Configure application logging to stdout and the user log directory.

    Returns:
        Path of the log file.
    """
    log_dir = user_base_dir() / 'log'
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / 'isoraster.log'

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stdout),
            logging.FileHandler(str(log_file), encoding='utf-8'),
        ],
    )
    return log_file


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Isoraster - анимация изолиний поля метаболов'
    )
    parser.add_argument(
        '--profile',
        help='Имя профиля или путь к TOML файлу (по умолчанию — встроенные настройки)',
    )
    parser.add_argument('--output', help='Путь к итоговому PNG файлу')
    parser.add_argument('--frames', type=int, help='Количество кадров')
    parser.add_argument(
        '--style',
        choices=[s.value for s in LineStyle],
        help='Стиль линий',
    )
    parser.add_argument(
        '--still',
        action='store_true',
        help='Сохранить только последний кадр как статичный PNG',
    )
    parser.add_argument('-v', '--verbose', action='store_true')
    return parser


def resolve_settings(args: argparse.Namespace) -> RenderSettings:
    """Load the profile (if any) and apply command-line overrides."""
    settings = load_profile(args.profile) if args.profile else RenderSettings()
    overrides: dict = {}
    if args.output:
        overrides['output_path'] = args.output
    if args.frames is not None:
        overrides['frames'] = args.frames
    if args.style:
        overrides['line_style'] = args.style
    if overrides:
        settings = RenderSettings.model_validate(
            settings.model_dump() | overrides
        )
    return settings


def run(settings: RenderSettings, *, still: bool = False) -> Path:
    """Render all frames and write the result; returns the output path."""
    out_path = Path(settings.output_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)

    if not still:
        check_animation_memory(
            settings.image_width, settings.image_height, settings.frames
        )

    progress = FrameProgress(settings.frames)
    try:
        frames = render_animation(settings, on_frame=progress.frame_done)
        if still:
            last = None
            for frame in frames:
                last = frame
            save_png(last, out_path)
        else:
            save_animation(
                frames,
                out_path,
                duration_ms=settings.frame_duration_ms,
                loop=settings.loop,
            )
    finally:
        progress.close()
    logger.info(progress.summary())
    return out_path


def main(argv: list[str] | None = None) -> int:
    """Main application entry point."""
    args = build_parser().parse_args(argv)
    setup_logging(verbose=args.verbose)
    logger.info('Starting isoraster')

    try:
        settings = resolve_settings(args)
        log_memory_usage('before render')
        out_path = run(settings, still=args.still)
        log_memory_usage('after render')
    except Exception as e:
        logger.error(f'Render failed: {e}', exc_info=True)
        return 1

    logger.info('Done: %s', out_path)
    return 0


if __name__ == '__main__':
    sys.exit(main())
