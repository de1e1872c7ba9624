"""Command-line entry point: render a USNG grid overlay for a bounding box."""

import argparse
import logging
import os
import sys
from pathlib import Path

from domain.exceptions import GridError
from domain.grid_types import ProjectedExtent
from domain.models import GridSettings
from domain.profiles import load_profile
from imaging.grid import render_grid
from services.grid_layer import GridLayer
from shared.constants import DEFAULT_CANVAS_SIZE_PX
from shared.diagnostics import log_duration, log_memory_usage

logger = logging.getLogger(__name__)


def setup_logging(*, verbose: bool = False) -> Path:
    """Configure application logging to LOCALAPPDATA.

    Returns:
        Path of the log file.
    """
    local_base = (
        Path(os.getenv('LOCALAPPDATA') or Path.home() / 'AppData' / 'Local')
        / 'USNGGrid'
    )
    log_dir = local_base / 'log'
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / 'usng_grid.log'

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
        description='USNG grid - построение сетки USNG/UTM для области карты'
    )
    parser.add_argument(
        '--bbox',
        nargs=4,
        type=float,
        required=True,
        metavar=('MIN_LON', 'MIN_LAT', 'MAX_LON', 'MAX_LAT'),
        help='Область в градусах WGS84',
    )
    parser.add_argument(
        '--size',
        nargs=2,
        type=int,
        default=list(DEFAULT_CANVAS_SIZE_PX),
        metavar=('WIDTH', 'HEIGHT'),
        help='Размер изображения в пикселях',
    )
    parser.add_argument(
        '--resolution',
        type=float,
        default=None,
        help='Единиц проекции на пиксель (по умолчанию - из ширины области)',
    )
    parser.add_argument('--profile', default=None, help='Имя или путь TOML профиля')
    parser.add_argument(
        '--output', default='usng_grid.png', help='Файл изображения результата'
    )
    parser.add_argument('--verbose', action='store_true', help='Отладочный лог')
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main application entry point."""
    args = build_parser().parse_args(argv)
    setup_logging(verbose=args.verbose)
    logger.info('Starting USNG grid')

    try:
        settings = load_profile(args.profile) if args.profile else GridSettings()
    except (FileNotFoundError, ValueError) as e:
        logger.error('Failed to load profile: %s', e)
        return 1

    layer = GridLayer(settings)
    transforms = layer.assembler.transforms
    min_lon, min_lat, max_lon, max_lat = args.bbox
    width, height = args.size

    try:
        min_x, min_y = transforms.geo_to_projected(min_lon, min_lat)
        max_x, max_y = transforms.geo_to_projected(max_lon, max_lat)
        extent = ProjectedExtent(min_x, min_y, max_x, max_y)
        resolution = args.resolution or extent.width / width

        log_memory_usage('before grid pass')
        with log_duration('Grid pass'):
            result = layer.refresh(extent, resolution)
        log_memory_usage('after grid pass')
    except GridError as e:
        logger.error('Grid computation failed: %s', e)
        return 2

    with log_duration('Render'):
        img = render_grid(result, (width, height), settings)
    img.save(args.output)

    print(
        f'zones={list(result.zones)} interval={result.interval} '
        f'lines={len(result.lines)} labels={len(result.labels)} -> {args.output}'
    )
    return 0


if __name__ == '__main__':
    sys.exit(main())
