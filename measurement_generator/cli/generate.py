#!/usr/bin/env python3
"""
Generate a measurements file for the one billion row challenge.

Usage:
    generate-measurements --rows 1000000 --output ./data/measurements.txt
"""

import argparse
import logging
import sys
from typing import List, Optional

from tqdm.contrib.logging import logging_redirect_tqdm

from .. import __version__
from ..core.errors import GeneratorError
from ..core.generator import generate_lines
from ..core.generator_config import (
    DEFAULT_OUTPUT,
    DEFAULT_ROWS,
    DEFAULT_WEATHER_STATIONS,
    GeneratorConfig,
)
from ..core.stations import load_weather_stations

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='generate-measurements',
        description="Generates a large number of rows for the one billion row challenge",
    )
    # None means "not given", so values from --config are not overridden
    parser.add_argument('-r', '--rows', type=int,
                        help=f"Number of rows to generate (default: {DEFAULT_ROWS})")
    parser.add_argument('-w', '--weather-stations', dest='weather_stations',
                        help=f"Path to the weather station examples (default: {DEFAULT_WEATHER_STATIONS})")
    parser.add_argument('-o', '--output',
                        help=f"Path to the file to generate (default: {DEFAULT_OUTPUT})")
    parser.add_argument('--chunk-size', dest='chunk_size', type=int,
                        help="Rows buffered in memory per write (default: 10000)")
    parser.add_argument('--seed', type=int,
                        help="Seed for reproducible output")
    parser.add_argument('--config',
                        help="JSON file with default settings")
    parser.add_argument('--no-progress', dest='no_progress', action='store_true',
                        help="Do not show the progress bar")

    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument('-v', '--verbose', action='store_true', help="Log debug output")
    verbosity.add_argument('-q', '--quiet', action='store_true', help="Only log warnings and errors")

    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    return parser


def configure_logging(verbose: bool = False, quiet: bool = False) -> None:
    level = logging.INFO
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt='%Y-%m-%d %H:%M:%S', stream=sys.stderr)


def resolve_config(args: argparse.Namespace) -> GeneratorConfig:
    """
    Merge the optional JSON config with command-line flags.

    Args:
        args: Parsed command-line arguments

    Returns:
        Validated GeneratorConfig
    """
    config = GeneratorConfig.from_json(args.config) if args.config else GeneratorConfig()

    for key in ('rows', 'weather_stations', 'output', 'chunk_size', 'seed'):
        value = getattr(args, key)
        if value is not None:
            setattr(config, key, value)
    if args.no_progress:
        config.show_progress = False

    return config.validate()


def _describe(error: BaseException) -> str:
    if error.__cause__ is not None:
        return f"{error}: {error.__cause__}"
    return str(error)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the generator from the command line.

    Args:
        argv: Arguments without the program name (default: sys.argv[1:])

    Returns:
        Process exit code
    """
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose, args.quiet)

    try:
        config = resolve_config(args)
        stations = load_weather_stations(config.weather_stations)
        with logging_redirect_tqdm():
            generate_lines(
                stations,
                config.rows,
                config.output,
                chunk_size=config.chunk_size,
                seed=config.seed,
                show_progress=config.show_progress,
            )
    except (GeneratorError, OSError, ValueError) as e:
        logger.debug("Generation failed", exc_info=True)
        print(f"Error: {_describe(e)}", file=sys.stderr)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
