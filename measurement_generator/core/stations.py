"""
Module for loading the weather station reference file.
"""

import logging
from pathlib import Path
from typing import BinaryIO, Iterator, List, Union

from .errors import ParseError, StationFileError
from .station_models import WeatherStation

logger = logging.getLogger(__name__)

COMMENT_PREFIX = '#'


def _iter_lines(station_file: BinaryIO) -> Iterator[bytes]:
    """
    Yield lines without terminators, treating '\\n', '\\r\\n' and '\\r' alike.

    Args:
        station_file: File opened in binary mode

    Yields:
        Raw bytes of each line
    """
    for raw_line in station_file:
        if raw_line.endswith(b'\n'):
            raw_line = raw_line[:-1]
        if raw_line.endswith(b'\r'):
            raw_line = raw_line[:-1]
        yield from raw_line.split(b'\r')


def load_weather_stations(path: Union[str, Path]) -> List[WeatherStation]:
    """
    Load weather stations from a ';'-delimited reference file.

    Lines starting with '#' are comments. Every other line contributes one
    station whose id is the first field of the line.

    Args:
        path: Path to the weather station file

    Returns:
        List of stations in file order

    Raises:
        StationFileError: If the file cannot be opened
        ParseError: If a line is empty or is not valid UTF-8
    """
    path = Path(path)

    try:
        station_file = open(path, 'rb')
    except OSError as e:
        raise StationFileError(f"Could not open file: {path}") from e

    stations = []
    with station_file:
        for line_number, raw_line in enumerate(_iter_lines(station_file), start=1):
            try:
                line = raw_line.decode('utf-8')
            except UnicodeDecodeError as e:
                raise ParseError(f"Invalid UTF-8 in {path}", line_number) from e
            if line.startswith(COMMENT_PREFIX):
                continue
            stations.append(WeatherStation.from_line(line, line_number))

    logger.info(f"Loaded {len(stations)} weather stations from {path}")
    return stations
