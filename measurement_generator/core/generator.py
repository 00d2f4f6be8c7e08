"""
Module for generating synthetic temperature measurement files.
"""

import logging
import random
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence, Union

from .errors import EmptyInputError
from .progress import ChunkProgress, human_readable
from .station_models import WeatherStation

logger = logging.getLogger(__name__)

MIN_TEMP = -999  # -99.9C
MAX_TEMP = 999  # 99.9C, exclusive
CHUNK_SIZE = 10_000


@dataclass
class GenerationSummary:
    """Outcome of a completed generation run."""

    output_path: Path
    rows: int
    chunks: int
    size_bytes: int

    @property
    def size_human(self) -> str:
        return human_readable(self.size_bytes)


def format_measurement(station_id: str, value: int) -> str:
    """
    Format one measurement line.

    ``value`` is in tenths of a degree. The whole part is truncated toward
    zero and carries the sign, the fractional digit is taken from the
    magnitude, so -15 gives "-1.5" and -5 gives "0.5".

    Args:
        station_id: Id of the reporting station
        value: Temperature in tenths of a degree Celsius

    Returns:
        Line of the form "<station_id>;<whole>.<frac>\\n"
    """
    magnitude = abs(value)
    whole = magnitude // 10
    if value < 0:
        whole = -whole
    return f"{station_id};{whole}.{magnitude % 10}\n"


def generate_line(stations: Sequence[WeatherStation], rng: random.Random) -> str:
    """
    Generate a measurement line for a random station.

    Args:
        stations: Stations to choose from
        rng: Random source used for both the station and the temperature

    Returns:
        Formatted measurement line

    Raises:
        EmptyInputError: If there are no stations
    """
    if not stations:
        raise EmptyInputError("No stations")

    station = rng.choice(stations)
    measurement = rng.randrange(MIN_TEMP, MAX_TEMP)
    return format_measurement(station.id, measurement)


def _generate_chunk(stations: Sequence[WeatherStation], rng: random.Random, count: int) -> str:
    return ''.join(generate_line(stations, rng) for _ in range(count))


def generate_lines(stations: Sequence[WeatherStation], rows: int,
                   output_path: Union[str, Path], chunk_size: int = CHUNK_SIZE,
                   seed: Optional[int] = None,
                   show_progress: Optional[bool] = None) -> GenerationSummary:
    """
    Write ``rows`` random measurement lines to a file.

    Lines are built in chunks of ``chunk_size`` and each chunk is appended to
    the file with a single write, so memory use does not grow with ``rows``.
    A progress bar advances once per chunk, plus once for the remainder
    chunk. I/O errors propagate and leave the partial file in place.

    Args:
        stations: Stations to sample from
        rows: Number of lines to write
        output_path: File to create or truncate
        chunk_size: Lines per write
        seed: Seed for reproducible output. None draws a fresh seed
        show_progress: Show the progress bar. None shows it only on a terminal

    Returns:
        GenerationSummary describing the written file

    Raises:
        EmptyInputError: If there are no stations; nothing is written
        ValueError: If rows is negative or chunk_size is not positive
        OSError: If the output file cannot be created or written
    """
    if not stations:
        raise EmptyInputError("No stations")
    if rows < 0:
        raise ValueError(f"Row count must not be negative, got {rows}")
    if chunk_size <= 0:
        raise ValueError(f"Chunk size must be positive, got {chunk_size}")

    output_path = Path(output_path)
    rng = random.Random(seed)
    chunk_count = rows // chunk_size
    remainder = rows % chunk_size

    logger.info(f"Generating {rows:,} measurements for {len(stations)} stations into {output_path}")

    with ChunkProgress(chunk_count + 1, enabled=show_progress) as progress:
        with open(output_path, 'w', encoding='utf-8', newline='') as out:
            for chunk_index in range(chunk_count):
                out.write(_generate_chunk(stations, rng, chunk_size))
                progress.advance()
                logger.debug(f"Wrote chunk {chunk_index + 1}/{chunk_count + 1}")

            # Remainder chunk, written even when empty
            out.write(_generate_chunk(stations, rng, remainder))
            progress.advance()

        summary = GenerationSummary(
            output_path=output_path,
            rows=rows,
            chunks=chunk_count + 1,
            size_bytes=output_path.stat().st_size,
        )
        message = f"Completed, final file size: {summary.size_human}"
        progress.finish(message)

    logger.info(message)
    return summary
