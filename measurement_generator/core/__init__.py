"""
Core functionality for the measurement generator.
"""

from .errors import GeneratorError, StationFileError, ParseError, EmptyInputError
from .station_models import WeatherStation
from .stations import load_weather_stations
from .generator import (
    GenerationSummary,
    format_measurement,
    generate_line,
    generate_lines,
)
from .progress import ChunkProgress, human_readable
from .generator_config import GeneratorConfig

__all__ = [
    'GeneratorError',
    'StationFileError',
    'ParseError',
    'EmptyInputError',
    'WeatherStation',
    'load_weather_stations',
    'GenerationSummary',
    'format_measurement',
    'generate_line',
    'generate_lines',
    'ChunkProgress',
    'human_readable',
    'GeneratorConfig',
]
