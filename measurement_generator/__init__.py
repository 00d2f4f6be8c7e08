"""
Synthetic weather station measurement generator.
"""

__version__ = "0.1.0"

from .core import (
    WeatherStation,
    load_weather_stations,
    generate_lines,
    human_readable,
    GeneratorConfig,
)

__all__ = [
    '__version__',
    'WeatherStation',
    'load_weather_stations',
    'generate_lines',
    'human_readable',
    'GeneratorConfig',
]
