"""
Generator Configuration Utilities
Holds run settings and loads them from an optional JSON file
"""

import json
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional, Union

from .generator import CHUNK_SIZE

DEFAULT_ROWS = 1_000_000_000
DEFAULT_WEATHER_STATIONS = "./data/weather_stations.csv"
DEFAULT_OUTPUT = "./data/measurements.txt"


@dataclass
class GeneratorConfig:
    """Settings for one generation run"""

    rows: int = DEFAULT_ROWS
    weather_stations: str = DEFAULT_WEATHER_STATIONS
    output: str = DEFAULT_OUTPUT
    chunk_size: int = CHUNK_SIZE
    seed: Optional[int] = None
    show_progress: Optional[bool] = None

    @classmethod
    def from_json(cls, config_path: Union[str, Path]) -> 'GeneratorConfig':
        """
        Load settings from a JSON object whose keys are field names.

        Args:
            config_path: Path to the JSON file

        Returns:
            GeneratorConfig with defaults for keys not present in the file

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the file is not a JSON object or has unknown keys
        """
        config_path = Path(config_path)
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except FileNotFoundError:
            raise FileNotFoundError(f"Generator configuration not found at: {config_path}")
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in configuration file: {e}")

        if not isinstance(data, dict):
            raise ValueError(f"Configuration file must contain a JSON object: {config_path}")

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown configuration keys: {', '.join(unknown)}")

        return cls(**data)

    def validate(self) -> 'GeneratorConfig':
        """Check value types and ranges, returning self so calls can be chained"""
        if not _is_int(self.rows) or self.rows < 0:
            raise ValueError(f"rows must be a non-negative integer, got {self.rows!r}")
        if not _is_int(self.chunk_size) or self.chunk_size <= 0:
            raise ValueError(f"chunk_size must be a positive integer, got {self.chunk_size!r}")
        if self.seed is not None and not _is_int(self.seed):
            raise ValueError(f"seed must be an integer, got {self.seed!r}")
        for name in ('weather_stations', 'output'):
            value = getattr(self, name)
            if not isinstance(value, str):
                raise ValueError(f"{name} must be a path string, got {value!r}")
        if self.show_progress is not None and not isinstance(self.show_progress, bool):
            raise ValueError(f"show_progress must be true or false, got {self.show_progress!r}")
        return self


def _is_int(value) -> bool:
    # excludes bool
    return isinstance(value, int) and not isinstance(value, bool)
