"""
Exceptions raised while loading stations and generating measurements.
"""

from typing import Optional


class GeneratorError(Exception):
    """Base class for all measurement generator errors."""


class StationFileError(GeneratorError, OSError):
    """The weather station file could not be opened."""


class ParseError(GeneratorError, ValueError):
    """A line of the weather station file has no usable id."""

    def __init__(self, message: str, line_number: Optional[int] = None):
        self.line_number = line_number
        if line_number is not None:
            message = f"{message} (line {line_number})"
        super().__init__(message)


class EmptyInputError(GeneratorError, ValueError):
    """There are no weather stations to sample from."""
