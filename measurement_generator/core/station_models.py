"""
Data model for the weather stations measurements are generated for.
"""

from dataclasses import dataclass
from typing import Optional

from .errors import ParseError

ID_DELIMITER = ';'


@dataclass(frozen=True)
class WeatherStation:
    """A weather reporting location identified by a short text id."""

    id: str

    @classmethod
    def from_line(cls, line: str, line_number: Optional[int] = None) -> 'WeatherStation':
        """
        Create a WeatherStation from one line of the station file.

        The id is everything before the first ';'. Remaining fields are
        ignored, and a line without any ';' is taken whole.

        Args:
            line: Station file line without its line terminator
            line_number: 1-based position of the line, used in error messages

        Returns:
            WeatherStation instance

        Raises:
            ParseError: If the line is empty
        """
        if not line:
            raise ParseError("No id", line_number)

        station_id, _, _ = line.partition(ID_DELIMITER)
        return cls(id=station_id)
