"""
Tests for the weather station loader.
"""

import dataclasses
import pytest
from pathlib import Path

from measurement_generator.core.errors import ParseError, StationFileError
from measurement_generator.core.station_models import WeatherStation
from measurement_generator.core.stations import load_weather_stations


@pytest.fixture
def station_file(tmp_path):
    """Create a station file with comments and extra fields."""
    path = tmp_path / "weather_stations.csv"
    path.write_text(
        "# Adapted from the sample list\n"
        "Seattle;47.6;-122.3\n"
        "Portland;45.5\n"
        "#another comment\n"
        "Hong Kong;22.3;114.1\n"
        "Reykjavík\n",
        encoding='utf-8'
    )
    return path


def test_from_line_takes_first_field():
    """Test that the id is the text before the first delimiter."""
    assert WeatherStation.from_line("Seattle;47.6;-122.3").id == "Seattle"
    assert WeatherStation.from_line("St. John's;47.5").id == "St. John's"


def test_from_line_without_delimiter():
    """Test that a line without a delimiter is used whole."""
    assert WeatherStation.from_line("Portland").id == "Portland"


def test_from_line_empty_field_is_allowed():
    """Only a zero-length line is rejected, not an empty first field."""
    assert WeatherStation.from_line(";47.6").id == ""


def test_from_line_empty_line():
    with pytest.raises(ParseError, match="No id"):
        WeatherStation.from_line("")


def test_station_is_immutable():
    station = WeatherStation("Seattle")
    with pytest.raises(dataclasses.FrozenInstanceError):
        station.id = "Portland"


def test_load_weather_stations(station_file):
    """Test that stations are loaded in file order and comments skipped."""
    stations = load_weather_stations(station_file)

    assert [s.id for s in stations] == ["Seattle", "Portland", "Hong Kong", "Reykjavík"]


def test_load_weather_stations_accepts_str_path(station_file):
    stations = load_weather_stations(str(station_file))
    assert len(stations) == 4


def test_load_weather_stations_line_endings(tmp_path):
    """Test CRLF and CR line endings."""
    path = tmp_path / "stations.csv"
    path.write_bytes(b"Seattle;1\r\nPortland;2\rBoise")

    stations = load_weather_stations(path)

    assert [s.id for s in stations] == ["Seattle", "Portland", "Boise"]


def test_load_weather_stations_blank_line(tmp_path):
    """Test that a blank line is a parse error with its line number."""
    path = tmp_path / "stations.csv"
    path.write_text("Seattle;1\n\nPortland;2\n", encoding='utf-8')

    with pytest.raises(ParseError) as excinfo:
        load_weather_stations(path)

    assert excinfo.value.line_number == 2


def test_load_weather_stations_invalid_utf8(tmp_path):
    path = tmp_path / "stations.csv"
    path.write_bytes(b"Seattle;1\n\xff\xfe;2\n")

    with pytest.raises(ParseError) as excinfo:
        load_weather_stations(path)

    assert excinfo.value.line_number == 2


def test_load_weather_stations_invalid_utf8_reports_exact_line(tmp_path):
    """Test the line number of a bad byte well past the first read buffer."""
    path = tmp_path / "stations.csv"
    path.write_bytes(b"A\n" * 5000 + b"\xff\n")

    with pytest.raises(ParseError, match=r"line 5001") as excinfo:
        load_weather_stations(path)

    assert excinfo.value.line_number == 5001


def test_load_weather_stations_blank_line_after_crlf(tmp_path):
    """Test line numbering across mixed line endings."""
    path = tmp_path / "stations.csv"
    path.write_bytes(b"Seattle;1\r\nPortland;2\r\rBoise\n")

    with pytest.raises(ParseError) as excinfo:
        load_weather_stations(path)

    assert excinfo.value.line_number == 3


def test_load_weather_stations_missing_file(tmp_path):
    """Test that a missing file raises an IOError."""
    missing = tmp_path / "missing.csv"

    with pytest.raises(IOError, match="Could not open file"):
        load_weather_stations(missing)

    with pytest.raises(StationFileError) as excinfo:
        load_weather_stations(missing)
    assert isinstance(excinfo.value.__cause__, FileNotFoundError)


def test_load_weather_stations_only_comments(tmp_path):
    """An empty result is not an error at load time."""
    path = tmp_path / "stations.csv"
    path.write_text("# nothing here\n", encoding='utf-8')

    assert load_weather_stations(path) == []


def test_sample_station_file_loads():
    """Test the station list shipped with the repository."""
    sample = Path(__file__).resolve().parents[2] / "data" / "weather_stations.csv"

    stations = load_weather_stations(sample)

    assert len(stations) > 0
    assert all(s.id and ';' not in s.id for s in stations)
