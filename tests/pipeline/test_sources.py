import json

import pytest

from anaviz.pipeline import file_source, static_source
from anaviz.pipeline.sources import read_series_file

pytestmark = pytest.mark.unit


@pytest.mark.asyncio
async def test_static_source_returns_values():
    data = [1, 2, 3]

    assert await static_source(data)() is data


@pytest.mark.asyncio
async def test_static_source_with_delay():
    assert await static_source([1], delay=0.01)() == [1]


def test_read_json_numbers(tmp_path):
    path = tmp_path / "samples.json"
    path.write_text(json.dumps([1.2, 2.5, 3.7]))

    assert read_series_file(path) == [1.2, 2.5, 3.7]


def test_read_json_keeps_invalid_values(tmp_path):
    """Reading never validates."""
    path = tmp_path / "samples.json"
    path.write_text(json.dumps(["a", 1]))

    assert read_series_file(path) == ["a", 1]


def test_read_json_rejects_non_list(tmp_path):
    path = tmp_path / "samples.json"
    path.write_text(json.dumps({"values": [1, 2]}))

    with pytest.raises(ValueError, match="expected a JSON list"):
        read_series_file(path)


def test_read_single_column_csv(tmp_path):
    path = tmp_path / "samples.csv"
    path.write_text("value\n1.5\n2\n3.25\n")

    assert read_series_file(path) == [1.5, 2.0, 3.25]


def test_read_xy_csv(tmp_path):
    path = tmp_path / "points.csv"
    path.write_text("x,y\n1,5\n2,3\n")

    assert read_series_file(path) == [{"x": 1, "y": 5}, {"x": 2, "y": 3}]


def test_read_csv_rejects_ambiguous_columns(tmp_path):
    path = tmp_path / "samples.csv"
    path.write_text("a,b\n1,2\n")

    with pytest.raises(ValueError, match="expected one column"):
        read_series_file(path)


def test_explicit_format_overrides_suffix(tmp_path):
    path = tmp_path / "samples.txt"
    path.write_text("[4, 5]")

    assert read_series_file(path, "json") == [4, 5]


def test_unsupported_format(tmp_path):
    path = tmp_path / "samples.xml"
    path.write_text("<x/>")

    with pytest.raises(ValueError, match="Unsupported source format"):
        read_series_file(path)


@pytest.mark.asyncio
async def test_file_source_reads_on_call(tmp_path):
    path = tmp_path / "samples.json"
    path.write_text("[1, 2]")
    source = file_source(path)

    path.write_text("[3, 4]")

    assert await source() == [3, 4]


@pytest.mark.asyncio
async def test_file_source_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        await file_source(tmp_path / "missing.json")()
