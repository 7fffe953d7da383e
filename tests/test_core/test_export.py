"""
Unit tests for CSV export.
"""

import os
import tempfile

import pytest

from src.core.export import EXPORT_HEADER, export_csv, format_value, iso_timestamp, write_export


def test_export_header_and_row(sample_records):
    """Test header order and the quoting of comma-containing text."""
    lines = export_csv(sample_records[:1]).split("\n")

    assert lines[0] == "Game,Rating,Sentiment,Confidence,Helpful,Funny,Playtime,Review_Text,Timestamp"
    assert lines[1] == (
        "Baldur's Gate 3,5,positive,0.93,10,2,3600,"
        '"Great game, loved it",2023-11-14T22:13:20.000Z'
    )


def test_export_one_line_per_record(sample_records):
    """Test every record becomes one line."""
    lines = export_csv(sample_records).split("\n")
    assert len(lines) == len(sample_records) + 1


def test_export_empty():
    """Test exporting nothing returns an empty string."""
    assert export_csv([]) == ""


def test_iso_timestamp_epoch():
    """Test the zero timestamp renders as the Unix epoch."""
    assert iso_timestamp(0) == "1970-01-01T00:00:00.000Z"


def test_format_value():
    """Test cell rendering rules."""
    assert format_value("plain") == "plain"
    assert format_value("a, b") == '"a, b"'
    assert format_value('say "hi"') == 'say "hi"'
    assert format_value(0.0) == "0"
    assert format_value(0.5) == "0.5"
    assert format_value(float("nan")) == "NaN"
    assert format_value(7) == "7"


def test_write_export(sample_records):
    """Test the export is written to disk, creating the directory."""
    with tempfile.TemporaryDirectory() as tmpdir:
        path = os.path.join(tmpdir, "out", "export.csv")

        result = write_export(sample_records, path)

        assert result == path
        with open(path, encoding="utf-8") as f:
            content = f.read()
        assert content.split("\n")[0] == ",".join(EXPORT_HEADER)
        assert content == export_csv(sample_records)


def test_iso_timestamp_out_of_range():
    """Test timestamps beyond the datetime range render as an empty cell."""
    assert iso_timestamp(300000000000) == ""


def test_export_out_of_range_timestamp(make_record):
    """Test a far-future timestamp still exports, with an empty Timestamp cell."""
    lines = export_csv([make_record(timestamp=300000000000)]).split("\n")

    assert len(lines) == 2
    assert lines[1].endswith(",")


def test_write_export_keeps_previous_file_on_failure(monkeypatch, make_record):
    """Test an export that fails while building the text leaves the old file intact."""
    import src.core.export as export_module

    def failing_export(records):
        raise ValueError("cannot render")

    with tempfile.TemporaryDirectory() as tmpdir:
        path = os.path.join(tmpdir, "export.csv")
        with open(path, "w", encoding="utf-8") as f:
            f.write("previous export")

        monkeypatch.setattr(export_module, "export_csv", failing_export)
        with pytest.raises(ValueError):
            write_export([make_record()], path)

        with open(path, encoding="utf-8") as f:
            assert f.read() == "previous export"


def test_write_export_large_timestamp(make_record):
    """Test writing records with a far-future timestamp succeeds."""
    with tempfile.TemporaryDirectory() as tmpdir:
        path = os.path.join(tmpdir, "export.csv")
        with open(path, "w", encoding="utf-8") as f:
            f.write("previous export")

        write_export([make_record(timestamp=300000000000)], path)

        with open(path, encoding="utf-8") as f:
            content = f.read()
    assert content.startswith("Game,Rating")
