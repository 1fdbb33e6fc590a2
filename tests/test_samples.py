import logging

import pytest

from correlation.samples import parse_row, read_pairs


def test_parse_row_numbers() -> None:
    assert parse_row(["1.5", " -2 "]) == (1.5, -2.0)
    assert parse_row(["3", "4", "extra"]) == (3.0, 4.0)


def test_parse_row_rejects_non_numeric() -> None:
    assert parse_row(["x", "y"]) is None
    assert parse_row(["1"]) is None
    assert parse_row([]) is None
    assert parse_row(["# 1", "2"]) is None


def test_read_pairs_skips_header_and_bad_rows(tmp_path, caplog) -> None:
    path = tmp_path / "data.csv"
    path.write_text("x,y\n1,2\n2,4\n\nbad,row\n3,6\n")

    with caplog.at_level(logging.WARNING):
        pairs = read_pairs(path)

    assert pairs == [(1.0, 2.0), (2.0, 4.0), (3.0, 6.0)]
    # Header is silent, the malformed row is reported
    assert "bad" in caplog.text
    assert "x,y" not in caplog.text and "'x'" not in caplog.text


def test_read_pairs_header_not_counted_as_skipped(tmp_path, caplog) -> None:
    path = tmp_path / "clean.csv"
    path.write_text("x,y\n1,2\n2,4\n3,6\n")

    with caplog.at_level(logging.INFO):
        read_pairs(path)

    assert "Loaded 3 pairs" in caplog.text
    assert "(0 skipped)" in caplog.text


def test_read_pairs_counts_bad_rows(tmp_path, caplog) -> None:
    path = tmp_path / "dirty.csv"
    path.write_text("x,y\n1,2\nbad,row\n3\n")

    with caplog.at_level(logging.INFO):
        read_pairs(path)

    assert "(2 skipped)" in caplog.text


def test_read_pairs_missing_file(tmp_path) -> None:
    with pytest.raises(OSError):
        read_pairs(tmp_path / "missing.csv")
