from __future__ import annotations

import logging

import pytest

from fars.analysis.extract import YearExtract, extract_year, extract_years, read_year
from fars.core.errors import MissingFileError

from tests.conftest import accident


def _warnings(caplog):
    return [r for r in caplog.records if r.levelno == logging.WARNING]


def test_read_year_projects_month_and_year(write_year, tmp_path):
    write_year(2013, [accident(1, YEAR=2099), accident(12), accident(1)])

    df = read_year(2013, data_dir=tmp_path)

    assert list(df.columns) == ["MONTH", "year"]
    assert df["MONTH"].tolist() == [1, 12, 1]
    # tagged with the requested year, not the file's YEAR column
    assert df["year"].tolist() == [2013, 2013, 2013]


def test_read_year_raises_for_missing_file(tmp_path):
    with pytest.raises(MissingFileError):
        read_year(2001, data_dir=tmp_path)


def test_extract_year_ok(write_year, tmp_path):
    write_year(2014, [accident(5), accident(6)])

    ext = extract_year(2014, data_dir=tmp_path)

    assert isinstance(ext, YearExtract)
    assert ext.ok
    assert ext.year == 2014
    assert len(ext) == 2


def test_extract_year_missing_file_warns_once(tmp_path, caplog):
    caplog.set_level(logging.WARNING, logger="fars.analysis.extract")

    ext = extract_year(2001, data_dir=tmp_path)

    assert not ext.ok
    assert len(ext) == 0
    assert list(ext.records.columns) == ["MONTH", "year"]
    warnings = _warnings(caplog)
    assert len(warnings) == 1
    assert "invalid year: 2001" in warnings[0].getMessage()


def test_extract_year_recovers_from_missing_column(write_year, tmp_path, caplog):
    caplog.set_level(logging.WARNING, logger="fars.analysis.extract")
    write_year(2015, [{"STATE": 1, "DAY": 3}])

    ext = extract_year(2015, data_dir=tmp_path)

    assert len(ext) == 0
    assert "MONTH" in ext.error
    assert len(_warnings(caplog)) == 1


def test_extract_year_recovers_from_corrupt_file(tmp_path, caplog):
    caplog.set_level(logging.WARNING, logger="fars.analysis.extract")
    (tmp_path / "accident_2016.csv.bz2").write_bytes(b"not compressed")

    ext = extract_year(2016, data_dir=tmp_path)

    assert len(ext) == 0
    assert len(_warnings(caplog)) == 1


def test_extract_years_keeps_order_length_and_duplicates(write_year, tmp_path, caplog):
    caplog.set_level(logging.WARNING, logger="fars.analysis.extract")
    write_year(2013, [accident(1)])
    write_year(2014, [accident(2), accident(3)])
    years = [2014, 1990, 2013, 2014]

    extracts = extract_years(years, data_dir=tmp_path)

    assert len(extracts) == len(years)
    assert [e.year for e in extracts] == years
    assert [len(e) for e in extracts] == [2, 0, 1, 2]
    assert len(_warnings(caplog)) == 1


def test_extract_years_empty():
    assert extract_years([]) == []


def test_read_year_normalizes_month(write_year, tmp_path):
    write_year(2013, [accident(1), accident(None), accident(7)])

    df = read_year(2013, data_dir=tmp_path)

    assert df["MONTH"].dtype == "Int64"
    assert df["MONTH"].isna().sum() == 1


def test_extract_year_recovers_from_fractional_month(write_year, tmp_path, caplog):
    caplog.set_level(logging.WARNING, logger="fars.analysis.extract")
    write_year(2017, [accident(1.5)])

    ext = extract_year(2017, data_dir=tmp_path)

    assert len(ext) == 0
    assert "accident_months" in ext.error
    assert len(_warnings(caplog)) == 1
