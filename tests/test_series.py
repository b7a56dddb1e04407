"""Tests unitarios del modelo de datos OHLCV."""
import pytest
from dataclasses import FrozenInstanceError
from datetime import date

from futures_analyzer.errors import EmptySeries
from futures_analyzer.models.series import DailyRecord, PriceSeries, parse_date
from conftest import make_series


def test_record_is_immutable():
    rec = DailyRecord(date(2025, 10, 1), 500.0, 501.0, 499.0, 500.5, 1500)
    with pytest.raises(FrozenInstanceError):
        rec.close = 1.0


def test_record_str():
    rec = DailyRecord(date(2025, 10, 3), 500.0, 501.0, 499.0, 500.456, 1500)
    assert str(rec) == "Date: 2025-10-03 | Close: $500.46 | Volume: 1500"


def test_series_sequence_protocol(small_series):
    assert len(small_series) == 4
    assert small_series[0].close == 500.0
    assert [r.volume for r in small_series] == [1200, 4900, 4900, 1000]
    assert small_series.first() is small_series[0]
    assert small_series.last() is small_series[-1]


def test_series_accessors(small_series):
    assert small_series.closes() == [500.0, 502.5, 499.0, 480.0]
    assert small_series.volumes() == [1200, 4900, 4900, 1000]
    assert small_series.span_dates() == (date(2025, 10, 1), date(2025, 10, 4))


def test_empty_series(empty_series):
    assert len(empty_series) == 0
    assert empty_series.span_dates() == (None, None)
    with pytest.raises(EmptySeries):
        empty_series.first()
    with pytest.raises(EmptySeries):
        empty_series.last()


def test_rejects_out_of_order_dates():
    a = DailyRecord(date(2025, 10, 2), 1.0, 1.0, 1.0, 1.0, 1)
    b = DailyRecord(date(2025, 10, 1), 1.0, 1.0, 1.0, 1.0, 1)
    with pytest.raises(ValueError):
        PriceSeries(symbol="ZC", records=(a, b))
    with pytest.raises(ValueError):
        PriceSeries(symbol="ZC", records=(a, a))


def test_validate_clean_series(small_series):
    assert small_series.validate() == []


def test_validate_reports_issues():
    bad = PriceSeries(symbol="ZC", records=(
        DailyRecord(date(2025, 10, 1), 500.0, 499.0, 498.0, 500.0, 1000),
        DailyRecord(date(2025, 10, 3), 500.0, 501.0, 500.5, 500.0, 0),
    ))
    issues = bad.validate()
    assert any("high" in i for i in issues)
    assert any("low" in i for i in issues)
    assert any("volumen" in i for i in issues)
    assert any("hueco" in i for i in issues)


def test_from_records_parses_dates_and_defaults():
    ps = PriceSeries.from_records(
        [{"date": "2025-10-01", "close": 10}, {"date": "2025-10-02T00:00:00", "close": 11, "volume": 5}],
        symbol="CL",
    )
    assert ps.dates() == [date(2025, 10, 1), date(2025, 10, 2)]
    assert ps[0].open == ps[0].high == ps[0].low == 10.0
    assert ps[1].volume == 5


def test_to_dataframe(small_series):
    df = small_series.to_dataframe()
    assert list(df.columns) == ["symbol", "date", "open", "high", "low", "close", "volume"]
    assert len(df) == 4
    assert df["close"].iloc[-1] == 480.0
    assert (df["symbol"] == "ZC").all()


def test_parse_date():
    assert parse_date("2025-10-01") == date(2025, 10, 1)
    assert parse_date(" 2025-10-01 ") == date(2025, 10, 1)


@pytest.mark.parametrize("raw", ["2025-10-01x", "01/10/2025", "2025-02-30", ""])
def test_parse_date_rejects_malformed(raw):
    with pytest.raises(ValueError):
        parse_date(raw)
