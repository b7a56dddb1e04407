"""Fixtures compartidas."""
import pytest
from datetime import date, timedelta

from futures_analyzer.models.series import DailyRecord, PriceSeries


def make_series(closes, volumes=None, symbol="ZC", start=date(2025, 10, 1)):
    """Serie mínima con cuerpo plano (open = high = low = close)."""
    volumes = volumes or [1000] * len(closes)
    records = [
        DailyRecord(date=start + timedelta(days=i), open=c, high=c, low=c, close=c, volume=v)
        for i, (c, v) in enumerate(zip(closes, volumes))
    ]
    return PriceSeries(symbol=symbol, records=tuple(records))


@pytest.fixture
def empty_series():
    return PriceSeries(symbol="ZC")


@pytest.fixture
def small_series():
    return make_series([500.0, 502.5, 499.0, 480.0], volumes=[1200, 4900, 4900, 1000])
