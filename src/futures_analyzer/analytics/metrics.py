from __future__ import annotations
from typing import Dict, Optional
from statistics import mean

from futures_analyzer.errors import EmptySeries
from futures_analyzer.models.series import DailyRecord, PriceSeries

def _require_records(series: PriceSeries, what: str) -> None:
    if len(series) == 0:
        raise EmptySeries(f"{what}: la serie {series.symbol} no tiene registros.")

def average_close(series: PriceSeries) -> float:
    """Media aritmética de los cierres."""
    _require_records(series, "average_close")
    return float(mean(series.closes()))

def price_swing(series: PriceSeries) -> float:
    """Cambio neto de cierre: último cierre menos el primero (con signo)."""
    _require_records(series, "price_swing")
    return series.last().close - series.first().close

def max_volume_day(series: PriceSeries) -> DailyRecord:
    """
    Sesión con mayor volumen. En caso de empate gana la primera en orden
    cronológico (solo se reemplaza con '>' estricto).
    """
    _require_records(series, "max_volume_day")
    best = series.first()
    for rec in series:
        if rec.volume > best.volume:
            best = rec
    return best

def summarize_series(series: PriceSeries) -> Dict[str, Optional[object]]:
    """Agrupa los tres agregados y el rango de fechas para el informe."""
    start, end = series.span_dates()
    return {
        "symbol": series.symbol,
        "start": start,
        "end": end,
        "n_obs": len(series),
        "avg_close": average_close(series),
        "swing": price_swing(series),
        "max_volume_day": max_volume_day(series),
    }
