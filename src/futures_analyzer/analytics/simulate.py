from __future__ import annotations
from datetime import date, timedelta
from typing import List, Optional, Tuple
import logging
import math

import numpy as np

from futures_analyzer.errors import InvalidConfiguration
from futures_analyzer.models.series import DailyRecord, PriceSeries

logger = logging.getLogger(__name__)

DEFAULT_START_PRICE = 500.00
DEFAULT_START_DATE = date(2025, 10, 1)
DEFAULT_VOLUME_RANGE = (1000, 5000)

# amplitudes del paseo aleatorio
OPEN_GAP = 1.0      # open = cierre previo +/- 1.0
CLOSE_SWING = 2.5   # close = open +/- 2.5
WICK = 0.5          # mecha máxima por encima/debajo del cuerpo

# ---------------------------
# Utilidades internas
# ---------------------------
def _check_params(days: int, start_price: float, volume_range: Tuple[int, int],
                  start_date: date, seed: Optional[int]) -> None:
    if days <= 0:
        raise InvalidConfiguration(f"days debe ser > 0 (recibido {days}).")
    if not (math.isfinite(start_price) and start_price > 0):
        raise InvalidConfiguration(f"start_price debe ser > 0 (recibido {start_price}).")
    lo, hi = volume_range
    if lo < 1 or hi <= lo:
        raise InvalidConfiguration(f"Rango de volumen no válido: [{lo}, {hi}).")
    if seed is not None and seed < 0:
        raise InvalidConfiguration(f"seed debe ser >= 0 (recibido {seed}).")
    try:
        start_date + timedelta(days=days - 1)
    except OverflowError:
        raise InvalidConfiguration(f"{days} días desde {start_date} superan la fecha máxima.")

# ---------------------------
# Paseo aleatorio diario
# ---------------------------
def simulate_price_series(
    symbol: str,
    days: int = 30,
    start_price: float = DEFAULT_START_PRICE,
    start_date: date = DEFAULT_START_DATE,
    volume_range: Tuple[int, int] = DEFAULT_VOLUME_RANGE,
    rng: Optional[np.random.Generator] = None,
    seed: Optional[int] = None,
) -> PriceSeries:
    """
    Genera `days` sesiones OHLCV con un paseo aleatorio de variación acotada.
    - open del día t = close del día t-1 + U(-1, 1)
    - close = open + U(-2.5, 2.5)
    - high/low = cuerpo +/- U(0, 0.5)
    - volumen entero en [lo, hi)
    Todas las extracciones salen de `rng` en ese orden; si no se pasa,
    se crea con np.random.default_rng(seed) (seed=None → no determinista).
    `rng` y `seed` son excluyentes.
    """
    if rng is not None and seed is not None:
        raise InvalidConfiguration("Indica rng o seed, no ambos.")
    _check_params(days, start_price, volume_range, start_date, seed)
    if rng is None:
        rng = np.random.default_rng(seed)
    vol_lo, vol_hi = volume_range

    logger.info("Loading %d days of sample data for %s...", days, symbol)
    records: List[DailyRecord] = []
    prev_close = float(start_price)
    for i in range(days):
        open_ = prev_close + float(rng.uniform(-OPEN_GAP, OPEN_GAP))
        close = open_ + float(rng.uniform(-CLOSE_SWING, CLOSE_SWING))
        high = max(open_, close) + float(rng.uniform(0.0, WICK))
        low = min(open_, close) - float(rng.uniform(0.0, WICK))
        volume = int(rng.integers(vol_lo, vol_hi))
        rec = DailyRecord(
            date=start_date + timedelta(days=i),
            open=open_, high=high, low=low, close=close, volume=volume,
        )
        logger.debug("%s %s", symbol, rec)
        records.append(rec)
        prev_close = close

    logger.info("Successfully loaded %d data points.", len(records))
    return PriceSeries(symbol=symbol, records=tuple(records))
