from __future__ import annotations
import os
from dataclasses import dataclass
from datetime import date
from typing import Optional, Tuple

from dotenv import load_dotenv

from futures_analyzer.errors import InvalidConfiguration
from futures_analyzer.models.series import parse_date
from futures_analyzer.analytics.simulate import (
    DEFAULT_START_PRICE,
    DEFAULT_START_DATE,
    DEFAULT_VOLUME_RANGE,
)

@dataclass
class Settings:
    symbol: str = "ZC"   # maíz (CBOT)
    days: int = 30
    start_price: float = DEFAULT_START_PRICE
    start_date: date = DEFAULT_START_DATE
    volume_range: Tuple[int, int] = DEFAULT_VOLUME_RANGE
    seed: Optional[int] = None
    log_level: str = "INFO"

def _env(name: str, cast, default):
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return cast(raw.strip())
    except ValueError:
        raise InvalidConfiguration(f"Valor no válido para {name}: {raw!r}")

def load_settings() -> Settings:
    """
    Valores por defecto compilados, sobrescribibles desde .env o variables
    de entorno FUTURES_*. Sin entorno, la ejecución es la estándar (ZC, 30 días, 500.00).
    """
    load_dotenv()
    d = Settings()
    return Settings(
        symbol=_env("FUTURES_SYMBOL", str, d.symbol),
        days=_env("FUTURES_DAYS", int, d.days),
        start_price=_env("FUTURES_START_PRICE", float, d.start_price),
        start_date=_env("FUTURES_START_DATE", parse_date, d.start_date),
        seed=_env("FUTURES_SEED", int, d.seed),
        log_level=_env("FUTURES_LOG_LEVEL", str, d.log_level),
    )
