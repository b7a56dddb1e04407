from __future__ import annotations
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from typing import List, Optional, Dict, Iterator, Tuple

from futures_analyzer.errors import EmptySeries

# -----------------------------
# Helpers internos
# -----------------------------
def parse_date(s: str) -> date:
    """Fecha YYYY-MM-DD estricta; ValueError si no encaja."""
    return datetime.strptime(s.strip(), "%Y-%m-%d").date()

def _coerce_date(d) -> date:
    if isinstance(d, datetime):
        return d.date()
    if isinstance(d, date):
        return d
    return parse_date(str(d)[:10])

# -----------------------------
# Registro diario
# -----------------------------
@dataclass(frozen=True)
class DailyRecord:
    """Una sesión OHLCV de un contrato de futuros. Inmutable."""
    date: date
    open: float
    high: float
    low: float
    close: float
    volume: int

    def to_dict(self) -> Dict:
        return {
            "date": self.date,
            "open": self.open,
            "high": self.high,
            "low": self.low,
            "close": self.close,
            "volume": self.volume,
        }

    def __str__(self) -> str:
        return f"Date: {self.date.isoformat()} | Close: ${self.close:.2f} | Volume: {self.volume}"

# -----------------------------
# Serie de precios
# -----------------------------
@dataclass
class PriceSeries:
    """
    Secuencia ordenada de DailyRecord para UN símbolo.
    El orden de inserción es el orden cronológico: fechas únicas y crecientes.
    """
    symbol: str
    records: Tuple[DailyRecord, ...] = field(default_factory=tuple)

    # ---------- Constructores ----------
    @classmethod
    def from_records(cls, records: List[Dict], symbol: str) -> "PriceSeries":
        """
        Acepta dicts con 'date', 'close' y opcionalmente open/high/low/volume.
        Los campos ausentes toman el valor del cierre (precios) o 0 (volumen).
        """
        out: List[DailyRecord] = []
        for r in records:
            close = float(r["close"])
            out.append(DailyRecord(
                date=_coerce_date(r["date"]),
                open=float(r.get("open", close)),
                high=float(r.get("high", close)),
                low=float(r.get("low", close)),
                close=close,
                volume=int(r.get("volume", 0)),
            ))
        return cls(symbol=symbol, records=tuple(out))

    def __post_init__(self):
        self.records = tuple(self.records)
        prev: Optional[date] = None
        for rec in self.records:
            if prev is not None and rec.date <= prev:
                raise ValueError(
                    f"Fechas fuera de orden o duplicadas en {self.symbol}: {rec.date} tras {prev}."
                )
            prev = rec.date

    # ---------- Protocolo de secuencia ----------
    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[DailyRecord]:
        return iter(self.records)

    def __getitem__(self, idx):
        return self.records[idx]

    # ---------- Accesores ----------
    def first(self) -> DailyRecord:
        if not self.records:
            raise EmptySeries(f"La serie {self.symbol} no tiene registros.")
        return self.records[0]

    def last(self) -> DailyRecord:
        if not self.records:
            raise EmptySeries(f"La serie {self.symbol} no tiene registros.")
        return self.records[-1]

    def closes(self) -> List[float]:
        return [r.close for r in self.records]

    def volumes(self) -> List[int]:
        return [r.volume for r in self.records]

    def dates(self) -> List[date]:
        return [r.date for r in self.records]

    def span_dates(self) -> Tuple[Optional[date], Optional[date]]:
        if not self.records:
            return None, None
        return self.records[0].date, self.records[-1].date

    # ---------- Calidad ----------
    def validate(self) -> List[str]:
        issues = []
        if not self.records:
            issues.append("Serie vacía.")
        for i, r in enumerate(self.records):
            if r.low > min(r.open, r.close):
                issues.append(f"{r.date}: low por encima de min(open, close).")
            if r.high < max(r.open, r.close):
                issues.append(f"{r.date}: high por debajo de max(open, close).")
            if r.volume <= 0:
                issues.append(f"{r.date}: volumen no positivo ({r.volume}).")
            if i > 0 and r.date - self.records[i - 1].date != timedelta(days=1):
                issues.append(f"{r.date}: hueco de calendario respecto al día anterior.")
        return issues

    # ---------- Utilidades ----------
    def to_records(self) -> List[Dict]:
        rows: List[Dict] = []
        for r in self.records:
            row = {"symbol": self.symbol}
            row.update(r.to_dict())
            rows.append(row)
        return rows

    def to_dataframe(self):
        import pandas as pd
        cols = ["symbol", "date", "open", "high", "low", "close", "volume"]
        df = pd.DataFrame(self.to_records(), columns=cols)
        return df.sort_values("date").reset_index(drop=True)
