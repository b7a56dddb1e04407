from __future__ import annotations
from typing import Dict, List, Optional

from futures_analyzer.models.series import PriceSeries

RULE = "=" * 60

# descripciones para los tickers más habituales de CME/CBOT
CONTRACTS = {
    "ZC": "Corn Futures",
    "ZS": "Soybean Futures",
    "ZW": "Wheat Futures",
    "CL": "Crude Oil Futures",
    "GC": "Gold Futures",
    "ES": "E-mini S&P 500 Futures",
}

def describe_symbol(symbol: str) -> str:
    return f"Simulated {CONTRACTS.get(symbol.upper(), 'Futures Contract')}"

def format_report(summary: Dict, description: Optional[str] = None) -> str:
    """
    Devuelve el informe de consola a partir de summarize_series():
      - ticker, rango de fechas
      - cierre medio, swing total (con signo)
      - día de máximo volumen (volumen con separador de miles) y su cierre
    """
    symbol = summary["symbol"]
    description = description or describe_symbol(symbol)
    top = summary["max_volume_day"]

    lines: List[str] = ["", RULE, f"Futures Contract Analysis Report: {symbol}", RULE]
    lines.append(f"| Contract Ticker: {symbol} ({description})")
    lines.append(f"| Data Range: {summary['start']} to {summary['end']}")
    lines.append(f"| Average Closing Price: ${summary['avg_close']:.2f}")
    lines.append(f"| Total Price Change (Swing): ${summary['swing']:+.2f}")
    lines.append(f"| Highest Volume Day: {top.date} (Volume: {top.volume:,})")
    lines.append(f"| Closing Price on Max Volume Day: ${top.close:.2f}")
    lines.append(RULE)
    lines.append("")
    return "\n".join(lines)

def format_table(series: PriceSeries) -> str:
    df = series.to_dataframe().drop(columns=["symbol"])
    return df.to_string(index=False, float_format=lambda x: f"{x:.2f}")
