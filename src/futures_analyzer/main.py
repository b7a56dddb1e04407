from __future__ import annotations
import argparse
import logging
from datetime import date
from typing import Optional, List

from futures_analyzer.config import Settings, load_settings
from futures_analyzer.errors import FuturesAnalyzerError, InvalidConfiguration
from futures_analyzer.logging_config import setup_logging
from futures_analyzer.models.series import parse_date

# === Generación y análisis ===
from futures_analyzer.analytics.simulate import simulate_price_series
from futures_analyzer.analytics.metrics import summarize_series
from futures_analyzer.report import format_report, format_table

logger = logging.getLogger(__name__)

def _cli_date(s: str) -> date:
    try:
        return parse_date(s)
    except ValueError:
        raise InvalidConfiguration(f"Fecha no válida (usa YYYY-MM-DD): {s}")

def apply_overrides(settings: Settings, args: argparse.Namespace) -> Settings:
    if args.symbol:
        settings.symbol = args.symbol
    if args.days is not None:
        settings.days = args.days
    if args.start_price is not None:
        settings.start_price = args.start_price
    if args.start_date:
        settings.start_date = _cli_date(args.start_date)
    if args.seed is not None:
        settings.seed = args.seed
    if args.log_level:
        settings.log_level = args.log_level
    return settings

def run_analysis(settings: Settings, show_data: bool = False) -> str:
    """
    Genera la serie, la analiza y devuelve el texto del informe.
    """
    series = simulate_price_series(
        settings.symbol,
        days=settings.days,
        start_price=settings.start_price,
        start_date=settings.start_date,
        volume_range=settings.volume_range,
        seed=settings.seed,
    )
    for issue in series.validate():
        logger.warning("Serie %s: %s", series.symbol, issue)

    out = format_report(summarize_series(series))
    if show_data:
        out += "\n" + format_table(series) + "\n"
    return out

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Simulación y análisis de un contrato de futuros (OHLCV diario).")
    p.add_argument("--symbol", help="Ticker del contrato (por defecto ZC).")
    p.add_argument("--days", type=int, help="Número de sesiones a simular (por defecto 30).")
    p.add_argument("--start-price", type=float, help="Cierre inicial (por defecto 500.00).")
    p.add_argument("--start-date", help="Primera fecha YYYY-MM-DD (por defecto 2025-10-01).")
    p.add_argument("--seed", type=int, help="Semilla para una ejecución reproducible.")
    p.add_argument("--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    p.add_argument("--show-data", action="store_true", help="Imprime también la tabla diaria.")
    return p

def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        settings = apply_overrides(load_settings(), args)
        setup_logging(settings.log_level)
        print(run_analysis(settings, show_data=args.show_data))
    except FuturesAnalyzerError as e:
        logger.error("%s", e)
        return 2
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
