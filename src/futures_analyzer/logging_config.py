"""Configuración de logging del analizador."""

import logging


def setup_logging(log_level: str = "INFO") -> None:
    """
    Configura el logger raíz con un único handler de consola (stderr).

    Args:
        log_level: DEBUG, INFO, WARNING, ERROR o CRITICAL
    """
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    formatter = logging.Formatter(
        fmt='%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler()
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)
