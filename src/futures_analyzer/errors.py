"""Excepciones propias del analizador de futuros."""


class FuturesAnalyzerError(Exception):
    """Base de todos los errores del paquete."""
    pass


class InvalidConfiguration(FuturesAnalyzerError, ValueError):
    """Parámetros de generación o de configuración no válidos."""
    pass


class EmptySeries(FuturesAnalyzerError, ValueError):
    """Agregado o accesor invocado sobre una serie sin registros."""
    pass
