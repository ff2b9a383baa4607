"""Calculadora de correlación binomial.

Comprueba si el número de spikes (|Z| >= umbral) en un sub-rango de una
serie es coherente con la tasa de spikes de toda la serie:
1. parsing: texto libre -> serie de floats
2. stats: normalización Z (clásica o robusta), conteo y envolvente binomial
3. runner: validación de parámetros y orquestación
"""

from binomial.exceptions import (
    ValidationError,
    StartRecError,
    EndRecError,
    RangeTooSmallError,
    ThresholdError,
    DatasetTooSmallError,
)
from binomial.models import CalculationParameters, CalculationResult, Envelope
from binomial.parsing import parse_series

# Runner
from binomial.runner import (
    run_calculation,
    validate_parameters,
    calculate,
)

__all__ = [
    # Errores
    'ValidationError',
    'StartRecError',
    'EndRecError',
    'RangeTooSmallError',
    'ThresholdError',
    'DatasetTooSmallError',
    # Modelos
    'CalculationParameters',
    'CalculationResult',
    'Envelope',
    # Parsing
    'parse_series',
    # Runner
    'run_calculation',
    'validate_parameters',
    'calculate',
]
