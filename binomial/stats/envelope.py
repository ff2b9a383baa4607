"""Envolvente binomial del número esperado de outliers en un sub-rango.

Aproximación normal a la binomial: media n*p y desviación sqrt(n*p*(1-p)),
escrita como sqrt(media * (1 - p)). Los límites se redondean hacia fuera
porque el conteo observado siempre es entero.
"""

import logging

import numpy as np

from binomial.models import Envelope

logger = logging.getLogger(__name__)


def estimate(trial_count: int, population_rate: float) -> Envelope:
    """Calcula el intervalo [low, high] de outliers esperados.

    Args:
        trial_count: Número de registros del sub-rango (n)
        population_rate: Proporción de outliers en toda la serie (p)

    Returns:
        Envelope con la media y los límites redondeados
    """
    expected = float(trial_count * population_rate)
    with np.errstate(invalid='ignore'):
        spread = np.sqrt(expected * (1.0 - population_rate))
    low = float(np.floor(expected - spread))
    high = float(np.ceil(expected + spread))
    logger.debug(f"Envolvente n={trial_count} p={population_rate:.4f}: [{low}, {high}]")
    return Envelope(mean=expected, low=low, high=high)


def within_envelope(count: int, envelope: Envelope) -> bool:
    """H0 se mantiene salvo que el conteo quede por debajo o por encima.

    Se evalúa como negación de "fuera" para que un límite NaN no rechace H0.
    """
    return not (count < envelope.low or count > envelope.high)
