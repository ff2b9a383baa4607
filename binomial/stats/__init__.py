"""Submódulo de cálculo estadístico.

Contiene:
- descriptive: media, mediana, desviación poblacional, MAD
- normalizer: Z-score clásico y robusto
- counter: conteo de spikes por umbral
- envelope: intervalo binomial y veredicto H0
"""

from binomial.stats.descriptive import (
    mean,
    median,
    population_sd,
    median_absolute_deviation,
)

from binomial.stats.normalizer import (
    BaseNormalizer,
    StandardNormalizer,
    RobustNormalizer,
    get_normalizer,
    z_normalize,
)

from binomial.stats.counter import count_outliers
from binomial.stats.envelope import estimate, within_envelope

__all__ = [
    # Descriptivos
    'mean',
    'median',
    'population_sd',
    'median_absolute_deviation',
    # Normalización
    'BaseNormalizer',
    'StandardNormalizer',
    'RobustNormalizer',
    'get_normalizer',
    'z_normalize',
    # Conteo y envolvente
    'count_outliers',
    'estimate',
    'within_envelope',
]
