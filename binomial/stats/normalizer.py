"""Normalización de series a Z-scores.

Dos métodos:
- StandardNormalizer: (x - media) / desviación poblacional
- RobustNormalizer: 0.6745 * (x - mediana) / MAD

Con varianza o MAD nulas (serie constante) el resultado contiene NaN o
infinitos. No se corrige: el conteo de outliers y el veredicto trabajan
con la semántica de comparación de NaN (siempre falsa).
"""

import logging
from abc import ABC, abstractmethod
from typing import Sequence

import numpy as np

from binomial.config import ROBUST_Z_CONSTANT
from binomial.stats.descriptive import as_array, mean, median, median_absolute_deviation, population_sd

logger = logging.getLogger(__name__)


class BaseNormalizer(ABC):
    """Clase base: z = factor * (x - centro) / escala."""

    name = "base"
    factor = 1.0

    @abstractmethod
    def center(self, xs: np.ndarray) -> float:
        """Tendencia central de la serie."""
        pass

    @abstractmethod
    def scale(self, xs: np.ndarray) -> float:
        """Dispersión de la serie."""
        pass

    def normalize(self, xs: Sequence[float]) -> np.ndarray:
        """Convierte la serie en Z-scores con el mismo orden y longitud.

        Args:
            xs: Serie de valores

        Returns:
            Array de Z-scores (puede contener NaN/inf si la dispersión es 0)
        """
        arr = as_array(xs)
        center = self.center(arr)
        scale = self.scale(arr)
        if scale == 0.0:
            logger.debug(f"Dispersión nula en normalización {self.name}: Z-scores no finitos")
        with np.errstate(divide='ignore', invalid='ignore'):
            return self.factor * (arr - center) / scale


class StandardNormalizer(BaseNormalizer):
    """Z-score clásico con media y desviación poblacional."""

    name = "standard"

    def center(self, xs: np.ndarray) -> float:
        return mean(xs)

    def scale(self, xs: np.ndarray) -> float:
        return population_sd(xs)


class RobustNormalizer(BaseNormalizer):
    """Z-score robusto basado en mediana y MAD."""

    name = "robust"
    factor = ROBUST_Z_CONSTANT

    def center(self, xs: np.ndarray) -> float:
        return median(xs)

    def scale(self, xs: np.ndarray) -> float:
        return median_absolute_deviation(xs)


def get_normalizer(robust: bool) -> BaseNormalizer:
    """Devuelve el normalizador para el flag Robust Z."""
    return RobustNormalizer() if robust else StandardNormalizer()


def z_normalize(xs: Sequence[float], robust: bool = False) -> np.ndarray:
    """Normaliza la serie con el método clásico o el robusto."""
    return get_normalizer(robust).normalize(xs)
