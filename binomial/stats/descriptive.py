"""Estadística descriptiva básica sobre series 1D.

La entrada nunca se modifica: cada función trabaja sobre una copia en
forma de ``np.ndarray`` de float64. Ninguna protege contra la serie vacía;
el orquestador garantiza al menos tres valores.
"""

from typing import Sequence

import numpy as np


def as_array(xs: Sequence[float]) -> np.ndarray:
    """Copia la serie a un array float64."""
    return np.array(xs, dtype=np.float64)


def mean(xs: Sequence[float]) -> float:
    """Media aritmética."""
    return float(np.mean(as_array(xs)))


def median(xs: Sequence[float]) -> float:
    """Mediana: promedio de los dos centrales si la longitud es par."""
    return float(np.median(as_array(xs)))


def population_sd(xs: Sequence[float]) -> float:
    """Desviación estándar poblacional (divisor n)."""
    return float(np.std(as_array(xs), ddof=0))


def median_absolute_deviation(xs: Sequence[float]) -> float:
    """MAD: mediana de las desviaciones absolutas respecto a la mediana."""
    arr = as_array(xs)
    return float(np.median(np.abs(arr - np.median(arr))))
