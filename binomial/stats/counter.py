"""Conteo de outliers ("spikes") sobre una serie normalizada."""

from typing import Optional, Sequence, Tuple

import numpy as np


def outlier_mask(zn: Sequence[float], threshold: float) -> np.ndarray:
    """Máscara booleana de |z| >= umbral. Los NaN nunca cuentan."""
    arr = np.asarray(zn, dtype=np.float64)
    with np.errstate(invalid='ignore'):
        return np.abs(arr) >= threshold


def count_outliers(
    zn: Sequence[float],
    threshold: float,
    index_range: Optional[Tuple[int, int]] = None
) -> int:
    """Cuenta los valores cuyo |z| alcanza o supera el umbral.

    Args:
        zn: Serie normalizada
        threshold: Umbral SD (el propio umbral cuenta como outlier)
        index_range: Rango semiabierto [lo, hi) o None para toda la serie

    Returns:
        Número de outliers
    """
    mask = outlier_mask(zn, threshold)
    if index_range is not None:
        lo, hi = index_range
        mask = mask[lo:hi]
    return int(np.count_nonzero(mask))
