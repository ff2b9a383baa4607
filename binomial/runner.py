"""Orquestador del cálculo de correlación binomial.

Ejecuta en secuencia:
1. Validación de Start Rec #, End Rec #, tamaño del rango y SD Threshold
2. Parsing de la serie y comprobación de su longitud
3. Normalización (clásica o robusta)
4. Conteo de outliers en toda la serie y en el sub-rango
5. Envolvente binomial y veredicto H0

La primera puerta que falla lanza su ValidationError; no hay resultados
parciales ni reintentos.
"""

import logging
from typing import Sequence

from binomial.config import MIN_SUBRANGE_SIZE
from binomial.exceptions import (
    DatasetTooSmallError,
    EndRecError,
    RangeTooSmallError,
    StartRecError,
    ThresholdError,
)
from binomial.models import CalculationParameters, CalculationResult
from binomial.parsing import parse_index, parse_series, parse_threshold
from binomial.stats.counter import count_outliers
from binomial.stats.envelope import estimate, within_envelope
from binomial.stats.normalizer import z_normalize

logger = logging.getLogger(__name__)


def validate_parameters(
    start_index_text: str,
    end_index_text: str,
    sd_threshold_text: str,
    robust: bool = False
) -> CalculationParameters:
    """Valida los parámetros escalares en el orden de las puertas.

    Raises:
        StartRecError, EndRecError, RangeTooSmallError, ThresholdError
    """
    start_index = parse_index(start_index_text)
    if start_index is None:
        raise StartRecError()

    end_index = parse_index(end_index_text)
    if end_index is None:
        raise EndRecError()

    if end_index < start_index + MIN_SUBRANGE_SIZE:
        raise RangeTooSmallError()

    sd_threshold = parse_threshold(sd_threshold_text)
    if sd_threshold is None:
        raise ThresholdError()

    return CalculationParameters(
        start_index=start_index,
        end_index=end_index,
        sd_threshold=sd_threshold,
        robust=bool(robust),
    )


def calculate(series: Sequence[float], params: CalculationParameters) -> CalculationResult:
    """Calcula conteos, envolvente y veredicto sobre una serie ya parseada.

    Args:
        series: Valores finitos en orden
        params: Parámetros validados

    Returns:
        CalculationResult

    Raises:
        DatasetTooSmallError: Si la serie tiene menos de end_index valores
    """
    if len(series) < params.end_index:
        raise DatasetTooSmallError()

    trial_count = params.trial_count
    zn = z_normalize(series, robust=params.robust)

    population_total = count_outliers(zn, params.sd_threshold)
    subrange_count = count_outliers(
        zn, params.sd_threshold, (params.start_index, params.end_index)
    )

    population_rate = population_total / len(zn)
    envelope = estimate(trial_count, population_rate)

    logger.debug(
        f"Serie de {len(zn)} valores: {population_total} spikes totales, "
        f"{subrange_count} en [{params.start_index}, {params.end_index})"
    )

    return CalculationResult(
        population_outlier_total=population_total,
        subrange_outlier_count=subrange_count,
        trial_count=trial_count,
        expected_low=envelope.low,
        expected_high=envelope.high,
        hypothesis_holds=within_envelope(subrange_count, envelope),
        population_size=len(zn),
        population_rate=population_rate,
        expected_mean=envelope.mean,
        robust=params.robust,
    )


def run_calculation(
    raw_text: str,
    start_index_text: str,
    end_index_text: str,
    sd_threshold_text: str,
    robust: bool = False
) -> CalculationResult:
    """Punto de entrada único: texto del formulario -> resultado.

    Args:
        raw_text: Datos separados por comas y/o saltos de línea
        start_index_text: Start Rec # (inclusivo)
        end_index_text: End Rec # (exclusivo)
        sd_threshold_text: Umbral SD
        robust: Usar Z-score robusto (mediana/MAD)

    Returns:
        CalculationResult

    Raises:
        ValidationError: Una de sus subclases, la de la primera puerta que falla
    """
    params = validate_parameters(start_index_text, end_index_text, sd_threshold_text, robust)
    series = parse_series(raw_text)
    return calculate(series, params)
