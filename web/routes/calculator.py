"""Rutas de la calculadora de correlación binomial.

Endpoints:
- POST /api/calculate - Ejecuta el cálculo (JSON)
- GET /api/health - Comprobación de vida
"""

import logging
from typing import Optional, Union

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from binomial.config import DEFAULT_SD_THRESHOLD
from binomial.exceptions import ValidationError
from binomial.runner import run_calculation

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api")


class CalculationRequest(BaseModel):
    """Campos del formulario. Los números llegan como texto libre."""
    data: str = ""
    start_rec: Optional[Union[str, int]] = None
    end_rec: Optional[Union[str, int]] = None
    sd_threshold: Optional[Union[str, float]] = str(DEFAULT_SD_THRESHOLD)
    robust: bool = False


def _as_text(value: Optional[Union[str, int, float]]) -> str:
    """Normaliza un campo numérico a texto para el parser de parámetros."""
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


@router.post("/calculate")
async def calculate(request: CalculationRequest):
    """Contrasta los spikes del sub-rango contra la tasa de toda la serie."""
    try:
        result = run_calculation(
            request.data,
            _as_text(request.start_rec),
            _as_text(request.end_rec),
            _as_text(request.sd_threshold),
            request.robust,
        )
    except ValidationError as e:
        logger.warning(f"Cálculo rechazado: {e.kind}")
        return JSONResponse(status_code=422, content=e.to_dict())

    payload = result.to_dict()
    payload['hypothesis_label'] = result.hypothesis_label
    return payload


@router.get("/health")
async def health():
    return {'status': 'ok'}
