"""Parsing de la entrada en texto libre.

Convierte el bloque de datos pegado por el usuario en una serie de floats
y los tres parámetros escalares (Start Rec #, End Rec #, SD Threshold) en
valores tipados. La serie es tolerante: los tokens inválidos se descartan
sin error. Los parámetros no: devuelven None si el texto no es válido y
el orquestador decide qué error corresponde.
"""

import math
import re
from typing import Any, List, Optional

FIELD_SEPARATOR = ','

# Entero no negativo: signo '+' opcional y solo dígitos ASCII
_INDEX_RE = re.compile(r'\+?[0-9]+')

# Real decimal con exponente opcional, o las formas textuales inf/nan
_REAL_RE = re.compile(
    r'[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)',
    re.IGNORECASE,
)


def parse_real(token: Any) -> Optional[float]:
    """Convierte un token a float o None si no es un número real."""
    if not isinstance(token, str) or not _REAL_RE.fullmatch(token):
        return None
    return float(token)


def parse_index(value: Any) -> Optional[int]:
    """Convierte un número de registro (texto) a int no negativo o None."""
    if not isinstance(value, str) or not _INDEX_RE.fullmatch(value):
        return None
    return int(value)


def parse_threshold(value: Any) -> Optional[float]:
    """Convierte el umbral SD a float o None si no es un real >= 0.

    NaN no supera la comparación ``>= 0`` y se rechaza; ``inf`` es válido.
    """
    threshold = parse_real(value)
    if threshold is None or not threshold >= 0.0:
        return None
    return threshold


def split_series(raw: str) -> List[str]:
    """Separa el bloque de datos en tokens.

    Los saltos de línea pasan a ser separadores y después se elimina todo
    espacio en blanco del texto (no solo en los extremos de cada token).
    """
    if not raw:
        return []
    clean = ''.join(ch for ch in raw.replace('\n', FIELD_SEPARATOR) if not ch.isspace())
    return clean.split(FIELD_SEPARATOR)


def parse_series(raw: str) -> List[float]:
    """Parsea el bloque de datos en una lista ordenada de floats finitos.

    Los tokens vacíos, no numéricos o no finitos se descartan en silencio.

    Args:
        raw: Texto con valores separados por comas y/o saltos de línea

    Returns:
        Lista de valores en el orden original
    """
    values = []
    for token in split_series(raw):
        value = parse_real(token)
        if value is None or not math.isfinite(value):
            continue
        values.append(value)
    return values
