"""Configuracion y fixtures compartidas para tests.

Este modulo contiene fixtures reutilizables para todos los tests del proyecto.
"""

import pytest
import sys
from pathlib import Path

# Agregar raiz al path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


# =============================================================================
# Fixtures de Series (texto tal como llega del formulario)
# =============================================================================

@pytest.fixture
def ramp_text():
    """Rampa 1..10 separada por comas."""
    return "1,2,3,4,5,6,7,8,9,10"


@pytest.fixture
def spiky_text():
    """Serie estable con un spike moderado (15) y uno extremo (1000)."""
    return "10,11,9,10,10,11,9,15,10,1000"


@pytest.fixture
def clustered_text():
    """16 unos seguidos de 4 dieces: los spikes se concentran al final."""
    return "\n".join(["1"] * 16 + ["10"] * 4)


@pytest.fixture
def constant_text():
    """Serie constante (varianza y MAD nulas)."""
    return "5, 5, 5, 5, 5"


# =============================================================================
# Fixtures de Parametros
# =============================================================================

@pytest.fixture
def full_range_params():
    """Sub-rango que cubre la rampa completa con umbral 1.0."""
    return {
        'start_index_text': '0',
        'end_index_text': '10',
        'sd_threshold_text': '1.0',
        'robust': False,
    }
