"""Objetos de valor de la calculadora.

Sustituyen a los campos de un formulario: los parámetros entran
por valor en el orquestador y el resultado sale por valor, sin estado
compartido entre cálculos.
"""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class CalculationParameters:
    """Parámetros ya validados de un cálculo."""
    start_index: int
    end_index: int
    sd_threshold: float
    robust: bool = False

    @property
    def trial_count(self) -> int:
        """Registros del sub-rango [start_index, end_index)."""
        return self.end_index - self.start_index


@dataclass(frozen=True)
class Envelope:
    """Intervalo de outliers esperados en el sub-rango."""
    mean: float
    low: float
    high: float


@dataclass(frozen=True)
class CalculationResult:
    """Resultado de un cálculo completo."""

    population_outlier_total: int
    subrange_outlier_count: int
    trial_count: int
    expected_low: float
    expected_high: float
    hypothesis_holds: bool

    # Contexto
    population_size: int = 0
    population_rate: float = 0.0
    expected_mean: float = 0.0
    robust: bool = False

    @property
    def hypothesis_label(self) -> str:
        """Texto del veredicto tal como lo muestra la calculadora."""
        return "H0 = True" if self.hypothesis_holds else "H0 = False"

    @property
    def trial_label(self) -> str:
        return f"Trial Count = {self.trial_count}"

    def to_dict(self) -> Dict[str, Any]:
        """Convierte a diccionario para serialización."""
        return {
            'population_outlier_total': self.population_outlier_total,
            'subrange_outlier_count': self.subrange_outlier_count,
            'trial_count': self.trial_count,
            'expected_low': self.expected_low,
            'expected_high': self.expected_high,
            'hypothesis_holds': self.hypothesis_holds,
            'population_size': self.population_size,
            'population_rate': self.population_rate,
            'expected_mean': self.expected_mean,
            'robust': self.robust,
        }
