"""Errores de validación de la calculadora.

Taxonomía cerrada: cada error identifica la puerta de validación que falló
y lleva un mensaje fijo para la capa de presentación. No transportan datos
de la serie.
"""


class ValidationError(Exception):
    """Excepción base para entradas rechazadas por el orquestador."""
    kind = "validation_error"
    message = "Validation Error"

    def __init__(self, message: str = None):
        super().__init__(message or self.message)

    def to_dict(self) -> dict:
        return {'error': self.kind, 'message': str(self)}


class StartRecError(ValidationError):
    """Start Rec # vacío o no es un entero no negativo."""
    kind = "start_rec"
    message = "Start Rec # Error"


class EndRecError(ValidationError):
    """End Rec # vacío o no es un entero no negativo."""
    kind = "end_rec"
    message = "End Rec # Error"


class RangeTooSmallError(ValidationError):
    """End Rec # menor que Start Rec # + 3."""
    kind = "range_too_small"
    message = "End Rec # must be at least 3 more than Start Rec # Error"


class ThresholdError(ValidationError):
    """Umbral SD vacío, no numérico o negativo."""
    kind = "sd_threshold"
    message = "SD Threshold Error"


class DatasetTooSmallError(ValidationError):
    """La serie parseada tiene menos valores que End Rec #."""
    kind = "dataset_too_small"
    message = "End Rec # Larger Than Dataset Error"
