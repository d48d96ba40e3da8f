# patients/domain/__init__.py
from .evolucion import (
    TIPO_ABONO,
    TIPO_TRATAMIENTO,
    EventoAbono,
    EventoInvalido,
    EventoTratamiento,
    ResumenCuenta,
    evento_a_dict,
    evento_desde_dict,
    resumir_cuenta,
)
from .historia_clinica import fusionar_historia_clinica

__all__ = [
    'TIPO_ABONO',
    'TIPO_TRATAMIENTO',
    'EventoAbono',
    'EventoInvalido',
    'EventoTratamiento',
    'ResumenCuenta',
    'evento_a_dict',
    'evento_desde_dict',
    'resumir_cuenta',
    'fusionar_historia_clinica',
]
