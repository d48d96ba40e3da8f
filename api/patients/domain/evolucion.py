# patients/domain/evolucion.py
"""
Eventos de la evolución clínica.

La evolución es un libro de movimientos con dos variantes, distinguidas
por el campo ``tipo``:

- ``"tratamiento"``: procedimiento realizado, con su costo y el abono
  entregado en ese momento.
- ``"abono"``: pago suelto a cuenta del paciente.

Cada variante es su propia clase y solo guarda sus campos, de modo que
un abono nunca expone ``costo`` ni un tratamiento expone ``monto``.
"""
from dataclasses import dataclass, fields
from typing import ClassVar, Dict, Iterable, Optional, Union

TIPO_TRATAMIENTO = 'tratamiento'
TIPO_ABONO = 'abono'


class EventoInvalido(ValueError):
    """El diccionario recibido no corresponde a ninguna variante conocida"""


@dataclass(frozen=True)
class EventoTratamiento:
    tipo: ClassVar[str] = TIPO_TRATAMIENTO

    fecha: Optional[str] = None
    tratamiento: Optional[str] = None
    diente: Optional[str] = None
    costo: Optional[float] = None
    abono: Optional[float] = None


@dataclass(frozen=True)
class EventoAbono:
    tipo: ClassVar[str] = TIPO_ABONO

    fecha: Optional[str] = None
    monto: Optional[float] = None
    nota: Optional[str] = None


Evento = Union[EventoTratamiento, EventoAbono]

VARIANTES = {
    TIPO_TRATAMIENTO: EventoTratamiento,
    TIPO_ABONO: EventoAbono,
}


def evento_desde_dict(datos: Dict) -> Evento:
    """
    Construye la variante indicada por ``datos['tipo']``.

    Los campos que no pertenecen a la variante se descartan.

    Raises:
        EventoInvalido: si ``datos`` no es un objeto o ``tipo`` falta o
            no es una variante conocida.
    """
    if not isinstance(datos, dict):
        raise EventoInvalido(f"Se esperaba un objeto y se recibió {type(datos).__name__}")
    tipo = datos.get('tipo')
    clase = VARIANTES.get(tipo)
    if clase is None:
        raise EventoInvalido(
            f"Tipo de evento desconocido: {tipo!r}. Valores permitidos: {', '.join(VARIANTES)}"
        )
    propios = {f.name for f in fields(clase)}
    return clase(**{k: v for k, v in datos.items() if k in propios})


def evento_a_dict(evento: Evento) -> Dict:
    """Representación de documento: ``tipo`` más los campos presentes de la variante"""
    datos = {'tipo': evento.tipo}
    for campo in fields(evento):
        valor = getattr(evento, campo.name)
        if valor is not None:
            datos[campo.name] = valor
    return datos


@dataclass(frozen=True)
class ResumenCuenta:
    total_tratamientos: float
    total_abonos: float
    cantidad_tratamientos: int
    cantidad_abonos: int

    @property
    def saldo(self) -> float:
        return self.total_tratamientos - self.total_abonos

    def a_dict(self) -> Dict:
        return {
            'total_tratamientos': self.total_tratamientos,
            'total_abonos': self.total_abonos,
            'saldo': self.saldo,
            'cantidad_tratamientos': self.cantidad_tratamientos,
            'cantidad_abonos': self.cantidad_abonos,
        }


def resumir_cuenta(eventos: Iterable[Evento]) -> ResumenCuenta:
    """Totaliza costos y pagos del libro de evolución"""
    total_tratamientos = 0.0
    total_abonos = 0.0
    cantidad_tratamientos = 0
    cantidad_abonos = 0

    for evento in eventos:
        if isinstance(evento, EventoTratamiento):
            cantidad_tratamientos += 1
            total_tratamientos += evento.costo or 0
            total_abonos += evento.abono or 0
        elif isinstance(evento, EventoAbono):
            cantidad_abonos += 1
            total_abonos += evento.monto or 0

    return ResumenCuenta(
        total_tratamientos=total_tratamientos,
        total_abonos=total_abonos,
        cantidad_tratamientos=cantidad_tratamientos,
        cantidad_abonos=cantidad_abonos,
    )
