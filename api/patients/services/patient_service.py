# patients/services/patient_service.py
import logging

from django.core.exceptions import ValidationError
from django.db import DatabaseError
from rest_framework import serializers

from ..domain import EventoInvalido, evento_desde_dict, resumir_cuenta
from ..exceptions import ErrorAlmacenamiento, PacienteNoEncontrado

logger = logging.getLogger(__name__)


class PatientService:
    """
    Operaciones sobre el agregado Paciente.

    Recibe el repositorio por constructor; cualquier objeto con la misma
    interfaz que ``PatientRepository`` sirve (por ejemplo un doble en tests).
    """

    def __init__(self, repository):
        self.repository = repository

    def listar_pacientes(self):
        try:
            return self.repository.obtener_todos()
        except DatabaseError as e:
            logger.error(f"Error al listar pacientes: {e}")
            raise ErrorAlmacenamiento('Error al obtener pacientes', error=e)

    def obtener_paciente(self, id_paciente):
        try:
            paciente = self.repository.obtener_por_id(id_paciente)
        except DatabaseError as e:
            logger.error(f"Error al obtener paciente {id_paciente}: {e}")
            raise ErrorAlmacenamiento('Error al obtener el paciente', error=e)
        if paciente is None:
            raise PacienteNoEncontrado()
        return paciente

    def crear_paciente(self, data):
        try:
            paciente = self.repository.crear(**data)
        except ValidationError as e:
            raise serializers.ValidationError(_mensajes(e))
        except DatabaseError as e:
            logger.error(f"Error al crear paciente: {e}")
            raise ErrorAlmacenamiento('Error al crear el paciente', error=e)
        logger.info(f"Paciente creado: {paciente.nombre} (ID: {paciente.id})")
        return paciente

    def actualizar_paciente(self, id_paciente, data):
        try:
            paciente = self.repository.actualizar(id_paciente, **data)
        except ValidationError as e:
            raise serializers.ValidationError(_mensajes(e))
        except DatabaseError as e:
            logger.error(f"Error al actualizar paciente {id_paciente}: {e}")
            raise ErrorAlmacenamiento('Error al actualizar el paciente', error=e)
        if paciente is None:
            raise PacienteNoEncontrado()
        logger.info(f"Paciente actualizado: {paciente.nombre} (ID: {paciente.id})")
        return paciente

    def eliminar_paciente(self, id_paciente):
        try:
            eliminado = self.repository.eliminar(id_paciente)
        except DatabaseError as e:
            logger.error(f"Error al eliminar paciente {id_paciente}: {e}")
            raise ErrorAlmacenamiento('Error al eliminar el paciente', error=e)
        if not eliminado:
            raise PacienteNoEncontrado()
        logger.info(f"Paciente eliminado (ID: {id_paciente})")

    def estado_cuenta(self, id_paciente):
        """Resumen de costos y pagos a partir de la evolución clínica"""
        paciente = self.obtener_paciente(id_paciente)
        eventos = []
        for entrada in paciente.evolucion:
            try:
                eventos.append(evento_desde_dict(entrada))
            except EventoInvalido:
                # Documentos anteriores a la validación pueden traer tipos sueltos
                logger.warning(f"Evento de evolución ignorado en paciente {paciente.id}: {entrada!r}")
        return resumir_cuenta(eventos)


def _mensajes(error):
    if hasattr(error, 'message_dict'):
        return error.message_dict
    return {'non_field_errors': error.messages}
