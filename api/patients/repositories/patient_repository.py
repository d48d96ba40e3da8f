# patients/repositories/patient_repository.py
from django.core.exceptions import ValidationError
from django.db import transaction

from ..domain import fusionar_historia_clinica
from ..models import Paciente


class PatientRepository:
    """
    Almacén de documentos de pacientes sobre el ORM de Django.

    Cada método corresponde a una sola operación atómica sobre un documento.
    Los errores de base de datos (``DatabaseError``) se propagan al servicio.
    """

    def obtener_todos(self):
        return list(Paciente.objects.order_by('fecha_creacion'))

    def obtener_por_id(self, id_paciente):
        try:
            return Paciente.objects.get(id=id_paciente)
        except (Paciente.DoesNotExist, ValidationError, ValueError):
            # Un id mal formado se trata igual que uno inexistente
            return None

    def crear(self, **kwargs):
        paciente = Paciente(**kwargs)
        paciente.full_clean()
        paciente.save()
        return paciente

    @transaction.atomic
    def actualizar(self, id_paciente, **cambios):
        """Fusiona los campos enviados sobre el documento guardado; None si no existe"""
        try:
            paciente = Paciente.objects.select_for_update().get(id=id_paciente)
        except (Paciente.DoesNotExist, ValidationError, ValueError):
            return None

        for key, value in cambios.items():
            if key == 'historia_clinica':
                value = fusionar_historia_clinica(paciente.historia_clinica, value)
            setattr(paciente, key, value)
        paciente.full_clean()
        paciente.save()
        return paciente

    def eliminar(self, id_paciente):
        """Borra el documento con todo su contenido anidado; False si no existía"""
        try:
            eliminados, _ = Paciente.objects.filter(id=id_paciente).delete()
        except (ValidationError, ValueError):
            return False
        return eliminados > 0
