# api/patients/tests/conftest.py
"""
Fixtures compartidas para tests de pacientes.
"""
import pytest
from django.db import OperationalError
from rest_framework.test import APIClient

from api.patients.domain import fusionar_historia_clinica
from api.patients.models import Paciente
from api.patients.services import PatientService


class RepositorioEnMemoria:
    """Doble del repositorio ORM: guarda los documentos en un dict"""

    def __init__(self):
        self.documentos = {}

    def obtener_todos(self):
        return list(self.documentos.values())

    def obtener_por_id(self, id_paciente):
        return self.documentos.get(str(id_paciente))

    def crear(self, **kwargs):
        paciente = Paciente(**kwargs)
        self.documentos[str(paciente.id)] = paciente
        return paciente

    def actualizar(self, id_paciente, **cambios):
        paciente = self.documentos.get(str(id_paciente))
        if paciente is None:
            return None
        for key, value in cambios.items():
            if key == 'historia_clinica':
                value = fusionar_historia_clinica(paciente.historia_clinica, value)
            setattr(paciente, key, value)
        return paciente

    def eliminar(self, id_paciente):
        return self.documentos.pop(str(id_paciente), None) is not None


class RepositorioCaido:
    """Doble que simula un almacenamiento inaccesible"""

    def _fallar(self, *args, **kwargs):
        raise OperationalError('could not connect to server: Connection refused')

    obtener_todos = _fallar
    obtener_por_id = _fallar
    crear = _fallar
    actualizar = _fallar
    eliminar = _fallar


@pytest.fixture
def api_client():
    """Cliente API"""
    return APIClient()


@pytest.fixture
def repositorio_en_memoria():
    return RepositorioEnMemoria()


@pytest.fixture
def servicio_en_memoria(repositorio_en_memoria):
    return PatientService(repositorio_en_memoria)


@pytest.fixture
def servicio_caido():
    return PatientService(RepositorioCaido())


@pytest.fixture
def paciente_data():
    """Ficha completa de ejemplo, como la envía el front-end"""
    return {
        'nombre': 'María González',
        'correo': 'maria.gonzalez@test.com',
        'celular': '0999999999',
        'edad': '35',
        'doctor': 'Dr. Juan Pérez - Odontólogo',
        'fecha': '2024-03-10',
        'tratamientos': [
            {'diente': '16', 'tratamiento': 'Resina', 'precio': 45.0},
            {'diente': '21', 'tratamiento': 'Endodoncia', 'precio': 180.0},
        ],
        'historiaClinica': {
            'antecedentes': 'Hipertensión controlada',
            'motivo': 'Dolor en molar superior',
            'diagnostico': 'Caries profunda en pieza 16',
            'evolucion': [
                {
                    'tipo': 'tratamiento',
                    'fecha': '2024-03-10',
                    'tratamiento': 'Resina',
                    'diente': '16',
                    'costo': 45.0,
                    'abono': 20.0,
                },
                {
                    'tipo': 'abono',
                    'fecha': '2024-03-17',
                    'monto': 25.0,
                    'nota': 'Pago en efectivo',
                },
            ],
            'radiografias': [
                {
                    'nombre': 'periapical_16.png',
                    'data': 'data:image/png;base64,iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNk+M9QDwADhgGAWjR9awAAAABJRU5ErkJggg==',
                    'fecha': '2024-03-10',
                    'tipo': 'image/png',
                },
            ],
        },
    }


@pytest.fixture
def paciente_creado(db, paciente_data):
    """Paciente ya guardado en la base"""
    return Paciente.objects.create(
        nombre=paciente_data['nombre'],
        correo=paciente_data['correo'],
        celular=paciente_data['celular'],
        tratamientos=paciente_data['tratamientos'],
        historia_clinica=paciente_data['historiaClinica'],
    )
