import uuid

import pytest
from rest_framework import serializers

from api.patients.domain import ResumenCuenta
from api.patients.exceptions import ErrorAlmacenamiento, PacienteNoEncontrado
from api.patients.repositories import PatientRepository
from api.patients.services import PatientService


class TestPatientServiceEnMemoria:
    """El servicio funciona con cualquier repositorio inyectado"""

    def test_crear_y_obtener(self, servicio_en_memoria):
        paciente = servicio_en_memoria.crear_paciente({'nombre': 'Ana Ruiz'})

        assert servicio_en_memoria.obtener_paciente(paciente.id) is paciente
        assert servicio_en_memoria.listar_pacientes() == [paciente]

    def test_obtener_inexistente(self, servicio_en_memoria):
        with pytest.raises(PacienteNoEncontrado):
            servicio_en_memoria.obtener_paciente(uuid.uuid4())

    def test_actualizar_fusiona_historia(self, servicio_en_memoria):
        paciente = servicio_en_memoria.crear_paciente({
            'nombre': 'Ana Ruiz',
            'historia_clinica': {'motivo': 'Control', 'evolucion': [{'tipo': 'abono', 'monto': 10.0}]},
        })

        actualizado = servicio_en_memoria.actualizar_paciente(
            paciente.id, {'historia_clinica': {'diagnostico': 'Sano'}}
        )

        assert actualizado.historia_clinica == {
            'motivo': 'Control',
            'diagnostico': 'Sano',
            'evolucion': [{'tipo': 'abono', 'monto': 10.0}],
        }

    def test_actualizar_inexistente(self, servicio_en_memoria):
        with pytest.raises(PacienteNoEncontrado):
            servicio_en_memoria.actualizar_paciente(uuid.uuid4(), {'celular': '0999'})

    def test_eliminar(self, servicio_en_memoria, repositorio_en_memoria):
        paciente = servicio_en_memoria.crear_paciente({'nombre': 'Ana Ruiz'})

        servicio_en_memoria.eliminar_paciente(paciente.id)

        assert repositorio_en_memoria.documentos == {}
        with pytest.raises(PacienteNoEncontrado):
            servicio_en_memoria.eliminar_paciente(paciente.id)

    def test_estado_cuenta_ignora_eventos_invalidos_guardados(self, servicio_en_memoria):
        paciente = servicio_en_memoria.crear_paciente({
            'nombre': 'Ana Ruiz',
            'historia_clinica': {'evolucion': [
                {'tipo': 'tratamiento', 'costo': 120.0, 'abono': 20.0},
                {'tipo': 'descuento', 'monto': 999.0},
                'texto suelto',
                {'tipo': 'abono', 'monto': 30.0},
            ]},
        })

        resumen = servicio_en_memoria.estado_cuenta(paciente.id)

        assert resumen == ResumenCuenta(
            total_tratamientos=120.0,
            total_abonos=50.0,
            cantidad_tratamientos=1,
            cantidad_abonos=1,
        )
        assert resumen.saldo == 70.0

    def test_estado_cuenta_sin_historia(self, servicio_en_memoria):
        paciente = servicio_en_memoria.crear_paciente({'nombre': 'Ana Ruiz'})

        assert servicio_en_memoria.estado_cuenta(paciente.id).saldo == 0


class TestPatientServiceAlmacenamientoCaido:
    """Los errores de base de datos se traducen a ErrorAlmacenamiento"""

    @pytest.mark.parametrize('operacion, argumentos', [
        ('listar_pacientes', ()),
        ('obtener_paciente', (uuid.uuid4(),)),
        ('crear_paciente', ({'nombre': 'Ana Ruiz'},)),
        ('actualizar_paciente', (uuid.uuid4(), {'celular': '0999'})),
        ('eliminar_paciente', (uuid.uuid4(),)),
    ])
    def test_operacion_falla_con_error_de_almacenamiento(self, servicio_caido, operacion, argumentos):
        with pytest.raises(ErrorAlmacenamiento) as excinfo:
            getattr(servicio_caido, operacion)(*argumentos)

        assert excinfo.value.status_code == 500
        assert 'Connection refused' in excinfo.value.detail['error']


@pytest.mark.django_db
class TestPatientServiceORM:

    def setup_method(self):
        self.service = PatientService(PatientRepository())

    def test_crear_sin_nombre_es_error_de_validacion(self):
        with pytest.raises(serializers.ValidationError) as excinfo:
            self.service.crear_paciente({'nombre': ''})

        assert 'nombre' in excinfo.value.detail

    def test_actualizar_a_nombre_vacio_es_error_de_validacion(self):
        paciente = self.service.crear_paciente({'nombre': 'Ana Ruiz'})

        with pytest.raises(serializers.ValidationError):
            self.service.actualizar_paciente(paciente.id, {'nombre': ''})
