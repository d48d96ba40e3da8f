# api/patients/serializers.py

from rest_framework import serializers
from api.patients.domain import (
    TIPO_ABONO,
    TIPO_TRATAMIENTO,
    EventoInvalido,
    evento_a_dict,
    evento_desde_dict,
)
from api.patients.models.paciente import Paciente


def _texto():
    """Campo de texto opcional; se guarda tal como lo envía el front-end"""
    return serializers.CharField(
        required=False, allow_blank=True, allow_null=True, trim_whitespace=False
    )


def _numero():
    return serializers.FloatField(required=False, allow_null=True)


class SubdocumentoSerializer(serializers.Serializer):
    """
    Base para los subdocumentos JSON del paciente.

    Al serializar solo devuelve las claves que realmente están guardadas,
    para que la respuesta sea igual al documento escrito.
    """

    def to_representation(self, instance):
        data = super().to_representation(instance)
        if isinstance(instance, dict):
            return {key: value for key, value in data.items() if key in instance}
        return data


class TratamientoSerializer(SubdocumentoSerializer):
    """Tratamiento facturable de una pieza dental"""
    diente = _texto()
    tratamiento = _texto()
    precio = _numero()


class EvolucionSerializer(SubdocumentoSerializer):
    """
    Entrada del libro de evolución.

    Acepta los campos de ambas variantes en la entrada, pero el valor
    validado es siempre la variante indicada por ``tipo``, sin campos ajenos.
    """
    tipo = serializers.ChoiceField(choices=[TIPO_TRATAMIENTO, TIPO_ABONO])
    fecha = _texto()
    # Variante "tratamiento"
    tratamiento = _texto()
    diente = _texto()
    costo = _numero()
    abono = _numero()
    # Variante "abono"
    monto = _numero()
    nota = _texto()

    def validate(self, attrs):
        try:
            return evento_a_dict(evento_desde_dict(dict(attrs)))
        except EventoInvalido as e:
            raise serializers.ValidationError({'tipo': str(e)})

    def to_representation(self, instance):
        try:
            return evento_a_dict(evento_desde_dict(instance))
        except EventoInvalido:
            # Documentos guardados antes de validar la evolución
            return super().to_representation(instance)


class RadiografiaSerializer(SubdocumentoSerializer):
    """Radiografía embebida; ``data`` es la imagen en base64"""
    nombre = _texto()
    data = _texto()
    fecha = _texto()
    tipo = _texto()


class HistoriaClinicaSerializer(SubdocumentoSerializer):
    antecedentes = _texto()
    motivo = _texto()
    diagnostico = _texto()
    evolucion = EvolucionSerializer(many=True, required=False)
    radiografias = RadiografiaSerializer(many=True, required=False)


class PacienteSerializer(serializers.ModelSerializer):
    """Serializer para lectura y escritura de pacientes"""

    tratamientos = TratamientoSerializer(many=True, required=False)
    historiaClinica = HistoriaClinicaSerializer(
        source='historia_clinica', required=False, allow_null=True
    )

    class Meta:
        model = Paciente
        fields = [
            'id', 'nombre', 'correo', 'celular', 'edad', 'doctor', 'fecha',
            'tratamientos', 'historiaClinica',
        ]
        read_only_fields = ['id']
        extra_kwargs = {
            campo: {'trim_whitespace': False}
            for campo in ['nombre', 'correo', 'celular', 'edad', 'doctor', 'fecha']
        }

    def validate_nombre(self, value):
        """Validar que el nombre no esté vacío"""
        if not value or len(value.strip()) == 0:
            raise serializers.ValidationError("El nombre es obligatorio")
        return value


class EstadoCuentaSerializer(serializers.Serializer):
    """Resumen de cuenta derivado de la evolución clínica"""
    total_tratamientos = serializers.FloatField()
    total_abonos = serializers.FloatField()
    saldo = serializers.FloatField()
    cantidad_tratamientos = serializers.IntegerField()
    cantidad_abonos = serializers.IntegerField()
