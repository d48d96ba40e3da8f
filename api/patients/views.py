# api/patients/views.py
from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.response import Response

from api.patients.repositories import PatientRepository
from api.patients.serializers import EstadoCuentaSerializer, PacienteSerializer
from api.patients.services import PatientService


class PacienteViewSet(viewsets.ViewSet):
    """
    CRUD de fichas de pacientes.

    Endpoints:
    - GET /api/pacientes/ - Listar todos los pacientes
    - POST /api/pacientes/ - Crear paciente
    - GET /api/pacientes/{id}/ - Detalle de paciente
    - PUT/PATCH /api/pacientes/{id}/ - Actualizar (fusión por campos)
    - DELETE /api/pacientes/{id}/ - Eliminar paciente
    - GET /api/pacientes/{id}/estado-cuenta/ - Resumen de costos y abonos
    """

    # Servicio inyectado; si es None se construye con el repositorio ORM
    service = None

    def get_service(self):
        if self.service is not None:
            return self.service
        return PatientService(PatientRepository())

    def list(self, request):
        pacientes = self.get_service().listar_pacientes()
        serializer = PacienteSerializer(pacientes, many=True)
        return Response(serializer.data)

    def create(self, request):
        serializer = PacienteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        paciente = self.get_service().crear_paciente(serializer.validated_data)
        output_serializer = PacienteSerializer(paciente)
        return Response(output_serializer.data, status=status.HTTP_201_CREATED)

    def retrieve(self, request, pk=None):
        paciente = self.get_service().obtener_paciente(pk)
        serializer = PacienteSerializer(paciente)
        return Response(serializer.data)

    def update(self, request, pk=None):
        # PUT y PATCH son fusiones: solo se sobrescriben los campos enviados
        serializer = PacienteSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        paciente = self.get_service().actualizar_paciente(pk, serializer.validated_data)
        output_serializer = PacienteSerializer(paciente)
        return Response(output_serializer.data)

    def partial_update(self, request, pk=None):
        return self.update(request, pk=pk)

    def destroy(self, request, pk=None):
        self.get_service().eliminar_paciente(pk)
        return Response({'message': 'Paciente eliminado correctamente', 'id': str(pk)})

    @action(detail=True, methods=['get'], url_path='estado-cuenta')
    def estado_cuenta(self, request, pk=None):
        resumen = self.get_service().estado_cuenta(pk)
        return Response(EstadoCuentaSerializer(resumen).data)
