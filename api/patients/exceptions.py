# api/patients/exceptions.py
from rest_framework import status
from rest_framework.exceptions import APIException, NotFound


class PacienteNoEncontrado(NotFound):
    default_detail = 'Paciente no encontrado'
    default_code = 'paciente_no_encontrado'


class ErrorAlmacenamiento(APIException):
    """El almacenamiento no respondió o devolvió un error inesperado"""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = 'Error en el almacenamiento de pacientes'
    default_code = 'error_almacenamiento'

    def __init__(self, mensaje=None, error=None):
        detail = {'detail': mensaje or self.default_detail}
        if error is not None:
            detail['error'] = str(error)
        super().__init__(detail=detail)
