# api/utils/exception_handlers.py
from rest_framework.views import exception_handler
from rest_framework.response import Response
from rest_framework import status
import logging

logger = logging.getLogger(__name__)


def custom_exception_handler(exc, context):
    """
    Envuelve los errores de la API de pacientes en el formato estándar.

    Los 4xx (paciente inexistente, ficha inválida, cuerpo demasiado grande)
    se registran como advertencia; las fallas del almacenamiento como error.
    Lo que DRF no reconoce se responde como 500 genérico.
    """
    response = exception_handler(exc, context)

    if response is None:
        logger.critical(
            f"Excepción no controlada en {_vista(context)}: {exc.__class__.__name__} - {exc}",
            exc_info=True,
        )
        return Response(
            {
                'success': False,
                'status_code': 500,
                'message': 'Error interno del servidor',
                'data': None,
                'errors': {'detail': ['Ha ocurrido un error inesperado']}
            },
            status=status.HTTP_500_INTERNAL_SERVER_ERROR
        )

    nivel = logging.ERROR if response.status_code >= 500 else logging.WARNING
    logger.log(
        nivel,
        f"{_vista(context)} respondió {response.status_code}: {exc.__class__.__name__} - {exc}",
        extra={'status_code': response.status_code}
    )

    response.data = {
        'success': False,
        'status_code': response.status_code,
        'message': _mensaje_principal(exc, response.status_code),
        'data': None,
        'errors': _formatear_errores(response.data)
    }
    return response


def _vista(context):
    view = context.get('view') if context else None
    return view.__class__.__name__ if view is not None else 'API'


def _mensaje_principal(exc, status_code):
    # p. ej. 'Error al actualizar el paciente' o el primer error de historiaClinica.evolucion[0].tipo
    detail = getattr(exc, 'detail', None)
    if detail is None:
        return status_messages_for(status_code)
    if isinstance(detail, (dict, list)):
        return _primer_mensaje(detail) or status_messages_for(status_code)
    return str(detail)


def _primer_mensaje(errors):
    if isinstance(errors, dict):
        errors = list(errors.values())
    if isinstance(errors, list):
        for value in errors:
            message = _primer_mensaje(value)
            if message:
                return message
        return None
    return str(errors) if errors else None


def status_messages_for(status_code):
    status_messages = {
        400: 'Error en los datos enviados',
        404: 'Recurso no encontrado',
        405: 'Método no permitido',
        413: 'Solicitud demasiado grande',
        500: 'Error interno del servidor'
    }

    return status_messages.get(status_code, 'Error en la solicitud')


def _formatear_errores(data):
    """Cada campo queda como lista de mensajes; los serializers anidados conservan su forma"""
    if isinstance(data, dict):
        errors = {}
        for field, messages in data.items():
            if isinstance(messages, list):
                errors[field] = messages
            elif isinstance(messages, dict):
                errors[field] = _formatear_errores(messages)
            else:
                errors[field] = [str(messages)]
        return errors
    if isinstance(data, list):
        return {'non_field_errors': data}
    return {'detail': [str(data)]}
