# api/utils/renderers.py
from rest_framework.renderers import JSONRenderer

class StandardizedJSONRenderer(JSONRenderer):
    """
    Renderer que envuelve todas las respuestas en el formato estándar:
    {success, status_code, message, data, errors}.
    """

    status_messages = {
        200: 'Operación exitosa',
        201: 'Paciente creado exitosamente',
        400: 'Error en los datos enviados',
        404: 'Recurso no encontrado',
        413: 'Solicitud demasiado grande',
        500: 'Error interno del servidor'
    }

    def render(self, data, accepted_media_type=None, renderer_context=None):
        response = renderer_context.get('response') if renderer_context else None

        # Sin response en el contexto se devuelve la data tal cual
        if not response:
            return super().render(data, accepted_media_type, renderer_context)

        # No modificar respuestas que ya están en formato estándar
        if isinstance(data, dict) and 'success' in data and 'status_code' in data:
            return super().render(data, accepted_media_type, renderer_context)

        message = self.status_messages.get(response.status_code, 'Operación completada')
        # Un mensaje propio en los datos (p. ej. al eliminar) reemplaza al genérico
        if isinstance(data, dict) and 'message' in data:
            message = data['message']
            data = {key: value for key, value in data.items() if key != 'message'}

        standardized_response = {
            'success': response.status_code < 400,
            'status_code': response.status_code,
            'message': message,
            'data': data if response.status_code < 400 else None,
            'errors': data if response.status_code >= 400 else None
        }

        return super().render(standardized_response, accepted_media_type, renderer_context)
