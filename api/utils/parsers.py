# api/utils/parsers.py
from django.conf import settings
from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.parsers import JSONParser


class CargaDemasiadoGrande(APIException):
    status_code = status.HTTP_413_REQUEST_ENTITY_TOO_LARGE
    default_detail = 'El cuerpo de la solicitud supera el tamaño permitido'
    default_code = 'carga_demasiado_grande'


class LimitedJSONParser(JSONParser):
    """
    JSONParser con tope de tamaño.

    Las radiografías viajan en base64 dentro del documento, así que el
    límite es amplio (PACIENTES_MAX_BODY_BYTES), pero existe.
    """

    def parse(self, stream, media_type=None, parser_context=None):
        request = (parser_context or {}).get('request')
        if request is not None:
            limite = settings.PACIENTES_MAX_BODY_BYTES
            try:
                longitud = int(request.META.get('CONTENT_LENGTH') or 0)
            except (TypeError, ValueError):
                longitud = 0
            if longitud > limite:
                raise CargaDemasiadoGrande(
                    f'El cuerpo de la solicitud ({longitud} bytes) supera el máximo de {limite} bytes'
                )
        return super().parse(stream, media_type, parser_context)
