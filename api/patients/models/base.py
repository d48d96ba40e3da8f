# patients/models/base.py

#Modelo base con campos comunes
import uuid
from django.db import models


class BaseModel(models.Model):
    """Modelo base abstracto con campos comunes a todos los documentos"""
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False, unique=True)

    fecha_creacion = models.DateTimeField(auto_now_add=True, verbose_name="Fecha de creación")
    fecha_modificacion = models.DateTimeField(auto_now=True, verbose_name="Fecha de modificación")

    class Meta:
        abstract = True
