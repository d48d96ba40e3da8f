# patients/models/paciente.py
from django.db import models
from django.core.exceptions import ValidationError
from .base import BaseModel


class Paciente(BaseModel):
    """
    Documento de paciente.

    Los datos personales son columnas; las colecciones anidadas
    (tratamientos e historia clínica) viven dentro del propio documento
    como JSON y se borran junto con él.
    """

    # ================== DATOS PERSONALES ==================
    nombre = models.CharField(max_length=255, verbose_name="Nombre completo")
    correo = models.CharField(max_length=255, null=True, blank=True, verbose_name="Correo electrónico")
    celular = models.CharField(max_length=50, null=True, blank=True, verbose_name="Celular")
    edad = models.CharField(max_length=50, null=True, blank=True, verbose_name="Edad")
    doctor = models.CharField(max_length=255, null=True, blank=True, verbose_name="Credenciales del doctor")
    fecha = models.CharField(max_length=50, null=True, blank=True, verbose_name="Fecha")

    # ================== COLECCIONES ANIDADAS ==================
    # [{diente, tratamiento, precio}, ...] en orden de visualización
    tratamientos = models.JSONField(default=list, blank=True, verbose_name="Tratamientos")
    # {antecedentes, motivo, diagnostico, evolucion: [...], radiografias: [...]}
    historia_clinica = models.JSONField(null=True, blank=True, verbose_name="Historia clínica")

    class Meta:
        verbose_name = "Paciente"
        verbose_name_plural = "Pacientes"
        ordering = ['fecha_creacion']

    def __str__(self):
        return f"{self.nombre} ({self.id})"

    def clean(self):
        """Validaciones del documento"""
        if not self.nombre or not self.nombre.strip():
            raise ValidationError("El nombre es obligatorio.")
        if not isinstance(self.tratamientos, list):
            raise ValidationError("Los tratamientos deben ser una lista.")
        if self.historia_clinica is not None and not isinstance(self.historia_clinica, dict):
            raise ValidationError("La historia clínica debe ser un objeto.")

    @property
    def evolucion(self):
        """Entradas crudas de evolución de la historia clínica"""
        return (self.historia_clinica or {}).get('evolucion') or []
