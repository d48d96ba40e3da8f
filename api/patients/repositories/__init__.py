from .patient_repository import PatientRepository

__all__ = ['PatientRepository']
