# patients/domain/historia_clinica.py

def fusionar_historia_clinica(actual, cambios):
    """
    Aplica una actualización parcial sobre la historia clínica.

    Los subcampos enviados reemplazan a los guardados (las listas
    ``evolucion`` y ``radiografias`` se sustituyen completas); los omitidos
    se conservan. ``cambios=None`` elimina la historia.
    """
    if cambios is None:
        return None
    historia = dict(actual or {})
    historia.update(cambios)
    return historia
