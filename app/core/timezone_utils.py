from datetime import datetime, timezone


def utcnow() -> datetime:
    """
    Hora actual en UTC, sin tzinfo.

    Las columnas DateTime se guardan sin zona horaria; todas las marcas de
    tiempo del servicio se generan con esta función.
    """
    return datetime.now(timezone.utc).replace(tzinfo=None)
