"""
Excepciones de dominio del servicio.

Los servicios lanzan estas excepciones; la capa GraphQL las expone con un
código estable en `extensions.code`.
"""


class ClubSetupError(Exception):
    """Error base del servicio de configuración de clubes."""
    code = "INTERNAL_SERVER_ERROR"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(ClubSetupError):
    """La entidad solicitada no existe."""
    code = "NOT_FOUND"


class BadRequestError(ClubSetupError):
    """Entrada inválida: campo u operador no permitido, subida fallida, etc."""
    code = "BAD_REQUEST"
