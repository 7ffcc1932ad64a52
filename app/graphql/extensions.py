import logging

from strawberry.extensions import SchemaExtension

from app.core.exceptions import ClubSetupError

logger = logging.getLogger(__name__)


class ErrorCodeExtension(SchemaExtension):
    """
    Añade `extensions.code` (NOT_FOUND, BAD_REQUEST...) a los errores
    GraphQL originados por excepciones de dominio.
    """

    def on_operation(self):
        yield
        result = self.execution_context.result
        if not result or not result.errors:
            return

        for error in result.errors:
            original = error.original_error
            if isinstance(original, ClubSetupError):
                error.extensions = {**(error.extensions or {}), "code": original.code}
            elif original is not None:
                logger.error(f"Error no controlado en la operación GraphQL: {str(original)}")
