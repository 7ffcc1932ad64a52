import logging
import sys

from app.core.config import get_settings

# Loggers de terceros que generan demasiado ruido a nivel DEBUG/INFO
NOISY_LOGGERS = {
    "uvicorn": logging.INFO,
    "uvicorn.access": logging.INFO,
    "sqlalchemy.engine": logging.WARNING,
    "botocore": logging.WARNING,
    "boto3": logging.WARNING,
    "strawberry": logging.INFO,
}


def setup_logging():
    """
    Configura el logging de la aplicación a stdout.

    LOG_LEVEL tiene prioridad; si no se define, DEBUG_MODE decide entre DEBUG e INFO.
    """
    settings = get_settings()
    default_level = logging.DEBUG if settings.DEBUG_MODE else logging.INFO
    level = logging.getLevelName(settings.LOG_LEVEL.upper()) if settings.LOG_LEVEL else default_level
    if not isinstance(level, int):
        level = default_level

    root = logging.getLogger()
    root.setLevel(level)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)-20s | %(filename)s:%(lineno)d | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    ))

    # Uvicorn puede haber instalado sus propios handlers antes
    if root.hasHandlers():
        root.handlers.clear()
    root.addHandler(console_handler)

    for name, logger_level in NOISY_LOGGERS.items():
        logging.getLogger(name).setLevel(logger_level)

    root.info("Configuración de logging aplicada. Nivel %s.", logging.getLevelName(level))
