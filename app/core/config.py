import os
from typing import Any, List, Optional, Union
from functools import lru_cache
import logging

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Configurar el logger
logger = logging.getLogger(__name__)

PG_DRIVER_SCHEME = "postgresql+psycopg2://"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # Permitir campos extra en .env
        validate_default=True  # Ensamblar SQLALCHEMY_DATABASE_URI aunque no venga en el entorno
    )

    # Información del proyecto
    PROJECT_NAME: str = "ClubSetupService"
    PROJECT_DESCRIPTION: str = "Microservicio GraphQL para la configuración de clubes deportivos"
    VERSION: str = "0.1.0"
    GRAPHQL_PATH: str = "/graphql"

    # Debug mode
    DEBUG_MODE: bool = os.getenv("DEBUG_MODE", "False").lower() in ("true", "1", "t")
    LOG_LEVEL: Optional[str] = None  # DEBUG, INFO, WARNING...

    # CORS
    BACKEND_CORS_ORIGINS: List[str] = []

    @field_validator("BACKEND_CORS_ORIGINS", mode='before')
    def assemble_cors_origins(cls, v: Union[str, List[str]]) -> List[str]:
        if isinstance(v, str) and not v.startswith("["):
            return [i.strip() for i in v.split(",") if i.strip()]
        elif isinstance(v, (list, str)):
            return v
        raise ValueError(v)

    # Base de datos (mismas variables que usa el despliegue)
    DB_HOST: str = "localhost"
    DB_PORT: int = 5432
    DB_USER: str = "postgres"
    DB_PASSWORD: str = ""
    DB_NAME: str = "club_setup"
    SSL_REQUIRED: bool = True

    @field_validator("SSL_REQUIRED", mode="before")
    def parse_ssl_required(cls, v: Any) -> bool:
        """Solo el literal 'false' desactiva SSL."""
        if isinstance(v, str):
            return v.strip().lower() != "false"
        return bool(v)

    DATABASE_URL: Optional[str] = None
    SQLALCHEMY_DATABASE_URI: Optional[str] = None

    @field_validator("SQLALCHEMY_DATABASE_URI", mode="before")
    def assemble_db_connection(cls, v: Optional[str], info) -> str:
        """
        Configura la URI de SQLAlchemy.
        Prioriza DATABASE_URL si está presente; si no, la construye desde DB_*.
        """
        if isinstance(v, str) and v:
            return v

        values = info.data
        db_url = values.get("DATABASE_URL")
        if db_url:
            # Asegurar el driver psycopg2 (connect_args de app/db/session.py)
            for prefix in ("postgres://", "postgresql://"):
                if db_url.startswith(prefix):
                    logger.info(f"Corrigiendo DATABASE_URL de {prefix} a {PG_DRIVER_SCHEME}")
                    return PG_DRIVER_SCHEME + db_url[len(prefix):]
            logger.info("SQLAlchemy URI configurada desde DATABASE_URL")
            return db_url

        password_part = f":{values.get('DB_PASSWORD')}" if values.get("DB_PASSWORD") else ""
        url = (
            f"{PG_DRIVER_SCHEME}{values.get('DB_USER')}{password_part}"
            f"@{values.get('DB_HOST')}:{values.get('DB_PORT')}/{values.get('DB_NAME')}"
        )
        logger.info("SQLAlchemy URI construida a partir de DB_HOST/DB_PORT/DB_NAME")
        return url

    # AWS S3 para logos y galería
    AWS_ACCESS_KEY_ID: Optional[str] = None
    AWS_SECRET_ACCESS_KEY: Optional[str] = None
    AWS_REGION: str = "eu-west-1"
    AWS_BUCKET_NAME: Optional[str] = None
    MAX_UPLOAD_SIZE: int = 10 * 1024 * 1024  # 10MB

    # Paginación
    DEFAULT_PAGE_SIZE: int = 20
    MAX_PAGE_SIZE: int = 100


# Usar una función con caché para obtener la configuración
@lru_cache()
def get_settings() -> Settings:
    settings = Settings()
    logger.info("Configuración cargada correctamente")
    return settings


settings = get_settings()
