from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.exc import SQLAlchemyError
import logging

# Importar get_settings
from app.core.config import get_settings

logger = logging.getLogger(__name__)

# Obtener la instancia de configuración
settings_instance = get_settings()

# Obtener la URL directamente de la instancia de configuración
db_url = str(settings_instance.SQLALCHEMY_DATABASE_URI)

# Ocultar credenciales en el log
display_url = db_url
if '@' in display_url:
    scheme = display_url.split('://')[0]
    host_info = display_url.split('@')[-1]
    display_url = f"{scheme}://***@{host_info}"
else:
    display_url = "URL sin credenciales (o formato inesperado)"

logger.info(f"URL FINAL utilizada para crear el engine: {display_url}")

connect_args = {}
if db_url.startswith("postgresql"):
    connect_args = {
        "connect_timeout": 10,
        # SSL_REQUIRED=false desactiva TLS (entornos locales)
        "sslmode": "require" if settings_instance.SSL_REQUIRED else "disable",
        "keepalives": 1,
        "keepalives_idle": 30,
    }

engine = create_engine(
    db_url,
    echo=False,
    pool_pre_ping=True,
    connect_args=connect_args,
)
logger.info(f"Engine creado correctamente (SSL {'activado' if settings_instance.SSL_REQUIRED else 'desactivado'}): {display_url}")

# Crear clase de sesión
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


# Dependencia para obtener la sesión de DB
def get_db():
    db = SessionLocal()
    try:
        yield db
    except SQLAlchemyError as e:
        logger.error(f"Error de SQLAlchemy en la sesión: {e}", exc_info=True)
        db.rollback()  # Hacer rollback en caso de error
        raise
    finally:
        db.close()
