import time
import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
import logging

# Importar la función de configuración de logging
from app.core.logging_config import setup_logging

# Llamar a la configuración de logging ANTES de importar/crear otros elementos
setup_logging()

# Ahora importar el resto
from app.core.config import get_settings
from app.graphql import create_graphql_router  # importa los servicios y registra sus suscriptores

logger = logging.getLogger(__name__)

# Obtener la instancia de configuración al inicio del módulo
settings_instance = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Lifespan: {settings_instance.PROJECT_NAME} {settings_instance.VERSION} iniciado")
    logger.info(f"Lifespan: endpoint GraphQL en {settings_instance.GRAPHQL_PATH}")
    yield  # Aplicación en ejecución
    logger.info("Lifespan: Shutdown iniciado...")


app = FastAPI(
    title=settings_instance.PROJECT_NAME,
    description=settings_instance.PROJECT_DESCRIPTION,
    version=settings_instance.VERSION,
    lifespan=lifespan,
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    start_time = time.time()
    logger.info(f"Middleware: Recibida petición: {request.method} {request.url.path}")

    response = await call_next(request)

    process_time = time.time() - start_time
    response.headers["X-Process-Time"] = f"{process_time:.4f}"
    logger.info(f"Middleware: Enviando respuesta: {response.status_code} ({process_time:.4f}s)")
    return response


# Lista de orígenes permitidos para CORS
origins = settings_instance.BACKEND_CORS_ORIGINS or []

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,  # Lista explícita desde settings
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    max_age=86400,  # 24 horas en segundos
)

# Endpoint GraphQL federado
app.include_router(create_graphql_router(), prefix=settings_instance.GRAPHQL_PATH)


@app.get("/health")
def health():
    return {"status": "ok"}


if __name__ == "__main__":
    uvicorn.run("app.main:app", host="0.0.0.0", port=8000, reload=settings_instance.DEBUG_MODE)
