import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.db.base import Base
from app.db.session import get_db
from app.models.club import SetupStatus, SetupStep
from app.schemas.club import ClubCreate
from app.services.club import club_service
from main import app


# Usar una base de datos en memoria para pruebas
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


# Crear las tablas en la base de datos de prueba
@pytest.fixture(scope="session")
def db_engine():
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def db(db_engine):
    """
    Crea una sesión de base de datos fresca para cada test y deshace todo al finalizar.
    """
    connection = db_engine.connect()
    transaction = connection.begin()
    session = TestingSessionLocal(bind=connection)

    yield session

    session.close()
    transaction.rollback()
    connection.close()


@pytest.fixture(scope="function")
def client(db):
    """
    Crea un cliente de prueba usando la sesión de base de datos de prueba.
    """
    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def graphql(client):
    """Ejecuta una operación GraphQL y devuelve el cuerpo JSON de la respuesta."""
    def execute(query: str, variables: dict = None) -> dict:
        response = client.post("/graphql", json={"query": query, "variables": variables or {}})
        assert response.status_code == 200
        return response.json()

    return execute


@pytest.fixture
def club(db):
    """Club recién creado, en estado borrador."""
    club = club_service.create_club(db, ClubCreate(title="Riverside Tennis Club", sports=["tennis", "padel"]))
    assert club.setup_status == SetupStatus.draft
    assert club.current_step == SetupStep.club_setup
    return club
