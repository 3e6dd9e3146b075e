"""
Configuración compartida para tests pytest
"""
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.database import Base, get_db
from app.enums.user_role import UserRole
from app.main import app
from app.models.route import Route
from app.models.seat import Seat
from app.models.user import User
from app.services.auth import create_user_token


# Base de datos en memoria para tests
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db():
    """Crear base de datos de test y limpiarla después"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def override_get_db(db):
    """Override de get_db para tests"""
    def _get_db():
        try:
            yield db
        finally:
            pass
    return _get_db


@pytest.fixture
def client(override_get_db):
    """Cliente HTTP contra la app con la base de test"""
    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


def make_user(db, user_id, email, role=UserRole.USUARIO):
    user = User(
        id=user_id,
        name=email.split("@")[0],
        email=email,
        hashed_password="hashed",
        role=role.value,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def make_route(db, route_id=1, destination="Cusco", price=45.5, rows=3, columns=4):
    route = Route(
        id=route_id,
        destination=destination,
        price=price,
        schedules=["08:00", "14:30"],
    )
    route.seats = [
        Seat(row=row, column=column, occupied=False)
        for row in range(1, rows + 1)
        for column in range(1, columns + 1)
    ]
    db.add(route)
    db.commit()
    db.refresh(route)
    return route


def auth_headers(user):
    return {"Authorization": f"Bearer {create_user_token(user)}"}


@pytest.fixture
def admin_user(db):
    """Administrador de prueba"""
    return make_user(db, 1, "admin@caminante.com", UserRole.ADMIN)


@pytest.fixture
def passenger(db):
    """Pasajero de prueba"""
    return make_user(db, 7, "pasajero@caminante.com")


@pytest.fixture
def other_passenger(db):
    """Segundo pasajero, para probar propiedad de reservas"""
    return make_user(db, 8, "otro@caminante.com")


@pytest.fixture
def sample_route(db):
    """Ruta de prueba con una grilla de 3x4 asientos libres"""
    return make_route(db)


FILE_DB_USERS = 8


@pytest.fixture
def file_session_factory(tmp_path):
    """
    Base SQLite en archivo para pruebas con varias sesiones o hilos.

    Cada sesión obtiene su propia conexión. Incluye la ruta 1 (2x2 asientos)
    y los usuarios 1..FILE_DB_USERS.
    """
    file_engine = create_engine(
        f"sqlite:///{tmp_path / 'caminante.db'}",
        connect_args={"check_same_thread": False, "timeout": 30},
    )
    Base.metadata.create_all(bind=file_engine)
    SessionFactory = sessionmaker(autocommit=False, autoflush=False, bind=file_engine)

    db = SessionFactory()
    make_route(db, route_id=1, rows=2, columns=2)
    for user_id in range(1, FILE_DB_USERS + 1):
        make_user(db, user_id, f"user{user_id}@caminante.com")
    db.close()

    try:
        yield SessionFactory
    finally:
        file_engine.dispose()
