import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from recruitment.db.base import Base
from recruitment.db.session import create_db_engine, get_db
from recruitment.main import app


@pytest.fixture
def engine():
    test_engine = create_db_engine("sqlite://", poolclass=StaticPool)
    Base.metadata.create_all(bind=test_engine)
    yield test_engine
    Base.metadata.drop_all(bind=test_engine)
    test_engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


def user_payload(**overrides):
    payload = {
        "nombre": "Ana",
        "apellido": "Rojas",
        "email": "ana@example.com",
        "contraseña": "secret123",
        "fecha_nacimiento": "1990-05-17",
        "telefono": "+56 9 5555 0000",
        "direccion": "Av. Siempre Viva 742",
        "rol": "Candidato",
    }
    payload.update(overrides)
    return payload


def offer_payload(recruiter_id, **overrides):
    payload = {
        "titulo": "Backend Developer",
        "descripcion": "Build APIs",
        "ubicacion": "Santiago",
        "salario": 1500000,
        "fecha_cierre": "2030-01-31",
        "reclutador_id": recruiter_id,
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def create_user(client):
    def _create(**overrides):
        response = client.post("/", params={"path": "usuario"}, json=user_payload(**overrides))
        assert response.status_code == 201, response.text
        return response.json()["id"]

    return _create


@pytest.fixture
def recruiter_id(create_user):
    return create_user(email="recruiter@example.com", rol="Reclutador")


@pytest.fixture
def candidate_id(create_user):
    return create_user(email="candidate@example.com", rol="Candidato")


@pytest.fixture
def create_offer(client, recruiter_id):
    def _create(**overrides):
        response = client.post(
            "/", params={"path": "oferta_laboral"}, json=offer_payload(recruiter_id, **overrides)
        )
        assert response.status_code == 201, response.text
        return response.json()["id"]

    return _create


@pytest.fixture
def offer_id(create_offer):
    return create_offer()


@pytest.fixture
def application_id(client, candidate_id, offer_id):
    response = client.post(
        "/",
        params={"path": "postulacion"},
        json={"candidato_id": candidate_id, "oferta_laboral_id": offer_id},
    )
    assert response.status_code == 201, response.text
    return response.json()["id"]
