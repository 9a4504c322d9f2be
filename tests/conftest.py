import os
import tempfile

os.environ["DATABASE_URL"] = "sqlite:///" + os.path.join(tempfile.mkdtemp(), "test_library.db")

import pytest
from fastapi.testclient import TestClient

from app.database import Base, SessionLocal, engine
from main import app


@pytest.fixture
def client():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def db_session(client):
    session = SessionLocal()
    yield session
    session.close()


@pytest.fixture
def book_data():
    return {
        "titulo": "A",
        "autor": "X",
        "quantidade": 1,
        "editora": "Editora Y",
        "assunto": "Ficção",
        "faixaEtaria": "Livre"
    }


@pytest.fixture
def registered_user(client):
    response = client.post("/registrar", json={
        "nome": "Maria",
        "email": "maria@example.com",
        "senha": "segredo"
    })
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def checkout_body():
    def build(user_id, book):
        return {
            "usuarioId": user_id,
            "titulo": book["titulo"],
            "autor": book["autor"],
            "editora": book["editora"],
            "assunto": book["assunto"],
            "faixaEtaria": book["faixaEtaria"]
        }
    return build
