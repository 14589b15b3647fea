import os
import sys
from pathlib import Path

# Ajoute la racine du projet au PYTHONPATH EN PREMIER
sys.path.insert(0, str(Path(__file__).parent.parent))

# Config de test AVANT d'importer l'app (settings est lu à l'import)
os.environ["DATABASE_URL"] = "sqlite:///./test.db"
os.environ["JWT_SECRET"] = "test-secret"
os.environ["BCRYPT_ROUNDS"] = "4"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

test_engine = create_engine(
    os.environ["DATABASE_URL"],
    connect_args={"check_same_thread": False}
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)

from daily_tasks.core.database import Base, get_db
from daily_tasks.main import app


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()

app.dependency_overrides[get_db] = override_get_db


@pytest.fixture(autouse=True)
def setup_teardown():
    """Crée et nettoie la DB avant/après chaque test"""
    Base.metadata.drop_all(bind=test_engine)
    Base.metadata.create_all(bind=test_engine)
    yield
    Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def client():
    """Client de test FastAPI"""
    return TestClient(app)


@pytest.fixture
def db():
    """Session DB pour les tests"""
    db = TestingSessionLocal()
    yield db
    db.close()


def register_and_login(client, username, email, password="pass1234"):
    client.post("/api/auth/register", json={
        "username": username,
        "email": email,
        "fullName": f"{username} Test",
        "password": password,
    })
    response = client.post("/api/auth/login", json={"username": username, "password": password})
    return response.json()


@pytest.fixture
def auth_user(client):
    """Crée un utilisateur et retourne la réponse de login (_id, token)"""
    return register_and_login(client, "alice", "alice@example.com")


@pytest.fixture
def other_user(client):
    return register_and_login(client, "bob", "bob@example.com")


@pytest.fixture
def auth_headers(auth_user):
    return {"Authorization": f"Bearer {auth_user['token']}"}


@pytest.fixture
def other_headers(other_user):
    return {"Authorization": f"Bearer {other_user['token']}"}
