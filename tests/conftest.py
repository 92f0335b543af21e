# =============================================
# tests/conftest.py
# =============================================
import os
import tempfile

# Settings are read at import time, so the environment must be ready first
_DB_DIR = tempfile.mkdtemp(prefix="certifica-tests-")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{os.path.join(_DB_DIR, 'test.db')}"
os.environ["SECRET_KEY"] = "test-secret-key-for-certifica-at-least-32-chars"
os.environ["ENVIRONMENT"] = "testing"
os.environ["PUBLIC_VERIFY_BASE_URL"] = "https://certifica.example.com/verificar"
os.environ.pop("DEFAULT_ADMIN_PASSWORD", None)

import pytest
from httpx import ASGITransport, AsyncClient

from certifica.main import app
from certifica.config.database import async_session, create_tables, drop_all_tables
from certifica.core.inflight import inflight_registry
from certifica.services.auth_service import AuthService

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "Senha123"


@pytest.fixture()
async def database():
    await create_tables()
    inflight_registry.reset()
    yield
    inflight_registry.reset()
    await drop_all_tables()


@pytest.fixture()
async def db_session(database):
    async with async_session() as session:
        yield session


@pytest.fixture()
async def admin(database):
    async with async_session() as session:
        return await AuthService(session).set_credentials(ADMIN_USERNAME, ADMIN_PASSWORD)


@pytest.fixture()
async def client(database):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture()
async def auth_headers(client, admin):
    resp = await client.post("/api/v1/auth/login", json={
        "username": ADMIN_USERNAME,
        "password": ADMIN_PASSWORD
    })
    assert resp.status_code == 200, resp.text
    return {"Authorization": f"Bearer {resp.json()['access_token']}"}


@pytest.fixture()
def create_course(client, auth_headers):
    async def _create(name="Operador de Empilhadeira", **fields):
        payload = {"name": name, "duration": "40 horas", "syllabus": ["Segurança", "Operação"]}
        payload.update(fields)
        resp = await client.post("/api/v1/courses/", json=payload, headers=auth_headers)
        assert resp.status_code == 201, resp.text
        return resp.json()
    return _create


@pytest.fixture()
def create_student(client, auth_headers):
    async def _create(course_id, name="Maria Souza", cpf="12345678901", **fields):
        payload = {"name": name, "cpf": cpf, "course_id": course_id, "completion_date": "2024-03-15"}
        payload.update(fields)
        resp = await client.post("/api/v1/students/", json=payload, headers=auth_headers)
        assert resp.status_code == 201, resp.text
        return resp.json()
    return _create


@pytest.fixture()
def issue(client, auth_headers):
    async def _issue(student_id):
        resp = await client.post(f"/api/v1/certificates/{student_id}/issue", headers=auth_headers)
        assert resp.status_code == 200, resp.text
        return resp.json()
    return _issue
