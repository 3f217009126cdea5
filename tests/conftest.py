"""
Pytest configuration: every test runs against a fresh in-memory database.
"""
import os
import tempfile

os.environ.setdefault("DATA_DIR", tempfile.mkdtemp(prefix="academic_test_"))
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

import orm  # noqa: F401
from database import Base, SessionLocal
from api.disciplines.dto.discipline import DisciplineRequest
from api.disciplines.services import disciplines_service
from api.files.dto.file import FileRequest
from api.files.orm import FileType
from api.files.services import files_service
from api.institutions.dto.institution import InstitutionRequest
from api.institutions.services import institutions_service
from api.users.dto.user import UserCreate
from api.users.orm import UserRole
from api.users.services import users_service


@pytest.fixture(autouse=True)
def db_engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    SessionLocal.configure(bind=engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def make_institution():
    counter = iter(range(1, 10_000))

    def _make(name=None, **kwargs):
        name = name or f"Institution {next(counter)}"
        return institutions_service.create_institution(InstitutionRequest(name=name, **kwargs))

    return _make


@pytest.fixture
def make_user():
    counter = iter(range(1, 10_000))

    def _make(institution_id, email=None, role=UserRole.STUDENT, password="secret123", **kwargs):
        n = next(counter)
        email = email or f"user{n}@campus.edu"
        return users_service.create_user(
            UserCreate(
                name=kwargs.pop("name", f"User {n}"),
                email=email,
                password=password,
                role=role,
                institution_id=institution_id,
                **kwargs,
            )
        )

    return _make


@pytest.fixture
def make_discipline():
    counter = iter(range(1, 10_000))

    def _make(institution_id, code=None, **kwargs):
        return disciplines_service.create_discipline(
            DisciplineRequest(
                name=kwargs.pop("name", f"Discipline {next(counter)}"),
                code=code,
                institution_id=institution_id,
                **kwargs,
            )
        )

    return _make


@pytest.fixture
def file_request():
    def _request(discipline_id, **overrides):
        data = {
            "title": "Lecture notes",
            "file_name": "notes.pdf",
            "file_type": FileType.PDF,
            "file_size": 2048,
            "file_path": "/files/notes.pdf",
            "discipline_id": discipline_id,
            "version": "1.0",
        }
        data.update(overrides)
        return FileRequest(**data)

    return _request


@pytest.fixture
def make_file(file_request):
    def _make(discipline_id, uploaded_by_id, **overrides):
        return files_service.create_file(file_request(discipline_id, **overrides), uploaded_by_id)

    return _make


@pytest.fixture
def tenant(make_institution, make_user, make_discipline):
    """An institution with one teacher and one discipline."""
    institution = make_institution("Federal University")
    teacher = make_user(institution.id, role=UserRole.TEACHER)
    discipline = make_discipline(institution.id, code="ANAT01", name="Anatomy")
    return institution, teacher, discipline


@pytest.fixture
def test_client():
    """FastAPI test client."""
    from fastapi.testclient import TestClient
    from main import app
    return TestClient(app)
