# tests/conftest.py
import os

# Settings are read at import time, so they must be in place before the app is imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["DB_LOG_SLOW_QUERIES"] = "false"
os.environ["CREATE_TABLES_ON_STARTUP"] = "false"
os.environ["LOGIN_RATE_LIMIT"] = "5"
os.environ["ENVIRONMENT"] = "test"
os.environ.pop("REDIS_URL", None)
os.environ.pop("TRUSTED_PROXIES", None)

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from educenter.database import Base, enable_sqlite_foreign_keys, get_db  # noqa: E402
from educenter.main import app  # noqa: E402
from educenter.rate_limiter import reset_rate_limits  # noqa: E402


@pytest.fixture(scope="function")
def engine():
    """A private in-memory database per test, with foreign keys enforced"""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(scope="function")
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db_session(session_factory):
    db = session_factory()
    yield db
    db.close()


@pytest.fixture(scope="function")
def client(session_factory):
    """TestClient whose requests all run against the test database"""

    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    reset_rate_limits()
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
    reset_rate_limits()


@pytest.fixture
def create(client):
    """POST a payload and return the created record, failing loudly otherwise"""

    def _create(path: str, payload: dict) -> dict:
        response = client.post(path, json=payload)
        assert response.status_code == 201, response.text
        return response.json()

    return _create


@pytest.fixture
def role(create):
    return create("/userRoles", {"roleName": "student"})


@pytest.fixture
def user(create, role):
    return create(
        "/users",
        {
            "email": "Bat@Example.com",
            "password": "secret123",
            "name": "Bat",
            "userRoleId": role["id"],
        },
    )


@pytest.fixture
def geography(create):
    city = create("/cities", {"name": "Ulaanbaatar"})
    district = create("/districts", {"cityId": city["id"], "name": "Sukhbaatar"})
    subdistrict = create("/subdistricts", {"districtId": district["id"], "name": "1st khoroo"})
    return {"city": city, "district": district, "subdistrict": subdistrict}


@pytest.fixture
def center(create):
    return create("/educenters", {"name": "Bright Minds", "description": "Tutoring center"})


@pytest.fixture
def branch(create, center, geography):
    return create(
        "/branches",
        {
            "educationCenterId": center["id"],
            "name": "Central",
            "subdistrictId": geography["subdistrict"]["id"],
            "latitude": 47.92,
            "longitude": 106.92,
        },
    )


@pytest.fixture
def course(create, branch):
    return create(
        "/courses",
        {
            "branchId": branch["id"],
            "name": "Algebra I",
            "startDate": "2024-09-01T00:00:00",
            "endDate": "2024-12-20T00:00:00",
            "maxStudents": 20,
        },
    )
