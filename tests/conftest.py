import pytest
from fastapi.testclient import TestClient
from sqlalchemy import func, select

from vipclinic.core.database import Database
from vipclinic.main import create_app
from vipclinic.models.doctor import Doctor


@pytest.fixture
def database(tmp_path):
    db = Database(f"sqlite:///{tmp_path / 'test.db'}")
    yield db
    db.dispose()


@pytest.fixture
def unreachable_database(tmp_path):
    # sqlite cannot open a file inside a directory that does not exist
    db = Database(f"sqlite:///{tmp_path / 'missing' / 'test.db'}")
    yield db
    db.dispose()


@pytest.fixture
def client(database):
    with TestClient(create_app(database=database), base_url="http://testserver") as test_client:
        yield test_client


@pytest.fixture
def offline_client(unreachable_database):
    with TestClient(create_app(database=unreachable_database), base_url="http://testserver") as test_client:
        yield test_client


def count_doctors(database: Database) -> int:
    with database.connection() as conn:
        return conn.execute(select(func.count()).select_from(Doctor.__table__)).scalar_one()


def fetch_doctor(database: Database, license_number: str):
    with database.connection() as conn:
        return conn.execute(
            select(Doctor.__table__).where(Doctor.license_number == license_number)
        ).one()
