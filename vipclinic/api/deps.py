from fastapi import Depends, Request

from ..core.database import Database
from ..services.doctor_service import DoctorService


def get_database(request: Request) -> Database:
    """Get the pooled database handle created at startup."""
    database = getattr(request.app.state, "database", None)
    if database is None:
        raise RuntimeError("Database not found in app.state. Ensure lifespan is configured.")
    return database


def get_doctor_service(database: Database = Depends(get_database)) -> DoctorService:
    return DoctorService(database)
