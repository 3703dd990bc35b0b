from typing import Optional
import logging

from sqlalchemy import insert
from sqlalchemy.exc import SQLAlchemyError

from ..core.database import Database, DbErrorKind
from ..core.errors import ConflictError, InfrastructureError
from ..models.doctor import Doctor
from ..schemas.doctor import DoctorRegisterRequest, DoctorSummary

logger = logging.getLogger(__name__)


class DoctorService:
    def __init__(self, database: Database):
        self.database = database

    def register(self, payload: Optional[DoctorRegisterRequest]) -> DoctorSummary:
        """Register a new doctor and return its public fields."""
        command = (payload or DoctorRegisterRequest()).to_command()

        stmt = (
            insert(Doctor)
            .values(
                license_number=command.license_number,
                full_name=command.full_name,
                phone=command.phone,
                specialty=command.specialty,
            )
            .returning(Doctor.id, Doctor.full_name, Doctor.phone)
        )

        try:
            with self.database.connection() as conn:
                with conn.begin():
                    row = conn.execute(stmt).one()
        except ConnectionError as e:
            logger.error(f"Registration error: {e}")
            raise InfrastructureError("Registration failed", error=str(e)) from e
        except SQLAlchemyError as e:
            logger.error(f"Registration error: {e}")
            if self.database.classify_error(e) is DbErrorKind.UNIQUE_VIOLATION:
                raise ConflictError("Doctor with this license or phone already exists") from e
            raise InfrastructureError(
                "Registration failed",
                error=str(getattr(e, "orig", None) or e),
            ) from e

        logger.info(f"Registered doctor id={row.id}")
        return DoctorSummary.model_validate(row)
