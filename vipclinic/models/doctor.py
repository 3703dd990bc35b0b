from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.sql import func

from ..core.database import Base

DEFAULT_CITY = "Saida"
DEFAULT_SPECIALTY = "General"


class Doctor(Base):
    __tablename__ = "doctors"

    id = Column(Integer, primary_key=True)
    license_number = Column(String(50), unique=True, nullable=False)
    full_name = Column(String(100), nullable=False)
    phone = Column(String(20), unique=True, nullable=False)
    specialty = Column(String(100), nullable=True)
    city = Column(String(50), server_default=DEFAULT_CITY)

    # Timestamps
    created_at = Column(DateTime, server_default=func.now())

    def __repr__(self):
        return f"<Doctor(id={self.id}, name='{self.full_name}', license='{self.license_number}')>"
