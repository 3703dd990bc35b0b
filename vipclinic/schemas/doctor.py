from typing import Optional

from pydantic import BaseModel, ConfigDict

from ..core.errors import InvalidRequestError
from ..models.doctor import DEFAULT_SPECIALTY

REQUIRED_FIELDS_MESSAGE = "License number, full name, and phone are required"


class DoctorCreate(BaseModel):
    """Validated insert command."""
    license_number: str
    full_name: str
    phone: str
    specialty: str = DEFAULT_SPECIALTY


class DoctorRegisterRequest(BaseModel):
    """Registration body as received; required fields are checked by to_command()."""
    model_config = ConfigDict(coerce_numbers_to_str=True)

    license_number: Optional[str] = None
    full_name: Optional[str] = None
    phone: Optional[str] = None
    specialty: Optional[str] = None

    def to_command(self) -> DoctorCreate:
        if not self.license_number or not self.full_name or not self.phone:
            raise InvalidRequestError(REQUIRED_FIELDS_MESSAGE)

        return DoctorCreate(
            license_number=self.license_number,
            full_name=self.full_name,
            phone=self.phone,
            specialty=self.specialty or DEFAULT_SPECIALTY,
        )


class DoctorSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    full_name: str
    phone: str


class DoctorRegisterResponse(BaseModel):
    success: bool = True
    message: str = "Doctor registered successfully"
    doctor: DoctorSummary
