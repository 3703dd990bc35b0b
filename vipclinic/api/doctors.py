from typing import Optional

from fastapi import APIRouter, Depends

from .deps import get_doctor_service
from ..services.doctor_service import DoctorService
from ..schemas.doctor import DoctorRegisterRequest, DoctorRegisterResponse

router = APIRouter(prefix="/doctors", tags=["Doctors"])


@router.post(
    "/register",
    response_model=DoctorRegisterResponse,
    responses={
        400: {"description": "License number, full name or phone missing"},
        409: {"description": "Doctor with this license or phone already exists"},
        500: {"description": "Registration failed"},
    },
)
def register_doctor(
    payload: Optional[DoctorRegisterRequest] = None,
    doctor_service: DoctorService = Depends(get_doctor_service),
):
    """Register a new doctor."""
    doctor = doctor_service.register(payload)
    return DoctorRegisterResponse(doctor=doctor)
