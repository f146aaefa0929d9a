"""Appointment endpoints."""

from fastapi import APIRouter

from clinic_app.dependencies import AppointmentServiceDep
from clinic_app.schemas.appointments import AppointmentResponse

router = APIRouter()


@router.get(
    "/{appointment_id}",
    response_model=AppointmentResponse,
    summary="Get appointment by ID",
)
async def get_appointment(
    appointment_id: int,
    service: AppointmentServiceDep,
) -> AppointmentResponse:
    """
    Get a specific appointment by ID.

    Raises:
        NotFoundException: If the appointment does not exist
    """
    return await service.get_appointment(appointment_id)
