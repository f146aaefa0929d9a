"""Patient registration and lookup endpoints."""

from fastapi import APIRouter, Query, Response, status
from pydantic import EmailStr

from clinic_app.core.exceptions import AppException, DuplicateEmailException, NotFoundException
from clinic_app.dependencies import AppointmentServiceDep, PatientServiceDep
from clinic_app.schemas.appointments import AppointmentCreate, AppointmentResponse
from clinic_app.schemas.patients import (
    EmailAvailabilityResponse,
    PatientCreate,
    PatientCreatedResponse,
    PatientResponse,
    PatientUpdate,
)

router = APIRouter()


@router.post(
    "/",
    response_model=PatientCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a patient",
)
async def register_patient(
    data: PatientCreate,
    service: PatientServiceDep,
) -> PatientCreatedResponse:
    """
    Register a new patient.

    - **email**: must not belong to another patient, whatever its casing

    A duplicate email is answered with 409 and ``field`` set to ``email``.
    """
    patient_id = await service.register(data)
    return PatientCreatedResponse(id=patient_id)


@router.get(
    "/",
    response_model=list[PatientResponse],
    summary="List or search patients",
)
async def list_patients(
    service: PatientServiceDep,
    search: str | None = Query(
        None, max_length=255, description="Substring of name, email or phone number"
    ),
) -> list[PatientResponse]:
    """
    List patients, most recently registered first.

    With ``search`` only patients whose first name, last name, email or
    phone number contain the term are returned.
    """
    return await service.search(search)


@router.get(
    "/email-availability",
    response_model=EmailAvailabilityResponse,
    summary="Check whether an email is free",
)
async def check_email_availability(
    service: PatientServiceDep,
    email: EmailStr = Query(..., description="Email to check"),
    exclude_id: int | None = Query(None, description="Patient allowed to already own it"),
) -> EmailAvailabilityResponse:
    """Report whether no other patient is registered with this email."""
    available = await service.is_email_unique(email, exclude_id)
    return EmailAvailabilityResponse(email=email, available=available)


@router.get(
    "/{patient_id}",
    response_model=PatientResponse,
    summary="Get patient by ID",
)
async def get_patient(patient_id: int, service: PatientServiceDep) -> PatientResponse:
    """Get a single patient."""
    patient = await service.get_by_id(patient_id)
    if not patient:
        raise NotFoundException("Patient not found")
    return patient


@router.put(
    "/{patient_id}",
    response_model=PatientResponse,
    summary="Replace a patient's details",
)
async def update_patient(
    patient_id: int,
    data: PatientUpdate,
    service: PatientServiceDep,
) -> PatientResponse:
    """
    Replace every editable field of a patient.

    The registration date is kept.
    """
    if not await service.update(patient_id, data):
        if await service.get_by_id(patient_id) is None:
            raise NotFoundException("Patient not found")
        if not await service.is_email_unique(data.email, exclude_id=patient_id):
            raise DuplicateEmailException(data.email)
        raise AppException("Patient could not be updated")

    patient = await service.get_by_id(patient_id)
    if not patient:
        raise NotFoundException("Patient not found")
    return patient


@router.delete(
    "/{patient_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete a patient",
)
async def delete_patient(patient_id: int, service: PatientServiceDep) -> Response:
    """Delete a patient together with its appointments."""
    if not await service.delete(patient_id):
        raise NotFoundException("Patient not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/{patient_id}/appointments",
    response_model=AppointmentResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Book an appointment",
)
async def create_appointment(
    patient_id: int,
    data: AppointmentCreate,
    service: AppointmentServiceDep,
) -> AppointmentResponse:
    """Book an appointment for an existing patient."""
    return await service.create_appointment(patient_id, data)


@router.get(
    "/{patient_id}/appointments",
    response_model=list[AppointmentResponse],
    summary="List a patient's appointments",
)
async def list_patient_appointments(
    patient_id: int,
    service: AppointmentServiceDep,
) -> list[AppointmentResponse]:
    """List appointments of a patient, earliest first."""
    return await service.list_for_patient(patient_id)
