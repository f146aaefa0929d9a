"""API v1 router configuration."""

from fastapi import APIRouter

from clinic_app.api.v1.endpoints import appointments, health, patients

api_router = APIRouter()

api_router.include_router(health.router, tags=["Health"])
api_router.include_router(patients.router, prefix="/patients", tags=["Patients"])
api_router.include_router(appointments.router, prefix="/appointments", tags=["Appointments"])
