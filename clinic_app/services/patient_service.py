"""Patient service for business logic."""

from datetime import UTC, datetime

import structlog
from sqlalchemy.exc import SQLAlchemyError

from clinic_app.core.exceptions import DuplicateEmailException
from clinic_app.repositories.base import PatientRepository
from clinic_app.schemas.patients import PatientCreate, PatientResponse, PatientUpdate

logger = structlog.get_logger()


class PatientService:
    """
    Gateway to patient data.

    The email uniqueness rule is checked here first so callers get a
    conflict tied to the email field; the repository's own constraint is what
    decides under concurrent registrations.
    """

    def __init__(self, repository: PatientRepository):
        """Initialize service with a patient repository."""
        self.repository = repository

    async def register(self, data: PatientCreate) -> int:
        """
        Register a new patient.

        Args:
            data: Validated patient fields

        Returns:
            Identifier assigned by the store

        Raises:
            DuplicateEmailException: If the email is already registered,
                compared without regard to case
        """
        if await self.repository.get_by_email(data.email):
            logger.info("patient_registration_conflict", reason="duplicate_email")
            raise DuplicateEmailException(data.email)

        values = data.model_dump()
        values["registration_date"] = datetime.now(UTC)

        try:
            patient = await self.repository.add(values)
        except DuplicateEmailException:
            # Lost a race against a concurrent registration
            logger.info("patient_registration_conflict", reason="storage_constraint")
            raise

        logger.info("patient_registered", patient_id=patient["id"])
        return patient["id"]

    async def get_by_id(self, patient_id: int) -> PatientResponse | None:
        """Get patient by ID."""
        patient = await self.repository.get_by_id(patient_id)
        return PatientResponse.model_validate(patient) if patient else None

    async def get_by_email(self, email: str) -> PatientResponse | None:
        """Get patient by email, ignoring case."""
        patient = await self.repository.get_by_email(email)
        return PatientResponse.model_validate(patient) if patient else None

    async def list_all(self) -> list[PatientResponse]:
        """List every patient, most recently registered first."""
        return [PatientResponse.model_validate(p) for p in await self.repository.list_all()]

    async def search(self, term: str | None) -> list[PatientResponse]:
        """
        Search patients by substring.

        A blank term lists everyone. Otherwise first name, last name and
        email match ignoring case and the phone number matches as typed.
        """
        if term is None or not term.strip():
            return await self.list_all()

        return [PatientResponse.model_validate(p) for p in await self.repository.search(term)]

    async def is_email_unique(self, email: str, exclude_id: int | None = None) -> bool:
        """Check that no other patient uses this email."""
        return not await self.repository.email_exists(email, exclude_id)

    async def update(self, patient_id: int, data: PatientUpdate) -> bool:
        """
        Replace every editable field of a patient.

        Email uniqueness is not pre-checked here. A write the store rejects,
        including a duplicate email, is reported as False rather than raised.

        Returns:
            True if the patient existed and was updated
        """
        try:
            updated = await self.repository.replace(patient_id, data.model_dump())
        except DuplicateEmailException:
            logger.warning(
                "patient_update_rejected", patient_id=patient_id, reason="duplicate_email"
            )
            return False
        except SQLAlchemyError as e:
            logger.error("patient_update_failed", patient_id=patient_id, error=str(e))
            return False

        if updated:
            logger.info("patient_updated", patient_id=patient_id)
        return updated

    async def delete(self, patient_id: int) -> bool:
        """Delete a patient and its appointments."""
        deleted = await self.repository.delete(patient_id)
        if deleted:
            logger.info("patient_deleted", patient_id=patient_id)
        return deleted
