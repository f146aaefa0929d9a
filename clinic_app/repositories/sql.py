"""SQLAlchemy-backed patient storage."""

from typing import Any

from sqlalchemy import delete, func, insert, or_, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from clinic_app.core.exceptions import DuplicateEmailException
from clinic_app.models.appointments import appointments
from clinic_app.models.patients import EMAIL_INDEX_NAME, patients
from clinic_app.repositories.base import PatientRepository


def _is_email_conflict(error: IntegrityError) -> bool:
    """Tell whether an integrity error came from the email index."""
    error_msg = str(error.orig) if error.orig is not None else str(error)
    return EMAIL_INDEX_NAME in error_msg


class SQLPatientRepository(PatientRepository):
    """Patient storage over an async SQLAlchemy session.

    Every write commits immediately.
    """

    def __init__(self, db: AsyncSession):
        """Initialize repository with database session."""
        self.db = db

    async def _commit(self, email: str | None = None) -> None:
        try:
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            if email is not None and _is_email_conflict(e):
                raise DuplicateEmailException(email) from e
            raise
        except SQLAlchemyError:
            await self.db.rollback()
            raise

    async def add(self, values: dict[str, Any]) -> dict[str, Any]:
        # RETURNING is not available on MySQL, so read the row back by key
        try:
            result = await self.db.execute(insert(patients).values(**values))
        except IntegrityError as e:
            await self.db.rollback()
            if _is_email_conflict(e):
                raise DuplicateEmailException(values["email"]) from e
            raise
        await self._commit(values["email"])

        patient_id = result.inserted_primary_key[0]
        patient = await self.get_by_id(patient_id)
        if patient is None:
            raise ValueError("Failed to create patient")
        return patient

    async def get_by_id(self, patient_id: int) -> dict[str, Any] | None:
        query = select(patients).where(patients.c.id == patient_id)
        result = await self.db.execute(query)
        patient = result.mappings().first()
        return dict(patient) if patient else None

    async def get_by_email(self, email: str) -> dict[str, Any] | None:
        query = select(patients).where(func.lower(patients.c.email) == email.lower())
        result = await self.db.execute(query)
        patient = result.mappings().first()
        return dict(patient) if patient else None

    async def list_all(self) -> list[dict[str, Any]]:
        query = select(patients).order_by(
            patients.c.registration_date.desc(), patients.c.id.desc()
        )
        result = await self.db.execute(query)
        return [dict(p) for p in result.mappings().all()]

    async def search(self, term: str) -> list[dict[str, Any]]:
        needle = term.lower()
        conditions = or_(
            func.lower(patients.c.first_name).contains(needle, autoescape=True),
            func.lower(patients.c.last_name).contains(needle, autoescape=True),
            func.lower(patients.c.email).contains(needle, autoescape=True),
            patients.c.phone_number.contains(term, autoescape=True),
        )
        query = (
            select(patients)
            .where(conditions)
            .order_by(patients.c.registration_date.desc(), patients.c.id.desc())
        )
        result = await self.db.execute(query)
        return [dict(p) for p in result.mappings().all()]

    async def email_exists(self, email: str, exclude_id: int | None = None) -> bool:
        query = select(patients.c.id).where(func.lower(patients.c.email) == email.lower())
        if exclude_id is not None:
            query = query.where(patients.c.id != exclude_id)

        result = await self.db.execute(query.limit(1))
        return result.first() is not None

    async def replace(self, patient_id: int, values: dict[str, Any]) -> bool:
        query = update(patients).where(patients.c.id == patient_id).values(**values)
        try:
            result = await self.db.execute(query)
        except IntegrityError as e:
            await self.db.rollback()
            if _is_email_conflict(e):
                raise DuplicateEmailException(values.get("email", "")) from e
            raise
        await self._commit(values.get("email"))
        return result.rowcount > 0

    async def delete(self, patient_id: int) -> bool:
        # Explicit so the cascade holds even where foreign keys are not enforced
        await self.db.execute(
            delete(appointments).where(appointments.c.patient_id == patient_id)
        )
        result = await self.db.execute(delete(patients).where(patients.c.id == patient_id))
        await self._commit()
        return result.rowcount > 0
