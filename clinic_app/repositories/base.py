"""Storage interface behind the patient service."""

from abc import ABC, abstractmethod
from typing import Any


class PatientRepository(ABC):
    """
    Storage adapter for patient records.

    Records are plain dicts keyed by column name. Implementations enforce
    case-insensitive email uniqueness themselves and raise
    ``DuplicateEmailException`` when a write would break it, so the service
    pre-check is never the only guard.
    """

    @abstractmethod
    async def add(self, values: dict[str, Any]) -> dict[str, Any]:
        """Persist a new patient and return the stored record with its id."""

    @abstractmethod
    async def get_by_id(self, patient_id: int) -> dict[str, Any] | None:
        """Return the patient with this id, or None."""

    @abstractmethod
    async def get_by_email(self, email: str) -> dict[str, Any] | None:
        """Return the patient whose email matches ignoring case, or None."""

    @abstractmethod
    async def list_all(self) -> list[dict[str, Any]]:
        """Return every patient, most recently registered first."""

    @abstractmethod
    async def search(self, term: str) -> list[dict[str, Any]]:
        """Return patients whose name, email or phone contains ``term``."""

    @abstractmethod
    async def email_exists(self, email: str, exclude_id: int | None = None) -> bool:
        """Check whether another patient already uses this email."""

    @abstractmethod
    async def replace(self, patient_id: int, values: dict[str, Any]) -> bool:
        """Overwrite the given fields of a patient; False if it does not exist."""

    @abstractmethod
    async def delete(self, patient_id: int) -> bool:
        """Remove a patient and its appointments; False if it does not exist."""
