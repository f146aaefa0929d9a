"""In-process patient storage for tests and local experiments."""

import asyncio
from copy import deepcopy
from typing import Any

from clinic_app.core.exceptions import DuplicateEmailException
from clinic_app.repositories.base import PatientRepository

FIRST_PATIENT_ID = 1000


def _newest_first(records: list[dict[str, Any]]) -> list[dict[str, Any]]:
    ordered = sorted(records, key=lambda r: (r["registration_date"], r["id"]), reverse=True)
    return [deepcopy(r) for r in ordered]


class InMemoryPatientRepository(PatientRepository):
    """
    Patient storage kept in a list owned by the instance.

    Not durable. An ``asyncio.Lock`` serializes writes, which is enough for
    tests running on one event loop but not for multi-process use.
    """

    def __init__(self) -> None:
        self._records: list[dict[str, Any]] = []
        self._next_id = FIRST_PATIENT_ID
        self._lock = asyncio.Lock()

    def _find(self, patient_id: int) -> dict[str, Any] | None:
        return next((r for r in self._records if r["id"] == patient_id), None)

    def _email_taken(self, email: str, exclude_id: int | None = None) -> bool:
        needle = email.lower()
        return any(
            r["email"].lower() == needle and r["id"] != exclude_id for r in self._records
        )

    async def add(self, values: dict[str, Any]) -> dict[str, Any]:
        async with self._lock:
            if self._email_taken(values["email"]):
                raise DuplicateEmailException(values["email"])

            record = {**deepcopy(values), "id": self._next_id}
            self._next_id += 1
            self._records.append(record)
            return deepcopy(record)

    async def get_by_id(self, patient_id: int) -> dict[str, Any] | None:
        record = self._find(patient_id)
        return deepcopy(record) if record else None

    async def get_by_email(self, email: str) -> dict[str, Any] | None:
        needle = email.lower()
        record = next((r for r in self._records if r["email"].lower() == needle), None)
        return deepcopy(record) if record else None

    async def list_all(self) -> list[dict[str, Any]]:
        return _newest_first(self._records)

    async def search(self, term: str) -> list[dict[str, Any]]:
        needle = term.lower()
        matches = [
            r
            for r in self._records
            if needle in r["first_name"].lower()
            or needle in r["last_name"].lower()
            or needle in r["email"].lower()
            or term in r["phone_number"]
        ]
        return _newest_first(matches)

    async def email_exists(self, email: str, exclude_id: int | None = None) -> bool:
        return self._email_taken(email, exclude_id)

    async def replace(self, patient_id: int, values: dict[str, Any]) -> bool:
        async with self._lock:
            record = self._find(patient_id)
            if record is None:
                return False
            if "email" in values and self._email_taken(values["email"], exclude_id=patient_id):
                raise DuplicateEmailException(values["email"])

            record.update(deepcopy(values))
            record["id"] = patient_id
            return True

    async def delete(self, patient_id: int) -> bool:
        async with self._lock:
            record = self._find(patient_id)
            if record is None:
                return False
            self._records.remove(record)
            return True
