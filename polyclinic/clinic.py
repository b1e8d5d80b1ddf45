"""The polyclinic itself: contact details and the shared patient total."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


@dataclass
class Polyclinic:
    """A polyclinic with a phone number, an address and an identifier."""

    phone_number: str = ""
    address: str = ""
    polyclinic_id: int = 0

    total_patients: ClassVar[int] = 0

    @classmethod
    def set_total_patients(cls, total: int) -> None:
        """Set the patient total shared by every polyclinic."""
        Polyclinic.total_patients = total

    @classmethod
    def get_total_patients(cls) -> int:
        """Return the patient total shared by every polyclinic."""
        return Polyclinic.total_patients