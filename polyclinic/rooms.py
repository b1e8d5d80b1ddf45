"""Rooms of the polyclinic: plain rooms, offices and wards."""

from __future__ import annotations

from dataclasses import dataclass, field

from polyclinic.people import Patient


@dataclass
class Room:
    """A numbered room with its dimensions and a dirty flag."""

    room_number: int = 0
    length: float = 0.0
    width: float = 0.0
    height: float = 0.0
    dirty: bool = field(default=False, kw_only=True)

    def size(self) -> float:
        """Return the volume of the room."""
        return self.length * self.width * self.height

    def appropriate_size(self) -> bool:
        """Return True when the room is at least 12 cubic units."""
        return self.size() >= 12

    def clean(self) -> None:
        """Mark the room as clean."""
        self.dirty = False


@dataclass
class Office(Room):
    """A room owned by a worker."""

    owner_id: int = 0

    def change_owner(self, new_owner_id: int) -> None:
        """Give the office to another worker."""
        self.owner_id = new_owner_id

    def appropriate_size(self) -> bool:
        """Return True when the office is at least 12 cubic units."""
        return self.size() >= 12


@dataclass
class Ward(Room):
    """A room holding patients."""

    patients: list[Patient] = field(default_factory=list, kw_only=True)

    def add_patient(self, patient: Patient) -> None:
        """Place a patient in the ward."""
        self.patients.append(patient)

    def patient_count(self) -> int:
        """Return how many patients have been placed in the ward."""
        return len(self.patients)

    def is_empty(self) -> bool:
        """Return True when no patient is in the ward."""
        return not self.patients

    def appropriate_size(self) -> bool:
        """Return True when the ward is at least 9 cubic units."""
        return self.size() >= 9