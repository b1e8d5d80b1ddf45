"""Appointment cards and prescriptions."""

from __future__ import annotations

from dataclasses import InitVar, dataclass, field

from polyclinic.people import Patient
from polyclinic.rooms import Office


@dataclass
class AppointmentCard:
    """A numbered visit of a patient to an office at a given time."""

    number: int
    visit_time: str
    patient: Patient
    office: Office


@dataclass
class Prescription:
    """A list of medicines prescribed to a patient by a doctor."""

    medicine: InitVar[str]
    attending_doctor_id: int
    patient: Patient
    medicines: list[str] = field(init=False, default_factory=list)

    def __post_init__(self, medicine: str) -> None:
        self.medicines.append(medicine)

    def add_medicine(self, medicine: str) -> None:
        """Add a medicine to the prescription."""
        self.medicines.append(medicine)

    def remove_medicine(self, medicine: str) -> None:
        """Remove every entry of the medicine from the prescription."""
        self.medicines[:] = [m for m in self.medicines if m != medicine]

    def medicine_count(self) -> int:
        """Return how many medicines are prescribed."""
        return len(self.medicines)