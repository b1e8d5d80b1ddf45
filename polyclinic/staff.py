"""Workers of the polyclinic and the medical staff among them."""

from __future__ import annotations

from dataclasses import dataclass

from polyclinic.people import Patient, Person
from polyclinic.rooms import Ward


@dataclass
class Worker(Person):
    """A person employed by the polyclinic."""

    salary: int = 0
    worker_id: int = 0


@dataclass
class MedicalStaff(Worker):
    """A worker who examines patients."""

    years_experience: int = 0

    def examine(self, patient: Patient) -> str:
        """Return the patient's current state."""
        return patient.state


@dataclass
class Doctor(MedicalStaff):
    """A qualified medical worker."""

    qualification: str = ""

    def change_patient_state(self, new_state: str, patient: Patient) -> None:
        """Record a new state for the patient."""
        patient.state = new_state

    def assign_from(self, other: Doctor) -> Doctor:
        """Take over another doctor's details, keeping this worker id."""
        self.name = other.name
        self.surname = other.surname
        self.last_name = other.last_name
        self.salary = other.salary
        self.age = other.age
        self.qualification = other.qualification
        self.years_experience = other.years_experience
        return self


@dataclass
class Nurse(MedicalStaff):
    """A medical worker who keeps records and looks after wards."""

    def add_medical_record(self, record: str, patient: Patient) -> None:
        """Append a record to the patient's history."""
        patient.medical_records.append(record)

    def remove_medical_record(self, index: int, patient: Patient) -> None:
        """Remove the record at index; out-of-range indexes are ignored."""
        if 0 <= index < len(patient.medical_records):
            del patient.medical_records[index]

    def medical_records_count(self, patient: Patient) -> int:
        """Return how many records the patient has."""
        return len(patient.medical_records)

    def has_empty_history(self, patient: Patient) -> bool:
        """Return True when the patient has no records."""
        return not patient.medical_records

    def is_patient_in_ward(self, card_number: int, ward: Ward) -> bool:
        """Return True when a patient with this card number is in the ward."""
        return any(p.card_number == card_number for p in ward.patients)

    def find_patient_in_ward(self, card_number: int, ward: Ward) -> Patient:
        """Return the ward's patient with this card number.

        Raises KeyError when no such patient is in the ward.
        """
        for patient in ward.patients:
            if patient.card_number == card_number:
                return patient
        raise KeyError(card_number)

    def change_patient_state(self, new_state: str, patient: Patient) -> None:
        """Record a new condition for the patient."""
        patient.disease = new_state