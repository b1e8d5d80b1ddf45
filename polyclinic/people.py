"""People known to the polyclinic and the patients among them."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Person:
    """A person with a full name and an age."""

    name: str = ""
    surname: str = ""
    last_name: str = ""
    age: int = 0


@dataclass
class Patient(Person):
    """A patient with a disease, a card number, a state and medical records.

    Two patients are equal when their personal details, card number,
    disease and state match; medical records are not compared.
    """

    disease: str = ""
    card_number: int = 0
    state: str = ""
    medical_records: list[str] = field(
        default_factory=list, compare=False, kw_only=True
    )

    def medical_records_count(self) -> int:
        """Return how many medical records the patient has."""
        return len(self.medical_records)

    def has_empty_history(self) -> bool:
        """Return True when the patient has no medical records."""
        return not self.medical_records