"""The registry: appointment cards and the wards patients are placed in."""

from __future__ import annotations

from dataclasses import dataclass, field

from polyclinic.appointments import AppointmentCard
from polyclinic.people import Patient
from polyclinic.rooms import Ward


@dataclass
class Registry:
    """Keeps appointment cards and the wards of the polyclinic."""

    appointment_cards: list[AppointmentCard] = field(default_factory=list)
    wards: list[Ward] = field(default_factory=list)

    def find_appointment_card(self, number: int) -> AppointmentCard:
        """Return the card with this number.

        Raises KeyError when there is none.
        """
        for card in self.appointment_cards:
            if card.number == number:
                return card
        raise KeyError(number)

    def appointment_time_free(self, office_number: int, visit_time: str) -> bool:
        """Return True when the office has a card booked at another time."""
        return any(
            card.office.room_number == office_number
            and card.visit_time != visit_time
            for card in self.appointment_cards
        )

    def add_patient(self, ward_number: int, patient: Patient) -> None:
        """Place the patient in every ward with this number."""
        for ward in self.wards:
            if ward.room_number == ward_number:
                ward.add_patient(patient)

    def add_appointment_card(self, card: AppointmentCard) -> None:
        """Register an appointment card."""
        self.appointment_cards.append(card)

    def add_ward(self, ward: Ward) -> None:
        """Register a ward."""
        self.wards.append(ward)

    def discharge_patient(self, card_number: int) -> None:
        """Remove the patient from every ward and drop their cards."""
        for ward in self.wards:
            ward.patients[:] = [
                p for p in ward.patients if p.card_number != card_number
            ]
        self.appointment_cards[:] = [
            card
            for card in self.appointment_cards
            if card.patient.card_number != card_number
        ]

    def has_appointment_card(self, card_number: int) -> bool:
        """Return True when a card is registered for this patient card."""
        return any(
            card.patient.card_number == card_number
            for card in self.appointment_cards
        )