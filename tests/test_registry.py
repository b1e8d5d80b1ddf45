import pytest

from polyclinic.appointments import AppointmentCard
from polyclinic.people import Patient
from polyclinic.registry import Registry
from polyclinic.rooms import Office, Ward


@pytest.fixture
def patient():
    return Patient("Asriel", "Chara", "Drimuur", 44, "Flu", 126672, "Good")


@pytest.fixture
def ward():
    return Ward(23, 6, 4, 4)


@pytest.fixture
def registry(patient, ward):
    reg = Registry()
    card = AppointmentCard(1234, "10:00", patient, Office(12, 10, 10, 10, 132))
    reg.add_appointment_card(card)
    reg.add_ward(ward)
    reg.add_patient(23, patient)
    return reg


def test_patient_has_card(registry):
    assert registry.has_appointment_card(126672) is True


def test_unknown_patient_has_no_card(registry):
    assert registry.has_appointment_card(122) is False


def test_appointment_time_other_office(registry):
    assert registry.find_appointment_card(1234).visit_time == "10:00"
    assert registry.appointment_time_free(14, "11:00") is False


def test_appointment_time_same_office_other_time(registry):
    assert registry.appointment_time_free(12, "11:00") is True


def test_appointment_time_same_office_same_time(registry):
    assert registry.appointment_time_free(12, "10:00") is False


def test_find_missing_card_raises(registry):
    with pytest.raises(KeyError):
        registry.find_appointment_card(1243)


def test_add_patient_places_in_ward(registry, ward, patient):
    assert ward.patients == [patient]


def test_add_patient_to_unknown_ward_is_ignored(registry, ward):
    other = Patient("Sans", "Good", "Skeleton", 20, "Cold", 657345, "Good")
    registry.add_patient(99, other)
    assert other not in ward.patients
    assert ward.patient_count() == 1


def test_discharge_patient(registry, ward):
    registry.discharge_patient(126672)
    assert registry.has_appointment_card(126672) is False
    assert ward.is_empty()


def test_discharge_keeps_other_patients(registry, ward):
    other = Patient("Sans", "Good", "Skeleton", 20, "Cold", 657345, "Good")
    registry.add_patient(23, other)
    registry.discharge_patient(126672)
    assert ward.patients == [other]
    assert registry.appointment_cards == []