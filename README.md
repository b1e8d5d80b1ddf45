# polyclinic

A small, dependency-free model of a polyclinic's everyday bookkeeping:
who works there, who is being treated, which rooms exist and who is
booked into which office at what time. Every class is a plain
dataclass, so objects compare by value and print readably.

## Installation

```
pip install .
```

## What is in the package

- `polyclinic.clinic`: `Polyclinic`, holding the clinic's
  `phone_number`, `address` and `polyclinic_id`, plus a patient total
  shared by every polyclinic (`Polyclinic.set_total_patients`,
  `Polyclinic.get_total_patients`).
- `polyclinic.people`: `Person` (`name`, `surname`, `last_name`, `age`)
  and `Patient`, which adds `disease`, `card_number`, `state` and a
  `medical_records` list (`medical_records_count`, `has_empty_history`).
  Two patients are equal when their personal details, card number,
  disease and state match; medical records are not compared.
- `polyclinic.rooms`: `Room`, `Office` and `Ward`. A room knows its
  volume (`size`), whether it is big enough (`appropriate_size`: at
  least 12 for rooms and offices, at least 9 for wards) and has a
  `dirty` flag that `clean` resets. An office has an `owner_id`
  (`change_owner`). A ward holds patients (`add_patient`,
  `patient_count`, `is_empty`).
- `polyclinic.staff`: `Worker` (`salary`, `worker_id`), `MedicalStaff`
  (`years_experience`, `examine` returns the patient's state), `Doctor`
  (`qualification`, `change_patient_state`, `assign_from`, which copies
  another doctor's details but keeps this doctor's `worker_id`) and
  `Nurse`, who adds, removes and counts a patient's medical records,
  records a new disease with `change_patient_state`, and looks patients
  up in wards (`is_patient_in_ward`, `find_patient_in_ward`, which
  raises `KeyError` when the card number is not in the ward).
- `polyclinic.cleaning`: `Cleaner`, with `tasks` and `supplies`
  (`can_work`, `complete_task`, `all_tasks_complete`, `clean_room`,
  which cleans a dirty room only when the cleaner has supplies), and
  `WorkerManager`, who hires, finds and fires workers (`add_worker`,
  `find_worker`, `is_worker`, `fire_worker`), works out
  `yearly_salary`, and hands out `add_cleaner_task` and
  `add_cleaner_supply`.
- `polyclinic.appointments`: `AppointmentCard` (`number`, `visit_time`,
  `patient`, `office`) and `Prescription`, created with a first
  medicine, an attending doctor's id and a patient (`add_medicine`,
  `remove_medicine`, which removes every matching entry,
  `medicine_count`).
- `polyclinic.registry`: `Registry`, which keeps appointment cards and
  wards (`add_appointment_card`, `add_ward`, `find_appointment_card`,
  `has_appointment_card`), places patients in wards by number
  (`add_patient`), discharges them from every ward and drops their
  cards (`discharge_patient`), and checks an office's time slot
  (`appointment_time_free`: true when the office has a card booked at a
  different time).

## Example

```python
from polyclinic.people import Patient
from polyclinic.rooms import Office, Ward
from polyclinic.appointments import AppointmentCard
from polyclinic.registry import Registry

patient = Patient("Asriel", "Chara", "Drimuur", 44, "Flu", 126672, "Good")
office = Office(12, 10, 10, 10, 132)
card = AppointmentCard(1243, "16:05", patient, office)

registry = Registry()
registry.add_appointment_card(card)
registry.add_ward(Ward(23, 6, 4, 4))
registry.add_patient(23, patient)

assert registry.has_appointment_card(126672)
registry.discharge_patient(126672)
assert not registry.has_appointment_card(126672)
```

## What it does not do

The package is a library of in-memory objects only. It has no command
to run, no user interface, and no storage: nothing is saved to or
loaded from a file or database, so all records last only as long as
the Python objects that hold them.

## Running the tests

```
pip install .[test]
pytest
```