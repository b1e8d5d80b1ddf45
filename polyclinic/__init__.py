"""Domain model of a polyclinic: people, staff, rooms, cleaning, appointments and a registry."""

__version__ = "0.1.0"

__all__ = [
    "appointments",
    "cleaning",
    "clinic",
    "people",
    "registry",
    "rooms",
    "staff",
]