"""Cleaning staff and the manager who hands out their work."""

from __future__ import annotations

from dataclasses import dataclass, field

from polyclinic.rooms import Room
from polyclinic.staff import Worker


@dataclass
class Cleaner(Worker):
    """A worker with a task list and cleaning supplies."""

    tasks: list[str] = field(default_factory=list, kw_only=True)
    supplies: list[str] = field(default_factory=list, kw_only=True)

    def can_work(self) -> bool:
        """Return True when the cleaner has any supplies."""
        return bool(self.supplies)

    def complete_task(self, task: str) -> None:
        """Remove the first task equal to task; unknown tasks are ignored."""
        try:
            self.tasks.remove(task)
        except ValueError:
            pass

    def all_tasks_complete(self) -> bool:
        """Return True when no task is left."""
        return not self.tasks

    def clean_room(self, room: Room) -> None:
        """Clean the room when it is dirty and the cleaner has supplies."""
        if room.dirty and self.can_work():
            room.clean()


@dataclass
class WorkerManager(Worker):
    """A worker who manages subordinates and gives cleaners their work."""

    subordinates: list[Worker] = field(default_factory=list, kw_only=True)

    def add_worker(self, worker: Worker) -> None:
        """Take a worker on as a subordinate."""
        self.subordinates.append(worker)

    def find_worker(self, worker_id: int) -> Worker:
        """Return the subordinate with this worker id.

        Raises KeyError when there is none.
        """
        for worker in self.subordinates:
            if worker.worker_id == worker_id:
                return worker
        raise KeyError(worker_id)

    def is_worker(self, worker: Worker) -> bool:
        """Return True when a subordinate has the worker's id."""
        return any(w.worker_id == worker.worker_id for w in self.subordinates)

    def fire_worker(self, worker: Worker) -> None:
        """Remove every subordinate with the worker's id."""
        self.subordinates[:] = [
            w for w in self.subordinates if w.worker_id != worker.worker_id
        ]

    def yearly_salary(self, worker: Worker) -> int:
        """Return twelve months of the worker's salary."""
        return worker.salary * 12

    def add_cleaner_task(self, task: str, cleaner: Cleaner) -> None:
        """Give the cleaner another task."""
        cleaner.tasks.append(task)

    def add_cleaner_supply(self, supply: str, cleaner: Cleaner) -> None:
        """Give the cleaner another supply."""
        cleaner.supplies.append(supply)