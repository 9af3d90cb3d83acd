"""
Connector Service.

Shared collections that every portal reads and writes (tickets, departments,
faculty, students, courses, batches, schedules), plus change notification so
one consumer can react to another's writes. Storage failures are logged by
the storage layer and never reach the caller.
"""
from typing import Any, Callable, Dict, List, Optional, Union

from pydantic import BaseModel

from portal.services.event_bus import ChangeEventBus, DataChangeListener
from portal.storage import JsonStorage
from portal.stores.collection import JsonCollection, Record, to_record


STORAGE_KEYS = {
    "tickets": "shastri_tickets",
    "students": "shastri_students",
    "faculty": "shastri_faculty",
    "courses": "shastri_courses",
    "batches": "shastri_batches",
    "departments": "shastri_departments",
    "schedules": "shastri_schedules",
}


class EntityCollection:
    """CRUD over one shared collection; every write notifies the bus."""

    def __init__(self, data_type: str, storage: JsonStorage, bus: ChangeEventBus):
        self.data_type = data_type
        self.key = STORAGE_KEYS[data_type]
        self.bus = bus
        self._collection = JsonCollection(storage, self.key)

    def get_all(self) -> List[Record]:
        return self._collection.get_all()

    def get_by_id(self, record_id: str) -> Optional[Record]:
        return self._collection.find(record_id)

    def _commit(self, records: List[Record]) -> None:
        if self._collection.save_all(records):
            self.bus.notify(self.data_type, records)

    def _modify(self, record_id: str, change: Callable[[Record], Record]) -> None:
        records = self.get_all()
        for index, record in enumerate(records):
            if record.get("id") == record_id:
                records[index] = change(record)
                self._commit(records)
                return

    def create(self, record: Union[Record, BaseModel]) -> None:
        """Append a record. Duplicate ids are not rejected."""
        records = self.get_all()
        records.append(to_record(record))
        self._commit(records)

    def update(self, record: Union[Record, BaseModel]) -> None:
        """Replace the record with the same id; nothing happens when none matches."""
        replacement = to_record(record)
        self._modify(replacement.get("id"), lambda _: replacement)

    def delete(self, record_id: str) -> None:
        records = [r for r in self.get_all() if r.get("id") != record_id]
        self._commit(records)


class TicketCollection(EntityCollection):

    def get_by_user(self, user_id: str, user_type: str) -> List[Record]:
        """Tickets a user raised or was assigned; admins see every ticket."""
        return [
            t for t in self.get_all()
            if t.get("createdBy") == user_id or t.get("assignedTo") == user_id or user_type == "admin"
        ]

    def add_response(self, ticket_id: str, response: Union[Record, BaseModel]) -> None:
        response = to_record(response)
        self._modify(
            ticket_id,
            lambda ticket: {**ticket, "responses": [*ticket.get("responses", []), response]},
        )

    def update_status(self, ticket_id: str, status: str) -> None:
        # Any status may follow any other
        self._modify(ticket_id, lambda ticket: {**ticket, "status": status})


class ScheduleCollection(EntityCollection):

    def get_by_faculty(self, faculty_id: str) -> List[Record]:
        return [s for s in self.get_all() if s.get("facultyId") == faculty_id]


class ConnectorService:
    def __init__(self, storage: JsonStorage, bus: Optional[ChangeEventBus] = None):
        self.storage = storage
        self.bus = bus or ChangeEventBus()

        self.tickets = TicketCollection("tickets", storage, self.bus)
        self.departments = EntityCollection("departments", storage, self.bus)
        self.faculty = EntityCollection("faculty", storage, self.bus)
        self.students = EntityCollection("students", storage, self.bus)
        self.courses = EntityCollection("courses", storage, self.bus)
        self.batches = EntityCollection("batches", storage, self.bus)
        self.schedules = ScheduleCollection("schedules", storage, self.bus)

        self.collections: Dict[str, EntityCollection] = {
            "tickets": self.tickets,
            "departments": self.departments,
            "faculty": self.faculty,
            "students": self.students,
            "courses": self.courses,
            "batches": self.batches,
            "schedules": self.schedules,
        }

    def add_change_listener(self, listener: DataChangeListener) -> Callable[[], None]:
        return self.bus.add_listener(listener)

    def collection(self, data_type: str) -> EntityCollection:
        """Look up a collection by data type; raises KeyError for unknown types."""
        return self.collections[data_type]

    def initialize_if_empty(self) -> None:
        """Write an empty list under every key that has no value yet."""
        for key in STORAGE_KEYS.values():
            if self.storage.get(key) is None:
                self.storage.set(key, [])

    # Read-time joins: stored records keep their denormalized names, these
    # views resolve them from the referenced collections when possible.

    def courses_with_faculty(self) -> List[Record]:
        faculty_names = {f.get("id"): f.get("name") for f in self.faculty.get_all()}
        return [_resolve(c, {"facultyName": faculty_names.get(c.get("facultyId"))}) for c in self.courses.get_all()]

    def schedules_with_names(self) -> List[Record]:
        faculty_names = {f.get("id"): f.get("name") for f in self.faculty.get_all()}
        course_names = {c.get("id"): c.get("name") for c in self.courses.get_all()}
        return [
            _resolve(s, {
                "facultyName": faculty_names.get(s.get("facultyId")),
                "courseName": course_names.get(s.get("courseId")),
            })
            for s in self.schedules.get_all()
        ]


def _resolve(record: Record, names: Dict[str, Any]) -> Record:
    return {**record, **{field: value for field, value in names.items() if value is not None}}
