"""
Per-portal storage modules.
Each portal owns its own keys in the shared key-value store.
"""

from portal.stores.collection import JsonCollection, JsonDocument, Record, to_record
from portal.stores.student import StudentStorage, STUDENT_STORAGE_KEYS
from portal.stores.faculty import FacultyStorage, FACULTY_STORAGE_KEYS
from portal.stores.admin import AdminStorage
from portal.stores.session import SessionStorage

__all__ = [
    "JsonCollection",
    "JsonDocument",
    "Record",
    "to_record",
    "StudentStorage",
    "STUDENT_STORAGE_KEYS",
    "FacultyStorage",
    "FACULTY_STORAGE_KEYS",
    "AdminStorage",
    "SessionStorage",
]
