"""
Whole-collection accessors over JsonStorage.

Every mutation reads the full collection, rewrites it and returns the new
list. Ids are never checked for uniqueness unless an operation asks for it.
"""
from typing import Any, Callable, Dict, List, Optional, Union

from pydantic import BaseModel

from portal.storage import JsonStorage


Record = Dict[str, Any]


def to_record(record: Union[Record, BaseModel]) -> Record:
    """Plain dict copy of a record, in its stored shape."""
    if isinstance(record, BaseModel):
        return record.model_dump(by_alias=True, exclude_none=True)
    return dict(record)


class JsonCollection:
    """A JSON array of same-typed records under one key."""

    def __init__(self, storage: JsonStorage, key: str, id_field: str = "id"):
        self.storage = storage
        self.key = key
        self.id_field = id_field

    def get_all(self) -> List[Record]:
        data = self.storage.get(self.key)
        if data is None:
            return []
        if not isinstance(data, list):
            print(f"⚠️ Expected a list under {self.key}, found {type(data).__name__}")
            return []
        records = [r for r in data if isinstance(r, dict)]
        if len(records) != len(data):
            print(f"⚠️ Dropped {len(data) - len(records)} non-object entries under {self.key}")
        return records

    def save_all(self, records: List[Union[Record, BaseModel]]) -> bool:
        return self.storage.set(self.key, [to_record(r) for r in records])

    def find(self, record_id: str) -> Optional[Record]:
        return next((r for r in self.get_all() if r.get(self.id_field) == record_id), None)

    def filter(self, predicate: Callable[[Record], bool]) -> List[Record]:
        return [r for r in self.get_all() if predicate(r)]

    def add(self, record: Union[Record, BaseModel], unique: bool = False) -> List[Record]:
        """Append a record. With unique=True a record whose id is already stored is refused."""
        records = self.get_all()
        new_record = to_record(record)
        if unique and any(r.get(self.id_field) == new_record.get(self.id_field) for r in records):
            return records
        updated = [*records, new_record]
        self.save_all(updated)
        return updated

    def prepend(self, record: Union[Record, BaseModel]) -> List[Record]:
        """Insert a record at the front (newest first)."""
        updated = [to_record(record), *self.get_all()]
        self.save_all(updated)
        return updated

    def update(self, record: Union[Record, BaseModel]) -> List[Record]:
        """Replace the record with the same id; unchanged when nothing matches."""
        replacement = to_record(record)
        records = self.get_all()
        record_id = replacement.get(self.id_field)
        if not any(r.get(self.id_field) == record_id for r in records):
            return records
        updated = [replacement if r.get(self.id_field) == record_id else r for r in records]
        self.save_all(updated)
        return updated

    def patch(self, record_id: str, changes: Record) -> List[Record]:
        """Merge changes into the record with the given id."""
        records = self.get_all()
        if not any(r.get(self.id_field) == record_id for r in records):
            return records
        updated = [{**r, **changes} if r.get(self.id_field) == record_id else r for r in records]
        self.save_all(updated)
        return updated

    def patch_all(self, changes: Record) -> List[Record]:
        updated = [{**r, **changes} for r in self.get_all()]
        self.save_all(updated)
        return updated

    def delete(self, record_id: str) -> List[Record]:
        updated = [r for r in self.get_all() if r.get(self.id_field) != record_id]
        self.save_all(updated)
        return updated


class JsonDocument:
    """A single JSON object under one key (profiles, settings)."""

    def __init__(self, storage: JsonStorage, key: str):
        self.storage = storage
        self.key = key

    def get(self) -> Optional[Record]:
        data = self.storage.get(self.key)
        return data if isinstance(data, dict) else None

    def save(self, document: Union[Record, BaseModel]) -> None:
        self.storage.set(self.key, to_record(document))

    def update(self, changes: Union[Record, BaseModel]) -> Optional[Record]:
        """Merge changes into the stored document; None when nothing is stored."""
        current = self.get()
        if current is None:
            return None
        merged = {**current, **to_record(changes)}
        self.save(merged)
        return merged

    def merge(self, changes: Union[Record, BaseModel]) -> Record:
        """Merge changes into the stored document, starting from {} when absent."""
        merged = {**(self.get() or {}), **to_record(changes)}
        self.save(merged)
        return merged

    def clear(self) -> None:
        self.storage.remove(self.key)
