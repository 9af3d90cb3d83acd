"""
Admin portal storage: the admin's own profile and dashboard settings.
"""
from typing import Optional, Union

from pydantic import BaseModel

from portal.storage import JsonStorage
from portal.stores.collection import JsonDocument, Record


ADMIN_STORAGE_PREFIX = "shastri_admin"
ADMIN_DATA_KEY = f"{ADMIN_STORAGE_PREFIX}_data"
ADMIN_SETTINGS_KEY = f"{ADMIN_STORAGE_PREFIX}_settings"

DEFAULT_ADMIN_SETTINGS = {
    "dashboardLayout": "default",
    "theme": "light",
    "notificationsEnabled": True,
}


class AdminStorage:
    def __init__(self, storage: JsonStorage):
        self.storage = storage
        self.data = JsonDocument(storage, ADMIN_DATA_KEY)
        self.settings = JsonDocument(storage, ADMIN_SETTINGS_KEY)

    def initialize_admin_data(self, admin_id: str, name: str, email: str) -> None:
        """Store the admin profile and reset settings to their defaults."""
        self.data.save({"id": admin_id, "name": name, "email": email})
        self.settings.save(dict(DEFAULT_ADMIN_SETTINGS))

    def get_admin_data(self) -> Optional[Record]:
        return self.data.get()

    def get_admin_settings(self) -> Optional[Record]:
        return self.settings.get()

    def update_admin_settings(self, changes: Union[Record, BaseModel]) -> Record:
        return self.settings.merge(changes)

    def clear_admin_data(self) -> None:
        self.data.clear()
        self.settings.clear()
