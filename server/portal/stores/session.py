"""
Logged-in user data and UI preferences.
"""
from typing import Optional, Union

from pydantic import BaseModel

from portal.storage import JsonStorage
from portal.stores.collection import JsonDocument, Record


STORAGE_KEYS = {
    "USER_DATA": "shastri_user_data",
    "USER_PREFERENCES": "shastri_user_preferences",
}


class SessionStorage:
    def __init__(self, storage: JsonStorage):
        self.storage = storage
        self.user_data = JsonDocument(storage, STORAGE_KEYS["USER_DATA"])
        self.preferences = JsonDocument(storage, STORAGE_KEYS["USER_PREFERENCES"])

    def save_user_data(self, user_data: Union[Record, BaseModel]) -> None:
        self.user_data.save(user_data)

    def get_user_data(self) -> Optional[Record]:
        return self.user_data.get()

    def clear_user_data(self) -> None:
        self.user_data.clear()

    def save_user_preferences(self, preferences: Union[Record, BaseModel]) -> Record:
        """Merge new preferences over the stored ones."""
        return self.preferences.merge(preferences)

    def get_user_preferences(self) -> Record:
        return self.preferences.get() or {}

    def clear_all(self) -> None:
        self.user_data.clear()
        self.preferences.clear()
