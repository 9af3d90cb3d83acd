"""
Wiring for one running portal: the storage, the change bus and everything
built on them. Constructed once at startup and handed to the routes.
"""
from dataclasses import dataclass
from typing import Optional

from portal.config import Settings, settings as default_settings
from portal.services.connector import ConnectorService
from portal.services.event_bus import ChangeEventBus
from portal.services.sse_manager import SSEConnectionManager
from portal.services.sync_scheduler import SyncScheduler
from portal.storage import JsonStorage, build_storage
from portal.stores import AdminStorage, FacultyStorage, SessionStorage, StudentStorage


@dataclass
class PortalContext:
    settings: Settings
    storage: JsonStorage
    bus: ChangeEventBus
    connector: ConnectorService
    student: StudentStorage
    faculty: FacultyStorage
    admin: AdminStorage
    session: SessionStorage
    sse: SSEConnectionManager
    scheduler: SyncScheduler


def build_context(settings: Optional[Settings] = None, storage: Optional[JsonStorage] = None) -> PortalContext:
    settings = settings or default_settings
    storage = storage or build_storage(settings)
    bus = ChangeEventBus()
    sse = SSEConnectionManager()
    bus.add_listener(sse.on_data_change)

    student = StudentStorage(storage)
    faculty = FacultyStorage(storage)
    return PortalContext(
        settings=settings,
        storage=storage,
        bus=bus,
        connector=ConnectorService(storage, bus),
        student=student,
        faculty=faculty,
        admin=AdminStorage(storage),
        session=SessionStorage(storage),
        sse=sse,
        scheduler=SyncScheduler(student, faculty, interval_seconds=settings.sync_interval_seconds),
    )
