"""
Portal test configuration and fixtures.
Every test gets its own in-memory store, so nothing leaks between tests.
"""
import pytest
from fastapi.testclient import TestClient

from portal.config import Settings
from portal.context import build_context
from portal.main import create_app
from portal.services.connector import ConnectorService
from portal.services.event_bus import ChangeEventBus
from portal.storage import JsonStorage, MemoryBackend, NullBackend
from portal.stores import FacultyStorage, StudentStorage


@pytest.fixture
def test_settings() -> Settings:
    return Settings(storage_backend="memory", auto_sync_enabled=False, seed_demo_data=False)


@pytest.fixture
def backend() -> MemoryBackend:
    return MemoryBackend()


@pytest.fixture
def storage(backend: MemoryBackend) -> JsonStorage:
    return JsonStorage(backend)


@pytest.fixture
def null_storage() -> JsonStorage:
    return JsonStorage(NullBackend())


@pytest.fixture
def bus() -> ChangeEventBus:
    return ChangeEventBus()


@pytest.fixture
def connector(storage: JsonStorage, bus: ChangeEventBus) -> ConnectorService:
    return ConnectorService(storage, bus)


@pytest.fixture
def student(storage: JsonStorage) -> StudentStorage:
    return StudentStorage(storage)


@pytest.fixture
def faculty(storage: JsonStorage) -> FacultyStorage:
    return FacultyStorage(storage)


@pytest.fixture
def context(test_settings: Settings, storage: JsonStorage):
    return build_context(test_settings, storage)


@pytest.fixture
def client(context):
    """Test client running startup/shutdown around each test"""
    app = create_app(context)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def sample_ticket() -> dict:
    return {
        "id": "TKT1001",
        "title": "Cannot access LMS",
        "description": "Login page keeps redirecting.",
        "createdBy": "STU1001",
        "createdAt": "2024-01-10T09:00:00.000Z",
        "status": "open",
        "portalType": "student",
        "priority": "high",
        "category": "Technical",
        "responses": [],
    }


@pytest.fixture
def faculty_assignment() -> dict:
    return {
        "id": "1",
        "title": "HW1",
        "courseId": "C1",
        "courseName": "CS101",
        "description": "Do ch.1",
        "dueDate": "2024-01-01",
        "maxScore": 100,
        "isGroupAssignment": False,
    }
