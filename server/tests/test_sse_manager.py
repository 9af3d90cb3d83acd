"""
Tests for the SSE connection manager.
"""
import pytest

from portal.services.connector import ConnectorService
from portal.services.sse_manager import ALL_CHANNEL, SSEConnectionManager


class TestSSEConnectionManager:

    @pytest.mark.asyncio
    async def test_data_change_reaches_type_and_all_channels(self):
        sse = SSEConnectionManager()
        tickets_queue = await sse.connect("tickets")
        all_queue = await sse.connect(ALL_CHANNEL)
        courses_queue = await sse.connect("courses")

        sse.on_data_change("tickets", [{"id": "T1"}])

        expected = {"type": "data_change", "dataType": "tickets", "data": [{"id": "T1"}]}
        assert tickets_queue.get_nowait() == expected
        assert all_queue.get_nowait() == expected
        assert courses_queue.empty()

    @pytest.mark.asyncio
    async def test_disconnect_removes_empty_channel(self):
        sse = SSEConnectionManager()
        queue = await sse.connect("tickets")

        sse.disconnect("tickets", queue)
        sse.disconnect("tickets", queue)

        assert "tickets" not in sse.active_connections

    @pytest.mark.asyncio
    async def test_connector_writes_are_streamed(self, storage):
        sse = SSEConnectionManager()
        connector = ConnectorService(storage)
        connector.add_change_listener(sse.on_data_change)
        queue = await sse.connect("courses")

        connector.courses.create({"id": "CRS1001"})

        message = queue.get_nowait()
        assert message["dataType"] == "courses"
        assert message["data"] == [{"id": "CRS1001"}]
