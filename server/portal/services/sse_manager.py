"""
SSE (Server-Sent Events) Connection Manager for real-time data changes.
"""
import asyncio
from typing import Any, Dict, List


# Channel that receives every change regardless of data type
ALL_CHANNEL = "*"


class SSEConnectionManager:
    """Manages SSE connections for real-time collection updates."""
    
    def __init__(self):
        # Map channel -> list of queues
        self.active_connections: Dict[str, List[asyncio.Queue]] = {}

    async def connect(self, channel: str) -> asyncio.Queue:
        """Create a new connection for a channel."""
        if channel not in self.active_connections:
            self.active_connections[channel] = []
        queue: asyncio.Queue = asyncio.Queue()
        self.active_connections[channel].append(queue)
        return queue

    def disconnect(self, channel: str, queue: asyncio.Queue) -> None:
        """Remove a connection from a channel."""
        if channel in self.active_connections:
            if queue in self.active_connections[channel]:
                self.active_connections[channel].remove(queue)
            if not self.active_connections[channel]:
                del self.active_connections[channel]

    def publish(self, channel: str, message: dict) -> None:
        """Queue a message for every connection on a channel without waiting."""
        for queue in self.active_connections.get(channel, []):
            queue.put_nowait(message)

    def on_data_change(self, data_type: str, data: List[Dict[str, Any]]) -> None:
        """Change listener that forwards connector writes to SSE subscribers."""
        message = {"type": "data_change", "dataType": data_type, "data": data}
        self.publish(data_type, message)
        self.publish(ALL_CHANNEL, message)
