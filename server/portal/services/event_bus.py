"""
Change notification for the connector collections.

Listeners are plain callables `(data_type, data)` called synchronously, in
registration order, after every successful write. Each call runs in its own
error boundary so one failing listener never starves the others.
"""
from typing import Any, Callable, Dict, List


DataChangeListener = Callable[[str, List[Dict[str, Any]]], None]


class _Registration:
    __slots__ = ("listener",)

    def __init__(self, listener: DataChangeListener):
        self.listener = listener


class ChangeEventBus:
    """Registry of data-change listeners."""

    def __init__(self):
        self._registrations: List[_Registration] = []

    @property
    def listener_count(self) -> int:
        return len(self._registrations)

    def add_listener(self, listener: DataChangeListener) -> Callable[[], None]:
        """Register a listener; the returned function removes this registration."""
        registration = _Registration(listener)
        self._registrations.append(registration)

        def unsubscribe() -> None:
            if registration in self._registrations:
                self._registrations.remove(registration)

        return unsubscribe

    def notify(self, data_type: str, data: List[Dict[str, Any]]) -> None:
        for registration in list(self._registrations):
            try:
                registration.listener(data_type, data)
            except Exception as e:
                print(f"⚠️ Change listener failed for {data_type}: {e}")
