"""
Periodic cross-portal sync.

Students need new faculty assignments, faculty need new student
submissions. The scheduler runs both directions once on start and then
every `interval_seconds` on the running event loop.
"""
import asyncio
from typing import Dict, Literal, Optional

from portal.services.assignment_sync import auto_sync_assignments
from portal.services.submission_sync import auto_sync_submissions
from portal.stores.faculty import FacultyStorage
from portal.stores.student import StudentStorage


SyncRole = Literal["student", "faculty"]


class SyncScheduler:
    def __init__(self, student: StudentStorage, faculty: FacultyStorage, interval_seconds: float = 60.0):
        self.student = student
        self.faculty = faculty
        self.interval_seconds = interval_seconds
        self._task: Optional[asyncio.Task] = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def run_once(self, role: Optional[SyncRole] = None) -> Dict[str, int]:
        """Sync the direction a role needs (both when role is None); returns counts copied."""
        results: Dict[str, int] = {}
        if role in (None, "student"):
            results["assignments"] = len(auto_sync_assignments(self.faculty, self.student))
        if role in (None, "faculty"):
            results["submissions"] = len(auto_sync_submissions(self.student, self.faculty))
        return results

    async def _run(self) -> None:
        while True:
            try:
                self.run_once()
            except Exception as e:
                print(f"❌ Sync run failed: {e}")
            await asyncio.sleep(self.interval_seconds)

    def start(self) -> None:
        """Start the background loop; must be called from a running event loop."""
        if self.running:
            return
        print(f"🔄 Starting portal sync every {self.interval_seconds:g}s")
        self._task = asyncio.create_task(self._run())

    async def stop(self) -> None:
        if self._task is None:
            return
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        self._task = None
