from fastapi import APIRouter, Depends
from typing import Optional

from portal.context import PortalContext
from portal.deps import get_context
from portal.services.assignment_sync import sync_assignments
from portal.services.submission_sync import sync_submissions
from portal.services.sync_scheduler import SyncRole

router = APIRouter(tags=["Sync"])


@router.post("/assignments")
async def run_assignment_sync(context: PortalContext = Depends(get_context)):
    """Copy new faculty assignments to the student portal"""
    synced = sync_assignments(context.faculty, context.student)
    return {"synced": len(synced), "assignments": synced}


@router.post("/submissions")
async def run_submission_sync(context: PortalContext = Depends(get_context)):
    """Copy new student submissions to the faculty portal"""
    synced = sync_submissions(context.student, context.faculty)
    return {"synced": len(synced), "submissions": synced}


@router.post("/run")
async def run_sync(role: Optional[SyncRole] = None, context: PortalContext = Depends(get_context)):
    """Run the sync a portal role needs, or both directions"""
    return context.scheduler.run_once(role)
