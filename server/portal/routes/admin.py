from fastapi import APIRouter, Depends, HTTPException

from portal.context import PortalContext
from portal.deps import get_context
from portal.schemas import AdminSettingsUpdate

router = APIRouter(tags=["Admin"])


@router.get("/profile")
async def get_admin_profile(context: PortalContext = Depends(get_context)):
    data = context.admin.get_admin_data()
    if data is None:
        raise HTTPException(status_code=404, detail="Admin profile not initialized")
    return data


@router.get("/settings")
async def get_admin_settings(context: PortalContext = Depends(get_context)):
    return context.admin.get_admin_settings() or {}


@router.patch("/settings")
async def update_admin_settings(changes: AdminSettingsUpdate, context: PortalContext = Depends(get_context)):
    return context.admin.update_admin_settings(changes)
