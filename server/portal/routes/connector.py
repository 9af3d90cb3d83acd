from fastapi import APIRouter, Body, Depends, HTTPException, Request
from fastapi.responses import StreamingResponse
from pydantic import ValidationError
from typing import Any, Dict, List
import asyncio
import json

from portal.context import PortalContext
from portal.deps import get_context
from portal.schemas import CONNECTOR_SCHEMAS, TicketResponse, TicketStatusRequest
from portal.services.connector import EntityCollection
from portal.services.sse_manager import ALL_CHANNEL

router = APIRouter(tags=["Connector"])


def _collection(context: PortalContext, data_type: str) -> EntityCollection:
    try:
        return context.connector.collection(data_type)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Unknown data type: {data_type}")


def _validate(data_type: str, payload: Dict[str, Any]) -> Dict[str, Any]:
    """Validate a record against its schema and return it in stored shape"""
    try:
        return CONNECTOR_SCHEMAS[data_type].model_validate(payload).to_record()
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=json.loads(e.json()))


@router.get("/events")
async def connector_events(request: Request, data_type: str = ALL_CHANNEL,
                           context: PortalContext = Depends(get_context)):
    """
    SSE Endpoint for real-time collection changes.
    Subscribe to one data type, or to every change with the default channel.
    """
    sse = context.sse

    async def event_generator():
        queue = await sse.connect(data_type)
        try:
            while True:
                # Check for client disconnect
                if await request.is_disconnected():
                    break

                # Wait for message with timeout
                try:
                    data = await asyncio.wait_for(queue.get(), timeout=30.0)
                    yield f"data: {json.dumps(data)}\n\n"
                except asyncio.TimeoutError:
                    # Send ping to keep connection alive
                    yield ": ping\n\n"
        except asyncio.CancelledError:
            pass
        finally:
            sse.disconnect(data_type, queue)

    return StreamingResponse(event_generator(), media_type="text/event-stream")


@router.get("/views/courses")
async def courses_with_faculty(context: PortalContext = Depends(get_context)):
    """Courses with faculty names resolved from the faculty collection"""
    return context.connector.courses_with_faculty()


@router.get("/views/schedules")
async def schedules_with_names(context: PortalContext = Depends(get_context)):
    """Schedules with faculty and course names resolved at read time"""
    return context.connector.schedules_with_names()


@router.get("/tickets/by-user/{user_id}")
async def tickets_by_user(user_id: str, user_type: str = "student",
                          context: PortalContext = Depends(get_context)):
    return context.connector.tickets.get_by_user(user_id, user_type)


@router.post("/tickets/{ticket_id}/responses")
async def add_ticket_response(ticket_id: str, response: TicketResponse,
                              context: PortalContext = Depends(get_context)):
    tickets = context.connector.tickets
    if tickets.get_by_id(ticket_id) is None:
        raise HTTPException(status_code=404, detail="Ticket not found")
    tickets.add_response(ticket_id, response)
    return tickets.get_by_id(ticket_id)


@router.put("/tickets/{ticket_id}/status")
async def update_ticket_status(ticket_id: str, request: TicketStatusRequest,
                               context: PortalContext = Depends(get_context)):
    tickets = context.connector.tickets
    if tickets.get_by_id(ticket_id) is None:
        raise HTTPException(status_code=404, detail="Ticket not found")
    tickets.update_status(ticket_id, request.status)
    return tickets.get_by_id(ticket_id)


@router.get("/schedules/by-faculty/{faculty_id}")
async def schedules_by_faculty(faculty_id: str, context: PortalContext = Depends(get_context)):
    return context.connector.schedules.get_by_faculty(faculty_id)


@router.get("/{data_type}")
async def list_records(data_type: str, context: PortalContext = Depends(get_context)) -> List[Dict[str, Any]]:
    return _collection(context, data_type).get_all()


@router.post("/{data_type}", status_code=201)
async def create_record(data_type: str, payload: Dict[str, Any] = Body(...),
                        context: PortalContext = Depends(get_context)):
    collection = _collection(context, data_type)
    record = _validate(data_type, payload)
    collection.create(record)
    return record


@router.get("/{data_type}/{record_id}")
async def get_record(data_type: str, record_id: str, context: PortalContext = Depends(get_context)):
    record = _collection(context, data_type).get_by_id(record_id)
    if record is None:
        raise HTTPException(status_code=404, detail=f"{data_type} record not found")
    return record


@router.put("/{data_type}/{record_id}")
async def update_record(data_type: str, record_id: str, payload: Dict[str, Any] = Body(...),
                        context: PortalContext = Depends(get_context)):
    """
    Replace a record. Updating an id that does not exist is a no-op,
    the response then reports updated=false.
    """
    collection = _collection(context, data_type)
    record = _validate(data_type, {**payload, "id": record_id})
    existed = collection.get_by_id(record_id) is not None
    collection.update(record)
    return {"updated": existed, "record": record}


@router.delete("/{data_type}/{record_id}")
async def delete_record(data_type: str, record_id: str, context: PortalContext = Depends(get_context)):
    collection = _collection(context, data_type)
    collection.delete(record_id)
    return {"success": True}
