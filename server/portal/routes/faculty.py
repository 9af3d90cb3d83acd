from fastapi import APIRouter, Depends, HTTPException
from typing import Optional

from portal.context import PortalContext
from portal.deps import get_context
from portal.schemas import FacultyAssignment, FacultyTicketStatusRequest, GradeRequest

router = APIRouter(tags=["Faculty"])


@router.get("/assignments")
async def get_assignments(context: PortalContext = Depends(get_context)):
    return context.faculty.get_assignments()


@router.post("/assignments", status_code=201)
async def create_assignment(assignment: FacultyAssignment, context: PortalContext = Depends(get_context)):
    """
    Faculty publishes an assignment.
    Students pick it up on their next sync.
    """
    context.faculty.create_assignment(assignment)
    return assignment.to_record()


@router.delete("/assignments/{assignment_id}")
async def delete_assignment(assignment_id: str, context: PortalContext = Depends(get_context)):
    return context.faculty.delete_assignment(assignment_id)


@router.get("/submissions")
async def get_submissions(assignment_id: Optional[str] = None, context: PortalContext = Depends(get_context)):
    if assignment_id:
        return context.faculty.get_submissions_by_assignment(assignment_id)
    return context.faculty.get_submissions()


@router.post("/submissions/{submission_id}/grade")
async def grade_submission(submission_id: str, request: GradeRequest,
                           context: PortalContext = Depends(get_context)):
    submission = context.faculty.submissions.find(submission_id)
    if submission is None:
        raise HTTPException(status_code=404, detail="Submission not found")

    assignment = context.faculty.assignments.find(submission.get("assignmentId"))
    max_score = assignment.get("maxScore", 100) if assignment else 100
    if request.score > max_score:
        raise HTTPException(status_code=422, detail=f"Score must be between 0 and {max_score}")

    context.faculty.grade_submission(submission_id, request.score, request.feedback)
    return context.faculty.submissions.find(submission_id)


@router.get("/tickets")
async def get_tickets(context: PortalContext = Depends(get_context)):
    return context.faculty.get_tickets()


@router.put("/tickets/{ticket_id}/status")
async def update_ticket_status(ticket_id: str, request: FacultyTicketStatusRequest,
                               context: PortalContext = Depends(get_context)):
    return context.faculty.update_ticket_status(ticket_id, request.status, request.response)


@router.get("/notifications")
async def get_notifications(context: PortalContext = Depends(get_context)):
    return context.faculty.get_notifications()


@router.post("/notifications/read-all")
async def mark_all_notifications_as_read(context: PortalContext = Depends(get_context)):
    return context.faculty.mark_all_notifications_as_read()


@router.post("/notifications/{notification_id}/read")
async def mark_notification_as_read(notification_id: str, context: PortalContext = Depends(get_context)):
    return context.faculty.mark_notification_as_read(notification_id)
