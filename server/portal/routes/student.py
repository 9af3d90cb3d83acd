from fastapi import APIRouter, Depends, HTTPException

from portal.context import PortalContext
from portal.deps import get_context
from portal.schemas import EnrolledCourse, Submission
from portal.services.submission_sync import sync_submissions

router = APIRouter(tags=["Student"])


@router.get("/assignments")
async def get_assignments(context: PortalContext = Depends(get_context)):
    return context.student.get_assignments()


@router.get("/courses")
async def get_enrolled_courses(context: PortalContext = Depends(get_context)):
    return context.student.get_enrolled_courses()


@router.post("/courses")
async def enroll_course(course: EnrolledCourse, context: PortalContext = Depends(get_context)):
    return context.student.enroll_course(course)


@router.delete("/courses/{course_id}")
async def unenroll_course(course_id: str, context: PortalContext = Depends(get_context)):
    return context.student.unenroll_course(course_id)


@router.get("/submissions")
async def get_submissions(context: PortalContext = Depends(get_context)):
    return context.student.get_submissions()


@router.post("/submissions", status_code=201)
async def submit_assignment(submission: Submission, context: PortalContext = Depends(get_context)):
    """
    Student submits work for an assignment.
    The submission is pushed to the faculty portal straight away.
    """
    if context.student.get_submission_by_assignment(submission.assignment_id):
        raise HTTPException(status_code=409, detail="Assignment already submitted")

    context.student.add_submission(submission)
    synced = sync_submissions(context.student, context.faculty)
    return {"submission": submission.to_record(), "synced": len(synced)}


@router.get("/grades")
async def get_grades(context: PortalContext = Depends(get_context)):
    return context.student.get_grades()


@router.get("/notifications")
async def get_notifications(context: PortalContext = Depends(get_context)):
    return context.student.get_notifications()


@router.post("/notifications/read-all")
async def mark_all_notifications_as_read(context: PortalContext = Depends(get_context)):
    return context.student.mark_all_notifications_as_read()


@router.post("/notifications/{notification_id}/read")
async def mark_notification_as_read(notification_id: str, context: PortalContext = Depends(get_context)):
    return context.student.mark_notification_as_read(notification_id)


@router.delete("/notifications/{notification_id}")
async def delete_notification(notification_id: str, context: PortalContext = Depends(get_context)):
    return context.student.delete_notification(notification_id)
