"""
Submission connector: copies student submissions into the faculty portal
for grading. The mirror image of the assignment connector.
"""
from typing import List

from portal.clock import now_iso
from portal.stores.collection import Record
from portal.stores.faculty import FacultyStorage
from portal.stores.student import StudentStorage


def convert_to_faculty_submission(submission: Record) -> Record:
    """Faculty-side shape of a student submission, waiting to be graded."""
    converted = {
        "id": submission.get("id"),
        "assignmentId": submission.get("assignmentId"),
        "studentId": submission.get("studentId"),
        "studentName": submission.get("studentName"),
        "submissionDate": submission.get("submissionDate"),
        "status": "submitted",
        "attachments": submission.get("attachments"),
        "isGroupSubmission": submission.get("isGroupSubmission"),
        "groupMembers": submission.get("groupMembers"),
    }
    return {field: value for field, value in converted.items() if value is not None}


def get_new_student_submissions(student: StudentStorage, faculty: FacultyStorage) -> List[Record]:
    """Student submissions whose id the faculty side has not seen."""
    faculty_submissions = faculty.get_submissions()
    return [
        submission for submission in student.get_submissions()
        if not any(existing.get("id") == submission.get("id") for existing in faculty_submissions)
    ]


def sync_submissions(student: StudentStorage, faculty: FacultyStorage) -> List[Record]:
    """Copy missing submissions to the faculty side; returns what was added."""
    new_submissions = get_new_student_submissions(student, faculty)
    if not new_submissions:
        return []

    converted = [convert_to_faculty_submission(s) for s in new_submissions]
    faculty.save_submissions([*faculty.get_submissions(), *converted])

    for submission in converted:
        faculty.add_notification({
            "id": f"new-submission-{submission['id']}",
            "title": "New Submission Received",
            "message": f"{submission.get('studentName')} has submitted their assignment for grading.",
            "createdAt": now_iso(),
            "isRead": False,
            "type": "submission",
        })

    print(f"✅ Synced {len(converted)} new submission(s) to the faculty portal")
    return converted


def auto_sync_submissions(student: StudentStorage, faculty: FacultyStorage) -> List[Record]:
    if not faculty.storage.available:
        return []
    return sync_submissions(student, faculty)
