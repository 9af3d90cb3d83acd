"""
Assignment connector: copies faculty-authored assignments into the student
portal.

One direction only. Every run re-diffs the full collections by id, so it is
safe to call on every page load or timer tick.
"""
from typing import List

from portal.clock import now_iso
from portal.stores.collection import Record
from portal.stores.faculty import FacultyStorage
from portal.stores.student import StudentStorage


def convert_to_student_assignment(faculty_assignment: Record) -> Record:
    """Student-side shape of a faculty assignment; the description becomes the content."""
    converted = {
        "id": faculty_assignment.get("id"),
        "title": faculty_assignment.get("title"),
        "courseId": faculty_assignment.get("courseId"),
        "courseName": faculty_assignment.get("courseName"),
        "dueDate": faculty_assignment.get("dueDate"),
        "status": "pending",
        "maxScore": faculty_assignment.get("maxScore"),
        "isGroupAssignment": faculty_assignment.get("isGroupAssignment"),
        "content": faculty_assignment.get("description"),
        "attachments": faculty_assignment.get("attachments"),
    }
    return {field: value for field, value in converted.items() if value is not None}


def get_new_faculty_assignments(faculty: FacultyStorage, student: StudentStorage) -> List[Record]:
    """Faculty assignments whose id is not on the student side yet."""
    student_assignments = student.get_assignments()
    return [
        assignment for assignment in faculty.get_assignments()
        if not any(existing.get("id") == assignment.get("id") for existing in student_assignments)
    ]


def sync_assignments(faculty: FacultyStorage, student: StudentStorage) -> List[Record]:
    """Copy missing faculty assignments to the student side; returns what was added."""
    new_assignments = get_new_faculty_assignments(faculty, student)
    if not new_assignments:
        return []

    converted = [convert_to_student_assignment(a) for a in new_assignments]
    student.save_assignments([*student.get_assignments(), *converted])

    for assignment in converted:
        student.add_notification({
            "id": f"new-assignment-{assignment['id']}",
            "title": "New Assignment",
            "message": f'A new assignment "{assignment.get("title")}" has been posted for {assignment.get("courseName")}',
            "createdAt": now_iso(),
            "isRead": False,
            "type": "assignment",
        })

    print(f"✅ Synced {len(converted)} new assignment(s) to the student portal")
    return converted


def auto_sync_assignments(faculty: FacultyStorage, student: StudentStorage) -> List[Record]:
    """Run the sync only when a key-value store is available."""
    if not student.storage.available:
        return []
    return sync_assignments(faculty, student)
