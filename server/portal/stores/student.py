"""
Student portal storage.

One collection per entity type under the student keys. Enrolling, leaving a
course and submitting work also drop a notification into the student's
notification list.
"""
import uuid
from datetime import datetime, timedelta, timezone
from typing import List, Optional, Union

from pydantic import BaseModel

from portal.clock import now_iso
from portal.storage import JsonStorage
from portal.stores.collection import JsonCollection, JsonDocument, Record, to_record


STUDENT_STORAGE_KEYS = {
    "ENROLLED_COURSES": "shastri_enrolled_courses",
    "ASSIGNMENTS": "shastri_assignments",
    "GRADES": "shastri_grades",
    "TICKETS": "shastri_student_tickets",
    "NOTIFICATIONS": "shastri_notifications",
    "PROFILE": "shastri_student_profile",
    "SUBMISSIONS": "shastri_student_submissions",
}


def _days_from_now(days: int) -> str:
    return (datetime.now(timezone.utc) + timedelta(days=days)).isoformat()


class StudentStorage:
    def __init__(self, storage: JsonStorage):
        self.storage = storage
        self.enrolled_courses = JsonCollection(storage, STUDENT_STORAGE_KEYS["ENROLLED_COURSES"])
        self.assignments = JsonCollection(storage, STUDENT_STORAGE_KEYS["ASSIGNMENTS"])
        self.grades = JsonCollection(storage, STUDENT_STORAGE_KEYS["GRADES"])
        self.tickets = JsonCollection(storage, STUDENT_STORAGE_KEYS["TICKETS"])
        self.notifications = JsonCollection(storage, STUDENT_STORAGE_KEYS["NOTIFICATIONS"])
        self.submissions = JsonCollection(storage, STUDENT_STORAGE_KEYS["SUBMISSIONS"])
        self.profile = JsonDocument(storage, STUDENT_STORAGE_KEYS["PROFILE"])

    # Courses

    def get_enrolled_courses(self) -> List[Record]:
        return self.enrolled_courses.get_all()

    def save_enrolled_courses(self, courses: List[Record]) -> None:
        self.enrolled_courses.save_all(courses)

    def enroll_course(self, course: Union[Record, BaseModel]) -> List[Record]:
        """Enroll in a course; a course that is already enrolled is left alone."""
        course = to_record(course)
        before = self.get_enrolled_courses()
        updated = self.enrolled_courses.add(course, unique=True)
        if len(updated) > len(before):
            self.add_notification({
                "id": f"enroll-{uuid.uuid4().hex[:8]}",
                "title": "Course Enrolled",
                "message": f"You have successfully enrolled in {course.get('name')}",
                "createdAt": now_iso(),
                "isRead": False,
                "type": "course",
            })
        return updated

    def unenroll_course(self, course_id: str) -> List[Record]:
        course = self.enrolled_courses.find(course_id)
        updated = self.enrolled_courses.delete(course_id)
        if course:
            self.add_notification({
                "id": f"unenroll-{uuid.uuid4().hex[:8]}",
                "title": "Course Unenrolled",
                "message": f"You have unenrolled from {course.get('name')}",
                "createdAt": now_iso(),
                "isRead": False,
                "type": "course",
            })
        return updated

    # Assignments

    def get_assignments(self) -> List[Record]:
        return self.assignments.get_all()

    def save_assignments(self, assignments: List[Record]) -> None:
        self.assignments.save_all(assignments)

    def add_assignment(self, assignment: Union[Record, BaseModel]) -> List[Record]:
        return self.assignments.add(assignment)

    def update_assignment(self, assignment: Union[Record, BaseModel]) -> List[Record]:
        return self.assignments.update(assignment)

    def delete_assignment(self, assignment_id: str) -> List[Record]:
        return self.assignments.delete(assignment_id)

    # Submissions

    def get_submissions(self) -> List[Record]:
        return self.submissions.get_all()

    def save_submissions(self, submissions: List[Record]) -> None:
        self.submissions.save_all(submissions)

    def add_submission(self, submission: Union[Record, BaseModel]) -> List[Record]:
        """Store a submission and mark its assignment as submitted."""
        submission = to_record(submission)
        updated = self.submissions.add(submission)

        assignment = self.assignments.find(submission.get("assignmentId"))
        if assignment:
            self.update_assignment({**assignment, "status": "submitted"})

        title = assignment.get("title") if assignment else submission.get("assignmentId")
        self.add_notification({
            "id": f"notif-{uuid.uuid4().hex[:8]}",
            "title": "Assignment Submitted",
            "message": f"You have successfully submitted {title}",
            "createdAt": now_iso(),
            "isRead": False,
            "type": "assignment",
        })
        return updated

    def get_submission_by_assignment(self, assignment_id: str) -> Optional[Record]:
        return next(
            (s for s in self.get_submissions() if s.get("assignmentId") == assignment_id),
            None,
        )

    # Grades

    def get_grades(self) -> List[Record]:
        return self.grades.get_all()

    def save_grades(self, grades: List[Record]) -> None:
        self.grades.save_all(grades)

    def add_grade(self, grade: Union[Record, BaseModel]) -> List[Record]:
        return self.grades.add(grade)

    def update_grade(self, grade: Union[Record, BaseModel]) -> List[Record]:
        """Replace the grade for the same course and semester, or append it."""
        grade = to_record(grade)
        grades = self.get_grades()

        def same_slot(g: Record) -> bool:
            return g.get("courseId") == grade.get("courseId") and g.get("semester") == grade.get("semester")

        if any(same_slot(g) for g in grades):
            updated = [grade if same_slot(g) else g for g in grades]
        else:
            updated = [*grades, grade]
        self.save_grades(updated)
        return updated

    # Tickets

    def get_tickets(self) -> List[Record]:
        return self.tickets.get_all()

    def save_tickets(self, tickets: List[Record]) -> None:
        self.tickets.save_all(tickets)

    def create_ticket(self, ticket: Union[Record, BaseModel]) -> List[Record]:
        return self.tickets.add(ticket)

    def update_ticket(self, ticket: Union[Record, BaseModel]) -> List[Record]:
        return self.tickets.update(ticket)

    # Notifications

    def get_notifications(self) -> List[Record]:
        return self.notifications.get_all()

    def save_notifications(self, notifications: List[Record]) -> None:
        self.notifications.save_all(notifications)

    def add_notification(self, notification: Union[Record, BaseModel]) -> List[Record]:
        return self.notifications.prepend(notification)

    def mark_notification_as_read(self, notification_id: str) -> List[Record]:
        return self.notifications.patch(notification_id, {"isRead": True})

    def mark_all_notifications_as_read(self) -> List[Record]:
        return self.notifications.patch_all({"isRead": True})

    def delete_notification(self, notification_id: str) -> List[Record]:
        return self.notifications.delete(notification_id)

    # Profile

    def get_profile(self) -> Optional[Record]:
        return self.profile.get()

    def save_profile(self, profile: Union[Record, BaseModel]) -> None:
        self.profile.save(profile)

    def update_profile(self, changes: Union[Record, BaseModel]) -> Optional[Record]:
        return self.profile.update(changes)

    def initialize_demo_data(self, student_id: str, name: str, email: str) -> None:
        """Seed demo courses, assignments, grades and notifications for a fresh student."""
        if self.get_enrolled_courses():
            return

        self.save_enrolled_courses([
            {"id": "1", "code": "CSE101", "name": "Introduction to Computer Science",
             "instructor": "Dr. Sharma", "credits": 4, "batch": "2023"},
            {"id": "2", "code": "CSE201", "name": "Data Structures",
             "instructor": "Dr. Gupta", "credits": 3, "batch": "2023"},
            {"id": "3", "code": "CSE301", "name": "Database Management Systems",
             "instructor": "Dr. Singh", "credits": 4, "batch": "2023"},
        ])

        self.save_assignments([
            {"id": "1", "title": "Introduction to Programming Assignment", "courseId": "1",
             "courseName": "Introduction to Computer Science", "dueDate": _days_from_now(7),
             "status": "pending", "maxScore": 100},
            {"id": "2", "title": "Data Structures Project", "courseId": "2",
             "courseName": "Data Structures", "dueDate": _days_from_now(14),
             "status": "pending", "maxScore": 100, "isGroupAssignment": True},
            {"id": "3", "title": "SQL Assignment", "courseId": "3",
             "courseName": "Database Management Systems", "dueDate": _days_from_now(3),
             "status": "pending", "maxScore": 50},
        ])

        self.save_grades([
            {"courseId": "1", "courseName": "Introduction to Computer Science",
             "score": 85, "maxScore": 100, "grade": "A", "semester": "Fall 2023"},
            {"courseId": "2", "courseName": "Data Structures",
             "score": 78, "maxScore": 100, "grade": "B+", "semester": "Fall 2023"},
        ])

        self.save_notifications([
            {"id": "1", "title": "Assignment Due Soon", "message": "SQL Assignment is due in 3 days",
             "createdAt": now_iso(), "isRead": False, "type": "assignment"},
            {"id": "2", "title": "New Grade Posted",
             "message": "A new grade has been posted for Introduction to Computer Science",
             "createdAt": _days_from_now(-2), "isRead": False, "type": "grade"},
        ])

        self.save_profile({
            "studentId": student_id,
            "name": name,
            "email": email,
            "department": "Computer Science",
            "batch": "2023",
            "joinedDate": datetime(2023, 9, 1, tzinfo=timezone.utc).isoformat(),
        })
