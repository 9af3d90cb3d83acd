"""
Faculty portal storage.

Courses, authored assignments, received submissions, student tickets,
notifications and the faculty profile, each under its own key.
"""
import time
import uuid
from datetime import datetime, timedelta, timezone
from typing import List, Optional, Union

from pydantic import BaseModel

from portal.clock import now_iso
from portal.storage import JsonStorage
from portal.stores.collection import JsonCollection, JsonDocument, Record, to_record


FACULTY_STORAGE_KEYS = {
    "COURSES": "shastri_faculty_courses",
    "ASSIGNMENTS": "shastri_faculty_assignments",
    "SUBMISSIONS": "shastri_faculty_submissions",
    "TICKETS": "shastri_faculty_tickets",
    "NOTIFICATIONS": "shastri_faculty_notifications",
    "PROFILE": "shastri_faculty_profile",
}


def _days_from_now(days: int) -> str:
    return (datetime.now(timezone.utc) + timedelta(days=days)).isoformat()


class FacultyStorage:
    def __init__(self, storage: JsonStorage):
        self.storage = storage
        self.courses = JsonCollection(storage, FACULTY_STORAGE_KEYS["COURSES"])
        self.assignments = JsonCollection(storage, FACULTY_STORAGE_KEYS["ASSIGNMENTS"])
        self.submissions = JsonCollection(storage, FACULTY_STORAGE_KEYS["SUBMISSIONS"])
        self.tickets = JsonCollection(storage, FACULTY_STORAGE_KEYS["TICKETS"])
        self.notifications = JsonCollection(storage, FACULTY_STORAGE_KEYS["NOTIFICATIONS"])
        self.profile = JsonDocument(storage, FACULTY_STORAGE_KEYS["PROFILE"])

    # Courses

    def get_courses(self) -> List[Record]:
        return self.courses.get_all()

    def save_courses(self, courses: List[Record]) -> None:
        self.courses.save_all(courses)

    def add_course(self, course: Union[Record, BaseModel]) -> List[Record]:
        return self.courses.add(course, unique=True)

    def update_course(self, course: Union[Record, BaseModel]) -> List[Record]:
        return self.courses.update(course)

    def delete_course(self, course_id: str) -> List[Record]:
        return self.courses.delete(course_id)

    # Assignments

    def get_assignments(self) -> List[Record]:
        return self.assignments.get_all()

    def save_assignments(self, assignments: List[Record]) -> None:
        self.assignments.save_all(assignments)

    def create_assignment(self, assignment: Union[Record, BaseModel]) -> List[Record]:
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

    def grade_submission(self, submission_id: str, score: float, feedback: str) -> List[Record]:
        submission = self.submissions.find(submission_id)
        updated = self.submissions.patch(
            submission_id, {"status": "graded", "score": score, "feedback": feedback}
        )
        if submission:
            assignment = self.assignments.find(submission.get("assignmentId"))
            title = assignment.get("title") if assignment else submission.get("assignmentId")
            self.add_notification({
                "id": f"notif-{uuid.uuid4().hex[:8]}",
                "title": "Submission Graded",
                "message": f"You have graded {submission.get('studentName')}'s submission for {title}",
                "createdAt": now_iso(),
                "isRead": False,
                "type": "submission",
            })
        return updated

    def get_submissions_by_assignment(self, assignment_id: str) -> List[Record]:
        return self.submissions.filter(lambda s: s.get("assignmentId") == assignment_id)

    # Tickets

    def get_tickets(self) -> List[Record]:
        return self.tickets.get_all()

    def save_tickets(self, tickets: List[Record]) -> None:
        self.tickets.save_all(tickets)

    def update_ticket_status(self, ticket_id: str, status: str, response: Optional[str] = None) -> List[Record]:
        ticket = self.tickets.find(ticket_id)
        if ticket is None:
            return self.get_tickets()
        changes: Record = {"status": status, "updatedAt": now_iso()}
        if response:
            changes["response"] = response
        return self.tickets.patch(ticket_id, changes)

    def add_ticket(self, ticket: Union[Record, BaseModel]) -> List[Record]:
        """Store a new ticket with a generated id and timestamps, newest first."""
        timestamp = now_iso()
        new_ticket = {
            **to_record(ticket),
            "id": f"TCKT{int(time.time() * 1000)}",
            "createdAt": timestamp,
            "updatedAt": timestamp,
        }
        return self.tickets.prepend(new_ticket)

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

    # Profile

    def get_profile(self) -> Optional[Record]:
        return self.profile.get()

    def save_profile(self, profile: Union[Record, BaseModel]) -> None:
        self.profile.save(profile)

    def update_profile(self, changes: Union[Record, BaseModel]) -> Optional[Record]:
        return self.profile.update(changes)

    def initialize_demo_data(self, faculty_id: str, name: str, email: str) -> None:
        if self.get_courses():
            return

        self.save_courses([
            {"id": "1", "code": "CSE101", "name": "Introduction to Computer Science",
             "department": "Computer Science", "credits": 4, "batchYear": "2023", "studentCount": 45,
             "schedule": ["Monday 9:00-10:30", "Wednesday 9:00-10:30"]},
            {"id": "2", "code": "CSE201", "name": "Data Structures",
             "department": "Computer Science", "credits": 3, "batchYear": "2022", "studentCount": 38,
             "schedule": ["Tuesday 11:00-12:30", "Thursday 11:00-12:30"]},
            {"id": "3", "code": "CSE301", "name": "Database Management Systems",
             "department": "Computer Science", "credits": 4, "batchYear": "2023", "studentCount": 40,
             "schedule": ["Monday 2:00-3:30", "Friday 2:00-3:30"]},
        ])

        self.save_assignments([
            {"id": "1", "title": "Introduction to Programming Assignment", "courseId": "1",
             "courseName": "Introduction to Computer Science",
             "description": "Write a simple program that demonstrates basic programming concepts",
             "dueDate": _days_from_now(7), "maxScore": 100, "isGroupAssignment": False,
             "createdAt": now_iso()},
            {"id": "2", "title": "Data Structures Project", "courseId": "2",
             "courseName": "Data Structures",
             "description": "Implement a balanced binary search tree and analyze its performance",
             "dueDate": _days_from_now(14), "maxScore": 100, "isGroupAssignment": True,
             "maxGroupSize": 4, "createdAt": now_iso()},
            {"id": "3", "title": "SQL Assignment", "courseId": "3",
             "courseName": "Database Management Systems",
             "description": "Design a normalized database schema for a student management system",
             "dueDate": _days_from_now(3), "maxScore": 50, "isGroupAssignment": False,
             "createdAt": now_iso()},
        ])

        self.save_submissions([
            {"id": "1", "assignmentId": "1", "studentId": "STU1001", "studentName": "Rahul Singh",
             "submissionDate": _days_from_now(-2), "status": "submitted", "isGroupSubmission": False},
            {"id": "2", "assignmentId": "1", "studentId": "STU1002", "studentName": "Priya Sharma",
             "submissionDate": _days_from_now(-3), "status": "graded", "score": 85,
             "feedback": "Good work, but could improve on code readability.",
             "isGroupSubmission": False},
            {"id": "3", "assignmentId": "2", "studentId": "STU1003", "studentName": "Amit Kumar",
             "submissionDate": _days_from_now(-1), "status": "submitted", "isGroupSubmission": True,
             "groupMembers": [
                 {"id": "STU1003", "name": "Amit Kumar"},
                 {"id": "STU1004", "name": "Sneha Patel"},
                 {"id": "STU1005", "name": "Vikram Desai"},
             ]},
        ])

        self.save_tickets([
            {"id": "1", "title": "Question about assignment deadline",
             "description": "I'm confused about when the SQL assignment is due. Can you clarify?",
             "studentId": "STU1001", "studentName": "Rahul Singh", "status": "open",
             "priority": "medium", "createdAt": _days_from_now(-1), "updatedAt": _days_from_now(-1)},
            {"id": "2", "title": "Request for re-evaluation",
             "description": "I believe there was an error in grading my assignment. Could you please review it again?",
             "studentId": "STU1002", "studentName": "Priya Sharma", "status": "in-progress",
             "priority": "high", "createdAt": _days_from_now(-2), "updatedAt": _days_from_now(-1),
             "response": "I've started reviewing your assignment and will provide feedback soon."},
        ])

        self.save_notifications([
            {"id": "1", "title": "New Assignment Submission",
             "message": "Rahul Singh has submitted Introduction to Programming Assignment",
             "createdAt": _days_from_now(-2), "isRead": False, "type": "submission"},
            {"id": "2", "title": "New Support Ticket",
             "message": "Priya Sharma has raised a ticket: Request for re-evaluation",
             "createdAt": _days_from_now(-2), "isRead": True, "type": "ticket"},
        ])

        self.save_profile({
            "facultyId": faculty_id,
            "name": name,
            "email": email,
            "department": "Computer Science",
            "title": "Associate Professor",
            "joinedDate": datetime(2020, 7, 1, tzinfo=timezone.utc).isoformat(),
            "office": "CS Building, Room 301",
            "officeHours": ["Monday 1:00-3:00 PM", "Thursday 2:00-4:00 PM"],
        })
