"""
Record schemas for the portal collections.

Stored records are plain camelCase JSON objects. These models validate
records coming in through the API and give them defaults; `to_record()`
turns them back into the stored shape. Unknown keys are kept.
"""
import time
import uuid
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from portal.clock import now_iso


PortalType = Literal["student", "faculty", "admin"]
TicketStatus = Literal["open", "in-progress", "resolved", "closed"]
Priority = Literal["low", "medium", "high"]


class PortalRecord(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")

    def to_record(self) -> Dict[str, Any]:
        """Dump in the stored shape: camelCase keys, absent optionals omitted."""
        return self.model_dump(by_alias=True, exclude_none=True)


# --- Connector (admin view) records ---

class TicketResponse(PortalRecord):
    id: str = Field(default_factory=lambda: f"RSP-{uuid.uuid4().hex[:8].upper()}")
    content: str
    responder_name: str
    responder_id: str
    responder_role: PortalType
    timestamp: str = Field(default_factory=now_iso)


class Ticket(PortalRecord):
    id: str = Field(default_factory=lambda: f"TKT{int(time.time() * 1000)}")
    title: str
    description: str
    created_by: str
    created_at: str = Field(default_factory=now_iso)
    status: TicketStatus = "open"
    assigned_to: Optional[str] = None
    portal_type: PortalType
    priority: Priority
    category: str
    responses: List[TicketResponse] = Field(default_factory=list)


class Department(PortalRecord):
    id: str
    code: str
    name: str
    description: str = ""
    head_name: str = ""
    head_id: str = ""
    established_year: Optional[int] = None
    faculty_count: int = 0
    student_count: int = 0
    courses: int = 0
    batches: int = 0


class Address(PortalRecord):
    street: str
    city: str
    state: str
    pincode: str


class AssignedBatch(PortalRecord):
    batch_id: str
    batch_name: str
    section: str


class AssignedCourse(PortalRecord):
    course_id: str
    course_name: str
    semester: int


class Faculty(PortalRecord):
    id: str
    employee_id: str
    name: str
    email: str
    phone: str = ""
    address: Optional[Address] = None
    department: str
    designation: str
    specialization: str = ""
    qualifications: List[str] = Field(default_factory=list)
    join_date: str = ""
    assigned_batches: List[AssignedBatch] = Field(default_factory=list)
    assigned_courses: List[AssignedCourse] = Field(default_factory=list)
    status: Literal["active", "on leave", "sabbatical", "retired"] = "active"


class AcademicDetails(PortalRecord):
    current_semester: int
    cgpa: float
    attendance: float


class Student(PortalRecord):
    id: str
    enrollment_no: str
    name: str
    email: str
    phone: str = ""
    address: Optional[Address] = None
    section: str
    batch: str
    department: str
    academic_details: Optional[AcademicDetails] = None
    status: Literal["active", "inactive", "alumni"] = "active"


class Course(PortalRecord):
    id: str
    code: str
    name: str
    description: str = ""
    credits: int
    department: str
    semester: int
    faculty_id: str
    faculty_name: str
    syllabus: Optional[List[str]] = None
    status: Literal["active", "inactive"] = "active"


class Batch(PortalRecord):
    id: str
    name: str
    start_year: int
    end_year: int
    department: str
    sections: List[str] = Field(default_factory=list)
    course_ids: List[str] = Field(default_factory=list)
    student_count: int = 0
    status: Literal["active", "inactive", "completed"] = "active"


class Schedule(PortalRecord):
    id: str
    faculty_id: str
    faculty_name: str
    day: str
    start_time: str
    end_time: str
    course_id: str
    course_name: str
    batch_name: str
    section: str
    room_number: str
    type: str


# data type -> schema, for validating connector writes
CONNECTOR_SCHEMAS: Dict[str, type] = {
    "tickets": Ticket,
    "departments": Department,
    "faculty": Faculty,
    "students": Student,
    "courses": Course,
    "batches": Batch,
    "schedules": Schedule,
}


# --- Faculty portal records ---

class GroupMember(PortalRecord):
    id: str
    name: str


class FacultyAssignment(PortalRecord):
    id: str = Field(default_factory=lambda: f"ASG{int(time.time() * 1000)}")
    title: str
    course_id: str
    course_name: str
    description: str
    due_date: str
    max_score: int
    is_group_assignment: bool = False
    max_group_size: Optional[int] = None
    attachments: Optional[List[str]] = None
    created_at: str = Field(default_factory=now_iso)


class StudentSubmission(PortalRecord):
    """A submission as the faculty portal sees it."""
    id: str
    assignment_id: str
    student_id: str
    student_name: str
    submission_date: str
    status: Literal["submitted", "graded"] = "submitted"
    score: Optional[float] = None
    feedback: Optional[str] = None
    attachments: Optional[List[str]] = None
    is_group_submission: bool = False
    group_members: Optional[List[GroupMember]] = None


class GradeRequest(BaseModel):
    score: float = Field(ge=0)
    feedback: str = ""


class FacultyTicketStatusRequest(BaseModel):
    status: TicketStatus
    response: Optional[str] = None


# --- Student portal records ---

class EnrolledCourse(PortalRecord):
    id: str
    code: str
    name: str
    instructor: str
    credits: int
    batch: str


class Submission(PortalRecord):
    """A submission as the student portal sees it."""
    id: str = Field(default_factory=lambda: f"submission-{int(time.time() * 1000)}")
    assignment_id: str
    student_id: str
    student_name: str
    content: Optional[str] = None
    attachments: Optional[List[str]] = None
    submission_date: str = Field(default_factory=now_iso)
    is_group_submission: bool = False
    group_members: Optional[List[GroupMember]] = None


class Notification(PortalRecord):
    id: str
    title: str
    message: str
    created_at: str = Field(default_factory=now_iso)
    is_read: bool = False
    type: str


# --- Requests ---

class TicketStatusRequest(BaseModel):
    status: TicketStatus


class AdminSettingsUpdate(BaseModel):
    dashboard_layout: Optional[str] = None
    theme: Optional[Literal["light", "dark"]] = None
    notifications_enabled: Optional[bool] = None

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
