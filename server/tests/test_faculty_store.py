"""
Tests for the faculty portal storage.
"""
from portal.schemas import FacultyAssignment


class TestAssignments:

    def test_create_assignment_from_model_uses_camel_case(self, faculty):
        faculty.create_assignment(FacultyAssignment(
            title="HW1", course_id="C1", course_name="CS101",
            description="Do ch.1", due_date="2024-01-01", max_score=100,
        ))

        stored = faculty.get_assignments()[0]
        assert stored["id"].startswith("ASG")
        assert stored["courseId"] == "C1"
        assert stored["isGroupAssignment"] is False
        assert "maxGroupSize" not in stored

    def test_update_and_delete(self, faculty, faculty_assignment):
        faculty.create_assignment(faculty_assignment)
        faculty.update_assignment({**faculty_assignment, "title": "HW1 v2"})
        assert faculty.get_assignments()[0]["title"] == "HW1 v2"

        faculty.delete_assignment("1")
        assert faculty.get_assignments() == []


class TestCourses:

    def test_add_course_is_unique(self, faculty):
        faculty.add_course({"id": "1", "name": "A"})
        faculty.add_course({"id": "1", "name": "B"})
        assert faculty.get_courses() == [{"id": "1", "name": "A"}]


class TestGrading:

    def test_grade_submission(self, faculty, faculty_assignment):
        faculty.save_assignments([faculty_assignment])
        faculty.save_submissions([
            {"id": "s1", "assignmentId": "1", "studentName": "Rahul", "status": "submitted"},
            {"id": "s2", "assignmentId": "1", "studentName": "Priya", "status": "submitted"},
        ])

        faculty.grade_submission("s1", 92, "Well done")

        graded = faculty.submissions.find("s1")
        assert graded["status"] == "graded"
        assert graded["score"] == 92
        assert graded["feedback"] == "Well done"
        assert faculty.submissions.find("s2")["status"] == "submitted"

        notification = faculty.get_notifications()[0]
        assert notification["title"] == "Submission Graded"
        assert notification["message"] == "You have graded Rahul's submission for HW1"

    def test_grade_missing_submission_changes_nothing(self, faculty):
        faculty.grade_submission("s404", 50, "")
        assert faculty.get_submissions() == []
        assert faculty.get_notifications() == []

    def test_submissions_by_assignment(self, faculty):
        faculty.save_submissions([{"id": "a", "assignmentId": "1"}, {"id": "b", "assignmentId": "2"}])
        assert [s["id"] for s in faculty.get_submissions_by_assignment("2")] == ["b"]


class TestTickets:

    def test_add_ticket_generates_id_and_timestamps(self, faculty):
        faculty.add_ticket({"title": "Old"})
        faculty.add_ticket({"title": "New"})

        tickets = faculty.get_tickets()
        assert [t["title"] for t in tickets] == ["New", "Old"]
        assert tickets[0]["id"].startswith("TCKT")
        assert tickets[0]["createdAt"] == tickets[0]["updatedAt"]

    def test_update_ticket_status_keeps_old_response_when_none_given(self, faculty):
        faculty.save_tickets([{"id": "1", "status": "open", "response": "Looking into it"}])

        faculty.update_ticket_status("1", "resolved")

        ticket = faculty.get_tickets()[0]
        assert ticket["status"] == "resolved"
        assert ticket["response"] == "Looking into it"
        assert "updatedAt" in ticket

        faculty.update_ticket_status("1", "closed", "Done")
        assert faculty.get_tickets()[0]["response"] == "Done"

    def test_update_missing_ticket(self, faculty):
        faculty.save_tickets([{"id": "1", "status": "open"}])
        assert faculty.update_ticket_status("2", "closed") == [{"id": "1", "status": "open"}]


class TestDemoData:

    def test_initialize_demo_data(self, faculty):
        faculty.initialize_demo_data("FAC1001", "Dr. Rao", "rao@shastri.edu")

        assert len(faculty.get_courses()) == 3
        assert len(faculty.get_submissions()) == 3
        assert faculty.get_profile()["facultyId"] == "FAC1001"

        faculty.initialize_demo_data("FAC2", "X", "x@shastri.edu")
        assert faculty.get_profile()["facultyId"] == "FAC1001"
