"""
Tests for the shared connector collections and change notification.
"""
import pytest

from portal.schemas import Ticket, TicketResponse
from portal.services.connector import STORAGE_KEYS, ConnectorService


@pytest.fixture
def recorded(connector):
    """Collects every (data_type, data) notification"""
    calls = []
    connector.add_change_listener(lambda data_type, data: calls.append((data_type, data)))
    return calls


class TestEntityCollection:

    def test_create_appends_and_notifies_once(self, connector, recorded, sample_ticket):
        connector.tickets.create(sample_ticket)

        assert connector.tickets.get_all() == [sample_ticket]
        assert recorded == [("tickets", [sample_ticket])]

    def test_create_accepts_models(self, connector):
        ticket = Ticket(
            title="Projector broken", description="Room 101", created_by="FAC1001",
            portal_type="faculty", priority="medium", category="Facilities",
        )
        connector.tickets.create(ticket)

        stored = connector.tickets.get_by_id(ticket.id)
        assert stored["createdBy"] == "FAC1001"
        assert stored["status"] == "open"
        assert stored["responses"] == []
        assert "assignedTo" not in stored

    def test_duplicate_ids_are_not_rejected(self, connector):
        connector.courses.create({"id": "CRS1", "name": "A"})
        connector.courses.create({"id": "CRS1", "name": "B"})

        assert len(connector.courses.get_all()) == 2
        assert connector.courses.get_by_id("CRS1")["name"] == "A"

    def test_update_replaces_and_keeps_length(self, connector, recorded):
        connector.students.create({"id": "STU1", "name": "Asha"})
        connector.students.create({"id": "STU2", "name": "Ravi"})

        connector.students.update({"id": "STU1", "name": "Asha K"})

        assert connector.students.get_all() == [{"id": "STU1", "name": "Asha K"}, {"id": "STU2", "name": "Ravi"}]
        assert len(recorded) == 3

    def test_update_of_missing_id_is_silent_noop(self, connector, recorded):
        connector.batches.create({"id": "BAT1"})
        connector.batches.update({"id": "BAT9", "name": "ghost"})

        assert connector.batches.get_all() == [{"id": "BAT1"}]
        assert len(recorded) == 1

    def test_delete_removes_exact_id_only(self, connector):
        for record_id in ("DEPT1", "DEPT10", "DEPT1"):
            connector.departments.create({"id": record_id})

        connector.departments.delete("DEPT1")

        assert connector.departments.get_all() == [{"id": "DEPT10"}]

    def test_delete_of_missing_id_still_notifies(self, connector, recorded):
        connector.faculty.delete("FAC404")
        assert recorded == [("faculty", [])]

    def test_get_by_id_missing(self, connector):
        assert connector.schedules.get_by_id("nope") is None

    def test_collections_are_independent(self, connector):
        connector.courses.create({"id": "X"})
        assert connector.batches.get_all() == []
        assert connector.storage.get("shastri_courses") == [{"id": "X"}]

    def test_unknown_data_type(self, connector):
        with pytest.raises(KeyError):
            connector.collection("grades")


class TestChangeListeners:

    def test_listeners_called_in_registration_order(self, connector):
        order = []
        connector.add_change_listener(lambda t, d: order.append("first"))
        connector.add_change_listener(lambda t, d: order.append("second"))

        connector.courses.create({"id": "C"})

        assert order == ["first", "second"]

    def test_unsubscribe_stops_delivery(self, connector):
        calls = []
        unsubscribe = connector.add_change_listener(lambda t, d: calls.append(t))
        connector.courses.create({"id": "C1"})
        unsubscribe()
        connector.courses.create({"id": "C2"})

        assert calls == ["courses"]

    def test_unsubscribe_twice_only_removes_own_registration(self, connector, bus):
        listener = lambda t, d: None
        first = connector.add_change_listener(listener)
        connector.add_change_listener(listener)

        first()
        first()

        assert bus.listener_count == 1

    def test_failing_listener_does_not_block_others(self, connector, capsys):
        calls = []

        def broken(data_type, data):
            raise RuntimeError("boom")

        connector.add_change_listener(broken)
        connector.add_change_listener(lambda t, d: calls.append(t))

        connector.tickets.create({"id": "T1"})

        assert calls == ["tickets"]
        assert connector.tickets.get_all() == [{"id": "T1"}]
        assert "Change listener failed for tickets: boom" in capsys.readouterr().out

    def test_no_notification_without_storage(self, null_storage):
        connector = ConnectorService(null_storage)
        calls = []
        connector.add_change_listener(lambda t, d: calls.append(t))

        connector.tickets.create({"id": "T1"})
        connector.tickets.delete("T1")

        assert connector.tickets.get_all() == []
        assert calls == []


class TestTickets:

    def test_get_by_user(self, connector, sample_ticket):
        connector.tickets.create(sample_ticket)
        connector.tickets.create({**sample_ticket, "id": "TKT2", "createdBy": "STU9", "assignedTo": "FAC1"})

        assert [t["id"] for t in connector.tickets.get_by_user("STU1001", "student")] == ["TKT1001"]
        assert [t["id"] for t in connector.tickets.get_by_user("FAC1", "faculty")] == ["TKT2"]
        assert len(connector.tickets.get_by_user("ADM1", "admin")) == 2
        assert connector.tickets.get_by_user("nobody", "student") == []

    def test_add_response_appends(self, connector, sample_ticket):
        connector.tickets.create(sample_ticket)
        response = TicketResponse(
            content="Please clear cookies", responder_name="Admin",
            responder_id="ADM1", responder_role="admin",
        )

        connector.tickets.add_response("TKT1001", response)
        connector.tickets.add_response("TKT1001", {"id": "R2", "content": "Fixed?"})

        responses = connector.tickets.get_by_id("TKT1001")["responses"]
        assert [r["id"] for r in responses] == [response.id, "R2"]
        assert responses[0]["responderRole"] == "admin"

    def test_add_response_to_missing_ticket(self, connector, recorded):
        connector.tickets.add_response("TKT404", {"id": "R1"})
        assert recorded == []

    def test_update_status_allows_any_transition(self, connector, sample_ticket):
        connector.tickets.create(sample_ticket)

        connector.tickets.update_status("TKT1001", "closed")
        connector.tickets.update_status("TKT1001", "open")

        assert connector.tickets.get_by_id("TKT1001")["status"] == "open"


class TestSchedulesAndViews:

    def test_get_by_faculty(self, connector):
        connector.schedules.create({"id": "S1", "facultyId": "FAC1"})
        connector.schedules.create({"id": "S2", "facultyId": "FAC2"})

        assert [s["id"] for s in connector.schedules.get_by_faculty("FAC1")] == ["S1"]

    def test_courses_with_faculty_resolves_names(self, connector):
        connector.faculty.create({"id": "FAC1", "name": "Dr. Rao"})
        connector.courses.create({"id": "C1", "facultyId": "FAC1", "facultyName": "stale"})
        connector.courses.create({"id": "C2", "facultyId": "FAC404", "facultyName": "kept"})

        view = connector.courses_with_faculty()

        assert [c["facultyName"] for c in view] == ["Dr. Rao", "kept"]
        assert connector.courses.get_by_id("C1")["facultyName"] == "stale"

    def test_schedules_with_names(self, connector):
        connector.faculty.create({"id": "FAC1", "name": "Dr. Rao"})
        connector.courses.create({"id": "C1", "name": "Algorithms"})
        connector.schedules.create({
            "id": "S1", "facultyId": "FAC1", "facultyName": "old",
            "courseId": "C1", "courseName": "old",
        })

        assert connector.schedules_with_names()[0] == {
            "id": "S1", "facultyId": "FAC1", "facultyName": "Dr. Rao",
            "courseId": "C1", "courseName": "Algorithms",
        }


class TestInitializeIfEmpty:

    def test_writes_empty_lists_without_notifying(self, connector, recorded):
        connector.initialize_if_empty()

        for key in STORAGE_KEYS.values():
            assert connector.storage.get(key) == []
        assert recorded == []

    def test_keeps_existing_data(self, connector):
        connector.courses.create({"id": "C1"})
        connector.initialize_if_empty()
        assert connector.courses.get_all() == [{"id": "C1"}]

    def test_second_call_writes_nothing(self, connector, backend, monkeypatch):
        connector.initialize_if_empty()

        writes = []
        original_set_item = backend.set_item
        def recording_set_item(key, value):
            writes.append(key)
            original_set_item(key, value)

        monkeypatch.setattr(backend, "set_item", recording_set_item)

        connector.initialize_if_empty()

        assert writes == []


class TestMalformedCollections:

    def test_non_object_entries_do_not_break_writes(self, connector, backend):
        backend.set_item("shastri_tickets", '["x", 1]')

        connector.tickets.update({"id": "T1"})
        connector.tickets.create({"id": "T2"})

        assert connector.tickets.get_all() == [{"id": "T2"}]
        assert connector.tickets.get_by_user("anyone", "admin") == [{"id": "T2"}]
