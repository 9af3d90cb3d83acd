"""
Tests for the whole-collection accessors.
"""
from portal.schemas import Notification
from portal.stores.collection import JsonCollection, JsonDocument, to_record


class TestJsonCollection:

    def test_empty_when_absent(self, storage):
        assert JsonCollection(storage, "shastri_grades").get_all() == []

    def test_non_list_value_reads_as_empty(self, storage, capsys):
        storage.set("shastri_grades", {"oops": True})
        assert JsonCollection(storage, "shastri_grades").get_all() == []
        assert "Expected a list" in capsys.readouterr().out

    def test_non_object_entries_are_skipped(self, storage, capsys):
        storage.set("shastri_grades", [None, "x", 1, {"id": "g1"}])
        collection = JsonCollection(storage, "shastri_grades")

        assert collection.get_all() == [{"id": "g1"}]
        assert collection.find("g1") == {"id": "g1"}
        assert "Dropped 3 non-object entries under shastri_grades" in capsys.readouterr().out

    def test_add_appends_duplicates_unless_unique(self, storage):
        collection = JsonCollection(storage, "items")
        collection.add({"id": "1"})
        collection.add({"id": "1"})
        assert len(collection.get_all()) == 2

        result = collection.add({"id": "1", "name": "other"}, unique=True)
        assert len(result) == 2
        assert all("name" not in r for r in collection.get_all())

    def test_prepend_puts_newest_first(self, storage):
        collection = JsonCollection(storage, "items")
        collection.prepend({"id": "old"})
        collection.prepend({"id": "new"})
        assert [r["id"] for r in collection.get_all()] == ["new", "old"]

    def test_update_replaces_matching_record(self, storage):
        collection = JsonCollection(storage, "items")
        collection.save_all([{"id": "1", "v": 1}, {"id": "2", "v": 2}])

        result = collection.update({"id": "2", "v": 20})
        assert result == [{"id": "1", "v": 1}, {"id": "2", "v": 20}]
        assert collection.get_all() == result

    def test_update_without_match_is_a_noop(self, storage):
        collection = JsonCollection(storage, "items")
        collection.save_all([{"id": "1"}])
        assert collection.update({"id": "9"}) == [{"id": "1"}]
        assert collection.get_all() == [{"id": "1"}]

    def test_delete_is_exact(self, storage):
        collection = JsonCollection(storage, "items")
        collection.save_all([{"id": "1"}, {"id": "10"}, {"id": "1"}])
        assert collection.delete("1") == [{"id": "10"}]

    def test_patch_and_patch_all(self, storage):
        collection = JsonCollection(storage, "items")
        collection.save_all([{"id": "a", "isRead": False}, {"id": "b", "isRead": False}])

        collection.patch("a", {"isRead": True})
        assert collection.find("a")["isRead"] is True
        assert collection.find("b")["isRead"] is False

        collection.patch_all({"isRead": True})
        assert all(r["isRead"] for r in collection.get_all())

    def test_models_are_stored_in_camel_case_without_nones(self, storage):
        collection = JsonCollection(storage, "items")
        collection.add(Notification(id="n1", title="Hi", message="Hello", created_at="t", type="course"))
        assert collection.get_all() == [
            {"id": "n1", "title": "Hi", "message": "Hello", "createdAt": "t", "isRead": False, "type": "course"}
        ]


class TestJsonDocument:

    def test_update_returns_none_when_absent(self, storage):
        document = JsonDocument(storage, "shastri_student_profile")
        assert document.update({"name": "New"}) is None
        assert document.get() is None

    def test_update_merges(self, storage):
        document = JsonDocument(storage, "shastri_student_profile")
        document.save({"name": "Asha", "batch": "2023"})
        assert document.update({"batch": "2024"}) == {"name": "Asha", "batch": "2024"}

    def test_merge_starts_from_empty(self, storage):
        document = JsonDocument(storage, "prefs")
        assert document.merge({"theme": "dark"}) == {"theme": "dark"}
        assert document.merge({"viewMode": "week"}) == {"theme": "dark", "viewMode": "week"}

    def test_to_record_copies_dicts(self):
        original = {"id": "1"}
        copy = to_record(original)
        copy["id"] = "2"
        assert original == {"id": "1"}
