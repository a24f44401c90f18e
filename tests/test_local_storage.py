import pytest

from quizmaster.core.services.local_storage import LocalStorage


class TestLocalStorage:
    def test_missing_file_reads_as_empty(self, tmp_path):
        assert LocalStorage(tmp_path / "absent.json").get_item("key") is None

    def test_set_get_remove(self, tmp_path):
        storage = LocalStorage(tmp_path / "nested" / "store.json")
        storage.set_item("a", "1")
        storage.set_item("b", "2")
        assert storage.get_item("a") == "1"
        storage.remove_item("a")
        assert storage.get_item("a") is None
        assert storage.get_item("b") == "2"
        assert not (tmp_path / "nested" / "store.json.tmp").exists()

    def test_non_object_document_is_an_error(self, tmp_path):
        path = tmp_path / "store.json"
        path.write_text("[1, 2]", encoding="utf-8")
        with pytest.raises(ValueError):
            LocalStorage(path).get_item("a")

    def test_write_replaces_corrupt_document(self, tmp_path):
        path = tmp_path / "store.json"
        path.write_text("[[[", encoding="utf-8")
        storage = LocalStorage(path)
        storage.set_item("a", "1")
        assert storage.get_item("a") == "1"

    def test_remove_resets_corrupt_document(self, tmp_path):
        path = tmp_path / "store.json"
        path.write_text("not json", encoding="utf-8")
        storage = LocalStorage(path)
        storage.remove_item("a")
        assert storage.get_item("a") is None
        assert path.read_text(encoding="utf-8") == "{}"
