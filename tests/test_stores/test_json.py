"""Tests for the JSON export store."""

import json

import pytest
from pathlib import Path
from unittest.mock import patch

from shortcode_stripper.core.runner import BatchRunner
from shortcode_stripper.stores.base import StoreError
from shortcode_stripper.stores.json_store import JSONDocumentStore


@pytest.fixture
def export_file(tmp_path: Path, sample_documents: dict) -> Path:
    """JSON export of the sample documents."""
    path = tmp_path / "posts.json"
    path.write_text(json.dumps(sample_documents), encoding="utf-8")
    return path


class TestJSONDocumentStore:
    """Tests for JSONDocumentStore."""

    def test_lists_ids_in_file_order(self, export_file: Path):
        """Test that ids follow the export's key order."""
        assert JSONDocumentStore(export_file).list_document_ids() == ["1", "2", "3"]

    def test_write_persists(self, export_file: Path):
        """Test that set_body rewrites the file."""
        store = JSONDocumentStore(export_file)
        store.set_body("1", "Hello ✓")

        data = json.loads(export_file.read_text(encoding="utf-8"))
        assert data["1"] == "Hello ✓"
        assert data["2"] == "<p>Already clean.</p>"
        assert JSONDocumentStore(export_file).get_body("1") == "Hello ✓"

    def test_numeric_keys_become_strings(self, tmp_path: Path):
        """Test that ids are always strings."""
        path = tmp_path / "posts.json"
        path.write_text('{"7": "seven"}')

        assert JSONDocumentStore(path).get_body("7") == "seven"

    def test_unknown_id(self, export_file: Path):
        """Test errors for an id not in the export."""
        store = JSONDocumentStore(export_file)

        with pytest.raises(StoreError, match="not found"):
            store.get_body("99")
        with pytest.raises(StoreError, match="not found"):
            store.set_body("99", "text")

    def test_invalid_json(self, tmp_path: Path):
        """Test error for a malformed file."""
        path = tmp_path / "posts.json"
        path.write_text("{not json")

        with pytest.raises(StoreError, match="Invalid JSON"):
            JSONDocumentStore(path)

    def test_not_an_object(self, tmp_path: Path):
        """Test error when the top level is not an object."""
        path = tmp_path / "posts.json"
        path.write_text('["a", "b"]')

        with pytest.raises(StoreError, match="JSON object"):
            JSONDocumentStore(path)

    def test_non_string_body(self, tmp_path: Path):
        """Test error when a body is not text."""
        path = tmp_path / "posts.json"
        path.write_text('{"1": 42}')

        with pytest.raises(StoreError, match="not a string"):
            JSONDocumentStore(path)

    def test_missing_file(self, tmp_path: Path):
        """Test error when the export does not exist."""
        with pytest.raises(StoreError, match="Cannot read"):
            JSONDocumentStore(tmp_path / "missing.json")

    def test_failed_write_keeps_export_intact(self, tmp_path: Path):
        """Test that a write dying halfway leaves the previous file readable."""
        path = tmp_path / "posts.json"
        original = {"a": "keep me", "b": "[vc_row]B[/vc_row]"}
        path.write_text(json.dumps(original), encoding="utf-8")

        def half_write(data, f, **kwargs):
            f.write(json.dumps(data, **kwargs)[:10])
            raise OSError(28, "No space left on device")

        store = JSONDocumentStore(path)
        with patch("shortcode_stripper.stores.json_store.json.dump", side_effect=half_write):
            result = BatchRunner(store).run()

        assert result.failed == 1
        assert store.get_body("b") == "[vc_row]B[/vc_row]"
        assert json.loads(path.read_text(encoding="utf-8")) == original
        assert [p.name for p in tmp_path.iterdir()] == ["posts.json"]
