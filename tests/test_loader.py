"""Tests for schedule data loading."""

import json

import pytest

from schedule_export.data.loader import load_schedule_data
from schedule_export.data.models import DAYS
from schedule_export.errors import DataValidationError


@pytest.fixture
def valid_data():
    """Minimal valid schedule data."""
    return {
        "teachers": [{"id": "t1", "name": "Ali", "subject": "رياضيات"}],
        "slots": [
            {"teacherId": "t1", "day": DAYS[0], "period": 1, "grade": 10, "section": 2}
        ],
        "teacherNotes": {"t1": "ملاحظة"},
    }


class TestFileLoading:
    """Tests for loading data from files."""

    def test_load_valid_file(self, valid_data, tmp_path):
        """Should load teachers, slots and notes."""
        path = tmp_path / "data.json"
        path.write_text(json.dumps(valid_data, ensure_ascii=False), encoding="utf-8")

        data = load_schedule_data(path)

        assert data.teachers[0].name == "Ali"
        assert data.slots[0].grade == 10
        assert data.teacher_notes["t1"] == "ملاحظة"

    def test_load_from_string_path(self, valid_data, tmp_path):
        path = tmp_path / "data.json"
        path.write_text(json.dumps(valid_data), encoding="utf-8")

        data = load_schedule_data(str(path))
        assert len(data.slots) == 1

    def test_load_nonexistent_file(self):
        """Should raise FileNotFoundError for missing files."""
        with pytest.raises(FileNotFoundError):
            load_schedule_data("/nonexistent/path.json")

    def test_load_invalid_json(self, tmp_path):
        """Should raise JSONDecodeError for invalid JSON."""
        path = tmp_path / "data.json"
        path.write_text("not valid json {", encoding="utf-8")

        with pytest.raises(json.JSONDecodeError):
            load_schedule_data(path)

    def test_wrong_shape(self, valid_data, tmp_path):
        """Slots missing required fields should raise DataValidationError."""
        del valid_data["slots"][0]["grade"]
        path = tmp_path / "data.json"
        path.write_text(json.dumps(valid_data), encoding="utf-8")

        with pytest.raises(DataValidationError, match="grade"):
            load_schedule_data(path)

    def test_top_level_must_be_object(self, tmp_path):
        path = tmp_path / "data.json"
        path.write_text("[]", encoding="utf-8")

        with pytest.raises(DataValidationError, match="JSON object"):
            load_schedule_data(path)
