"""
Unit-тесты для ParsingFileManager (JSON вывод карт остановок).
"""

import json

import pytest

from contracts.d2_parsing_dto import DepartureRecord
from timetable_ocr.parsing.infrastructure.file_manager import ParsingFileManager
from timetable_ocr.parsing.domain.exceptions import ParsingFileWriteError


@pytest.fixture
def file_manager():
    return ParsingFileManager()


@pytest.fixture
def stops():
    return {
        "2002": [DepartureRecord(time="07:05", line="5", destination="Dzierżoniów Rynek",
                                 operating_days="saturday")],
        "1001": [],
    }


class TestParsingFileManager:

    def test_save_stop_map(self, file_manager, stops, tmp_path):
        path = file_manager.save_stop_map(stops, tmp_path / "out" / "linia_5.json")

        raw = path.read_text(encoding="utf-8")
        data = json.loads(raw)

        assert "Dzierżoniów" in raw
        assert list(data) == ["2002", "1001"]
        assert data["1001"] == []
        assert data["2002"] == [{
            "time": "07:05",
            "line": "5",
            "destination": "Dzierżoniów Rynek",
            "operating_days": "saturday",
            "school_restriction": "normal",
        }]

    def test_pretty_printed(self, file_manager, stops, tmp_path):
        path = file_manager.save_stop_map(stops, tmp_path / "linia_5.json")
        assert '\n  "2002": [' in path.read_text(encoding="utf-8")

    def test_unwritable_path(self, file_manager, stops, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("file, not a directory")

        with pytest.raises(ParsingFileWriteError):
            file_manager.save_stop_map(stops, blocker / "output.json")

    def test_document_output_path(self, file_manager, tmp_path):
        assert file_manager.document_output_path("linia_5.pdf", tmp_path) == tmp_path / "linia_5.json"

    def test_ensure_directory(self, file_manager, tmp_path):
        path = file_manager.ensure_directory(tmp_path / "a" / "b")
        assert path.is_dir()

    def test_ensure_directory_over_file(self, file_manager, tmp_path):
        blocker = tmp_path / "output"
        blocker.write_text("file, not a directory")

        with pytest.raises(ParsingFileWriteError):
            file_manager.ensure_directory(blocker)
