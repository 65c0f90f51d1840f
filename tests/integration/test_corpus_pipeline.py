"""
Интеграционные тесты Corpus Orchestrator.

End-to-end: PDF в source -> triage/OCR -> Document Parser -> reduce -> JSON.
Извлечение текста и OCR подменены, шаблон zpgsa и парсер настоящие.
"""

import json
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from contracts.d1_extraction_dto import CorrectionStatus
from contracts.d2_parsing_dto import OperatingDays
from timetable_ocr.extraction.domain.exceptions import DocumentDiscoveryError
from timetable_ocr.extraction.domain.interfaces import ITextExtractor
from timetable_ocr.orchestration import create_corpus_orchestrator
from timetable_ocr.parsing.domain.exceptions import ParsingFileWriteError

SEPARATOR = "Organizator:ZPGSA, ul. Piastowska 19a, Tel: 74 832 87 78"
GARBAGE_TEXT = "\x01\x02\x03" * 50


def timetable(stop_id, section, times, line="5", destination="Central"):
    return (
        f"LINIA: {line} KIERUNEK: {destination}\n"
        f"Przystanek: Main Street {stop_id} Czas odjazdu\n"
        f"{section} {times}\n"
        "Legenda: A - Kurs do: Downtown przez Oak\n"
        "Operator: PKS Dzierżoniów\n"
        f"{SEPARATOR}\nStrona 1/1\n"
    )


class FakeTextExtractor(ITextExtractor):
    """Текст по имени файла; для неизвестных файлов - ошибка чтения."""

    def __init__(self, texts):
        self.texts = texts

    def extract_text(self, document_path: Path) -> str:
        key = f"{document_path.parent.name}/{document_path.name}"
        value = self.texts[key]
        if isinstance(value, Exception):
            raise value
        return value


@pytest.fixture
def workspace(tmp_path):
    paths = {
        "source": tmp_path / "source",
        "output": tmp_path / "output",
        "temp": tmp_path / "temp",
        "corpus": tmp_path / "output.json",
        "report": tmp_path / "report.json",
    }
    paths["source"].mkdir()
    return paths


def add_documents(workspace, *names):
    for name in names:
        (workspace["source"] / name).write_bytes(b"%PDF-1.4")


def make_orchestrator(workspace, texts, ocr_provider=None, ignore_ocr=False):
    return create_corpus_orchestrator(
        source_dir=workspace["source"],
        output_dir=workspace["output"],
        scratch_dir=workspace["temp"],
        corpus_output_file=workspace["corpus"],
        template="zpgsa",
        max_workers=2,
        ignore_ocr=ignore_ocr,
        text_extractor=FakeTextExtractor(texts),
        ocr_provider=ocr_provider or MagicMock(),
        report_file=workspace["report"],
    )


class TestCorpusReduce:

    def test_two_documents_share_a_stop(self, workspace):
        """A (будни) и B (субботы) для одной остановки 1001 -> обе записи в сводной карте."""
        add_documents(workspace, "a.pdf", "b.pdf")
        texts = {
            "source/a.pdf": timetable("1001", "Dni robocze", "5:10 6:15A"),
            "source/b.pdf": timetable("1001", "Soboty", "7:05", line="7")
            + timetable("0042", "Niedziele i święta", "9:30", line="7"),
        }

        result = make_orchestrator(workspace, texts).run()

        assert list(result.stops) == ["0042", "1001"]
        assert [(r.time, r.operating_days, r.destination) for r in result.stops["1001"]] == [
            ("05:10", OperatingDays.MON_FRI, "Central"),
            ("06:15", OperatingDays.MON_FRI, "Downtown"),
            ("07:05", OperatingDays.SATURDAY, "Central"),
        ]
        assert result.records_count == 4
        assert result.failed_documents == []

    def test_output_files(self, workspace):
        add_documents(workspace, "a.pdf")
        texts = {"source/a.pdf": timetable("1001", "Dni robocze", "5:10")}

        make_orchestrator(workspace, texts).run()

        corpus = json.loads(workspace["corpus"].read_text(encoding="utf-8"))
        per_document = json.loads((workspace["output"] / "a.json").read_text(encoding="utf-8"))

        assert corpus == per_document == {
            "1001": [{
                "time": "05:10",
                "line": "5",
                "destination": "Central",
                "operating_days": "mon_fri",
                "school_restriction": "normal",
            }]
        }

    def test_repeated_run_is_deterministic(self, workspace):
        add_documents(workspace, "a.pdf", "b.pdf", "c.pdf")
        texts = {
            "source/a.pdf": timetable("1001", "Dni robocze", "5:10"),
            "source/b.pdf": timetable("1001", "Dni robocze", "5:20"),
            "source/c.pdf": timetable("1001", "Dni robocze", "5:30"),
        }
        orchestrator = make_orchestrator(workspace, texts)

        first = orchestrator.run()
        second = orchestrator.run()

        assert first.stops == second.stops
        assert [r.time for r in first.stops["1001"]] == ["05:10", "05:20", "05:30"]


class TestCorrectionInCorpus:

    def test_garbage_document_is_corrected(self, workspace):
        add_documents(workspace, "scan.pdf")
        texts = {
            "source/scan.pdf": GARBAGE_TEXT,
            "temp/scan.pdf": timetable("1001", "Dni robocze", "5:10"),
        }

        def fake_ocr(input_path, output_path):
            output_path.write_bytes(b"%PDF-1.4 ocr")
            return True

        ocr_provider = MagicMock()
        ocr_provider.correct.side_effect = fake_ocr

        result = make_orchestrator(workspace, texts, ocr_provider).run()

        report = result.documents[0]
        assert report.verdict == "needs_correction"
        assert report.correction == CorrectionStatus.CORRECTED.value
        assert list(result.stops) == ["1001"]
        assert (workspace["temp"] / "scan.txt").exists()

    def test_ignore_ocr(self, workspace):
        add_documents(workspace, "scan.pdf")
        ocr_provider = MagicMock()

        result = make_orchestrator(
            workspace, {"source/scan.pdf": GARBAGE_TEXT}, ocr_provider, ignore_ocr=True
        ).run()

        ocr_provider.correct.assert_not_called()
        assert result.documents[0].correction == CorrectionStatus.SKIPPED.value
        assert result.documents[0].succeeded
        assert result.stops == {}


class TestFailureIsolation:

    def test_broken_document_does_not_stop_others(self, workspace):
        add_documents(workspace, "a.pdf", "broken.pdf", "c.pdf")
        texts = {
            "source/a.pdf": timetable("1001", "Dni robocze", "5:10"),
            "source/broken.pdf": RuntimeError("pdf parser crashed"),
            "source/c.pdf": timetable("2002", "Soboty", "7:05"),
        }

        result = make_orchestrator(workspace, texts).run()

        assert list(result.stops) == ["1001", "2002"]
        assert [d.name for d in result.failed_documents] == ["broken.pdf"]
        assert "pdf parser crashed" in result.failed_documents[0].error
        assert not (workspace["output"] / "broken.json").exists()

    def test_report_per_document(self, workspace):
        add_documents(workspace, "a.pdf")
        texts = {"source/a.pdf": timetable("1001", "Dni robocze", "5:10 12:3x")}

        result = make_orchestrator(workspace, texts).run()
        report = result.to_dict()["documents"][0]

        assert report["name"] == "a.pdf"
        assert report["verdict"] == "trustworthy"
        assert report["records"] == 1
        assert report["diagnostics"] == [{"segment_index": 0, "kind": "token", "detail": "12:3x"}]


class TestRunLevelErrors:

    def test_empty_corpus(self, workspace):
        with pytest.raises(DocumentDiscoveryError):
            make_orchestrator(workspace, {}).run()

    def test_empty_explicit_list(self, workspace):
        with pytest.raises(DocumentDiscoveryError):
            make_orchestrator(workspace, {}).run(documents=[])

    def test_unwritable_output_dir_is_fatal(self, workspace):
        """На месте директории вывода файл: запуск падает до OCR и ничего не пишет."""
        add_documents(workspace, "a.pdf")
        workspace["output"].write_text("not a directory", encoding="utf-8")
        extractor = MagicMock(spec=ITextExtractor)

        orchestrator = create_corpus_orchestrator(
            source_dir=workspace["source"],
            output_dir=workspace["output"],
            scratch_dir=workspace["temp"],
            corpus_output_file=workspace["corpus"],
            template="zpgsa",
            text_extractor=extractor,
            ocr_provider=MagicMock(),
            report_file=workspace["report"],
        )

        with pytest.raises(ParsingFileWriteError):
            orchestrator.run()

        extractor.extract_text.assert_not_called()
        assert not workspace["corpus"].exists()
        assert not workspace["report"].exists()

    def test_document_write_failure_is_fatal(self, workspace):
        """Ошибка записи JSON документа не превращается в пустой корпус с кодом 0."""
        add_documents(workspace, "a.pdf")
        workspace["output"].mkdir()
        # save_json не может заменить директорию файлом
        (workspace["output"] / "a.json").mkdir()
        texts = {"source/a.pdf": timetable("1001", "Dni robocze", "5:10")}

        with pytest.raises(ParsingFileWriteError):
            make_orchestrator(workspace, texts).run()

        assert not workspace["corpus"].exists()


class TestRunReport:

    def test_report_file_written(self, workspace):
        add_documents(workspace, "a.pdf", "broken.pdf")
        texts = {
            "source/a.pdf": timetable("1001", "Dni robocze", "5:10 12:3x"),
            "source/broken.pdf": RuntimeError("pdf parser crashed"),
        }

        result = make_orchestrator(workspace, texts).run()

        report = json.loads(workspace["report"].read_text(encoding="utf-8"))
        assert report["stops"] == 1
        assert report["records"] == 1
        assert [d["name"] for d in report["documents"]] == ["a.pdf", "broken.pdf"]
        assert report["documents"][0]["diagnostics"] == [
            {"segment_index": 0, "kind": "token", "detail": "12:3x"}
        ]
        assert "pdf parser crashed" in report["documents"][1]["error"]
        assert report == result.to_dict()
