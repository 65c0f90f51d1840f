"""
Unit-тесты для ExtractionPipeline.prepare (triage -> correction -> итоговый текст).
"""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from contracts.d1_extraction_dto import CorrectionOutcome, CorrectionStatus, DocumentQualityVerdict
from timetable_ocr.extraction.application.extraction_pipeline import ExtractionPipeline
from timetable_ocr.extraction.domain.exceptions import TextExtractionError

GOOD_TEXT = "LINIA: 5 KIERUNEK: Rynek Przystanek: Dworzec 1001 Czas odjazdu Dni robocze 5:10 6:15 7:20 8:25"
GARBAGE_TEXT = "\x01\x02" * 60


@pytest.fixture
def source(tmp_path):
    return tmp_path / "source" / "linia_5.pdf"


@pytest.fixture
def corrected(tmp_path):
    path = tmp_path / "temp" / "linia_5.pdf"
    path.parent.mkdir(parents=True)
    path.write_bytes(b"%PDF-1.4 ocr")
    return path


def make_pipeline(texts, outcome=None):
    """
    Пайплайн с фейковым извлекателем (путь -> текст или исключение)
    и замоканной CorrectionStage.
    """
    def extract(path):
        value = texts[Path(path)]
        if isinstance(value, Exception):
            raise value
        return value

    text_extractor = MagicMock()
    text_extractor.extract_text.side_effect = extract

    correction_stage = MagicMock()
    correction_stage.correct.return_value = outcome

    return ExtractionPipeline(text_extractor=text_extractor, correction_stage=correction_stage)


class TestExtractionPipeline:

    def test_trustworthy_document_is_not_corrected(self, source):
        pipeline = make_pipeline({source: GOOD_TEXT})

        prepared = pipeline.prepare(source)

        assert prepared.verdict == DocumentQualityVerdict.TRUSTWORTHY
        assert prepared.text == GOOD_TEXT
        assert prepared.correction is None
        pipeline.correction_stage.correct.assert_not_called()

    def test_corrected_text_replaces_garbage(self, source, corrected):
        outcome = CorrectionOutcome(CorrectionStatus.CORRECTED, corrected)
        pipeline = make_pipeline({source: GARBAGE_TEXT, corrected: GOOD_TEXT}, outcome)

        prepared = pipeline.prepare(source)

        assert prepared.verdict == DocumentQualityVerdict.NEEDS_CORRECTION
        assert prepared.text == GOOD_TEXT
        assert prepared.correction.status == CorrectionStatus.CORRECTED

    def test_corrected_text_sidecar_is_written(self, source, corrected):
        outcome = CorrectionOutcome(CorrectionStatus.ALREADY_CORRECTED, corrected)
        pipeline = make_pipeline({source: GARBAGE_TEXT, corrected: GOOD_TEXT}, outcome)

        pipeline.prepare(source)

        assert corrected.with_suffix(".txt").read_text(encoding="utf-8") == GOOD_TEXT

    def test_failed_correction_falls_back_to_original_text(self, source):
        outcome = CorrectionOutcome(CorrectionStatus.FAILED, detail="ocr failed")
        pipeline = make_pipeline({source: GARBAGE_TEXT}, outcome)

        prepared = pipeline.prepare(source)

        assert prepared.text == GARBAGE_TEXT
        assert prepared.correction.status == CorrectionStatus.FAILED

    def test_unreadable_document_goes_to_correction(self, source, corrected):
        """Ошибка извлечения = пустой текст = needs_correction, а не ошибка документа."""
        outcome = CorrectionOutcome(CorrectionStatus.CORRECTED, corrected)
        pipeline = make_pipeline(
            {source: TextExtractionError("no text layer"), corrected: GOOD_TEXT}, outcome
        )

        prepared = pipeline.prepare(source)

        assert prepared.verdict == DocumentQualityVerdict.NEEDS_CORRECTION
        assert prepared.text == GOOD_TEXT
        pipeline.correction_stage.correct.assert_called_once_with(source)

    def test_unreadable_corrected_document_falls_back(self, source, corrected):
        outcome = CorrectionOutcome(CorrectionStatus.CORRECTED, corrected)
        pipeline = make_pipeline(
            {source: GARBAGE_TEXT, corrected: TextExtractionError("broken output")}, outcome
        )

        prepared = pipeline.prepare(source)

        assert prepared.text == GARBAGE_TEXT
        assert not corrected.with_suffix(".txt").exists()
