"""
Пайплайн для домена Extraction.

Готовит один PDF к парсингу:
1. Извлечение текстового слоя
2. Triage качества текста
3. OCR исправление (только для needs_correction)

ЦКП: PreparedDocument - текст, который можно отдавать в домен Parsing.
"""

from pathlib import Path
from typing import Optional

from loguru import logger

from contracts.d1_extraction_dto import (
    CorrectionOutcome,
    DocumentQualityVerdict,
    PreparedDocument,
)
from ..domain.interfaces import ITextExtractor
from ..domain.exceptions import TextExtractionError, ExtractionFileWriteError
from ..triage.quality_classifier import DocumentQualityClassifier
from ..correction.stage import CorrectionStage
from ..infrastructure.file_manager import ExtractionFileManager


class ExtractionPipeline:
    """
    Пайплайн домена Extraction.

    Координирует:
    1. Извлечение текста (ITextExtractor)
    2. Triage (DocumentQualityClassifier)
    3. Correction (CorrectionStage)
    """

    def __init__(
        self,
        text_extractor: ITextExtractor,
        correction_stage: CorrectionStage,
        quality_classifier: Optional[DocumentQualityClassifier] = None,
        file_manager: Optional[ExtractionFileManager] = None
    ):
        self.text_extractor = text_extractor
        self.correction_stage = correction_stage
        self.quality_classifier = quality_classifier or DocumentQualityClassifier()
        self.file_manager = file_manager or ExtractionFileManager()

        logger.debug("[Extraction] Pipeline инициализирован")

    def prepare(self, document_path: Path) -> PreparedDocument:
        """
        Обрабатывает документ через triage и, если нужно, OCR.

        Args:
            document_path: Путь к исходному PDF

        Returns:
            PreparedDocument с текстом для парсинга
        """
        logger.debug(f"[Extraction] Обработка: {document_path.name}")

        text = self._extract_or_empty(document_path)
        verdict = self.quality_classifier.classify(text)

        if verdict == DocumentQualityVerdict.TRUSTWORTHY:
            return PreparedDocument(source=document_path, text=text, verdict=verdict)

        logger.info(f"[Extraction] {document_path.name} повреждён, требуется OCR")
        outcome = self.correction_stage.correct(document_path)

        if outcome.has_document:
            text = self._read_corrected(outcome, fallback=text)

        return PreparedDocument(
            source=document_path,
            text=text,
            verdict=verdict,
            correction=outcome
        )

    def _extract_or_empty(self, document_path: Path) -> str:
        # ExtractionFailure: документ без текста = needs_correction, не ошибка запуска
        try:
            return self.text_extractor.extract_text(document_path)
        except TextExtractionError as e:
            logger.warning(f"[Extraction] {document_path.name}: текст не извлечён: {e.message}")
            return ""

    def _read_corrected(self, outcome: CorrectionOutcome, fallback: str) -> str:
        """Читает текст исправленного документа и пишет рядом .txt."""
        corrected = outcome.document
        try:
            text = self.text_extractor.extract_text(corrected)
        except TextExtractionError as e:
            logger.warning(
                f"[Extraction] Исправленный документ нечитаем: {corrected.name} ({e.message}), "
                "используем исходный текст"
            )
            return fallback

        try:
            self.file_manager.save_text(text, corrected.with_suffix(".txt"))
        except ExtractionFileWriteError as e:
            logger.warning(f"[Extraction] Не удалось сохранить текст исправленного документа: {e}")

        return text
