"""
Correction Stage - OCR исправление документов, не прошедших triage.

Политика:
  - артефакт уже есть в scratch-директории -> переиспользуем, OCR не вызываем
  - OCR отключён -> SKIPPED
  - иначе ровно один вызов OCR, без повторов -> CORRECTED или FAILED

При FAILED дальше используется исходный документ (best-effort).
"""

from pathlib import Path
from typing import Optional

from loguru import logger

from contracts.d1_extraction_dto import CorrectionOutcome, CorrectionStatus
from ..domain.interfaces import IOCRProvider
from ..domain.exceptions import OCRProcessingError
from ..infrastructure.file_manager import ExtractionFileManager


class CorrectionStage:
    """Correction Pipeline для одного документа."""

    def __init__(
        self,
        ocr_provider: IOCRProvider,
        scratch_dir: Path,
        file_manager: Optional[ExtractionFileManager] = None,
        ignore_ocr: bool = False
    ):
        self.ocr_provider = ocr_provider
        self.scratch_dir = scratch_dir
        self.file_manager = file_manager or ExtractionFileManager()
        self.ignore_ocr = ignore_ocr

    def correct(self, document_path: Path) -> CorrectionOutcome:
        corrected = self.file_manager.corrected_path(document_path, self.scratch_dir)

        if corrected.exists():
            logger.info(f"[Correction] {document_path.name}: используем готовый артефакт {corrected}")
            return CorrectionOutcome(CorrectionStatus.ALREADY_CORRECTED, corrected)

        if self.ignore_ocr:
            logger.info(f"[Correction] {document_path.name}: OCR отключён, пропуск")
            return CorrectionOutcome(CorrectionStatus.SKIPPED, detail="ocr disabled")

        self.file_manager.ensure_directory(self.scratch_dir)
        logger.info(f"[Correction] {document_path.name}: запуск OCR")

        try:
            success = self.ocr_provider.correct(document_path, corrected)
        except OCRProcessingError as e:
            logger.warning(f"[Correction] {document_path.name}: ошибка OCR провайдера: {e.message}")
            success = False

        if not success:
            # Недописанный файл иначе будет принят за готовый артефакт в следующем запуске
            self.file_manager.remove_file(corrected)
            logger.warning(f"[Correction] {document_path.name}: OCR не удался, используем исходный документ")
            return CorrectionOutcome(CorrectionStatus.FAILED, detail="ocr failed")

        if not corrected.exists():
            logger.warning(f"[Correction] {document_path.name}: OCR не создал {corrected}")
            return CorrectionOutcome(CorrectionStatus.FAILED, detail="ocr produced no output")

        logger.info(f"[Correction] {document_path.name}: исправлен -> {corrected}")
        return CorrectionOutcome(CorrectionStatus.CORRECTED, corrected)
