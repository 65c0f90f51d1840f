"""
Фабрика для создания компонентов домена Extraction.

Предоставляет методы для сборки пайплайна extraction с настройками
по умолчанию или с подменёнными компонентами.
"""

from pathlib import Path
from typing import Optional

from loguru import logger

from config.settings import TEMP_DIR
from ..domain.interfaces import ITextExtractor, IOCRProvider
from ..infrastructure.adapters.pdfplumber_text_extractor import PdfPlumberTextExtractor
from ..infrastructure.adapters.ocrmypdf_adapter import OcrMyPdfAdapter
from ..infrastructure.file_manager import ExtractionFileManager
from ..triage.quality_classifier import DocumentQualityClassifier
from ..correction.stage import CorrectionStage
from .extraction_pipeline import ExtractionPipeline


class ExtractionComponentFactory:
    """Фабрика для создания компонентов домена Extraction."""

    @staticmethod
    def create_text_extractor() -> ITextExtractor:
        logger.debug("[Extraction] Создание извлекателя текста")
        return PdfPlumberTextExtractor()

    @staticmethod
    def create_ocr_provider() -> IOCRProvider:
        logger.debug("[Extraction] Создание OCR провайдера")
        return OcrMyPdfAdapter()

    @staticmethod
    def create_extraction_pipeline(
        text_extractor: Optional[ITextExtractor] = None,
        ocr_provider: Optional[IOCRProvider] = None,
        file_manager: Optional[ExtractionFileManager] = None,
        scratch_dir: Optional[Path] = None,
        ignore_ocr: bool = False
    ) -> ExtractionPipeline:
        """
        Создает пайплайн extraction.

        Args:
            text_extractor: Извлекатель текста (по умолчанию pdfplumber)
            ocr_provider: OCR провайдер (по умолчанию ocrmypdf)
            file_manager: Менеджер файлов
            scratch_dir: Директория исправленных документов (по умолчанию TEMP_DIR)
            ignore_ocr: Не вызывать OCR для повреждённых документов

        Returns:
            Сконфигурированный ExtractionPipeline
        """
        text_extractor = text_extractor or ExtractionComponentFactory.create_text_extractor()
        ocr_provider = ocr_provider or ExtractionComponentFactory.create_ocr_provider()
        file_manager = file_manager or ExtractionFileManager()

        correction_stage = CorrectionStage(
            ocr_provider=ocr_provider,
            scratch_dir=scratch_dir or TEMP_DIR,
            file_manager=file_manager,
            ignore_ocr=ignore_ocr
        )

        return ExtractionPipeline(
            text_extractor=text_extractor,
            correction_stage=correction_stage,
            quality_classifier=DocumentQualityClassifier(),
            file_manager=file_manager
        )
