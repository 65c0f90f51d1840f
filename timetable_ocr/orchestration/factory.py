"""
Фабрика Corpus Orchestrator с настройками по умолчанию.
"""

from pathlib import Path
from typing import Optional

from loguru import logger

from config.settings import (
    SOURCE_DIR,
    OUTPUT_DIR,
    TEMP_DIR,
    CORPUS_OUTPUT_FILE,
    CORPUS_REPORT_FILE,
    MAX_WORKERS,
    DEFAULT_TEMPLATE,
)
from ..extraction.application.factory import ExtractionComponentFactory
from ..extraction.domain.interfaces import ITextExtractor, IOCRProvider
from ..parsing.document_parser import DocumentParser
from .corpus_orchestrator import CorpusOrchestrator


def create_corpus_orchestrator(
    source_dir: Path = SOURCE_DIR,
    output_dir: Path = OUTPUT_DIR,
    scratch_dir: Path = TEMP_DIR,
    corpus_output_file: Path = CORPUS_OUTPUT_FILE,
    template: str = DEFAULT_TEMPLATE,
    max_workers: int = MAX_WORKERS,
    ignore_ocr: bool = False,
    text_extractor: Optional[ITextExtractor] = None,
    ocr_provider: Optional[IOCRProvider] = None,
    report_file: Optional[Path] = CORPUS_REPORT_FILE
) -> CorpusOrchestrator:
    """
    Собирает оркестратор: pdfplumber + ocrmypdf + парсер шаблона.

    Битый шаблон падает здесь, до обработки первого документа.
    """
    logger.info(f"[Orchestrator] Сборка компонентов (шаблон {template}, ignore_ocr={ignore_ocr})")

    extraction_pipeline = ExtractionComponentFactory.create_extraction_pipeline(
        text_extractor=text_extractor,
        ocr_provider=ocr_provider,
        scratch_dir=scratch_dir,
        ignore_ocr=ignore_ocr
    )
    document_parser = DocumentParser.from_template(template)

    return CorpusOrchestrator(
        extraction_pipeline=extraction_pipeline,
        document_parser=document_parser,
        source_dir=source_dir,
        output_dir=output_dir,
        corpus_output_file=corpus_output_file,
        max_workers=max_workers,
        report_file=report_file
    )
