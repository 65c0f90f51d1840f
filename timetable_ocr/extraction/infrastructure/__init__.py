"""
Инфраструктурный слой домена Extraction.

Содержит адаптеры внешних инструментов и файловые операции.
"""

from .adapters.pdfplumber_text_extractor import PdfPlumberTextExtractor
from .adapters.ocrmypdf_adapter import OcrMyPdfAdapter
from .file_manager import ExtractionFileManager
from .timetable_downloader import TimetableDownloader

__all__ = [
    # Адаптеры
    "PdfPlumberTextExtractor",
    "OcrMyPdfAdapter",

    # Менеджеры
    "ExtractionFileManager",
    "TimetableDownloader",
]
