"""
Адаптеры домена Extraction.

Обёртки внешних инструментов (pdfplumber, ocrmypdf), реализующие интерфейсы домена.
"""

from .pdfplumber_text_extractor import PdfPlumberTextExtractor
from .ocrmypdf_adapter import OcrMyPdfAdapter

__all__ = [
    "PdfPlumberTextExtractor",
    "OcrMyPdfAdapter",
]
