"""
Адаптер pdfplumber, реализующий интерфейс ITextExtractor (домен Extraction).

Извлекает текстовый слой PDF постранично и склеивает в одну строку.
Геометрия страницы не используется: дальше текст всё равно нормализуется по пробелам.
"""

from pathlib import Path

import pdfplumber
from loguru import logger

from ...domain.interfaces import ITextExtractor
from ...domain.exceptions import TextExtractionError


class PdfPlumberTextExtractor(ITextExtractor):
    """Извлечение текста из PDF через pdfplumber."""

    def extract_text(self, document_path: Path) -> str:
        """
        Извлекает текст всех страниц документа.

        Raises:
            TextExtractionError: Файл не открылся или не является PDF
        """
        try:
            with pdfplumber.open(document_path) as pdf:
                pages = [page.extract_text() or "" for page in pdf.pages]
        except Exception as e:
            raise TextExtractionError(
                message=f"Не удалось извлечь текст: {document_path}",
                component="PdfPlumberTextExtractor",
                original_error=e
            )

        text = "\n".join(pages)
        logger.debug(
            f"[TextExtractor] {document_path.name}: {len(pages)} стр., {len(text)} символов"
        )
        return text
