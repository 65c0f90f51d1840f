"""
Исключения для домена Extraction.

Специфичные для получения текста из PDF и OCR исправления ошибки.
"""

from typing import Optional


class ExtractionError(Exception):
    """Базовое исключение для ошибок домена Extraction."""

    def __init__(
        self,
        message: str,
        component: Optional[str] = None,
        original_error: Optional[Exception] = None
    ):
        self.message = message
        self.component = component
        self.original_error = original_error
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        msg = f"Extraction Error: {self.message}"
        if self.component:
            msg += f" (Component: {self.component})"
        if self.original_error:
            msg += f" [Original: {type(self.original_error).__name__}: {str(self.original_error)}]"
        return msg


class TextExtractionError(ExtractionError):
    """Не удалось извлечь текст из документа."""
    pass


class OCRProcessingError(ExtractionError):
    """Ошибка обработки OCR."""
    pass


class OCRProviderError(OCRProcessingError):
    """Ошибка провайдера OCR (ocrmypdf)."""
    pass


class DocumentDiscoveryError(ExtractionError):
    """Не найдено ни одного документа для обработки."""
    pass


class DownloadError(ExtractionError):
    """Ошибка скачивания расписаний."""
    pass


class ExtractionFileSystemError(ExtractionError):
    """Ошибка файловой системы в домене Extraction."""
    pass


class ExtractionFileWriteError(ExtractionFileSystemError):
    """Ошибка записи файла в домене Extraction."""
    pass
