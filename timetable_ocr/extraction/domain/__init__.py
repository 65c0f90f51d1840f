"""
Domain слой домена Extraction.

Содержит интерфейсы (абстрактные классы) и исключения для Extraction домена.
"""

from .interfaces import (
    ITextExtractor,
    IOCRProvider,
    IDocumentSource,
)

from .exceptions import (
    ExtractionError,
    TextExtractionError,
    OCRProcessingError,
    OCRProviderError,
    DocumentDiscoveryError,
    DownloadError,
    ExtractionFileSystemError,
    ExtractionFileWriteError,
)

__all__ = [
    # Интерфейсы
    "ITextExtractor",
    "IOCRProvider",
    "IDocumentSource",

    # Исключения
    "ExtractionError",
    "TextExtractionError",
    "OCRProcessingError",
    "OCRProviderError",
    "DocumentDiscoveryError",
    "DownloadError",
    "ExtractionFileSystemError",
    "ExtractionFileWriteError",
]
