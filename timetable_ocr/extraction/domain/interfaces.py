"""
Интерфейсы (абстрактные классы) для домена Extraction.

Домен Extraction отвечает за:
1. Получение PDF расписаний
2. Извлечение текстового слоя
3. Triage качества текста и OCR исправление
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import List


class ITextExtractor(ABC):
    """Интерфейс для извлечения текстового слоя из документа."""

    @abstractmethod
    def extract_text(self, document_path: Path) -> str:
        """
        Извлекает весь текст документа.

        Args:
            document_path: Путь к PDF

        Returns:
            Сырой текст документа

        Raises:
            TextExtractionError: Если текст извлечь не удалось
        """
        pass


class IOCRProvider(ABC):
    """Интерфейс для внешнего OCR (домен Extraction)."""

    @abstractmethod
    def correct(self, input_path: Path, output_path: Path) -> bool:
        """
        Прогоняет документ через OCR и сохраняет исправленную копию.

        Args:
            input_path: Исходный PDF
            output_path: Куда сохранить исправленный PDF

        Returns:
            True если OCR завершился успешно

        Raises:
            OCRProviderError: OCR инструмент недоступен
        """
        pass


class IDocumentSource(ABC):
    """Интерфейс для источника PDF расписаний."""

    @abstractmethod
    def download(self, target_dir: Path) -> List[Path]:
        """
        Скачивает все документы в директорию.

        Returns:
            Список сохранённых файлов
        """
        pass
