"""
Менеджер файлов для домена Extraction.

Реализует файловые операции специфичные для домена Extraction:
поиск PDF, scratch-директория с исправленными документами, очистка директорий.
"""

from pathlib import Path
from typing import List, Optional

from loguru import logger

from config.settings import SUPPORTED_DOCUMENT_FORMATS
from ..domain.exceptions import ExtractionFileWriteError


class ExtractionFileManager:
    """Менеджер файлов для домена Extraction."""

    def __init__(self, extensions: Optional[List[str]] = None):
        self.extensions = [ext.lower() for ext in (extensions or SUPPORTED_DOCUMENT_FORMATS)]

    def get_document_files(self, directory_path: Path) -> List[Path]:
        """
        Рекурсивно ищет документы в директории.

        Args:
            directory_path: Путь к директории

        Returns:
            Отсортированный список путей (пустой, если директории нет)
        """
        if not directory_path.exists():
            logger.warning(f"[Extraction] Директория не существует: {directory_path}")
            return []

        documents = [
            path for path in directory_path.rglob("*")
            if path.is_file() and path.suffix.lower() in self.extensions
        ]
        return sorted(documents)

    def corrected_path(self, document_path: Path, scratch_dir: Path) -> Path:
        """Путь исправленного артефакта: то же имя файла в scratch-директории."""
        return scratch_dir / document_path.name

    def save_text(self, text: str, file_path: Path) -> Path:
        """
        Сохраняет текст в файл (UTF-8).

        Raises:
            ExtractionFileWriteError: Если не удалось сохранить файл
        """
        try:
            file_path.parent.mkdir(parents=True, exist_ok=True)
            file_path.write_text(text, encoding="utf-8")
            logger.debug(f"[Extraction] Текст сохранен: {file_path}")
            return file_path
        except (IOError, OSError) as e:
            raise ExtractionFileWriteError(
                message=f"Не удалось сохранить текст: {file_path}",
                component="ExtractionFileManager",
                original_error=e
            )

    def ensure_directory(self, directory_path: Path) -> Path:
        try:
            directory_path.mkdir(parents=True, exist_ok=True)
            return directory_path
        except (IOError, OSError) as e:
            raise ExtractionFileWriteError(
                message=f"Не удалось создать директорию: {directory_path}",
                component="ExtractionFileManager",
                original_error=e
            )

    def clear_directory(self, directory_path: Path) -> int:
        """
        Удаляет обычные файлы в директории (поддиректории не трогает).

        Returns:
            Количество удалённых файлов
        """
        if not directory_path.exists():
            return 0

        removed = 0
        try:
            for entry in directory_path.iterdir():
                if entry.is_file():
                    entry.unlink()
                    removed += 1
        except OSError as e:
            raise ExtractionFileWriteError(
                message=f"Не удалось очистить директорию: {directory_path}",
                component="ExtractionFileManager",
                original_error=e
            )

        logger.debug(f"[Extraction] Очищено {removed} файлов в {directory_path}")
        return removed

    def remove_file(self, file_path: Path) -> None:
        """Удаляет файл, если он существует."""
        try:
            file_path.unlink()
        except FileNotFoundError:
            pass
        except OSError as e:
            logger.warning(f"[Extraction] Не удалось удалить {file_path}: {e}")
