"""
Менеджер файлов для домена Parsing.

Сохраняет карты остановок в JSON (по документу и сводную по корпусу).
"""

import json
from pathlib import Path
from typing import Any, Dict

from loguru import logger

from contracts.d2_parsing_dto import StopMap, stop_map_to_dict
from ..domain.exceptions import ParsingFileWriteError


class ParsingFileManager:
    """Менеджер файлов для домена Parsing."""

    def save_json(self, data: Dict[str, Any], file_path: Path) -> Path:
        """
        Сохраняет данные в JSON файл (indent=2, UTF-8 без экранирования).

        Raises:
            ParsingFileWriteError: Если не удалось сохранить файл
        """
        try:
            file_path.parent.mkdir(parents=True, exist_ok=True)

            with open(file_path, 'w', encoding='utf-8') as f:
                json.dump(data, f, ensure_ascii=False, indent=2)

            logger.debug(f"[Parsing] Файл сохранен: {file_path}")
            return file_path

        except (IOError, OSError, TypeError) as e:
            raise ParsingFileWriteError(
                message=f"Не удалось сохранить JSON файл: {file_path}",
                component="ParsingFileManager",
                original_error=e
            )

    def ensure_directory(self, directory_path: Path) -> Path:
        """
        Raises:
            ParsingFileWriteError: директорию нельзя создать (например, на её месте файл)
        """
        try:
            directory_path.mkdir(parents=True, exist_ok=True)
            return directory_path
        except (IOError, OSError) as e:
            raise ParsingFileWriteError(
                message=f"Не удалось создать директорию вывода: {directory_path}",
                component="ParsingFileManager",
                original_error=e
            )

    def save_stop_map(self, stops: StopMap, file_path: Path) -> Path:
        """Сохраняет карту stop_id -> [DepartureRecord] в порядке ключей карты."""
        return self.save_json(stop_map_to_dict(stops), file_path)

    def document_output_path(self, document_name: str, output_dir: Path) -> Path:
        """<output_dir>/<stem>.json"""
        return output_dir / f"{Path(document_name).stem}.json"
