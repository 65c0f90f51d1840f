"""
Настройки проекта Timetable OCR.

Все пути и пороги можно переопределить через переменные окружения TIMETABLE_*.
"""

import os
import shutil
from pathlib import Path

from loguru import logger

# =============================================================================
# ПУТИ ПРОЕКТА
# =============================================================================
PROJECT_ROOT = Path(__file__).parent.parent
DATA_DIR = Path(os.getenv("TIMETABLE_DATA_DIR", str(PROJECT_ROOT / "data")))

# Скачанные PDF расписаний
SOURCE_DIR = Path(os.getenv("TIMETABLE_SOURCE_DIR", str(DATA_DIR / "source")))

# JSON по каждому документу
OUTPUT_DIR = Path(os.getenv("TIMETABLE_OUTPUT_DIR", str(DATA_DIR / "output")))

# Исправленные через OCR документы (scratch)
TEMP_DIR = Path(os.getenv("TIMETABLE_TEMP_DIR", str(DATA_DIR / "temp")))

# Сводный JSON по всему корпусу
CORPUS_OUTPUT_FILE = Path(
    os.getenv("TIMETABLE_CORPUS_OUTPUT", str(DATA_DIR / "output.json"))
)

# Отчёт запуска по каждому документу (CorpusResult.to_dict)
CORPUS_REPORT_FILE = Path(
    os.getenv("TIMETABLE_CORPUS_REPORT", str(DATA_DIR / "report.json"))
)

# =============================================================================
# ИСТОЧНИК ДОКУМЕНТОВ
# =============================================================================
TIMETABLE_INDEX_URL = os.getenv(
    "TIMETABLE_INDEX_URL",
    "https://zpgsa.bielawa.pl/rozklad-wazny-od-10-02-2025"
)

# CSS-селектор ссылок на PDF на индексной странице
TIMETABLE_LINK_SELECTOR = "main p a"

DOWNLOAD_TIMEOUT_SECONDS = float(os.getenv("TIMETABLE_DOWNLOAD_TIMEOUT", "60"))

SUPPORTED_DOCUMENT_FORMATS = [".pdf"]

# =============================================================================
# НАСТРОЙКИ TRIAGE
# =============================================================================
# Сколько первых символов текста проверяем
QUALITY_SAMPLE_SIZE = int(os.getenv("TIMETABLE_QUALITY_SAMPLE_SIZE", "100"))

# Доля "нормальных" символов, которую нужно ПРЕВЫСИТЬ
QUALITY_MIN_RATIO = float(os.getenv("TIMETABLE_QUALITY_MIN_RATIO", "0.8"))

# =============================================================================
# НАСТРОЙКИ OCR (ocrmypdf)
# =============================================================================
OCR_BINARY = os.getenv("TIMETABLE_OCR_BINARY", "ocrmypdf")
OCR_LANGUAGE = os.getenv("TIMETABLE_OCR_LANGUAGE", "pol")
OCR_OUTPUT_TYPE = "pdfa"
OCR_TIMEOUT_SECONDS = float(os.getenv("TIMETABLE_OCR_TIMEOUT", "600"))

# =============================================================================
# ПАРАЛЛЕЛИЗМ И ШАБЛОН
# =============================================================================
MAX_WORKERS = int(os.getenv("TIMETABLE_MAX_WORKERS", str(os.cpu_count() or 1)))

# Шаблон документов перевозчика (timetable_ocr/parsing/templates/<name>/)
DEFAULT_TEMPLATE = os.getenv("TIMETABLE_TEMPLATE", "zpgsa")


# =============================================================================
# ПРОВЕРКА КОНФИГУРАЦИИ
# =============================================================================
def validate_config(require_ocr: bool = True):
    """Проверяет корректность конфигурации."""
    errors = []

    if QUALITY_SAMPLE_SIZE <= 0:
        errors.append(f"QUALITY_SAMPLE_SIZE должен быть > 0, получено: {QUALITY_SAMPLE_SIZE}")

    if not 0.0 < QUALITY_MIN_RATIO < 1.0:
        errors.append(f"QUALITY_MIN_RATIO должен быть в (0, 1), получено: {QUALITY_MIN_RATIO}")

    if OCR_TIMEOUT_SECONDS <= 0:
        errors.append(f"OCR_TIMEOUT_SECONDS должен быть > 0, получено: {OCR_TIMEOUT_SECONDS}")

    if MAX_WORKERS <= 0:
        errors.append(f"MAX_WORKERS должен быть > 0, получено: {MAX_WORKERS}")

    if errors:
        raise ValueError("\n".join(errors))

    # Без ocrmypdf документы просто не исправляются
    if require_ocr and shutil.which(OCR_BINARY) is None:
        logger.warning(
            f"[Config] {OCR_BINARY} не найден в PATH: "
            "повреждённые документы будут парситься как есть"
        )

    # Создаём директории если не существуют
    for directory in (SOURCE_DIR, OUTPUT_DIR, TEMP_DIR):
        directory.mkdir(parents=True, exist_ok=True)

    return True
