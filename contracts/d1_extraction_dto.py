"""
DTO контракт: D1 (Extraction) -> D2 (Parsing)

Результат подготовки одного PDF расписания: triage + (опционально) OCR исправление.
Содержит итоговый текст, который дальше парсится доменом Parsing.

ВАЖНО: PreparedDocument живёт только в рамках одного запуска, не сохраняется.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional


class DocumentQualityVerdict(str, Enum):
    """Вердикт triage для извлечённого текста документа."""
    TRUSTWORTHY = "trustworthy"              # Текст можно парсить как есть
    NEEDS_CORRECTION = "needs_correction"    # Нужен OCR проход


class CorrectionStatus(str, Enum):
    """Итог Correction Pipeline для одного документа."""
    CORRECTED = "corrected"                  # OCR отработал в этом запуске
    ALREADY_CORRECTED = "already_corrected"  # Артефакт уже был в temp
    SKIPPED = "skipped"                      # OCR отключён (--ignore-ocr)
    FAILED = "failed"                        # OCR вернул ошибку / таймаут


@dataclass(frozen=True)
class CorrectionOutcome:
    """
    Результат Correction Pipeline.

    document - путь к исправленному PDF (для CORRECTED / ALREADY_CORRECTED),
    иначе None: дальше используется исходный документ.
    """
    status: CorrectionStatus
    document: Optional[Path] = None
    detail: str = ""

    @property
    def has_document(self) -> bool:
        return self.status in (CorrectionStatus.CORRECTED, CorrectionStatus.ALREADY_CORRECTED)


@dataclass
class PreparedDocument:
    """
    Документ, готовый к парсингу.

    text - текст, который будет распарсен (из исправленного документа,
    либо best-effort из исходного).
    """
    source: Path                                   # Исходный PDF
    text: str                                      # Текст для парсинга
    verdict: DocumentQualityVerdict
    correction: Optional[CorrectionOutcome] = None  # None если документ trustworthy

    @property
    def name(self) -> str:
        return self.source.name

    def to_dict(self) -> dict:
        return {
            "source": str(self.source),
            "text_length": len(self.text),
            "verdict": self.verdict.value,
            "correction": self.correction.status.value if self.correction else None,
        }
