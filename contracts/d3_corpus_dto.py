"""
DTO контракт: D3 (Corpus) -> вызывающий код

Итог обработки корпуса: сводная карта остановок в отсортированном порядке
плюс отчёт по каждому документу.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from .d2_parsing_dto import ParseDiagnostic, StopMap


@dataclass
class DocumentReport:
    """Отчёт об обработке одного документа."""
    name: str
    verdict: Optional[str] = None
    correction: Optional[str] = None
    stops: int = 0
    records: int = 0
    diagnostics: List[ParseDiagnostic] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def succeeded(self) -> bool:
        return self.error is None

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "verdict": self.verdict,
            "correction": self.correction,
            "stops": self.stops,
            "records": self.records,
            "diagnostics": [d.to_dict() for d in self.diagnostics],
            "error": self.error,
        }


@dataclass
class CorpusResult:
    """
    Результат Corpus Orchestrator.

    stops - ключи в лексикографическом порядке, значения в порядке накопления.
    """
    stops: StopMap = field(default_factory=dict)
    documents: List[DocumentReport] = field(default_factory=list)
    processing_time_ms: float = 0.0

    @property
    def failed_documents(self) -> List[DocumentReport]:
        return [d for d in self.documents if not d.succeeded]

    @property
    def records_count(self) -> int:
        return sum(len(records) for records in self.stops.values())

    def to_dict(self) -> dict:
        return {
            "stops": len(self.stops),
            "records": self.records_count,
            "documents": [d.to_dict() for d in self.documents],
            "processing_time_ms": self.processing_time_ms,
        }
