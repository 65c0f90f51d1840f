"""
Контракты DTO между доменами проекта Timetable OCR.

Контракты:
- D1 -> D2: PreparedDocument (d1_extraction_dto.py)
- D2 -> D3: DepartureRecord, DocumentParseResult (d2_parsing_dto.py)
- D3 -> вызывающий код: CorpusResult (d3_corpus_dto.py)
"""

# D1 -> D2 (Extraction -> Parsing)
from .d1_extraction_dto import (
    DocumentQualityVerdict,
    CorrectionStatus,
    CorrectionOutcome,
    PreparedDocument,
)

# D2 -> D3 (Parsing -> Corpus)
from .d2_parsing_dto import (
    OperatingDays,
    SchoolRestriction,
    DepartureRecord,
    StopMap,
    ParseDiagnostic,
    DocumentParseResult,
    stop_map_to_dict,
)

# D3 -> вызывающий код
from .d3_corpus_dto import DocumentReport, CorpusResult

__all__ = [
    # D1 -> D2
    "DocumentQualityVerdict",
    "CorrectionStatus",
    "CorrectionOutcome",
    "PreparedDocument",
    # D2 -> D3
    "OperatingDays",
    "SchoolRestriction",
    "DepartureRecord",
    "StopMap",
    "ParseDiagnostic",
    "DocumentParseResult",
    "stop_map_to_dict",
    # D3
    "DocumentReport",
    "CorpusResult",
]
