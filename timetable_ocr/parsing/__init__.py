"""
Домен Parsing (D2): текст расписания -> карта остановок.

Компоненты:
- DestinationNormalizer: каноническое название направления
- StopIdResolver: исправление ID остановок
- LegendResolver: буква суффикса -> направление
- DepartureParser: токен времени -> DepartureRecord
- DocumentParser: весь документ -> DocumentParseResult

Вход: contracts.PreparedDocument.text (от D1)
Выход: contracts.DocumentParseResult (для D3)
"""

from .document_parser import DocumentParser, SegmentResult
from .templates.template_config import TemplateConfig, TemplateDescriptor, CorrectionTable

__all__ = [
    "DocumentParser",
    "SegmentResult",
    "TemplateConfig",
    "TemplateDescriptor",
    "CorrectionTable",
]
