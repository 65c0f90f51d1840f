"""
Домен Extraction (D1): PDF -> текст, пригодный для парсинга.

Этот домен отвечает за:
1. Скачивание PDF расписаний
2. Извлечение текстового слоя
3. Triage качества текста и OCR исправление через ocrmypdf

Граница домена: contracts.PreparedDocument
"""

from .application.factory import ExtractionComponentFactory
from .application.extraction_pipeline import ExtractionPipeline
from .triage.quality_classifier import DocumentQualityClassifier
from .correction.stage import CorrectionStage

__all__ = [
    "ExtractionComponentFactory",
    "ExtractionPipeline",
    "DocumentQualityClassifier",
    "CorrectionStage",
]
