"""
Application слой домена Extraction.

Содержит фабрики и пайплайн подготовки документов.
"""

from .factory import ExtractionComponentFactory
from .extraction_pipeline import ExtractionPipeline

__all__ = [
    "ExtractionComponentFactory",
    "ExtractionPipeline",
]
