"""
Quality Classifier - triage текстового слоя PDF.

Сканированные PDF без нормального текстового слоя отдают при извлечении
мусор: управляющие символы, обрывки бинарных данных. Такой мусор виден уже
в первых символах, поэтому смотрим только на короткий префикс текста
и не гоняем OCR по всему корпусу.
"""

import string
import unicodedata

from loguru import logger

from config.settings import QUALITY_SAMPLE_SIZE, QUALITY_MIN_RATIO
from contracts.d1_extraction_dto import DocumentQualityVerdict
from ...domain.text import normalize_whitespace

_ASCII_PUNCTUATION = frozenset(string.punctuation)


def is_plausible_char(char: str) -> bool:
    """Буква/цифра, ASCII-пунктуация или пробел, но не управляющий символ."""
    if unicodedata.category(char) == "Cc":
        return False
    return char.isalnum() or char in _ASCII_PUNCTUATION or char.isspace()


class DocumentQualityClassifier:
    """
    Классификатор качества извлечённого текста.

    Документ trustworthy, если в первых sample_size символах
    нормализованного текста "правдоподобных" символов СТРОГО больше
    sample_size * min_ratio. Пустой текст всегда needs_correction.
    """

    def __init__(self, sample_size: int = QUALITY_SAMPLE_SIZE, min_ratio: float = QUALITY_MIN_RATIO):
        if sample_size <= 0:
            raise ValueError(f"sample_size должен быть > 0, получено: {sample_size}")
        if not 0.0 < min_ratio < 1.0:
            raise ValueError(f"min_ratio должен быть в (0, 1), получено: {min_ratio}")

        self.sample_size = sample_size
        self.min_ratio = min_ratio
        self.threshold = int(sample_size * min_ratio)

    def score(self, text: str) -> int:
        """Количество правдоподобных символов в префиксе."""
        sample = normalize_whitespace(text)[:self.sample_size]
        return sum(1 for char in sample if is_plausible_char(char))

    def assess(self, text: str) -> bool:
        """True если текст можно парсить без OCR."""
        if not text:
            return False
        return self.score(text) > self.threshold

    def classify(self, text: str) -> DocumentQualityVerdict:
        score = self.score(text) if text else 0
        trustworthy = bool(text) and score > self.threshold

        logger.debug(
            f"[Triage] score={score}/{self.sample_size}, threshold>{self.threshold} -> "
            f"{'trustworthy' if trustworthy else 'needs_correction'}"
        )

        if trustworthy:
            return DocumentQualityVerdict.TRUSTWORTHY
        return DocumentQualityVerdict.NEEDS_CORRECTION
