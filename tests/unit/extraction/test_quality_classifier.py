"""
Unit-тесты для DocumentQualityClassifier (triage текстового слоя).

ЦКП: trustworthy только если правдоподобных символов в префиксе СТРОГО больше порога.
"""

import pytest

from contracts.d1_extraction_dto import DocumentQualityVerdict
from timetable_ocr.extraction.triage.quality_classifier import (
    DocumentQualityClassifier,
    is_plausible_char,
)


@pytest.fixture
def classifier():
    """Fixture: классификатор с порогом 100 * 0.8."""
    return DocumentQualityClassifier(sample_size=100, min_ratio=0.8)


def mixed_text(good: int, bad: int) -> str:
    """Текст из good букв и bad управляющих символов."""
    return "a" * good + "\x01" * bad


class TestIsPlausibleChar:

    @pytest.mark.parametrize("char", ["a", "Ż", "7", ":", ",", " ", "-"])
    def test_plausible(self, char):
        assert is_plausible_char(char)

    @pytest.mark.parametrize("char", ["\x00", "\x01", "\x7f", "�", "€"])
    def test_not_plausible(self, char):
        assert not is_plausible_char(char)


class TestDocumentQualityClassifier:

    def test_mostly_readable_text_is_trustworthy(self, classifier):
        """85 из 100 правдоподобных -> trustworthy."""
        assert classifier.classify(mixed_text(85, 15)) == DocumentQualityVerdict.TRUSTWORTHY

    def test_garbage_text_needs_correction(self, classifier):
        """60 из 100 -> needs_correction."""
        assert classifier.classify(mixed_text(60, 40)) == DocumentQualityVerdict.NEEDS_CORRECTION

    def test_threshold_is_strict(self, classifier):
        """Ровно 80 из 100 - ещё не trustworthy."""
        assert classifier.score(mixed_text(80, 20)) == 80
        assert classifier.assess(mixed_text(80, 20)) is False
        assert classifier.assess(mixed_text(81, 19)) is True

    def test_empty_text_needs_correction(self, classifier):
        assert classifier.assess("") is False
        assert classifier.classify("") == DocumentQualityVerdict.NEEDS_CORRECTION

    def test_only_prefix_is_sampled(self, classifier):
        """Мусор после первых 100 символов не влияет на вердикт."""
        text = mixed_text(100, 0) + "\x01" * 500
        assert classifier.score(text) == 100
        assert classifier.classify(text) == DocumentQualityVerdict.TRUSTWORTHY

    def test_whitespace_is_collapsed_before_sampling(self, classifier):
        """Пачка переводов строк считается одним пробелом."""
        text = "a" * 50 + "\n" * 200 + "a" * 50
        assert classifier.score(text) == 100

    @pytest.mark.parametrize("sample_size, min_ratio", [(0, 0.8), (100, 0.0), (100, 1.0)])
    def test_invalid_parameters(self, sample_size, min_ratio):
        with pytest.raises(ValueError):
            DocumentQualityClassifier(sample_size=sample_size, min_ratio=min_ratio)
