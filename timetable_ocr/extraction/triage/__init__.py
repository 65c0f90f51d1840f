from .quality_classifier import DocumentQualityClassifier, is_plausible_char

__all__ = ["DocumentQualityClassifier", "is_plausible_char"]
