from .stage import CorrectionStage

__all__ = ["CorrectionStage"]
