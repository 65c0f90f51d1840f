"""Общие для всех доменов утилиты."""

from .text import normalize_whitespace

__all__ = ["normalize_whitespace"]
