"""
Шаблоны документов перевозчиков.

Каждый шаблон - директория <name>/ с template.yaml (якоря разметки)
и corrections.yaml (исправления направлений и ID остановок).
"""

from .template_config import TemplateConfig, TemplateDescriptor, CorrectionTable, DaySection

__all__ = ["TemplateConfig", "TemplateDescriptor", "CorrectionTable", "DaySection"]
