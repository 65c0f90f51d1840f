"""
Legend Resolver - разбор легенды сегмента.

Легенда сопоставляет букву суффикса токена с альтернативным направлением:
    "Legenda: A - Kurs do: Książnica 27 przez Bielawa S - kursuje w dni nauki ... Operator:"
    -> {"A": "Książnica 27"}

Записи без "Kurs do:" (например, S - дни науки) в карту не попадают.
"""

import re
from typing import Dict

from loguru import logger

from ..templates.template_config import TemplateDescriptor
from .destination_normalizer import DestinationNormalizer


class LegendResolver:
    """Строит LegendMap (буква -> направление) для одного сегмента."""

    def __init__(self, descriptor: TemplateDescriptor, normalizer: DestinationNormalizer):
        self.legend_pattern: re.Pattern = descriptor.legend_pattern
        self.marker_pattern: re.Pattern = descriptor.legend_marker_pattern
        self.destination_pattern: re.Pattern = descriptor.legend_destination_pattern
        self.normalizer = normalizer

    def resolve(self, text: str) -> Dict[str, str]:
        """
        Args:
            text: Текст сегмента (пробелы нормализованы)

        Returns:
            Карта буква -> нормализованное направление; пустая, если легенды нет
        """
        section = self.legend_pattern.search(text)
        if not section:
            return {}

        legend_text = section.group(1)
        markers = list(self.marker_pattern.finditer(legend_text))
        legend: Dict[str, str] = {}

        for index, marker in enumerate(markers):
            label = marker.group(1)
            value_end = markers[index + 1].start() if index + 1 < len(markers) else len(legend_text)
            value = legend_text[marker.end():value_end].strip()

            destination = self.destination_pattern.search(value)
            if not destination:
                continue

            legend[label] = self.normalizer.normalize(destination.group(1))

        logger.debug(f"[LegendResolver] {len(legend)}/{len(markers)} записей с направлением: {legend}")
        return legend
