from loguru import logger

from ..templates.template_config import CorrectionTable


class DestinationNormalizer:
    """
    Приводит название направления к каноническому виду.

    Вектор: Разовые исправления направлений из таблицы перевозчика.
    ЦКП: Одна и та же остановка назначения = одна строка во всём корпусе.
    """

    def __init__(self, corrections: CorrectionTable):
        self.strip_suffixes = list(corrections.destination_strip_suffixes)
        self.aliases = dict(corrections.destination_aliases)

    def normalize(self, destination: str) -> str:
        normalized = destination.strip()

        for suffix in self.strip_suffixes:
            if normalized.endswith(suffix):
                normalized = normalized[:-len(suffix)]
                break

        normalized = self.aliases.get(normalized, normalized)

        if normalized != destination:
            logger.trace(f"[DestinationNormalizer] '{destination}' -> '{normalized}'")
        return normalized
