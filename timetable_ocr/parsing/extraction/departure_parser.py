"""
Departure Parser - один токен времени -> DepartureRecord.

Суффикс токена перегружен:
  - ПЕРВАЯ буква -> вариант направления (через легенду)
  - ПОСЛЕДНЯЯ буква -> ограничение по учебным дням (S / W)
Например "6:15AW": направление из легенды "A", только в дни без занятий.
"""

import re
import string
from typing import Dict

from loguru import logger

from contracts.d2_parsing_dto import DepartureRecord, OperatingDays, SchoolRestriction
from ..domain.exceptions import PatternMismatchError
from .destination_normalizer import DestinationNormalizer

SCHOOL_RESTRICTIONS = {
    "S": SchoolRestriction.SCHOOL_ONLY,
    "W": SchoolRestriction.FREE_DAY_ONLY,
}

# Хвостовая пунктуация из PDF ("6:15A,", "21:40.") к токену не относится
TRAILING_PUNCTUATION = string.punctuation


class DepartureParser:
    """Разбор одного токена вида H:MM / HH:MM + [A-Z]*."""

    def __init__(self, token_pattern: re.Pattern, normalizer: DestinationNormalizer):
        self.token_pattern = token_pattern
        self.normalizer = normalizer

    def parse(
        self,
        token: str,
        legend: Dict[str, str],
        line_default_destination: str,
        line_number: str,
        operating_days: OperatingDays
    ) -> DepartureRecord:
        """
        Raises:
            PatternMismatchError: токен не соответствует формату времени
        """
        cleaned = token.strip().rstrip(TRAILING_PUNCTUATION)
        if cleaned != token.strip():
            logger.debug(f"[DepartureParser] Пунктуация отброшена: {token!r} -> {cleaned!r}")

        match = self.token_pattern.fullmatch(cleaned)
        if not match:
            raise PatternMismatchError(
                message=f"Токен не похож на время: {token!r}",
                component="DepartureParser"
            )

        time = match.group("time")
        if len(time) < 5:
            time = f"0{time}"

        suffix = match.group("suffix") or ""

        destination = line_default_destination
        if suffix:
            destination = legend.get(suffix[0], line_default_destination)

        restriction = SchoolRestriction.NORMAL
        if suffix:
            restriction = SCHOOL_RESTRICTIONS.get(suffix[-1], SchoolRestriction.NORMAL)

        return DepartureRecord(
            time=time,
            line=line_number,
            destination=self.normalizer.normalize(destination),
            operating_days=operating_days,
            school_restriction=restriction,
        )
