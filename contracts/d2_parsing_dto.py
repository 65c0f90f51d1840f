"""
DTO контракт: D2 (Parsing) -> D3 (Corpus)

Одна запись отправления автобуса с конкретной остановки.
Имена полей и их порядок = формат выходного JSON.

ВАЛИДАЦИЯ: Pydantic гарантирует формат времени HH:MM.
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field, field_validator

TIME_FORMAT = re.compile(r"^\d{2}:\d{2}$")


class OperatingDays(str, Enum):
    """Категория дней, в которые ходит рейс."""
    MON_FRI = "mon_fri"
    SATURDAY = "saturday"
    SUNDAY = "sunday"


class SchoolRestriction(str, Enum):
    """Ограничение рейса по учебным дням (по последней букве суффикса)."""
    NORMAL = "normal"
    SCHOOL_ONLY = "school_only"
    FREE_DAY_ONLY = "free_day_only"


class DepartureRecord(BaseModel):
    """
    Одно отправление по расписанию.

    Создаётся один раз на токен времени, дальше не меняется.
    """

    time: str = Field(..., description="Время отправления HH:MM (24h, с ведущим нулём)")
    line: str = Field(..., description="Номер линии")
    destination: str = Field(..., description="Нормализованное направление")
    operating_days: OperatingDays = Field(..., description="mon_fri | saturday | sunday")
    school_restriction: SchoolRestriction = Field(
        SchoolRestriction.NORMAL, description="normal | school_only | free_day_only"
    )

    model_config = ConfigDict(frozen=True, use_enum_values=True)

    @field_validator("time")
    @classmethod
    def validate_time(cls, v: str) -> str:
        if not TIME_FORMAT.match(v):
            raise ValueError(f"Time must be HH:MM, got: {v!r}")
        return v


# StopIdentifier -> отправления в порядке накопления
StopMap = Dict[str, List[DepartureRecord]]


def stop_map_to_dict(stops: StopMap) -> Dict[str, List[dict]]:
    """Сериализует карту остановок в JSON-совместимый dict (порядок ключей сохраняется)."""
    return {
        stop_id: [record.model_dump(mode="json") for record in records]
        for stop_id, records in stops.items()
    }


@dataclass(frozen=True)
class ParseDiagnostic:
    """
    Диагностика пропущенного фрагмента (сегмент или токен).

    Пропуск фрагмента не прерывает разбор остального документа.
    """
    segment_index: int
    kind: str               # "segment" | "token"
    detail: str

    def to_dict(self) -> dict:
        return {"segment_index": self.segment_index, "kind": self.kind, "detail": self.detail}


@dataclass
class DocumentParseResult:
    """Результат Document Parser для одного документа."""
    stops: StopMap = field(default_factory=dict)
    diagnostics: List[ParseDiagnostic] = field(default_factory=list)
    segments_total: int = 0
    segments_parsed: int = 0

    @property
    def records_count(self) -> int:
        return sum(len(records) for records in self.stops.values())

    def to_dict(self) -> dict:
        return {
            "stops": len(self.stops),
            "records": self.records_count,
            "segments_total": self.segments_total,
            "segments_parsed": self.segments_parsed,
            "diagnostics": [d.to_dict() for d in self.diagnostics],
        }
