"""
Template Config - шаблон документа перевозчика + таблица исправлений.

ЦКП: Провалидированный TemplateConfig для одного перевозчика.

Архитектурный принцип:
- Якоря разметки (LINIA:, Legenda:, заголовки дней) живут в template.yaml,
  а не в коде парсера
- Разовые исправления направлений и ID остановок живут в corrections.yaml
  и передаются в Document Parser явно
- Все regex компилируются при загрузке: битый шаблон = ошибка на старте
"""

import re
from dataclasses import dataclass
from pathlib import Path
from typing import ClassVar, Dict, List, Optional

import yaml
from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from contracts.d2_parsing_dto import OperatingDays
from ..domain.exceptions import TemplateConfigurationError

HEADER_GROUPS = ("line_number", "destination", "stop", "stop_id")
TOKEN_GROUPS = ("time", "suffix")


def _require_groups(pattern: re.Pattern, groups, field_name: str) -> None:
    missing = [g for g in groups if g not in pattern.groupindex]
    if missing:
        raise ValueError(f"{field_name}: нет именованных групп {missing} в '{pattern.pattern}'")


class DaySection(BaseModel):
    """Секция дней: вводная фраза + серия токенов времени (группа 1)."""

    model_config = ConfigDict(frozen=True)

    operating_days: OperatingDays
    pattern: re.Pattern

    @field_validator("pattern")
    @classmethod
    def has_token_run_group(cls, v: re.Pattern) -> re.Pattern:
        if v.groups < 1:
            raise ValueError(f"pattern секции должен иметь группу серии токенов: '{v.pattern}'")
        return v


class TemplateDescriptor(BaseModel):
    """
    Набор якорей разметки одного шаблона документа.

    Все паттерны применяются к тексту с нормализованными пробелами.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    segment_separator: str = Field(..., min_length=1, description="Граница маршрутов в документе")
    header_pattern: re.Pattern = Field(..., description="Линия, направление, остановка, ID")
    legend_pattern: re.Pattern = Field(..., description="Секция легенды (группа 1)")
    legend_marker_pattern: re.Pattern = Field(..., description="Маркер буквы легенды (группа 1)")
    legend_destination_pattern: re.Pattern = Field(..., description="Направление в записи легенды (группа 1)")
    token_pattern: re.Pattern = Field(..., description="Токен времени: группы time и suffix")
    day_sections: List[DaySection] = Field(..., min_length=1)

    @model_validator(mode="after")
    def check_groups(self) -> "TemplateDescriptor":
        _require_groups(self.header_pattern, HEADER_GROUPS, "header_pattern")
        _require_groups(self.token_pattern, TOKEN_GROUPS, "token_pattern")

        for field_name in ("legend_pattern", "legend_marker_pattern", "legend_destination_pattern"):
            if getattr(self, field_name).groups < 1:
                raise ValueError(f"{field_name} должен иметь хотя бы одну группу")

        categories = [section.operating_days for section in self.day_sections]
        if len(categories) != len(set(categories)):
            raise ValueError(f"day_sections: повторяющиеся категории дней {categories}")

        return self


class CorrectionTable(BaseModel):
    """
    Исправления, специфичные для перевозчика.

    stop_id_by_destination: raw ID -> {направление -> ID}; если направления
    нет в таблице, raw ID остаётся как есть (stop_id_overrides не применяются).
    """

    model_config = ConfigDict(frozen=True)

    destination_strip_suffixes: List[str] = Field(default_factory=list)
    destination_aliases: Dict[str, str] = Field(default_factory=dict)
    stop_name_overrides: Dict[str, str] = Field(default_factory=dict)
    stop_id_by_destination: Dict[str, Dict[str, str]] = Field(default_factory=dict)
    stop_id_overrides: Dict[str, str] = Field(default_factory=dict)


@dataclass(frozen=True)
class TemplateConfig:
    """Шаблон + таблица исправлений одного перевозчика."""

    descriptor: TemplateDescriptor
    corrections: CorrectionTable

    # Директория с шаблонами и кеш загруженных
    _config_dir: ClassVar[Optional[Path]] = None
    _cache: ClassVar[Dict[str, "TemplateConfig"]] = {}

    @classmethod
    def from_dict(cls, template_data: dict, corrections_data: Optional[dict] = None) -> "TemplateConfig":
        """
        Собирает и валидирует конфиг из словарей.

        Raises:
            TemplateConfigurationError: если шаблон или таблица невалидны
        """
        name = template_data.get("name", "?") if isinstance(template_data, dict) else "?"
        try:
            descriptor = TemplateDescriptor.model_validate(template_data)
            corrections = CorrectionTable.model_validate(corrections_data or {})
        except ValidationError as e:
            raise TemplateConfigurationError(
                message=f"Невалидный шаблон: {name}",
                component="TemplateConfig",
                original_error=e
            )
        return cls(descriptor=descriptor, corrections=corrections)

    @classmethod
    def load(cls, name: str) -> "TemplateConfig":
        """
        Загружает шаблон <config_dir>/<name>/template.yaml + corrections.yaml.
        """
        if name in cls._cache:
            return cls._cache[name]

        config_dir = Path(cls._config_dir) if cls._config_dir else Path(__file__).parent
        template_dir = config_dir / name
        template_file = template_dir / "template.yaml"

        if not template_file.exists():
            raise TemplateConfigurationError(
                message=f"Шаблон не найден: {template_file}",
                component="TemplateConfig"
            )

        template_data = cls._load_yaml(template_file)
        template_data.setdefault("name", name)
        corrections_data = cls._load_yaml(template_dir / "corrections.yaml", required=False)

        config = cls.from_dict(template_data, corrections_data)
        cls._cache[name] = config

        logger.debug(
            f"[TemplateConfig] Загружен шаблон {name}: "
            f"{len(config.descriptor.day_sections)} секций дней, "
            f"{len(config.corrections.destination_aliases)} алиасов направлений, "
            f"{len(config.corrections.stop_id_overrides)} исправлений ID"
        )
        return config

    @staticmethod
    def _load_yaml(file_path: Path, required: bool = True) -> dict:
        if not file_path.exists():
            if required:
                raise TemplateConfigurationError(
                    message=f"Файл не найден: {file_path}",
                    component="TemplateConfig"
                )
            logger.warning(f"[TemplateConfig] {file_path.name} не найден, исправления не применяются")
            return {}

        try:
            with open(file_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise TemplateConfigurationError(
                message=f"Ошибка YAML: {file_path}",
                component="TemplateConfig",
                original_error=e
            )

        if not isinstance(data, dict):
            raise TemplateConfigurationError(
                message=f"Ожидался словарь верхнего уровня: {file_path}",
                component="TemplateConfig"
            )
        return data
