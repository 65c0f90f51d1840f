"""
Document Parser - текст PDF расписания -> карта остановок.

Порядок разбора:
1. Нормализация пробелов
2. Split по границе маршрутов (последний сегмент отбрасывается)
3. Заголовок сегмента: линия, направление, остановка, raw ID
4. Исправление ID остановки
5. Легенда сегмента
6. Секции дней (будни / субботы / воскресенья и праздники) -> токены -> записи
7. Слияние в карту stop_id -> [DepartureRecord]

Сбой заголовка пропускает только сегмент, сбой токена - только токен.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from loguru import logger

from contracts.d2_parsing_dto import DepartureRecord, DocumentParseResult, ParseDiagnostic
from config.settings import DEFAULT_TEMPLATE
from ..domain.text import normalize_whitespace
from .domain.exceptions import PatternMismatchError
from .templates.template_config import TemplateConfig
from .extraction.destination_normalizer import DestinationNormalizer
from .extraction.stop_id_resolver import StopIdResolver
from .extraction.legend_resolver import LegendResolver
from .extraction.departure_parser import DepartureParser


@dataclass
class SegmentResult:
    """Результат разбора одного сегмента (одна остановка одной линии)."""
    stop_id: str
    line_number: str
    destination: str
    stop_name: str
    records: List[DepartureRecord] = field(default_factory=list)
    skipped_tokens: List[str] = field(default_factory=list)


class DocumentParser:
    """
    Парсер документа одного шаблона.

    ЦКП: DocumentParseResult (карта остановок + диагностика пропусков).
    Повторный разбор того же текста даёт идентичный результат.
    """

    def __init__(
        self,
        template: TemplateConfig,
        normalizer: Optional[DestinationNormalizer] = None,
        stop_id_resolver: Optional[StopIdResolver] = None,
        legend_resolver: Optional[LegendResolver] = None,
        departure_parser: Optional[DepartureParser] = None
    ):
        self.descriptor = template.descriptor
        self.normalizer = normalizer or DestinationNormalizer(template.corrections)
        self.stop_id_resolver = stop_id_resolver or StopIdResolver(template.corrections)
        self.legend_resolver = legend_resolver or LegendResolver(self.descriptor, self.normalizer)
        self.departure_parser = departure_parser or DepartureParser(
            self.descriptor.token_pattern, self.normalizer
        )

        logger.debug(f"[DocumentParser] Инициализирован (шаблон {self.descriptor.name})")

    @classmethod
    def from_template(cls, name: str = DEFAULT_TEMPLATE) -> "DocumentParser":
        return cls(TemplateConfig.load(name))

    def parse(self, text: str, source_file: str = "") -> DocumentParseResult:
        """
        Разбирает весь текст документа.

        Args:
            text: Сырой текст документа
            source_file: Имя файла (для логов)
        """
        normalized = normalize_whitespace(text)
        segments = normalized.split(self.descriptor.segment_separator)[:-1]

        result = DocumentParseResult(segments_total=len(segments))

        for index, segment in enumerate(segments):
            try:
                segment_result = self.parse_segment(segment)
            except PatternMismatchError as e:
                logger.warning(f"[DocumentParser] {source_file}: сегмент {index} пропущен: {e.message}")
                result.diagnostics.append(ParseDiagnostic(index, "segment", e.message))
                continue

            for token in segment_result.skipped_tokens:
                result.diagnostics.append(ParseDiagnostic(index, "token", token))

            result.stops.setdefault(segment_result.stop_id, []).extend(segment_result.records)
            result.segments_parsed += 1

        logger.debug(
            f"[DocumentParser] {source_file}: {result.segments_parsed}/{result.segments_total} сегментов, "
            f"{len(result.stops)} остановок, {result.records_count} отправлений"
        )
        return result

    def parse_segment(self, segment: str) -> SegmentResult:
        """
        Разбирает один сегмент.

        Raises:
            PatternMismatchError: заголовок сегмента не найден
        """
        header = self.descriptor.header_pattern.search(segment)
        if not header:
            raise PatternMismatchError(
                message=f"Нет заголовка маршрута в сегменте: {segment[:80]!r}",
                component="DocumentParser"
            )

        line_number = header.group("line_number").strip()
        destination = self.normalizer.normalize(header.group("destination"))
        stop_name = header.group("stop").strip()
        raw_id = header.group("stop_id").strip()

        stop_id = self.stop_id_resolver.resolve(raw_id, destination, stop_name)
        legend = self.legend_resolver.resolve(segment)

        result = SegmentResult(
            stop_id=stop_id,
            line_number=line_number,
            destination=destination,
            stop_name=stop_name,
        )

        for section in self.descriptor.day_sections:
            match = section.pattern.search(segment)
            if not match:
                continue

            for token in match.group(1).split():
                try:
                    record = self.departure_parser.parse(
                        token, legend, destination, line_number, section.operating_days
                    )
                except PatternMismatchError as e:
                    logger.warning(f"[DocumentParser] Линия {line_number}, {stop_name}: {e.message}")
                    result.skipped_tokens.append(token)
                    continue
                result.records.append(record)

        return result
