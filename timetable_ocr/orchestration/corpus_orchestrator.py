"""
Corpus Orchestrator - обработка всего корпуса PDF.

Фазы:
1. Discovery - поиск PDF в source директории
2. Check - triage + OCR исправление, параллельно по документам
3. Parse - Document Parser, параллельно по документам
4. Reduce - слияние карт документов, сортировка ключей, сохранение

Ошибка подготовки или парсинга одного документа не прерывает остальные:
она попадает в DocumentReport. Фатальны пустой корпус и любая ошибка
записи вывода (директория вывода проверяется до начала работы).
"""

import time
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Callable, Dict, List, Optional, TypeVar

from loguru import logger

from config.settings import SOURCE_DIR, OUTPUT_DIR, CORPUS_OUTPUT_FILE, CORPUS_REPORT_FILE, MAX_WORKERS
from contracts.d1_extraction_dto import PreparedDocument
from contracts.d2_parsing_dto import DocumentParseResult
from contracts.d3_corpus_dto import CorpusResult, DocumentReport
from ..extraction.application.extraction_pipeline import ExtractionPipeline
from ..extraction.domain.exceptions import DocumentDiscoveryError
from ..extraction.infrastructure.file_manager import ExtractionFileManager
from ..parsing.document_parser import DocumentParser
from ..parsing.infrastructure.file_manager import ParsingFileManager
from .reducer import reduce_corpus

T = TypeVar("T")
R = TypeVar("R")


class CorpusOrchestrator:
    """
    Оркестратор корпуса.

    Работа по документам независима; пул потоков нужен в первую очередь
    для параллельных вызовов внешнего OCR.
    """

    def __init__(
        self,
        extraction_pipeline: ExtractionPipeline,
        document_parser: DocumentParser,
        source_dir: Path = SOURCE_DIR,
        output_dir: Path = OUTPUT_DIR,
        corpus_output_file: Path = CORPUS_OUTPUT_FILE,
        max_workers: int = MAX_WORKERS,
        save_output: bool = True,
        extraction_file_manager: Optional[ExtractionFileManager] = None,
        parsing_file_manager: Optional[ParsingFileManager] = None,
        report_file: Optional[Path] = CORPUS_REPORT_FILE
    ):
        self.extraction_pipeline = extraction_pipeline
        self.document_parser = document_parser
        self.source_dir = source_dir
        self.output_dir = output_dir
        self.corpus_output_file = corpus_output_file
        self.report_file = report_file
        self.max_workers = max(1, max_workers)
        self.save_output = save_output
        self.extraction_file_manager = extraction_file_manager or ExtractionFileManager()
        self.parsing_file_manager = parsing_file_manager or ParsingFileManager()

        logger.info(f"[Orchestrator] Инициализирован (workers={self.max_workers})")

    def discover(self) -> List[Path]:
        """
        Raises:
            DocumentDiscoveryError: в source директории нет PDF
        """
        documents = self.extraction_file_manager.get_document_files(self.source_dir)
        if not documents:
            raise DocumentDiscoveryError(
                message=f"Документы не найдены: {self.source_dir}",
                component="CorpusOrchestrator"
            )
        return documents

    def run(self, documents: Optional[List[Path]] = None) -> CorpusResult:
        """
        Обрабатывает корпус целиком.

        Args:
            documents: Явный список PDF; по умолчанию - discovery в source_dir

        Returns:
            CorpusResult: отсортированная карта остановок + отчёты по документам

        Raises:
            DocumentDiscoveryError: нет документов
            ParsingFileWriteError: вывод нельзя записать
        """
        run_start = time.time()

        phase_start = time.time()
        if documents is None:
            documents = self.discover()
        elif not documents:
            raise DocumentDiscoveryError(
                message="Передан пустой список документов",
                component="CorpusOrchestrator"
            )
        logger.info(
            f"[Orchestrator] Discovery: {len(documents)} документов "
            f"за {time.time() - phase_start:.2f}s"
        )

        # Недоступный вывод обнаруживается до OCR, а не после
        if self.save_output:
            self._check_output_dirs()

        reports: Dict[Path, DocumentReport] = {path: DocumentReport(name=path.name) for path in documents}

        # Фаза Check: triage + OCR
        phase_start = time.time()
        prepared = self._map(lambda path: self._prepare_one(path, reports[path]), documents)
        prepared_documents = [doc for doc in prepared if doc is not None]
        logger.info(f"[Orchestrator] Check завершён за {time.time() - phase_start:.2f}s")

        # Фаза Parse
        phase_start = time.time()
        parsed = self._map(lambda doc: self._parse_one(doc, reports[doc.source]), prepared_documents)
        logger.info(f"[Orchestrator] Parse завершён за {time.time() - phase_start:.2f}s")

        # Reduce
        contributions = [
            (str(doc.source), result.stops)
            for doc, result in zip(prepared_documents, parsed)
            if result is not None
        ]
        stops = reduce_corpus(contributions)

        if self.save_output:
            self.parsing_file_manager.save_stop_map(stops, self.corpus_output_file)
            logger.info(f"[Orchestrator] Сводный результат: {self.corpus_output_file}")

        result = CorpusResult(
            stops=stops,
            documents=[reports[path] for path in documents],
            processing_time_ms=(time.time() - run_start) * 1000,
        )

        if self.save_output and self.report_file is not None:
            self.parsing_file_manager.save_json(result.to_dict(), self.report_file)
            logger.info(f"[Orchestrator] Отчёт: {self.report_file}")

        logger.info(
            f"[Orchestrator] Готово за {result.processing_time_ms:.0f}ms: "
            f"{len(result.stops)} остановок, {result.records_count} отправлений, "
            f"ошибок документов: {len(result.failed_documents)}"
        )
        return result

    def _check_output_dirs(self) -> None:
        self.parsing_file_manager.ensure_directory(self.output_dir)
        self.parsing_file_manager.ensure_directory(self.corpus_output_file.parent)
        if self.report_file is not None:
            self.parsing_file_manager.ensure_directory(self.report_file.parent)

    def _map(self, func: Callable[[T], R], items: List[T]) -> List[R]:
        """Параллельный map с сохранением порядка входа; исключения задач пробрасываются."""
        if not items:
            return []
        with ThreadPoolExecutor(max_workers=min(self.max_workers, len(items))) as executor:
            futures = [executor.submit(func, item) for item in items]
            return [future.result() for future in futures]

    def _prepare_one(self, path: Path, report: DocumentReport) -> Optional[PreparedDocument]:
        try:
            prepared = self.extraction_pipeline.prepare(path)
        except Exception as e:
            logger.error(f"[Orchestrator] {path.name}: ошибка подготовки: {e}")
            report.error = str(e)
            return None

        report.verdict = prepared.verdict.value
        report.correction = prepared.correction.status.value if prepared.correction else None
        logger.debug(f"[Orchestrator] {path.name}: {prepared.to_dict()}")
        return prepared

    def _parse_one(self, document: PreparedDocument, report: DocumentReport) -> Optional[DocumentParseResult]:
        try:
            result = self.document_parser.parse(document.text, document.name)
        except Exception as e:
            logger.error(f"[Orchestrator] {document.name}: ошибка парсинга: {e}")
            report.error = str(e)
            return None

        report.stops = len(result.stops)
        report.records = result.records_count
        report.diagnostics = list(result.diagnostics)

        # ParsingFileWriteError здесь фатальна для всего запуска
        if self.save_output:
            output_path = self.parsing_file_manager.document_output_path(document.name, self.output_dir)
            self.parsing_file_manager.save_stop_map(result.stops, output_path)
            logger.info(f"[Orchestrator] Output file: {output_path}")

        return result
