#!/usr/bin/env python3
"""
Точка входа для запуска пайплайна расписаний.

Использование:
    # Скачать PDF с сайта перевозчика и обработать корпус
    python scripts/run_pipeline.py --download

    # Обработать уже скачанные PDF из data/source/
    python scripts/run_pipeline.py

    # Очистить data/ и выйти
    python scripts/run_pipeline.py --clear

    # Не вызывать OCR для повреждённых документов
    python scripts/run_pipeline.py --ignore-ocr
"""

import sys
import argparse
from pathlib import Path

from loguru import logger

# Добавляем корень проекта в путь
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from config.settings import (
    validate_config,
    SOURCE_DIR,
    OUTPUT_DIR,
    TEMP_DIR,
    CORPUS_OUTPUT_FILE,
    CORPUS_REPORT_FILE,
    MAX_WORKERS,
    DEFAULT_TEMPLATE,
)
from timetable_ocr.extraction.domain.exceptions import DocumentDiscoveryError, DownloadError
from timetable_ocr.extraction.infrastructure import ExtractionFileManager, TimetableDownloader
from timetable_ocr.parsing.domain.exceptions import ParsingError
from timetable_ocr.orchestration import create_corpus_orchestrator


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="ZPGSA timetable PDF -> JSON")
    parser.add_argument("-d", "--download", action="store_true",
                        help="Скачать PDF расписаний перед обработкой")
    parser.add_argument("-c", "--clear", action="store_true",
                        help="Очистить source, output и temp директории и выйти")
    parser.add_argument("-i", "--ignore-ocr", action="store_true",
                        help="Не вызывать OCR для документов с плохим текстом")
    parser.add_argument("--source", type=Path, default=SOURCE_DIR, help="Директория с PDF")
    parser.add_argument("--output", type=Path, default=OUTPUT_DIR, help="Директория JSON по документам")
    parser.add_argument("--workers", type=int, default=MAX_WORKERS, help="Число параллельных потоков")
    parser.add_argument("--template", default=DEFAULT_TEMPLATE, help="Шаблон документов перевозчика")
    parser.add_argument("-v", "--verbose", action="store_true", help="DEBUG логирование")
    return parser.parse_args(argv)


def clear_data(directories) -> int:
    file_manager = ExtractionFileManager()
    removed = sum(file_manager.clear_directory(directory) for directory in directories)
    logger.info(f"[Pipeline] Удалено файлов: {removed}")
    return removed


def main(argv=None) -> int:
    """Главная функция запуска пайплайна."""
    args = parse_args(argv)

    logger.remove()
    logger.add(
        sys.stdout,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <level>{message}</level>",
        level="DEBUG" if args.verbose else "INFO"
    )

    logger.info("=" * 60)
    logger.info("  TIMETABLE OCR - Download + Check + Parse + Reduce")
    logger.info("=" * 60)

    try:
        validate_config(require_ocr=not args.ignore_ocr)
    except ValueError as e:
        logger.error(f"[Pipeline] Ошибка конфигурации:\n{e}")
        return 1

    if args.clear:
        clear_data([args.source, args.output, TEMP_DIR])
        return 0

    if args.download:
        try:
            clear_data([args.source])
            TimetableDownloader(max_workers=args.workers).download(args.source)
        except DownloadError as e:
            logger.error(f"[Pipeline] {e}")
            return 1

    try:
        orchestrator = create_corpus_orchestrator(
            source_dir=args.source,
            output_dir=args.output,
            corpus_output_file=CORPUS_OUTPUT_FILE,
            template=args.template,
            max_workers=args.workers,
            ignore_ocr=args.ignore_ocr
        )
        result = orchestrator.run()
    except (DocumentDiscoveryError, ParsingError) as e:
        logger.error(f"[Pipeline] {e}")
        return 1

    for report in result.failed_documents:
        logger.warning(f"[Pipeline] {report.name}: {report.error}")

    logger.info("=" * 60)
    logger.info(f"  Документов: {len(result.documents)} (ошибок: {len(result.failed_documents)})")
    logger.info(f"  Остановок: {len(result.stops)}, отправлений: {result.records_count}")
    logger.info(f"  Результат: {CORPUS_OUTPUT_FILE}")
    logger.info(f"  Отчёт: {CORPUS_REPORT_FILE}")
    logger.info("=" * 60)
    return 0


if __name__ == "__main__":
    sys.exit(main())
