"""
Скачивание PDF расписаний с сайта перевозчика.

Индексная страница содержит ссылки на PDF (по одному на линию / группу линий).
"""

from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import List, Optional
from urllib.parse import urljoin, urlparse

import requests
from bs4 import BeautifulSoup
from loguru import logger

from config.settings import (
    TIMETABLE_INDEX_URL,
    TIMETABLE_LINK_SELECTOR,
    DOWNLOAD_TIMEOUT_SECONDS,
    MAX_WORKERS,
)
from ..domain.interfaces import IDocumentSource
from ..domain.exceptions import DownloadError


class TimetableDownloader(IDocumentSource):
    """
    Источник документов: индексная страница + параллельное скачивание PDF.

    Ошибка одной ссылки логируется и пропускается,
    ошибка загрузки индекса прерывает скачивание.
    """

    def __init__(
        self,
        index_url: str = TIMETABLE_INDEX_URL,
        link_selector: str = TIMETABLE_LINK_SELECTOR,
        timeout: float = DOWNLOAD_TIMEOUT_SECONDS,
        max_workers: int = MAX_WORKERS,
        session: Optional[requests.Session] = None
    ):
        self.index_url = index_url
        self.link_selector = link_selector
        self.timeout = timeout
        self.max_workers = max_workers
        self.session = session or requests.Session()

    def list_links(self) -> List[str]:
        """Возвращает абсолютные ссылки на PDF с индексной страницы."""
        try:
            response = self.session.get(self.index_url, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            raise DownloadError(
                message=f"Не удалось загрузить индекс расписаний: {self.index_url}",
                component="TimetableDownloader",
                original_error=e
            )

        soup = BeautifulSoup(response.text, "html.parser")
        links = []
        for anchor in soup.select(self.link_selector):
            href = anchor.get("href")
            if href:
                links.append(urljoin(self.index_url, href))

        logger.info(f"[Download] Найдено ссылок: {len(links)}")
        return links

    def download(self, target_dir: Path) -> List[Path]:
        target_dir.mkdir(parents=True, exist_ok=True)
        links = self.list_links()

        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            results = list(executor.map(lambda link: self._download_one(link, target_dir), links))

        saved = [path for path in results if path is not None]
        logger.info(f"[Download] Скачано {len(saved)}/{len(links)} документов")
        return saved

    def _download_one(self, link: str, target_dir: Path) -> Optional[Path]:
        # Имя файла = последний сегмент пути URL
        file_name = Path(urlparse(link).path).name
        if not file_name:
            logger.warning(f"[Download] Пустое имя файла в ссылке: {link}")
            return None

        try:
            response = self.session.get(link, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            logger.warning(f"[Download] Ошибка скачивания {link}: {e}")
            return None

        output_path = target_dir / file_name
        try:
            output_path.write_bytes(response.content)
        except OSError as e:
            logger.warning(f"[Download] Не удалось сохранить {output_path}: {e}")
            return None
        logger.debug(f"[Download] Сохранено: {output_path}")
        return output_path
