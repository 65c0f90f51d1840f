"""
Адаптер для ocrmypdf, реализующий интерфейс IOCRProvider (домен Extraction).

ocrmypdf запускается как внешний процесс: принудительное распознавание,
deskew и очистка артефактов, польский язык.
"""

import subprocess
from pathlib import Path
from typing import List, Optional

from loguru import logger

from config.settings import OCR_BINARY, OCR_LANGUAGE, OCR_OUTPUT_TYPE, OCR_TIMEOUT_SECONDS
from ...domain.interfaces import IOCRProvider
from ...domain.exceptions import OCRProviderError


class OcrMyPdfAdapter(IOCRProvider):
    """
    Адаптер ocrmypdf (домен Extraction).

    Таймаут и ненулевой код выхода = False.
    Бинарник не запускается вообще = OCRProviderError.
    """

    def __init__(
        self,
        binary: str = OCR_BINARY,
        language: str = OCR_LANGUAGE,
        timeout: Optional[float] = OCR_TIMEOUT_SECONDS
    ):
        self.binary = binary
        self.language = language
        self.timeout = timeout
        logger.debug(f"[OCR] OcrMyPdfAdapter инициализирован (lang={language}, timeout={timeout})")

    def build_command(self, input_path: Path, output_path: Path) -> List[str]:
        return [
            self.binary,
            "--force-ocr",
            "--output-type", OCR_OUTPUT_TYPE,
            "--language", self.language,
            "--deskew",
            "--clean",
            "--clean-final",
            str(input_path),
            str(output_path),
        ]

    def correct(self, input_path: Path, output_path: Path) -> bool:
        cmd = self.build_command(input_path, output_path)
        logger.debug(f"[OCR] Запуск: {' '.join(cmd)}")

        try:
            result = subprocess.run(cmd, capture_output=True, text=True, timeout=self.timeout)
        except subprocess.TimeoutExpired:
            logger.warning(f"[OCR] Таймаут {self.timeout}s для {input_path.name}")
            return False
        except OSError as e:
            raise OCRProviderError(
                message=f"Не удалось запустить {self.binary}",
                component="OcrMyPdfAdapter",
                original_error=e
            )

        if result.returncode != 0:
            stderr = (result.stderr or "").strip().splitlines()
            logger.warning(
                f"[OCR] {self.binary} завершился с кодом {result.returncode} для {input_path.name}"
                + (f": {stderr[-1]}" if stderr else "")
            )
            return False

        return True
