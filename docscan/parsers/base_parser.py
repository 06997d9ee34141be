"""
Base Parser для docscan

Базовый класс для всех экстракторов с общей функциональностью.
"""

import time
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from ..errors import EmptyInputError
from ..logging_config import get_logger

if TYPE_CHECKING:
    from ..contracts import ExtractedContent, RawDocument


class BaseParser(ABC):
    """Базовый класс. Реализует шаблон Template Method для извлечения."""

    mime_type: str = ""

    def __init__(self, parser_name: str):
        self.logger = get_logger(f"docscan.parser.{parser_name}")

    def parse(self, document: 'RawDocument') -> 'ExtractedContent':
        """Финальный метод: проверяет вход и вызывает реализацию `_parse`."""
        if not document.data:
            raise EmptyInputError(document.file_name)

        started = time.perf_counter()
        content = self._parse(document)
        self.logger.info(
            f"Extraction complete | file={document.file_name} size={document.size} "
            f"chars={len(content.text)} fallback={content.is_fallback} "
            f"elapsed={time.perf_counter() - started:.3f}s"
        )
        return content

    @abstractmethod
    def _parse(self, document: 'RawDocument') -> 'ExtractedContent':
        """Реализация извлечения в наследнике."""
        raise NotImplementedError
