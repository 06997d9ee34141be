"""
Коллекция экстракторов документов.

=== НАЗНАЧЕНИЕ ===
Модуль экспортирует экстракторы и реестр, выбирающий экстрактор
по заявленному MIME типу (без анализа содержимого).

=== ПАРСЕРЫ ===
- BaseParser — базовый класс для всех парсеров
- PowerPointParser — application/vnd.openxmlformats-officedocument.presentationml.presentation
- PDFParser — application/pdf

=== ИСПОЛЬЗОВАНИЕ ===

    from docscan.parsers import build_parser_registry
    from docscan.contracts import RawDocument

    registry = build_parser_registry()
    content = registry.parse(RawDocument.from_path("deck.pptx"))

=== СОЗДАНИЕ НОВОГО ПАРСЕРА ===

    from .base_parser import BaseParser

    class RTFParser(BaseParser):
        mime_type = "application/rtf"

        def __init__(self):
            super().__init__("rtf")

        def _parse(self, document: RawDocument) -> ExtractedContent:
            ...
"""

from typing import Dict, List, Optional

from ..contracts import ExtractedContent, RawDocument
from ..errors import UnsupportedFormatError
from .base_parser import BaseParser
from .pdf.pdf_parser import PDFParser
from .pptx.pptx_parser import PowerPointParser


class ParserRegistry:
    """Реестр парсеров по точному MIME типу."""

    def __init__(self, parsers: Dict[str, BaseParser]):
        self._parsers = dict(parsers)

    def get_parser(self, mime_type: str) -> Optional[BaseParser]:
        """Получить парсер по MIME типу (точное совпадение)."""
        return self._parsers.get(mime_type)

    def supported_mime_types(self) -> List[str]:
        """Список поддерживаемых MIME типов."""
        return list(self._parsers.keys())

    def parse(self, document: RawDocument) -> ExtractedContent:
        """Извлечение через соответствующий парсер."""
        parser = self.get_parser(document.mime_type)
        if not parser:
            raise UnsupportedFormatError(document.mime_type)
        return parser.parse(document)


def build_parser_registry() -> ParserRegistry:
    """Создать реестр парсеров с настройками по умолчанию."""
    parsers: List[BaseParser] = [PDFParser(), PowerPointParser()]
    return ParserRegistry({parser.mime_type: parser for parser in parsers})


__all__ = [
    "BaseParser",
    "PDFParser",
    "PowerPointParser",
    "ParserRegistry",
    "build_parser_registry",
]
