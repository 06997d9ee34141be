"""
Extraction Dispatcher — единая точка входа.

Маршрутизирует документ по заявленному MIME типу. Правильность типа —
ответственность вызывающей стороны: содержимое не анализируется.
"""

from typing import Optional

from .contracts import ExtractedContent, RawDocument
from .errors import EmptyInputError, UnsupportedFormatError
from .logging_config import clear_document_context, get_logger, set_document_context
from .parsers import ParserRegistry, build_parser_registry

logger = get_logger("docscan.dispatcher")

_default_registry: Optional[ParserRegistry] = None


def get_default_registry() -> ParserRegistry:
    """Реестр по умолчанию (парсеры без состояния, безопасно делить между потоками)."""
    global _default_registry
    if _default_registry is None:
        _default_registry = build_parser_registry()
    return _default_registry


def extract(document: RawDocument, registry: Optional[ParserRegistry] = None) -> ExtractedContent:
    """
    Извлечь текст и метаданные документа.

    Raises:
        EmptyInputError: буфер нулевой длины (проверяется первым, независимо от типа)
        UnsupportedFormatError: MIME тип не PDF и не PPTX
        CorruptArchiveError: .pptx не открывается как архив
    """
    registry = registry or get_default_registry()
    set_document_context(document.file_name)
    try:
        if not document.data:
            logger.warning(f"Rejected empty document | mime_type={document.mime_type}")
            raise EmptyInputError(document.file_name)

        parser = registry.get_parser(document.mime_type)
        if parser is None:
            logger.warning(f"Rejected unsupported type | mime_type={document.mime_type}")
            raise UnsupportedFormatError(document.mime_type)

        return parser.parse(document)
    finally:
        clear_document_context()
