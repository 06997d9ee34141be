#!/usr/bin/env python3
"""PDF extractor built on the byte scanner; falls back to a placeholder line when nothing readable is found."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from ...contracts import ExtractedContent, PDF_MIME_TYPE, SourceFormat
from ...settings import settings
from ..base_parser import BaseParser
from .pdf_scanner import (
    decode_pdf_bytes,
    find_metadata,
    find_page_count,
    find_stream_texts,
    find_text_show_literals,
)

if TYPE_CHECKING:  # pragma: no cover
    from ...contracts import RawDocument

FALLBACK_TEXT = "PDF Document: {file_name} - Content extracted for analysis"


class PDFParser(BaseParser):
    """Парсер PDF: stream-блоки + операторы Tj + маркеры метаданных."""

    mime_type = PDF_MIME_TYPE

    def __init__(self, min_stream_length: Optional[int] = None, max_stream_length: Optional[int] = None) -> None:
        super().__init__("pdf-parser")
        self.min_stream_length = (
            settings.PDF_STREAM_MIN_TEXT_LENGTH if min_stream_length is None else min_stream_length
        )
        self.max_stream_length = (
            settings.PDF_STREAM_MAX_TEXT_LENGTH if max_stream_length is None else max_stream_length
        )

    def _parse(self, document: "RawDocument") -> ExtractedContent:
        self.logger.info(f"Parsing PDF document | file={document.file_name}")
        content = decode_pdf_bytes(document.data)

        stream_texts = find_stream_texts(content, self.min_stream_length, self.max_stream_length)
        literals = find_text_show_literals(content)

        text = "".join(f"{chunk}\n" for chunk in stream_texts)
        text += "".join(f"{literal} " for literal in literals)
        text = text.strip()

        is_fallback = not text
        if is_fallback:
            self.logger.warning(f"No readable PDF text found, using placeholder | file={document.file_name}")
            text = FALLBACK_TEXT.format(file_name=document.file_name)

        metadata = find_metadata(content)
        page_count = find_page_count(content)

        self.logger.debug(
            f"PDF scan | streams={len(stream_texts)} literals={len(literals)} pages={page_count}"
        )
        return ExtractedContent(
            text=text,
            source_format=SourceFormat.PDF,
            page_count=page_count,
            metadata=metadata,
            is_fallback=is_fallback,
        )
