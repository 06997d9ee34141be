"""
PDF Byte Scanner — эвристическое извлечение текста из PDF.

Без разбора графа объектов и без распаковки фильтров потоков: весь файл
декодируется как текст и сканируется регулярными выражениями. Подходит для
несжатых content stream'ов; сжатые потоки отсекаются окном длины.

Ни одна функция модуля не падает на битых данных.
"""

from __future__ import annotations

import re
from typing import List, Optional

from ...contracts import Metadata

STREAM_BLOCK_RE = re.compile(r"stream[\r\n]+([\s\S]*?)[\r\n]+endstream")
NON_PRINTABLE_RE = re.compile(r"[^\x20-\x7E\r\n]")
WHITESPACE_RE = re.compile(r"\s+")

# (literal) Tj — литерал в пределах одной строки, без раскрытия escape-последовательностей
TEXT_SHOW_RE = re.compile(r"\(([^\r\n]*?)\)\s*Tj")

METADATA_KEYS = {
    "title": "Title",
    "author": "Author",
    "creator": "Creator",
    "producer": "Producer",
}
PAGE_COUNT_RE = re.compile(r"/Count\s+(\d+)")


def decode_pdf_bytes(data: bytes) -> str:
    """Декодирование без ошибок: невалидные байты -> U+FFFD."""
    return data.decode("utf-8", errors="replace")


def find_stream_blocks(content: str) -> List[str]:
    """Содержимое всех блоков stream ... endstream (без маркеров)."""
    return [match.group(1) for match in STREAM_BLOCK_RE.finditer(content)]


def clean_stream_block(block: str) -> str:
    """Непечатаемые символы -> пробел, схлопывание пробелов, trim."""
    readable = NON_PRINTABLE_RE.sub(" ", block)
    return WHITESPACE_RE.sub(" ", readable).strip()


def find_stream_texts(content: str, min_length: int, max_length: int) -> List[str]:
    """
    Читаемый текст stream-блоков, попавший в окно длины [min_length, max_length].

    Короткие блоки — шум, длинные — скорее всего сжатые/бинарные данные.
    """
    texts: List[str] = []
    for block in find_stream_blocks(content):
        readable = clean_stream_block(block)
        if min_length <= len(readable) <= max_length:
            texts.append(readable)
    return texts


def find_text_show_literals(content: str) -> List[str]:
    """Литералы операторов `(...) Tj` как есть, пустые отбрасываются."""
    literals: List[str] = []
    for match in TEXT_SHOW_RE.finditer(content):
        literal = match.group(1).strip()
        if literal:
            literals.append(literal)
    return literals


def find_metadata(content: str) -> Metadata:
    """/Title, /Author, /Creator, /Producer — первое совпадение по каждому ключу."""
    fields = {}
    for field_name, key in METADATA_KEYS.items():
        match = re.search(rf"/{key}\s*\(([^\r\n]*?)\)", content)
        if match:
            fields[field_name] = match.group(1)
    return Metadata(**fields)


def find_page_count(content: str) -> Optional[int]:
    """
    Первое `/Count N` в файле.

    Неточная эвристика: в сложных PDF первым может оказаться /Count
    вложенного узла дерева страниц или outline. Отсутствие -> None, не 0.
    """
    match = PAGE_COUNT_RE.search(content)
    return int(match.group(1)) if match else None
