"""
Part Text Scanner — текст из XML частей презентации.

Намеренно НЕ XML-парсер: простое сопоставление тегов регулярными
выражениями. Битая разметка (незакрытые теги, мусорные байты) не вызывает
исключений — несовпавшие фрагменты просто пропускаются.
"""

from __future__ import annotations

import html
import re
from functools import lru_cache
from typing import List, Optional, Pattern, Union

from ...contracts import TextRun

TEXT_RUN_TAG = "a:t"


def decode_part(data: Union[bytes, str]) -> str:
    """UTF-8 с заменой невалидных байтов. Никогда не падает."""
    if isinstance(data, str):
        return data
    return data.decode("utf-8", errors="replace")


@lru_cache(maxsize=32)
def _tag_pattern(tag: str, allow_attributes: bool) -> Pattern[str]:
    name = re.escape(tag)
    opening = f"<{name}[^>]*>" if allow_attributes else f"<{name}>"
    return re.compile(f"{opening}([^<]*)</{name}>")


def extract_text_runs(
    data: Union[bytes, str],
    tag: str = TEXT_RUN_TAG,
    decode_entities: bool = False,
) -> List[TextRun]:
    """
    Все text run'ы части в порядке появления.

    Берётся только содержимое точного тега `<a:t>...</a:t>` (без атрибутов
    и вложенных тегов). Пустые и пробельные run'ы отбрасываются.

    Args:
        data: Сырые байты XML части
        tag: Имя тега text run
        decode_entities: Раскрывать &amp; / &#x41; и т.п.
    """
    content = decode_part(data)
    runs: List[TextRun] = []
    for match in _tag_pattern(tag, False).finditer(content):
        text = match.group(1)
        if decode_entities:
            text = html.unescape(text)
        if text.strip():
            runs.append(text)
    return runs


def find_tag_text(
    data: Union[bytes, str],
    tag: str,
    allow_attributes: bool = False,
    decode_entities: bool = False,
) -> Optional[str]:
    """Содержимое первого вхождения тега или None."""
    match = _tag_pattern(tag, allow_attributes).search(decode_part(data))
    if not match:
        return None
    text = match.group(1)
    return html.unescape(text) if decode_entities else text
