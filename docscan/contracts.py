"""
Контракты docscan.

Типы данных, которыми обмениваются компоненты извлечения.
Все значения неизменяемые: результат — чистая функция байтов документа.
"""

from __future__ import annotations

import mimetypes
from dataclasses import dataclass, field, fields
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

PDF_MIME_TYPE = "application/pdf"
PPTX_MIME_TYPE = "application/vnd.openxmlformats-officedocument.presentationml.presentation"

# Наименьшая единица извлечённого текста, без позиционных данных
TextRun = str


@dataclass(frozen=True)
class RawDocument:
    """Загруженный документ: байты + заявленный MIME тип."""

    data: bytes
    mime_type: str
    file_name: str = ""
    size: int = -1

    def __post_init__(self) -> None:
        if self.size < 0:
            object.__setattr__(self, "size", len(self.data))

    @classmethod
    def from_path(cls, path: Union[str, Path], mime_type: Optional[str] = None) -> "RawDocument":
        """Прочитать файл с диска. MIME тип угадывается по расширению, если не задан."""
        path = Path(path)
        if mime_type is None:
            mime_type = guess_mime_type(path.name) or ""
        data = path.read_bytes()
        return cls(data=data, mime_type=mime_type, file_name=path.name, size=len(data))


@dataclass(frozen=True)
class ArchiveEntry:
    """Запись zip-архива (только чтение, в рамках одной сессии ридера)."""

    path: str
    compressed_size: int
    file_size: int


@dataclass(frozen=True)
class SlidePart:
    """XML часть слайда (или заметок) с порядковым номером из имени."""

    path: str
    ordinal: int
    runs: List[TextRun] = field(default_factory=list)

    @property
    def text(self) -> str:
        return " ".join(self.runs)


@dataclass(frozen=True)
class Metadata:
    """Метаданные документа. Отсутствующее поле — None, а не пустая строка."""

    title: Optional[str] = None
    author: Optional[str] = None
    creator: Optional[str] = None
    producer: Optional[str] = None
    creation_date: Optional[str] = None
    modification_date: Optional[str] = None

    def as_dict(self) -> Dict[str, str]:
        """Только заполненные поля, ключи в camelCase."""
        result: Dict[str, str] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is not None:
                result[_camel(f.name)] = value
        return result


class SourceFormat(str, Enum):
    """Какой экстрактор построил результат."""
    PRESENTATION = "presentation"
    PDF = "pdf"


@dataclass(frozen=True)
class ExtractedContent:
    """Результат извлечения — единственное, что видит внешний потребитель."""

    text: str
    source_format: SourceFormat
    metadata: Metadata = field(default_factory=Metadata)
    slide_count: Optional[int] = None
    page_count: Optional[int] = None
    is_fallback: bool = False  # текст — заглушка, содержимое не найдено

    def to_dict(self) -> Dict[str, Any]:
        """Сериализация для внешней границы: неустановленные поля опускаются."""
        result: Dict[str, Any] = {
            "text": self.text,
            "sourceFormat": self.source_format.value,
        }
        if self.slide_count is not None:
            result["slideCount"] = self.slide_count
        if self.page_count is not None:
            result["pageCount"] = self.page_count
        result["metadata"] = self.metadata.as_dict()
        if self.is_fallback:
            result["isFallback"] = True
        return result


def guess_mime_type(file_name: str) -> Optional[str]:
    """MIME тип по расширению (.pptx известен не во всех системных таблицах)."""
    if file_name.lower().endswith(".pptx"):
        return PPTX_MIME_TYPE
    mime_type, _ = mimetypes.guess_type(file_name)
    return mime_type


def _camel(name: str) -> str:
    head, *tail = name.split("_")
    return head + "".join(part.title() for part in tail)
