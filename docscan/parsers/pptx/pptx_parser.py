#!/usr/bin/env python3
"""PowerPoint (.pptx) extractor: ordered slide text, speaker notes and docProps metadata."""

from __future__ import annotations

import contextvars
import re
from concurrent.futures import ThreadPoolExecutor
from typing import TYPE_CHECKING, Iterable, List, Optional

from ...contracts import ExtractedContent, Metadata, PPTX_MIME_TYPE, SlidePart, SourceFormat
from ...errors import ArchiveEntryError
from ...settings import settings
from ..archive import ArchiveReader
from ..base_parser import BaseParser
from .part_scanner import extract_text_runs, find_tag_text

if TYPE_CHECKING:  # pragma: no cover
    from ...contracts import RawDocument

CORE_PROPS_PATH = "docProps/core.xml"
APP_PROPS_PATH = "docProps/app.xml"

SLIDE_PART_RE = re.compile(r"ppt/slides/slide(\d+)\.xml$")
NOTES_PART_RE = re.compile(r"ppt/notesSlides/notesSlide(\d+)\.xml$")

SLIDE_HEADER = "\n--- Slide {ordinal} ---\n"
NOTES_HEADER = "\n\n--- Speaker Notes ---"


def parse_ordinal(path: str, pattern: re.Pattern) -> int:
    """Номер слайда из имени части; 0 если номер не разобрать."""
    match = pattern.search(path)
    if not match:
        return 0
    try:
        return int(match.group(1))
    except ValueError:
        return 0


def select_parts(paths: Iterable[str], pattern: re.Pattern) -> List[str]:
    """Части, подходящие под шаблон имени, по возрастанию номера (затем по пути)."""
    matching = [path for path in paths if pattern.search(path)]
    return sorted(matching, key=lambda path: (parse_ordinal(path, pattern), path))


class PowerPointParser(BaseParser):
    """Извлечение текста из .pptx без python-pptx: zip + сопоставление тегов."""

    mime_type = PPTX_MIME_TYPE

    def __init__(self, max_workers: Optional[int] = None, decode_entities: Optional[bool] = None) -> None:
        super().__init__("powerpoint-parser")
        self.max_workers = max_workers or settings.PPTX_MAX_WORKERS
        self.decode_entities = settings.DECODE_XML_ENTITIES if decode_entities is None else decode_entities

    def _parse(self, document: "RawDocument") -> ExtractedContent:
        self.logger.info(f"Parsing PowerPoint document | file={document.file_name}")

        # CorruptArchiveError пробрасывается наружу
        with ArchiveReader.open(document.data) as archive:
            paths = archive.list()
            metadata = self._extract_metadata(archive)

            slide_paths = select_parts(paths, SLIDE_PART_RE)
            notes_paths = select_parts(paths, NOTES_PART_RE)

            slides = self._scan_parts(archive, slide_paths, SLIDE_PART_RE)
            notes = self._scan_parts(archive, notes_paths, NOTES_PART_RE)

        text = self._compose_text(slides, notes)
        self.logger.info(
            f"PowerPoint parsing complete | slides={len(slide_paths)} notes={len(notes_paths)} length={len(text)}"
        )
        return ExtractedContent(
            text=text,
            source_format=SourceFormat.PRESENTATION,
            slide_count=len(slide_paths),
            metadata=metadata,
        )

    def _extract_metadata(self, archive: ArchiveReader) -> Metadata:
        core = self._read_optional(archive, CORE_PROPS_PATH)
        app = self._read_optional(archive, APP_PROPS_PATH)

        fields = {}
        if core is not None:
            fields["title"] = self._tag(core, "dc:title")
            fields["author"] = self._tag(core, "dc:creator")
            fields["creation_date"] = self._tag(core, "dcterms:created", allow_attributes=True)
            fields["modification_date"] = self._tag(core, "dcterms:modified", allow_attributes=True)
        if app is not None:
            fields["creator"] = self._tag(app, "Application")

        return Metadata(**fields)

    def _tag(self, data: bytes, tag: str, allow_attributes: bool = False) -> Optional[str]:
        value = find_tag_text(data, tag, allow_attributes=allow_attributes, decode_entities=self.decode_entities)
        # Пустой тег (<dc:title></dc:title>) считаем отсутствующим значением
        return value if value and value.strip() else None

    def _read_optional(self, archive: ArchiveReader, path: str) -> Optional[bytes]:
        if not archive.has(path):
            self.logger.debug(f"Metadata part missing | part={path}")
            return None
        try:
            return archive.read(path)
        except ArchiveEntryError as e:
            self.logger.warning(f"Metadata part unreadable | part={path} error={e}")
            return None

    def _scan_parts(self, archive: ArchiveReader, paths: List[str], pattern: re.Pattern) -> List[SlidePart]:
        """Прочитать и просканировать части. Битые части пропускаются."""

        def scan(path: str) -> Optional[SlidePart]:
            try:
                data = archive.read(path)
            except ArchiveEntryError as e:
                self.logger.warning(f"Skipping unreadable part | part={path} error={e}")
                return None
            runs = extract_text_runs(data, decode_entities=self.decode_entities)
            return SlidePart(path=path, ordinal=parse_ordinal(path, pattern), runs=runs)

        if self.max_workers > 1 and len(paths) > 1:
            with ThreadPoolExecutor(max_workers=self.max_workers, thread_name_prefix="pptx-part") as executor:
                # у каждой задачи своя копия контекста: маркер документа для логов
                futures = [executor.submit(contextvars.copy_context().run, scan, path) for path in paths]
                scanned = [future.result() for future in futures]
        else:
            scanned = [scan(path) for path in paths]

        parts = [part for part in scanned if part is not None]
        # порядок вывода — по номеру части
        return sorted(parts, key=lambda part: (part.ordinal, part.path))

    @staticmethod
    def _compose_text(slides: List[SlidePart], notes: List[SlidePart]) -> str:
        chunks: List[str] = []

        for slide in slides:
            slide_text = slide.text
            if slide_text.strip():
                chunks.append(SLIDE_HEADER.format(ordinal=slide.ordinal) + slide_text)

        notes_texts = [part.text for part in notes if part.text.strip()]
        if notes_texts:
            chunks.append(NOTES_HEADER)
            chunks.extend(f"\n{notes_text}" for notes_text in notes_texts)

        return "".join(chunks).strip()
