"""
PowerPoint Parser — модуль для обработки презентаций.

=== НАЗНАЧЕНИЕ ===
Извлечение текста из .pptx файлов:
- Текст со слайдов (по порядку номеров в именах частей)
- Заметки докладчика
- Метаданные docProps (core.xml / app.xml)

=== СТЕК ТЕХНОЛОГИЙ ===
- zipfile — чтение контейнера
- re — сопоставление тегов <a:t> (без XML-парсера, устойчиво к битой разметке)

=== ЭКСПОРТЫ ===
- PowerPointParser — основной парсер
- extract_text_runs / find_tag_text — сканер XML частей

=== ИСПОЛЬЗОВАНИЕ ===

    from docscan.contracts import RawDocument

    parser = PowerPointParser()
    doc = RawDocument.from_path("presentation.pptx")
    content = parser.parse(doc)
    print(f"Extracted {len(content.text)} chars from {content.slide_count} slides")
"""

from .part_scanner import extract_text_runs, find_tag_text
from .pptx_parser import PowerPointParser

__all__ = ["PowerPointParser", "extract_text_runs", "find_tag_text"]
