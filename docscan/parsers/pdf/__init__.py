"""
PDF Parser — модуль для обработки PDF-документов.

=== НАЗНАЧЕНИЕ ===
Быстрое извлечение текста из PDF без внешних библиотек:
- Несжатые content stream'ы (stream ... endstream)
- Литералы оператора Tj
- Метаданные Info (/Title, /Author, /Creator, /Producer)
- Приблизительное число страниц (/Count)

=== ОГРАНИЧЕНИЯ ===
Сжатые потоки (FlateDecode) не распаковываются. Если читаемого текста нет,
возвращается строка-заглушка с именем файла и флагом is_fallback.

=== ЭКСПОРТЫ ===
- PDFParser — основной парсер
- find_metadata / find_page_count — отдельные сканеры

=== ИСПОЛЬЗОВАНИЕ ===

    from docscan.contracts import RawDocument

    parser = PDFParser()
    content = parser.parse(RawDocument.from_path("report.pdf"))
    print(content.metadata.title, content.page_count)
"""

from .pdf_parser import PDFParser
from .pdf_scanner import find_metadata, find_page_count

__all__ = ['PDFParser', 'find_metadata', 'find_page_count']
