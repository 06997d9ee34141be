"""
Archive — чтение zip-контейнеров (.pptx).

=== ЭКСПОРТЫ ===
- ArchiveReader — open / list / read в рамках одного вызова
"""

from .reader import ArchiveReader

__all__ = ["ArchiveReader"]
