"""
docscan — извлечение текста и метаданных из PDF и PPTX.

=== ИСПОЛЬЗОВАНИЕ ===

    from docscan import RawDocument, extract

    content = extract(RawDocument.from_path("deck.pptx"))
    print(content.text)
    print(content.to_dict())
"""

from .contracts import (
    PDF_MIME_TYPE,
    PPTX_MIME_TYPE,
    ExtractedContent,
    Metadata,
    RawDocument,
    SourceFormat,
)
from .dispatcher import extract
from .errors import (
    CorruptArchiveError,
    EmptyInputError,
    ExtractionError,
    UnsupportedFormatError,
)

__version__ = "1.0.0"

__all__ = [
    "PDF_MIME_TYPE",
    "PPTX_MIME_TYPE",
    "ExtractedContent",
    "Metadata",
    "RawDocument",
    "SourceFormat",
    "extract",
    "ExtractionError",
    "CorruptArchiveError",
    "EmptyInputError",
    "UnsupportedFormatError",
]
