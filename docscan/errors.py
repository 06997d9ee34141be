"""
Ошибки извлечения.

Наружу (из `extract`) выходят только три типа:
- UnsupportedFormatError — неизвестный заявленный MIME тип
- CorruptArchiveError — архив презентации не открывается
- EmptyInputError — пустой буфер

Ошибки отдельных записей архива (EntryNotFoundError, DecompressionError)
поглощаются парсером презентаций: один битый слайд не ломает документ.
"""


class ExtractionError(Exception):
    """Базовая ошибка docscan."""


class UnsupportedFormatError(ExtractionError):
    """Заявленный MIME тип не поддерживается."""

    def __init__(self, mime_type: str):
        self.mime_type = mime_type
        super().__init__(f"Unsupported file type: {mime_type!r}. Please upload a PDF or PPTX file.")


class CorruptArchiveError(ExtractionError):
    """Контейнер не удалось открыть как zip-архив."""


class EmptyInputError(ExtractionError):
    """Документ нулевой длины."""

    def __init__(self, file_name: str = ""):
        self.file_name = file_name
        super().__init__(f"Empty document | file={file_name}")


class ArchiveEntryError(ExtractionError):
    """Ошибка чтения конкретной записи архива."""

    def __init__(self, path: str, reason: str = ""):
        self.path = path
        message = f"{self.__class__.__name__} | entry={path}"
        if reason:
            message = f"{message} reason={reason}"
        super().__init__(message)


class EntryNotFoundError(ArchiveEntryError):
    """Запись отсутствует в архиве."""


class DecompressionError(ArchiveEntryError):
    """Запись есть, но распаковать её не удалось."""
