"""Zip container reader scoped to a single extraction call."""

from __future__ import annotations

import io
import lzma
import zipfile
import zlib
from typing import List, Optional

from ...contracts import ArchiveEntry
from ...errors import CorruptArchiveError, DecompressionError, EntryNotFoundError
from ...logging_config import get_logger

logger = get_logger("docscan.archive")


class ArchiveReader:
    """Обёртка над zipfile.ZipFile поверх буфера в памяти.

    Используется только как контекстный менеджер:

        with ArchiveReader.open(data) as archive:
            for path in archive.list():
                payload = archive.read(path)

    Порядок записей не гарантируется и не должен использоваться.
    """

    def __init__(self, zip_file: zipfile.ZipFile):
        self._zip: Optional[zipfile.ZipFile] = zip_file

    @classmethod
    def open(cls, data: bytes) -> "ArchiveReader":
        try:
            zip_file = zipfile.ZipFile(io.BytesIO(data))
        except (zipfile.BadZipFile, zipfile.LargeZipFile, ValueError, OSError) as e:
            raise CorruptArchiveError(f"Cannot open archive | error={type(e).__name__}: {e}") from e
        return cls(zip_file)

    def __enter__(self) -> "ArchiveReader":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        if self._zip is not None:
            self._zip.close()
            self._zip = None

    @property
    def _handle(self) -> zipfile.ZipFile:
        if self._zip is None:
            raise ValueError("ArchiveReader is closed")
        return self._zip

    def list(self) -> List[str]:
        """Пути всех записей (без каталогов)."""
        return [info.filename for info in self._handle.infolist() if not info.is_dir()]

    def entries(self) -> List[ArchiveEntry]:
        return [
            ArchiveEntry(path=info.filename, compressed_size=info.compress_size, file_size=info.file_size)
            for info in self._handle.infolist()
            if not info.is_dir()
        ]

    def has(self, path: str) -> bool:
        try:
            self._handle.getinfo(path)
        except KeyError:
            return False
        return True

    def read(self, path: str) -> bytes:
        """Распаковать запись целиком."""
        handle = self._handle
        try:
            info = handle.getinfo(path)
        except KeyError as e:
            raise EntryNotFoundError(path) from e

        try:
            return handle.read(info)
        # NotImplementedError: неподдерживаемый метод сжатия, RuntimeError: шифрование
        except (
            zipfile.BadZipFile, zlib.error, lzma.LZMAError, EOFError, NotImplementedError, RuntimeError, OSError,
        ) as e:
            raise DecompressionError(path, f"{type(e).__name__}: {e}") from e
