"""
Логирование для docscan.

Использует contextvars для маркировки всех событий одного документа
его именем файла.
"""

import logging
import sys
from contextvars import ContextVar
from typing import Optional, TextIO

from pythonjsonlogger.json import JsonFormatter

from .settings import settings


# Контекстная переменная с именем обрабатываемого документа
document_marker: ContextVar[str] = ContextVar('document_marker', default='-')


def set_document_context(file_name: Optional[str]) -> None:
    """Установить маркер документа для текущего потока/задачи."""
    document_marker.set(file_name or '-')


def clear_document_context() -> None:
    """Очистить маркер документа."""
    document_marker.set('-')


def get_document_context() -> str:
    """Получить текущий маркер документа."""
    return document_marker.get()


class DocumentContextFilter(logging.Filter):
    """Дополняет каждый LogRecord полем `document` из contextvars."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "document"):
            record.document = document_marker.get()
        return True


def setup_logging(
    level: Optional[str] = None,
    json_format: Optional[bool] = None,
    stream: Optional[TextIO] = None,
) -> None:
    """
    Настроить логирование для всего процесса.

    Args:
        level: Уровень логирования (по умолчанию settings.LOG_LEVEL)
        json_format: JSON вывод (по умолчанию — только в production)
        stream: Поток вывода (по умолчанию stdout)
    """
    level = (level or settings.LOG_LEVEL).upper()
    if json_format is None:
        json_format = settings.ENVIRONMENT == 'production'

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level, logging.INFO))

    # Удаляем старые хендлеры
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.addFilter(DocumentContextFilter())

    if json_format:
        handler.setFormatter(JsonFormatter(
            "%(asctime)s %(levelname)s %(name)s %(document)s %(message)s",
            rename_fields={
                "asctime": "timestamp",
                "levelname": "level",
                "name": "logger",
            },
            static_fields={"service": settings.APP_NAME, "version": settings.VERSION},
            json_ensure_ascii=False,
        ))
    else:
        handler.setFormatter(logging.Formatter(
            settings.LOG_FORMAT,
            datefmt='%Y-%m-%d %H:%M:%S'
        ))

    root_logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Получить логгер по имени."""
    return logging.getLogger(name)
