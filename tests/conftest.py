"""
Конфигурация pytest для docscan.
"""
import logging

import pytest

from docscan.contracts import PDF_MIME_TYPE, PPTX_MIME_TYPE, RawDocument


@pytest.fixture(scope="session", autouse=True)
def setup_test_logging():
    """Настройка логирования для тестов - показываем только ошибки"""
    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    handler = logging.StreamHandler()
    handler.setLevel(logging.ERROR)
    handler.setFormatter(logging.Formatter('%(asctime)s | %(levelname)-8s | %(name)s - %(message)s'))
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.ERROR)

    yield


@pytest.fixture
def pptx_document():
    """Фабрика RawDocument для .pptx."""
    def factory(data: bytes, file_name: str = "deck.pptx") -> RawDocument:
        return RawDocument(data=data, mime_type=PPTX_MIME_TYPE, file_name=file_name)
    return factory


@pytest.fixture
def pdf_document():
    """Фабрика RawDocument для .pdf."""
    def factory(data: bytes, file_name: str = "report.pdf") -> RawDocument:
        return RawDocument(data=data, mime_type=PDF_MIME_TYPE, file_name=file_name)
    return factory
