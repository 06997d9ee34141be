"""
Настройки docscan.

Значения можно переопределить через переменные окружения или .env файл.
"""
from pathlib import Path

from pydantic import ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

PROJECT_ROOT = Path(__file__).parent.parent
ENV_FILE = PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Настройки извлечения текста и логирования."""

    model_config = SettingsConfigDict(
        env_file=str(ENV_FILE),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore"
    )

    # Application
    APP_NAME: str = "docscan"
    VERSION: str = "1.0.0"
    ENVIRONMENT: str = "development"

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(document)s - %(message)s"

    # PDF: окно длины текста stream-блока (границы включительно).
    # Короче — мусор, длиннее — скорее всего несжатые бинарные данные.
    PDF_STREAM_MIN_TEXT_LENGTH: int = 11
    PDF_STREAM_MAX_TEXT_LENGTH: int = 4999

    # PPTX
    PPTX_MAX_WORKERS: int = 4  # 1 = последовательное чтение слайдов
    DECODE_XML_ENTITIES: bool = False  # &amp; -> & и т.п.

    @field_validator('PDF_STREAM_MAX_TEXT_LENGTH')
    @classmethod
    def check_stream_window(cls, v: int, info: ValidationInfo) -> int:
        """Верхняя граница окна не может быть меньше нижней."""
        lower = info.data.get('PDF_STREAM_MIN_TEXT_LENGTH')
        if lower is not None and v < lower:
            raise ValueError(
                f"PDF_STREAM_MAX_TEXT_LENGTH ({v}) < PDF_STREAM_MIN_TEXT_LENGTH ({lower})"
            )
        return v

    @field_validator('PPTX_MAX_WORKERS')
    @classmethod
    def check_workers(cls, v: int) -> int:
        if v < 1:
            raise ValueError("PPTX_MAX_WORKERS must be >= 1")
        return v


settings = Settings()
