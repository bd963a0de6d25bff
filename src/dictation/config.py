from __future__ import annotations
import logging
import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR"}

@dataclass(frozen=True)
class Settings:
    database_url: str
    log_level: str = "INFO"
    audio_mime_type: str = "audio/mpeg"

    @property
    def log_level_value(self) -> int:
        return getattr(logging, self.log_level)

def load_settings() -> Settings:
    load_dotenv()
    database_url = os.getenv("DATABASE_URL", "sqlite+aiosqlite:///./data/dictation.db").strip()
    if not database_url:
        raise RuntimeError("DATABASE_URL must not be empty")

    log_level = os.getenv("LOG_LEVEL", "INFO").strip().upper()
    if log_level not in _LOG_LEVELS:
        raise RuntimeError("LOG_LEVEL must be DEBUG, INFO, WARNING, or ERROR")

    audio_mime_type = os.getenv("AUDIO_MIME_TYPE", "audio/mpeg").strip().lower()
    if "/" not in audio_mime_type:
        raise RuntimeError("AUDIO_MIME_TYPE must look like type/subtype (e.g. audio/mpeg)")

    return Settings(
        database_url=database_url,
        log_level=log_level,
        audio_mime_type=audio_mime_type,
    )

def setup_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.log_level_value,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
