"""
Single place to:
- Read settings from env (or a local .env)
- Validate them once at load time
- Set up console logging for the app

Every setting has a default, so the game runs with no .env at all.
"""

import logging
import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

# Load env vars from .env if present
load_dotenv()

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


@dataclass(frozen=True)
class Settings:
    word_api_url: str = "https://random-word-api.vercel.app/api"
    word_fetch_timeout: float = 3.0
    fallback_word: str = "APPLE"
    word_length: int = 5
    max_attempts: int = 6
    log_level: str = "INFO"


def load_settings() -> Settings:
    defaults = Settings()
    settings = Settings(
        word_api_url=os.getenv("WORD_API_URL", defaults.word_api_url),
        word_fetch_timeout=float(os.getenv("WORD_FETCH_TIMEOUT", defaults.word_fetch_timeout)),
        fallback_word=os.getenv("FALLBACK_WORD", defaults.fallback_word).strip().upper(),
        word_length=int(os.getenv("WORD_LENGTH", defaults.word_length)),
        max_attempts=int(os.getenv("MAX_ATTEMPTS", defaults.max_attempts)),
        log_level=os.getenv("LOG_LEVEL", defaults.log_level).upper(),
    )

    # The fallback has to be a playable word, otherwise a failed fetch breaks the game
    if len(settings.fallback_word) != settings.word_length or not settings.fallback_word.isalpha():
        raise RuntimeError(
            f"FALLBACK_WORD must be {settings.word_length} letters, got {settings.fallback_word!r}."
        )
    if settings.max_attempts < 1:
        raise RuntimeError("MAX_ATTEMPTS must be at least 1.")
    return settings


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return load_settings()


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Attach one console handler to the package logger (safe to call twice)."""
    logger = logging.getLogger("wordish")
    logger.setLevel(level)

    # Prevent duplicate handlers
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT))
        logger.addHandler(handler)

    return logger
