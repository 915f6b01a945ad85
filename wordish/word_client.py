"""
- HTTP call with typed failures
Get one random word of the requested length from random-word-api.
The API answers with a JSON array like ["crane"].

Unlike a plain fallback, this client raises on every failure so the game
session decides what to do (it switches to its fallback word).
"""

import logging
from typing import Optional

import requests

from .config import get_settings

logger = logging.getLogger(__name__)


class WordProviderError(Exception):
    """The word service could not give us a usable word."""


class WordNetworkError(WordProviderError):
    """No internet, timeout, or a non-2xx response."""


class WordDecodeError(WordProviderError):
    """The response was not a JSON list holding a word."""


def fetch_word(length: int = 5, url: Optional[str] = None, timeout: Optional[float] = None) -> str:
    settings = get_settings()
    url = url or settings.word_api_url
    # keep network quick; the session falls back if it takes too long
    timeout = settings.word_fetch_timeout if timeout is None else timeout

    params = {
        "words": 1,        # how many words we want
        "length": length,  # letters per word
    }

    try:
        response = requests.get(url, params=params, timeout=timeout)
        # If the response was not 200 OK, this will raise an error
        response.raise_for_status()
    except requests.RequestException as exc:
        raise WordNetworkError(f"Word service unreachable: {exc}") from exc

    try:
        words = response.json()
    except ValueError as exc:
        raise WordDecodeError("Word service returned invalid JSON.") from exc

    if not isinstance(words, list) or not words or not isinstance(words[0], str):
        raise WordDecodeError(f"Expected a JSON list of words, got {words!r}.")

    word = words[0].strip().upper()
    if not word:
        raise WordDecodeError("Word service returned an empty word.")

    logger.debug("Fetched word of length %d", len(word))
    return word
