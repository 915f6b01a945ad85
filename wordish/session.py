"""
Game session: the grid of attempts, the cursor, keyboard hints and status.

One GameSession per app run. Every mutation (typing, backspace, submit,
reset and the word-fetch completion) goes through the same lock, so the
grid and cursor are never seen half-updated.

The secret word is fetched in the background on every reset. Each fetch is
tagged with the reset "generation" it belongs to; if another reset happened
in the meantime the late result is thrown away instead of replacing the
newer game's word.
"""

import logging
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from dataclasses import dataclass, field, replace
from threading import RLock
from typing import Dict, List, Optional, Tuple

from .engine import evaluate, is_win, merge_hints
from .types import GameStatus, KeyHints, LetterVerdict, WordProvider
from .word_client import fetch_word

logger = logging.getLogger(__name__)

DEFAULT_WORD_LENGTH = 5
DEFAULT_MAX_ATTEMPTS = 6
FALLBACK_WORD = "APPLE"

_fetch_executor: Optional[ThreadPoolExecutor] = None


def _default_executor() -> ThreadPoolExecutor:
    global _fetch_executor
    if _fetch_executor is None:
        _fetch_executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="word-fetch")
    return _fetch_executor


@dataclass
class Tile:
    character: Optional[str] = None
    verdict: LetterVerdict = LetterVerdict.UNKNOWN


@dataclass
class Row:
    tiles: List[Tile] = field(default_factory=list)

    @classmethod
    def empty(cls, length: int) -> "Row":
        return cls(tiles=[Tile() for _ in range(length)])

    @property
    def word(self) -> str:
        return "".join(tile.character or "" for tile in self.tiles)


@dataclass(frozen=True)
class SessionSnapshot:
    """Read-only copy of the session for whoever draws the board."""
    rows: Tuple[Tuple[Tile, ...], ...]
    current_row: int
    current_col: int
    status: GameStatus
    secret: str
    key_hints: Dict[str, LetterVerdict]
    loading: bool
    word_length: int
    max_attempts: int

    @property
    def finished(self) -> bool:
        return self.status != "playing"

    @property
    def answer(self) -> Optional[str]:
        """The secret ONLY for finished games; else None."""
        return self.secret if self.finished else None


def _is_playable(word: str, length: int) -> bool:
    return len(word) == length and word.isascii() and word.isalpha()


class GameSession:
    def __init__(
        self,
        provider: WordProvider = fetch_word,
        executor: Optional[Executor] = None,
        word_length: int = DEFAULT_WORD_LENGTH,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        fallback_word: str = FALLBACK_WORD,
    ) -> None:
        fallback_word = fallback_word.upper()
        if not _is_playable(fallback_word, word_length):
            raise ValueError(f"Fallback word must be {word_length} letters.")
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1.")

        self.word_length = word_length
        self.max_attempts = max_attempts
        self.fallback_word = fallback_word

        self._provider = provider
        self._executor = executor or _default_executor()
        self._lock = RLock()
        self._generation = 0

        self.rows: List[Row] = []
        self.current_row = 0
        self.current_col = 0
        self.status: GameStatus = "playing"
        self.secret = fallback_word
        self.key_hints: KeyHints = {}
        self.loading = False

        self.reset()

    # --- Lifecycle ---

    def reset(self) -> Future:
        """
        Start a new game and ask the provider for a fresh secret.
        Returns the fetch future (callers may wait on it, the game does not).
        """
        with self._lock:
            self._generation += 1
            generation = self._generation

            # New rows every time; tiles are never recycled
            self.rows = [Row.empty(self.word_length) for _ in range(self.max_attempts)]
            self.current_row = 0
            self.current_col = 0
            self.status = "playing"
            self.key_hints = {}
            self.secret = self.fallback_word
            self.loading = True
            logger.info("New game started (generation %d)", generation)

        # Submit outside the lock; an inline executor completes right here
        try:
            future = self._executor.submit(self._provider, self.word_length)
        except Exception as exc:
            # e.g. the pool is shut down: settle this game on the fallback word
            future = Future()
            future.set_exception(exc)
        future.add_done_callback(lambda done: self._finish_fetch(generation, done))
        return future

    def _finish_fetch(self, generation: int, future: Future) -> None:
        with self._lock:
            if generation != self._generation:
                logger.info(
                    "Discarding word fetched for generation %d (current is %d)",
                    generation, self._generation,
                )
                return

            try:
                word = future.result().strip().upper()
                if not _is_playable(word, self.word_length):
                    raise ValueError(f"expected {self.word_length} letters, got {len(word)}")
            except Exception as exc:
                # Any provider failure is recovered the same way: play the fallback word
                logger.warning("Failed to fetch word, defaulting to %s: %s", self.fallback_word, exc)
                self.secret = self.fallback_word
            else:
                self.secret = word
                logger.debug("New secret word: %s", word)
            finally:
                self.loading = False

    # --- Input ---

    def type(self, ch: str) -> None:
        with self._lock:
            if self.status != "playing":
                logger.debug("Ignoring %r, game is %s", ch, self.status)
                return
            if self.current_col >= self.word_length:
                return
            if not isinstance(ch, str) or not _is_playable(ch, 1):
                logger.debug("Ignoring non-letter input %r", ch)
                return

            self.rows[self.current_row].tiles[self.current_col].character = ch.upper()
            self.current_col += 1

    def backspace(self) -> None:
        with self._lock:
            if self.status != "playing" or self.current_col == 0:
                return

            self.current_col -= 1
            self.rows[self.current_row].tiles[self.current_col].character = None

    def submit(self) -> None:
        with self._lock:
            if self.status != "playing":
                logger.debug("Ignoring submit, game is %s", self.status)
                return
            # must be a full row to submit
            if self.current_col != self.word_length:
                return

            row = self.rows[self.current_row]
            guess = row.word

            verdicts = evaluate(self.secret, guess)
            for tile, verdict in zip(row.tiles, verdicts):
                tile.verdict = verdict
            self.key_hints = merge_hints(self.key_hints, guess, verdicts)

            if is_win(self.secret, guess):
                self.status = "won"
                logger.info("Game won in %d guess(es)", self.current_row + 1)
                return

            # if we've submitted the last row, game is over
            if self.current_row == self.max_attempts - 1:
                self.status = "lost"
                logger.info("Game lost after %d guesses", self.max_attempts)
                return

            self.current_row += 1
            self.current_col = 0

    # --- Read side ---

    def snapshot(self) -> SessionSnapshot:
        with self._lock:
            return SessionSnapshot(
                rows=tuple(tuple(replace(tile) for tile in row.tiles) for row in self.rows),
                current_row=self.current_row,
                current_col=self.current_col,
                status=self.status,
                secret=self.secret,
                key_hints=dict(self.key_hints),
                loading=self.loading,
                word_length=self.word_length,
                max_attempts=self.max_attempts,
            )
