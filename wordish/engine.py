"""
Pure game logic (no HTTP, no state).
We compute one verdict per letter of a guess:
- correct: same letter in the same position
- present: letter is in the secret, but somewhere else
- absent: letter is not in the secret, or every copy is already claimed

Duplicates are handled like the real game: each copy of a letter in the
secret can satisfy at most one position of the guess, exact matches first.
"""

from typing import Dict, Optional

from .types import KeyHints, LetterVerdict, Verdicts


def evaluate(secret: str, guess: str) -> Verdicts:
    """
    Example:
      secret = "APPLE"
      guess  = "PAPER"
      -> [present, present, correct, present, absent]
    The second P is correct, which uses up one P; the first P still finds
    the other P in the secret. R is nowhere in the secret.
    """

    # 0. Validate lengths match
    n = len(secret)
    if n == 0 or len(guess) != n:
        raise ValueError("Secret and guess must be the same non-zero length.")

    secret = secret.upper()
    guess = guess.upper()

    # 1. Count how many copies of each letter are still unclaimed
    remaining: Dict[str, int] = {}
    for ch in secret:
        remaining[ch] = remaining.get(ch, 0) + 1

    verdicts = [LetterVerdict.ABSENT] * n

    # 2. Exact positions claim their copy first
    for i in range(n):
        if guess[i] == secret[i]:
            verdicts[i] = LetterVerdict.CORRECT
            remaining[guess[i]] -= 1

    # 3. Everything else takes whatever copies are left
    for i in range(n):
        if verdicts[i] == LetterVerdict.CORRECT:
            continue
        ch = guess[i]
        if remaining.get(ch, 0) > 0:
            verdicts[i] = LetterVerdict.PRESENT
            remaining[ch] -= 1

    return verdicts


def is_win(secret: str, guess: str) -> bool:
    """
    Win = every letter matches in order (case-insensitive).
    """
    if len(secret) == 0 or len(guess) != len(secret):
        return False
    return secret.upper() == guess.upper()


def merge_hint(existing: Optional[LetterVerdict], new: LetterVerdict) -> LetterVerdict:
    """
    Resolve the keyboard hint for one letter.
    correct always wins, present beats absent, nothing ever downgrades,
    and unknown never overwrites an existing hint.
    """
    if existing is None:
        return new
    if new == LetterVerdict.CORRECT:
        return new
    if new == LetterVerdict.PRESENT and existing == LetterVerdict.ABSENT:
        return new
    return existing


def merge_hints(hints: KeyHints, guess: str, verdicts: Verdicts) -> KeyHints:
    """Fold one evaluated guess into a copy of the keyboard hints."""
    if len(guess) != len(verdicts):
        raise ValueError("Guess and verdicts must be the same length.")

    merged = dict(hints)
    for ch, verdict in zip(guess.upper(), verdicts):
        merged[ch] = merge_hint(merged.get(ch), verdict)
    return merged
