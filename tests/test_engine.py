"""
Testing pure game logic.
"""

from collections import Counter
from itertools import product

import pytest

from wordish.engine import evaluate, is_win, merge_hint, merge_hints
from wordish.types import LetterVerdict

C = LetterVerdict.CORRECT
P = LetterVerdict.PRESENT
A = LetterVerdict.ABSENT
U = LetterVerdict.UNKNOWN


def test_evaluate_perfect_match():
    assert evaluate("APPLE", "APPLE") == [C, C, C, C, C]

def test_evaluate_all_wrong():
    assert evaluate("APPLE", "ZZZZZ") == [A, A, A, A, A]

def test_evaluate_duplicate_letters():
    # The middle P is exact, which leaves one P for the first position
    assert evaluate("APPLE", "PAPER") == [P, P, C, P, A]

def test_evaluate_all_present():
    assert evaluate("TRAIN", "NITRA") == [P, P, P, P, P]

def test_evaluate_extra_copies_are_absent():
    # Secret has one L; the exact match claims it, the other L gets nothing
    assert evaluate("APPLE", "LLLLL") == [A, A, A, C, A]
    # Only one E in the secret -> only the first misplaced E is present
    assert evaluate("CRANE", "EERIE") == [A, A, P, A, C]

def test_evaluate_is_case_insensitive():
    assert evaluate("apple", "APPLE") == [C, C, C, C, C]

def test_evaluate_rejects_length_mismatch():
    with pytest.raises(ValueError):
        evaluate("APPLE", "APP")
    with pytest.raises(ValueError):
        evaluate("", "")

def test_evaluate_never_overcounts_letters():
    # Every 3-letter pair over a small alphabet (with lots of duplicates)
    words = ["".join(w) for w in product("ABC", repeat=3)]
    for secret in words:
        secret_counts = Counter(secret)
        for guess in words:
            verdicts = evaluate(secret, guess)
            assert U not in verdicts

            exact = sum(1 for s, g in zip(secret, guess) if s == g)
            assert verdicts.count(C) == exact

            hits = Counter(g for g, v in zip(guess, verdicts) if v in (C, P))
            for ch, count in hits.items():
                assert count <= secret_counts[ch]

def test_is_win_true_and_false():
    assert is_win("CRANE", "CRANE") is True
    assert is_win("CRANE", "crane") is True
    assert is_win("CRANE", "CRATE") is False
    assert is_win("CRANE", "CRAN") is False

def test_merge_hint_takes_first_verdict():
    assert merge_hint(None, A) == A
    assert merge_hint(None, P) == P

def test_merge_hint_never_downgrades():
    assert merge_hint(C, P) == C
    assert merge_hint(C, A) == C
    assert merge_hint(P, A) == P
    assert merge_hint(A, U) == A
    assert merge_hint(C, U) == C

def test_merge_hint_upgrades():
    assert merge_hint(A, P) == P
    assert merge_hint(A, C) == C
    assert merge_hint(P, C) == C

def test_merge_hints_is_idempotent():
    verdicts = evaluate("APPLE", "PAPER")
    once = merge_hints({}, "PAPER", verdicts)
    twice = merge_hints(once, "PAPER", verdicts)
    assert once == twice
    # P shows up as both present and correct in the same guess -> correct
    assert once == {"P": C, "A": P, "E": P, "R": A}

def test_merge_hints_does_not_mutate_input():
    hints = {"A": A}
    merged = merge_hints(hints, "ABCDE", [P, A, A, A, A])
    assert hints == {"A": A}
    assert merged["A"] == P
