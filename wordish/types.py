"""
Labels for clarity.
"""

from enum import Enum
from typing import Callable, Dict, List, Literal


class LetterVerdict(str, Enum):
    """
    Feedback for one letter of a guess (also used for keyboard hints).
    Hint ordering: correct > present > absent > unknown.
    """
    UNKNOWN = "unknown"   # not evaluated yet
    CORRECT = "correct"   # right letter, right place
    PRESENT = "present"   # in the word, somewhere else
    ABSENT = "absent"     # not in the word (or no copies left)


Verdicts = List[LetterVerdict]  # one per letter of a guess
KeyHints = Dict[str, LetterVerdict]  # letter -> best known verdict
GameStatus = Literal["playing", "won", "lost"]
WordProvider = Callable[[int], str]  # length -> word, raises on failure
