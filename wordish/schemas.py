"""
Explicit validation & Pydantic models
- Models are used to validate and serialize/deserialize data
  exchanged between the client and server.
- Defines the structure of API requests and responses.
"""

from typing import Dict, List, Literal, Optional
from pydantic import BaseModel, Field, field_validator

from .session import SessionSnapshot
from .types import LetterVerdict

# 1. Validates one key press
class TypeRequest(BaseModel):
    letter: str = Field(..., description="A single letter A-Z (case-insensitive)")

    @field_validator("letter")
    @classmethod
    def validate_letter(cls, letter: str) -> str:
        """
        We only check that it is exactly one ASCII letter.
        Whether the row has room for it is the session's call (a full row just ignores it).
        """
        if len(letter) != 1 or not letter.isascii() or not letter.isalpha():
            raise ValueError("letter must be a single character A-Z.")
        return letter.upper()

    model_config = {
        "json_schema_extra": {
            "examples": [
                { "letter": "a" },
                { "letter": "Q" },
            ]
        }
    }

# 2. One square of the grid
class TileOut(BaseModel):
    character: Optional[str] = Field(None, description="Typed letter, empty until typed")
    verdict: LetterVerdict = Field(LetterVerdict.UNKNOWN, description="Feedback once the row is submitted")

# 3. Represents the overall state of the game
class GameStateOut(BaseModel):
    rows: List[List[TileOut]] = Field(..., description="Every attempt row, submitted or not")
    current_row: int = Field(..., description="Row being typed into")
    current_col: int = Field(..., description="Next column to type into")
    status: Literal["playing", "won", "lost"] = Field(..., description="Current state of the game")
    key_hints: Dict[str, LetterVerdict] = Field(..., description="Best verdict seen per letter (keyboard colors)")
    loading: bool = Field(..., description="True while the secret word is being fetched")
    word_length: int = Field(..., description="Letters per guess")
    max_attempts: int = Field(..., description="Rows in the grid")
    answer: Optional[str] = Field(None, description="The secret word (only revealed if game is over)")


def to_game_state(snapshot: SessionSnapshot) -> GameStateOut:
    return GameStateOut(
        rows=[
            [TileOut(character=tile.character, verdict=tile.verdict) for tile in row]
            for row in snapshot.rows
        ],
        current_row=snapshot.current_row,
        current_col=snapshot.current_col,
        status=snapshot.status,
        key_hints=snapshot.key_hints,
        loading=snapshot.loading,
        word_length=snapshot.word_length,
        max_attempts=snapshot.max_attempts,
        # Never leak the secret mid-game
        answer=snapshot.answer,
    )
