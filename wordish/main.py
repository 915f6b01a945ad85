'''
Wordish API

Endpoints:
GET  /game              -> read the board, cursor, hints and status
POST /game/reset        -> start a new game (secret fetched in the background)
POST /game/type         -> type one letter into the current row
POST /game/backspace    -> delete the last letter of the current row
POST /game/submit       -> submit the current row

One game per running app. Input that does not fit the current state
(typing into a full row, submitting a short row, anything after the game ended)
is ignored and the unchanged state comes back with 200.
'''

import logging
from threading import Lock

from fastapi import FastAPI, Depends
from fastapi.middleware.cors import CORSMiddleware

from .config import configure_logging, get_settings
from .session import GameSession
from .schemas import GameStateOut, TypeRequest, to_game_state

settings = get_settings()
configure_logging(settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title="Wordish API", version="1.0.0")

# Allow everything in dev so the docs and front-end work easily
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"]
)

_session: GameSession | None = None
_session_lock = Lock()

# Created on first use so importing the app never hits the network.
# Sync routes run in a threadpool, so creation is guarded (one game per app).
def get_session() -> GameSession:
    global _session
    if _session is None:
        with _session_lock:
            if _session is None:
                _session = GameSession(
                    word_length=settings.word_length,
                    max_attempts=settings.max_attempts,
                    fallback_word=settings.fallback_word,
                )
    return _session

# ---------------- Routes ----------------

@app.get("/game", response_model=GameStateOut, summary="Get current game state")
def get_game(session: GameSession = Depends(get_session)) -> GameStateOut:
    return to_game_state(session.snapshot())

@app.post("/game/reset", response_model=GameStateOut, summary="Start a new game")
def reset_game(session: GameSession = Depends(get_session)) -> GameStateOut:
    session.reset()
    return to_game_state(session.snapshot())

@app.post("/game/type", response_model=GameStateOut, summary="Type one letter")
def type_letter(
    payload: TypeRequest,
    session: GameSession = Depends(get_session),
) -> GameStateOut:
    session.type(payload.letter)
    return to_game_state(session.snapshot())

@app.post("/game/backspace", response_model=GameStateOut, summary="Delete the last letter")
def backspace(session: GameSession = Depends(get_session)) -> GameStateOut:
    session.backspace()
    return to_game_state(session.snapshot())

@app.post("/game/submit", response_model=GameStateOut, summary="Submit the current row")
def submit_guess(session: GameSession = Depends(get_session)) -> GameStateOut:
    session.submit()
    return to_game_state(session.snapshot())
