"""
FastAPI backend for Rock, Paper, Scissors.
Serves the browser page and JSON endpoints for playing a best-of series.
Series live in process memory only and are discarded when they complete.
"""

import logging
import uuid
from pathlib import Path
from typing import Any

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse
from pydantic import BaseModel, StrictInt

from backend.config import CORS_ORIGINS, DEFAULT_BEST_OF
from backend.engine.actions import play_round
from backend.engine.errors import InvalidConfiguration, InvalidPlay
from backend.engine.events import ROUND_EVENT_TYPES
from backend.engine.queries import get_result, get_rounds_remaining, is_complete
from backend.engine.reducer import apply_action
from backend.engine.rules import parse_play
from backend.engine.state import SeriesState, new_series
from backend.engine.utils import ChoiceGenerator

logger = logging.getLogger(__name__)

FRONTEND_INDEX = Path(__file__).resolve().parent.parent.parent / "frontend" / "index.html"

app = FastAPI(
    title="Rock, Paper, Scissors API",
    description="Backend API for a best-of-N game of Rock, Paper, Scissors",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request, call_next):
    """Log method and path so 500s can be traced to the failing endpoint."""
    try:
        response = await call_next(request)
    except Exception:
        logger.exception("[500] %s %s (exception)", request.method, request.url.path)
        raise
    if response.status_code >= 500:
        logger.error("[%d] %s %s", response.status_code, request.method, request.url.path)
    return response


@app.exception_handler(InvalidPlay)
async def invalid_play_handler(request, exc: InvalidPlay):
    return JSONResponse(status_code=400, content={"detail": str(exc)})


@app.exception_handler(InvalidConfiguration)
async def invalid_configuration_handler(request, exc: InvalidConfiguration):
    return JSONResponse(status_code=400, content={"detail": str(exc)})


# In-memory series by id
games: dict[str, SeriesState] = {}

# Computer play source shared by all series; tests may replace it
generator = ChoiceGenerator()


# ===== Pydantic Models =====

class NewGameRequest(BaseModel):
    # Strict so JSON true is not coerced to best-of-1
    best_of: StrictInt | None = None


class PlayRequest(BaseModel):
    play: str


# ===== Helper Functions =====

def get_game(game_id: str) -> SeriesState:
    """Get series state; raise 404 if not found."""
    state = games.get(game_id)
    if state is None:
        raise HTTPException(status_code=404, detail=f"Game {game_id} not found")
    return state


def state_for_response(game_id: str, state: SeriesState) -> dict[str, Any]:
    """State dict including the computed score for the UI."""
    return {
        "game_id": game_id,
        "state": state.to_dict(),
        "score": get_result(state).to_dict(),
        "rounds_remaining": get_rounds_remaining(state),
    }


# ===== API Endpoints =====

@app.get("/")
def root():
    """Serve the browser game."""
    with open(FRONTEND_INDEX, "r", encoding="utf-8") as f:
        return HTMLResponse(f.read())


@app.get("/health")
def health():
    return {"status": "ok"}


@app.post("/games", status_code=201)
def create_game(request: NewGameRequest | None = None):
    """Start a new series. best_of defaults to the configured DEFAULT_BEST_OF."""
    best_of = request.best_of if request and request.best_of is not None else DEFAULT_BEST_OF
    state = new_series(best_of)
    game_id = str(uuid.uuid4())
    games[game_id] = state
    logger.info("Created game %s (best of %d)", game_id, best_of)
    return state_for_response(game_id, state)


@app.get("/games/{game_id}")
def get_game_state(game_id: str):
    return state_for_response(game_id, get_game(game_id))


@app.post("/games/{game_id}/play")
def play(game_id: str, request: PlayRequest):
    """
    Play one round. The computer's play is drawn server side.
    Ties are reported but do not count toward the series.
    """
    state = get_game(game_id)
    player_play = parse_play(request.play)
    computer_play = generator.next()
    state, events = apply_action(state, play_round(player_play, computer_play))
    if is_complete(state):
        # Completed series are discarded once the final round is reported
        del games[game_id]
        logger.info("Game %s complete (%s), discarded", game_id, get_result(state).summary)
    else:
        games[game_id] = state

    round_event = next(e for e in events if e.type in ROUND_EVENT_TYPES)
    last_round = state.rounds[-1]
    logger.info(
        "Game %s: %s vs %s -> %s",
        game_id,
        last_round.player_play.value,
        last_round.computer_play.value,
        last_round.outcome.value,
    )

    return {
        **state_for_response(game_id, state),
        "player_play": last_round.player_play.value,
        "computer_play": last_round.computer_play.value,
        "outcome": last_round.outcome.value,
        "message": round_event.payload["message"],
        "events": [e.to_dict() for e in events],
    }


@app.delete("/games/{game_id}")
def delete_game(game_id: str):
    """Discard a series."""
    get_game(game_id)
    del games[game_id]
    return {"deleted": game_id}
