"""
Single place for default game/server configuration.
Each value can be overridden by an environment variable.
"""

import os

from backend.engine.errors import InvalidConfiguration
from backend.engine.state import validate_best_of


def _env_best_of(name: str, default: int) -> int:
    """Read a best_of override; fail at startup rather than on the first series."""
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return validate_best_of(int(raw))
    except ValueError:
        raise InvalidConfiguration(
            f"{name} must be a positive odd integer, got {raw!r}"
        ) from None


# Number of counted (non-tied) rounds in a series. Must be a positive odd integer.
DEFAULT_BEST_OF = _env_best_of("RPS_BEST_OF", 5)

CORS_ORIGINS = [
    origin.strip()
    for origin in os.environ.get(
        "CORS_ORIGINS", "http://localhost:8080,http://127.0.0.1:8080,http://localhost:5173"
    ).split(",")
    if origin.strip()
]

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

HOST = os.environ.get("HOST", "127.0.0.1")
PORT = int(os.environ.get("PORT", "8080"))
