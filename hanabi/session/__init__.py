"""
Session Module - Hosts games in memory.

A session represents one play-through of a game:
- Created with game options and an optional seed
- Holds the canonical game state
- Serializes actions so they apply one at a time
- Can be driven by bots through a GameLoop
"""

from .manager import SessionManager, Session, SessionState
from .game_loop import GameLoop, LoopState, TurnResult

__all__ = [
    "SessionManager",
    "Session",
    "SessionState",
    "GameLoop",
    "LoopState",
    "TurnResult",
]
