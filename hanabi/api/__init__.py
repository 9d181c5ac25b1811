"""
API Module - Host interface.

Exposes the engine to hosts (servers, bots, test harnesses):
1. Create games
2. Submit actions and receive structured errors for illegal ones
3. Read full state as a structural snapshot
4. List legal actions

All state is session-scoped and in memory.
"""

from .schemas import (
    # Requests
    CreateGameRequest,
    ActionRequest,
    # Responses
    GameResponse,
    ActionResponse,
    LegalActionsResponse,
    GameListResponse,
    EndGameResponse,
    ErrorResponse,
    # Snapshot
    GameStateModel,
    PlayerModel,
    CardModel,
    CardHintModel,
    # Enums
    ErrorCode,
    GameStatus,
)
from .service import APIService

__all__ = [
    # Requests
    "CreateGameRequest",
    "ActionRequest",
    # Responses
    "GameResponse",
    "ActionResponse",
    "LegalActionsResponse",
    "GameListResponse",
    "EndGameResponse",
    "ErrorResponse",
    # Snapshot
    "GameStateModel",
    "PlayerModel",
    "CardModel",
    "CardHintModel",
    # Enums
    "ErrorCode",
    "GameStatus",
    # Service
    "APIService",
]
