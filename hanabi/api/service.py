"""
API Service - Business logic layer between a host and the engine.

The service:
1. Translates requests into engine calls
2. Manages sessions
3. Turns rule violations into structured errors instead of crashes

This layer is framework-agnostic (can sit behind FastAPI, Flask, a socket
server or a test harness).
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any
import logging

from pydantic import ValidationError

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
    # Enums
    ErrorCode,
    GameStatus,
)
from ..engine_core.state import GameOptions
from ..engine_core.errors import ConfigViolation
from ..engine_core.action_generator import legal_actions
from ..engine_core.reducer import is_game_over
from ..session import SessionManager, Session

logger = logging.getLogger(__name__)


@dataclass
class APIService:
    """
    Host-facing service.

    Usage:
        service = APIService()
        game = service.create_game(CreateGameRequest(players_count=3, seed=42))
        response = service.submit_action(game.game_id, {"kind": "discard", ...})
    """
    session_manager: SessionManager = field(default_factory=SessionManager)

    def create_game(self, request: CreateGameRequest) -> GameResponse | ErrorResponse:
        """Create a new game."""
        options = GameOptions(
            players_count=request.players_count,
            multicolor=request.multicolor,
        )
        try:
            session = self.session_manager.create_session(
                options,
                seed=request.seed,
                player_names=request.player_names,
            )
        except ConfigViolation as e:
            return ErrorResponse(error=e.message, error_code=ErrorCode.INVALID_CONFIG)
        return self._session_to_response(session)

    def get_game(self, game_id: str) -> GameResponse | ErrorResponse:
        """Get a game and its full state."""
        session = self.session_manager.get_session(game_id)
        if not session:
            return _not_found(game_id)
        return self._session_to_response(session)

    def submit_action(
        self,
        game_id: str,
        request: ActionRequest | dict[str, Any],
    ) -> ActionResponse | ErrorResponse:
        """
        Validate and apply one action.

        Accepts a parsed ActionRequest or its raw dict form.
        """
        if isinstance(request, dict):
            try:
                request = ActionRequest.model_validate(request)
            except ValidationError as e:
                return ErrorResponse(
                    error="Invalid action request",
                    error_code=ErrorCode.VALIDATION_ERROR,
                    details={"errors": e.errors(include_url=False, include_context=False)},
                )

        session = self.session_manager.get_session(game_id)
        if not session:
            return _not_found(game_id)

        result = self.session_manager.submit_action(game_id, request.to_action())
        if not result.success:
            return ErrorResponse(
                error=result.error or "Action rejected",
                error_code=ErrorCode(result.error_code or ErrorCode.INTERNAL_ERROR),
            )

        return ActionResponse(
            game_id=game_id,
            success=True,
            changes=result.state_changes,
            game=self._session_to_response(session),
        )

    def legal_actions(self, game_id: str) -> LegalActionsResponse | ErrorResponse:
        """List the actions the current player may take."""
        session = self.session_manager.get_session(game_id)
        if not session:
            return _not_found(game_id)
        state = session.game_state
        return LegalActionsResponse(
            game_id=game_id,
            current_player=state.current_player,
            actions=[ActionRequest.from_action(a) for a in legal_actions(state)],
        )

    def end_game(self, game_id: str, reason: str = "user_ended") -> EndGameResponse:
        """End a game and release it."""
        success = self.session_manager.end_session(game_id, reason)
        return EndGameResponse(success=success, game_id=game_id)

    def list_games(self) -> GameListResponse:
        """List active game IDs."""
        games = self.session_manager.list_active_sessions()
        return GameListResponse(games=games, count=len(games))

    def _session_to_response(self, session: Session) -> GameResponse:
        state = session.game_state
        return GameResponse(
            game_id=session.session_id,
            status=GameStatus(session.state.value),
            score=state.score,
            max_score=state.max_score,
            is_game_over=is_game_over(state),
            state=GameStateModel.from_state(state),
        )


def _not_found(game_id: str) -> ErrorResponse:
    return ErrorResponse(
        error="Game not found",
        error_code=ErrorCode.SESSION_NOT_FOUND,
        details={"game_id": game_id},
    )
