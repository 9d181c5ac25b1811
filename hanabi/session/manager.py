"""
Session Manager - Creates and manages game sessions.

The engine is pure and single-threaded; the session is the host that
owns concurrency:
- One canonical GameState per session
- Actions are applied one at a time under a per-session lock
- Each action is checked against the state it was built for
  (current player, card at index) by the reducer
- The session, not the engine, refuses actions once the game is over

PERSISTENCE RULES:
- Sessions are in-memory only
- A session can be exported as a structural snapshot (see api.schemas)
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
import logging
import threading
import time
import uuid

from ..config import get_settings
from ..engine_core.state import GameOptions, GameState
from ..engine_core.action import Action, ActionResult
from ..engine_core.reducer import Reducer, is_game_over
from ..engine_core.setup import new_game

logger = logging.getLogger(__name__)


class SessionState(Enum):
    """State of a game session."""
    ACTIVE = "active"  # Game in progress
    GAME_OVER = "game_over"  # Game completed
    ABANDONED = "abandoned"  # Ended before completion


@dataclass
class Session:
    """
    An in-memory game session.

    Contains:
    - The current canonical game state
    - The history of applied actions (for replay)
    - Session metadata
    """
    session_id: str
    game_state: GameState
    created_at: float

    # Time of the last accepted action (creation time until then)
    last_action_at: float = 0.0

    state: SessionState = SessionState.ACTIVE
    action_history: list[Action] = field(default_factory=list)

    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    def is_active(self) -> bool:
        """Check if session is still active."""
        return self.state == SessionState.ACTIVE

    def apply(self, action: Action, reducer: Reducer) -> ActionResult:
        """
        Apply one action to the canonical state.

        Serialized per session: two actions never race on the same snapshot.
        """
        with self._lock:
            if not self.is_active() or is_game_over(self.game_state):
                return ActionResult.failure("Game is over - no actions allowed", error_code="GAME_OVER")

            result = reducer.apply(self.game_state, action)
            if not result.success:
                return result

            self.game_state = result.new_state
            self.action_history.append(action)
            self.last_action_at = time.time()

            if is_game_over(self.game_state):
                self.state = SessionState.GAME_OVER
                logger.info(
                    "Session %s finished with score %d/%d",
                    self.session_id, self.game_state.score, self.game_state.max_score,
                )
            return result


class SessionManager:
    """
    Manages game sessions.

    Responsibilities:
    - Create sessions from game options
    - Route actions to the right session
    - Clean up idle sessions
    """

    def __init__(self, reducer: Reducer | None = None, session_ttl: int | None = None):
        self._sessions: dict[str, Session] = {}
        self.reducer = reducer or Reducer()
        self.session_ttl = session_ttl if session_ttl is not None else get_settings().session_ttl

    def create_session(
        self,
        options: GameOptions,
        seed: int | None = None,
        player_names: list[str] | None = None,
    ) -> Session:
        """
        Create a new game session.

        Raises ConfigViolation for unsupported options.
        """
        game_state = new_game(options, seed=seed, player_names=player_names)
        now = time.time()
        session = Session(
            session_id=str(uuid.uuid4()),
            game_state=game_state,
            created_at=now,
            last_action_at=now,
        )
        self._sessions[session.session_id] = session
        logger.info(
            "Created session %s (%d players, seed %d)",
            session.session_id, options.players_count, game_state.seed,
        )
        return session

    def get_session(self, session_id: str) -> Session | None:
        """Get a session by ID."""
        return self._sessions.get(session_id)

    def submit_action(self, session_id: str, action: Action) -> ActionResult:
        """Apply an action to a session's game."""
        session = self._sessions.get(session_id)
        if not session:
            return ActionResult.failure("Session not found", error_code="SESSION_NOT_FOUND")
        return session.apply(action, self.reducer)

    def end_session(self, session_id: str, reason: str = "completed") -> bool:
        """
        End a session and drop it from memory.

        Returns False if the session did not exist.
        """
        session = self._sessions.pop(session_id, None)
        if not session:
            return False

        if session.is_active():
            session.state = SessionState.ABANDONED
        logger.info("Ended session %s (%s)", session_id, reason)
        return True

    def list_active_sessions(self) -> list[str]:
        """List IDs of active sessions."""
        return [
            sid for sid, session in self._sessions.items()
            if session.is_active()
        ]

    def cleanup_stale_sessions(self, max_age_seconds: int | None = None) -> int:
        """
        Drop sessions idle for longer than max_age (default: session_ttl).

        Idle is measured from the last accepted action, so finished games
        and games nobody plays any more both expire. Active ones end up
        ABANDONED.

        Returns the number of sessions removed.
        """
        if max_age_seconds is None:
            max_age_seconds = self.session_ttl
        current_time = time.time()
        to_remove = [
            session_id for session_id, session in self._sessions.items()
            if current_time - session.last_action_at > max_age_seconds
        ]

        for session_id in to_remove:
            self.end_session(session_id, reason="stale")
        return len(to_remove)
