"""
Game Loop - Drives bot players through a session.

The loop:
1. Ask the current player's policy for a decision
2. Submit it to the session (validated by the reducer)
3. Report what happened
4. Repeat until the game is over
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING
import logging

from ..engine_core.action_generator import legal_actions
from ..engine_core.reducer import is_game_over

if TYPE_CHECKING:
    from .manager import Session
    from ..bots.policy import BotPolicy
    from ..engine_core.reducer import Reducer

logger = logging.getLogger(__name__)


class LoopState(Enum):
    """State of the game loop."""
    RUNNING = "running"
    GAME_OVER = "game_over"


@dataclass
class TurnResult:
    """
    Result of processing a turn.

    Contains the action taken and its effect.
    """
    success: bool
    loop_state: LoopState

    player: int | None = None
    action: str | None = None
    explanation: str = ""
    changes: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    # Score once the game is over
    final_score: int | None = None


class GameLoop:
    """
    The bot game loop driver.

    Usage:
        loop = GameLoop(session, [CautiousPolicy()] * 3, reducer)
        results = loop.run()
    """

    def __init__(self, session: Session, policies: list[BotPolicy], reducer: Reducer):
        if len(policies) != session.game_state.num_players:
            raise ValueError(
                f"Need one policy per player ({session.game_state.num_players}), got {len(policies)}"
            )
        self.session = session
        self.policies = policies
        self.reducer = reducer
        self.state = LoopState.RUNNING

    def step(self) -> TurnResult:
        """Play one turn for whoever is up."""
        game_state = self.session.game_state
        if is_game_over(game_state):
            self.state = LoopState.GAME_OVER
            return TurnResult(
                success=False,
                loop_state=self.state,
                errors=["Game is over"],
                final_score=game_state.score,
            )

        player = game_state.current_player
        policy = self.policies[player]
        decision = policy.select_action(game_state, legal_actions(game_state))
        result = self.session.apply(decision.action, self.reducer)

        if not result.success:
            logger.warning("Policy %s chose a rejected action: %s", policy.get_name(), result.error)
            return TurnResult(
                success=False,
                loop_state=self.state,
                player=player,
                action=decision.action.describe(),
                errors=[result.error or "unknown error"],
            )

        final_score = None
        if is_game_over(self.session.game_state):
            self.state = LoopState.GAME_OVER
            final_score = self.session.game_state.score

        return TurnResult(
            success=True,
            loop_state=self.state,
            player=player,
            action=decision.action.describe(),
            explanation=decision.explanation,
            changes=result.state_changes,
            final_score=final_score,
        )

    def run(self, max_turns: int = 1000) -> list[TurnResult]:
        """Play until the game is over, a turn fails, or max_turns is reached."""
        results = []
        for _ in range(max_turns):
            result = self.step()
            results.append(result)
            if not result.success or result.loop_state == LoopState.GAME_OVER:
                break
        return results
