"""
Bot Policy - How an automated seat picks its move.

A policy sees the whole table the way a seated player does: every hand
but its own, plus the hint tables on its own cards. It returns one of
the legal actions; the move is then submitted like any other client's
and checked by the reducer.

Baselines:
- FirstLegalPolicy: blind-plays the newest card, every turn
- RandomPolicy: any legal move, except a blind play on the last strike
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING
import random

from ..engine_core.action import ActionType
from ..engine_core.reducer import is_playable
from ..engine_core.state import Card

if TYPE_CHECKING:
    from ..engine_core.state import CardHint, GameState
    from ..engine_core.action import Action


def known_playable(hint: CardHint, played_cards: tuple[Card, ...]) -> bool:
    """True when every card consistent with the hint table is playable."""
    candidates = [
        Card(color, number)
        for color in hint.possible_colors
        for number in hint.possible_numbers
    ]
    return bool(candidates) and all(is_playable(c, played_cards) for c in candidates)


@dataclass
class BotDecision:
    """The chosen move and a one-line reason, shown in turn reports."""
    action: Action
    explanation: str = ""


class BotPolicy(ABC):
    """A seat's decision rule."""

    @abstractmethod
    def select_action(
        self,
        state: GameState,
        legal_actions: list[Action],
    ) -> BotDecision:
        """
        Pick one of legal_actions for state.current_player.

        Raises ValueError when legal_actions is empty (the game is over).
        """

    def get_name(self) -> str:
        return self.__class__.__name__


class RandomPolicy(BotPolicy):
    """
    Uniform choice among the legal moves.

    With one strike left, plays the hints do not prove playable are
    dropped from the draw, since a misplay would end the game. If that
    leaves nothing, any legal move is taken.
    """

    def __init__(self, seed: int | None = None):
        self.rng = random.Random(seed)

    def select_action(
        self,
        state: GameState,
        legal_actions: list[Action],
    ) -> BotDecision:
        if not legal_actions:
            raise ValueError("No legal actions available")

        candidates = legal_actions
        explanation = "Random move"
        if state.tokens.strikes == 1:
            hand = state.current.hand
            safe = [
                a for a in legal_actions
                if a.action_type != ActionType.PLAY
                or known_playable(hand[a.card_index].hint, state.played_cards)
            ]
            if safe:
                candidates = safe
                explanation = "Random move, no blind play on the last strike"

        return BotDecision(action=self.rng.choice(candidates), explanation=explanation)


class FirstLegalPolicy(BotPolicy):
    """
    Always the first legal move.

    Legal actions list plays first, so this blind-plays the newest card
    until the strikes run out. Useful as a fixed, short game in tests.
    """

    def select_action(
        self,
        state: GameState,
        legal_actions: list[Action],
    ) -> BotDecision:
        if not legal_actions:
            raise ValueError("No legal actions available")
        return BotDecision(action=legal_actions[0], explanation="First legal move")
