"""
Cautious Bot - Plays only what the hints prove playable.

Priority each turn:
1. Play a card whose hint table leaves only playable possibilities
2. Hint another player about a playable card they do not know yet
3. Discard the oldest card no one has hinted
4. Anything legal

The bot reads only its own hint tables, never its own cards.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .policy import BotPolicy, BotDecision, known_playable
from ..engine_core.action import ActionType, HintType
from ..engine_core.reducer import is_playable

if TYPE_CHECKING:
    from ..engine_core.state import GameState, HandCard
    from ..engine_core.action import Action


@dataclass
class CautiousPolicy(BotPolicy):
    """
    Cooperative heuristic bot.

    Usage:
        bot = CautiousPolicy()
        decision = bot.select_action(state, legal_actions(state))
    """

    def select_action(
        self,
        state: GameState,
        legal_actions: list[Action],
    ) -> BotDecision:
        if not legal_actions:
            raise ValueError("No legal actions available")

        for select, explanation in (
            (self._select_play, "Hints prove the card playable"),
            (self._select_hint, "Told a teammate about a playable card"),
            (self._select_discard, "Discarded the oldest untouched card"),
        ):
            action = select(state, legal_actions)
            if action is not None:
                return BotDecision(action=action, explanation=explanation)

        return BotDecision(
            action=legal_actions[0],
            explanation="No preferred action, took the first legal one",
        )

    def _select_play(self, state: GameState, legal_actions: list[Action]) -> Action | None:
        for index, hc in enumerate(state.current.hand):
            if known_playable(hc.hint, state.played_cards):
                return _find(legal_actions, ActionType.PLAY, card_index=index)
        return None

    def _select_hint(self, state: GameState, legal_actions: list[Action]) -> Action | None:
        if state.tokens.hints <= 0:
            return None

        # Teammates in turn order, nearest first
        for offset in range(1, state.num_players):
            target = state.player((state.current_player + offset) % state.num_players)
            for hc in target.hand:
                if not is_playable(hc.card, state.played_cards):
                    continue
                if known_playable(hc.hint, state.played_cards):
                    continue
                hint_type, value = _next_hint(hc)
                action = _find(
                    legal_actions,
                    ActionType.HINT,
                    to_player=target.id,
                    hint_type=hint_type,
                    value=value,
                )
                if action is not None:
                    return action
        return None

    def _select_discard(self, state: GameState, legal_actions: list[Action]) -> Action | None:
        hand = state.current.hand
        untouched = [i for i, hc in enumerate(hand) if not hc.hint.is_touched]
        if untouched:
            return _find(legal_actions, ActionType.DISCARD, card_index=untouched[-1])
        if hand:
            return _find(legal_actions, ActionType.DISCARD, card_index=len(hand) - 1)
        return None


def _next_hint(hc: HandCard) -> tuple[HintType, object]:
    """Numbers first, then the color once the number is known."""
    if hc.hint.confirmed_number is None:
        return HintType.NUMBER, hc.card.number
    return HintType.COLOR, hc.card.color


def _find(legal_actions: list[Action], action_type: ActionType, **fields) -> Action | None:
    for action in legal_actions:
        if action.action_type != action_type:
            continue
        if all(getattr(action, name) == value for name, value in fields.items()):
            return action
    return None
