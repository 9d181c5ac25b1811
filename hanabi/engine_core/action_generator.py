"""
Action Generator - Generates all legal actions from a game state.

The action generator is used by:
1. Bots to enumerate possible moves
2. UI to disable illegal moves
3. Hosts that pre-filter requests before they reach the reducer

Design: Generates Action objects, not just action types.
This ensures all generated actions are fully specified.
"""

from __future__ import annotations
from dataclasses import dataclass

from .state import NUMBERS, GameState
from .action import Action, HintType
from .reducer import is_game_over


@dataclass
class ActionGenerator:
    """
    Generates legal actions for the current player.

    include_hints=False leaves hints out (useful for bots that
    only ever play or discard).
    """
    include_hints: bool = True

    def generate(self, state: GameState) -> list[Action]:
        """
        Generate all legal actions for the current player.

        Returns a list of fully-specified Action objects.
        """
        if is_game_over(state):
            return []

        actions = []
        actions.extend(self._generate_play_actions(state))
        actions.extend(self._generate_discard_actions(state))
        if self.include_hints:
            actions.extend(self._generate_hint_actions(state))
        return actions

    def _generate_play_actions(self, state: GameState) -> list[Action]:
        player = state.current
        return [
            Action.play(player.id, index, hc.card)
            for index, hc in enumerate(player.hand)
        ]

    def _generate_discard_actions(self, state: GameState) -> list[Action]:
        player = state.current
        return [
            Action.discard(player.id, index, hc.card)
            for index, hc in enumerate(player.hand)
        ]

    def _generate_hint_actions(self, state: GameState) -> list[Action]:
        """One hint per other player, per color in play and per number."""
        if state.tokens.hints <= 0:
            return []

        actions = []
        for target in state.players:
            if target.id == state.current_player:
                continue
            for color in state.options.colors:
                actions.append(Action.hint(state.current_player, target.id, HintType.COLOR, color))
            for number in NUMBERS:
                actions.append(Action.hint(state.current_player, target.id, HintType.NUMBER, number))
        return actions


def legal_actions(state: GameState) -> list[Action]:
    """Convenience function to get legal actions."""
    generator = ActionGenerator()
    return generator.generate(state)
