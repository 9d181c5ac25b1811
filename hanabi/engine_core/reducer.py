"""
Reducer - Applies actions to game state.

The reducer is the single point of state change.
All state changes must go through commit_action() or apply_action().

Design principles:
- Pure function: (state, action) -> new_state, the input is never touched
- Validates before applying
- commit raises a RuleViolation; apply returns ActionResult with success/failure
- Never refuses a terminal state: the caller checks is_game_over()
"""

from __future__ import annotations
import logging
from dataclasses import dataclass

from .state import NUMBERS, MAX_HINTS, Card, Color, GameState, HandCard, Tokens
from .action import Action, ActionType, ActionResult, HintType
from .hints import apply_hint, empty_hint
from .errors import (
    RuleViolation,
    TurnViolation,
    HandConsistencyViolation,
    HintResourceViolation,
    SelfHintViolation,
    InvalidHintViolation,
    UnknownActionViolation,
)

logger = logging.getLogger(__name__)


def is_playable(card: Card, played_cards: tuple[Card, ...]) -> bool:
    """
    A card is playable when it starts its color or extends it by one,
    and the same card has not already been played.
    """
    previous_here = card.number == 1 or Card(card.color, card.number - 1) in played_cards
    return previous_here and card not in played_cards


def is_game_over(state: GameState) -> bool:
    """Out of turns, out of strikes, or every stack complete."""
    return (
        state.actions_left <= 0
        or state.tokens.strikes <= 0
        or len(state.played_cards) == state.max_score
    )


@dataclass
class Reducer:
    """
    Reducer applies actions to game state.

    Stateless - all state is in GameState.
    max_hints caps the hint tokens won back by completing a color.
    """
    max_hints: int = MAX_HINTS

    def apply(self, state: GameState, action: Action) -> ActionResult:
        """
        Apply an action to the game state.

        Returns ActionResult with new state or error.
        """
        try:
            new_state, changes = self._commit(state, action)
        except RuleViolation as e:
            logger.debug("Rejected %s: %s", action.action_type, e.message)
            return ActionResult.failure(e.message, error_code=e.code)
        return ActionResult.success_with_state(new_state, changes=changes)

    def commit(self, state: GameState, action: Action) -> GameState:
        """
        Apply an action and return the new state.

        Raises RuleViolation if the action is not legal in this state.
        """
        new_state, _ = self._commit(state, action)
        return new_state

    def _commit(self, state: GameState, action: Action) -> tuple[GameState, list[str]]:
        if action.from_player != state.current_player:
            raise TurnViolation(
                f"Not player {action.from_player}'s turn (current player is {state.current_player})"
            )

        handler = self._get_handler(action.action_type)
        new_state, changes = handler(state, action)

        # The pile ran dry (or the last card was just drawn): count down
        if not new_state.draw_pile:
            new_state = new_state._copy_with(actions_left=new_state.actions_left - 1)

        next_player = (state.current_player + 1) % state.options.players_count
        new_state = new_state._copy_with(current_player=next_player)
        return new_state, changes

    def _get_handler(self, action_type: ActionType):
        """Get the handler function for an action type."""
        handlers = {
            ActionType.PLAY: self._handle_play,
            ActionType.DISCARD: self._handle_discard,
            ActionType.HINT: self._handle_hint,
        }
        handler = handlers.get(action_type)
        if handler is None:
            raise UnknownActionViolation(f"Unknown action type {action_type!r}")
        return handler

    def _take_card(self, state: GameState, action: Action) -> tuple[Card, tuple[HandCard, ...]]:
        """Remove the declared card from the acting hand."""
        hand = state.player(action.from_player).hand
        index = action.card_index
        if index is None or not 0 <= index < len(hand):
            raise HandConsistencyViolation(
                f"Card index {index} outside hand of {len(hand)} cards"
            )
        card = hand[index].card
        if card != action.card:
            raise HandConsistencyViolation(
                f"Card at index {index} is {card}, not {action.card}"
            )
        return card, hand[:index] + hand[index + 1:]

    def _draw(
        self,
        state: GameState,
        player_index: int,
        hand: tuple[HandCard, ...],
    ) -> GameState:
        """Refill the hand from the top of the pile, newest card first."""
        if state.draw_pile:
            drawn = state.draw_pile[-1]
            hand = (HandCard(card=drawn, hint=empty_hint(state.options)),) + hand
            state = state._copy_with(draw_pile=state.draw_pile[:-1])
        player = state.player(player_index).with_hand(hand)
        return state.with_player(player)

    def _handle_discard(self, state: GameState, action: Action) -> tuple[GameState, list[str]]:
        """Handle discard action."""
        card, hand = self._take_card(state, action)
        new_state = state._copy_with(discard_pile=state.discard_pile + (card,))
        new_state = self._draw(new_state, action.from_player, hand)
        return new_state, [f"discarded {card}"]

    def _handle_play(self, state: GameState, action: Action) -> tuple[GameState, list[str]]:
        """Handle play action: extend a stack, or strike and discard."""
        card, hand = self._take_card(state, action)

        if is_playable(card, state.played_cards):
            tokens = state.tokens
            if card.number == NUMBERS[-1]:
                # Completing a color wins a hint back
                tokens = Tokens(
                    hints=min(tokens.hints + 1, self.max_hints),
                    strikes=tokens.strikes,
                )
            new_state = state._copy_with(
                played_cards=state.played_cards + (card,),
                tokens=tokens,
            )
            changes = [f"played {card}"]
        else:
            logger.debug("Misplay of %s by player %d", card, action.from_player)
            new_state = state._copy_with(
                discard_pile=state.discard_pile + (card,),
                tokens=Tokens(
                    hints=state.tokens.hints,
                    strikes=state.tokens.strikes - 1,
                ),
            )
            changes = [f"misplayed {card}"]

        new_state = self._draw(new_state, action.from_player, hand)
        return new_state, changes

    def _handle_hint(self, state: GameState, action: Action) -> tuple[GameState, list[str]]:
        """Handle hint action: spend a token, update every card of the target hand."""
        if state.tokens.hints <= 0:
            raise HintResourceViolation("No hint tokens left")
        if action.to_player == action.from_player:
            raise SelfHintViolation("Players cannot hint themselves")
        self._validate_hint(state, action)

        target = state.player(action.to_player)
        new_target = target.with_hand(apply_hint(target.hand, action.hint_type, action.value))
        new_state = state.with_player(new_target)._copy_with(
            tokens=Tokens(
                hints=state.tokens.hints - 1,
                strikes=state.tokens.strikes,
            ),
        )
        return new_state, [action.describe()]

    def _validate_hint(self, state: GameState, action: Action) -> None:
        if action.to_player is None or not 0 <= action.to_player < state.num_players:
            raise InvalidHintViolation(f"No player {action.to_player} to hint")
        if action.hint_type == HintType.COLOR:
            if not isinstance(action.value, Color) or action.value not in state.options.colors:
                raise InvalidHintViolation(f"Color {action.value} is not in play")
        elif action.hint_type == HintType.NUMBER:
            if action.value not in NUMBERS:
                raise InvalidHintViolation(f"Number {action.value} is not a card number")
        else:
            raise InvalidHintViolation(f"Unknown hint type {action.hint_type}")


def commit_action(state: GameState, action: Action) -> GameState:
    """
    Apply an action and return the new state.

    Raises RuleViolation for illegal or stale actions.
    """
    return Reducer().commit(state, action)


def apply_action(state: GameState, action: Action) -> ActionResult:
    """
    Convenience function to apply an action.

    Creates a Reducer and applies the action.
    """
    reducer = Reducer()
    return reducer.apply(state, action)
