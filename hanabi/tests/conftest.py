"""
Pytest fixtures for Hanabi tests.
"""

import pytest

from ..engine_core.state import (
    Card,
    Color,
    GameOptions,
    GameState,
    HandCard,
    Player,
    Tokens,
)
from ..engine_core.hints import empty_hint
from ..engine_core.setup import new_game


B, R, G, W, Y = Color.BLUE, Color.RED, Color.GREEN, Color.WHITE, Color.YELLOW


@pytest.fixture
def three_player_options() -> GameOptions:
    return GameOptions(players_count=3)


@pytest.fixture
def fresh_game(three_player_options) -> GameState:
    """A seeded 3-player game, no multicolor."""
    return new_game(three_player_options, seed=42)


@pytest.fixture
def make_state():
    """
    Build a hand-crafted state.

    hands is a list of card lists (index 0 = newest card); everything
    else defaults to the start of a 2-player game.
    """
    def _make(
        hands,
        draw_pile=(),
        played_cards=(),
        discard_pile=(),
        tokens=None,
        current_player=0,
        actions_left=None,
        multicolor=False,
    ) -> GameState:
        options = GameOptions(players_count=len(hands), multicolor=multicolor)
        players = tuple(
            Player(
                id=i,
                name=f"P{i}",
                hand=tuple(HandCard(card=c, hint=empty_hint(options)) for c in cards),
            )
            for i, cards in enumerate(hands)
        )
        return GameState(
            options=options,
            players=players,
            draw_pile=tuple(draw_pile),
            discard_pile=tuple(discard_pile),
            played_cards=tuple(played_cards),
            tokens=tokens or Tokens(),
            current_player=current_player,
            actions_left=actions_left if actions_left is not None else len(hands) + 1,
        )
    return _make


@pytest.fixture
def two_player_state(make_state) -> GameState:
    """
    Two players, player 0 to act.

    Player 0 holds red 1, blue 3, green 1, white 5, yellow 2.
    Player 1 holds red 2, red 1, blue 1, green 4, white 1.
    The next card drawn is yellow 1.
    """
    return make_state(
        hands=[
            [Card(R, 1), Card(B, 3), Card(G, 1), Card(W, 5), Card(Y, 2)],
            [Card(R, 2), Card(R, 1), Card(B, 1), Card(G, 4), Card(W, 1)],
        ],
        draw_pile=[Card(B, 2), Card(G, 2), Card(Y, 1)],
    )
