"""
Game Setup - Creates initial game state.

This module handles:
- Building the deck (50 cards, 55 with multicolor)
- Shuffling with seed for determinism
- Choosing the first player with the same seed
- Initial deal

Setup is pure: the same options and seed always produce the same game.
"""

from __future__ import annotations
import logging
import random
import time

from .state import (
    BASE_COLORS,
    NUMBERS,
    Card,
    Color,
    GameOptions,
    GameState,
    HandCard,
    Player,
    Tokens,
)
from .hints import empty_hint
from .errors import ConfigViolation

logger = logging.getLogger(__name__)

MIN_PLAYERS = 2
MAX_PLAYERS = 5

DEFAULT_PLAYER_NAMES = ("Akiyo", "Miho", "Tomoa", "Futaba", "Kai")

# Copies of each number per base color
CARD_COPIES = {1: 3, 2: 2, 3: 2, 4: 2, 5: 1}


def make_seed() -> int:
    """Seed from the current time and a random factor, for unseeded games."""
    return int(time.time() * 1000 * random.random())


def build_deck(multicolor: bool = False) -> list[Card]:
    """Unshuffled deck: 3/2/2/2/1 per base color, one of each multicolor number."""
    cards = [
        Card(color=color, number=number)
        for color in BASE_COLORS
        for number in NUMBERS
        for _ in range(CARD_COPIES[number])
    ]
    if multicolor:
        cards.extend(Card(color=Color.MULTICOLOR, number=number) for number in NUMBERS)
    return cards


def new_game(
    options: GameOptions,
    seed: int | None = None,
    player_names: list[str] | None = None,
) -> GameState:
    """
    Set up a new game.

    Args:
        options: Player count (2-5) and multicolor toggle
        seed: Seed for deterministic shuffling (derived from the clock if None)
        player_names: Display names (defaults to DEFAULT_PLAYER_NAMES)

    Returns:
        Initial GameState ready for the first action

    Raises:
        ConfigViolation: if the player count is outside 2-5
    """
    if not MIN_PLAYERS <= options.players_count <= MAX_PLAYERS:
        raise ConfigViolation(
            f"Hanabi supports {MIN_PLAYERS}-{MAX_PLAYERS} players, got {options.players_count}"
        )

    if seed is None:
        seed = make_seed()

    deck = build_deck(options.multicolor)
    random.Random(seed).shuffle(deck)

    order = list(range(options.players_count))
    random.Random(seed).shuffle(order)

    players = _create_players(options, player_names)
    players, deck = _deal_initial_hands(players, deck, options)

    logger.debug(
        "New game: %d players, multicolor=%s, seed=%d, first player %d",
        options.players_count, options.multicolor, seed, order[0],
    )

    return GameState(
        options=options,
        players=tuple(players),
        draw_pile=tuple(deck),
        discard_pile=(),
        played_cards=(),
        tokens=Tokens(),
        current_player=order[0],
        # Only counts down once the draw pile is empty
        actions_left=options.players_count + 1,
        seed=seed,
    )


def _create_players(options: GameOptions, names: list[str] | None) -> list[Player]:
    """Create seats with empty hands."""
    names = list(names or [])
    players = []
    for i in range(options.players_count):
        name = names[i] if i < len(names) else DEFAULT_PLAYER_NAMES[i]
        players.append(Player(id=i, name=name))
    return players


def _deal_initial_hands(
    players: list[Player],
    deck: list[Card],
    options: GameOptions,
) -> tuple[list[Player], list[Card]]:
    """Deal hand_size cards to each player from the front of the deck."""
    dealt_players = []
    for player in players:
        dealt, deck = deck[:options.hand_size], deck[options.hand_size:]
        hand = tuple(HandCard(card=card, hint=empty_hint(options)) for card in dealt)
        dealt_players.append(player.with_hand(hand))
    return dealt_players, deck
