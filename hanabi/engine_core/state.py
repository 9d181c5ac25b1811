"""
Game State - Immutable data model for a Hanabi game.

Design principles:
- Immutable: frozen dataclasses over tuples, all mutations return new state
- Copy-on-write: only the changed branch (one player, tokens, a pile) is rebuilt
- Serializable: every field is a plain value (see api.schemas for snapshots)
- Value semantics: cards compare by (color, number), never by identity
"""

from __future__ import annotations
from dataclasses import dataclass, field, replace
from enum import Enum, IntEnum


MAX_HINTS = 8
MAX_STRIKES = 3
NUMBERS: tuple[int, ...] = (1, 2, 3, 4, 5)


class Color(Enum):
    """Card colors, in their fixed table order."""
    BLUE = "blue"
    RED = "red"
    GREEN = "green"
    WHITE = "white"
    YELLOW = "yellow"
    MULTICOLOR = "multicolor"

    @property
    def index(self) -> int:
        """Position of this color in hint tables."""
        return ALL_COLORS.index(self)


ALL_COLORS: tuple[Color, ...] = tuple(Color)
BASE_COLORS: tuple[Color, ...] = ALL_COLORS[:5]


class HintMark(IntEnum):
    """What other players have told about one value of a card."""
    IMPOSSIBLE = 0
    POSSIBLE = 1
    CONFIRMED = 2


@dataclass(frozen=True)
class Card:
    """A card value. Duplicates exist in the deck and are equal."""
    color: Color
    number: int

    def __str__(self) -> str:
        return f"{self.color.value} {self.number}"


@dataclass(frozen=True)
class CardHint:
    """
    Belief table about a card held in a hand.

    One mark per color (indexed by Color.index) and one per number
    (indexed by number - 1). At most one value per dimension is
    CONFIRMED, and then every other value of that dimension is IMPOSSIBLE.
    """
    colors: tuple[HintMark, ...]
    numbers: tuple[HintMark, ...]

    def color_mark(self, color: Color) -> HintMark:
        return self.colors[color.index]

    def number_mark(self, number: int) -> HintMark:
        return self.numbers[number - 1]

    @property
    def confirmed_color(self) -> Color | None:
        for color, mark in zip(ALL_COLORS, self.colors):
            if mark == HintMark.CONFIRMED:
                return color
        return None

    @property
    def confirmed_number(self) -> int | None:
        for number, mark in zip(NUMBERS, self.numbers):
            if mark == HintMark.CONFIRMED:
                return number
        return None

    @property
    def possible_colors(self) -> tuple[Color, ...]:
        """Colors not ruled out (possible or confirmed)."""
        return tuple(
            color for color, mark in zip(ALL_COLORS, self.colors)
            if mark != HintMark.IMPOSSIBLE
        )

    @property
    def possible_numbers(self) -> tuple[int, ...]:
        """Numbers not ruled out (possible or confirmed)."""
        return tuple(
            number for number, mark in zip(NUMBERS, self.numbers)
            if mark != HintMark.IMPOSSIBLE
        )

    @property
    def is_touched(self) -> bool:
        """True once a positive hint has confirmed a color or a number."""
        return self.confirmed_color is not None or self.confirmed_number is not None


@dataclass(frozen=True)
class HandCard:
    """A card in a hand together with what others have told about it."""
    card: Card
    hint: CardHint


@dataclass(frozen=True)
class Player:
    """
    A seat at the table.

    The hand is ordered: index 0 holds the most recently drawn card.
    """
    id: int
    name: str
    hand: tuple[HandCard, ...] = ()

    @property
    def cards(self) -> tuple[Card, ...]:
        return tuple(hc.card for hc in self.hand)

    def with_hand(self, hand: tuple[HandCard, ...]) -> Player:
        """Return new player with a replaced hand."""
        return replace(self, hand=hand)


@dataclass(frozen=True)
class Tokens:
    """Shared hint tokens and remaining strikes."""
    hints: int = MAX_HINTS
    strikes: int = MAX_STRIKES


@dataclass(frozen=True)
class GameOptions:
    """Table configuration fixed at game creation."""
    players_count: int
    multicolor: bool = False

    @property
    def colors(self) -> tuple[Color, ...]:
        """Colors in play for this game."""
        return ALL_COLORS if self.multicolor else BASE_COLORS

    @property
    def hand_size(self) -> int:
        return 5 if self.players_count <= 3 else 4


@dataclass(frozen=True)
class GameState:
    """
    Complete game state at a point in time.

    Created by setup.new_game and replaced wholesale by every
    reducer.commit_action call. The top of draw_pile is its last element.
    """
    options: GameOptions
    players: tuple[Player, ...]
    draw_pile: tuple[Card, ...] = ()
    discard_pile: tuple[Card, ...] = ()
    played_cards: tuple[Card, ...] = ()
    tokens: Tokens = field(default_factory=Tokens)
    current_player: int = 0
    actions_left: int = 0

    # Seed the game was created with, for replays
    seed: int = 0

    @property
    def current(self) -> Player:
        """The player whose turn it is."""
        return self.players[self.current_player]

    @property
    def num_players(self) -> int:
        return len(self.players)

    @property
    def max_score(self) -> int:
        """Played cards needed for a perfect game (25, or 30 with multicolor)."""
        return len(NUMBERS) * len(self.options.colors)

    @property
    def score(self) -> int:
        return len(self.played_cards)

    def player(self, index: int) -> Player:
        return self.players[index]

    def with_player(self, player: Player) -> GameState:
        """Return new state with updated player."""
        new_players = tuple(
            player if p.id == player.id else p
            for p in self.players
        )
        return self._copy_with(players=new_players)

    def _copy_with(self, **kwargs) -> GameState:
        """Create a copy with some fields replaced."""
        return replace(self, **kwargs)
