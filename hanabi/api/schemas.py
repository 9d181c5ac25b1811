"""
Pydantic Schemas - Structural snapshots and host request/response models.

A GameStateModel mirrors GameState field for field, so a storage or
network layer can persist or ship the exact state and restore it.

Error Codes:
- NOT_YOUR_TURN: Action submitted out of turn
- HAND_MISMATCH: Card index or declared card does not match the hand
- NO_HINT_TOKENS: Hint attempted with no token left
- SELF_HINT: Hint aimed at the acting player
- INVALID_HINT: Hint target or value outside the game
- INVALID_ACTION: Action of an unknown kind
- INVALID_CONFIG: Unsupported game options
- GAME_OVER: Action submitted after the game ended
- SESSION_NOT_FOUND: Game does not exist or was ended
"""

from enum import Enum
from typing import Literal, Optional, Any, Union
from pydantic import BaseModel, Field, model_validator

from ..engine_core.state import (
    Card,
    CardHint,
    Color,
    GameOptions,
    GameState,
    HandCard,
    HintMark,
    Player,
    Tokens,
)
from ..engine_core.action import Action, ActionType, HintType


# =============================================================================
# Enums
# =============================================================================

class GameStatus(str, Enum):
    """Game status values."""
    ACTIVE = "active"
    GAME_OVER = "game_over"
    ABANDONED = "abandoned"


class ErrorCode(str, Enum):
    """Structured error codes."""
    NOT_YOUR_TURN = "NOT_YOUR_TURN"
    HAND_MISMATCH = "HAND_MISMATCH"
    NO_HINT_TOKENS = "NO_HINT_TOKENS"
    SELF_HINT = "SELF_HINT"
    INVALID_HINT = "INVALID_HINT"
    INVALID_ACTION = "INVALID_ACTION"
    INVALID_CONFIG = "INVALID_CONFIG"
    GAME_OVER = "GAME_OVER"
    SESSION_NOT_FOUND = "SESSION_NOT_FOUND"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


# =============================================================================
# Snapshot Models
# =============================================================================

class CardModel(BaseModel):
    """A card value."""
    color: Color
    number: int = Field(..., ge=1, le=5)

    @classmethod
    def from_card(cls, card: Card) -> "CardModel":
        return cls(color=card.color, number=card.number)

    def to_card(self) -> Card:
        return Card(color=self.color, number=self.number)


class CardHintModel(BaseModel):
    """
    Belief table: 0 impossible, 1 possible, 2 confirmed.

    A dimension holds at most one confirmed mark, and a confirmed mark
    leaves every sibling impossible.
    """
    colors: list[HintMark] = Field(..., min_length=6, max_length=6)
    numbers: list[HintMark] = Field(..., min_length=5, max_length=5)

    @model_validator(mode="after")
    def check_confirmations(self) -> "CardHintModel":
        for name, marks in (("colors", self.colors), ("numbers", self.numbers)):
            confirmed = marks.count(HintMark.CONFIRMED)
            if confirmed > 1:
                raise ValueError(f"{name} has {confirmed} confirmed values")
            if confirmed and marks.count(HintMark.POSSIBLE):
                raise ValueError(f"{name} has a confirmed value next to possible ones")
        return self

    @classmethod
    def from_hint(cls, hint: CardHint) -> "CardHintModel":
        return cls(colors=list(hint.colors), numbers=list(hint.numbers))

    def to_hint(self) -> CardHint:
        return CardHint(colors=tuple(self.colors), numbers=tuple(self.numbers))


class HandCardModel(BaseModel):
    """A held card and its belief table."""
    card: CardModel
    hint: CardHintModel


class PlayerModel(BaseModel):
    """A seat and its hand, newest card first."""
    id: int
    name: str
    hand: list[HandCardModel] = Field(default_factory=list)


class TokensModel(BaseModel):
    """Shared hint tokens and remaining strikes."""
    hints: int = Field(8, ge=0)
    strikes: int = 3


class GameOptionsModel(BaseModel):
    """Table configuration."""
    players_count: int = Field(..., ge=2, le=5)
    multicolor: bool = False


class GameStateModel(BaseModel):
    """
    Structural snapshot of a GameState.

    Round-trips through from_state / to_state without loss. Seats are
    checked on load: one player per seat, ids equal to seat indices,
    and current_player pointing at a seat.
    """
    options: GameOptionsModel
    players: list[PlayerModel]
    draw_pile: list[CardModel] = Field(default_factory=list)
    discard_pile: list[CardModel] = Field(default_factory=list)
    played_cards: list[CardModel] = Field(default_factory=list)
    tokens: TokensModel = Field(default_factory=TokensModel)
    current_player: int = 0
    actions_left: int = 0
    seed: int = 0

    @model_validator(mode="after")
    def check_seats(self) -> "GameStateModel":
        count = self.options.players_count
        if len(self.players) != count:
            raise ValueError(f"{len(self.players)} players listed for a {count}-player game")
        for seat, player in enumerate(self.players):
            if player.id != seat:
                raise ValueError(f"Player at seat {seat} has id {player.id}")
        if not 0 <= self.current_player < count:
            raise ValueError(f"current_player {self.current_player} is not a seat")
        return self

    @classmethod
    def from_state(cls, state: GameState) -> "GameStateModel":
        return cls(
            options=GameOptionsModel(
                players_count=state.options.players_count,
                multicolor=state.options.multicolor,
            ),
            players=[
                PlayerModel(
                    id=player.id,
                    name=player.name,
                    hand=[
                        HandCardModel(
                            card=CardModel.from_card(hc.card),
                            hint=CardHintModel.from_hint(hc.hint),
                        )
                        for hc in player.hand
                    ],
                )
                for player in state.players
            ],
            draw_pile=[CardModel.from_card(c) for c in state.draw_pile],
            discard_pile=[CardModel.from_card(c) for c in state.discard_pile],
            played_cards=[CardModel.from_card(c) for c in state.played_cards],
            tokens=TokensModel(hints=state.tokens.hints, strikes=state.tokens.strikes),
            current_player=state.current_player,
            actions_left=state.actions_left,
            seed=state.seed,
        )

    def to_state(self) -> GameState:
        return GameState(
            options=GameOptions(
                players_count=self.options.players_count,
                multicolor=self.options.multicolor,
            ),
            players=tuple(
                Player(
                    id=player.id,
                    name=player.name,
                    hand=tuple(
                        HandCard(card=hc.card.to_card(), hint=hc.hint.to_hint())
                        for hc in player.hand
                    ),
                )
                for player in self.players
            ),
            draw_pile=tuple(c.to_card() for c in self.draw_pile),
            discard_pile=tuple(c.to_card() for c in self.discard_pile),
            played_cards=tuple(c.to_card() for c in self.played_cards),
            tokens=Tokens(hints=self.tokens.hints, strikes=self.tokens.strikes),
            current_player=self.current_player,
            actions_left=self.actions_left,
            seed=self.seed,
        )


# =============================================================================
# Request Models
# =============================================================================

class CreateGameRequest(BaseModel):
    """Request to create a new game."""
    players_count: int = Field(3, description="Number of players (2-5)")
    multicolor: bool = Field(False, description="Include the multicolor suit")
    seed: Optional[int] = Field(None, description="Seed for reproducible games")
    player_names: Optional[list[str]] = Field(None, description="Display names in seat order")


class ActionRequest(BaseModel):
    """
    One player action.

    play/discard need card_index and card; hint needs to, hint_type and value.
    """
    kind: Literal["play", "discard", "hint"]
    from_player: int = Field(..., alias="from", ge=0)
    card_index: Optional[int] = Field(None, ge=0)
    card: Optional[CardModel] = None
    to_player: Optional[int] = Field(None, alias="to", ge=0)
    hint_type: Optional[HintType] = None
    value: Optional[Union[int, str]] = Field(None, description="Color name or number 1-5")

    model_config = {"populate_by_name": True}

    @model_validator(mode="after")
    def check_kind_fields(self) -> "ActionRequest":
        if self.kind in ("play", "discard"):
            if self.card_index is None or self.card is None:
                raise ValueError(f"{self.kind} requires card_index and card")
        else:
            if self.to_player is None or self.hint_type is None or self.value is None:
                raise ValueError("hint requires to, hint_type and value")
            if self.hint_type == HintType.COLOR:
                try:
                    Color(self.value)
                except ValueError:
                    raise ValueError(f"Unknown color: {self.value}") from None
            elif isinstance(self.value, str):
                raise ValueError(f"Number hint needs an integer value, got {self.value!r}")
        return self

    @classmethod
    def from_action(cls, action: Action) -> "ActionRequest":
        if action.action_type == ActionType.HINT:
            value = action.value.value if isinstance(action.value, Color) else action.value
            return cls(
                kind="hint",
                from_player=action.from_player,
                to_player=action.to_player,
                hint_type=action.hint_type,
                value=value,
            )
        return cls(
            kind=action.action_type.value,
            from_player=action.from_player,
            card_index=action.card_index,
            card=CardModel.from_card(action.card),
        )

    def to_action(self) -> Action:
        if self.kind == "hint":
            value = Color(self.value) if self.hint_type == HintType.COLOR else self.value
            return Action.hint(self.from_player, self.to_player, self.hint_type, value)
        factory = Action.play if self.kind == "play" else Action.discard
        return factory(self.from_player, self.card_index, self.card.to_card())


# =============================================================================
# Response Models
# =============================================================================

class ErrorResponse(BaseModel):
    """Standard error response."""
    error: str = Field(..., description="Human-readable error message")
    error_code: ErrorCode = Field(..., description="Machine-readable error code")
    details: Optional[dict[str, Any]] = Field(None, description="Additional error context")
    api_version: str = Field("v1", description="API version")


class GameResponse(BaseModel):
    """A hosted game and its full state."""
    game_id: str
    status: GameStatus
    score: int = 0
    max_score: int = 25
    is_game_over: bool = False
    state: GameStateModel
    api_version: str = "v1"


class ActionResponse(BaseModel):
    """Response after an accepted action."""
    game_id: str
    success: bool
    changes: list[str] = Field(default_factory=list)
    game: GameResponse
    api_version: str = "v1"


class LegalActionsResponse(BaseModel):
    """Actions the current player may submit."""
    game_id: str
    current_player: int
    actions: list[ActionRequest] = Field(default_factory=list)
    api_version: str = "v1"


class GameListResponse(BaseModel):
    """Response listing active games."""
    games: list[str]
    count: int


class EndGameResponse(BaseModel):
    """Response after ending a game."""
    success: bool
    game_id: str
