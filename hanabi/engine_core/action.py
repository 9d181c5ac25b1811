"""
Action System - Actions and results.

A player does exactly one thing per turn:
1. Play a card from their hand
2. Discard a card from their hand
3. Give a hint to another player

All state changes flow through actions.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .state import Card, Color


class ActionType(Enum):
    """Kinds of player actions."""
    PLAY = "play"
    DISCARD = "discard"
    HINT = "hint"


class HintType(Enum):
    """Which attribute a hint talks about."""
    COLOR = "color"
    NUMBER = "number"


@dataclass(frozen=True)
class Action:
    """
    A complete action to be applied to the game state.

    Play and discard use card_index and card; card repeats what the
    client believes sits at that index, so a stale client is detected.
    Hint uses to_player, hint_type and value.
    """
    action_type: ActionType
    from_player: int

    # Play / discard
    card_index: int | None = None
    card: Card | None = None

    # Hint
    to_player: int | None = None
    hint_type: HintType | None = None
    value: Color | int | None = None

    @classmethod
    def play(cls, from_player: int, card_index: int, card: Card) -> Action:
        """Factory for play action."""
        return cls(
            action_type=ActionType.PLAY,
            from_player=from_player,
            card_index=card_index,
            card=card,
        )

    @classmethod
    def discard(cls, from_player: int, card_index: int, card: Card) -> Action:
        """Factory for discard action."""
        return cls(
            action_type=ActionType.DISCARD,
            from_player=from_player,
            card_index=card_index,
            card=card,
        )

    @classmethod
    def hint(
        cls,
        from_player: int,
        to_player: int,
        hint_type: HintType,
        value: Color | int,
    ) -> Action:
        """Factory for hint action."""
        return cls(
            action_type=ActionType.HINT,
            from_player=from_player,
            to_player=to_player,
            hint_type=hint_type,
            value=value,
        )

    def describe(self) -> str:
        """Short description for logs and action history."""
        if self.action_type == ActionType.HINT:
            value = self.value.value if isinstance(self.value, Color) else self.value
            return f"player {self.from_player} hints {self.hint_type.value} {value} to player {self.to_player}"
        return f"player {self.from_player} {self.action_type.value}s {self.card} at {self.card_index}"


@dataclass
class ActionResult:
    """
    Result of applying an action.

    Contains:
    - Whether action succeeded
    - New state (if succeeded)
    - Error and machine-readable code (if failed)
    - Change notes (for UI/logs)
    """
    success: bool
    new_state: Any | None = None  # GameState
    error: str | None = None
    error_code: str | None = None

    state_changes: list[str] = field(default_factory=list)

    @classmethod
    def failure(cls, error: str, error_code: str | None = None) -> ActionResult:
        """Create a failure result."""
        return cls(success=False, error=error, error_code=error_code)

    @classmethod
    def success_with_state(
        cls,
        state: Any,
        changes: list[str] | None = None,
    ) -> ActionResult:
        """Create a success result with new state."""
        return cls(
            success=True,
            new_state=state,
            state_changes=changes or [],
        )
