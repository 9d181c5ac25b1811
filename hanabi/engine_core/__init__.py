"""
Engine Core - Deterministic game state management.

The engine is the runtime that:
1. Builds the initial GameState (setup.new_game)
2. Validates and applies actions via the reducer
3. Tracks what each hand has been told (hints)
4. Reports whether the game is over
5. Generates legal actions
"""

from .state import (
    Color,
    Card,
    CardHint,
    HintMark,
    HandCard,
    Player,
    Tokens,
    GameOptions,
    GameState,
    ALL_COLORS,
    BASE_COLORS,
    NUMBERS,
    MAX_HINTS,
    MAX_STRIKES,
)
from .action import Action, ActionType, HintType, ActionResult
from .errors import (
    RuleViolation,
    TurnViolation,
    HandConsistencyViolation,
    HintResourceViolation,
    SelfHintViolation,
    InvalidHintViolation,
    UnknownActionViolation,
    ConfigViolation,
    ConfigError,
)
from .hints import empty_hint, apply_hint
from .setup import new_game, build_deck, make_seed
from .reducer import Reducer, apply_action, commit_action, is_game_over, is_playable
from .action_generator import ActionGenerator, legal_actions

__all__ = [
    "Color",
    "Card",
    "CardHint",
    "HintMark",
    "HandCard",
    "Player",
    "Tokens",
    "GameOptions",
    "GameState",
    "ALL_COLORS",
    "BASE_COLORS",
    "NUMBERS",
    "MAX_HINTS",
    "MAX_STRIKES",
    "Action",
    "ActionType",
    "HintType",
    "ActionResult",
    "RuleViolation",
    "TurnViolation",
    "HandConsistencyViolation",
    "HintResourceViolation",
    "SelfHintViolation",
    "InvalidHintViolation",
    "UnknownActionViolation",
    "ConfigViolation",
    "ConfigError",
    "empty_hint",
    "apply_hint",
    "new_game",
    "build_deck",
    "make_seed",
    "Reducer",
    "apply_action",
    "commit_action",
    "is_game_over",
    "is_playable",
    "ActionGenerator",
    "legal_actions",
]
