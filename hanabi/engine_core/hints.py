"""
Hints - Per-card information tracking.

A hint never moves cards. It rewrites the CardHint of every card in
the target hand:
- positive (card matches): the hinted value is CONFIRMED, siblings IMPOSSIBLE
- negative (card differs): only the hinted value becomes IMPOSSIBLE
"""

from __future__ import annotations

from .state import (
    ALL_COLORS,
    NUMBERS,
    Card,
    CardHint,
    Color,
    GameOptions,
    HandCard,
    HintMark,
)
from .action import HintType


def empty_hint(options: GameOptions) -> CardHint:
    """
    Initial belief for a card entering a hand.

    Every value is possible, except multicolor when it is not in play.
    """
    colors = tuple(
        HintMark.POSSIBLE if color in options.colors else HintMark.IMPOSSIBLE
        for color in ALL_COLORS
    )
    return CardHint(
        colors=colors,
        numbers=tuple(HintMark.POSSIBLE for _ in NUMBERS),
    )


def card_matches(card: Card, hint_type: HintType, value: Color | int) -> bool:
    """Check whether a card carries the hinted color or number."""
    if hint_type == HintType.COLOR:
        return card.color == value
    return card.number == value


def _confirm(marks: tuple[HintMark, ...], position: int) -> tuple[HintMark, ...]:
    return tuple(
        HintMark.CONFIRMED if i == position else HintMark.IMPOSSIBLE
        for i in range(len(marks))
    )


def _rule_out(marks: tuple[HintMark, ...], position: int) -> tuple[HintMark, ...]:
    return tuple(
        HintMark.IMPOSSIBLE if i == position else mark
        for i, mark in enumerate(marks)
    )


def update_hint(
    hint: CardHint,
    positive: bool,
    hint_type: HintType,
    value: Color | int,
) -> CardHint:
    """Return the belief table after one hint about one card."""
    update = _confirm if positive else _rule_out
    if hint_type == HintType.COLOR:
        return CardHint(colors=update(hint.colors, value.index), numbers=hint.numbers)
    return CardHint(colors=hint.colors, numbers=update(hint.numbers, value - 1))


def apply_hint(
    hand: tuple[HandCard, ...],
    hint_type: HintType,
    value: Color | int,
) -> tuple[HandCard, ...]:
    """Apply a hint to every card of a hand, returning the new hand."""
    return tuple(
        HandCard(
            card=hc.card,
            hint=update_hint(hc.hint, card_matches(hc.card, hint_type, value), hint_type, value),
        )
        for hc in hand
    )
