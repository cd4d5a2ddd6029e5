"""Validation predicates installed on wizard cards."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from controller.card import CardController, ToggleableCard


def _is_empty(value: object) -> bool:
    return value is None or value == ""


def validate_not_empty(card: CardController) -> bool:
    """A card is valid once it holds a value.

    Whitespace counts as a value; only None and "" are empty.
    """
    return not _is_empty(card.get_value())


def validate_conditional(card: ToggleableCard) -> bool:
    """The conditional card only needs a value while it is switched on."""
    if card.is_enabled() and _is_empty(card.get_value()):
        return False
    return True
