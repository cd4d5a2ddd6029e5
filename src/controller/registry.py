"""CardRegistry: name-keyed lookup of card controllers."""

from __future__ import annotations

from typing import Iterator, Mapping

from constants import CardName
from controller.card import CardController


class CardRegistry(Mapping[CardName, CardController]):
    """Read-only mapping from CardName to the card that renders it.

    Built once, fully populated, and handed to a WizardController.
    """

    def __init__(self, cards: Mapping[CardName, CardController]) -> None:
        self._cards: dict[CardName, CardController] = dict(cards)

    def __getitem__(self, name: CardName) -> CardController:
        return self._cards[name]

    def __iter__(self) -> Iterator[CardName]:
        return iter(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def hide_all(self) -> None:
        for card in self._cards.values():
            card.hide()
