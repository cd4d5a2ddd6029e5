"""Fixed-order sequence of card names with node-style navigation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator

from constants import CardName


@dataclass(frozen=True)
class CardNode:
    """A position in a CardSequence.

    Nodes are views over the sequence: two nodes are equal when they point
    at the same index of the same sequence.
    """

    sequence: CardSequence = field(repr=False)
    index: int

    @property
    def data(self) -> CardName:
        """The card name at this position."""
        return self.sequence.name_at(self.index)

    @property
    def previous(self) -> CardNode | None:
        if self.index == 0:
            return None
        return CardNode(self.sequence, self.index - 1)

    @property
    def next(self) -> CardNode | None:
        if self.index >= len(self.sequence) - 1:
            return None
        return CardNode(self.sequence, self.index + 1)


class CardSequence:
    """Ordered card names. Append-only: the flow order is fixed once built."""

    def __init__(self, names: Iterable[CardName] = ()) -> None:
        self._names: list[CardName] = []
        for name in names:
            self.add(name)

    def add(self, name: CardName) -> None:
        """Append name after the current tail."""
        self._names.append(name)

    def name_at(self, index: int) -> CardName:
        return self._names[index]

    @property
    def head(self) -> CardNode | None:
        return CardNode(self, 0) if self._names else None

    @property
    def tail(self) -> CardNode | None:
        return CardNode(self, len(self._names) - 1) if self._names else None

    def __len__(self) -> int:
        return len(self._names)

    def __iter__(self) -> Iterator[CardName]:
        return iter(self._names)
