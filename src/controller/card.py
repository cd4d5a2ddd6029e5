"""Capability interface shared by every input card."""

from __future__ import annotations

from typing import Any, Callable

Validator = Callable[["CardController"], bool]


class CardController:
    """Base for input cards driven by the wizard.

    Subclasses implement show/hide/get_value/set_value. Validation is an
    optional predicate slot: a card without one is always valid.
    """

    _validator: Validator | None = None

    def show(self) -> None:
        raise NotImplementedError

    def hide(self) -> None:
        raise NotImplementedError

    def get_value(self) -> Any:
        raise NotImplementedError

    def set_value(self, value: Any) -> None:
        raise NotImplementedError

    def set_validation(self, validator: Validator | None) -> None:
        """Install (or clear, with None) the predicate used by is_valid()."""
        self._validator = validator

    def is_valid(self) -> bool:
        if self._validator is None:
            return True
        return self._validator(self)


class ToggleableCard(CardController):
    """A card the user can switch on and off (e.g. the conditional card)."""

    def check(self) -> None:
        raise NotImplementedError

    def uncheck(self) -> None:
        raise NotImplementedError

    def is_enabled(self) -> bool:
        raise NotImplementedError
