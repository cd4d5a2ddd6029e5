"""WizardController: steps through the cards that build a merge template."""

from __future__ import annotations

import logging
from typing import Any, Sequence

from constants import DOCUMENT_TYPE, CardName
from controller.card import ToggleableCard
from controller.registry import CardRegistry
from controller.validators import validate_conditional, validate_not_empty
from model import CardNode, CardSequence, MergeTemplate

log = logging.getLogger(__name__)

# Card order for a document-backed merge
DOCUMENT_FLOW: tuple[CardName, ...] = (
    CardName.TITLE,
    CardName.SHEET,
    CardName.ROW,
    CardName.TO,
    CardName.SUBJECT,
    CardName.DOCUMENT_SELECTOR,
    CardName.CONDITIONAL,
    CardName.SEND_NOW,
)

# Cards that must hold a value before the user may move on
REQUIRED_CARDS = (
    CardName.TITLE,
    CardName.SHEET,
    CardName.ROW,
    CardName.DOCUMENT_SELECTOR,
)


class WizardController:
    """Drives a fixed sequence of cards and translates them to/from a MergeTemplate.

    Exactly one card is visible at a time. Navigation is strictly sequential
    and does not check validity: callers are expected to call
    validate_state() before next().

    Example usage:
        wizard = WizardController(build_card_registry())
        wizard.set_merge_template(template)
        if wizard.validate_state():
            wizard.next()
        ...
        container.update(wizard.get_merge_template())
    """

    def __init__(self, registry: CardRegistry, flow: Sequence[CardName] = DOCUMENT_FLOW) -> None:
        if not flow:
            raise ValueError("A wizard flow needs at least one card")
        self._registry = registry
        self._flow = flow
        self._update_config: dict[str, Any] = {}
        self._init()

    def _init(self) -> None:
        for name in REQUIRED_CARDS:
            if name in self._registry:
                self._registry[name].set_validation(validate_not_empty)
        if CardName.CONDITIONAL in self._registry:
            self._registry[CardName.CONDITIONAL].set_validation(validate_conditional)

        self._cards = CardSequence(self._flow)
        self._active: CardNode = self._cards.head
        self._show(self._active.data)

    def _show(self, name: CardName) -> None:
        self._registry.hide_all()
        self._registry[name].show()

    @property
    def active(self) -> CardNode:
        """The node of the currently visible card."""
        return self._active

    @property
    def sequence(self) -> CardSequence:
        return self._cards

    # =========================================================================
    # Template <-> cards
    # =========================================================================

    def set_merge_template(self, template: MergeTemplate) -> None:
        """Load template into the cards. The active card is left where it is."""
        self._update_config = template.to_config()
        merge_data = self._update_config["mergeData"]
        data = merge_data.get("data", {})
        cards = self._registry

        cards[CardName.TITLE].set_value(merge_data.get("title"))
        cards[CardName.SHEET].set_value(merge_data.get("sheet"))
        cards[CardName.ROW].set_value(merge_data.get("headerRow"))
        cards[CardName.TO].set_value({
            "to": data.get("to"),
            "cc": data.get("cc"),
            "bcc": data.get("bcc"),
        })
        cards[CardName.SUBJECT].set_value(data.get("subject"))
        cards[CardName.DOCUMENT_SELECTOR].set_value({"id": data.get("documentID")})

        conditional: ToggleableCard = cards[CardName.CONDITIONAL]
        if merge_data.get("conditional") is not None:
            conditional.check()
            conditional.set_value(merge_data["conditional"])
        else:
            conditional.uncheck()

        log.debug(f"Loaded template {template.id} into wizard")

    def get_merge_template(self) -> MergeTemplate:
        """Build a new MergeTemplate from the current card values.

        Fields the wizard doesn't manage (id, timestamps, ...) are carried over
        from the template passed to set_merge_template().
        """
        cards = self._registry
        recipients = cards[CardName.TO].get_value() or {}
        config = dict(self._update_config)
        config["mergeData"] = {
            "title": cards[CardName.TITLE].get_value(),
            "sheet": cards[CardName.SHEET].get_value(),
            "headerRow": cards[CardName.ROW].get_value(),
            "conditional": cards[CardName.CONDITIONAL].get_value(),
            "type": DOCUMENT_TYPE,
            "data": {
                "to": recipients.get("to"),
                "cc": recipients.get("cc"),
                "bcc": recipients.get("bcc"),
                "subject": cards[CardName.SUBJECT].get_value(),
                "documentID": cards[CardName.DOCUMENT_SELECTOR].get_value(),
            },
        }
        return MergeTemplate(config)

    # =========================================================================
    # Navigation
    # =========================================================================

    def next(self) -> CardNode | None:
        """Show the next card. Returns the new active node, or None at the last card."""
        if self.is_last():
            return None

        self._registry[self._active.data].hide()
        self._active = self._active.next
        self._registry[self._active.data].show()
        log.debug(f"wizard -> {self._active.data.value}")
        return self._active

    def back(self) -> CardNode | None:
        """Show the previous card. Returns the new active node, or None at the first card."""
        if self.is_first():
            return None

        self._registry[self._active.data].hide()
        self._active = self._active.previous
        self._registry[self._active.data].show()
        log.debug(f"wizard <- {self._active.data.value}")
        return self._active

    def is_first(self) -> bool:
        return self._active == self._cards.head

    def is_last(self) -> bool:
        return self._active == self._cards.tail

    def validate_state(self) -> bool:
        """Whether the active card currently holds an acceptable value."""
        return self._registry[self._active.data].is_valid()
