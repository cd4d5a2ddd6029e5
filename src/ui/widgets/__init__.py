"""Custom Textual widgets for mailman.

This package contains all custom widgets organized by domain.
"""

from ui.widgets.cards import (
    ConditionalCard,
    DocumentCard,
    InputCard,
    RecipientsCard,
    SendNowCard,
    build_card_registry,
)
from ui.widgets.template_item import MergeTemplateListItem

__all__ = [
    # Wizard cards
    "ConditionalCard",
    "DocumentCard",
    "InputCard",
    "RecipientsCard",
    "SendNowCard",
    "build_card_registry",
    # Templates list
    "MergeTemplateListItem",
]
