"""UI module containing widgets, views, modals and styles."""

from ui.widgets import (
    ConditionalCard,
    DocumentCard,
    InputCard,
    MergeTemplateListItem,
    RecipientsCard,
    SendNowCard,
    build_card_registry,
)
from ui.views import MergeTemplatesListView, SettingsView, TemplatesListPanel
from ui.modals import ConfirmDialog, PreviewModal
from ui import ids

__all__ = [
    # Widgets
    "ConditionalCard",
    "DocumentCard",
    "InputCard",
    "MergeTemplateListItem",
    "RecipientsCard",
    "SendNowCard",
    "build_card_registry",
    # Views
    "MergeTemplatesListView",
    "SettingsView",
    "TemplatesListPanel",
    # Modals
    "ConfirmDialog",
    "PreviewModal",
]
