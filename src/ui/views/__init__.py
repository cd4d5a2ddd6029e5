"""Top-level views: the templates list and the wizard that edits them."""

from ui.views.settings import SettingsView
from ui.views.templates_list import MergeTemplatesListView, TemplatesListPanel

__all__ = [
    "MergeTemplatesListView",
    "SettingsView",
    "TemplatesListPanel",
]
