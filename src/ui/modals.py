"""Modal dialogs: confirmations and template preview."""

from __future__ import annotations

from typing import Callable

from textual import on
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Label, Static

from model import MergeTemplate
from ui.ids import css
import ui.ids as ids

# Builds the confirmation shown before an item action runs
DialogFactory = Callable[[MergeTemplate], ModalScreen[bool]]


class ConfirmDialog(ModalScreen[bool]):
    """Yes/no confirmation. Dismisses with True when confirmed."""

    BINDINGS = [("escape", "cancel", "Cancel")]

    def __init__(self, title: str, message: str, confirm_label: str = "OK") -> None:
        super().__init__()
        self._title = title
        self._message = message
        self._confirm_label = confirm_label

    def compose(self) -> ComposeResult:
        with Vertical(id="confirm-modal"):
            yield Label(self._title, id=ids.MODAL_TITLE)
            yield Static(self._message, id=ids.MODAL_MESSAGE, markup=False)
            with Horizontal(id=ids.MODAL_BUTTONS):
                yield Button("Cancel", id=ids.DISMISS_BTN, variant="default")
                yield Button(self._confirm_label, id=ids.CONFIRM_BTN, variant="primary")

    def action_cancel(self) -> None:
        self.dismiss(False)

    @on(Button.Pressed, css(ids.DISMISS_BTN))
    def on_dismiss(self, event: Button.Pressed) -> None:
        self.dismiss(False)

    @on(Button.Pressed, css(ids.CONFIRM_BTN))
    def on_confirm(self, event: Button.Pressed) -> None:
        self.dismiss(True)


def delete_dialog(template: MergeTemplate) -> ConfirmDialog:
    return ConfirmDialog(
        "Delete template",
        f"Delete '{template.title}'? This can't be undone.",
        confirm_label="Delete",
    )


def run_dialog(template: MergeTemplate) -> ConfirmDialog:
    return ConfirmDialog(
        "Run template",
        f"Send '{template.title}' to every matching row now?",
        confirm_label="Run",
    )


def repeat_dialog(template: MergeTemplate) -> ConfirmDialog:
    if template.is_repeating:
        message = f"Stop repeating '{template.title}'?"
    else:
        message = f"Run '{template.title}' every time the sheet changes?"
    return ConfirmDialog("Repeat template", message, confirm_label="Yes")


def format_preview(template: MergeTemplate) -> str:
    """Render the fields of a template as plain text lines."""
    merge_data = template.merge_data
    data = merge_data.get("data", {})
    conditional = merge_data.get("conditional")
    lines = [
        f"Sheet:       {merge_data.get('sheet') or '-'}",
        f"Header row:  {merge_data.get('headerRow') or '-'}",
        f"To:          {data.get('to') or '-'}",
        f"CC:          {data.get('cc') or '-'}",
        f"BCC:         {data.get('bcc') or '-'}",
        f"Subject:     {data.get('subject') or '-'}",
        f"Document:    {data.get('documentID') or '-'}",
        f"Condition:   {conditional if conditional is not None else 'always send'}",
        f"Repeating:   {'yes' if template.is_repeating else 'no'}",
    ]
    return "\n".join(lines)


class PreviewModal(ModalScreen[None]):
    """Read-only view of a template's fields."""

    BINDINGS = [("escape", "close", "Close")]

    def __init__(self, template: MergeTemplate) -> None:
        super().__init__()
        self.template = template

    def compose(self) -> ComposeResult:
        with Vertical(id="preview-modal"):
            yield Label(self.template.title or "Untitled", id=ids.MODAL_TITLE, markup=False)
            yield Static(format_preview(self.template), id=ids.PREVIEW_BODY, markup=False)
            with Horizontal(id=ids.MODAL_BUTTONS):
                yield Button("Close", id=ids.DISMISS_BTN, variant="primary")

    def action_close(self) -> None:
        self.dismiss(None)

    @on(Button.Pressed, css(ids.DISMISS_BTN))
    def on_close(self, event: Button.Pressed) -> None:
        self.dismiss(None)
