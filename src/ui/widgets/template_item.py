"""MergeTemplateListItem: one row in the templates list."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

from textual import on
from textual.app import ComposeResult
from textual.containers import Container, Horizontal, Vertical
from textual.widget import Widget
from textual.widgets import Button, Static

from errors import ContractError
from model import MergeTemplate

if TYPE_CHECKING:
    from metadata import MetadataService
    from ui.modals import DialogFactory

log = logging.getLogger(__name__)

TemplateHandler = Callable[[MergeTemplate], None]


class MergeTemplateListItem(Container):
    """A template row with run, repeat, preview, edit and delete buttons.

    The item mounts itself into `container`. Run, delete and repeat ask the
    matching confirmation dialog first when one has been set.
    """

    def __init__(
        self,
        container: Widget,
        template: MergeTemplate,
        metadata_service: MetadataService,
    ) -> None:
        if container is None:
            raise ContractError("container cannot be None")
        if template is None:
            raise ContractError("template cannot be None")
        if metadata_service is None:
            raise ContractError("metadata_service cannot be None")

        super().__init__(classes="template-item")
        self.template = template
        self._metadata_service = metadata_service

        self._delete_handler: TemplateHandler | None = None
        self._edit_handler: TemplateHandler | None = None
        self._preview_handler: TemplateHandler | None = None
        self._run_handler: TemplateHandler | None = None
        self._repeat_handler: TemplateHandler | None = None
        self._unrepeat_handler: TemplateHandler | None = None
        self._repeat_dialog: DialogFactory | None = None
        self._run_dialog: DialogFactory | None = None
        self._delete_dialog: DialogFactory | None = None

        container.mount(self)

    def compose(self) -> ComposeResult:
        repeating = self.template.is_repeating
        with Horizontal(classes="template-row"):
            with Vertical(classes="template-text"):
                yield Static(self.template.title or "Untitled", classes="template-title", markup=False)
                yield Static(
                    self._metadata_service.describe(self.template),
                    classes="template-meta",
                    markup=False,
                )
            yield Button("Run", classes="run-btn", variant="success")
            yield Button(
                "Repeat: on" if repeating else "Repeat: off",
                classes="repeat-btn",
                variant="warning" if repeating else "default",
            )
            yield Button("Preview", classes="preview-btn")
            yield Button("Edit", classes="edit-btn", variant="primary")
            yield Button("x", classes="delete-btn", variant="error")

    # =========================================================================
    # Wiring
    # =========================================================================

    def set_delete_handler(self, handler: TemplateHandler | None) -> None:
        self._delete_handler = handler

    def set_edit_handler(self, handler: TemplateHandler | None) -> None:
        self._edit_handler = handler

    def set_preview_handler(self, handler: TemplateHandler | None) -> None:
        self._preview_handler = handler

    def set_run_handler(self, handler: TemplateHandler | None) -> None:
        self._run_handler = handler

    def set_repeat_handlers(
        self, on_handler: TemplateHandler | None, off_handler: TemplateHandler | None
    ) -> None:
        self._repeat_handler = on_handler
        self._unrepeat_handler = off_handler

    def set_repeat_dialog(self, dialog: DialogFactory | None) -> None:
        self._repeat_dialog = dialog

    def set_run_dialog(self, dialog: DialogFactory | None) -> None:
        self._run_dialog = dialog

    def set_delete_dialog(self, dialog: DialogFactory | None) -> None:
        self._delete_dialog = dialog

    def cleanup(self) -> None:
        """Detach every handler and take the row off the screen."""
        self.set_delete_handler(None)
        self.set_edit_handler(None)
        self.set_preview_handler(None)
        self.set_run_handler(None)
        self.set_repeat_handlers(None, None)
        self.set_repeat_dialog(None)
        self.set_run_dialog(None)
        self.set_delete_dialog(None)
        if self.parent is not None:
            self.remove()

    # =========================================================================
    # Button handlers
    # =========================================================================

    def _call_handler(self, handler: TemplateHandler | None, action: str) -> None:
        if handler is None:
            log.debug(f"No {action} handler for template {self.template.id}")
            return
        handler(self.template)

    def _confirm_then(
        self, dialog: DialogFactory | None, handler: TemplateHandler | None, action: str
    ) -> None:
        if dialog is None:
            self._call_handler(handler, action)
            return

        def on_result(confirmed: bool | None) -> None:
            if confirmed:
                self._call_handler(handler, action)

        self.app.push_screen(dialog(self.template), on_result)

    @on(Button.Pressed, ".run-btn")
    def on_run_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self._confirm_then(self._run_dialog, self._run_handler, "run")

    @on(Button.Pressed, ".repeat-btn")
    def on_repeat_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        if self.template.is_repeating:
            self._confirm_then(self._repeat_dialog, self._unrepeat_handler, "unrepeat")
        else:
            self._confirm_then(self._repeat_dialog, self._repeat_handler, "repeat")

    @on(Button.Pressed, ".preview-btn")
    def on_preview_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self._call_handler(self._preview_handler, "preview")

    @on(Button.Pressed, ".edit-btn")
    def on_edit_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self._call_handler(self._edit_handler, "edit")

    @on(Button.Pressed, ".delete-btn")
    def on_delete_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self._confirm_then(self._delete_dialog, self._delete_handler, "delete")
