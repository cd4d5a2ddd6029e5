"""SettingsView: hosts the wizard cards used to create or edit a template."""

from __future__ import annotations

import logging
from typing import Callable

from textual import on
from textual.app import ComposeResult
from textual.containers import Container, Horizontal, Vertical
from textual.widgets import Button, Static

from constants import CardName
from controller import CardRegistry, WizardController
from events import EventBus, Topic
from model import MergeTemplate
from ui.ids import css
from ui.widgets import build_card_registry
import ui.ids as ids

log = logging.getLogger(__name__)


class SettingsView(Container):
    """Wizard screen area: one card at a time with Back / Next / Cancel.

    Validation is checked here before moving on; the wizard itself never
    blocks navigation.
    """

    def __init__(
        self,
        bus: EventBus,
        on_save: Callable[[MergeTemplate, bool], None],
        registry: CardRegistry | None = None,
    ) -> None:
        super().__init__(id=ids.SETTINGS_VIEW, classes=ids.HIDDEN)
        self._bus = bus
        self._on_save = on_save
        self.registry = registry or build_card_registry()
        self.wizard: WizardController | None = None
        self._bus.subscribe(Topic.RULES_LIST_VIEW_SHOW, self._on_list_shown)

    def on_unmount(self) -> None:
        self._bus.unsubscribe(Topic.RULES_LIST_VIEW_SHOW, self._on_list_shown)

    def compose(self) -> ComposeResult:
        with Vertical(id=ids.CARDS_AREA):
            yield from self.registry.values()
        yield Static("", id=ids.WIZARD_STATUS)
        with Horizontal(id=ids.WIZARD_BUTTONS):
            yield Button("Cancel", id=ids.CANCEL_BTN, variant="error")
            yield Button("Back", id=ids.BACK_BTN, variant="default")
            yield Button("Next", id=ids.NEXT_BTN, variant="primary")

    # =========================================================================
    # Visibility
    # =========================================================================

    @property
    def is_showing(self) -> bool:
        return not self.has_class(ids.HIDDEN)

    def edit(self, template: MergeTemplate) -> None:
        """Start a fresh pass through the cards for template and show the view."""
        self.wizard = WizardController(self.registry)
        self.wizard.set_merge_template(template)
        self.registry[CardName.SEND_NOW].set_value(False)
        log.info(f"Editing template {template.id}")
        self._set_status("")
        self._sync_buttons()
        self.show()

    def show(self) -> None:
        self.remove_class(ids.HIDDEN)

    def hide(self) -> None:
        """Hide and tell sibling views the wizard is gone."""
        self.add_class(ids.HIDDEN)
        self._bus.publish(Topic.SETTINGS_VIEW_HIDE)

    def _on_list_shown(self) -> None:
        # Hide without publishing; the list view is already up
        self.add_class(ids.HIDDEN)

    # =========================================================================
    # Navigation
    # =========================================================================

    def _set_status(self, message: str) -> None:
        self.query_one(css(ids.WIZARD_STATUS), Static).update(message)

    def _sync_buttons(self) -> None:
        if self.wizard is None:
            return
        self.query_one(css(ids.BACK_BTN), Button).disabled = self.wizard.is_first()
        self.query_one(css(ids.NEXT_BTN), Button).label = "Save" if self.wizard.is_last() else "Next"

    def go_next(self) -> bool:
        """Advance (or save, on the last card) if the active card is valid."""
        if self.wizard is None:
            return False
        if not self.wizard.validate_state():
            self._set_status("Please fill in this card before continuing.")
            return False

        self._set_status("")
        if self.wizard.is_last():
            self.save()
        else:
            self.wizard.next()
            self._sync_buttons()
        return True

    def go_back(self) -> None:
        if self.wizard is None:
            return
        self._set_status("")
        self.wizard.back()
        self._sync_buttons()

    def save(self) -> None:
        template = self.wizard.get_merge_template()
        run_now = bool(self.registry[CardName.SEND_NOW].get_value())
        log.info(f"Saving template {template.id} (run_now={run_now})")
        self._on_save(template, run_now)
        self.hide()

    def cancel(self) -> None:
        log.info("Wizard cancelled")
        self.hide()

    @on(Button.Pressed, css(ids.NEXT_BTN))
    def on_next_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self.go_next()

    @on(Button.Pressed, css(ids.BACK_BTN))
    def on_back_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self.go_back()

    @on(Button.Pressed, css(ids.CANCEL_BTN))
    def on_cancel_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self.cancel()
