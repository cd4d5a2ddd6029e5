"""MergeTemplatesListView: the list of saved merge templates.

The view keeps one MergeTemplateListItem per template in the backing
MergeTemplateContainer. It listens for Rules.delete, Rules.add,
Rules.update and Rules.repeater and rebuilds every item from scratch on
each of them; it never mutates the container itself.

It also listens for Mailman.SettingsView.hide (to show itself) and
publishes Mailman.RulesListView.show whenever it is shown.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Callable

from textual import on
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Container, Vertical, VerticalScroll
from textual.widget import AwaitMount, Widget
from textual.widgets import Button, Label, Static

from errors import ContractError
from events import COLLECTION_TOPICS, EventBus, Topic
from ui.ids import css
from ui.widgets import MergeTemplateListItem
import ui.ids as ids

if TYPE_CHECKING:
    from metadata import MetadataService
    from model import MergeTemplate, MergeTemplateContainer
    from ui.modals import DialogFactory
    from ui.widgets.template_item import TemplateHandler

log = logging.getLogger(__name__)

# Builds an item from (list region, template, metadata service)
ItemFactory = Callable[[Widget, "MergeTemplate", "MetadataService"], Any]


class TemplatesListPanel(Container):
    """Base widgets of the list view: the list, the empty state and the new button."""

    BINDINGS = [
        Binding("d", "new_document", "New from document", show=False),
    ]

    def __init__(self, on_new_email: Callable[[], None], on_new_document: Callable[[], None]) -> None:
        super().__init__(id=ids.TEMPLATES_VIEW)
        self._on_new_email = on_new_email
        self._on_new_document = on_new_document
        self.list_region = VerticalScroll(id=ids.TEMPLATES_LIST)
        self.empty_region = Vertical(
            Static("No merge templates yet. Press + to create one.", classes="empty-message"),
            id=ids.EMPTY_CONTAINER,
        )

    def compose(self) -> ComposeResult:
        yield Label("Merge Templates", classes="section-label")
        yield self.list_region
        yield self.empty_region
        yield Button("+ New template", id=ids.FAB_BUTTON, variant="success")

    @on(Button.Pressed, css(ids.FAB_BUTTON))
    def on_fab_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self._on_new_email()

    def action_new_document(self) -> None:
        self._on_new_document()


def _set_hidden(widget: Widget, hidden: bool) -> None:
    widget.set_class(hidden, ids.HIDDEN)


class MergeTemplatesListView:
    """Keeps a list of item widgets in step with a MergeTemplateContainer.

    Handlers and dialogs set here are handed to items as they are created.
    Changing them later does not rewire items that already exist; they pick
    up the new values on the next rebuild.

    Example usage:
        view = MergeTemplatesListView(main_area, metadata, bus)
        await view.mounted
        view.set_edit_handler(open_wizard)
        view.set_container(templates)
    """

    def __init__(
        self,
        append_to: Widget,
        metadata_service: MetadataService,
        bus: EventBus,
        item_factory: ItemFactory = MergeTemplateListItem,
    ) -> None:
        if append_to is None:
            raise ContractError("append_to cannot be None")
        if metadata_service is None:
            raise ContractError("metadata_service cannot be None")

        self._metadata_service = metadata_service
        self._bus = bus
        self._item_factory = item_factory
        self._list_items: list[Any] = []
        self._merge_templates: MergeTemplateContainer | None = None

        self._deletion_callback: TemplateHandler | None = None
        self._edit_callback: TemplateHandler | None = None
        self._preview_callback: TemplateHandler | None = None
        self._run_callback: TemplateHandler | None = None
        self._repeat_callback: TemplateHandler | None = None
        self._unrepeat_callback: TemplateHandler | None = None
        self._email_callback: Callable[[], None] | None = None
        self._document_callback: Callable[[], None] | None = None
        self._repeat_dialog: DialogFactory | None = None
        self._run_dialog: DialogFactory | None = None
        self._delete_dialog: DialogFactory | None = None

        self.base = TemplatesListPanel(self._new_email_template, self._new_document_template)
        self.mounted: AwaitMount = self._init(append_to)

    def _init(self, append_to: Widget) -> AwaitMount:
        mounted = append_to.mount(self.base)
        for topic in COLLECTION_TOPICS:
            self._bus.subscribe(topic, self._rebuild)
        self._bus.subscribe(Topic.SETTINGS_VIEW_HIDE, self.show)
        return mounted

    @property
    def items(self) -> list[Any]:
        """The current item controllers, in container order."""
        return list(self._list_items)

    def _new_email_template(self) -> None:
        if self._email_callback is None:
            log.debug("No email handler set")
            return
        self._email_callback()

    def _new_document_template(self) -> None:
        if self._document_callback is None:
            log.debug("No document handler set")
            return
        self._document_callback()

    def _rebuild(self) -> None:
        for item in self._list_items:
            item.cleanup()
        self._list_items = []

        templates = self._merge_templates
        count = templates.length() if templates is not None else 0
        try:
            for i in range(count):
                self.add(templates.get(i))
        finally:
            self._set_empty_display()
        log.debug(f"Rebuilt templates list with {count} items")

    def _set_empty_display(self) -> None:
        empty = len(self._list_items) == 0
        _set_hidden(self.base.list_region, empty)
        _set_hidden(self.base.empty_region, not empty)

    # =========================================================================
    # Public API
    # =========================================================================

    def set_container(self, container: MergeTemplateContainer) -> None:
        """Use container as the backing collection and rebuild from it."""
        self._merge_templates = container
        self._rebuild()

    def add(self, template: MergeTemplate) -> None:
        """Create an item for template using the currently configured handlers."""
        item = self._item_factory(self.base.list_region, template, self._metadata_service)
        item.set_delete_handler(self._deletion_callback)
        item.set_edit_handler(self._edit_callback)
        item.set_preview_handler(self._preview_callback)
        item.set_run_handler(self._run_callback)
        item.set_repeat_handlers(self._repeat_callback, self._unrepeat_callback)
        item.set_repeat_dialog(self._repeat_dialog)
        item.set_run_dialog(self._run_dialog)
        item.set_delete_dialog(self._delete_dialog)
        self._list_items.append(item)

    def hide(self) -> None:
        _set_hidden(self.base, True)

    def show(self) -> None:
        self._set_empty_display()
        _set_hidden(self.base, False)
        self._bus.publish(Topic.RULES_LIST_VIEW_SHOW)

    @property
    def is_showing(self) -> bool:
        return not self.base.has_class(ids.HIDDEN)

    def set_delete_handler(self, callback: TemplateHandler | None) -> None:
        self._deletion_callback = callback

    def set_edit_handler(self, callback: TemplateHandler | None) -> None:
        self._edit_callback = callback

    def set_preview_handler(self, callback: TemplateHandler | None) -> None:
        self._preview_callback = callback

    def set_run_handler(self, callback: TemplateHandler | None) -> None:
        self._run_callback = callback

    def set_repeat_handlers(
        self, on_callback: TemplateHandler | None, off_callback: TemplateHandler | None
    ) -> None:
        self._repeat_callback = on_callback
        self._unrepeat_callback = off_callback

    def set_email_handler(self, callback: Callable[[], None] | None) -> None:
        """Called when the new template button is pressed."""
        self._email_callback = callback

    def set_document_handler(self, callback: Callable[[], None] | None) -> None:
        """Called for the new-from-document key binding."""
        self._document_callback = callback

    def set_repeat_dialog(self, dialog: DialogFactory | None) -> None:
        self._repeat_dialog = dialog

    def set_run_dialog(self, dialog: DialogFactory | None) -> None:
        self._run_dialog = dialog

    def set_delete_dialog(self, dialog: DialogFactory | None) -> None:
        self._delete_dialog = dialog
