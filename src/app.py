"""Main TUI application for mailman."""

import logging
from pathlib import Path

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal
from textual.css.query import NoMatches
from textual.widgets import Label, Static

from events import COLLECTION_TOPICS, EventBus, Topic
from metadata import MetadataService
from model import MergeTemplate, MergeTemplateContainer
from store import TemplateStore
from ui import MergeTemplatesListView, PreviewModal, SettingsView
from ui.ids import css
from ui.modals import delete_dialog, repeat_dialog, run_dialog
import ui.ids as ids

log = logging.getLogger(__name__)

APP_CSS = (Path(__file__).parent / "ui" / "styles.css").read_text()


def setup_logging(log_path: Path, level: str = "INFO") -> None:
    """Send log output to log_path (the TUI owns the terminal)."""
    log_path.parent.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        filename=str(log_path),
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(levelname)s - %(message)s",
    )


class MailmanTUI(App):
    """TUI for creating and managing mail-merge templates."""

    TITLE = "Mailman"
    ENABLE_COMMAND_PALETTE = False
    CSS = APP_CSS

    BINDINGS = [
        Binding("n", "new_template", "New template", show=True),
        Binding("q", "quit", "Quit", show=True),
    ]

    def __init__(
        self,
        templates: list[MergeTemplate] | None = None,
        store: TemplateStore | None = None,
        bus: EventBus | None = None,
        metadata: MetadataService | None = None,
        startup_messages: list[str] | None = None,
    ) -> None:
        super().__init__()
        self.bus = bus or EventBus()
        self.metadata = metadata or MetadataService()
        self.store = store
        self.templates = MergeTemplateContainer(self.bus, templates or [])
        self.list_view: MergeTemplatesListView | None = None
        self._startup_messages = startup_messages or []

        if self.store is not None:
            for topic in COLLECTION_TOPICS:
                self.bus.subscribe(topic, self._save_templates)

    def compose(self) -> ComposeResult:
        yield Horizontal(
            Label("mailman - merge templates", id=ids.HEADER_TITLE),
            id=ids.HEADER_CONTAINER,
        )
        with Container(id=ids.MAIN_CONTENT):
            yield SettingsView(self.bus, self._on_template_saved)
        yield Static("", id=ids.STATUS_BAR)

    async def on_mount(self) -> None:
        main = self.query_one(css(ids.MAIN_CONTENT), Container)
        view = MergeTemplatesListView(main, self.metadata, self.bus)
        await view.mounted

        view.set_email_handler(self.action_new_template)
        view.set_document_handler(self.action_new_template)
        view.set_edit_handler(self._open_wizard)
        view.set_delete_handler(self._delete_template)
        view.set_run_handler(self._run_template)
        view.set_repeat_handlers(self._repeat_template, self._unrepeat_template)
        view.set_preview_handler(self._preview_template)
        view.set_delete_dialog(delete_dialog)
        view.set_run_dialog(run_dialog)
        view.set_repeat_dialog(repeat_dialog)
        view.set_container(self.templates)
        self.list_view = view

        if self._startup_messages:
            self._set_status(self._startup_messages[-1])

    # =========================================================================
    # Status
    # =========================================================================

    def _set_status(self, message: str) -> None:
        """Set status bar message."""
        try:
            status = self.query_one(css(ids.STATUS_BAR), Static)
            status.update(message)
        except NoMatches:
            pass

    @property
    def settings_view(self) -> SettingsView:
        return self.query_one(SettingsView)

    # =========================================================================
    # Wizard
    # =========================================================================

    def action_new_template(self) -> None:
        """Open the wizard on a blank template."""
        if self.settings_view.is_showing:
            return
        self._open_wizard(MergeTemplate.blank())

    def _open_wizard(self, template: MergeTemplate) -> None:
        if self.list_view is not None:
            self.list_view.hide()
        self.settings_view.edit(template)

    def _on_template_saved(self, template: MergeTemplate, run_now: bool) -> None:
        if self.templates.find(template.id) is not None:
            self.templates.update(template)
            self._set_status(f"Updated: {template.title}")
        else:
            self.templates.add(template)
            self._set_status(f"Created: {template.title}")
        if run_now:
            self._run_template(template)

    # =========================================================================
    # List item handlers
    # =========================================================================

    def _delete_template(self, template: MergeTemplate) -> None:
        self.templates.remove(template.id)
        self._set_status(f"Deleted: {template.title}")

    def _run_template(self, template: MergeTemplate) -> None:
        # Delivery happens elsewhere; the list only records that a run was requested
        self.metadata.record_run(template.id)
        log.info(f"Run requested for template {template.id}")
        self.bus.publish(Topic.RULES_UPDATE)
        self._set_status(f"Running: {template.title}")

    def _repeat_template(self, template: MergeTemplate) -> None:
        self.templates.set_repeating(template.id, True)
        self._set_status(f"Repeating: {template.title}")

    def _unrepeat_template(self, template: MergeTemplate) -> None:
        self.templates.set_repeating(template.id, False)
        self._set_status(f"Stopped repeating: {template.title}")

    def _preview_template(self, template: MergeTemplate) -> None:
        self.push_screen(PreviewModal(template))

    # =========================================================================
    # Persistence
    # =========================================================================

    def _save_templates(self) -> None:
        try:
            self.store.save(self.templates)
        except OSError as e:
            log.error(f"Failed to save templates: {e}")
            self._set_status(f"Could not save templates: {e}")
