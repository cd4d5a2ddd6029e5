"""Tests for MergeTemplateListItem button handling and dialogs."""

import pytest

from textual.widgets import Button, Static

from errors import ContractError
from fakes import HostApp, make_template
from ui.modals import ConfirmDialog, PreviewModal, delete_dialog, format_preview, repeat_dialog, run_dialog
from ui.widgets import MergeTemplateListItem
import ui.ids as ids
from ui.ids import css


def recorder():
    calls = []

    def handler(template):
        calls.append(template)

    return handler, calls


async def mount_item(app, pilot, template, metadata):
    item = MergeTemplateListItem(app.host, template, metadata)
    await pilot.pause()
    return item


async def press(pilot, item, selector):
    item.query_one(selector, Button).press()
    await pilot.pause()


class TestContract:
    def test_missing_container(self, sample_template, metadata):
        with pytest.raises(ContractError):
            MergeTemplateListItem(None, sample_template, metadata)

    def test_missing_template(self, metadata):
        with pytest.raises(ContractError):
            MergeTemplateListItem(object(), None, metadata)

    def test_missing_metadata_service(self, sample_template):
        with pytest.raises(ContractError):
            MergeTemplateListItem(object(), sample_template, None)


class TestRendering:
    @pytest.mark.asyncio
    async def test_mounts_itself(self, sample_template, metadata):
        app = HostApp()
        async with app.run_test() as pilot:
            item = await mount_item(app, pilot, sample_template, metadata)
            assert item.parent is app.host

    @pytest.mark.asyncio
    async def test_shows_title_and_metadata(self, sample_template, metadata):
        app = HostApp()
        async with app.run_test() as pilot:
            item = await mount_item(app, pilot, sample_template, metadata)
            title = item.query_one(".template-title", Static)
            meta = item.query_one(".template-meta", Static)
            assert str(title.render()) == "Campaign A"
            assert str(meta.render()) == metadata.describe(sample_template)

    @pytest.mark.asyncio
    async def test_repeat_label(self, metadata):
        app = HostApp()
        async with app.run_test() as pilot:
            item = await mount_item(app, pilot, make_template("Weekly").with_repeating(True), metadata)
            assert str(item.query_one(".repeat-btn", Button).label) == "Repeat: on"


class TestHandlers:
    """Buttons call the matching handler with the item's template."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("selector,setter", [
        (".edit-btn", "set_edit_handler"),
        (".preview-btn", "set_preview_handler"),
        (".run-btn", "set_run_handler"),
        (".delete-btn", "set_delete_handler"),
    ])
    async def test_button_calls_handler(self, sample_template, metadata, selector, setter):
        app = HostApp()
        async with app.run_test() as pilot:
            item = await mount_item(app, pilot, sample_template, metadata)
            handler, calls = recorder()
            getattr(item, setter)(handler)

            await press(pilot, item, selector)

            assert calls == [sample_template]

    @pytest.mark.asyncio
    async def test_repeat_button_calls_on_handler(self, sample_template, metadata):
        app = HostApp()
        async with app.run_test() as pilot:
            item = await mount_item(app, pilot, sample_template, metadata)
            on_handler, on_calls = recorder()
            off_handler, off_calls = recorder()
            item.set_repeat_handlers(on_handler, off_handler)

            await press(pilot, item, ".repeat-btn")

            assert on_calls == [sample_template]
            assert off_calls == []

    @pytest.mark.asyncio
    async def test_repeat_button_calls_off_handler_when_repeating(self, metadata):
        template = make_template("Weekly").with_repeating(True)
        app = HostApp()
        async with app.run_test() as pilot:
            item = await mount_item(app, pilot, template, metadata)
            on_handler, on_calls = recorder()
            off_handler, off_calls = recorder()
            item.set_repeat_handlers(on_handler, off_handler)

            await press(pilot, item, ".repeat-btn")

            assert on_calls == []
            assert off_calls == [template]

    @pytest.mark.asyncio
    async def test_missing_handler_is_ignored(self, sample_template, metadata):
        app = HostApp()
        async with app.run_test() as pilot:
            item = await mount_item(app, pilot, sample_template, metadata)
            await press(pilot, item, ".edit-btn")
            await press(pilot, item, ".delete-btn")


class TestDialogs:
    """Run, repeat and delete ask first when a dialog is set."""

    @pytest.mark.asyncio
    async def test_confirm_calls_handler(self, sample_template, metadata):
        app = HostApp()
        async with app.run_test() as pilot:
            item = await mount_item(app, pilot, sample_template, metadata)
            handler, calls = recorder()
            item.set_delete_handler(handler)
            item.set_delete_dialog(delete_dialog)

            await press(pilot, item, ".delete-btn")
            assert isinstance(app.screen, ConfirmDialog)
            assert calls == []

            app.screen.query_one(css(ids.CONFIRM_BTN), Button).press()
            await pilot.pause()

            assert calls == [sample_template]
            assert not isinstance(app.screen, ConfirmDialog)

    @pytest.mark.asyncio
    async def test_cancel_skips_handler(self, sample_template, metadata):
        app = HostApp()
        async with app.run_test() as pilot:
            item = await mount_item(app, pilot, sample_template, metadata)
            handler, calls = recorder()
            item.set_run_handler(handler)
            item.set_run_dialog(run_dialog)

            await press(pilot, item, ".run-btn")
            app.screen.query_one(css(ids.DISMISS_BTN), Button).press()
            await pilot.pause()

            assert calls == []

    @pytest.mark.asyncio
    async def test_escape_cancels(self, sample_template, metadata):
        app = HostApp()
        async with app.run_test() as pilot:
            item = await mount_item(app, pilot, sample_template, metadata)
            handler, calls = recorder()
            item.set_repeat_handlers(handler, None)
            item.set_repeat_dialog(repeat_dialog)

            await press(pilot, item, ".repeat-btn")
            assert isinstance(app.screen, ConfirmDialog)
            await pilot.press("escape")
            await pilot.pause()

            assert calls == []
            assert not isinstance(app.screen, ConfirmDialog)

    @pytest.mark.asyncio
    async def test_edit_never_asks(self, sample_template, metadata):
        """Edit and preview have no confirmation step."""
        app = HostApp()
        async with app.run_test() as pilot:
            item = await mount_item(app, pilot, sample_template, metadata)
            handler, calls = recorder()
            item.set_edit_handler(handler)
            item.set_delete_dialog(delete_dialog)

            await press(pilot, item, ".edit-btn")

            assert calls == [sample_template]
            assert not isinstance(app.screen, ConfirmDialog)


class TestCleanup:
    @pytest.mark.asyncio
    async def test_cleanup_removes_and_detaches(self, sample_template, metadata):
        app = HostApp()
        async with app.run_test() as pilot:
            item = await mount_item(app, pilot, sample_template, metadata)
            handler, calls = recorder()
            item.set_edit_handler(handler)

            item.cleanup()
            await pilot.pause()

            assert len(app.host.query(MergeTemplateListItem)) == 0
            assert item._edit_handler is None


class TestDialogText:
    def test_repeat_dialog_wording(self, sample_template):
        assert "every time" in repeat_dialog(sample_template)._message
        assert "Stop" in repeat_dialog(sample_template.with_repeating(True))._message

    def test_format_preview(self, conditional_template):
        text = format_preview(conditional_template)
        assert "Sheet:       Contacts" in text
        assert "Document:    doc-123" in text
        assert "Condition:   <<Ready>>" in text

    def test_format_preview_without_condition(self, sample_template):
        assert "Condition:   always send" in format_preview(sample_template)
        assert "BCC:         -" in format_preview(sample_template)

    @pytest.mark.asyncio
    async def test_preview_modal_closes(self, sample_template):
        app = HostApp()
        async with app.run_test() as pilot:
            app.push_screen(PreviewModal(sample_template))
            await pilot.pause()
            assert isinstance(app.screen, PreviewModal)

            await pilot.press("escape")
            await pilot.pause()

            assert not isinstance(app.screen, PreviewModal)
