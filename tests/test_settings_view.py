"""Tests for SettingsView bus subscriptions."""

import pytest

from events import Topic
from fakes import HostApp
from ui.views import SettingsView


@pytest.mark.asyncio
async def test_list_shown_hides_settings(bus, sample_template):
    app = HostApp()
    async with app.run_test() as pilot:
        view = SettingsView(bus, lambda template, run_now: None)
        await app.host.mount(view)
        view.edit(sample_template)
        await pilot.pause()
        assert view.is_showing

        bus.publish(Topic.RULES_LIST_VIEW_SHOW)

        assert not view.is_showing


@pytest.mark.asyncio
async def test_unmount_unsubscribes(bus, monkeypatch):
    calls = []
    monkeypatch.setattr(SettingsView, "_on_list_shown", lambda self: calls.append(self))
    app = HostApp()
    async with app.run_test() as pilot:
        view = SettingsView(bus, lambda template, run_now: None)
        await app.host.mount(view)
        bus.publish(Topic.RULES_LIST_VIEW_SHOW)
        assert calls == [view]

        await view.remove()
        await pilot.pause()
        bus.publish(Topic.RULES_LIST_VIEW_SHOW)

        assert calls == [view]


@pytest.mark.asyncio
async def test_hide_publishes(bus, sample_template):
    app = HostApp()
    async with app.run_test() as pilot:
        view = SettingsView(bus, lambda template, run_now: None)
        await app.host.mount(view)
        view.edit(sample_template)
        await pilot.pause()
        seen = []
        bus.subscribe(Topic.SETTINGS_VIEW_HIDE, lambda: seen.append(True))

        view.hide()

        assert seen == [True]
        assert not view.is_showing
