"""Event bus shared by the views and the template collection.

Topics carry no payload: subscribers are told that something changed
and go back to the source of truth themselves.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from enum import Enum
from typing import Callable

log = logging.getLogger(__name__)


class Topic(str, Enum):
    """Notification names published on the bus."""

    RULES_DELETE = "Rules.delete"
    RULES_ADD = "Rules.add"
    RULES_UPDATE = "Rules.update"
    RULES_REPEATER = "Rules.repeater"
    SETTINGS_VIEW_HIDE = "Mailman.SettingsView.hide"
    RULES_LIST_VIEW_SHOW = "Mailman.RulesListView.show"


# Topics that mean "the template collection changed"
COLLECTION_TOPICS = (
    Topic.RULES_DELETE,
    Topic.RULES_ADD,
    Topic.RULES_UPDATE,
    Topic.RULES_REPEATER,
)


class EventBus:
    """Synchronous publish/subscribe feed.

    Example:
        bus = EventBus()
        bus.subscribe(Topic.RULES_ADD, view.rebuild)
        container.add(template)  # publishes Topic.RULES_ADD
    """

    def __init__(self) -> None:
        self._subscribers: dict[Topic, list[Callable[[], None]]] = defaultdict(list)

    def subscribe(self, topic: Topic, callback: Callable[[], None]) -> None:
        """Register callback to be called every time topic is published."""
        self._subscribers[topic].append(callback)

    def unsubscribe(self, topic: Topic, callback: Callable[[], None]) -> None:
        """Remove a previously registered callback. Unknown callbacks are ignored."""
        callbacks = self._subscribers.get(topic, [])
        if callback in callbacks:
            callbacks.remove(callback)

    def publish(self, topic: Topic) -> None:
        """Deliver topic to every subscriber, in subscription order.

        A failing subscriber is logged and does not stop delivery to the rest.
        """
        log.debug(f"publish {topic.value}")
        for callback in list(self._subscribers.get(topic, [])):
            try:
                callback()
            except Exception:
                log.exception(f"Error in handler for '{topic.value}' (callback={callback!r})")
