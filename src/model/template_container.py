"""MergeTemplateContainer: the ordered collection of saved templates."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator

from events import EventBus, Topic
from model.merge_template import MergeTemplate

log = logging.getLogger(__name__)


class MergeTemplateContainer:
    """Ordered, mutable collection of MergeTemplates.

    Every mutation publishes the matching Rules.* topic after the
    collection has changed, so views can rebuild from it.
    """

    def __init__(self, bus: EventBus, templates: Iterable[MergeTemplate] = ()) -> None:
        self._bus = bus
        self._templates: list[MergeTemplate] = list(templates)

    def length(self) -> int:
        return len(self._templates)

    def get(self, index: int) -> MergeTemplate:
        return self._templates[index]

    def find(self, template_id: str) -> MergeTemplate | None:
        for template in self._templates:
            if template.id == template_id:
                return template
        return None

    def _index_of(self, template_id: str) -> int:
        for i, template in enumerate(self._templates):
            if template.id == template_id:
                return i
        raise KeyError(template_id)

    def add(self, template: MergeTemplate) -> None:
        self._templates.append(template)
        log.info(f"Added template {template.id} ({template.title!r})")
        self._bus.publish(Topic.RULES_ADD)

    def update(self, template: MergeTemplate) -> None:
        """Replace the template with the same id."""
        self._templates[self._index_of(template.id)] = template
        log.info(f"Updated template {template.id}")
        self._bus.publish(Topic.RULES_UPDATE)

    def remove(self, template_id: str) -> MergeTemplate:
        removed = self._templates.pop(self._index_of(template_id))
        log.info(f"Removed template {template_id}")
        self._bus.publish(Topic.RULES_DELETE)
        return removed

    def set_repeating(self, template_id: str, repeating: bool) -> None:
        index = self._index_of(template_id)
        self._templates[index] = self._templates[index].with_repeating(repeating)
        log.info(f"Template {template_id} repeating={repeating}")
        self._bus.publish(Topic.RULES_REPEATER)

    def __len__(self) -> int:
        return len(self._templates)

    def __iter__(self) -> Iterator[MergeTemplate]:
        return iter(list(self._templates))
