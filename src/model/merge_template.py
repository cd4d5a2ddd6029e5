"""MergeTemplate: the configuration of one mail-merge campaign."""

from __future__ import annotations

import copy
import uuid
from datetime import datetime, timezone
from typing import Any

from constants import DOCUMENT_TYPE


def empty_merge_data(template_type: str = DOCUMENT_TYPE) -> dict[str, Any]:
    """Return a mergeData block with every field present and empty."""
    return {
        "title": "",
        "sheet": "",
        "headerRow": "",
        "conditional": None,
        "type": template_type,
        "data": {
            "to": "",
            "cc": "",
            "bcc": "",
            "subject": "",
            "documentID": "",
        },
    }


class MergeTemplate:
    """Wraps a template configuration dict.

    The config is copied on the way in and on the way out (to_config), so
    callers never share mutable state with a template.

    Shape:
        {
            "id": str,
            "createdAt": ISO timestamp,
            "repeating": bool,
            "mergeData": {
                "title", "sheet", "headerRow", "conditional", "type",
                "data": {"to", "cc", "bcc", "subject", "documentID"},
            },
        }
    """

    def __init__(self, config: dict[str, Any] | None = None) -> None:
        self._config: dict[str, Any] = copy.deepcopy(config) if config else {}
        self._config.setdefault("mergeData", empty_merge_data())

    @classmethod
    def blank(cls, template_type: str = DOCUMENT_TYPE) -> MergeTemplate:
        """Create a new, empty template with a fresh id."""
        return cls({
            "id": uuid.uuid4().hex,
            "createdAt": datetime.now(timezone.utc).isoformat(timespec="seconds"),
            "repeating": False,
            "mergeData": empty_merge_data(template_type),
        })

    def to_config(self) -> dict[str, Any]:
        return copy.deepcopy(self._config)

    @property
    def id(self) -> str | None:
        return self._config.get("id")

    @property
    def merge_data(self) -> dict[str, Any]:
        return self._config["mergeData"]

    @property
    def title(self) -> str:
        return self.merge_data.get("title") or ""

    @property
    def is_repeating(self) -> bool:
        return bool(self._config.get("repeating", False))

    def with_repeating(self, repeating: bool) -> MergeTemplate:
        """Return a copy of this template with the repeating flag set."""
        config = self.to_config()
        config["repeating"] = repeating
        return MergeTemplate(config)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MergeTemplate):
            return NotImplemented
        return self._config == other._config

    def __repr__(self) -> str:
        return f"MergeTemplate(id={self.id!r}, title={self.title!r})"
