"""Lookup service for per-template display metadata."""

from __future__ import annotations

from datetime import datetime

from model import MergeTemplate


class MetadataService:
    """Tracks run history and renders the one-line summary shown per template."""

    def __init__(self) -> None:
        self._last_runs: dict[str, datetime] = {}

    def record_run(self, template_id: str, when: datetime | None = None) -> None:
        self._last_runs[template_id] = when or datetime.now()

    def last_run(self, template_id: str) -> datetime | None:
        return self._last_runs.get(template_id)

    def describe(self, template: MergeTemplate) -> str:
        """Summarize where a template reads from and when it last ran."""
        merge_data = template.merge_data
        sheet = merge_data.get("sheet") or "no sheet"
        row = merge_data.get("headerRow")
        parts = [f"Sheet: {sheet}"]
        if row not in (None, ""):
            parts.append(f"header row {row}")

        last = self.last_run(template.id) if template.id else None
        parts.append(f"last run {last:%Y-%m-%d %H:%M}" if last else "never run")
        if template.is_repeating:
            parts.append("repeating")
        return " · ".join(parts)
