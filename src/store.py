"""Template persistence for mailman."""

from __future__ import annotations

import json
import logging
import uuid
from pathlib import Path
from typing import Any, Iterable

from constants import KNOWN_TEMPLATE_TYPES
from errors import TemplateStoreError
from model import MergeTemplate

log = logging.getLogger(__name__)


def validate_template_config(config: Any, index: int) -> list[str]:
    """Validate one stored template config and return a list of warnings.

    Missing ids are filled in. Raises TemplateStoreError for entries that
    can't be turned into a template at all.
    """
    warnings = []
    prefix = f"Template {index}"

    if not isinstance(config, dict):
        raise TemplateStoreError(f"{prefix}: expected an object, got {type(config).__name__}")

    merge_data = config.get("mergeData")
    if not isinstance(merge_data, dict):
        raise TemplateStoreError(f"{prefix}: missing mergeData")

    if not config.get("id"):
        config["id"] = uuid.uuid4().hex
        warnings.append(f"{prefix}: missing id, generated {config['id']}")

    template_type = merge_data.get("type")
    if template_type not in KNOWN_TEMPLATE_TYPES:
        warnings.append(f"{prefix}: unknown type '{template_type}'")

    if not isinstance(merge_data.get("data", {}), dict):
        raise TemplateStoreError(f"{prefix}: mergeData.data must be an object")

    return warnings


class TemplateStore:
    """Saves and loads merge templates as a JSON list."""

    def __init__(self, path: Path):
        self.path = path

    def load(self) -> tuple[list[MergeTemplate], list[str]]:
        """Load all templates.

        Returns:
            Tuple of (templates, warnings). A missing file is an empty store.

        Raises:
            TemplateStoreError: If the file is unreadable or malformed.
        """
        if not self.path.exists():
            log.info(f"No template store at {self.path}")
            return [], []

        try:
            data = json.loads(self.path.read_text())
        except json.JSONDecodeError as e:
            raise TemplateStoreError(f"{self.path}: invalid JSON ({e})") from e

        if not isinstance(data, list):
            raise TemplateStoreError(f"{self.path}: expected a list of templates")

        templates = []
        warnings = []
        for i, config in enumerate(data):
            warnings.extend(validate_template_config(config, i))
            templates.append(MergeTemplate(config))

        log.info(f"Loaded {len(templates)} templates from {self.path}")
        for warning in warnings:
            log.warning(warning)
        return templates, warnings

    def save(self, templates: Iterable[MergeTemplate]) -> None:
        data = [template.to_config() for template in templates]
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data, indent=2))
        log.debug(f"Saved {len(data)} templates to {self.path}")
