"""Runtime configuration for mailman."""

import os
from dataclasses import dataclass
from pathlib import Path

_XDG_CONFIG = Path(os.environ.get("XDG_CONFIG_HOME", str(Path.home() / ".config")))
_XDG_STATE = Path(os.environ.get("XDG_STATE_HOME", str(Path.home() / ".local" / "state")))

MAILMAN_CONFIG_DIR = _XDG_CONFIG / "mailman"
MAILMAN_STATE_DIR = _XDG_STATE / "mailman"
DEFAULT_TEMPLATES_PATH = MAILMAN_CONFIG_DIR / "templates.json"
DEFAULT_LOG_PATH = MAILMAN_STATE_DIR / "mailman.log"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass
class AppConfig:
    """Where templates live and how much to log."""

    templates_path: Path = DEFAULT_TEMPLATES_PATH
    log_path: Path = DEFAULT_LOG_PATH
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Build a config from MAILMAN_* environment variables, falling back to defaults."""
        templates = os.environ.get("MAILMAN_TEMPLATES")
        level = os.environ.get("MAILMAN_LOG_LEVEL", "INFO").upper()
        if level not in LOG_LEVELS:
            level = "INFO"
        return cls(
            templates_path=Path(templates).expanduser() if templates else DEFAULT_TEMPLATES_PATH,
            log_level=level,
        )
