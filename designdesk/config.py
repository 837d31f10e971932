"""
Runtime configuration for DesignDesk.

Values come from the environment, optionally pre-loaded from a ``.env`` file
in the project root.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv


PROJECT_ROOT = Path(__file__).parent.parent

DEFAULT_DATA_DIR = Path.home() / ".designdesk"
DEFAULT_STORAGE_KEY = "designer-management-platform"
DEFAULT_LANGUAGE = "uk"
DEFAULT_AUTOSAVE_DELAY = 2.0
DEFAULT_NOTIFICATION_CAP = 50
PRODUCT_SLUG = "designdesk"

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


@dataclass(frozen=True)
class Config:
    data_dir: Path = DEFAULT_DATA_DIR
    storage_key: str = DEFAULT_STORAGE_KEY
    language: str = DEFAULT_LANGUAGE
    autosave_delay: float = DEFAULT_AUTOSAVE_DELAY
    notification_cap: int = DEFAULT_NOTIFICATION_CAP
    log_level: str = "INFO"

    @property
    def storage_path(self) -> Path:
        return self.data_dir / "storage.db"


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None or raw == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}")


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")


def load_config(env_file: Path | None = None) -> Config:
    """
    Build a Config from the environment.

    Args:
        env_file: Optional .env path (default: <project root>/.env). Variables
            already set in the environment take precedence.

    Raises:
        ValueError: If a numeric variable or the language is invalid
    """
    load_dotenv(env_file or PROJECT_ROOT / ".env")

    language = os.environ.get("DESIGNDESK_LANGUAGE", DEFAULT_LANGUAGE)
    if language not in ("uk", "en"):
        raise ValueError(f"DESIGNDESK_LANGUAGE must be 'uk' or 'en', got {language!r}")

    data_dir = os.environ.get("DESIGNDESK_DATA_DIR")

    return Config(
        data_dir=Path(data_dir).expanduser() if data_dir else DEFAULT_DATA_DIR,
        storage_key=os.environ.get("DESIGNDESK_STORAGE_KEY", DEFAULT_STORAGE_KEY),
        language=language,
        autosave_delay=_env_float("DESIGNDESK_AUTOSAVE_DELAY", DEFAULT_AUTOSAVE_DELAY),
        notification_cap=_env_int("DESIGNDESK_NOTIFICATION_CAP", DEFAULT_NOTIFICATION_CAP),
        log_level=os.environ.get("DESIGNDESK_LOG_LEVEL", "INFO").upper(),
    )


def setup_logging(config: Config):
    """Configure root logging once, at the app entry point."""
    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.INFO),
        format=LOG_FORMAT,
    )
