"""DesignDesk utilities."""

from datetime import datetime, timezone
from uuid import uuid4

from .seed_loader import load_seed, get_available_seeds


def utcnow() -> datetime:
    """Timezone-aware current time; all stored timestamps are UTC."""
    return datetime.now(timezone.utc)


def new_id() -> str:
    return uuid4().hex


__all__ = ["load_seed", "get_available_seeds", "utcnow", "new_id"]
