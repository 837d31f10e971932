"""
DesignDesk Storage - Local persistence for the AppData document.

This module provides:
- DataStore: whole-document repository (upserts, export/import, backups)
- SqliteBackend / MemoryBackend: single-key storage backends
"""

from .backends import (
    KeyValueBackend,
    MemoryBackend,
    SqliteBackend,
    DEFAULT_STORAGE_DB,
)

from .store import (
    DataStore,
    MAX_BACKUPS,
    EXPORT_METADATA_KEYS,
)

__all__ = [
    # Backends
    "KeyValueBackend",
    "MemoryBackend",
    "SqliteBackend",
    "DEFAULT_STORAGE_DB",
    # Store
    "DataStore",
    "MAX_BACKUPS",
    "EXPORT_METADATA_KEYS",
]
