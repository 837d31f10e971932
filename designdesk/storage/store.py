"""
DataStore - Read/write gateway for the persisted AppData document.

Every operation reads the whole document, changes it in memory, and writes the
whole document back (bumping ``lastUpdated``). There is no optimistic locking:
two sessions saving at once silently overwrite each other, last write wins.
"""

import json
import logging
from datetime import datetime
from typing import Any, Callable, Mapping, Optional, TypeVar

from pydantic import ValidationError

from designdesk.config import DEFAULT_STORAGE_KEY
from designdesk.errors import ImportRejected, StorageError
from designdesk.schemas import (
    COLLECTION_KEYS,
    AppData,
    BackupEntry,
    Designer,
    LearningModule,
    Lesson,
    Project,
    Record,
    Settings,
    Skill,
    Test,
)
from designdesk.utils import new_id, utcnow

from .backends import KeyValueBackend, SqliteBackend


logger = logging.getLogger(__name__)

MAX_BACKUPS = 10

# Keys older exports may carry next to the document; dropped on import.
EXPORT_METADATA_KEYS = ("exportedAt", "exportVersion")

# Collections captured in a backup snapshot: document key -> attribute
BACKUP_COLLECTIONS = {
    "designers": "designers",
    "learningModules": "learning_modules",
    "skills": "skills",
    "projects": "projects",
}

_SEED_KEY_ALIASES = {
    "learning_modules": "learningModules",
    "last_updated": "lastUpdated",
}

R = TypeVar("R", bound=Record)


def _upsert(records: list[R], record: R) -> list[R]:
    """Replace the record with the same id, or append it."""
    result = list(records)
    for index, existing in enumerate(result):
        if existing.id == record.id:
            result[index] = record
            return result
    result.append(record)
    return result


def _find(records: list[R], record_id: str) -> Optional[R]:
    for record in records:
        if record.id == record_id:
            return record
    return None


def _coerce(model: type[R], value: Any) -> R:
    if isinstance(value, model):
        return value
    return model.model_validate(value)


class DataStore:
    """
    Typed access to the AppData document stored under a single key.

    Reads return ``None`` / ``[]`` before the first write. Backend failures
    surface as StorageError; only ``import_data`` and ``restore_from_backup``
    report failure as a boolean.
    """

    def __init__(
        self,
        backend: Optional[KeyValueBackend] = None,
        key: str = DEFAULT_STORAGE_KEY,
        clock: Callable[[], datetime] = utcnow,
    ):
        """
        Initialize the store.

        Args:
            backend: Key-value backend (default: SqliteBackend at ~/.designdesk)
            key: Key holding the document
            clock: Returns the current time; used for lastUpdated and backups
        """
        self.backend = backend if backend is not None else SqliteBackend()
        self.key = key
        self._clock = clock

    # -------------------------------------------------------------------------
    # Document I/O
    # -------------------------------------------------------------------------

    def _decode(self, raw: str) -> AppData:
        try:
            return AppData.model_validate_json(raw)
        except ValidationError as e:
            raise StorageError(f"Stored document under '{self.key}' is unreadable: {e}") from e

    def _read(self) -> Optional[AppData]:
        raw = self.backend.get(self.key)
        if raw is None:
            return None
        return self._decode(raw)

    def _write(self, document: AppData, touch: bool = True) -> AppData:
        if touch:
            document = document.model_copy(update={"last_updated": self._clock()})
        self.backend.set(self.key, document.to_json())
        return document

    def _empty_document(self) -> AppData:
        return AppData(last_updated=self._clock())

    def _update(self, change: Callable[[AppData], dict], backup: bool = False) -> AppData:
        """Read-modify-write. A missing document starts out empty at version 1."""
        document = self._read()
        if document is None:
            document = self._empty_document()
        elif backup:
            document = self._with_auto_backup(document)
        return self._write(document.model_copy(update=change(document)))

    def get_all_data(self) -> Optional[AppData]:
        """Return the whole document, or None if nothing was ever written."""
        return self._read()

    def initialize_with_mock_data(self, seed: Mapping[str, Any]):
        """
        Write a fresh document (version 1) from seed collections.

        Missing collections become empty lists. Does nothing if a document
        already exists; callers normally check ``get_all_data()`` first.
        """
        if self._read() is not None:
            logger.info(f"Document '{self.key}' already exists, skipping seed")
            return

        payload: dict[str, Any] = {name: [] for name in COLLECTION_KEYS}
        for name, value in seed.items():
            payload[_SEED_KEY_ALIASES.get(name, name)] = value
        payload["version"] = 1
        payload["lastUpdated"] = self._clock()

        self._write(AppData.model_validate(payload), touch=False)
        logger.info(
            f"Seeded '{self.key}': "
            + ", ".join(f"{len(payload[name])} {name}" for name in COLLECTION_KEYS)
        )

    # -------------------------------------------------------------------------
    # Collection accessors
    # -------------------------------------------------------------------------

    def get_designers(self) -> list[Designer]:
        document = self._read()
        return document.designers if document else []

    def get_skills(self) -> list[Skill]:
        document = self._read()
        return document.skills if document else []

    def get_learning_modules(self) -> list[LearningModule]:
        document = self._read()
        return document.learning_modules if document else []

    def get_projects(self) -> list[Project]:
        document = self._read()
        return document.projects if document else []

    def get_tests(self) -> list[Test]:
        document = self._read()
        return document.tests if document else []

    def get_lessons(self) -> list[Lesson]:
        document = self._read()
        return document.lessons if document else []

    def get_designer(self, designer_id: str) -> Optional[Designer]:
        return _find(self.get_designers(), designer_id)

    def get_skill(self, skill_id: str) -> Optional[Skill]:
        return _find(self.get_skills(), skill_id)

    def get_learning_module(self, module_id: str) -> Optional[LearningModule]:
        return _find(self.get_learning_modules(), module_id)

    def get_project(self, project_id: str) -> Optional[Project]:
        return _find(self.get_projects(), project_id)

    def get_lesson(self, lesson_id: str) -> Optional[Lesson]:
        return _find(self.get_lessons(), lesson_id)

    def get_test(self, test_id: str) -> Optional[Test]:
        return _find(self.get_tests(), test_id)

    # -------------------------------------------------------------------------
    # Upserts
    # -------------------------------------------------------------------------

    def save_designer(self, designer: Designer | Mapping[str, Any]):
        """Insert or replace a designer by id."""
        designer = _coerce(Designer, designer)
        self._update(lambda doc: {"designers": _upsert(doc.designers, designer)}, backup=True)
        logger.info(f"Saved designer {designer.id} (v{designer.version})")

    def save_skill(self, skill: Skill | Mapping[str, Any]):
        skill = _coerce(Skill, skill)
        self._update(lambda doc: {"skills": _upsert(doc.skills, skill)})
        logger.info(f"Saved skill {skill.id}")

    def save_learning_module(self, module: LearningModule | Mapping[str, Any]):
        module = _coerce(LearningModule, module)
        self._update(
            lambda doc: {"learning_modules": _upsert(doc.learning_modules, module)},
            backup=True,
        )
        logger.info(f"Saved learning module {module.id}")

    def save_project(self, project: Project | Mapping[str, Any]):
        project = _coerce(Project, project)
        self._update(lambda doc: {"projects": _upsert(doc.projects, project)})
        logger.info(f"Saved project {project.id}")

    def save_lesson(self, lesson: Lesson | Mapping[str, Any], module_id: str):
        """
        Upsert a lesson into the flat ``lessons`` collection (tagged with
        ``moduleId``) and into the owning module's embedded lesson list.
        """
        lesson = _coerce(Lesson, lesson).model_copy(update={"module_id": module_id})

        def change(doc: AppData) -> dict:
            modules = [
                m.model_copy(update={"lessons": _upsert(m.lessons, lesson)}) if m.id == module_id else m
                for m in doc.learning_modules
            ]
            return {"lessons": _upsert(doc.lessons, lesson), "learning_modules": modules}

        self._update(change, backup=True)
        logger.info(f"Saved lesson {lesson.id} in module {module_id}")

    def save_test(self, test: Test | Mapping[str, Any], module_id: str):
        """Upsert a test into the flat ``tests`` collection and its module."""
        test = _coerce(Test, test).model_copy(update={"module_id": module_id})

        def change(doc: AppData) -> dict:
            modules = [
                m.model_copy(update={"tests": _upsert(m.tests, test)}) if m.id == module_id else m
                for m in doc.learning_modules
            ]
            return {"tests": _upsert(doc.tests, test), "learning_modules": modules}

        self._update(change, backup=True)
        logger.info(f"Saved test {test.id} in module {module_id}")

    # -------------------------------------------------------------------------
    # Deletes
    # -------------------------------------------------------------------------

    def _delete(self, attr: str, record_id: str, backup: bool = False) -> bool:
        document = self._read()
        if document is None or _find(getattr(document, attr), record_id) is None:
            return False
        self._update(
            lambda doc: {attr: [r for r in getattr(doc, attr) if r.id != record_id]},
            backup=backup,
        )
        logger.info(f"Deleted {attr} record {record_id}")
        return True

    def delete_designer(self, designer_id: str) -> bool:
        return self._delete("designers", designer_id, backup=True)

    def delete_skill(self, skill_id: str) -> bool:
        return self._delete("skills", skill_id)

    def delete_project(self, project_id: str) -> bool:
        return self._delete("projects", project_id)

    def delete_learning_module(self, module_id: str) -> bool:
        """Delete a module together with the flat lessons/tests it owns."""
        document = self._read()
        if document is None or _find(document.learning_modules, module_id) is None:
            return False
        self._update(lambda doc: {
            "learning_modules": [m for m in doc.learning_modules if m.id != module_id],
            "lessons": [lesson for lesson in doc.lessons if lesson.module_id != module_id],
            "tests": [t for t in doc.tests if t.module_id != module_id],
        }, backup=True)
        logger.info(f"Deleted learning module {module_id}")
        return True

    def delete_lesson(self, lesson_id: str) -> bool:
        """Remove a lesson from the flat collection and from every module."""
        document = self._read()
        if document is None:
            return False
        in_modules = any(_find(m.lessons, lesson_id) is not None for m in document.learning_modules)
        if _find(document.lessons, lesson_id) is None and not in_modules:
            return False
        self._update(lambda doc: {
            "lessons": [lesson for lesson in doc.lessons if lesson.id != lesson_id],
            "learning_modules": [
                m.model_copy(update={"lessons": [lesson for lesson in m.lessons if lesson.id != lesson_id]})
                for m in doc.learning_modules
            ],
        }, backup=True)
        return True

    def delete_test(self, test_id: str) -> bool:
        """Remove a test from the flat collection and from every module."""
        document = self._read()
        if document is None:
            return False
        in_modules = any(_find(m.tests, test_id) is not None for m in document.learning_modules)
        if _find(document.tests, test_id) is None and not in_modules:
            return False
        self._update(lambda doc: {
            "tests": [t for t in doc.tests if t.id != test_id],
            "learning_modules": [
                m.model_copy(update={"tests": [t for t in m.tests if t.id != test_id]})
                for m in doc.learning_modules
            ],
        }, backup=True)
        return True

    # -------------------------------------------------------------------------
    # Settings
    # -------------------------------------------------------------------------

    def get_settings(self) -> Settings:
        document = self._read()
        if document is None:
            return Settings()
        return Settings.model_validate(document.settings)

    def save_settings(self, settings: Settings):
        self._update(lambda doc: {"settings": settings.to_json_dict()})
        logger.info("Saved settings")

    # -------------------------------------------------------------------------
    # Export / Import / Clear
    # -------------------------------------------------------------------------

    def export_data(self) -> str:
        """Serialize the whole document to JSON text ("{}" before first write)."""
        document = self._read()
        if document is None:
            return "{}"
        return document.to_json(indent=2)

    def _parse_import(self, text: str | bytes) -> AppData:
        try:
            payload = json.loads(text)
        except (TypeError, ValueError, RecursionError) as e:
            raise ImportRejected(f"not valid JSON: {e}") from e

        if not isinstance(payload, dict):
            raise ImportRejected("top-level value must be a JSON object")

        for key in EXPORT_METADATA_KEYS:
            payload.pop(key, None)

        missing = [key for key in COLLECTION_KEYS if not isinstance(payload.get(key), list)]
        if missing:
            raise ImportRejected(f"missing or non-list collections: {', '.join(missing)}")

        version = payload.get("version")
        if not isinstance(version, int) or isinstance(version, bool):
            raise ImportRejected(f"version must be an integer, got {version!r}")

        if payload.get("lastUpdated") is None:
            payload["lastUpdated"] = self._clock().isoformat()

        try:
            return AppData.model_validate(payload)
        except ValidationError as e:
            raise ImportRejected(f"document shape mismatch ({e.error_count()} errors): {e}") from e

    def import_data(self, text: str | bytes) -> bool:
        """
        Replace the whole document with an exported one.

        Returns:
            True if imported, False if the text was rejected (existing data
            is left untouched)
        """
        try:
            document = self._parse_import(text)
        except ImportRejected as e:
            logger.warning(f"Import rejected: {e}")
            return False

        self._write(document, touch=False)
        logger.info(f"Imported document (version {document.version}, {len(document.designers)} designers)")
        return True

    def clear_all_data(self):
        """Delete the document; get_all_data() returns None afterwards."""
        self.backend.delete(self.key)
        logger.info(f"Cleared document '{self.key}'")

    # -------------------------------------------------------------------------
    # Backups
    # -------------------------------------------------------------------------

    def _snapshot(self, document: AppData) -> dict[str, Any]:
        return {
            key: [record.to_json_dict() for record in getattr(document, attr)]
            for key, attr in BACKUP_COLLECTIONS.items()
        }

    def _push_backup(self, document: AppData, description: str, automatic: bool) -> tuple[AppData, BackupEntry]:
        entry = BackupEntry(
            id=new_id(),
            timestamp=self._clock(),
            description=description,
            data=self._snapshot(document),
            automatic=automatic,
        )
        backups = [entry, *document.backups][:MAX_BACKUPS]
        return document.model_copy(update={"backups": backups}), entry

    def _with_auto_backup(self, document: AppData) -> AppData:
        document, _ = self._push_backup(document, "Automatic backup", automatic=True)
        return document

    def create_manual_backup(self, description: str = "") -> Optional[str]:
        """Snapshot designers, modules, skills and projects. Returns the backup id."""
        document = self._read()
        if document is None:
            return None
        document, entry = self._push_backup(document, description or "Manual backup", automatic=False)
        self._write(document)
        logger.info(f"Created backup {entry.id}")
        return entry.id

    def get_backups(self) -> list[BackupEntry]:
        document = self._read()
        return document.backups if document else []

    def restore_from_backup(self, backup_id: str) -> bool:
        """Overlay a backup's collections onto the current document."""
        document = self._read()
        if document is None:
            return False
        entry = _find(document.backups, backup_id)
        if entry is None:
            logger.warning(f"Backup not found: {backup_id}")
            return False

        payload = document.model_dump(by_alias=True, mode="json")
        payload.update(entry.data)
        try:
            restored = AppData.model_validate(payload)
        except ValidationError as e:
            logger.warning(f"Backup {backup_id} cannot be restored: {e}")
            return False

        self._write(restored)
        logger.info(f"Restored backup {backup_id}")
        return True

    # -------------------------------------------------------------------------
    # Statistics
    # -------------------------------------------------------------------------

    def get_usage_stats(self) -> Optional[dict]:
        """Record counts and storage footprint, or None before first write."""
        raw = self.backend.get(self.key)
        if raw is None:
            return None
        document = self._decode(raw)
        return {
            "designers": len(document.designers),
            "learning_modules": len(document.learning_modules),
            "skills": len(document.skills),
            "projects": len(document.projects),
            "tests": len(document.tests),
            "lessons": len(document.lessons),
            "backups": len(document.backups),
            "last_updated": document.last_updated,
            "version": document.version,
            "size_bytes": len(raw.encode("utf-8")),
        }
