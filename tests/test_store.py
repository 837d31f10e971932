"""
DataStore tests for DesignDesk.

Tests the whole-document persistence contract against the in-memory backend.
"""

import json
import pytest
from datetime import datetime, timedelta, timezone

from designdesk.errors import StorageError
from designdesk.schemas import (
    Designer,
    LearningModule,
    Lesson,
    Project,
    Question,
    Settings,
    Skill,
    Test,
)
from designdesk.storage import MAX_BACKUPS, DataStore, MemoryBackend
from designdesk.utils import load_seed


KEY = "designer-management-platform"


class FakeClock:
    """Deterministic clock advancing one minute per call."""

    def __init__(self):
        self.now = datetime(2024, 12, 1, 9, 0, tzinfo=timezone.utc)

    def __call__(self):
        self.now += timedelta(minutes=1)
        return self.now


@pytest.fixture
def backend():
    return MemoryBackend()


@pytest.fixture
def store(backend):
    return DataStore(backend, key=KEY, clock=FakeClock())


@pytest.fixture
def seeded(store):
    store.initialize_with_mock_data(load_seed())
    return store


class TestEmptyStore:
    """Test reads before the first write."""

    def test_get_all_data_is_none(self, store):
        assert store.get_all_data() is None

    def test_collections_are_empty(self, store):
        assert store.get_designers() == []
        assert store.get_skills() == []
        assert store.get_learning_modules() == []
        assert store.get_projects() == []
        assert store.get_tests() == []
        assert store.get_lessons() == []

    def test_single_record_lookup(self, store):
        assert store.get_designer("1") is None

    def test_export_before_first_write(self, store):
        assert store.export_data() == "{}"

    def test_usage_stats_before_first_write(self, store):
        assert store.get_usage_stats() is None

    def test_save_creates_document(self, store):
        store.save_skill(Skill(id="s1", name="Figma"))
        document = store.get_all_data()
        assert document.version == 1
        assert [s.id for s in document.skills] == ["s1"]


class TestInitialize:
    """Test seeding."""

    def test_seed_collections_and_version(self, store):
        store.initialize_with_mock_data({
            "skills": [{"id": "s1", "name": "Figma"}],
            "designers": [{"id": "d1", "name": "Марія"}],
        })
        document = store.get_all_data()
        assert document.version == 1
        assert [s.name for s in document.skills] == ["Figma"]
        assert [d.name for d in document.designers] == ["Марія"]
        assert document.learning_modules == []
        assert document.projects == []
        assert document.tests == []
        assert document.lessons == []

    def test_snake_case_seed_keys(self, store):
        store.initialize_with_mock_data({"learning_modules": [{"id": "lm1", "title": "UX"}]})
        assert [m.id for m in store.get_learning_modules()] == ["lm1"]

    def test_existing_document_is_kept(self, store):
        store.initialize_with_mock_data({"skills": [{"id": "s1", "name": "Figma"}]})
        store.initialize_with_mock_data({"skills": [{"id": "s2", "name": "Sketch"}]})
        assert [s.id for s in store.get_skills()] == ["s1"]

    def test_shipped_seed(self, seeded):
        assert len(seeded.get_designers()) == 4
        assert len(seeded.get_skills()) == 8
        assert len(seeded.get_learning_modules()) == 3
        assert seeded.get_designer("1").skill_rating("4").current_level == 95


class TestUpserts:
    """Test save operations."""

    def test_save_designer_upserts(self, store):
        store.save_designer(Designer(id="d1", name="First", position="UI"))
        store.save_designer(Designer(id="d1", name="Second", position="UX"))
        designers = store.get_designers()
        assert len(designers) == 1
        assert designers[0].name == "Second"
        assert designers[0].position == "UX"

    def test_save_designer_from_mapping(self, store):
        store.save_designer({"id": "d1", "name": "A", "hoursPerWeek": 30})
        assert store.get_designer("d1").hours_per_week == 30

    def test_save_bumps_last_updated(self, seeded):
        before = seeded.get_all_data().last_updated
        seeded.save_skill(Skill(id="s9", name="Motion"))
        assert seeded.get_all_data().last_updated > before

    def test_save_keeps_document_version(self, seeded):
        seeded.save_project(Project(id="p1", name="Portal", jira_key="POR-1"))
        assert seeded.get_all_data().version == 1

    def test_store_does_not_check_entity_version(self, store):
        store.save_designer(Designer(id="d1", name="A", version=5))
        store.save_designer(Designer(id="d1", name="B", version=2))
        assert store.get_designer("d1").version == 2

    def test_save_learning_module(self, store):
        store.save_learning_module(LearningModule(id="lm1", title="UX"))
        store.save_learning_module(LearningModule(id="lm1", title="UX Research"))
        assert [m.title for m in store.get_learning_modules()] == ["UX Research"]

    def test_save_lesson_updates_flat_and_module(self, store):
        store.save_learning_module(LearningModule(id="lm1", title="UX"))
        store.save_lesson(Lesson(id="l1", title="Intro"), "lm1")

        assert store.get_lesson("l1").module_id == "lm1"
        module = store.get_learning_module("lm1")
        assert [lesson.id for lesson in module.lessons] == ["l1"]
        assert module.lessons[0].module_id == "lm1"

    def test_save_lesson_twice_upserts_in_both_places(self, store):
        store.save_learning_module(LearningModule(id="lm1", title="UX"))
        store.save_lesson(Lesson(id="l1", title="Intro"), "lm1")
        store.save_lesson(Lesson(id="l1", title="Introduction"), "lm1")
        assert [lesson.title for lesson in store.get_lessons()] == ["Introduction"]
        assert [lesson.title for lesson in store.get_learning_module("lm1").lessons] == ["Introduction"]

    def test_save_test_updates_flat_and_module(self, store):
        store.save_learning_module(LearningModule(id="lm1", title="UX"))
        test = Test(id="t1", title="Quiz", questions=[Question(id="q1", question="?", options=["a", "b"], correct_answer="a")])
        store.save_test(test, "lm1")
        assert store.get_test("t1").module_id == "lm1"
        assert store.get_learning_module("lm1").tests[0].questions[0].correct_answer == "a"


class TestDeletes:
    """Test delete operations."""

    def test_delete_designer(self, seeded):
        assert seeded.delete_designer("1") is True
        assert seeded.get_designer("1") is None
        assert len(seeded.get_designers()) == 3

    def test_delete_missing_record(self, seeded):
        assert seeded.delete_skill("nope") is False
        assert seeded.delete_project("nope") is False

    def test_delete_on_empty_store(self, store):
        assert store.delete_designer("1") is False
        assert store.delete_lesson("l1") is False
        assert store.get_all_data() is None

    def test_delete_learning_module_cascades(self, store):
        store.save_learning_module(LearningModule(id="lm1", title="UX"))
        store.save_learning_module(LearningModule(id="lm2", title="UI"))
        store.save_lesson(Lesson(id="l1", title="A"), "lm1")
        store.save_lesson(Lesson(id="l2", title="B"), "lm2")
        store.save_test(Test(id="t1", title="Quiz"), "lm1")

        assert store.delete_learning_module("lm1") is True
        assert [m.id for m in store.get_learning_modules()] == ["lm2"]
        assert [lesson.id for lesson in store.get_lessons()] == ["l2"]
        assert store.get_tests() == []

    def test_delete_lesson_everywhere(self, store):
        store.save_learning_module(LearningModule(id="lm1", title="UX"))
        store.save_lesson(Lesson(id="l1", title="A"), "lm1")
        assert store.delete_lesson("l1") is True
        assert store.get_lessons() == []
        assert store.get_learning_module("lm1").lessons == []

    def test_delete_test_everywhere(self, store):
        store.save_learning_module(LearningModule(id="lm1", title="UX"))
        store.save_test(Test(id="t1", title="Quiz"), "lm1")
        assert store.delete_test("t1") is True
        assert store.get_tests() == []
        assert store.get_learning_module("lm1").tests == []


class TestExportImport:
    """Test export, import and clear."""

    def test_round_trip(self, seeded):
        exported = seeded.export_data()
        assert seeded.import_data(exported) is True
        assert json.loads(seeded.export_data()) == json.loads(exported)

    def test_round_trip_into_fresh_store(self, seeded):
        exported = seeded.export_data()
        other = DataStore(MemoryBackend(), key=KEY)
        assert other.import_data(exported) is True
        assert json.loads(other.export_data()) == json.loads(exported)

    def test_export_uses_camel_case(self, seeded):
        payload = json.loads(seeded.export_data())
        assert "learningModules" in payload
        assert "lastUpdated" in payload
        assert payload["version"] == 1

    def test_import_not_json(self, seeded):
        before = seeded.get_all_data()
        assert seeded.import_data("not json") is False
        assert seeded.get_all_data() == before

    def test_import_deeply_nested_json(self, seeded):
        before = seeded.export_data()
        assert seeded.import_data("[" * 100000) is False
        assert seeded.export_data() == before

    def test_import_into_empty_store_failure_keeps_it_empty(self, store):
        assert store.import_data("{") is False
        assert store.get_all_data() is None

    @pytest.mark.parametrize("payload", [
        [],
        {"designers": []},
        {"designers": [], "skills": [], "learningModules": [], "projects": [], "tests": [], "lessons": {}, "version": 1},
        {"designers": [], "skills": [], "learningModules": [], "projects": [], "tests": [], "lessons": []},
        {"designers": [], "skills": [], "learningModules": [], "projects": [], "tests": [], "lessons": [], "version": "2.0.0"},
        {"designers": [], "skills": [], "learningModules": [], "projects": [], "tests": [], "lessons": [], "version": True},
        {"designers": [], "skills": [], "learningModules": [], "projects": [], "tests": [], "lessons": [], "version": 1,
         "widgets": []},
        {"designers": [{"name": "no id"}], "skills": [], "learningModules": [], "projects": [], "tests": [],
         "lessons": [], "version": 1},
    ])
    def test_import_rejects_bad_shape(self, seeded, payload):
        before = seeded.export_data()
        assert seeded.import_data(json.dumps(payload)) is False
        assert seeded.export_data() == before

    def test_import_strips_export_metadata(self, store):
        payload = {
            "designers": [{"id": "d1", "name": "A"}],
            "skills": [], "learningModules": [], "projects": [], "tests": [], "lessons": [],
            "version": 3,
            "lastUpdated": "2024-01-01T00:00:00Z",
            "exportedAt": "2024-01-02T00:00:00Z",
            "exportVersion": "2.0",
        }
        assert store.import_data(json.dumps(payload)) is True
        document = store.get_all_data()
        assert document.version == 3
        assert document.last_updated == datetime(2024, 1, 1, tzinfo=timezone.utc)
        assert "exportedAt" not in store.export_data()

    def test_import_fills_missing_last_updated(self, store):
        payload = {key: [] for key in ("designers", "skills", "learningModules", "projects", "tests", "lessons")}
        payload["version"] = 1
        assert store.import_data(json.dumps(payload)) is True
        assert store.get_all_data().last_updated is not None

    def test_import_fills_null_last_updated(self, store):
        payload = {key: [] for key in ("designers", "skills", "learningModules", "projects", "tests", "lessons")}
        payload["version"] = 1
        payload["lastUpdated"] = None
        assert store.import_data(json.dumps(payload)) is True
        assert store.get_all_data().last_updated is not None

    def test_import_accepts_bytes(self, seeded):
        assert seeded.import_data(seeded.export_data().encode("utf-8")) is True

    def test_clear_all_data(self, seeded):
        seeded.clear_all_data()
        assert seeded.get_all_data() is None
        assert seeded.get_designers() == []


class TestBackups:
    """Test automatic and manual backups."""

    def test_manual_backup_on_empty_store(self, store):
        assert store.create_manual_backup("first") is None

    def test_manual_backup_snapshot(self, seeded):
        backup_id = seeded.create_manual_backup("before review")
        backups = seeded.get_backups()
        assert backups[0].id == backup_id
        assert backups[0].description == "before review"
        assert backups[0].automatic is False
        assert len(backups[0].data["designers"]) == 4
        assert set(backups[0].data) == {"designers", "learningModules", "skills", "projects"}

    def test_designer_save_creates_automatic_backup(self, seeded):
        seeded.save_designer(Designer(id="d9", name="New"))
        backups = seeded.get_backups()
        assert len(backups) == 1
        assert backups[0].automatic is True
        # Snapshot is taken before the change
        assert len(backups[0].data["designers"]) == 4

    def test_skill_save_does_not_back_up(self, seeded):
        seeded.save_skill(Skill(id="s9", name="Motion"))
        assert seeded.get_backups() == []

    def test_backups_are_capped_newest_first(self, seeded):
        for number in range(MAX_BACKUPS + 2):
            seeded.create_manual_backup(f"backup {number}")
        backups = seeded.get_backups()
        assert len(backups) == MAX_BACKUPS
        assert backups[0].description == f"backup {MAX_BACKUPS + 1}"
        assert backups[-1].description == "backup 2"

    def test_restore_from_backup(self, seeded):
        backup_id = seeded.create_manual_backup("safe point")
        seeded.delete_designer("1")
        assert seeded.restore_from_backup(backup_id) is True
        assert seeded.get_designer("1") is not None
        assert len(seeded.get_backups()) == 2

    def test_restore_unknown_backup(self, seeded):
        before = seeded.export_data()
        assert seeded.restore_from_backup("missing") is False
        assert seeded.export_data() == before

    def test_restore_on_empty_store(self, store):
        assert store.restore_from_backup("any") is False


class TestSettingsAndStats:
    """Test settings persistence and usage statistics."""

    def test_default_settings(self, store):
        assert store.get_settings() == Settings()

    def test_save_settings(self, seeded):
        seeded.save_settings(Settings(language="en", autosave=False))
        settings = seeded.get_settings()
        assert settings.language == "en"
        assert settings.autosave is False
        assert json.loads(seeded.export_data())["settings"]["language"] == "en"

    def test_usage_stats(self, seeded):
        stats = seeded.get_usage_stats()
        assert stats["designers"] == 4
        assert stats["skills"] == 8
        assert stats["learning_modules"] == 3
        assert stats["version"] == 1
        assert stats["size_bytes"] > 0


class TestStorageErrors:
    """Test failure surfacing."""

    def test_corrupt_document_raises(self):
        store = DataStore(MemoryBackend({KEY: "not json"}), key=KEY)
        with pytest.raises(StorageError):
            store.get_all_data()

    def test_wrong_shape_raises(self):
        store = DataStore(MemoryBackend({KEY: json.dumps({"designers": "x"})}), key=KEY)
        with pytest.raises(StorageError):
            store.get_designers()

    def test_separate_keys_are_independent(self, backend):
        first = DataStore(backend, key="first")
        second = DataStore(backend, key="second")
        first.save_skill(Skill(id="s1", name="Figma"))
        assert second.get_all_data() is None
        assert backend.keys() == ["first"]
