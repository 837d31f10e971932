"""
Persisted document schemas for DesignDesk.

The AppData document is the single unit of persistence: every read and write
goes through the whole document, never a partial patch.
"""

from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Any, Literal

from .base import Record
from .learning import LearningModule, Lesson, Test
from .projects import Project
from .team import Designer, Skill


# Collections every document (and every import) must carry.
COLLECTION_KEYS = (
    "designers",
    "skills",
    "learningModules",
    "projects",
    "tests",
    "lessons",
)


class Settings(Record):
    """Dashboard preferences, stored free-form under ``settings``."""
    language: Literal["uk", "en"] = "uk"
    theme: Literal["light", "dark", "system"] = "system"
    email_notifications: bool = True
    deadline_reminders: bool = True
    autosave: bool = True


class BackupEntry(Record):
    id: str
    timestamp: datetime
    description: str = ""
    data: dict[str, Any] = {}   # camelCase collection snapshots
    automatic: bool = False


class AppData(BaseModel):
    """
    The whole persisted state.

    ``version`` is informational only: it never gates reads and there is no
    migration between versions. Unknown top-level keys are rejected.
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )

    designers: list[Designer] = []
    skills: list[Skill] = []
    learning_modules: list[LearningModule] = []
    projects: list[Project] = []
    tests: list[Test] = []
    lessons: list[Lesson] = []
    version: int = Field(default=1, ge=1)
    last_updated: datetime
    settings: dict[str, Any] = {}
    backups: list[BackupEntry] = []

    def to_json(self, indent: int | None = None) -> str:
        return self.model_dump_json(by_alias=True, indent=indent)
