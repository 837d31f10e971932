"""
Learning content schemas for DesignDesk.

Content tree:
- LearningModule owns lessons and tests
- Test owns questions and attempts

Lessons and tests are also persisted in flat top-level collections, tagged
with the owning ``moduleId``.
"""

from pydantic import Field
from typing import Optional, Literal

from .base import Record


class Lesson(Record):
    id: str
    title: str
    type: Literal["video", "article", "interactive"] = "article"
    duration: str = ""          # free text, e.g. "15 min"
    completed: bool = False
    content: str = ""
    module_id: Optional[str] = None


class Question(Record):
    id: str
    question: str
    type: Literal["multiple-choice", "text", "rating"] = "multiple-choice"
    options: Optional[list[str]] = None
    correct_answer: Optional[str] = None


class AttemptAnswer(Record):
    question_id: str
    answer: str


class TestAttempt(Record):
    id: str
    date: str
    score: float = Field(..., ge=0, le=100)
    passed: bool
    answers: list[AttemptAnswer] = []


class Test(Record):
    id: str
    title: str
    questions: list[Question] = []
    passing_score: int = Field(default=70, ge=0, le=100)
    attempts: list[TestAttempt] = []
    module_id: Optional[str] = None

    # Not a pytest test class despite the name.
    __test__ = False


class LearningModule(Record):
    id: str
    title: str
    description: str = ""
    category: str = ""
    difficulty: Literal["Beginner", "Intermediate", "Advanced"] = "Beginner"
    estimated_time: float = Field(default=0, ge=0)   # hours
    status: Literal["Not Started", "In Progress", "Completed"] = "Not Started"
    progress: int = Field(default=0, ge=0, le=100)
    deadline: Optional[str] = None
    lessons: list[Lesson] = []
    tests: list[Test] = []
    assigned_date: Optional[str] = None
    completed_date: Optional[str] = None
