"""
Team schemas for DesignDesk.

Defines Pydantic models for:
- Skills catalogue and per-designer skill ratings
- Designer profiles (identity, employment, KPIs, reviews, goals)
"""

from datetime import datetime, timezone
from pydantic import Field
from typing import Optional, Literal

from .base import Record
from .learning import LearningModule
from .projects import Project


DESIGNER_LEVELS = ("Junior", "Middle", "Senior", "Lead")


class Skill(Record):
    id: str
    name: str
    category: str = ""
    description: str = ""
    max_level: int = Field(default=100, ge=1)


class SkillRating(Record):
    """
    A designer's rating on one skill.

    ``target_level >= current_level`` is a form rule (slider lower bound),
    the store does not enforce it.
    """
    skill_id: str               # Skill.id
    current_level: int = Field(default=0, ge=0, le=100)
    target_level: int = Field(default=0, ge=0, le=100)
    last_updated: Optional[str] = None
    notes: str = ""


class KPIMetrics(Record):
    productivity: float = 0
    quality_score: float = 0
    time_management: float = 0
    quality: float = 0
    delivery: float = 0
    collaboration: float = 0
    growth: float = 0
    overall_score: float = 0


class PeerReview(Record):
    id: str
    reviewer_name: str
    reviewer_id: str = ""
    rating: int = Field(..., ge=1, le=5)
    comment: str = ""
    date: str


class Achievement(Record):
    id: str
    title: str
    description: str = ""
    date: Optional[str] = None


class CareerGoal(Record):
    id: str
    title: str
    deadline: Optional[str] = None
    progress: int = Field(default=0, ge=0, le=100)
    status: Literal["Planned", "In Progress", "Achieved"] = "Planned"


class Designer(Record):
    id: str
    # Identity
    name: str
    email: str = ""
    phone: Optional[str] = None
    avatar: Optional[str] = None      # URL or data: URI
    birth_date: Optional[str] = None
    location: str = ""
    # Employment
    position: str = ""
    department: str = ""
    level: Literal["Junior", "Middle", "Senior", "Lead"] = "Middle"
    status: Literal["Active", "Inactive"] = "Active"
    join_date: Optional[str] = None
    salary: float = 0
    hours_per_week: int = 40
    working_hours: float = 0          # total logged hours
    hours_worked: float = 0           # hours this week
    efficiency: float = 0
    rating: float = 0                 # visible to team leads only
    # Related records
    skills: list[SkillRating] = []
    projects: list[Project] = []
    learning_modules: list[LearningModule] = []
    achievements: list[Achievement] = []
    career_goals: list[CareerGoal] = []
    kpis: KPIMetrics = Field(default_factory=KPIMetrics)
    peer_reviews: list[PeerReview] = []
    # Cosmetic last-modified counter, bumped by the editor on every save
    version: int = 1
    last_modified: Optional[datetime] = None

    def revised(self, now: Optional[datetime] = None) -> "Designer":
        """Return a copy with ``version`` bumped and ``last_modified`` stamped."""
        return self.model_copy(update={
            "version": self.version + 1,
            "last_modified": now or datetime.now(timezone.utc),
        })

    def skill_rating(self, skill_id: str) -> Optional[SkillRating]:
        for rating in self.skills:
            if rating.skill_id == skill_id:
                return rating
        return None
