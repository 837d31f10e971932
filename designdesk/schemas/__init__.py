"""
DesignDesk Schemas - Pydantic models for the team dashboard.

This module exports all schema classes for:
- Team: designers, skills, skill ratings, KPIs, reviews
- Projects: projects and tasks
- Learning: modules, lessons, tests, questions
- Document: the persisted AppData document, backups, settings
- Notification: in-memory notifications
"""

# Team schemas
from .team import (
    DESIGNER_LEVELS,
    Skill,
    SkillRating,
    KPIMetrics,
    PeerReview,
    Achievement,
    CareerGoal,
    Designer,
)

# Project schemas
from .projects import (
    Task,
    Project,
)

# Learning schemas
from .learning import (
    Lesson,
    Question,
    AttemptAnswer,
    TestAttempt,
    Test,
    LearningModule,
)

# Document schemas
from .document import (
    COLLECTION_KEYS,
    Settings,
    BackupEntry,
    AppData,
)

# Notification schemas
from .notification import (
    NotificationType,
    Notification,
)

from .base import Record

__all__ = [
    'Record',
    # Team
    'DESIGNER_LEVELS',
    'Skill',
    'SkillRating',
    'KPIMetrics',
    'PeerReview',
    'Achievement',
    'CareerGoal',
    'Designer',
    # Projects
    'Task',
    'Project',
    # Learning
    'Lesson',
    'Question',
    'AttemptAnswer',
    'TestAttempt',
    'Test',
    'LearningModule',
    # Document
    'COLLECTION_KEYS',
    'Settings',
    'BackupEntry',
    'AppData',
    # Notification
    'NotificationType',
    'Notification',
]
