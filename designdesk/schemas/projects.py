"""
Project schemas for DesignDesk.

Projects are stored both in the top-level ``projects`` collection and embedded
in designer profiles (the designer's own participation record).
"""

from pydantic import Field
from typing import Optional, Literal

from .base import Record


class Task(Record):
    id: str
    title: str
    jira_key: str = ""
    status: Literal["To Do", "In Progress", "Done"] = "To Do"
    assignee: str = ""
    priority: Literal["Low", "Medium", "High"] = "Medium"
    estimated_hours: float = Field(default=0, ge=0)
    actual_hours: float = Field(default=0, ge=0)


class Project(Record):
    id: str
    name: str
    description: Optional[str] = None
    jira_key: str = ""
    status: Literal["Active", "Completed", "On Hold"] = "Active"
    progress: int = Field(default=0, ge=0, le=100)
    role: str = ""
    start_date: Optional[str] = None   # ISO date
    end_date: Optional[str] = None
    deadline: Optional[str] = None
    hours_spent: float = Field(default=0, ge=0)
    tasks: list[Task] = []
