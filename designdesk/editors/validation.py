"""
Form validation for the editor views.

Each validator returns a list of human-readable errors; an empty list means
the form may be saved. ``check_form`` also turns pydantic shape errors into
the same list form, so editors show one inline error list.
"""

import re
from datetime import date
from typing import Any, Callable, Mapping, Optional, TypeVar

from pydantic import BaseModel, ValidationError

from designdesk.schemas import Designer, LearningModule, Lesson, Project, Skill, Test


EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
JIRA_KEY_RE = re.compile(r"^[A-Z][A-Z0-9]*-\d+$")

MIN_HOURS_PER_WEEK = 1
MAX_HOURS_PER_WEEK = 80

M = TypeVar("M", bound=BaseModel)


def _blank(value: Optional[str]) -> bool:
    return not (value or "").strip()


def _parse_date(value: Optional[str]) -> Optional[date]:
    if not value:
        return None
    try:
        return date.fromisoformat(value[:10])
    except ValueError:
        return None


def validate_designer(designer: Designer) -> list[str]:
    errors = []

    if _blank(designer.name):
        errors.append("Name is required")

    if _blank(designer.email):
        errors.append("Email is required")
    elif not EMAIL_RE.match(designer.email.strip()):
        errors.append("Invalid email format")

    if _blank(designer.position):
        errors.append("Position is required")

    if designer.salary < 0:
        errors.append("Salary cannot be negative")

    if not MIN_HOURS_PER_WEEK <= designer.hours_per_week <= MAX_HOURS_PER_WEEK:
        errors.append(f"Working hours must be between {MIN_HOURS_PER_WEEK} and {MAX_HOURS_PER_WEEK}")

    seen = set()
    for rating in designer.skills:
        if rating.skill_id in seen:
            errors.append(f"Skill {rating.skill_id} is rated more than once")
        seen.add(rating.skill_id)
        if rating.target_level < rating.current_level:
            errors.append(f"Target level for skill {rating.skill_id} is below the current level")

    return errors


def validate_skill(skill: Skill) -> list[str]:
    errors = []
    if _blank(skill.name):
        errors.append("Skill name is required")
    if _blank(skill.category):
        errors.append("Category is required")
    return errors


def validate_learning_module(module: LearningModule) -> list[str]:
    errors = []
    if _blank(module.title):
        errors.append("Module title is required")
    if _blank(module.category):
        errors.append("Category is required")
    if module.estimated_time <= 0:
        errors.append("Estimated time must be greater than zero")
    return errors


def validate_lesson(lesson: Lesson) -> list[str]:
    errors = []
    if _blank(lesson.title):
        errors.append("Lesson title is required")
    if _blank(lesson.content):
        errors.append("Lesson content is required")
    return errors


def validate_test(test: Test) -> list[str]:
    errors = []
    if _blank(test.title):
        errors.append("Test title is required")
    if not test.questions:
        errors.append("A test needs at least one question")

    for number, question in enumerate(test.questions, start=1):
        if _blank(question.question):
            errors.append(f"Question {number} has no text")
        if question.type == "multiple-choice":
            options = [o for o in (question.options or []) if o.strip()]
            if len(options) < 2:
                errors.append(f"Question {number} needs at least two options")
            if not question.correct_answer:
                errors.append(f"Question {number} has no correct answer")
            elif question.correct_answer not in options:
                errors.append(f"Question {number}: correct answer is not one of the options")

    return errors


def validate_project(project: Project) -> list[str]:
    errors = []
    if _blank(project.name):
        errors.append("Project name is required")
    if _blank(project.jira_key):
        errors.append("Jira key is required")
    elif not JIRA_KEY_RE.match(project.jira_key):
        errors.append("Jira key must look like ABC-123")

    start = _parse_date(project.start_date)
    deadline = _parse_date(project.deadline)
    if start and deadline and deadline < start:
        errors.append("Deadline cannot be before the start date")
    return errors


def _format_validation_error(error: ValidationError) -> list[str]:
    messages = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"])
        messages.append(f"{location}: {item['msg']}" if location else item["msg"])
    return messages


def check_form(
    model: type[M],
    data: Mapping[str, Any],
    validator: Callable[[M], list[str]],
) -> tuple[Optional[M], list[str]]:
    """
    Build a record from raw form data and validate it.

    Returns:
        (record, []) when the form is valid, otherwise (record or None, errors)
    """
    try:
        record = model.model_validate(data)
    except ValidationError as e:
        return None, _format_validation_error(e)
    return record, validator(record)
