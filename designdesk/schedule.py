"""
Calendar events derived from the stored document.

Three kinds of event are produced:
- project deadlines (top-level projects and designers' own project records)
- learning module deadlines
- designer birthdays, recurring every year
"""

import logging
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Literal, Optional

from designdesk.schemas import AppData


logger = logging.getLogger(__name__)

EventKind = Literal["project", "learning", "birthday"]

DEADLINE_KINDS = ("project", "learning")


@dataclass(frozen=True)
class CalendarEvent:
    day: date
    title: str
    kind: EventKind
    source_id: str
    designer_id: Optional[str] = None
    designer_name: Optional[str] = None


def _parse_day(value: Optional[str], what: str) -> Optional[date]:
    if not value:
        return None
    try:
        return date.fromisoformat(value[:10])
    except ValueError:
        logger.debug(f"Skipping {what}: invalid date {value!r}")
        return None


def _birthday_in(born: date, year: int) -> date:
    try:
        return born.replace(year=year)
    except ValueError:
        # 29 February outside a leap year
        return date(year, 2, 28)


def collect_events(document: AppData, year: int) -> list[CalendarEvent]:
    """All events falling in ``year``, ordered by day then title."""
    events: dict[tuple[str, str], CalendarEvent] = {}

    for designer in document.designers:
        born = _parse_day(designer.birth_date, f"birthday of {designer.id}")
        if born is not None:
            events[("birthday", designer.id)] = CalendarEvent(
                day=_birthday_in(born, year),
                title=designer.name,
                kind="birthday",
                source_id=designer.id,
                designer_id=designer.id,
                designer_name=designer.name,
            )

        for project in designer.projects:
            day = _parse_day(project.deadline, f"project {project.id}")
            if day is not None and day.year == year:
                events.setdefault(("project", project.id), CalendarEvent(
                    day=day,
                    title=project.name,
                    kind="project",
                    source_id=project.id,
                    designer_id=designer.id,
                    designer_name=designer.name,
                ))

        for module in designer.learning_modules:
            day = _parse_day(module.deadline, f"module {module.id}")
            if day is not None and day.year == year:
                events.setdefault(("learning", module.id), CalendarEvent(
                    day=day,
                    title=module.title,
                    kind="learning",
                    source_id=module.id,
                    designer_id=designer.id,
                    designer_name=designer.name,
                ))

    # Team-level records win over the embedded copies
    for project in document.projects:
        day = _parse_day(project.deadline, f"project {project.id}")
        if day is not None and day.year == year:
            events[("project", project.id)] = CalendarEvent(
                day=day, title=project.name, kind="project", source_id=project.id,
            )

    for module in document.learning_modules:
        day = _parse_day(module.deadline, f"module {module.id}")
        if day is not None and day.year == year:
            events[("learning", module.id)] = CalendarEvent(
                day=day, title=module.title, kind="learning", source_id=module.id,
            )

    return sorted(events.values(), key=lambda e: (e.day, e.title))


def events_for_day(events: list[CalendarEvent], day: date) -> list[CalendarEvent]:
    return [e for e in events if e.day == day]


def upcoming_events(events: list[CalendarEvent], today: date, days: int = 14) -> list[CalendarEvent]:
    """Events from ``today`` through ``today + days`` inclusive."""
    until = today + timedelta(days=days)
    return [e for e in events if today <= e.day <= until]


def upcoming_in_document(document: AppData, today: date, days: int = 14) -> list[CalendarEvent]:
    """All events in the coming window, including those past New Year."""
    events = collect_events(document, today.year)
    for year in range(today.year + 1, (today + timedelta(days=days)).year + 1):
        events += collect_events(document, year)
    return upcoming_events(events, today, days)


def upcoming_deadlines(document: AppData, today: date, days: int = 14) -> list[CalendarEvent]:
    """Project and module deadlines in the coming window."""
    return [e for e in upcoming_in_document(document, today, days) if e.kind in DEADLINE_KINDS]
