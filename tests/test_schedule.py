"""
Calendar event tests for DesignDesk.
"""

from datetime import date, datetime, timezone

from designdesk.schedule import (
    collect_events,
    events_for_day,
    upcoming_deadlines,
    upcoming_events,
    upcoming_in_document,
)
from designdesk.schemas import AppData, Designer, LearningModule, Project


def make_document(**changes) -> AppData:
    fields = {
        "last_updated": datetime(2024, 12, 1, tzinfo=timezone.utc),
        "designers": [
            Designer(
                id="d1",
                name="Марія",
                birth_date="1995-03-15",
                projects=[Project(id="p1", name="Mobile App", deadline="2024-12-30")],
                learning_modules=[LearningModule(id="lm1", title="UX Research", deadline="2024-12-28")],
            ),
        ],
        "projects": [Project(id="p2", name="Design System", deadline="2025-01-05")],
    }
    fields.update(changes)
    return AppData(**fields)


class TestCollectEvents:
    """Test event extraction."""

    def test_events_for_year(self):
        events = collect_events(make_document(), 2024)
        assert [(e.day, e.kind, e.title) for e in events] == [
            (date(2024, 3, 15), "birthday", "Марія"),
            (date(2024, 12, 28), "learning", "UX Research"),
            (date(2024, 12, 30), "project", "Mobile App"),
        ]
        assert events[2].designer_name == "Марія"

    def test_birthdays_recur(self):
        events = collect_events(make_document(), 2030)
        assert [(e.day, e.kind) for e in events] == [(date(2030, 3, 15), "birthday")]

    def test_leap_day_birthday(self):
        document = make_document(designers=[Designer(id="d1", name="A", birth_date="1996-02-29")], projects=[])
        assert collect_events(document, 2023)[0].day == date(2023, 2, 28)
        assert collect_events(document, 2024)[0].day == date(2024, 2, 29)

    def test_invalid_dates_are_skipped(self):
        document = make_document(
            designers=[Designer(
                id="d1",
                name="A",
                birth_date="someday",
                projects=[Project(id="p1", name="X", deadline="31/12/2024")],
            )],
            projects=[],
        )
        assert collect_events(document, 2024) == []

    def test_team_project_replaces_embedded_copy(self):
        document = make_document(projects=[Project(id="p1", name="Mobile App v2", deadline="2024-12-31")])
        projects = [e for e in collect_events(document, 2024) if e.kind == "project"]
        assert len(projects) == 1
        assert projects[0].title == "Mobile App v2"
        assert projects[0].designer_id is None

    def test_team_modules(self):
        document = make_document(learning_modules=[LearningModule(id="lm9", title="Motion", deadline="2024-06-01")])
        titles = [e.title for e in collect_events(document, 2024) if e.kind == "learning"]
        assert titles == ["Motion", "UX Research"]

    def test_shared_module_listed_once(self):
        shared = LearningModule(id="lm1", title="UX Research", deadline="2024-12-28")
        document = make_document(
            designers=[
                Designer(id="d1", name="A", learning_modules=[shared]),
                Designer(id="d2", name="B", learning_modules=[shared]),
            ],
            projects=[],
            learning_modules=[shared],
        )
        modules = [e for e in collect_events(document, 2024) if e.kind == "learning"]
        assert len(modules) == 1
        assert modules[0].designer_id is None

    def test_embedded_module_keeps_first_owner(self):
        shared = LearningModule(id="lm1", title="UX Research", deadline="2024-12-28")
        document = make_document(
            designers=[
                Designer(id="d1", name="A", learning_modules=[shared]),
                Designer(id="d2", name="B", learning_modules=[shared]),
            ],
            projects=[],
        )
        modules = [e for e in collect_events(document, 2024) if e.kind == "learning"]
        assert [e.designer_id for e in modules] == ["d1"]


class TestUpcoming:
    """Test day and window queries."""

    def test_events_for_day(self):
        events = collect_events(make_document(), 2024)
        assert [e.title for e in events_for_day(events, date(2024, 12, 30))] == ["Mobile App"]
        assert events_for_day(events, date(2024, 12, 29)) == []

    def test_upcoming_window_is_inclusive(self):
        events = collect_events(make_document(), 2024)
        upcoming = upcoming_events(events, date(2024, 12, 28), days=2)
        assert [e.title for e in upcoming] == ["UX Research", "Mobile App"]

    def test_upcoming_deadlines_cross_year(self):
        deadlines = upcoming_deadlines(make_document(), date(2024, 12, 25), days=14)
        assert [e.title for e in deadlines] == ["UX Research", "Mobile App", "Design System"]

    def test_upcoming_deadlines_exclude_birthdays(self):
        deadlines = upcoming_deadlines(make_document(), date(2024, 3, 10), days=14)
        assert deadlines == []

    def test_upcoming_in_document_crosses_new_year(self):
        document = make_document(
            designers=[Designer(id="d1", name="A", birth_date="1990-01-02")],
            projects=[],
        )
        upcoming = upcoming_in_document(document, date(2026, 12, 28), days=14)
        assert [(e.day, e.kind) for e in upcoming] == [(date(2027, 1, 2), "birthday")]

    def test_upcoming_in_document_keeps_day_order(self):
        upcoming = upcoming_in_document(make_document(), date(2024, 12, 25), days=14)
        assert [e.day for e in upcoming] == [date(2024, 12, 28), date(2024, 12, 30), date(2025, 1, 5)]
