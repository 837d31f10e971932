"""
Localized labels for sections and subsections.

Editor subsections have two labels: one for ``create`` mode and one for any
other mode (``edit``/``view``).
"""

from typing import Optional


SECTION_LABELS = {
    "uk": {
        "dashboard": "Дашборд",
        "designers": "Дизайнери",
        "skills": "Навички",
        "learning": "Навчання",
        "projects": "Проекти",
        "analytics": "Аналітика",
        "calendar": "Календар",
        "settings": "Налаштування",
    },
    "en": {
        "dashboard": "Dashboard",
        "designers": "Designers",
        "skills": "Skills",
        "learning": "Learning",
        "projects": "Projects",
        "analytics": "Analytics",
        "calendar": "Calendar",
        "settings": "Settings",
    },
}

# subsection -> (create label, other-mode label)
SUBSECTION_LABELS = {
    "uk": {
        "designer-profile": ("Профіль дизайнера", "Профіль дизайнера"),
        "designer-editor": ("Створити дизайнера", "Редагувати дизайнера"),
        "module-details": ("Деталі модуля", "Деталі модуля"),
        "module-editor": ("Створити модуль", "Редагувати модуль"),
        "lesson-view": ("Урок", "Урок"),
        "lesson-editor": ("Створити урок", "Редагувати урок"),
        "test-editor": ("Створити тест", "Редагувати тест"),
        "skill-editor": ("Створити навичку", "Редагувати навичку"),
        "project-editor": ("Створити проект", "Редагувати проект"),
    },
    "en": {
        "designer-profile": ("Designer profile", "Designer profile"),
        "designer-editor": ("Create designer", "Edit designer"),
        "module-details": ("Module details", "Module details"),
        "module-editor": ("Create module", "Edit module"),
        "lesson-view": ("Lesson", "Lesson"),
        "lesson-editor": ("Create lesson", "Edit lesson"),
        "test-editor": ("Create test", "Edit test"),
        "skill-editor": ("Create skill", "Edit skill"),
        "project-editor": ("Create project", "Edit project"),
    },
}

BACK_LABELS = {"uk": "Назад", "en": "Back"}

DEFAULT_LANGUAGE = "uk"


def _table(tables: dict, language: str) -> dict:
    return tables.get(language) or tables[DEFAULT_LANGUAGE]


def section_label(section: str, language: str = DEFAULT_LANGUAGE) -> str:
    """Label for a section; unknown sections show their raw name."""
    return _table(SECTION_LABELS, language).get(section, section)


def subsection_label(subsection: str, mode: Optional[str] = None, language: str = DEFAULT_LANGUAGE) -> str:
    """Label for a subsection; the verb depends on whether mode is ``create``."""
    labels = _table(SUBSECTION_LABELS, language).get(subsection)
    if labels is None:
        return subsection
    create_label, other_label = labels
    return create_label if mode == "create" else other_label


def back_label(language: str = DEFAULT_LANGUAGE) -> str:
    return _table(BACK_LABELS, language)
