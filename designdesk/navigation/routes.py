"""
View resolution - map a NavigationState to exactly one page descriptor.

Page descriptors form a closed union: each one carries only what its view
needs, so a combination like a lesson page without a lesson cannot be built.
"""

import logging
from dataclasses import dataclass
from typing import Any, Optional, Union

from .state import Mode, NavigationState, Section, Subsection


logger = logging.getLogger(__name__)

DEFAULT_EDITOR_MODE: Mode = "create"


@dataclass(frozen=True)
class DesignerProfilePage:
    designer_id: str


@dataclass(frozen=True)
class DesignerEditorPage:
    designer_id: Optional[str]
    mode: Mode


@dataclass(frozen=True)
class ModuleDetailsPage:
    module_id: str


@dataclass(frozen=True)
class ModuleEditorPage:
    module_id: Optional[str]
    mode: Mode


@dataclass(frozen=True)
class LessonPage:
    lesson: Any     # the full lesson record, not an id


@dataclass(frozen=True)
class LessonEditorPage:
    lesson_id: Optional[str]
    module_id: Optional[str]
    mode: Mode


@dataclass(frozen=True)
class TestEditorPage:
    test_id: Optional[str]
    module_id: Optional[str]
    mode: Mode

    __test__ = False


@dataclass(frozen=True)
class SkillEditorPage:
    skill_id: Optional[str]
    mode: Mode


@dataclass(frozen=True)
class ProjectEditorPage:
    project_id: Optional[str]
    mode: Mode


@dataclass(frozen=True)
class SectionPage:
    section: Section


View = Union[
    DesignerProfilePage,
    DesignerEditorPage,
    ModuleDetailsPage,
    ModuleEditorPage,
    LessonPage,
    LessonEditorPage,
    TestEditorPage,
    SkillEditorPage,
    ProjectEditorPage,
    SectionPage,
]


def resolve_section(section: str) -> Section:
    """Known section, or the dashboard for anything else."""
    try:
        return Section(section)
    except ValueError:
        logger.debug(f"Unknown section {section!r}, falling back to dashboard")
        return Section.DASHBOARD


def resolve_view(state: NavigationState) -> View:
    """
    Pick the page for a navigation state.

    Checked in a fixed order, first match wins. Subsections that need an id or
    a payload fall through to the section page when it is missing.
    """
    sub = state.subsection
    mode = state.mode or DEFAULT_EDITOR_MODE

    if sub == Subsection.DESIGNER_PROFILE and state.id:
        return DesignerProfilePage(designer_id=state.id)

    if sub == Subsection.DESIGNER_EDITOR:
        return DesignerEditorPage(designer_id=state.id, mode=mode)

    if sub == Subsection.MODULE_DETAILS and state.id:
        return ModuleDetailsPage(module_id=state.id)

    if sub == Subsection.MODULE_EDITOR:
        return ModuleEditorPage(module_id=state.id, mode=mode)

    if sub == Subsection.LESSON_VIEW and state.data is not None:
        return LessonPage(lesson=state.data)

    if sub == Subsection.LESSON_EDITOR:
        return LessonEditorPage(lesson_id=state.id, module_id=state.module_id, mode=mode)

    if sub == Subsection.TEST_EDITOR:
        return TestEditorPage(test_id=state.id, module_id=state.module_id, mode=mode)

    if sub == Subsection.SKILL_EDITOR:
        return SkillEditorPage(skill_id=state.id, mode=mode)

    if sub == Subsection.PROJECT_EDITOR:
        return ProjectEditorPage(project_id=state.id, mode=mode)

    return SectionPage(section=resolve_section(state.section))
