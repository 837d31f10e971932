"""
Navigation state and its transitions.

The app keeps exactly one NavigationState. It is immutable: every transition
returns a new value, so the rules below can be tested without rendering.
"""

from enum import Enum
from pydantic import BaseModel, ConfigDict
from typing import Any, Literal, Mapping, Optional


class Section(str, Enum):
    DASHBOARD = "dashboard"
    DESIGNERS = "designers"
    SKILLS = "skills"
    LEARNING = "learning"
    PROJECTS = "projects"
    ANALYTICS = "analytics"
    CALENDAR = "calendar"
    SETTINGS = "settings"


class Subsection(str, Enum):
    DESIGNER_PROFILE = "designer-profile"
    DESIGNER_EDITOR = "designer-editor"
    MODULE_DETAILS = "module-details"
    MODULE_EDITOR = "module-editor"
    LESSON_VIEW = "lesson-view"
    LESSON_EDITOR = "lesson-editor"
    TEST_EDITOR = "test-editor"
    SKILL_EDITOR = "skill-editor"
    PROJECT_EDITOR = "project-editor"


Mode = Literal["view", "edit", "create"]

# Editors that live inside a module; they carry module_id for "back".
MODULE_CHILD_EDITORS = (Subsection.LESSON_EDITOR, Subsection.TEST_EDITOR)


class NavigationState(BaseModel):
    """
    What screen is shown.

    ``subsection`` only means something together with ``section``;
    ``module_id`` is set only while editing a lesson or test.
    """
    model_config = ConfigDict(frozen=True, extra="forbid")

    section: str = Section.DASHBOARD.value
    subsection: Optional[str] = None
    id: Optional[str] = None
    mode: Optional[Mode] = None
    data: Any = None
    module_id: Optional[str] = None


HOME = NavigationState()


def _fields(state: NavigationState) -> dict[str, Any]:
    # model_dump would turn a lesson passed in ``data`` into a plain dict
    return {name: getattr(state, name) for name in NavigationState.model_fields}


def navigate_to(
    state: NavigationState,
    partial: Optional[Mapping[str, Any]] = None,
    **changes: Any,
) -> NavigationState:
    """
    Shallow-merge changes into the state.

    A value of None clears the field. The resulting combination is not checked
    (a subsection from another section is accepted as is).

    Raises:
        pydantic.ValidationError: On unknown field names or an invalid mode
    """
    merged = _fields(state)
    if partial:
        merged.update(partial)
    merged.update(changes)
    for key, value in merged.items():
        if isinstance(value, Enum):
            merged[key] = value.value
    return NavigationState.model_validate(merged)


def module_editor_state(module_id: str) -> NavigationState:
    """The edit screen of a learning module."""
    return NavigationState(
        section=Section.LEARNING.value,
        subsection=Subsection.MODULE_EDITOR.value,
        id=module_id,
        mode="edit",
    )


def go_back(state: NavigationState) -> NavigationState:
    """
    Context-aware "back".

    Rules, first match wins:
    1. lesson/test editor -> owning module editor (or the learning section)
    2. designer editor -> designers section
    3. any other subsection -> its section
    4. a bare section -> dashboard
    """
    if state.subsection in MODULE_CHILD_EDITORS:
        if state.module_id:
            return module_editor_state(state.module_id)
        return NavigationState(section=Section.LEARNING.value)

    if state.subsection == Subsection.DESIGNER_EDITOR:
        return NavigationState(section=Section.DESIGNERS.value)

    if state.subsection:
        return NavigationState(section=state.section)

    return HOME
