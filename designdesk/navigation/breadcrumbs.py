"""
Breadcrumb trail derived from the navigation state.

The trail is a pure function of the state. Clicking a crumb produces the next
state via ``breadcrumb_target``.
"""

from dataclasses import dataclass

from .labels import DEFAULT_LANGUAGE, section_label, subsection_label
from .state import (
    MODULE_CHILD_EDITORS,
    NavigationState,
    Subsection,
    module_editor_state,
)


@dataclass(frozen=True)
class Breadcrumb:
    label: str
    path: str       # section name, or a subsection name


def build_breadcrumbs(state: NavigationState, language: str = DEFAULT_LANGUAGE) -> list[Breadcrumb]:
    """
    Build the trail from the section root to the current view.

    While editing a lesson or test inside a module, an "edit module" crumb is
    inserted before the lesson/test crumb.
    """
    crumbs = [Breadcrumb(label=section_label(state.section, language), path=state.section)]

    if state.subsection:
        if state.subsection in MODULE_CHILD_EDITORS and state.module_id:
            crumbs.append(Breadcrumb(
                label=subsection_label(Subsection.MODULE_EDITOR.value, "edit", language),
                path=Subsection.MODULE_EDITOR.value,
            ))
        crumbs.append(Breadcrumb(
            label=subsection_label(state.subsection, state.mode, language),
            path=state.subsection,
        ))

    return crumbs


def breadcrumb_target(state: NavigationState, crumb: Breadcrumb) -> NavigationState:
    """
    State to move to when a crumb is clicked.

    The intermediate module crumb returns to that module's editor (the same
    place "back" goes from a lesson/test editor). Any other crumb opens its
    section with nothing else carried over.
    """
    if crumb.path == Subsection.MODULE_EDITOR and state.module_id:
        return module_editor_state(state.module_id)
    return NavigationState(section=crumb.path)


def has_back_button(crumbs: list[Breadcrumb]) -> bool:
    return len(crumbs) > 1
