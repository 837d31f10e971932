"""
DesignDesk Navigation - In-memory routing for the single-page dashboard.

This module provides:
- NavigationState with navigate_to / go_back transitions
- resolve_view: routing table to a closed set of page descriptors
- Breadcrumb trail and crumb click targets
"""

from .state import (
    Section,
    Subsection,
    Mode,
    NavigationState,
    HOME,
    MODULE_CHILD_EDITORS,
    navigate_to,
    go_back,
    module_editor_state,
)

from .routes import (
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
    View,
    resolve_section,
    resolve_view,
)

from .breadcrumbs import (
    Breadcrumb,
    build_breadcrumbs,
    breadcrumb_target,
    has_back_button,
)

from .labels import (
    section_label,
    subsection_label,
    back_label,
)

__all__ = [
    # State
    "Section",
    "Subsection",
    "Mode",
    "NavigationState",
    "HOME",
    "MODULE_CHILD_EDITORS",
    "navigate_to",
    "go_back",
    "module_editor_state",
    # Routes
    "DesignerProfilePage",
    "DesignerEditorPage",
    "ModuleDetailsPage",
    "ModuleEditorPage",
    "LessonPage",
    "LessonEditorPage",
    "TestEditorPage",
    "SkillEditorPage",
    "ProjectEditorPage",
    "SectionPage",
    "View",
    "resolve_section",
    "resolve_view",
    # Breadcrumbs
    "Breadcrumb",
    "build_breadcrumbs",
    "breadcrumb_target",
    "has_back_button",
    # Labels
    "section_label",
    "subsection_label",
    "back_label",
]
