"""
DesignDesk Viewer - HTML fragments for Streamlit markdown.

This module provides:
- Designer cards, skill bars and metric tiles
- Breadcrumb trail and notification list rendering
"""

from .team import (
    get_team_css,
    initials,
    render_designer_card,
    render_skill_bar,
    render_skill_bars,
    render_metric,
    LEVEL_CLASSES,
)

from .chrome import (
    get_chrome_css,
    render_breadcrumbs,
    render_notification,
    render_notification_list,
    NOTIFICATION_ICONS,
)

__all__ = [
    # Team
    "get_team_css",
    "initials",
    "render_designer_card",
    "render_skill_bar",
    "render_skill_bars",
    "render_metric",
    "LEVEL_CLASSES",
    # Chrome
    "get_chrome_css",
    "render_breadcrumbs",
    "render_notification",
    "render_notification_list",
    "NOTIFICATION_ICONS",
]
