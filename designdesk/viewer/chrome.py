"""
Chrome renderer - Breadcrumb trail and notification list.
"""

import html

from designdesk.navigation import Breadcrumb
from designdesk.schemas import Notification, NotificationType


NOTIFICATION_ICONS = {
    NotificationType.INFO: "ℹ️",
    NotificationType.SUCCESS: "✅",
    NotificationType.WARNING: "⚠️",
    NotificationType.ERROR: "❌",
}


def get_chrome_css() -> str:
    """Get CSS styles for the breadcrumb bar and notification list."""
    return """
    <style>
    .breadcrumbs {
        font-size: 0.9em;
        color: #666;
        margin-bottom: 0.5em;
    }
    .breadcrumb-sep {
        margin: 0 6px;
        color: #bbb;
    }
    .breadcrumb-current {
        color: #333;
        font-weight: 500;
    }
    .notification {
        border-left: 3px solid #90A4AE;
        padding: 6px 10px;
        margin: 4px 0;
        font-size: 0.9em;
    }
    .notification-unread {
        background: #F5F9FF;
    }
    .notification-success { border-color: #388E3C; }
    .notification-warning { border-color: #F57C00; }
    .notification-error { border-color: #D32F2F; }
    .notification-info { border-color: #1976D2; }
    .notification-time {
        color: #999;
        font-size: 0.8em;
    }
    </style>
    """


def render_breadcrumbs(crumbs: list[Breadcrumb]) -> str:
    """Render the trail; the last crumb is the current view."""
    if not crumbs:
        return ""

    parts = []
    for index, crumb in enumerate(crumbs):
        label = html.escape(crumb.label)
        if index == len(crumbs) - 1:
            parts.append(f'<span class="breadcrumb-current">{label}</span>')
        else:
            parts.append(f'<span>{label}</span>')

    separator = '<span class="breadcrumb-sep">/</span>'
    return f'<div class="breadcrumbs">{separator.join(parts)}</div>'


def render_notification(notification: Notification) -> str:
    kind = NotificationType(notification.type)
    classes = f"notification notification-{kind.value}"
    if not notification.read:
        classes += " notification-unread"

    return (
        f'<div class="{classes}">'
        f'{NOTIFICATION_ICONS[kind]} <strong>{html.escape(notification.title)}</strong> '
        f'{html.escape(notification.message)}'
        f'<div class="notification-time">{notification.timestamp:%Y-%m-%d %H:%M}</div>'
        f'</div>'
    )


def render_notification_list(notifications, empty_text: str = "No notifications") -> str:
    if not notifications:
        return f'<div class="notification-time">{html.escape(empty_text)}</div>'
    return "".join(render_notification(n) for n in notifications)
