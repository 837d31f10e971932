"""
In-memory notification list.

The list is a tuple ordered newest first. Every function returns a new tuple;
the app stores the result back in its session state.
"""

from datetime import datetime
from typing import Optional

from designdesk.config import DEFAULT_NOTIFICATION_CAP
from designdesk.schemas import Notification, NotificationType
from designdesk.utils import new_id, utcnow


Notifications = tuple[Notification, ...]


def add_notification(
    notifications: Notifications,
    title: str,
    message: str,
    type: NotificationType | str = NotificationType.INFO,
    cap: int = DEFAULT_NOTIFICATION_CAP,
    now: Optional[datetime] = None,
) -> Notifications:
    """Prepend a new unread notification, dropping the oldest beyond ``cap``."""
    notification = Notification(
        id=new_id(),
        title=title,
        message=message,
        type=NotificationType(type),
        timestamp=now or utcnow(),
    )
    return (notification, *notifications)[:cap]


def mark_read(notifications: Notifications, notification_id: str) -> Notifications:
    return tuple(
        n.model_copy(update={"read": True}) if n.id == notification_id else n
        for n in notifications
    )


def mark_all_read(notifications: Notifications) -> Notifications:
    return tuple(n if n.read else n.model_copy(update={"read": True}) for n in notifications)


def remove_notification(notifications: Notifications, notification_id: str) -> Notifications:
    return tuple(n for n in notifications if n.id != notification_id)


def unread_count(notifications: Notifications) -> int:
    return sum(1 for n in notifications if not n.read)
