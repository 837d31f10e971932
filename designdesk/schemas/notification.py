"""
Notification schema.

Notifications live only in the app's in-memory state; they are never persisted.
"""

from datetime import datetime
from enum import Enum
from pydantic import BaseModel, ConfigDict


class NotificationType(str, Enum):
    INFO = "info"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


class Notification(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    message: str
    type: NotificationType = NotificationType.INFO
    timestamp: datetime
    read: bool = False
