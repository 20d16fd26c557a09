"""
Notification surface for the dashboard (toast messages).
"""
import enum
import logging
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime
from typing import Deque, List, Optional

logger = logging.getLogger(__name__)


class NotificationSeverity(str, enum.Enum):
    DEFAULT = "default"
    SUCCESS = "success"
    DESTRUCTIVE = "destructive"


@dataclass
class Notification:
    title: str
    description: str
    severity: NotificationSeverity = NotificationSeverity.DEFAULT
    created_at: datetime = field(default_factory=datetime.now)


class NotificationCenter:
    """Keeps the most recent notifications and logs every one of them"""

    def __init__(self, limit: Optional[int] = 20):
        self._items: Deque[Notification] = deque(maxlen=limit)

    def notify(
        self,
        title: str,
        description: str,
        severity: NotificationSeverity = NotificationSeverity.DEFAULT,
    ) -> Notification:
        notification = Notification(title=title, description=description, severity=NotificationSeverity(severity))
        self._items.append(notification)

        if notification.severity is NotificationSeverity.DESTRUCTIVE:
            logger.warning(f"🔔 {title}: {description}")
        else:
            logger.info(f"🔔 {title}: {description}")
        return notification

    def success(self, description: str, title: str = "Success") -> Notification:
        return self.notify(title, description, NotificationSeverity.SUCCESS)

    def error(self, description: str, title: str = "Error") -> Notification:
        return self.notify(title, description, NotificationSeverity.DESTRUCTIVE)

    @property
    def notifications(self) -> List[Notification]:
        return list(self._items)

    def errors(self) -> List[Notification]:
        return [n for n in self._items if n.severity is NotificationSeverity.DESTRUCTIVE]

    def dismiss_all(self):
        self._items.clear()
