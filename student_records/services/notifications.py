# /student_records/services/notifications.py

import logging
from typing import List, Protocol

from ..models.student_model import Notification

log = logging.getLogger(__name__)


class NotificationSink(Protocol):
    def success(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...


class ToastQueue:
    """
    Collects toasts until a view drains them. Every toast is also written to
    the log so failures are visible server-side.
    """

    def __init__(self):
        self._pending: List[Notification] = []

    def success(self, message: str) -> None:
        log.info("toast success: %s", message)
        self._pending.append(Notification(level="success", message=message))

    def error(self, message: str) -> None:
        log.warning("toast error: %s", message)
        self._pending.append(Notification(level="error", message=message))

    def drain(self) -> List[Notification]:
        """Returns the pending toasts and clears the queue."""
        drained, self._pending = self._pending, []
        return drained
