"""Notification sink: the engine decides that an alert is raised, not how it is delivered."""

import logging
from typing import Protocol

from app.models.alerts import AlertSeverity, ExceptionAlert

logger = logging.getLogger("imk.notifications")


class NotificationSink(Protocol):
    def publish(self, alert: ExceptionAlert) -> None: ...


class LoggingNotificationSink:
    """Default sink: writes each raised exception to the log."""

    def publish(self, alert: ExceptionAlert) -> None:
        level = logging.WARNING if alert.severity == AlertSeverity.HIGH else logging.INFO
        logger.log(
            level,
            "Exception %s raised for %s: %s (%s)%s",
            alert.id,
            alert.tracking_number,
            alert.type.value,
            alert.severity.value,
            f" - {alert.note}" if alert.note else "",
        )


class RecordingNotificationSink:
    """Keeps published alerts in memory. Used when a caller wants to inspect them."""

    def __init__(self):
        self.published: list[ExceptionAlert] = []

    def publish(self, alert: ExceptionAlert) -> None:
        self.published.append(alert)
