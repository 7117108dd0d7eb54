"""Single-slot transient notifications with timed expiry."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from termdash.constants import NOTIFICATION_DURATION_MS
from termdash.cli.tui.scheduler import ScheduledTask, Scheduler
from termdash.cli.tui.types import NotificationLevel

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Notification:
    """A temporary status-bar message."""

    message: str
    level: NotificationLevel
    expires_at: float  # scheduler clock time when it disappears


class NotificationTimer:
    """Holds at most one live notification.

    A new ``show()`` replaces the current message and restarts the expiry
    timer; the old timer is cancelled and never fires.
    """

    def __init__(
        self,
        scheduler: Scheduler,
        on_change: Optional[Callable[[Optional[Notification]], None]] = None,
        default_duration_ms: int = NOTIFICATION_DURATION_MS,
    ):
        """Initialize notification timer.

        Args:
            scheduler: Scheduler used for expiry
            on_change: Called with the new notification (or None) whenever the slot changes
            default_duration_ms: Duration used when ``show()`` gets none
        """
        self._scheduler = scheduler
        self._on_change = on_change
        self.default_duration_ms = default_duration_ms
        self._current: Notification | None = None
        self._expiry: ScheduledTask | None = None

    @property
    def current(self) -> Notification | None:
        return self._current

    def show(
        self,
        message: str,
        level: NotificationLevel = NotificationLevel.INFO,
        duration_ms: int | None = None,
    ) -> Notification:
        """Show a notification, replacing any live one.

        Args:
            message: Text to display
            level: Severity, controls presentation
            duration_ms: Lifetime in milliseconds (default: ``default_duration_ms``)
        """
        self._cancel_expiry()
        duration_s = (self.default_duration_ms if duration_ms is None else duration_ms) / 1000
        notification = Notification(
            message=message,
            level=level,
            expires_at=self._scheduler.now() + duration_s,
        )
        self._current = notification
        self._expiry = self._scheduler.call_later(duration_s, self._expire, name="notification-expiry")
        logger.debug("Notification (%s): %s", level.value, message)
        self._changed()
        return notification

    def clear(self) -> None:
        """Remove the live notification now. No-op if nothing is shown."""
        if self._current is None and self._expiry is None:
            return
        self._cancel_expiry()
        self._current = None
        self._changed()

    def _expire(self) -> None:
        self._expiry = None
        if self._current is not None:
            logger.debug("Notification expired: %s", self._current.message)
        self._current = None
        self._changed()

    def _cancel_expiry(self) -> None:
        if self._expiry is not None:
            self._expiry.cancel()
            self._expiry = None

    def _changed(self) -> None:
        if self._on_change:
            self._on_change(self._current)
