"""Status bar widget: current view, key hints and the live notification."""

from __future__ import annotations

from typing import Optional

from termdash.cli.tui.notifications import Notification
from termdash.cli.tui.theme import LEVEL_ROLES, styled
from termdash.cli.tui.types import ThemeId, ViewId


class StatusBar:
    """One-line status text, prefixed by the notification while one is live."""

    @staticmethod
    def status_text(view: Optional[ViewId]) -> str:
        name = view.value if view is not None else "none"
        return f"View: {name} | Press 'q' to quit | 1-4 for navigation | 't' to toggle theme"

    def content(self, view: Optional[ViewId], theme: ThemeId, notification: Optional[Notification] = None) -> str:
        status = self.status_text(view)
        if notification is None:
            return status
        # styled() escapes the message, so "[" in it is drawn literally
        return f"{styled(theme, LEVEL_ROLES[notification.level], notification.message)} | {status}"
