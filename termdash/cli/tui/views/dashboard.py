"""Dashboard view - overview and quick actions."""

from __future__ import annotations

import logging

from termdash.cli.tui.state import ApplicationState
from termdash.cli.tui.theme import THEME_ICONS
from termdash.cli.tui.types import NotificationLevel, StyleRole
from termdash.cli.tui.views.base import Notify, heading, key_hint, system_info_lines, title_line

logger = logging.getLogger(__name__)


class DashboardView:
    """View 1: Dashboard."""

    title = "Dashboard"

    def __init__(self, notify: Notify, app_title: str = "Terminal Dashboard"):
        self.notify = notify
        self.app_title = app_title
        self.refresh_count = 0

    def content(self, state: ApplicationState) -> str:
        theme = state.theme
        lines = [
            title_line(theme, "Dashboard"),
            "",
            f"Welcome to {self.app_title}!",
            "",
            heading("Features:"),
            "• Fixed four-region layout",
            "• Responsive to terminal resizes",
            "• Keyboard navigation",
            "• Multiple views",
            "• Status-bar notifications",
            "• Light and dark themes",
            "",
            heading("Quick Stats:"),
            "• Views: 4",
            "• Regions: 4",
            "• Themes: 2",
            f"• Current Theme: {theme.value} {THEME_ICONS[theme]}",
            "",
            heading("Getting Started:"),
            "Use the number keys (1-4) to navigate between views:",
            f"{key_hint(theme, '1')} - Dashboard (current)",
            f"{key_hint(theme, '2')} - Data Browser",
            f"{key_hint(theme, '3')} - Settings",
            f"{key_hint(theme, '4')} - Help",
            "",
            f"Press {key_hint(theme, 'q', StyleRole.ERROR)} or {key_hint(theme, 'Ctrl+C', StyleRole.ERROR)} to quit.",
            f"Press {key_hint(theme, 't', StyleRole.WARNING)} to toggle theme.",
            "",
            heading("System Information:"),
            *system_info_lines(),
        ]
        return "\n".join(lines)

    def handle_key(self, key: str) -> bool:
        if key == "r":
            self.refresh_count += 1
            logger.debug("Dashboard refreshed (%d)", self.refresh_count)
            self.notify("Dashboard refreshed", NotificationLevel.SUCCESS)
            return True
        return False
