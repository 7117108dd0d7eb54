"""Settings view - in-memory application settings."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, fields, replace
from typing import Callable

from termdash.cli.tui.state import ApplicationState
from termdash.cli.tui.theme import THEME_ICONS, styled
from termdash.cli.tui.types import NotificationLevel, StyleRole, ThemeId
from termdash.cli.tui.views.base import Notify, heading, key_hint, system_info_lines, title_line

logger = logging.getLogger(__name__)


@dataclass
class SettingsRecord:
    """Display and application toggles. Not persisted."""

    show_borders: bool = True
    show_status_bar: bool = True
    show_navigation: bool = True
    compact_mode: bool = False
    auto_save: bool = True
    notifications: bool = True
    debug_mode: bool = False
    log_level: str = "info"


# Keys that toggle a boolean setting
TOGGLE_KEYS: dict[str, str] = {
    "b": "show_borders",
    "n": "notifications",
    "d": "debug_mode",
}


class SettingsView:
    """View 3: Settings."""

    title = "Settings"

    def __init__(self, notify: Notify, clock: Callable[[], float] = time.monotonic):
        self.notify = notify
        self.settings = SettingsRecord()
        self._clock = clock
        self._started_at = clock()

    def content(self, state: ApplicationState) -> str:
        theme = state.theme
        s = self.settings
        lines = [
            title_line(theme, "Settings"),
            "",
            heading("Theme Settings:"),
            f"• Current Theme: {theme.value} {THEME_ICONS[theme]}",
            "• Available Themes: Light, Dark",
            f"• Press {key_hint(theme, 't')} to toggle theme",
            "",
            heading("Display Settings:"),
            f"• Show borders: {self._flag(theme, s.show_borders)}",
            f"• Show status bar: {self._flag(theme, s.show_status_bar)}",
            f"• Show navigation: {self._flag(theme, s.show_navigation)}",
            f"• Compact mode: {self._flag(theme, s.compact_mode)}",
            "",
            heading("Application Settings:"),
            f"• Auto-save: {self._flag(theme, s.auto_save)}",
            f"• Notifications: {self._flag(theme, s.notifications)}",
            f"• Debug mode: {self._flag(theme, s.debug_mode)}",
            f"• Log level: {s.log_level}",
            "",
            heading("Keyboard Shortcuts:"),
            f"• {key_hint(theme, '1-4')} - Navigate views",
            f"• {key_hint(theme, 'q')} - Quit application",
            f"• {key_hint(theme, 'Ctrl+C')} - Force quit",
            f"• {key_hint(theme, 't')} - Toggle theme",
            f"• {key_hint(theme, 'Tab')} - Focus next element (coming soon)",
            f"• {key_hint(theme, 'Enter')} - Activate/Confirm (coming soon)",
            "",
            heading("System Information:"),
            *system_info_lines(),
            f"• Uptime: {self.uptime_seconds()} seconds",
            "",
            heading("Configuration:"),
            "• Configuration file: config.yml (read-only)",
            "• Export settings: Available (coming soon)",
            "• Import settings: Available (coming soon)",
            "",
            heading("Instructions:"),
            f"• Press {key_hint(theme, 'r')} to reset to defaults",
            f"• Press {key_hint(theme, 's')} to save settings",
            f"• Press {key_hint(theme, 'e')} to export settings",
            f"• Press {key_hint(theme, 'i')} to import settings",
            f"• Press {key_hint(theme, 'b')}/{key_hint(theme, 'n')}/{key_hint(theme, 'd')}"
            " to toggle borders/notifications/debug mode",
        ]
        return "\n".join(lines)

    @staticmethod
    def _flag(theme: ThemeId, value: bool) -> str:
        if value:
            return styled(theme, StyleRole.SUCCESS, "Enabled")
        return styled(theme, StyleRole.ERROR, "Disabled")

    def uptime_seconds(self) -> int:
        return round(self._clock() - self._started_at)

    def toggle(self, name: str) -> None:
        """Flip a boolean setting and announce the new value."""
        if name not in {f.name for f in fields(SettingsRecord)}:
            raise KeyError(name)
        current = getattr(self.settings, name)
        if not isinstance(current, bool):
            raise TypeError(f"Setting {name!r} is not a toggle")
        self.settings = replace(self.settings, **{name: not current})
        logger.debug("Setting %s -> %s", name, not current)
        self.notify(f"{name} {'enabled' if not current else 'disabled'}", NotificationLevel.INFO)

    def reset(self) -> None:
        self.settings = SettingsRecord()
        self.notify("Settings reset to defaults", NotificationLevel.SUCCESS)

    def handle_key(self, key: str) -> bool:
        if key in TOGGLE_KEYS:
            self.toggle(TOGGLE_KEYS[key])
        elif key == "r":
            self.reset()
        # Save/export/import are placeholders: settings are never written to disk.
        elif key == "s":
            self.notify("Settings saved", NotificationLevel.SUCCESS)
        elif key == "e":
            self.notify("Settings exported", NotificationLevel.INFO)
        elif key == "i":
            self.notify("Settings imported", NotificationLevel.INFO)
        else:
            return False
        return True
