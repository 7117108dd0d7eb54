"""Help view - static documentation."""

from __future__ import annotations

from termdash import __version__
from termdash.cli.tui.state import ApplicationState
from termdash.cli.tui.types import NotificationLevel, StyleRole
from termdash.cli.tui.views.base import Notify, heading, key_hint, system_info_lines, title_line


class HelpView:
    """View 4: Help."""

    title = "Help"

    def __init__(self, notify: Notify):
        self.notify = notify

    def content(self, state: ApplicationState) -> str:
        theme = state.theme

        def k(key: str, role: StyleRole = StyleRole.SUCCESS) -> str:
            return key_hint(theme, key, role)

        lines = [
            title_line(theme, "Help & Documentation"),
            "",
            heading("About:"),
            "A terminal dashboard with a fixed four-region layout,",
            "switchable views, themes and status-bar notifications.",
            "",
            heading("Navigation:"),
            f"{k('1')} - Dashboard: Overview and quick actions",
            f"{k('2')} - Data Browser: View and manage data",
            f"{k('3')} - Settings: Configure application",
            f"{k('4')} - Help: This documentation",
            "",
            heading("Keyboard Shortcuts:"),
            f"{k('q', StyleRole.ERROR)} or {k('Ctrl+C', StyleRole.ERROR)} - Quit application",
            f"{k('1-4')} - Switch between views",
            f"{k('t', StyleRole.WARNING)} - Toggle theme (light/dark)",
            f"{k('Tab')} - Focus next element (coming soon)",
            f"{k('Enter')} - Activate/Confirm (coming soon)",
            f"{k('Escape')} - Cancel/Go back (coming soon)",
            "",
            heading("View-Specific Shortcuts:"),
            heading("Dashboard:"),
            f"  {k('r')} - Refresh dashboard",
            "",
            heading("Data Browser:"),
            f"  {k('s')} - Sort by status",
            f"  {k('n')} - Sort by name",
            f"  {k('v')} - Sort by value",
            f"  {k('r')} - Refresh data",
            "",
            heading("Settings:"),
            f"  {k('r')} - Reset to defaults",
            f"  {k('s')} - Save settings",
            f"  {k('e')} - Export settings",
            f"  {k('i')} - Import settings",
            f"  {k('b')} - Toggle borders",
            f"  {k('n')} - Toggle notifications",
            f"  {k('d')} - Toggle debug mode",
            "",
            heading("Tips:"),
            "• Resize your terminal window to see the layout adapt",
            "• Check the status bar for the current view and messages",
            f"• Press {k('t', StyleRole.WARNING)} to switch between light and dark themes",
            "• For best results use a terminal of at least 80x24 characters",
            "",
            heading("Version Information:"),
            f"• Application Version: {__version__}",
            *system_info_lines(),
        ]
        return "\n".join(lines)

    def handle_key(self, key: str) -> bool:
        if key == "h":
            self.notify("You are already in the help view!", NotificationLevel.INFO)
            return True
        return False
