"""Header bar widget."""

from rich.markup import escape

from termdash.constants import APP_TITLE
from termdash.cli.tui.theme import THEME_ICONS
from termdash.cli.tui.types import ThemeId


class Header:
    """Application title and current theme."""

    def __init__(self, title: str = APP_TITLE):
        self.title = title

    def content(self, theme: ThemeId) -> str:
        return f"[bold]{escape(self.title)}[/bold] | Theme: {theme.value} {THEME_ICONS[theme]} | Press 't' to toggle"
