"""View capability shared by all TUI views."""

from __future__ import annotations

import platform
import sys
from typing import Callable, Protocol

from termdash.cli.tui.state import ApplicationState
from termdash.cli.tui.theme import styled
from termdash.cli.tui.types import NotificationLevel, StyleRole, ThemeId

Notify = Callable[[str, NotificationLevel], None]


class View(Protocol):
    """What the view state machine needs from a view.

    Views never touch the display: ``content()`` returns markup that the
    state machine pushes into the content region, and ``handle_key()``
    only mutates the view's own state.
    """

    title: str

    def content(self, state: ApplicationState) -> str:
        """Return Rich markup for the content region."""
        ...

    def handle_key(self, key: str) -> bool:
        """Consume a view-local key. Returns True if handled."""
        ...


def heading(text: str) -> str:
    """Bold section heading line."""
    return f"[bold]{text}[/bold]"


def title_line(theme: ThemeId, text: str) -> str:
    """View title in the theme's title style."""
    return styled(theme, StyleRole.TITLE, text)


def key_hint(theme: ThemeId, key: str, role: StyleRole = StyleRole.SUCCESS) -> str:
    """A highlighted key name, e.g. the ``s`` in 'Press s to sort'."""
    return styled(theme, role, key)


def system_info_lines() -> list[str]:
    """Interpreter and host lines shown by several views."""
    return [
        f"• Python Version: {platform.python_version()}",
        f"• Platform: {sys.platform}",
        f"• Architecture: {platform.machine() or 'unknown'}",
    ]
