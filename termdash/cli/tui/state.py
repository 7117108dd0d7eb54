"""Application state model."""

from __future__ import annotations

from dataclasses import dataclass

from termdash.constants import DEFAULT_HEIGHT, DEFAULT_WIDTH
from termdash.cli.tui.types import ThemeId, ViewId


@dataclass
class ApplicationState:
    """State owned by the application shell.

    Mutated only by the shell's transition methods (switch view, toggle
    theme, resize, quit); views and widgets read it.
    """

    active_view: ViewId = ViewId.DASHBOARD
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    theme: ThemeId = ThemeId.LIGHT
    quit_requested: bool = False
