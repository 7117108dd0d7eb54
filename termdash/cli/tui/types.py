"""Shared TUI types."""

from __future__ import annotations

import curses
from dataclasses import dataclass
from enum import Enum
from typing import TypeAlias, Union


class ViewId(str, Enum):
    """Identifiers of the four fixed screens, in navigation order (keys 1-4)."""

    DASHBOARD = "dashboard"
    DATA_BROWSER = "data"
    SETTINGS = "settings"
    HELP = "help"


class ThemeId(str, Enum):
    """Built-in theme identifiers."""

    LIGHT = "light"
    DARK = "dark"


class NotificationLevel(str, Enum):
    """Notification severity levels."""

    INFO = "info"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


class RegionSlot(str, Enum):
    """Named screen regions."""

    HEADER = "header"
    SIDEBAR = "sidebar"
    CONTENT = "content"
    STATUS_BAR = "statusBar"


class StyleRole(str, Enum):
    """Semantic style roles resolved by the theme."""

    HEADER = "header"
    SIDEBAR = "sidebar"
    CONTENT = "content"
    STATUS_BAR = "statusBar"
    BUTTON = "button"
    BUTTON_ACTIVE = "buttonActive"
    ERROR = "error"
    SUCCESS = "success"
    WARNING = "warning"
    INFO = "info"
    MUTED = "muted"
    BORDER = "border"
    TITLE = "title"
    SUBTITLE = "subtitle"
    TEXT = "text"


class MouseAction(str, Enum):
    """Mouse event kinds reported by the backend."""

    CLICK = "click"
    WHEEL_UP = "wheelup"
    WHEEL_DOWN = "wheeldown"


@dataclass(frozen=True)
class KeyEvent:
    """A single key press, normalised to a string (``"q"``, ``"enter"``, ``"up"``...)."""

    key: str


@dataclass(frozen=True)
class MouseEvent:
    """A mouse click or wheel step."""

    action: MouseAction
    x: int = 0
    y: int = 0


@dataclass(frozen=True)
class ResizeEvent:
    """Terminal resized to the given size."""

    width: int
    height: int


InputEvent: TypeAlias = Union[KeyEvent, MouseEvent, ResizeEvent]

CursesWindow: TypeAlias = curses.window
