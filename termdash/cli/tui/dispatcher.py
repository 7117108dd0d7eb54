"""Input dispatch: global shortcuts, then the active view, then a fallback."""

from __future__ import annotations

import logging
from enum import Enum
from types import MappingProxyType
from typing import Callable, Mapping

from termdash.cli.tui.types import InputEvent, KeyEvent, MouseAction, MouseEvent, NotificationLevel, ViewId
from termdash.cli.tui.view_manager import ViewStateMachine
from termdash.cli.tui.views.base import Notify

logger = logging.getLogger(__name__)


class DispatchOutcome(str, Enum):
    """Which layer a key resolved to. Every key resolves to exactly one."""

    GLOBAL = "global"
    VIEW = "view"
    FALLBACK = "fallback"


QUIT_KEYS = frozenset({"q", "C-c"})
THEME_KEY = "t"

# "1".."4" in ViewId declaration order
VIEW_KEYS: Mapping[str, ViewId] = MappingProxyType({str(i): view_id for i, view_id in enumerate(ViewId, start=1)})

# Keys reserved for future navigation; they only announce themselves
RESERVED_KEYS: Mapping[str, str] = MappingProxyType(
    {
        "escape": "Escape key pressed",
        "tab": "Tab navigation coming soon",
        "enter": "Enter key pressed",
        "up": "Arrow up pressed",
        "down": "Arrow down pressed",
        "left": "Arrow left pressed",
        "right": "Arrow right pressed",
    }
)


class InputDispatcher:
    """Routes input events to exactly one handler."""

    def __init__(
        self,
        view_manager: ViewStateMachine,
        notify: Notify,
        *,
        on_quit: Callable[[], None],
        on_switch_view: Callable[[ViewId], None],
        on_toggle_theme: Callable[[], None],
        on_view_changed: Callable[[], None],
    ):
        """Initialize dispatcher.

        Args:
            view_manager: Source of the active view
            notify: Status-bar notification sink
            on_quit: Quit shortcut
            on_switch_view: View-switch digit, with the target view
            on_toggle_theme: Theme shortcut
            on_view_changed: Called after the active view consumed a key
        """
        self._views = view_manager
        self._notify = notify
        self._on_quit = on_quit
        self._on_switch_view = on_switch_view
        self._on_toggle_theme = on_toggle_theme
        self._on_view_changed = on_view_changed

    def dispatch(self, event: InputEvent) -> DispatchOutcome | None:
        """Route a key or mouse event. Other events are not input and return None."""
        if isinstance(event, KeyEvent):
            return self.dispatch_key(event.key)
        if isinstance(event, MouseEvent):
            return self.dispatch_mouse(event)
        return None

    def dispatch_key(self, key: str) -> DispatchOutcome:
        outcome = self._route_key(key)
        logger.debug("Key %r -> %s", key, outcome.value)
        return outcome

    def _route_key(self, key: str) -> DispatchOutcome:
        if key in QUIT_KEYS:
            self._on_quit()
            return DispatchOutcome.GLOBAL
        if key in VIEW_KEYS:
            self._on_switch_view(VIEW_KEYS[key])
            return DispatchOutcome.GLOBAL
        if key == THEME_KEY:
            self._on_toggle_theme()
            return DispatchOutcome.GLOBAL

        if key in RESERVED_KEYS:
            self._notify(RESERVED_KEYS[key], NotificationLevel.INFO)
            return DispatchOutcome.FALLBACK

        if self._views.handle_key(key):
            self._on_view_changed()
            return DispatchOutcome.VIEW

        view = self._views.active
        view_name = view.value if view is not None else "unknown"
        self._notify(f"Key '{key}' not available in {view_name} view", NotificationLevel.WARNING)
        return DispatchOutcome.FALLBACK

    def dispatch_mouse(self, event: MouseEvent) -> DispatchOutcome:
        if event.action is MouseAction.CLICK:
            self._notify(f"Mouse clicked at ({event.x}, {event.y})", NotificationLevel.INFO)
        elif event.action is MouseAction.WHEEL_UP:
            self._notify("Mouse wheel up", NotificationLevel.INFO)
        else:
            self._notify("Mouse wheel down", NotificationLevel.INFO)
        logger.debug("Mouse %s at (%d, %d)", event.action.value, event.x, event.y)
        return DispatchOutcome.FALLBACK
