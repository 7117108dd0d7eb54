"""Main TUI application: regions, views, theme and notifications."""

from __future__ import annotations

import logging
import math
from typing import Optional

from termdash.config import UIConfig
from termdash.constants import EXIT_OK, QUIT_BOX_HEIGHT, QUIT_BOX_WIDTH
from termdash.cli.tui.backend import DisplayBackend, RegionHandle
from termdash.cli.tui.dispatcher import DispatchOutcome, InputDispatcher
from termdash.cli.tui.layout import Layout, centered, compute_layout
from termdash.cli.tui.notifications import Notification, NotificationTimer
from termdash.cli.tui.scheduler import Scheduler
from termdash.cli.tui.state import ApplicationState
from termdash.cli.tui.theme import resolve, toggle
from termdash.cli.tui.types import InputEvent, KeyEvent, NotificationLevel, RegionSlot, ResizeEvent, StyleRole, ViewId
from termdash.cli.tui.view_manager import ViewStateMachine
from termdash.cli.tui.views import build_views
from termdash.cli.tui.widgets.header import Header
from termdash.cli.tui.widgets.sidebar import Sidebar
from termdash.cli.tui.widgets.status_bar import StatusBar

logger = logging.getLogger(__name__)

# Chrome regions owned by the app; the content region belongs to the view state machine
CHROME_SLOTS = (RegionSlot.HEADER, RegionSlot.SIDEBAR, RegionSlot.STATUS_BAR)


class DashboardApp:
    """Application shell.

    Owns ApplicationState and every display region except the content
    region. All mutation happens in the methods below, called from the
    single event loop in ``run()``.
    """

    def __init__(
        self,
        backend: DisplayBackend,
        ui: Optional[UIConfig] = None,
        scheduler: Optional[Scheduler] = None,
    ):
        """Initialize the app.

        Args:
            backend: Display backend to draw on
            ui: UI settings (default: built-in defaults)
            scheduler: Timer queue (default: one on the monotonic clock)
        """
        self.backend = backend
        self.ui = ui or UIConfig()
        self.scheduler = scheduler or Scheduler()
        self.state = ApplicationState(theme=self.ui.theme)

        self.notifications = NotificationTimer(
            self.scheduler,
            on_change=self._on_notification_change,
            default_duration_ms=self.ui.notification_duration_ms,
        )
        self.views = ViewStateMachine(
            build_views(self.notify, app_title=self.ui.title, clock=self.scheduler.now),
            backend,
        )
        self.dispatcher = InputDispatcher(
            self.views,
            self.notify,
            on_quit=self.quit,
            on_switch_view=self.switch_view,
            on_toggle_theme=self.toggle_theme,
            on_view_changed=self._refresh_content,
        )

        self.header = Header(self.ui.title)
        self.sidebar = Sidebar({view_id: self.views.get(view_id).title for view_id in ViewId})
        self.status_bar = StatusBar()

        self._regions: dict[RegionSlot, RegionHandle] = {}
        self._quit_region: RegionHandle | None = None
        self.running = False
        self.exit_code: int | None = None
        self._interrupted = False

    # --- lifecycle -------------------------------------------------------

    def start(self) -> None:
        """Create the regions and show the start view."""
        self.state.width, self.state.height = self.backend.size()
        layout = self.layout()
        theme = self.state.theme
        for slot in CHROME_SLOTS:
            self._regions[slot] = self.backend.create_region(
                layout.region(slot),
                resolve(theme, StyleRole(slot.value)),
                self._chrome_content(slot),
                border=slot is not RegionSlot.STATUS_BAR,
            )
        self.views.switch(self.ui.start_view, layout.content, resolve(theme, StyleRole.CONTENT), self.state)
        self.state.active_view = self.ui.start_view
        self._refresh_chrome(RegionSlot.SIDEBAR, RegionSlot.STATUS_BAR)
        self.running = True
        logger.info(
            "Started (%dx%d, view=%s, theme=%s)",
            self.state.width,
            self.state.height,
            self.state.active_view.value,
            theme.value,
        )

    def run(self) -> int:
        """Main event loop.

        Polls for input with a short timeout so timers (notification
        expiry, quit grace) fire on time, and redraws only when something
        happened.

        Returns:
            Exit code set by ``stop()``
        """
        if not self.running:
            self.start()
        self.backend.render()

        while self.running:
            event = self.backend.poll_event(self._poll_timeout_ms())
            if event is None and self._interrupted:
                self._interrupted = False
                event = KeyEvent("C-c")
            if event is not None:
                self.handle_event(event)
            ran = self.scheduler.run_due()
            if self.running and (event is not None or ran):
                self.backend.render()

        return EXIT_OK if self.exit_code is None else self.exit_code

    def _poll_timeout_ms(self) -> int:
        timeout = self.ui.poll_interval_ms
        delay = self.scheduler.next_delay()
        if delay is not None:
            timeout = min(timeout, math.ceil(delay * 1000))
        return max(0, timeout)

    def interrupt(self) -> None:
        """Queue Ctrl-C as a key press for the next loop iteration.

        Safe to call from a signal handler: only a flag is set here.
        """
        self._interrupted = True

    def stop(self, exit_code: int = EXIT_OK) -> None:
        """Leave the event loop after the current iteration."""
        logger.info("Stopping (exit code %d)", exit_code)
        self.running = False
        self.exit_code = exit_code

    # --- events ----------------------------------------------------------

    def handle_event(self, event: InputEvent) -> DispatchOutcome | None:
        if isinstance(event, ResizeEvent):
            self.resize(event.width, event.height)
            return None
        return self.dispatcher.dispatch(event)

    def layout(self) -> Layout:
        return compute_layout(self.state.width, self.state.height)

    def resize(self, width: int, height: int) -> None:
        """Recompute every region for the new terminal size."""
        logger.debug("Resize %dx%d -> %dx%d", self.state.width, self.state.height, width, height)
        self.state.width, self.state.height = width, height
        layout = self.layout()
        for slot, handle in self._regions.items():
            self.backend.set_geometry(handle, layout.region(slot))
        self.views.relayout(layout.content)
        if self._quit_region is not None:
            self.backend.set_geometry(self._quit_region, centered(width, height, QUIT_BOX_WIDTH, QUIT_BOX_HEIGHT))

    def switch_view(self, view_id: ViewId) -> None:
        content_style = resolve(self.state.theme, StyleRole.CONTENT)
        if not self.views.switch(view_id, self.layout().content, content_style, self.state):
            return
        self.state.active_view = view_id
        self._refresh_chrome(RegionSlot.SIDEBAR, RegionSlot.STATUS_BAR)

    def toggle_theme(self) -> None:
        """Flip light/dark and restyle every region."""
        theme = toggle(self.state.theme)
        self.state.theme = theme
        logger.debug("Theme -> %s", theme.value)
        for slot, handle in self._regions.items():
            self.backend.set_style(handle, resolve(theme, StyleRole(slot.value)))
        self.views.restyle(resolve(theme, StyleRole.CONTENT))
        if self._quit_region is not None:
            self.backend.set_style(self._quit_region, resolve(theme, StyleRole.HEADER))
        self._refresh_chrome(*CHROME_SLOTS)
        self._refresh_content()

    def notify(self, message: str, level: NotificationLevel = NotificationLevel.INFO) -> None:
        """Show a temporary status-bar notification."""
        self.notifications.show(message, level)

    def quit(self) -> None:
        """Show the goodbye box, then stop after the grace delay."""
        if self.state.quit_requested:
            return
        self.state.quit_requested = True
        logger.info("Quit requested")
        box = centered(self.state.width, self.state.height, QUIT_BOX_WIDTH, QUIT_BOX_HEIGHT)
        message = f"Thanks for using {self.ui.title}!"
        self._quit_region = self.backend.create_region(
            box,
            resolve(self.state.theme, StyleRole.HEADER),
            "\n".join(["", message.center(max(0, box.width - 2))]),
        )
        self.scheduler.call_later(self.ui.quit_grace_ms / 1000, self.stop, name="quit-grace")

    # --- region content --------------------------------------------------

    def _chrome_content(self, slot: RegionSlot) -> str:
        if slot is RegionSlot.HEADER:
            return self.header.content(self.state.theme)
        if slot is RegionSlot.SIDEBAR:
            return self.sidebar.content(self.state.active_view)
        return self.status_bar.content(self.state.active_view, self.state.theme, self.notifications.current)

    def _refresh_chrome(self, *slots: RegionSlot) -> None:
        for slot in slots:
            handle = self._regions.get(slot)
            if handle is not None:
                self.backend.set_content(handle, self._chrome_content(slot))

    def _refresh_content(self) -> None:
        self.views.refresh(self.state)

    def _on_notification_change(self, _notification: Notification | None) -> None:
        self._refresh_chrome(RegionSlot.STATUS_BAR)
