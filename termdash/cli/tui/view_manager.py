"""View state machine: which view owns the content region."""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Mapping, Optional

from termdash.cli.tui.backend import DisplayBackend, RegionHandle
from termdash.cli.tui.layout import Region
from termdash.cli.tui.state import ApplicationState
from termdash.cli.tui.theme import Style
from termdash.cli.tui.types import ViewId
from termdash.cli.tui.views.base import View

logger = logging.getLogger(__name__)


class UnknownViewError(KeyError):
    """Raised when a view id is not one of the registered views."""

    def __init__(self, view_id: object):
        super().__init__(view_id)
        self.view_id = view_id

    def __str__(self) -> str:
        return f"View '{self.view_id}' not found"


class ViewStateMachine:
    """Holds the active view and its content region.

    Every ViewId has exactly one view instance for the lifetime of the
    process. Switching clears the old view's region and creates a fresh
    one for the new view; the view objects themselves are never
    destroyed, so their private state (sort order, settings) survives.
    """

    def __init__(self, views: Mapping[ViewId, View], backend: DisplayBackend):
        """Initialize the state machine.

        Args:
            views: One view per ViewId
            backend: Display backend that owns the content region

        Raises:
            ValueError: if a ViewId has no view
        """
        missing = [view_id.value for view_id in ViewId if view_id not in views]
        if missing:
            raise ValueError(f"No view registered for: {', '.join(missing)}")
        self._views: Mapping[ViewId, View] = MappingProxyType({view_id: views[view_id] for view_id in ViewId})
        self._backend = backend
        self._active: Optional[ViewId] = None
        self._handle: Optional[RegionHandle] = None

    @property
    def active(self) -> Optional[ViewId]:
        return self._active

    @property
    def active_view(self) -> Optional[View]:
        return self._views[self._active] if self._active is not None else None

    @property
    def handle(self) -> Optional[RegionHandle]:
        return self._handle

    def get(self, view_id: ViewId | str) -> View:
        """Look up a view by id or id string.

        Raises:
            UnknownViewError: if no such view exists
        """
        try:
            return self._views[ViewId(view_id)]
        except ValueError:
            raise UnknownViewError(view_id) from None

    def switch(self, view_id: ViewId | str, region: Region, style: Style, state: ApplicationState) -> bool:
        """Make ``view_id`` the active view and show its content.

        Switching to the already-active view does nothing. An unknown id is
        logged and leaves the current view in place.

        Returns:
            True if a transition happened
        """
        try:
            view = self.get(view_id)
        except UnknownViewError as e:
            logger.error("%s", e)
            return False

        target = ViewId(view_id)
        if target is self._active:
            return False

        logger.debug("View transition: %s -> %s", self._active.value if self._active else None, target.value)
        self.clear()
        self._active = target
        self._handle = self._backend.create_region(region, style, view.content(state))
        return True

    def clear(self) -> None:
        """Release the active view's region from the display."""
        if self._handle is not None:
            self._backend.detach(self._handle)
            self._handle = None

    def refresh(self, state: ApplicationState) -> None:
        """Push the active view's current content to its region."""
        view = self.active_view
        if view is not None and self._handle is not None:
            self._backend.set_content(self._handle, view.content(state))

    def relayout(self, region: Region) -> None:
        if self._handle is not None:
            self._backend.set_geometry(self._handle, region)

    def restyle(self, style: Style) -> None:
        if self._handle is not None:
            self._backend.set_style(self._handle, style)

    def handle_key(self, key: str) -> bool:
        """Offer a key to the active view."""
        view = self.active_view
        if view is None:
            return False
        return view.handle_key(key)
