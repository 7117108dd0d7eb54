"""The four fixed views."""

from __future__ import annotations

import time
from typing import Callable

from termdash.constants import APP_TITLE
from termdash.cli.tui.types import ViewId
from termdash.cli.tui.views.base import Notify, View
from termdash.cli.tui.views.dashboard import DashboardView
from termdash.cli.tui.views.data_browser import DataBrowserView
from termdash.cli.tui.views.help import HelpView
from termdash.cli.tui.views.settings import SettingsView

__all__ = [
    "DashboardView",
    "DataBrowserView",
    "HelpView",
    "Notify",
    "SettingsView",
    "View",
    "build_views",
]


def build_views(
    notify: Notify,
    *,
    app_title: str = APP_TITLE,
    clock: Callable[[], float] = time.monotonic,
) -> dict[ViewId, View]:
    """Create one instance of every view, keyed by its id."""
    return {
        ViewId.DASHBOARD: DashboardView(notify, app_title=app_title),
        ViewId.DATA_BROWSER: DataBrowserView(notify),
        ViewId.SETTINGS: SettingsView(notify, clock=clock),
        ViewId.HELP: HelpView(notify),
    }
