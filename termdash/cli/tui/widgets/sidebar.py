"""Sidebar navigation widget."""

from typing import Mapping

from termdash.cli.tui.types import ViewId


class Sidebar:
    """Numbered view list with the active entry highlighted, plus shortcuts."""

    SHORTCUTS = [
        "q - Quit",
        "t - Toggle theme",
        "1-4 - Navigate",
    ]

    def __init__(self, titles: Mapping[ViewId, str]):
        # Numbered in ViewId order, matching the 1-4 shortcuts
        self.items = [(view_id, f"{number}. {titles[view_id]}") for number, view_id in enumerate(ViewId, start=1)]

    def content(self, active: ViewId | None) -> str:
        lines = ["[bold]Navigation[/bold]", ""]
        for view_id, label in self.items:
            if view_id is active:
                lines.append(f"[bold reverse]{label}[/bold reverse]")
            else:
                lines.append(label)
        lines += ["", "[bold]Shortcuts[/bold]", *self.SHORTCUTS]
        return "\n".join(lines)
