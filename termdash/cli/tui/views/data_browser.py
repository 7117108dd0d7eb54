"""Data browser view - sortable sample table."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, fields
from typing import Literal, TypeAlias

from rich.markup import escape

from termdash.cli.tui.state import ApplicationState
from termdash.cli.tui.theme import styled
from termdash.cli.tui.types import NotificationLevel, StyleRole, ThemeId
from termdash.cli.tui.views.base import Notify, heading, key_hint, title_line

logger = logging.getLogger(__name__)

SortColumn: TypeAlias = Literal["id", "name", "status", "value", "priority"]
SortDirection: TypeAlias = Literal["asc", "desc"]

COLUMNS: tuple[tuple[str, int], ...] = (
    ("ID", 8),
    ("Name", 20),
    ("Status", 12),
    ("Value", 10),
    ("Priority", 10),
)
COLUMN_SEPARATOR = " | "

STATUS_ROLES: dict[str, StyleRole] = {
    "Active": StyleRole.SUCCESS,
    "Completed": StyleRole.SUCCESS,
    "Pending": StyleRole.WARNING,
    "Cancelled": StyleRole.ERROR,
}

# Keys that sort, and the column each one sorts by
SORT_KEYS: dict[str, SortColumn] = {"s": "status", "n": "name", "v": "value"}


@dataclass(frozen=True)
class DataRow:
    """One project row."""

    id: str
    name: str
    status: str
    value: str
    priority: str

    def cells(self) -> list[str]:
        return [getattr(self, f.name) for f in fields(self)]


SAMPLE_ROWS: tuple[DataRow, ...] = (
    DataRow("001", "Project Alpha", "Active", "$1,234", "High"),
    DataRow("002", "Project Beta", "Pending", "$5,678", "Medium"),
    DataRow("003", "Project Gamma", "Completed", "$9,012", "Low"),
    DataRow("004", "Project Delta", "Active", "$3,456", "High"),
    DataRow("005", "Project Epsilon", "Cancelled", "$0", "Low"),
    DataRow("006", "Project Zeta", "Active", "$7,890", "Medium"),
    DataRow("007", "Project Eta", "Pending", "$2,345", "High"),
    DataRow("008", "Project Theta", "Completed", "$6,789", "Low"),
)


def parse_amount(value: str) -> int | None:
    """Parse ``$1,234`` style amounts; None if not a number."""
    digits = re.sub(r"[$,]", "", value)
    try:
        return int(digits)
    except ValueError:
        return None


def format_cells(cells: list[str]) -> list[str]:
    """Pad/truncate each cell to its column width."""
    return [cell.ljust(width)[:width] for cell, (_, width) in zip(cells, COLUMNS)]


class DataBrowserView:
    """View 2: Data Browser - owns its rows and sort order."""

    title = "Data Browser"

    def __init__(self, notify: Notify):
        self.notify = notify
        self.rows: list[DataRow] = list(SAMPLE_ROWS)
        self.sort_column: SortColumn | None = None
        self.sort_direction: SortDirection = "asc"

    # --- content ---------------------------------------------------------

    def content(self, state: ApplicationState) -> str:
        theme = state.theme
        stats = self.stats()
        lines = [
            title_line(theme, "Data Browser"),
            "",
            heading("Sample Data Table:"),
            "",
            self._header_row(),
            self._separator_row(),
            *(self._data_row(theme, row) for row in self.rows),
            "",
            heading("Statistics:"),
            f"• Total Projects: {stats['total']}",
            f"• Active: {stats['active']}",
            f"• Pending: {stats['pending']}",
            f"• Completed: {stats['completed']}",
            f"• Cancelled: {stats['cancelled']}",
            f"• Total Value: ${stats['total_value']:,}",
            "",
            heading("Instructions:"),
            "• Use arrow keys to navigate (coming soon)",
            f"• Press {key_hint(theme, 's')} to sort by status",
            f"• Press {key_hint(theme, 'n')} to sort by name",
            f"• Press {key_hint(theme, 'v')} to sort by value",
            f"• Press {key_hint(theme, 'r')} to refresh data",
        ]
        return "\n".join(lines)

    def _header_row(self) -> str:
        cells = format_cells([name for name, _ in COLUMNS])
        return COLUMN_SEPARATOR.join(f"[bold]{cell}[/bold]" for cell in cells)

    def _separator_row(self) -> str:
        return "-|-".join("-" * width for _, width in COLUMNS)

    def _data_row(self, theme: ThemeId, row: DataRow) -> str:
        cells = format_cells(row.cells())
        role = STATUS_ROLES.get(row.status)
        if role is None:
            return COLUMN_SEPARATOR.join(escape(cell) for cell in cells)
        return COLUMN_SEPARATOR.join(styled(theme, role, cell) for cell in cells)

    def stats(self) -> dict[str, int]:
        """Row counts per status and the summed value."""
        counts = {"total": len(self.rows), "active": 0, "pending": 0, "completed": 0, "cancelled": 0, "total_value": 0}
        for row in self.rows:
            key = row.status.lower()
            if key in counts:
                counts[key] += 1
            amount = parse_amount(row.value)
            if amount is not None:
                counts["total_value"] += amount
        return counts

    # --- actions ---------------------------------------------------------

    def sort_by(self, column: SortColumn) -> None:
        """Sort rows by column; the same column again flips the direction."""
        if self.sort_column == column:
            self.sort_direction = "desc" if self.sort_direction == "asc" else "asc"
        else:
            self.sort_column = column
            self.sort_direction = "asc"

        if column == "value":
            self.rows.sort(key=lambda row: parse_amount(row.value) or 0, reverse=self.sort_direction == "desc")
        else:
            self.rows.sort(key=lambda row: getattr(row, column), reverse=self.sort_direction == "desc")

        logger.debug("Rows sorted by %s (%s)", column, self.sort_direction)
        self.notify(f"Sorted by {column} ({self.sort_direction})", NotificationLevel.INFO)

    def reset(self) -> None:
        """Restore the sample rows in their original order."""
        self.rows = list(SAMPLE_ROWS)
        self.sort_column = None
        self.sort_direction = "asc"
        self.notify("Data refreshed", NotificationLevel.SUCCESS)

    def handle_key(self, key: str) -> bool:
        if key in SORT_KEYS:
            self.sort_by(SORT_KEYS[key])
            return True
        if key == "r":
            self.reset()
            return True
        return False
