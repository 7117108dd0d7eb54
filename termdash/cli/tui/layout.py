"""Fixed four-region screen layout.

Rows/columns are character cells, origin top-left:

    +------------------------------+  row 0
    | header (3 rows)              |
    +---------+--------------------+  row 3
    | sidebar | content            |
    | 20 cols |                    |
    +---------+--------------------+  row height-1
    | status bar (1 row)           |
    +------------------------------+

Negative sizes are clamped to zero so a tiny terminal yields empty
regions instead of invalid geometry.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from termdash.constants import CHROME_ROWS, HEADER_HEIGHT, SIDEBAR_WIDTH, STATUS_BAR_HEIGHT
from termdash.cli.tui.types import RegionSlot


@dataclass(frozen=True)
class Region:
    """Rectangular cell area."""

    left: int
    top: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.left + self.width

    @property
    def bottom(self) -> int:
        return self.top + self.height

    def contains(self, x: int, y: int) -> bool:
        return self.left <= x < self.right and self.top <= y < self.bottom


@dataclass(frozen=True)
class Layout:
    """Geometry of the four named regions."""

    header: Region
    sidebar: Region
    content: Region
    status_bar: Region

    def region(self, slot: RegionSlot) -> Region:
        return {
            RegionSlot.HEADER: self.header,
            RegionSlot.SIDEBAR: self.sidebar,
            RegionSlot.CONTENT: self.content,
            RegionSlot.STATUS_BAR: self.status_bar,
        }[slot]

    def __iter__(self) -> Iterator[tuple[RegionSlot, Region]]:
        for slot in RegionSlot:
            yield slot, self.region(slot)


def compute_layout(width: int, height: int) -> Layout:
    """Compute the four regions for a terminal of ``width`` x ``height`` cells."""
    width = max(0, width)
    height = max(0, height)
    band_height = max(0, height - CHROME_ROWS)
    sidebar_width = min(SIDEBAR_WIDTH, width)

    return Layout(
        header=Region(0, 0, width, min(HEADER_HEIGHT, height)),
        sidebar=Region(0, HEADER_HEIGHT, sidebar_width, band_height),
        content=Region(sidebar_width, HEADER_HEIGHT, width - sidebar_width, band_height),
        status_bar=Region(0, max(0, height - STATUS_BAR_HEIGHT), width, min(STATUS_BAR_HEIGHT, height)),
    )


def centered(width: int, height: int, box_width: int, box_height: int) -> Region:
    """Region of ``box_width`` x ``box_height`` centred on the screen, shrunk to fit."""
    box_width = max(0, min(box_width, width))
    box_height = max(0, min(box_height, height))
    return Region(
        left=max(0, (width - box_width) // 2),
        top=max(0, (height - box_height) // 2),
        width=box_width,
        height=box_height,
    )
