"""Display backend: region handles over a curses screen.

The shell never draws directly. It creates regions (geometry + style +
markup content), updates them, detaches them, and asks the backend to
render. Content is Rich console markup; each line is parsed with
``Text.from_markup`` and painted with the matching curses attributes.
"""

from __future__ import annotations

import curses
import itertools
import logging
from dataclasses import dataclass
from typing import Optional, Protocol

from rich.cells import cell_len
from rich.color import Color, ColorParseError, ColorSystem
from rich.errors import MarkupError
from rich.style import Style as RichStyle
from rich.text import Text

from termdash.cli.tui.layout import Region
from termdash.cli.tui.theme import Style
from termdash.cli.tui.types import CursesWindow, InputEvent, KeyEvent, MouseAction, MouseEvent, ResizeEvent

logger = logging.getLogger(__name__)

# Mouse mask for curses - clicks and scroll wheel (NOT drag to allow text selection)
MOUSE_MASK = (
    curses.BUTTON1_CLICKED
    | curses.BUTTON4_PRESSED
    | 0x8000000
    | 0x200000  # Scroll down (varies by system)
)
_WHEEL_DOWN_MASK = 0x8000000 | 0x200000

# Curses key codes -> normalised key names
KEY_NAMES: dict[int, str] = {
    curses.KEY_UP: "up",
    curses.KEY_DOWN: "down",
    curses.KEY_LEFT: "left",
    curses.KEY_RIGHT: "right",
    curses.KEY_ENTER: "enter",
    10: "enter",
    13: "enter",
    9: "tab",
    27: "escape",
    3: "C-c",
}


def key_name(code: int) -> str:
    """Normalise a curses key code to the dispatcher's key vocabulary."""
    if code in KEY_NAMES:
        return KEY_NAMES[code]
    if 32 <= code < 127:
        return chr(code)
    try:
        return curses.keyname(code).decode("utf-8", "replace")
    except ValueError:
        return f"KEY({code})"


@dataclass(frozen=True)
class RegionHandle:
    """Opaque reference to a region owned by a backend."""

    id: int


class DisplayBackend(Protocol):
    """What the shell needs from a terminal."""

    def size(self) -> tuple[int, int]: ...

    def create_region(self, geometry: Region, style: Style, content: str, *, border: bool = True) -> RegionHandle: ...

    def set_content(self, handle: RegionHandle, text: str) -> None: ...

    def set_geometry(self, handle: RegionHandle, geometry: Region) -> None: ...

    def set_style(self, handle: RegionHandle, style: Style) -> None: ...

    def detach(self, handle: RegionHandle) -> None: ...

    def render(self) -> None: ...

    def poll_event(self, timeout_ms: int) -> Optional[InputEvent]: ...


@dataclass
class _RegionRecord:
    geometry: Region
    style: Style
    content: str
    border: bool


class CursesBackend:
    """DisplayBackend painting regions onto a curses window."""

    def __init__(self, stdscr: CursesWindow, *, mouse: bool = True):
        self._stdscr = stdscr
        self._regions: dict[int, _RegionRecord] = {}
        self._ids = itertools.count(1)
        self._pairs: dict[tuple[int, int], int] = {}
        self._colors = 0
        self._setup(mouse)

    def _setup(self, mouse: bool) -> None:
        try:
            curses.curs_set(0)
        except curses.error:
            pass  # Terminal cannot hide the cursor
        if curses.has_colors():
            curses.start_color()
            try:
                curses.use_default_colors()
            except curses.error:
                pass  # No default-color support; pairs still work
            self._colors = curses.COLORS
        if mouse:
            curses.mousemask(MOUSE_MASK)

    # --- regions ---------------------------------------------------------

    def size(self) -> tuple[int, int]:
        height, width = self._stdscr.getmaxyx()
        return width, height

    def create_region(self, geometry: Region, style: Style, content: str, *, border: bool = True) -> RegionHandle:
        handle = RegionHandle(next(self._ids))
        self._regions[handle.id] = _RegionRecord(geometry, style, content, border)
        return handle

    def set_content(self, handle: RegionHandle, text: str) -> None:
        self._regions[handle.id].content = text

    def set_geometry(self, handle: RegionHandle, geometry: Region) -> None:
        self._regions[handle.id].geometry = geometry

    def set_style(self, handle: RegionHandle, style: Style) -> None:
        self._regions[handle.id].style = style

    def detach(self, handle: RegionHandle) -> None:
        self._regions.pop(handle.id, None)

    # --- drawing ---------------------------------------------------------

    def render(self) -> None:
        """Repaint every region in creation order and flush to the terminal."""
        self._stdscr.erase()
        for record in self._regions.values():
            self._draw_region(record)
        self._stdscr.refresh()

    def _draw_region(self, record: _RegionRecord) -> None:
        g = record.geometry
        if g.width <= 0 or g.height <= 0:
            return

        base_attr = self._style_attr(record.style)
        blank = " " * g.width
        for row in range(g.height):
            self._put(g.top + row, g.left, blank, base_attr)

        inner = g
        if record.border and g.width >= 2 and g.height >= 2:
            self._draw_border(g, base_attr)
            inner = Region(g.left + 1, g.top + 1, g.width - 2, g.height - 2)

        for i, line in enumerate(record.content.split("\n")[: inner.height]):
            self._draw_line(inner.top + i, inner.left, inner.width, line, record.style)

    def _draw_border(self, g: Region, attr: int) -> None:
        inner_width = g.width - 2
        self._put(g.top, g.left, "┌" + "─" * inner_width + "┐", attr)
        for row in range(g.top + 1, g.bottom - 1):
            self._put(row, g.left, "│", attr)
            self._put(row, g.right - 1, "│", attr)
        self._put(g.bottom - 1, g.left, "└" + "─" * inner_width + "┘", attr)

    def _draw_line(self, row: int, col: int, width: int, markup: str, base: Style) -> None:
        if width <= 0:
            return
        try:
            text = Text.from_markup(markup, emoji=False)
        except MarkupError:
            logger.debug("Invalid markup, drawing literally: %r", markup)
            text = Text(markup)
        text.truncate(width)

        for run, span_style in _styled_runs(text):
            self._put(row, col, run, self._style_attr(base, span_style))
            col += cell_len(run)

    def _put(self, row: int, col: int, text: str, attr: int) -> None:
        try:
            self._stdscr.addstr(row, col, text, attr)
        except curses.error:
            pass  # Off-screen or bottom-right cell; the rest of the frame still draws

    # --- colors ----------------------------------------------------------

    def _style_attr(self, base: Style, span: Optional[RichStyle] = None) -> int:
        fg: Color | str | None = base.foreground
        bg: Color | str | None = base.background
        attr = curses.A_BOLD if base.bold else curses.A_NORMAL
        if span is not None:
            fg = span.color or fg
            bg = span.bgcolor or bg
            if span.bold:
                attr |= curses.A_BOLD
            if span.dim:
                attr |= curses.A_DIM
            if span.reverse:
                attr |= curses.A_REVERSE
            if span.underline:
                attr |= curses.A_UNDERLINE
        return attr | self._pair_attr(self._color_number(fg), self._color_number(bg))

    def _color_number(self, color: Color | str | None) -> int:
        """Terminal color index for a Rich color or color string (-1 = terminal default)."""
        if color is None or self._colors <= 0:
            return -1
        if isinstance(color, str):
            try:
                color = Color.parse(color)
            except ColorParseError:
                return -1
        system = ColorSystem.EIGHT_BIT if self._colors >= 256 else ColorSystem.STANDARD
        number = color.downgrade(system).number
        if number is None:
            return -1
        return number % self._colors if self._colors < 16 else number

    def _pair_attr(self, fg: int, bg: int) -> int:
        if self._colors <= 0 or (fg, bg) == (-1, -1):
            return 0
        pair = self._pairs.get((fg, bg))
        if pair is None:
            pair = len(self._pairs) + 1
            if pair >= curses.COLOR_PAIRS:
                return 0
            try:
                curses.init_pair(pair, fg, bg)
            except curses.error:
                return 0
            self._pairs[(fg, bg)] = pair
        return curses.color_pair(pair)

    # --- input -----------------------------------------------------------

    def poll_event(self, timeout_ms: int) -> Optional[InputEvent]:
        """Wait up to ``timeout_ms`` for input and translate it."""
        self._stdscr.timeout(timeout_ms)
        code = self._stdscr.getch()
        if code == -1:
            return None
        if code == curses.KEY_RESIZE:
            curses.update_lines_cols()
            width, height = self.size()
            return ResizeEvent(width, height)
        if code == curses.KEY_MOUSE:
            return self._read_mouse()
        return KeyEvent(key_name(code))

    def _read_mouse(self) -> Optional[MouseEvent]:
        try:
            _, mx, my, _, bstate = curses.getmouse()
        except curses.error:
            return None  # Mouse event couldn't be retrieved
        if bstate & curses.BUTTON4_PRESSED:
            return MouseEvent(MouseAction.WHEEL_UP, mx, my)
        if bstate & _WHEEL_DOWN_MASK:
            return MouseEvent(MouseAction.WHEEL_DOWN, mx, my)
        if bstate & curses.BUTTON1_CLICKED:
            return MouseEvent(MouseAction.CLICK, mx, my)
        return None


def _styled_runs(text: Text) -> list[tuple[str, Optional[RichStyle]]]:
    """Split a Text into (substring, combined span style) runs."""
    plain = text.plain
    if not plain:
        return []
    cuts = {0, len(plain)}
    for span in text.spans:
        cuts.update((max(0, span.start), min(len(plain), span.end)))
    bounds = sorted(cuts)

    runs: list[tuple[str, Optional[RichStyle]]] = []
    for start, end in zip(bounds, bounds[1:]):
        if start >= end:
            continue
        style: Optional[RichStyle] = None
        for span in text.spans:
            if span.start <= start < span.end:
                span_style = span.style if isinstance(span.style, RichStyle) else RichStyle.parse(str(span.style))
                style = span_style if style is None else style + span_style
        runs.append((plain[start:end], style))
    return runs
