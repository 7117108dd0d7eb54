"""Themes and semantic styling for the TUI.

Two built-in palettes (light and dark) map semantic roles to concrete
styles. Everything here is pure: the current theme lives in the
application state, never in this module.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional

from rich.markup import escape

from termdash.cli.tui.types import NotificationLevel, StyleRole, ThemeId


@dataclass(frozen=True)
class Style:
    """Concrete style record for a region or span."""

    foreground: str
    background: Optional[str] = None
    bold: bool = False

    def markup(self) -> str:
        """Return the Rich markup tag body for this style (e.g. ``bold #000000 on #007ACC``)."""
        parts: list[str] = []
        if self.bold:
            parts.append("bold")
        parts.append(self.foreground)
        if self.background:
            parts.append(f"on {self.background}")
        return " ".join(parts)


@dataclass(frozen=True)
class Palette:
    """Named colors a theme is built from."""

    background: str
    foreground: str
    primary: str
    secondary: str
    success: str
    warning: str
    error: str
    muted: str
    border: str


LIGHT_PALETTE = Palette(
    background="#FFFFFF",
    foreground="#000000",
    primary="#007ACC",
    secondary="#6C757D",
    success="#28A745",
    warning="#FFC107",
    error="#DC3545",
    muted="#6C757D",
    border="#DEE2E6",
)

DARK_PALETTE = Palette(
    background="#1E1E1E",
    foreground="#FFFFFF",
    primary="#007ACC",
    secondary="#6C757D",
    success="#28A745",
    warning="#FFC107",
    error="#DC3545",
    muted="#6C757D",
    border="#495057",
)

PALETTES: Mapping[ThemeId, Palette] = MappingProxyType(
    {
        ThemeId.LIGHT: LIGHT_PALETTE,
        ThemeId.DARK: DARK_PALETTE,
    }
)

THEME_ICONS: Mapping[ThemeId, str] = MappingProxyType({ThemeId.LIGHT: "☀", ThemeId.DARK: "☾"})

# Notification severity -> style role
LEVEL_ROLES: Mapping[NotificationLevel, StyleRole] = MappingProxyType(
    {
        NotificationLevel.INFO: StyleRole.INFO,
        NotificationLevel.SUCCESS: StyleRole.SUCCESS,
        NotificationLevel.WARNING: StyleRole.WARNING,
        NotificationLevel.ERROR: StyleRole.ERROR,
    }
)


def _build_styles(p: Palette) -> Mapping[StyleRole, Style]:
    return MappingProxyType(
        {
            StyleRole.HEADER: Style(p.foreground, p.primary, bold=True),
            StyleRole.SIDEBAR: Style(p.foreground, p.secondary),
            StyleRole.CONTENT: Style(p.foreground, p.background),
            StyleRole.STATUS_BAR: Style(p.secondary, p.background),
            StyleRole.BUTTON: Style(p.foreground, p.primary),
            StyleRole.BUTTON_ACTIVE: Style(p.background, p.primary, bold=True),
            StyleRole.ERROR: Style(p.error, bold=True),
            StyleRole.SUCCESS: Style(p.success, bold=True),
            StyleRole.WARNING: Style(p.warning, bold=True),
            StyleRole.INFO: Style(p.primary),
            StyleRole.MUTED: Style(p.muted),
            StyleRole.BORDER: Style(p.border),
            StyleRole.TITLE: Style(p.primary, bold=True),
            StyleRole.SUBTITLE: Style(p.secondary, bold=True),
            StyleRole.TEXT: Style(p.foreground),
        }
    )


_STYLES: Mapping[ThemeId, Mapping[StyleRole, Style]] = MappingProxyType(
    {theme_id: _build_styles(palette) for theme_id, palette in PALETTES.items()}
)


def toggle(theme_id: ThemeId) -> ThemeId:
    """Flip light <-> dark."""
    return ThemeId.DARK if theme_id is ThemeId.LIGHT else ThemeId.LIGHT


def resolve(theme_id: ThemeId, role: StyleRole | str) -> Style:
    """Resolve a semantic role to a concrete style for the given theme.

    Unknown roles fall back to the theme's plain foreground/background.
    """
    styles = _STYLES[theme_id]
    try:
        return styles[StyleRole(role)]
    except ValueError:
        palette = PALETTES[theme_id]
        return Style(palette.foreground, palette.background)


def styled(theme_id: ThemeId, role: StyleRole | str, text: str) -> str:
    """Wrap text in Rich markup for the role's style.

    The text is escaped, so user-supplied strings (key names, messages)
    can never open markup tags of their own.
    """
    style = resolve(theme_id, role)
    return f"[{style.markup()}]{escape(text)}[/]"
