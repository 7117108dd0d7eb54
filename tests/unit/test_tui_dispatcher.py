"""Unit tests for input dispatch priority and completeness."""

from __future__ import annotations

import string
from unittest.mock import MagicMock

import pytest

from termdash.cli.tui.dispatcher import RESERVED_KEYS, VIEW_KEYS, DispatchOutcome, InputDispatcher
from termdash.cli.tui.layout import compute_layout
from termdash.cli.tui.state import ApplicationState
from termdash.cli.tui.theme import resolve
from termdash.cli.tui.types import (
    MouseAction,
    MouseEvent,
    NotificationLevel,
    ResizeEvent,
    StyleRole,
    ThemeId,
    ViewId,
)
from termdash.cli.tui.view_manager import ViewStateMachine
from termdash.cli.tui.views import build_views



def _show(machine: ViewStateMachine, view_id: ViewId) -> None:
    machine.switch(view_id, compute_layout(80, 24).content, resolve(ThemeId.LIGHT, StyleRole.CONTENT), ApplicationState())


@pytest.fixture
def wiring(backend):
    notify = MagicMock()
    views = build_views(notify)
    machine = ViewStateMachine(views, backend)
    _show(machine, ViewId.DASHBOARD)
    callbacks = MagicMock()
    dispatcher = InputDispatcher(
        machine,
        notify,
        on_quit=callbacks.quit,
        on_switch_view=callbacks.switch_view,
        on_toggle_theme=callbacks.toggle_theme,
        on_view_changed=callbacks.view_changed,
    )
    return dispatcher, machine, notify, callbacks


def test_digits_map_to_views_in_declaration_order() -> None:
    assert dict(VIEW_KEYS) == {
        "1": ViewId.DASHBOARD,
        "2": ViewId.DATA_BROWSER,
        "3": ViewId.SETTINGS,
        "4": ViewId.HELP,
    }


@pytest.mark.parametrize("key", ["q", "C-c"])
def test_quit_keys(wiring, key: str) -> None:
    dispatcher, _, notify, callbacks = wiring

    assert dispatcher.dispatch_key(key) is DispatchOutcome.GLOBAL
    callbacks.quit.assert_called_once_with()
    notify.assert_not_called()


def test_digit_switches_view(wiring) -> None:
    dispatcher, _, _, callbacks = wiring

    assert dispatcher.dispatch_key("3") is DispatchOutcome.GLOBAL
    callbacks.switch_view.assert_called_once_with(ViewId.SETTINGS)


def test_theme_key(wiring) -> None:
    dispatcher, _, _, callbacks = wiring

    assert dispatcher.dispatch_key("t") is DispatchOutcome.GLOBAL
    callbacks.toggle_theme.assert_called_once_with()


def test_global_shortcuts_win_over_view_keys(wiring) -> None:
    dispatcher, machine, _, callbacks = wiring
    view = machine.active_view
    view.handle_key = MagicMock(return_value=True)

    for key in ("q", "1", "t"):
        dispatcher.dispatch_key(key)

    view.handle_key.assert_not_called()
    callbacks.view_changed.assert_not_called()


def test_view_key_is_handled_by_active_view(wiring) -> None:
    dispatcher, _, notify, callbacks = wiring

    assert dispatcher.dispatch_key("r") is DispatchOutcome.VIEW
    notify.assert_called_once_with("Dashboard refreshed", NotificationLevel.SUCCESS)
    callbacks.view_changed.assert_called_once_with()


def test_unhandled_key_warns_with_view_name(wiring) -> None:
    dispatcher, machine, notify, callbacks = wiring

    assert dispatcher.dispatch_key("x") is DispatchOutcome.FALLBACK
    notify.assert_called_once_with("Key 'x' not available in dashboard view", NotificationLevel.WARNING)
    callbacks.view_changed.assert_not_called()

    _show(machine, ViewId.DATA_BROWSER)
    notify.reset_mock()
    dispatcher.dispatch_key("x")
    notify.assert_called_once_with("Key 'x' not available in data view", NotificationLevel.WARNING)


@pytest.mark.parametrize(
    "key,message",
    [
        ("escape", "Escape key pressed"),
        ("tab", "Tab navigation coming soon"),
        ("enter", "Enter key pressed"),
        ("up", "Arrow up pressed"),
        ("left", "Arrow left pressed"),
    ],
)
def test_reserved_keys_only_notify(wiring, key: str, message: str) -> None:
    dispatcher, _, notify, callbacks = wiring

    assert dispatcher.dispatch_key(key) is DispatchOutcome.FALLBACK
    notify.assert_called_once_with(message, NotificationLevel.INFO)
    assert callbacks.method_calls == []


@pytest.mark.parametrize(
    "event,message",
    [
        (MouseEvent(MouseAction.CLICK, 12, 7), "Mouse clicked at (12, 7)"),
        (MouseEvent(MouseAction.WHEEL_UP), "Mouse wheel up"),
        (MouseEvent(MouseAction.WHEEL_DOWN), "Mouse wheel down"),
    ],
)
def test_mouse_events_notify(wiring, event: MouseEvent, message: str) -> None:
    dispatcher, _, notify, _ = wiring

    assert dispatcher.dispatch(event) is DispatchOutcome.FALLBACK
    notify.assert_called_once_with(message, NotificationLevel.INFO)


def test_resize_is_not_input(wiring) -> None:
    dispatcher, _, notify, _ = wiring

    assert dispatcher.dispatch(ResizeEvent(100, 40)) is None
    notify.assert_not_called()


@pytest.mark.parametrize("view_id", list(ViewId))
def test_every_key_resolves_to_exactly_one_outcome(wiring, view_id: ViewId) -> None:
    dispatcher, machine, notify, callbacks = wiring
    _show(machine, view_id)
    keys = list(string.printable.strip()) + list(RESERVED_KEYS) + ["C-c", "KEY_F(1)"]

    for key in keys:
        notify.reset_mock()
        callbacks.reset_mock()

        outcome = dispatcher.dispatch_key(key)

        global_action = callbacks.quit.called or callbacks.switch_view.called or callbacks.toggle_theme.called
        view_action = callbacks.view_changed.called
        fallback = notify.called and not view_action
        assert [global_action, view_action, fallback].count(True) == 1, key
        expected = {
            DispatchOutcome.GLOBAL: global_action,
            DispatchOutcome.VIEW: view_action,
            DispatchOutcome.FALLBACK: fallback,
        }
        assert expected[outcome] is True, key
