"""Unit tests for the view state machine."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from termdash.cli.tui.layout import compute_layout
from termdash.cli.tui.state import ApplicationState
from termdash.cli.tui.theme import resolve
from termdash.cli.tui.types import StyleRole, ThemeId, ViewId
from termdash.cli.tui.view_manager import UnknownViewError, ViewStateMachine
from termdash.cli.tui.views import build_views


class _StubView:
    def __init__(self, text: str) -> None:
        self.title = text
        self.text = text
        self.renders = 0

    def content(self, _state: ApplicationState) -> str:
        self.renders += 1
        return self.text

    def handle_key(self, key: str) -> bool:
        return key == "x"


def _stub_views() -> dict[ViewId, _StubView]:
    return {view_id: _StubView(view_id.value) for view_id in ViewId}


def _switch(machine: ViewStateMachine, view_id, state: ApplicationState | None = None) -> bool:
    state = state or ApplicationState()
    return machine.switch(view_id, compute_layout(80, 24).content, resolve(ThemeId.LIGHT, StyleRole.CONTENT), state)


def test_requires_a_view_for_every_id(backend) -> None:
    views = _stub_views()
    del views[ViewId.HELP]

    with pytest.raises(ValueError, match="help"):
        ViewStateMachine(views, backend)


def test_first_switch_creates_content_region(backend) -> None:
    views = _stub_views()
    machine = ViewStateMachine(views, backend)

    assert machine.active is None
    assert _switch(machine, ViewId.DASHBOARD) is True

    assert machine.active is ViewId.DASHBOARD
    assert backend.region(machine.handle).content == "dashboard"
    assert backend.region(machine.handle).geometry == compute_layout(80, 24).content


def test_switch_clears_previous_view_before_showing_new(backend) -> None:
    machine = ViewStateMachine(_stub_views(), backend)
    _switch(machine, ViewId.DASHBOARD)
    old_handle = machine.handle

    _switch(machine, "data")

    assert machine.active is ViewId.DATA_BROWSER
    assert backend.detached == [old_handle.id]
    assert [name for name, _ in backend.calls] == ["create_region", "detach", "create_region"]
    assert backend.region(machine.handle).content == "data"


def test_self_transition_is_a_noop(backend) -> None:
    views = _stub_views()
    machine = ViewStateMachine(views, backend)
    _switch(machine, ViewId.SETTINGS)
    calls_before = list(backend.calls)
    renders_before = views[ViewId.SETTINGS].renders

    assert _switch(machine, ViewId.SETTINGS) is False

    assert backend.calls == calls_before
    assert views[ViewId.SETTINGS].renders == renders_before


def test_unknown_view_is_logged_and_state_unchanged(backend, caplog) -> None:
    machine = ViewStateMachine(_stub_views(), backend)
    _switch(machine, ViewId.HELP)
    calls_before = list(backend.calls)

    with caplog.at_level("ERROR", logger="termdash.cli.tui.view_manager"):
        assert _switch(machine, "reports") is False

    assert machine.active is ViewId.HELP
    assert backend.calls == calls_before
    assert "View 'reports' not found" in caplog.text


def test_get_raises_unknown_view_error(backend) -> None:
    machine = ViewStateMachine(_stub_views(), backend)

    with pytest.raises(UnknownViewError) as excinfo:
        machine.get("nope")

    assert isinstance(excinfo.value, KeyError)
    assert str(excinfo.value) == "View 'nope' not found"
    assert machine.get("help").title == "help"


def test_view_instances_survive_switching(backend) -> None:
    views = build_views(MagicMock())
    machine = ViewStateMachine(views, backend)
    _switch(machine, ViewId.DATA_BROWSER)
    views[ViewId.DATA_BROWSER].sort_by("name")

    _switch(machine, ViewId.DASHBOARD)
    _switch(machine, ViewId.DATA_BROWSER)

    assert machine.active_view is views[ViewId.DATA_BROWSER]
    assert views[ViewId.DATA_BROWSER].sort_column == "name"


def test_refresh_relayout_restyle_target_active_region(backend) -> None:
    views = _stub_views()
    machine = ViewStateMachine(views, backend)
    _switch(machine, ViewId.DASHBOARD)
    views[ViewId.DASHBOARD].text = "updated"

    machine.refresh(ApplicationState())
    machine.relayout(compute_layout(100, 40).content)
    machine.restyle(resolve(ThemeId.DARK, StyleRole.CONTENT))

    region = backend.region(machine.handle)
    assert region.content == "updated"
    assert region.geometry == compute_layout(100, 40).content
    assert region.style == resolve(ThemeId.DARK, StyleRole.CONTENT)


def test_handle_key_goes_to_active_view(backend) -> None:
    machine = ViewStateMachine(_stub_views(), backend)
    assert machine.handle_key("x") is False  # nothing active yet

    _switch(machine, ViewId.DASHBOARD)

    assert machine.handle_key("x") is True
    assert machine.handle_key("y") is False
