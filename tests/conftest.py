"""Pytest configuration for termdash tests."""

from __future__ import annotations

import logging
import os
from collections import deque
from dataclasses import dataclass
from typing import Optional

import pytest

# Never read the developer's config, .env or log settings
os.environ["TERMDASH_CONFIG_PATH"] = "/nonexistent/termdash/config.yml"
os.environ["TERMDASH_ENV_PATH"] = "/nonexistent/termdash/.env"
os.environ.pop("TERMDASH_LOG_LEVEL", None)
os.environ.pop("TERMDASH_LOG_PATH", None)

from termdash.cli.tui.backend import RegionHandle  # noqa: E402
from termdash.cli.tui.layout import Region  # noqa: E402
from termdash.cli.tui.scheduler import Scheduler  # noqa: E402
from termdash.cli.tui.theme import Style  # noqa: E402
from termdash.cli.tui.types import InputEvent  # noqa: E402

logging.getLogger("termdash").handlers.clear()
logging.getLogger().handlers.clear()


def pytest_collection_modifyitems(config, items):
    """Set per-marker timeouts: unit=1s, integration=5s."""
    for item in items:
        if "unit" in item.keywords:
            item.add_marker(pytest.mark.timeout(1))
        elif "integration" in item.keywords:
            item.add_marker(pytest.mark.timeout(5))


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@dataclass
class FakeRegion:
    geometry: Region
    style: Style
    content: str
    border: bool


class FakeBackend:
    """In-memory DisplayBackend recording every call."""

    def __init__(self, clock: FakeClock, width: int = 80, height: int = 24) -> None:
        self.clock = clock
        self.width = width
        self.height = height
        self.regions: dict[int, FakeRegion] = {}
        self.detached: list[int] = []
        self.calls: list[tuple[str, int]] = []
        self.events: deque[InputEvent] = deque()
        self.renders = 0
        self._next_id = 1

    def size(self) -> tuple[int, int]:
        return self.width, self.height

    def create_region(self, geometry: Region, style: Style, content: str, *, border: bool = True) -> RegionHandle:
        handle = RegionHandle(self._next_id)
        self._next_id += 1
        self.regions[handle.id] = FakeRegion(geometry, style, content, border)
        self.calls.append(("create_region", handle.id))
        return handle

    def set_content(self, handle: RegionHandle, text: str) -> None:
        self.regions[handle.id].content = text
        self.calls.append(("set_content", handle.id))

    def set_geometry(self, handle: RegionHandle, geometry: Region) -> None:
        self.regions[handle.id].geometry = geometry
        self.calls.append(("set_geometry", handle.id))

    def set_style(self, handle: RegionHandle, style: Style) -> None:
        self.regions[handle.id].style = style
        self.calls.append(("set_style", handle.id))

    def detach(self, handle: RegionHandle) -> None:
        if self.regions.pop(handle.id, None) is not None:
            self.detached.append(handle.id)
        self.calls.append(("detach", handle.id))

    def render(self) -> None:
        self.renders += 1

    def poll_event(self, timeout_ms: int) -> Optional[InputEvent]:
        if self.events:
            return self.events.popleft()
        # Nothing pending: the wait "takes" the whole timeout
        self.clock.advance(max(timeout_ms, 1) / 1000)
        return None

    def region(self, handle: RegionHandle) -> FakeRegion:
        return self.regions[handle.id]


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def scheduler(clock: FakeClock) -> Scheduler:
    return Scheduler(clock=clock)


@pytest.fixture
def backend(clock: FakeClock) -> FakeBackend:
    return FakeBackend(clock)
