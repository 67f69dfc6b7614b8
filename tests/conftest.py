"""Pytest configuration and shared fakes for wifiwatch tests."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

import pytest

from wifiwatch.config.watchdog import WatchdogConfig
from wifiwatch.probe import ConnectivityProbe
from wifiwatch.scheduler import Scheduler
from wifiwatch.wlan.base import BackendType, ConnectResult, WlanBackend


class ScriptedProbe(ConnectivityProbe):
    """Probe that replays a fixed sequence of outcomes, then a default."""

    def __init__(self, outcomes: Iterable[bool | Exception] = (), default: bool = True):
        self.outcomes = list(outcomes)
        self.default = default
        self.calls = 0

    @property
    def target(self) -> str:
        return "203.0.113.1"

    def probe(self) -> bool:
        self.calls += 1
        if not self.outcomes:
            return self.default
        outcome = self.outcomes.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


class FakeBackend(WlanBackend):
    """In-memory backend that records every command it receives."""

    executable = "fake-wlan"

    def __init__(
        self,
        profiles: Iterable[str] = ("HomeWiFi",),
        current: str | None = "HomeWiFi",
        connect_result: ConnectResult | None = None,
    ):
        self.profiles = list(profiles)
        self.current = current
        self.connect_result = connect_result or ConnectResult(True, "ok")
        self.calls: list[tuple[str, ...]] = []

    @property
    def backend_type(self) -> BackendType:
        return BackendType.AUTO

    def is_available(self) -> bool:
        return True

    def current_network(self) -> str | None:
        self.calls.append(("current_network",))
        return self.current

    def list_profiles(self) -> list[str]:
        self.calls.append(("list_profiles",))
        return list(self.profiles)

    def disconnect(self) -> None:
        self.calls.append(("disconnect",))
        self.current = None

    def connect(self, name: str) -> ConnectResult:
        self.calls.append(("connect", name))
        if self.connect_result.success:
            self.current = name
        return self.connect_result

    @property
    def command_names(self) -> list[str]:
        return [call[0] for call in self.calls]


class StepScheduler(Scheduler):
    """Scheduler that never sleeps; counts waits and can stop after N cycles."""

    def __init__(self, on_wait=None):
        self.waits = 0
        self.on_wait = on_wait

    def wait_next(self) -> None:
        self.waits += 1
        if self.on_wait is not None:
            self.on_wait(self.waits)


@pytest.fixture
def config() -> WatchdogConfig:
    return WatchdogConfig(
        network="HomeWiFi",
        interval=1,
        probe_host="203.0.113.1",
        probe_timeout_ms=500,
        failure_threshold=3,
    )


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture
def sleeps() -> list[float]:
    """Collects requested sleep durations instead of sleeping."""
    return []


@pytest.fixture
def fake_sleep(sleeps: list[float]):
    return sleeps.append


@pytest.fixture(autouse=True)
def restore_root_logging() -> Iterator[None]:
    """Undo handler changes made by setup_logging between tests."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def make_probe() -> type[ScriptedProbe]:
    """Factory for scripted probes, e.g. ``make_probe([False, True], default=True)``."""
    return ScriptedProbe


@pytest.fixture
def make_backend() -> type[FakeBackend]:
    """Factory for in-memory wireless backends."""
    return FakeBackend


@pytest.fixture
def make_scheduler() -> type[StepScheduler]:
    """Factory for schedulers that never sleep."""
    return StepScheduler
