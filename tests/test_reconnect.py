"""Tests for the reconnect sequence."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from wifiwatch.config.watchdog import WatchdogConfig
from wifiwatch.errors import CommandError, ProbeError
from wifiwatch.probe import ConnectivityProbe
from wifiwatch.reconnect import ReconnectOutcome, Reconnector
from wifiwatch.wlan.base import ConnectResult, WlanBackend

pytestmark = pytest.mark.unit


@pytest.fixture
def make_reconnector(fake_sleep):
    def _make(backend: WlanBackend, probe: ConnectivityProbe) -> Reconnector:
        return Reconnector(
            backend,
            probe,
            settle_delay=2.0,
            verify_delay=5.0,
            retry_delay=5.0,
            sleep=fake_sleep,
        )

    return _make


class TestProfileGuard:
    def test_missing_profile_fails_without_touching_adapter(
        self, make_reconnector, make_probe, make_backend
    ) -> None:
        backend = make_backend(profiles=["Other"])
        probe = make_probe()

        outcome = make_reconnector(backend, probe).reconnect("HomeWiFi")

        assert outcome.success is False
        assert "No saved profile" in outcome.message
        assert backend.command_names == ["list_profiles"]
        assert probe.calls == 0

    def test_profile_match_is_exact(self, make_reconnector, make_probe, make_backend) -> None:
        backend = make_backend(profiles=["HomeWiFi-5G", "homewifi"])

        outcome = make_reconnector(backend, make_probe()).reconnect("HomeWiFi")

        assert outcome.success is False
        assert "disconnect" not in backend.command_names

    def test_profile_listing_error_is_an_outcome(
        self, make_reconnector, make_probe, make_backend
    ) -> None:
        backend = make_backend()
        backend.list_profiles = MagicMock(side_effect=CommandError("Command not found: netsh"))

        outcome = make_reconnector(backend, make_probe()).reconnect("HomeWiFi")

        assert outcome.success is False
        assert "netsh" in outcome.message
        assert "disconnect" not in backend.command_names


class TestSequence:
    def test_success_on_first_verification(
        self, make_reconnector, sleeps, make_probe, make_backend
    ) -> None:
        backend = make_backend()
        probe = make_probe([True])

        outcome = make_reconnector(backend, probe).reconnect("HomeWiFi")

        assert outcome.success is True
        assert backend.command_names == ["list_profiles", "disconnect", "connect"]
        assert backend.calls[-1] == ("connect", "HomeWiFi")
        assert sleeps == [2.0, 5.0]
        assert probe.calls == 1

    def test_success_on_second_verification(
        self, make_reconnector, sleeps, make_probe, make_backend
    ) -> None:
        probe = make_probe([False, True])

        outcome = make_reconnector(make_backend(), probe).reconnect("HomeWiFi")

        assert outcome.success is True
        assert sleeps == [2.0, 5.0, 5.0]
        assert probe.calls == 2

    def test_os_success_but_no_internet_is_failure(
        self, make_reconnector, sleeps, make_probe, make_backend
    ) -> None:
        probe = make_probe([False, False])

        outcome = make_reconnector(make_backend(), probe).reconnect("HomeWiFi")

        assert outcome.success is False
        assert "still unreachable" in outcome.message
        assert probe.calls == 2
        assert sleeps == [2.0, 5.0, 5.0]

    def test_connect_failure_returns_os_message(
        self, make_reconnector, sleeps, make_probe, make_backend
    ) -> None:
        msg = 'There is no profile "HomeWiFi" assigned to the specified interface.'
        backend = make_backend(connect_result=ConnectResult(False, msg))
        probe = make_probe()

        outcome = make_reconnector(backend, probe).reconnect("HomeWiFi")

        assert outcome == ReconnectOutcome(False, msg)
        assert probe.calls == 0
        assert sleeps == [2.0]

    def test_connect_failure_without_output(
        self, make_reconnector, make_probe, make_backend
    ) -> None:
        backend = make_backend(connect_result=ConnectResult(False, ""))

        outcome = make_reconnector(backend, make_probe()).reconnect("HomeWiFi")

        assert outcome.success is False
        assert outcome.message

    def test_disconnect_command_error(self, make_reconnector, make_probe, make_backend) -> None:
        backend = make_backend()
        backend.disconnect = MagicMock(side_effect=CommandError("Command not found: nmcli"))

        outcome = make_reconnector(backend, make_probe()).reconnect("HomeWiFi")

        assert outcome.success is False
        assert "Disconnect failed" in outcome.message
        assert "connect" not in backend.command_names

    def test_connect_command_error(self, make_reconnector, make_probe, make_backend) -> None:
        backend = make_backend()
        backend.connect = MagicMock(side_effect=CommandError("Command not found: nmcli"))

        outcome = make_reconnector(backend, make_probe()).reconnect("HomeWiFi")

        assert outcome.success is False
        assert "Connect failed" in outcome.message

    def test_probe_error_during_verification_is_unreachable(
        self, make_reconnector, make_probe, make_backend
    ) -> None:
        probe = make_probe([ProbeError("no ping"), True])

        outcome = make_reconnector(make_backend(), probe).reconnect("HomeWiFi")

        assert outcome.success is True
        assert probe.calls == 2


class TestFromConfig:
    def test_uses_config_delays(self, fake_sleep, make_probe, make_backend) -> None:
        config = WatchdogConfig(settle_delay=1.0, verify_delay=3.0, retry_delay=4.0)
        reconnector = Reconnector.from_config(
            config, make_backend(), make_probe(), sleep=fake_sleep
        )
        assert reconnector.settle_delay == 1.0
        assert reconnector.verify_delay == 3.0
        assert reconnector.retry_delay == 4.0

    def test_reference_delays_by_default(self, make_probe, make_backend) -> None:
        reconnector = Reconnector.from_config(WatchdogConfig(), make_backend(), make_probe())
        assert (reconnector.settle_delay, reconnector.verify_delay, reconnector.retry_delay) == (
            2.0,
            5.0,
            5.0,
        )
