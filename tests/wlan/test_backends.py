"""Tests for backend selection."""

from __future__ import annotations

import pytest

from wifiwatch.errors import WifiWatchError
from wifiwatch.wlan import NetshBackend, NmcliBackend, get_backend

pytestmark = pytest.mark.unit


class TestGetBackend:
    def test_auto_on_windows(self) -> None:
        assert isinstance(get_backend("auto", system="Windows"), NetshBackend)

    def test_auto_on_linux(self) -> None:
        assert isinstance(get_backend("auto", system="Linux"), NmcliBackend)

    def test_auto_on_unsupported_platform(self) -> None:
        with pytest.raises(WifiWatchError, match="Darwin"):
            get_backend("auto", system="Darwin")

    def test_explicit_backend_ignores_platform(self) -> None:
        assert isinstance(get_backend("nmcli", system="Windows"), NmcliBackend)
        assert isinstance(get_backend("netsh", system="Linux"), NetshBackend)

    def test_unknown_backend(self) -> None:
        with pytest.raises(ValueError):
            get_backend("wpa_cli")
