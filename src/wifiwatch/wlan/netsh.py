"""Windows backend driving ``netsh wlan``."""

from __future__ import annotations

import logging
import re

from wifiwatch.utils.commands import run_command
from wifiwatch.wlan.base import QUERY_TIMEOUT, BackendType, ConnectResult, WlanBackend

__all__ = ["NetshBackend", "parse_current_ssid", "parse_profiles", "CONNECT_SUCCESS_TEXT"]

logger = logging.getLogger(__name__)

# "    SSID                   : HomeWiFi" (the BSSID line does not match)
_SSID_RE = re.compile(r"^\s*SSID\s*:\s*(.*?)\s*$", re.MULTILINE)
# "    All User Profile     : HomeWiFi"
_PROFILE_RE = re.compile(r"^\s*(?:All User|Current User) Profile\s*:\s*(.*?)\s*$", re.MULTILINE)

CONNECT_SUCCESS_TEXT = "completed successfully"


def parse_current_ssid(text: str) -> str | None:
    """Extract the associated SSID from ``netsh wlan show interfaces`` output."""
    for match in _SSID_RE.finditer(text):
        ssid = match.group(1)
        if ssid:
            return ssid
    return None


def parse_profiles(text: str) -> list[str]:
    """Extract profile names from ``netsh wlan show profiles`` output."""
    return [m.group(1) for m in _PROFILE_RE.finditer(text) if m.group(1)]


class NetshBackend(WlanBackend):
    """Backend for Windows using netsh."""

    executable = "netsh"

    @property
    def backend_type(self) -> BackendType:
        return BackendType.NETSH

    def current_network(self) -> str | None:
        result = run_command(["netsh", "wlan", "show", "interfaces"], timeout=QUERY_TIMEOUT)
        if not result.ok:
            return None
        return parse_current_ssid(result.stdout)

    def list_profiles(self) -> list[str]:
        result = run_command(["netsh", "wlan", "show", "profiles"], timeout=QUERY_TIMEOUT)
        if not result.ok:
            logger.debug(f"netsh show profiles failed: {result.output}")
            return []
        return parse_profiles(result.stdout)

    def disconnect(self) -> None:
        result = run_command(["netsh", "wlan", "disconnect"])
        if not result.ok:
            logger.debug(f"netsh disconnect reported: {result.output}")

    def connect(self, name: str) -> ConnectResult:
        result = run_command(["netsh", "wlan", "connect", f"name={name}"])
        success = result.ok and CONNECT_SUCCESS_TEXT in result.stdout.lower()
        return ConnectResult(success=success, message=result.output)
