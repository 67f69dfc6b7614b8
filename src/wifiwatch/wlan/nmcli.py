"""Linux backend driving NetworkManager's ``nmcli``."""

from __future__ import annotations

import logging

from wifiwatch.utils.commands import run_command
from wifiwatch.wlan.base import QUERY_TIMEOUT, BackendType, ConnectResult, WlanBackend

__all__ = [
    "NmcliBackend",
    "split_terse",
    "parse_active_ssid",
    "parse_wifi_profiles",
    "parse_wifi_device",
]

logger = logging.getLogger(__name__)

WIFI_CONNECTION_TYPE = "802-11-wireless"
# Seconds nmcli itself waits for activation
CONNECT_WAIT = 30


def split_terse(line: str) -> list[str]:
    """
    Split one line of ``nmcli -t`` output into fields.

    Terse mode separates fields with ':' and escapes literal colons and
    backslashes inside values with a backslash.
    """
    fields: list[str] = []
    current: list[str] = []
    escaped = False
    for ch in line:
        if escaped:
            current.append(ch)
            escaped = False
        elif ch == "\\":
            escaped = True
        elif ch == ":":
            fields.append("".join(current))
            current = []
        else:
            current.append(ch)
    fields.append("".join(current))
    return fields


def parse_active_ssid(text: str) -> str | None:
    """Find the active SSID in ``nmcli -t -f ACTIVE,SSID device wifi list`` output."""
    for line in text.splitlines():
        fields = split_terse(line)
        if len(fields) >= 2 and fields[0] == "yes" and fields[1]:
            return fields[1]
    return None


def parse_wifi_profiles(text: str) -> list[str]:
    """Wireless connection names from ``nmcli -t -f NAME,TYPE connection show``."""
    names = []
    for line in text.splitlines():
        fields = split_terse(line)
        if len(fields) >= 2 and fields[1] == WIFI_CONNECTION_TYPE and fields[0]:
            names.append(fields[0])
    return names


def parse_wifi_device(text: str) -> str | None:
    """First wifi device from ``nmcli -t -f DEVICE,TYPE device status``."""
    for line in text.splitlines():
        fields = split_terse(line)
        if len(fields) >= 2 and fields[1] == "wifi":
            return fields[0]
    return None


class NmcliBackend(WlanBackend):
    """Backend for Linux using NetworkManager."""

    executable = "nmcli"

    @property
    def backend_type(self) -> BackendType:
        return BackendType.NMCLI

    def current_network(self) -> str | None:
        result = run_command(
            ["nmcli", "-t", "-f", "ACTIVE,SSID", "device", "wifi", "list", "--rescan", "no"],
            timeout=QUERY_TIMEOUT,
        )
        if not result.ok:
            return None
        return parse_active_ssid(result.stdout)

    def list_profiles(self) -> list[str]:
        result = run_command(
            ["nmcli", "-t", "-f", "NAME,TYPE", "connection", "show"],
            timeout=QUERY_TIMEOUT,
        )
        if not result.ok:
            logger.debug(f"nmcli connection show failed: {result.output}")
            return []
        return parse_wifi_profiles(result.stdout)

    def _wifi_device(self) -> str | None:
        result = run_command(
            ["nmcli", "-t", "-f", "DEVICE,TYPE", "device", "status"],
            timeout=QUERY_TIMEOUT,
        )
        if not result.ok:
            return None
        return parse_wifi_device(result.stdout)

    def disconnect(self) -> None:
        device = self._wifi_device()
        if device is None:
            logger.debug("No wifi device found, nothing to disconnect")
            return
        result = run_command(["nmcli", "device", "disconnect", device])
        if not result.ok:
            # Already disconnected devices report an error; that is fine
            logger.debug(f"nmcli disconnect {device} reported: {result.output}")

    def connect(self, name: str) -> ConnectResult:
        result = run_command(
            ["nmcli", "-w", str(CONNECT_WAIT), "connection", "up", "id", name]
        )
        return ConnectResult(success=result.ok, message=result.output)
