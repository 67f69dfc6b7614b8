"""
Wireless command backends.

Each backend wraps the platform's command-line tool behind the
WlanBackend interface: query the current association, list saved
profiles, disconnect, and connect by profile name.
"""

from __future__ import annotations

import platform

from wifiwatch.errors import WifiWatchError
from wifiwatch.wlan.base import BackendType, ConnectResult, WlanBackend
from wifiwatch.wlan.netsh import NetshBackend
from wifiwatch.wlan.nmcli import NmcliBackend

__all__ = [
    "BackendType",
    "ConnectResult",
    "WlanBackend",
    "NetshBackend",
    "NmcliBackend",
    "get_backend",
]

_BACKENDS: dict[BackendType, type[WlanBackend]] = {
    BackendType.NETSH: NetshBackend,
    BackendType.NMCLI: NmcliBackend,
}


def get_backend(kind: str | BackendType = BackendType.AUTO, system: str | None = None) -> WlanBackend:
    """
    Create a wireless backend.

    Args:
        kind: Backend name, or "auto" to pick one for the platform
        system: Platform name override (defaults to platform.system())

    Raises:
        WifiWatchError: If "auto" is requested on an unsupported platform.
        ValueError: If ``kind`` is not a known backend name.
    """
    backend_type = BackendType(kind)
    if backend_type == BackendType.AUTO:
        system = system or platform.system()
        if system == "Windows":
            backend_type = BackendType.NETSH
        elif system == "Linux":
            backend_type = BackendType.NMCLI
        else:
            raise WifiWatchError(f"No wireless backend available for platform {system!r}")
    return _BACKENDS[backend_type]()
