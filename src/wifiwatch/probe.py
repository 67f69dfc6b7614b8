"""
Connectivity probes.

A probe performs exactly one reachability check and answers True or
False. Timeouts, unreachable hosts and refused connections are ordinary
outcomes and map to False; retry policy belongs to the caller. Only a
malformed target or a missing ``ping`` executable raises ProbeError.
"""

from __future__ import annotations

import logging
import math
import platform
from abc import ABC, abstractmethod

import httpx

from wifiwatch.config.watchdog import WatchdogConfig
from wifiwatch.errors import CommandError, ProbeError
from wifiwatch.utils.commands import run_command

__all__ = [
    "ConnectivityProbe",
    "PingProbe",
    "HttpProbe",
    "build_ping_command",
    "create_probe",
]

logger = logging.getLogger(__name__)

# Extra time granted to the ping process beyond its own reply timeout
PING_PROCESS_GRACE = 2.0


def _validate_host(host: str) -> str:
    host = host.strip()
    if not host or host.startswith("-") or any(c.isspace() for c in host):
        raise ProbeError(f"Malformed probe target: {host!r}")
    return host


def build_ping_command(host: str, timeout_ms: int, system: str | None = None) -> list[str]:
    """
    Build a single-packet ping command for the given platform.

    Windows takes its reply timeout in milliseconds; Linux and macOS take
    whole seconds, rounded up with a one second minimum.
    """
    system = system or platform.system()
    if system == "Windows":
        return ["ping", "-n", "1", "-w", str(timeout_ms), host]

    seconds = str(max(1, math.ceil(timeout_ms / 1000)))
    if system == "Darwin":
        return ["ping", "-c", "1", "-t", seconds, host]
    return ["ping", "-c", "1", "-W", seconds, host]


class ConnectivityProbe(ABC):
    """A single reachability check against a fixed target."""

    @abstractmethod
    def probe(self) -> bool:
        """Return True iff the target answered within the timeout."""

    @property
    @abstractmethod
    def target(self) -> str:
        """Human-readable description of what is probed."""


class PingProbe(ConnectivityProbe):
    """ICMP echo using the system ``ping`` tool."""

    def __init__(self, host: str, timeout_ms: int, system: str | None = None):
        self.host = _validate_host(host)
        self.timeout_ms = timeout_ms
        self.system = system or platform.system()

    @property
    def target(self) -> str:
        return self.host

    def probe(self) -> bool:
        cmd = build_ping_command(self.host, self.timeout_ms, self.system)
        timeout = math.ceil(self.timeout_ms / 1000) + PING_PROCESS_GRACE
        try:
            result = run_command(cmd, timeout=timeout)
        except CommandError as e:
            raise ProbeError(str(e)) from e

        if not result.ok:
            logger.debug(f"Ping to {self.host} failed (exit {result.returncode})")
            return False

        # Windows ping exits 0 when a router answers "Destination host unreachable"
        if self.system == "Windows" and "TTL=" not in result.stdout.upper():
            logger.debug(f"Ping to {self.host} got no echo reply")
            return False

        return True


class HttpProbe(ConnectivityProbe):
    """
    HTTP reachability check.

    Any HTTP response, whatever its status code, proves the network path
    works. Connection, DNS and timeout errors count as unreachable.
    """

    def __init__(self, target: str, timeout_ms: int):
        target = _validate_host(target)
        if "://" not in target:
            # a bare host gets a root path; a bare host/path keeps its own
            target = f"http://{target}" if "/" in target else f"http://{target}/"
        try:
            url = httpx.URL(target)
        except httpx.InvalidURL as e:
            raise ProbeError(f"Malformed probe URL {target!r}: {e}") from e
        if url.scheme not in ("http", "https") or not url.host:
            raise ProbeError(f"Malformed probe URL: {target!r}")
        try:
            url.host.encode("idna")
        except UnicodeError as e:
            raise ProbeError(f"Malformed probe host {url.host!r}: {e}") from e
        self.url = str(url)
        self.timeout_ms = timeout_ms

    @property
    def target(self) -> str:
        return self.url

    def probe(self) -> bool:
        try:
            response = httpx.get(self.url, timeout=self.timeout_ms / 1000.0)
        except httpx.TimeoutException:
            logger.debug(f"HTTP probe to {self.url} timed out")
            return False
        except httpx.HTTPError as e:
            logger.debug(f"HTTP probe to {self.url} failed: {e}")
            return False
        except UnicodeError as e:
            # IDNA encoding of the host failed inside the resolver
            raise ProbeError(f"Malformed probe URL {self.url!r}: {e}") from e

        logger.debug(f"HTTP probe to {self.url} returned {response.status_code}")
        return True


def create_probe(config: WatchdogConfig) -> ConnectivityProbe:
    """Create the probe selected by ``config.probe_method``."""
    if config.probe_method == "http":
        return HttpProbe(config.probe_host, config.probe_timeout_ms)
    return PingProbe(config.probe_host, config.probe_timeout_ms)
