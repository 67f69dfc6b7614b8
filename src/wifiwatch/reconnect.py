"""
Reconnect sequence.

Disconnects the active wireless association, reconnects to a saved
profile by name, and verifies internet reachability with up to two
probes separated by fixed delays. Every failure is returned as a
ReconnectOutcome; nothing here raises for ordinary OS or network errors.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass

from wifiwatch.config.watchdog import WatchdogConfig
from wifiwatch.errors import CommandError, ProbeError
from wifiwatch.probe import ConnectivityProbe
from wifiwatch.wlan.base import WlanBackend

__all__ = ["ReconnectOutcome", "Reconnector"]

logger = logging.getLogger(__name__)


@dataclass
class ReconnectOutcome:
    """Result of one reconnect attempt."""

    success: bool
    message: str | None = None


class Reconnector:
    """
    Bounded, fixed-delay recovery for one saved network.

    Steps:
    1. Refuse to touch the adapter unless a saved profile exists
    2. Disconnect, then wait ``settle_delay``
    3. Connect by name; a failed request returns the OS output
    4. Wait ``verify_delay`` and probe; if unreachable wait ``retry_delay``
       and probe once more
    """

    def __init__(
        self,
        backend: WlanBackend,
        probe: ConnectivityProbe,
        settle_delay: float = 2.0,
        verify_delay: float = 5.0,
        retry_delay: float = 5.0,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.backend = backend
        self.probe = probe
        self.settle_delay = settle_delay
        self.verify_delay = verify_delay
        self.retry_delay = retry_delay
        self._sleep = sleep

    @classmethod
    def from_config(
        cls,
        config: WatchdogConfig,
        backend: WlanBackend,
        probe: ConnectivityProbe,
        sleep: Callable[[float], None] = time.sleep,
    ) -> Reconnector:
        return cls(
            backend,
            probe,
            settle_delay=config.settle_delay,
            verify_delay=config.verify_delay,
            retry_delay=config.retry_delay,
            sleep=sleep,
        )

    def reconnect(self, network: str) -> ReconnectOutcome:
        """
        Run the full reconnect sequence for ``network``.

        Returns:
            ReconnectOutcome; success means the network was joined and the
            probe target answered afterwards.
        """
        try:
            if not self.backend.has_profile(network):
                return ReconnectOutcome(False, f"No saved profile for network '{network}'")
        except CommandError as e:
            return ReconnectOutcome(False, f"Could not list saved profiles: {e}")

        logger.info("Disconnecting current wireless network...")
        try:
            self.backend.disconnect()
        except CommandError as e:
            return ReconnectOutcome(False, f"Disconnect failed: {e}")
        self._sleep(self.settle_delay)

        logger.info(f"Connecting to '{network}'...")
        try:
            result = self.backend.connect(network)
        except CommandError as e:
            return ReconnectOutcome(False, f"Connect failed: {e}")
        if not result.success:
            return ReconnectOutcome(False, result.message or "Connect request was not completed")

        self._sleep(self.verify_delay)
        if self._verify():
            return ReconnectOutcome(True, f"Connected to '{network}', internet reachable")

        logger.debug(f"Internet not reachable yet, retrying in {self.retry_delay:g}s")
        self._sleep(self.retry_delay)
        if self._verify():
            return ReconnectOutcome(True, f"Connected to '{network}', internet reachable")

        return ReconnectOutcome(
            False, f"Connected to '{network}' but {self.probe.target} is still unreachable"
        )

    def _verify(self) -> bool:
        try:
            return self.probe.probe()
        except ProbeError as e:
            logger.error(f"Verification probe failed to run: {e}")
            return False
