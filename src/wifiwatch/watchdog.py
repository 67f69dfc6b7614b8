"""
Connectivity watchdog loop.

Probes internet reachability on a fixed interval and, after a run of
consecutive failures, reconnects the configured wireless network.
Runs in the foreground until the process receives SIGINT or SIGTERM.
"""

from __future__ import annotations

import logging
import signal
import time
from dataclasses import dataclass
from enum import Enum

from wifiwatch.config.watchdog import WatchdogConfig
from wifiwatch.errors import ProbeError
from wifiwatch.probe import ConnectivityProbe
from wifiwatch.reconnect import ReconnectOutcome, Reconnector
from wifiwatch.scheduler import IntervalScheduler, Scheduler
from wifiwatch.status import current_network_name
from wifiwatch.wlan.base import WlanBackend

__all__ = ["Watchdog", "WatchdogState", "WatchdogPhase", "CycleEvent"]

logger = logging.getLogger(__name__)


class WatchdogPhase(str, Enum):
    """Where the loop is in its failure/recovery cycle."""

    HEALTHY = "healthy"  # no outstanding failures
    DEGRADED = "degraded"  # 1 <= failures < threshold
    RECOVERING = "recovering"  # threshold reached, reconnect in progress


class CycleEvent(str, Enum):
    """What a single watchdog cycle observed or did."""

    OK = "ok"
    RESTORED = "restored"
    PROBE_FAILED = "probe_failed"
    RECONNECTED = "reconnected"
    RECONNECT_FAILED = "reconnect_failed"


@dataclass
class WatchdogState:
    """Counters owned by a single Watchdog instance."""

    consecutive_failures: int = 0
    reconnect_count: int = 0
    recovery_attempts: int = 0
    phase: WatchdogPhase = WatchdogPhase.HEALTHY


class Watchdog:
    """
    Debounce probe failures and trigger reconnects.

    Features:
    - One probe per cycle, no overlap between cycles
    - Consecutive failure threshold before reconnecting
    - Failure count reset after every reconnect attempt, successful or not,
      so a failed attempt must build up failures again before retrying
    - Graceful shutdown on SIGINT/SIGTERM
    """

    def __init__(
        self,
        config: WatchdogConfig,
        probe: ConnectivityProbe,
        backend: WlanBackend,
        reconnector: Reconnector | None = None,
        scheduler: Scheduler | None = None,
    ):
        self.config = config
        self.probe = probe
        self.backend = backend
        self.reconnector = reconnector or Reconnector.from_config(config, backend, probe)
        self.scheduler = scheduler or IntervalScheduler(
            config.interval, should_continue=lambda: self.running
        )

        self.state = WatchdogState()
        self.running = True
        self.started_at: float | None = None

    def _handle_shutdown(self, signum: int, frame: object) -> None:
        """Handle shutdown signals gracefully."""
        logger.info(f"Received signal {signum}, shutting down watchdog")
        self.running = False

    @property
    def uptime(self) -> float:
        """Seconds since run() started, 0 if it has not."""
        if self.started_at is None:
            return 0.0
        return time.monotonic() - self.started_at

    def _probe(self) -> bool:
        try:
            return self.probe.probe()
        except ProbeError as e:
            logger.error(f"Probe could not run: {e}")
            return False

    def tick(self) -> CycleEvent:
        """
        Run one watchdog cycle: probe, update counters, recover if needed.

        Returns:
            The event this cycle produced.
        """
        state = self.state
        threshold = self.config.failure_threshold

        if self._probe():
            previous = state.phase
            state.consecutive_failures = 0
            state.phase = WatchdogPhase.HEALTHY
            if previous == WatchdogPhase.DEGRADED:
                logger.info(f"Connection restored ({self.probe.target} reachable)")
                return CycleEvent.RESTORED
            logger.debug(f"Ping to {self.probe.target} ok")
            return CycleEvent.OK

        state.consecutive_failures += 1
        if state.consecutive_failures < threshold:
            state.phase = WatchdogPhase.DEGRADED
            logger.warning(
                f"Ping to {self.probe.target} failed ({state.consecutive_failures}/{threshold})"
            )
            return CycleEvent.PROBE_FAILED

        return self._recover()

    def _recover(self) -> CycleEvent:
        state = self.state
        state.phase = WatchdogPhase.RECOVERING
        state.recovery_attempts += 1

        current = current_network_name(self.backend)
        logger.warning(
            f"Failure threshold reached ({state.consecutive_failures}/"
            f"{self.config.failure_threshold}), reconnecting to '{self.config.network}' "
            f"(currently on: {current or 'unknown'})"
        )

        try:
            outcome = self.reconnector.reconnect(self.config.network)
        except Exception as e:
            logger.exception("Unexpected error during reconnect")
            outcome = ReconnectOutcome(False, str(e))

        state.consecutive_failures = 0
        state.phase = WatchdogPhase.HEALTHY

        if outcome.success:
            state.reconnect_count += 1
            logger.info(
                f"Reconnected to '{self.config.network}' "
                f"(total reconnects: {state.reconnect_count})"
            )
            return CycleEvent.RECONNECTED

        logger.error(f"Reconnect to '{self.config.network}' failed: {outcome.message}")
        return CycleEvent.RECONNECT_FAILED

    def run(self) -> WatchdogState:
        """Main watchdog loop. Returns the final state once a shutdown signal arrives."""
        logger.info(
            f"Watchdog starting: network='{self.config.network}', "
            f"target={self.probe.target}, interval={self.config.interval}s, "
            f"timeout={self.config.probe_timeout_ms}ms, "
            f"threshold={self.config.failure_threshold}"
        )

        signal.signal(signal.SIGTERM, self._handle_shutdown)
        signal.signal(signal.SIGINT, self._handle_shutdown)
        self.started_at = time.monotonic()

        try:
            while self.running:
                self.tick()
                self.scheduler.wait_next()
        finally:
            logger.info("Watchdog stopped")

        return self.state
