"""
wifiwatch CLI entry point.
"""

from __future__ import annotations

import logging

import click
from pydantic import ValidationError

from wifiwatch import __version__
from wifiwatch.config.watchdog import DEFAULT_NETWORK, DEFAULT_PROBE_HOST, WatchdogConfig
from wifiwatch.errors import WifiWatchError
from wifiwatch.probe import create_probe
from wifiwatch.utils.privileges import is_elevated
from wifiwatch.watchdog import Watchdog
from wifiwatch.wlan import get_backend

from .utils import format_banner, format_uptime, setup_logging

logger = logging.getLogger(__name__)


def _format_validation_error(error: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in error.errors()
    )


@click.command()
@click.option(
    "--network",
    "-n",
    default=DEFAULT_NETWORK,
    show_default=True,
    help="Saved wireless network to reconnect to",
)
@click.option(
    "--interval",
    "-i",
    type=click.IntRange(min=1),
    default=10,
    show_default=True,
    help="Seconds between connectivity checks",
)
@click.option(
    "--host",
    default=DEFAULT_PROBE_HOST,
    show_default=True,
    help="Host to ping (or URL with --probe-method http)",
)
@click.option(
    "--timeout",
    "-t",
    type=click.IntRange(min=1),
    default=3000,
    show_default=True,
    help="Probe timeout in milliseconds",
)
@click.option(
    "--threshold",
    "-f",
    type=click.IntRange(min=1),
    default=3,
    show_default=True,
    help="Consecutive failures before reconnecting",
)
@click.option(
    "--probe-method",
    type=click.Choice(["ping", "http"]),
    default="ping",
    show_default=True,
    help="How to check reachability",
)
@click.option(
    "--backend",
    type=click.Choice(["auto", "netsh", "nmcli"]),
    default="auto",
    show_default=True,
    help="Wireless command backend",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Log every successful check",
)
@click.version_option(__version__, prog_name="wifiwatch")
def cli(
    network: str,
    interval: int,
    host: str,
    timeout: int,
    threshold: int,
    probe_method: str,
    backend: str,
    verbose: bool,
) -> None:
    """Watch internet connectivity and reconnect Wi-Fi when it drops."""
    setup_logging(verbose)

    try:
        config = WatchdogConfig(
            network=network,
            interval=interval,
            probe_host=host,
            probe_timeout_ms=timeout,
            failure_threshold=threshold,
            probe_method=probe_method,
            backend=backend,
        )
    except ValidationError as e:
        raise click.UsageError(_format_validation_error(e)) from e

    try:
        wlan = get_backend(config.backend)
        probe = create_probe(config)
    except WifiWatchError as e:
        raise click.UsageError(str(e)) from e

    if not wlan.is_available():
        logger.warning(f"'{wlan.executable}' not found; reconnect attempts will fail")
    if not is_elevated():
        logger.warning("Not running with administrator/root rights; reconnect may be refused")

    click.echo(format_banner(config, wlan.backend_type.value))

    watchdog = Watchdog(config, probe, wlan)
    state = watchdog.run()

    logger.info(
        f"Ran for {format_uptime(watchdog.uptime)}: "
        f"{state.reconnect_count} reconnect(s) in {state.recovery_attempts} attempt(s)"
    )
