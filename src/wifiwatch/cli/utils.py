"""
Console presentation helpers for the CLI: colored log lines, startup
banner, and uptime formatting.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, TextIO

import click

from wifiwatch.config.watchdog import WatchdogConfig

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

LEVEL_STYLES: dict[int, dict[str, Any]] = {
    logging.DEBUG: {"dim": True},
    logging.INFO: {"fg": "green"},
    logging.WARNING: {"fg": "yellow"},
    logging.ERROR: {"fg": "red"},
    logging.CRITICAL: {"fg": "red", "bold": True},
}


class ColorFormatter(logging.Formatter):
    """Formatter that colors each line by its severity."""

    def __init__(
        self,
        fmt: str | None = LOG_FORMAT,
        datefmt: str | None = LOG_DATEFMT,
        use_color: bool = True,
    ):
        super().__init__(fmt=fmt, datefmt=datefmt)
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        style = LEVEL_STYLES.get(record.levelno)
        if not self.use_color or style is None:
            return message
        return click.style(message, **style)


def setup_logging(verbose: bool = False, stream: TextIO | None = None) -> None:
    """
    Configure logging for the CLI.

    Args:
        verbose: If True, enable DEBUG level logging
        stream: Output stream, stdout by default. Colors are dropped when
            the stream is not a terminal.
    """
    stream = stream or sys.stdout
    handler = logging.StreamHandler(stream)
    use_color = hasattr(stream, "isatty") and stream.isatty()
    handler.setFormatter(ColorFormatter(use_color=use_color))

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        handlers=[handler],
        force=True,
    )

    # Silence noisy third-party loggers
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def format_banner(config: WatchdogConfig, backend_name: str) -> str:
    """Startup banner describing what is being watched."""
    lines = []
    lines.append("=" * 60)
    lines.append("WIFIWATCH CONNECTIVITY WATCHDOG")
    lines.append("=" * 60)
    lines.append(f"  Network:    {config.network}")
    lines.append(f"  Probe:      {config.probe_method} {config.probe_host}")
    lines.append(f"  Timeout:    {config.probe_timeout_ms} ms")
    lines.append(f"  Interval:   {config.interval}s")
    lines.append(f"  Threshold:  {config.failure_threshold} consecutive failures")
    lines.append(f"  Backend:    {backend_name}")
    lines.append("=" * 60)
    lines.append("Press Ctrl+C to stop.")
    return "\n".join(lines)


def format_uptime(seconds: float) -> str:
    """
    Format uptime in human-readable format.

    Args:
        seconds: Uptime in seconds

    Returns:
        Formatted string like "1h 23m 45s"
    """
    hours = int(seconds // 3600)
    minutes = int((seconds % 3600) // 60)
    secs = int(seconds % 60)

    parts = []
    if hours > 0:
        parts.append(f"{hours}h")
    if minutes > 0:
        parts.append(f"{minutes}m")
    if secs > 0 or not parts:
        parts.append(f"{secs}s")

    return " ".join(parts)
