"""
Thin wrapper around subprocess for the OS network tools.

Every external command (ping, netsh, nmcli) goes through run_command so
that tests can patch a single seam and so that output is always decoded
text.
"""

from __future__ import annotations

import logging
import subprocess  # nosec B404 - subprocess needed to drive OS network tools
from dataclasses import dataclass

from wifiwatch.errors import CommandError

__all__ = ["CommandResult", "run_command", "TIMEOUT_RETURNCODE"]

logger = logging.getLogger(__name__)

# Same convention as coreutils `timeout`
TIMEOUT_RETURNCODE = 124


@dataclass
class CommandResult:
    """Outcome of a finished external command."""

    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    @property
    def output(self) -> str:
        """Combined stdout and stderr, stripped, for diagnostics."""
        return "\n".join(part for part in (self.stdout.strip(), self.stderr.strip()) if part)


def run_command(args: list[str], timeout: float | None = None) -> CommandResult:
    """
    Run a command and capture its output.

    Args:
        args: Command and arguments (never passed through a shell)
        timeout: Seconds to wait; None waits indefinitely

    Returns:
        CommandResult. A timed-out command is reported with returncode 124.

    Raises:
        CommandError: If the executable cannot be found or started.
    """
    logger.debug(f"Running: {' '.join(args)}")
    try:
        proc = subprocess.run(  # nosec B603
            args,
            capture_output=True,
            text=True,
            errors="replace",
            timeout=timeout,
            stdin=subprocess.DEVNULL,
        )
    except subprocess.TimeoutExpired:
        logger.debug(f"Command timed out after {timeout}s: {args[0]}")
        return CommandResult(TIMEOUT_RETURNCODE, "", f"timeout after {timeout}s")
    except FileNotFoundError as e:
        raise CommandError(f"Command not found: {args[0]}", args) from e
    except OSError as e:
        raise CommandError(f"Failed to run {args[0]}: {e}", args) from e

    return CommandResult(proc.returncode, proc.stdout or "", proc.stderr or "")
