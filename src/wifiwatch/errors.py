"""Exception types raised by wifiwatch."""

__all__ = ["WifiWatchError", "ProbeError", "CommandError"]


class WifiWatchError(Exception):
    """Base class for wifiwatch errors."""


class ProbeError(WifiWatchError):
    """A probe could not be issued at all (bad target, missing tool).

    Ordinary network failures never raise; they make the probe return False.
    """


class CommandError(WifiWatchError):
    """An OS command could not be executed."""

    def __init__(self, message: str, args: list[str] | None = None):
        super().__init__(message)
        self.command = args or []
