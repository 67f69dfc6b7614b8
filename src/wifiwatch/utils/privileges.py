"""Detect whether the process can change network state."""

from __future__ import annotations

import ctypes
import os
import platform

__all__ = ["is_elevated"]


def is_elevated() -> bool:
    """
    Check for administrator (Windows) or root (POSIX) rights.

    Returns:
        True if elevated, False if not or if it cannot be determined.
    """
    if platform.system() == "Windows":
        try:
            return bool(ctypes.windll.shell32.IsUserAnAdmin())  # type: ignore[attr-defined]
        except (AttributeError, OSError):
            return False

    geteuid = getattr(os, "geteuid", None)
    if geteuid is None:
        return False
    return geteuid() == 0
