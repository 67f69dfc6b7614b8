"""Best-effort lookup of the current wireless association, for diagnostics only."""

from __future__ import annotations

import logging

from wifiwatch.wlan.base import WlanBackend

__all__ = ["current_network_name"]

logger = logging.getLogger(__name__)


def current_network_name(backend: WlanBackend) -> str | None:
    """
    Return the currently associated network name, or None if unknown.

    Never raises: permission problems, a missing adapter or unparseable
    output all mean "unknown" and are only logged at debug level.
    """
    try:
        return backend.current_network()
    except Exception as e:
        logger.debug(f"Could not read current network: {e}")
        return None
