"""
Configuration package for wifiwatch.

Module structure:
- watchdog.py: WatchdogConfig (probe target, cadence, threshold, reconnect delays)
"""

from wifiwatch.config.watchdog import WatchdogConfig

__all__ = ["WatchdogConfig"]
