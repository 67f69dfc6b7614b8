"""wifiwatch - keep a machine online over Wi-Fi.

Pings a well-known host on a fixed interval and, after a run of
consecutive failures, disconnects and reconnects a saved wireless
network, then verifies that the internet is reachable again.
"""

__version__ = "0.1.0"
