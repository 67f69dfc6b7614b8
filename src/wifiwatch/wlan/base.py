"""Base classes and types for wireless command backends."""

from __future__ import annotations

import shutil
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum

# Status and profile queries must never stall the loop for long
QUERY_TIMEOUT = 10.0


class BackendType(str, Enum):
    """Supported wireless backends."""

    NETSH = "netsh"  # Windows WLAN AutoConfig
    NMCLI = "nmcli"  # Linux NetworkManager
    AUTO = "auto"


@dataclass
class ConnectResult:
    """Result of a connect-by-name request."""

    success: bool
    message: str = ""


class WlanBackend(ABC):
    """
    OS wireless control, one method per external command.

    Implementations shell out to the platform tool and parse its text
    output. Query methods may raise CommandError when the tool is missing;
    callers decide whether that is fatal.
    """

    executable: str = ""

    @property
    @abstractmethod
    def backend_type(self) -> BackendType:
        """The backend type this implementation handles."""

    def is_available(self) -> bool:
        """Check whether the backend's command-line tool is installed."""
        return shutil.which(self.executable) is not None

    @abstractmethod
    def current_network(self) -> str | None:
        """Name of the currently associated network, or None."""

    @abstractmethod
    def list_profiles(self) -> list[str]:
        """Names of the saved wireless profiles."""

    def has_profile(self, name: str) -> bool:
        """Check whether a saved profile exists for ``name``."""
        return name in self.list_profiles()

    @abstractmethod
    def disconnect(self) -> None:
        """Drop the active wireless association. Safe when already disconnected."""

    @abstractmethod
    def connect(self, name: str) -> ConnectResult:
        """Ask the OS to associate with the saved profile ``name``."""
