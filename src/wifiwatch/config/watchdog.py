"""
Watchdog configuration module.

Contains the settings for the connectivity watchdog: which network to
restore, how often and where to probe, and how many consecutive failures
trigger a reconnect. Built once from CLI options and never mutated.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

__all__ = ["WatchdogConfig", "DEFAULT_NETWORK", "DEFAULT_PROBE_HOST"]

DEFAULT_NETWORK = "HomeWiFi"
DEFAULT_PROBE_HOST = "8.8.8.8"


class WatchdogConfig(BaseModel):
    """Configuration for the connectivity watchdog."""

    model_config = ConfigDict(frozen=True)

    network: str = Field(
        default=DEFAULT_NETWORK,
        description="Saved wireless profile to reconnect to",
    )
    interval: int = Field(
        default=10,
        ge=1,
        description="Seconds between connectivity probes",
    )
    probe_host: str = Field(
        default=DEFAULT_PROBE_HOST,
        description="Host (or URL for the http method) used to check reachability",
    )
    probe_timeout_ms: int = Field(
        default=3000,
        ge=1,
        description="Milliseconds to wait for a probe reply",
    )
    failure_threshold: int = Field(
        default=3,
        ge=1,
        description="Consecutive failed probes before reconnecting",
    )
    probe_method: Literal["ping", "http"] = Field(
        default="ping",
        description="ICMP echo via the system ping tool, or an HTTP request",
    )
    backend: Literal["auto", "netsh", "nmcli"] = Field(
        default="auto",
        description="Wireless command backend; auto picks one for the platform",
    )
    settle_delay: float = Field(
        default=2.0,
        ge=0.0,
        description="Seconds to wait after disconnecting before connecting",
    )
    verify_delay: float = Field(
        default=5.0,
        ge=0.0,
        description="Seconds to wait after connecting before the first verification probe",
    )
    retry_delay: float = Field(
        default=5.0,
        ge=0.0,
        description="Seconds to wait before the second verification probe",
    )

    @field_validator("network")
    @classmethod
    def validate_network(cls, v: str) -> str:
        """Validate the network name is not blank."""
        if not v.strip():
            raise ValueError("Network name must not be empty")
        return v

    @field_validator("probe_host")
    @classmethod
    def validate_probe_host(cls, v: str) -> str:
        """Validate the probe target cannot be mistaken for a command option."""
        v = v.strip()
        if not v:
            raise ValueError("Probe host must not be empty")
        if v.startswith("-"):
            raise ValueError("Probe host must not start with '-'")
        if any(c.isspace() for c in v):
            raise ValueError("Probe host must not contain whitespace")
        return v
