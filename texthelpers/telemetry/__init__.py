"""Telemetry and observability helpers.

This package emits deterministic operation events and degraded-step notices.
"""

from .logger import RunLogger, log_degraded_step

__all__ = ["RunLogger", "log_degraded_step"]
