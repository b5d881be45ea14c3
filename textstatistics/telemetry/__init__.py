"""Telemetry scaffolds.

This package emits deterministic run events for CLI invocations.
"""

from .logger import RunLogger

__all__ = ["RunLogger"]
