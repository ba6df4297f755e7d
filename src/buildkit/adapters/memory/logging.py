"""Logging adapter for tests."""

from __future__ import annotations

from lib_layered_config import Config


def init_logging_in_memory(config: Config) -> None:
    """Skip lib_log_rich setup; records go to whatever stdlib logging has."""


__all__ = ["init_logging_in_memory"]
