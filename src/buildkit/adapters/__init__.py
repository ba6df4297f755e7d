"""Adapters for configuration, logging, the host platform, tests (memory) and the CLI."""

from __future__ import annotations

__all__: list[str] = []
