"""Platform adapter - host operating system detection.

Contents:
    * :func:`.host.detect_host_platform` - Report the ``sys.platform`` identifier
"""

from __future__ import annotations

from .host import detect_host_platform

__all__ = ["detect_host_platform"]
