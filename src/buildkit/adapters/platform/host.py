"""Host platform detection for the CLI boundary.

The domain resolves targets from an explicit identifier; this adapter is the
only place that reads the running interpreter's platform.
"""

from __future__ import annotations

import sys as _sys


def detect_host_platform() -> str:
    """Return the running interpreter's platform identifier.

    Example:
        >>> detect_host_platform() == _sys.platform
        True
    """
    return _sys.platform


__all__ = ["detect_host_platform"]
