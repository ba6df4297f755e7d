"""In-memory platform adapter for testing.

Reports a fixed host platform identifier so target-dependent commands can be
exercised for every target on any machine.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class FixedHostPlatform:
    """Callable returning a preset ``sys.platform``-style identifier.

    Example:
        >>> FixedHostPlatform("darwin")()
        'darwin'
    """

    host_platform: str = "linux"

    def __call__(self) -> str:
        return self.host_platform


__all__ = ["FixedHostPlatform"]
