"""Host platform to packaging target resolution."""

from __future__ import annotations

from .enums import TargetOS

_HOST_TARGETS: dict[str, TargetOS] = {
    "darwin": TargetOS.MACOS,
    "win32": TargetOS.WIN,
}


def resolve_target(host_platform: str) -> TargetOS:
    """Map a host platform identifier (``sys.platform`` style) to a target.

    ``darwin`` becomes ``macos`` and ``win32`` becomes ``win``. Every other
    identifier, known or not, resolves to ``linux``.

    Example:
        >>> resolve_target("darwin")
        <TargetOS.MACOS: 'macos'>
        >>> resolve_target("win32")
        <TargetOS.WIN: 'win'>
        >>> resolve_target("wefwef")
        <TargetOS.LINUX: 'linux'>
    """
    return _HOST_TARGETS.get(host_platform, TargetOS.LINUX)


__all__ = ["resolve_target"]
