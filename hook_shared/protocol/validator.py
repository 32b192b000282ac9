from __future__ import annotations

from typing import Iterable

from .constants import DEFAULT_VERSION
from .errors import VersionMismatch
from .messages import HookFrame


def validate_version(frame: HookFrame, supported: Iterable[str] = (DEFAULT_VERSION,)) -> None:
    """Ensure a decoded frame declares a supported protocol version."""
    supported = tuple(supported)
    if frame.version not in supported:
        raise VersionMismatch(
            f"Protocol version mismatch: expected one of {', '.join(supported)}, got {frame.version or '<empty>'}"
        )


__all__ = ["validate_version"]
