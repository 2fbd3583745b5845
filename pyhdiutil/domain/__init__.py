"""Domain models for disk image operations."""

from __future__ import annotations

from .models import AttachedEntity, AttachResult, DeviceNode, Verb


__all__ = [
    "AttachedEntity",
    "AttachResult",
    "DeviceNode",
    "Verb",
]
