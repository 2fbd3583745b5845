"""Domain model for disk image operations.

Verbs, device nodes and the structured result of ``hdiutil attach``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Verb(Enum):
    """hdiutil verb. Selects the option capability used at build time."""

    CREATE = "create"
    ATTACH = "attach"
    DETACH = "detach"
    CONVERT = "convert"
    VERIFY = "verify"
    MAKEHYBRID = "makehybrid"

    def __str__(self) -> str:
        return self.value

    @property
    def capability(self) -> str:
        """Name of the option method encoding flags for this verb."""
        return f"{self.value}_flag"


@dataclass(frozen=True)
class DeviceNode:
    """Block device node of an attached image (e.g. ``/dev/disk4``).

    An opaque handle: its validity is owned by the OS, not checked here.
    An empty node means attach output contained no device path.
    """

    path: str = ""

    def __str__(self) -> str:
        return self.path

    def __bool__(self) -> bool:
        return bool(self.path)

    @property
    def is_empty(self) -> bool:
        return not self.path

    @property
    def raw(self) -> str:
        """Raw (character) device node, e.g. ``/dev/rdisk4``."""
        from pyhdiutil.storage.devices import raw_device_node

        return raw_device_node(self.path)

    @property
    def number(self) -> int:
        """Trailing device number, or 0 if the path has none."""
        from pyhdiutil.storage.devices import device_number

        return device_number(self.path)


@dataclass(frozen=True)
class AttachedEntity:
    """One row of ``hdiutil attach`` output."""

    dev_entry: str
    content_hint: str | None = None
    mount_point: str | None = None

    @property
    def is_whole_disk(self) -> bool:
        return "s" not in self.dev_entry.rsplit("disk", 1)[-1]


@dataclass(frozen=True)
class AttachResult:
    """Outcome of an attach: the device node plus everything hdiutil reported."""

    device_node: DeviceNode
    entities: tuple[AttachedEntity, ...] = ()
    output: str = field(default="", repr=False)

    @property
    def mount_points(self) -> list[str]:
        return [entity.mount_point for entity in self.entities if entity.mount_point]
