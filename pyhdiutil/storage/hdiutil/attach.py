"""Options for ``hdiutil attach``.

Most attach toggles are negatable: hdiutil's defaults for verification,
auto-open and fsck vary with the OS release and user preferences, so the
``-no`` form is always emitted when a toggle is switched off.
"""

from __future__ import annotations

from enum import Enum

from .flags import (
    AttachFlag,
    BoolOption,
    KeyValueOption,
    NegatableOption,
    StringOption,
    bool_flag,
    string_flag,
)


class ReadWriteMode(AttachFlag, Enum):
    """Read/write mode of the attached device."""

    READONLY = "readonly"
    READWRITE = "readwrite"

    def __str__(self) -> str:
        return self.value

    @property
    def display_name(self) -> str:
        return self.value

    @property
    def description(self) -> str:
        if self is ReadWriteMode.READONLY:
            return "force the device to be read-only"
        return "override the decision to attach read-only"

    def encode(self) -> list[str]:
        return bool_flag(self.value, True)


class MountMode(AttachFlag, Enum):
    """Whether filesystems in the image are mounted (``-mount``)."""

    REQUIRED = "required"
    OPTIONAL = "optional"
    SUPPRESSED = "suppressed"

    def __str__(self) -> str:
        return self.value

    @property
    def display_name(self) -> str:
        return self.value

    @property
    def family(self) -> str:
        return "mount"

    def encode(self) -> list[str]:
        return string_flag("mount", self.value)


class Owners(AttachFlag, Enum):
    """Whether owners on any filesystems are honoured (``-owners``)."""

    ON = "on"
    OFF = "off"

    def __str__(self) -> str:
        return self.value

    @property
    def display_name(self) -> str:
        return self.value

    def encode(self) -> list[str]:
        return string_flag("owners", self.value)


class Kernel(NegatableOption, AttachFlag):
    """Attach without a helper process; ``-nokernel`` is the default."""

    flag_name = "kernel"


class NotRemovable(BoolOption, AttachFlag):
    """Prevent the image from being detached. Root only."""

    flag_name = "notremovable"


class NoMount(BoolOption, AttachFlag):
    """Identical to ``-mount suppressed``."""

    flag_name = "nomount"
    family = "mount"


class MountRoot(StringOption, AttachFlag):
    """Mount volumes on subdirectories of a path instead of /Volumes."""

    flag_name = "mountroot"
    family = "mount location"


class MountRandom(StringOption, AttachFlag):
    """Like ``MountRoot`` with randomized mount point directory names."""

    flag_name = "mountrandom"
    family = "mount location"


class MountPoint(StringOption, AttachFlag):
    """Mount the single volume at a path instead of in /Volumes."""

    flag_name = "mountpoint"
    family = "mount location"


class NoBrowse(BoolOption, AttachFlag):
    """Hide volumes from applications such as the Finder."""

    flag_name = "nobrowse"


class Drivekey(KeyValueOption, AttachFlag):
    """Key/value pair set on the device in the IOKit registry."""

    flag_name = "drivekey"


class Section(StringOption, AttachFlag):
    """Attach a subsection of the image.

    The subspec is ``<offset>``, ``<first-last>`` or ``<start,count>`` in
    0-based sectors; ranges are inclusive.
    """

    flag_name = "section"

    @classmethod
    def range(cls, first: int, last: int) -> Section:
        return cls(f"{first}-{last}")


class Verify(NegatableOption, AttachFlag):
    """Verify images that contain checksums before attaching them."""

    flag_name = "verify"


class IgnoreBadChecksums(NegatableOption, AttachFlag):
    flag_name = "ignorebadchecksums"


class Idme(NegatableOption, AttachFlag):
    flag_name = "idme"


class IdmeReveal(NegatableOption, AttachFlag):
    flag_name = "idmereveal"


class IdmeTrash(NegatableOption, AttachFlag):
    flag_name = "idmetrash"


class AutoOpen(NegatableOption, AttachFlag):
    """Auto-open volumes in the Finder after attaching."""

    flag_name = "autoopen"


class AutoOpenRO(NegatableOption, AttachFlag):
    flag_name = "autoopenro"


class AutoOpenRW(NegatableOption, AttachFlag):
    flag_name = "autoopenrw"


class AutoFsck(NegatableOption, AttachFlag):
    """Force fsck before mounting. By default only quarantined images are checked."""

    flag_name = "autofsck"


READONLY = ReadWriteMode.READONLY
READWRITE = ReadWriteMode.READWRITE
KERNEL = Kernel(True)
NO_KERNEL = Kernel(False)
NOT_REMOVABLE = NotRemovable()
MOUNT_REQUIRED = MountMode.REQUIRED
MOUNT_OPTIONAL = MountMode.OPTIONAL
MOUNT_SUPPRESSED = MountMode.SUPPRESSED
NO_MOUNT = NoMount()
NO_BROWSE = NoBrowse()
OWNERS_ON = Owners.ON
OWNERS_OFF = Owners.OFF
VERIFY = Verify(True)
NO_VERIFY = Verify(False)
IGNORE_BAD_CHECKSUMS = IgnoreBadChecksums(True)
NO_IGNORE_BAD_CHECKSUMS = IgnoreBadChecksums(False)
IDME = Idme(True)
NO_IDME = Idme(False)
IDME_REVEAL = IdmeReveal(True)
NO_IDME_REVEAL = IdmeReveal(False)
IDME_TRASH = IdmeTrash(True)
NO_IDME_TRASH = IdmeTrash(False)
AUTO_OPEN = AutoOpen(True)
NO_AUTO_OPEN = AutoOpen(False)
AUTO_OPEN_RO = AutoOpenRO(True)
NO_AUTO_OPEN_RO = AutoOpenRO(False)
AUTO_OPEN_RW = AutoOpenRW(True)
NO_AUTO_OPEN_RW = AutoOpenRW(False)
AUTO_FSCK = AutoFsck(True)
NO_AUTO_FSCK = AutoFsck(False)
