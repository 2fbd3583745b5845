"""Options for ``hdiutil create``.

``create`` takes a size specification (an explicit size or a data source),
any number of create options, and the image path last:

    hdiutil create -megabytes 20 -fs HFS+ -type SPARSEBUNDLE test
"""

from __future__ import annotations

from enum import Enum

from .flags import (
    BoolOption,
    ConvertFlag,
    CreateFlag,
    IntOption,
    NegatableOption,
    SizeFlag,
    StringListOption,
    StringOption,
    string_flag,
)


# ==============================================================================
# Size specifications
# ==============================================================================


class Size(StringOption, SizeFlag):
    """Size in the style of mkfile(8), e.g. ``"20m"``, ``"1.5g"``, ``"2t"``."""

    flag_name = "size"


class Sectors(IntOption, SizeFlag):
    """Size in 512-byte sectors."""

    flag_name = "sectors"


class Megabytes(IntOption, SizeFlag):
    """Size in megabytes (1024*1024 bytes)."""

    flag_name = "megabytes"


class Srcfolder(StringOption, SizeFlag):
    """Copy the contents of a folder file-by-file into a fresh filesystem.

    The image is sized to the source data plus filesystem overhead unless
    another size option is also given.
    """

    flag_name = "srcfolder"


class Srcdir(StringOption, SizeFlag):
    """Synonym of ``Srcfolder``."""

    flag_name = "srcdir"


class Srcdevice(StringOption, SizeFlag):
    """Use the blocks of a device; the image matches the device size.

    Filesystem options such as ``Volname`` and ``Stretch`` are ignored by
    hdiutil in this mode.
    """

    flag_name = "srcdevice"


# ==============================================================================
# Enumerations
# ==============================================================================


class CreateType(CreateFlag, Enum):
    """Image type for an empty image (``-type``)."""

    UDIF = "UDIF"
    SPARSE = "SPARSE"
    SPARSEBUNDLE = "SPARSEBUNDLE"

    def __str__(self) -> str:
        return self.value

    @property
    def display_name(self) -> str:
        return self.value

    @property
    def description(self) -> str:
        return _CREATE_TYPE_DESCRIPTIONS[self]

    def encode(self) -> list[str]:
        return string_flag("type", self.value)


_CREATE_TYPE_DESCRIPTIONS = {
    CreateType.UDIF: "read/write UDIF image of fixed size (UDRW)",
    CreateType.SPARSE: "single-file image that grows with content (UDSP)",
    CreateType.SPARSEBUNDLE: "bundle-backed image that grows with content (UDSB)",
}


class FileSystem(CreateFlag, Enum):
    """Filesystem created inside the image (``-fs``)."""

    HFS_PLUS = "HFS+"
    HFS_PLUS_J = "HFS+J"
    JHFS_PLUS = "JHFS+"
    HFSX = "HFSX"
    JHFS_PLUS_X = "JHFS+X"
    APFS = "APFS"
    FAT32 = "FAT32"
    EXFAT = "ExFAT"
    UDF = "UDF"

    def __str__(self) -> str:
        return self.value

    @property
    def display_name(self) -> str:
        return self.value

    @property
    def description(self) -> str:
        return _FILESYSTEM_DESCRIPTIONS[self]

    @classmethod
    def from_display_name(cls, name: str) -> FileSystem:
        for member in cls:
            if member.value.lower() == name.lower():
                return member
        raise ValueError(f"Unknown filesystem: {name}")

    def encode(self) -> list[str]:
        return string_flag("fs", self.value)


_FILESYSTEM_DESCRIPTIONS = {
    FileSystem.HFS_PLUS: "Mac OS Extended",
    FileSystem.HFS_PLUS_J: "Mac OS Extended (Journaled)",
    FileSystem.JHFS_PLUS: "Mac OS Extended (Journaled)",
    FileSystem.HFSX: "Mac OS Extended (Case-sensitive)",
    FileSystem.JHFS_PLUS_X: "Mac OS Extended (Case-sensitive, Journaled)",
    FileSystem.APFS: "Apple File System",
    FileSystem.FAT32: "MS-DOS (FAT32)",
    FileSystem.EXFAT: "ExFAT",
    FileSystem.UDF: "Universal Disk Format",
}


# ==============================================================================
# Create options
# ==============================================================================


class Align(IntOption, CreateFlag):
    """Alignment of the final data partition, in sectors. The default is 4K."""

    flag_name = "align"


class Volname(StringOption, CreateFlag):
    """Name of the newly created filesystem. HFS+ and APFS default to ``untitled``."""

    flag_name = "volname"


class UID(IntOption, CreateFlag):
    """Owner of the volume root; 99 maps to the 'unknown' user."""

    flag_name = "uid"


class GID(IntOption, CreateFlag):
    """Group of the volume root; 99 maps to 'unknown'."""

    flag_name = "gid"


class Mode(StringOption, CreateFlag):
    """Octal mode of the volume root, e.g. ``"755"``."""

    flag_name = "mode"


class Autostretch(NegatableOption, CreateFlag):
    """Make stretchable volumes once the size crosses 256 MB."""

    flag_name = "autostretch"


class Stretch(StringOption, CreateFlag):
    """Maximum stretch size, specified like ``Size``."""

    flag_name = "stretch"


class FSArgs(StringListOption, CreateFlag):
    """Extra arguments for the newfs program implied by ``FileSystem``."""

    flag_name = "fsargs"


class Layout(StringOption, CreateFlag):
    """Partition layout: ``NONE``, ``SPUD``, ``GPTSPUD``, ``MBRSPUD``, ``ISOCD``."""

    flag_name = "layout"


class Library(StringOption, CreateFlag):
    """Alternate layout library. The default is MediaKit's MKDrivers.bundle."""

    flag_name = "library"


class PartitionType(StringOption, CreateFlag):
    flag_name = "partitionType"


class Overwrite(BoolOption, CreateFlag, ConvertFlag):
    """Overwrite an existing file (``-ov``)."""

    flag_name = "ov"


class AttachAfterCreate(BoolOption, CreateFlag):
    """Attach the image after creating it."""

    flag_name = "attach"


class SegmentSize(StringOption, CreateFlag):
    """Write the image in segments no bigger than a size spec."""

    flag_name = "segmentSize"


class Crossdev(NegatableOption, CreateFlag):
    """Cross device boundaries on the source filesystem."""

    flag_name = "crossdev"


class Scrub(NegatableOption, CreateFlag):
    """Skip temporary files and trashes when copying a source folder."""

    flag_name = "scrub"


class Anyowners(NegatableOption, CreateFlag):
    """Fail unless file ownership in the image can be ensured."""

    flag_name = "anyowners"


class Skipunreadable(BoolOption, CreateFlag):
    """Skip files that the copying user cannot read."""

    flag_name = "skipunreadable"


class Atomic(NegatableOption, CreateFlag):
    """Copy files to a temporary location and rename them into place."""

    flag_name = "atomic"


class Copyuid(StringOption, CreateFlag):
    """Perform the copy as the given user. Requires root."""

    flag_name = "copyuid"


AUTOSTRETCH = Autostretch(True)
NO_AUTOSTRETCH = Autostretch(False)
OVERWRITE = Overwrite()
ATTACH = AttachAfterCreate()
CROSSDEV = Crossdev(True)
NO_CROSSDEV = Crossdev(False)
SCRUB = Scrub(True)
NO_SCRUB = Scrub(False)
ANYOWNERS = Anyowners(True)
NO_ANYOWNERS = Anyowners(False)
SKIPUNREADABLE = Skipunreadable()
ATOMIC = Atomic(True)
NO_ATOMIC = Atomic(False)
