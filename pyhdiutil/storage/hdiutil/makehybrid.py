"""Options for ``hdiutil makehybrid``.

makehybrid generates a potentially-hybrid filesystem (HFS+, ISO9660,
Joliet, UDF) in a read-only image from a source directory. With no
filesystem selector, hdiutil picks its own defaults.
"""

from __future__ import annotations

from .flags import BoolOption, IntOption, MakehybridFlag, StringOption


# ==============================================================================
# Filesystems
# ==============================================================================


class HFS(BoolOption, MakehybridFlag):
    flag_name = "hfs"


class ISO(BoolOption, MakehybridFlag):
    """ISO9660 Level 2 with Rock Ridge extensions."""

    flag_name = "iso"


class Joliet(BoolOption, MakehybridFlag):
    """Joliet extensions to ISO9660; requires ISO9660."""

    flag_name = "joliet"


class UDF(BoolOption, MakehybridFlag):
    flag_name = "udf"


# ==============================================================================
# HFS+ options
# ==============================================================================


class HFSBlessedDirectory(StringOption, MakehybridFlag):
    """Directory to bless for booting on the generated HFS+ filesystem."""

    flag_name = "hfs-blessed-directory"


class HFSOpenfolder(StringOption, MakehybridFlag):
    flag_name = "hfs-openfolder"


class HFSStartupfileSize(IntOption, MakehybridFlag):
    """Size in bytes of an empty HFS+ Startup File."""

    flag_name = "hfs-startupfile-size"


# ==============================================================================
# ISO9660/Joliet metadata
# ==============================================================================


class AbstractFile(StringOption, MakehybridFlag):
    flag_name = "abstract-file"


class BibliographyFile(StringOption, MakehybridFlag):
    flag_name = "bibliography-file"


class CopyrightFile(StringOption, MakehybridFlag):
    flag_name = "copyright-file"


class Application(StringOption, MakehybridFlag):
    flag_name = "application"


class Preparer(StringOption, MakehybridFlag):
    flag_name = "preparer"


class Publisher(StringOption, MakehybridFlag):
    flag_name = "publisher"


class SystemID(StringOption, MakehybridFlag):
    flag_name = "system-id"


class KeepMacSpecific(BoolOption, MakehybridFlag):
    """Expose Mac-specific files such as .DS_Store in non-HFS+ filesystems."""

    flag_name = "keep-mac-specific"


# ==============================================================================
# El Torito
# ==============================================================================


class EltoritoBoot(StringOption, MakehybridFlag):
    """El Torito boot image within the source directory.

    Floppy emulation is used unless ``HardDiskBoot`` or ``NoEmulBoot`` is
    given, so the image must be 1200KB, 1440KB or 2880KB.
    """

    flag_name = "eltorito-boot"


class HardDiskBoot(BoolOption, MakehybridFlag):
    flag_name = "hard-disk-boot"
    family = "El Torito emulation"


class NoEmulBoot(BoolOption, MakehybridFlag):
    flag_name = "no-emul-boot"
    family = "El Torito emulation"


class NoBoot(BoolOption, MakehybridFlag):
    """Mark the El Torito image as non-bootable."""

    flag_name = "no-boot"


class BootLoadSeg(IntOption, MakehybridFlag):
    flag_name = "boot-load-seg"


class BootLoadSize(IntOption, MakehybridFlag):
    """512-byte sectors to load for a No Emulation boot image. Default 4."""

    flag_name = "boot-load-size"


class EltoritoPlatform(IntOption, MakehybridFlag):
    """Numeric platform ID; 0 identifies x86 hardware."""

    flag_name = "eltorito-platform"


class EltoritoSpecification(StringOption, MakehybridFlag):
    """Plist-formatted array describing multiple boot images."""

    flag_name = "eltorito-specification"


# ==============================================================================
# UDF
# ==============================================================================


class UDFVersion(StringOption, MakehybridFlag):
    """``"1.02"`` or ``"1.50"`` (the default)."""

    flag_name = "udf-version"


# ==============================================================================
# Volume names
# ==============================================================================


class DefaultVolumeName(StringOption, MakehybridFlag):
    """Volume name for all filesystems. Defaults to the source's last path component."""

    flag_name = "default-volume-name"


class HFSVolumeName(StringOption, MakehybridFlag):
    flag_name = "hfs-volume-name"


class ISOVolumeName(StringOption, MakehybridFlag):
    flag_name = "iso-volume-name"


class JolietVolumeName(StringOption, MakehybridFlag):
    flag_name = "joliet-volume-name"


class UDFVolumeName(StringOption, MakehybridFlag):
    flag_name = "udf-volume-name"


# ==============================================================================
# Hiding (glob expressions)
# ==============================================================================


class HideAll(StringOption, MakehybridFlag):
    """Glob of files not exposed in any generated filesystem."""

    flag_name = "hide-all"


class HideHFS(StringOption, MakehybridFlag):
    flag_name = "hide-hfs"


class HideISO(StringOption, MakehybridFlag):
    flag_name = "hide-iso"


class HideJoliet(StringOption, MakehybridFlag):
    flag_name = "hide-joliet"


class HideUDF(StringOption, MakehybridFlag):
    flag_name = "hide-udf"


class OnlyUDF(StringOption, MakehybridFlag):
    flag_name = "only-udf"


class OnlyISO(StringOption, MakehybridFlag):
    flag_name = "only-iso"


class OnlyJoliet(StringOption, MakehybridFlag):
    flag_name = "only-joliet"


# ==============================================================================
# Misc
# ==============================================================================


class PrintSize(BoolOption, MakehybridFlag):
    """Preflight the data and print an upper bound on the image size."""

    flag_name = "print-size"


class Plistin(BoolOption, MakehybridFlag):
    """Read the parameters as a plist from standard input."""

    flag_name = "plistin"


HFS_FS = HFS()
ISO_FS = ISO()
JOLIET_FS = Joliet()
UDF_FS = UDF()
KEEP_MAC_SPECIFIC = KeepMacSpecific()
HARD_DISK_BOOT = HardDiskBoot()
NO_EMUL_BOOT = NoEmulBoot()
NO_BOOT = NoBoot()
PRINT_SIZE = PrintSize()
PLISTIN = Plistin()
