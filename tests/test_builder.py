"""Tests for argument vector composition."""

from pathlib import Path

import pytest

from pyhdiutil.domain.models import DeviceNode, Verb
from pyhdiutil.storage.exceptions import (
    ConflictingOptionError,
    IncompatibleOptionError,
    MissingArgumentError,
)
from pyhdiutil.storage.hdiutil import attach, common, convert, create, detach, makehybrid, verify
from pyhdiutil.storage.hdiutil.builder import (
    build_attach,
    build_convert,
    build_create,
    build_detach,
    build_makehybrid,
    build_verify,
    encode_for,
    encode_options,
)
from pyhdiutil.storage.hdiutil.convert import ImageFormat
from pyhdiutil.storage.hdiutil.create import CreateType, FileSystem


class TestBuildCreate:
    """Tests for build_create function."""

    def test_sparsebundle(self):
        """Test the size spec and options precede the image path."""
        args = build_create(
            "test", create.Megabytes(20), FileSystem.HFS_PLUS, CreateType.SPARSEBUNDLE
        )

        assert args == [
            "create",
            "-megabytes",
            "20",
            "-fs",
            "HFS+",
            "-type",
            "SPARSEBUNDLE",
            "test",
        ]

    def test_options_keep_caller_order(self):
        args = build_create(
            "img", create.Size("1g"), create.Volname("Data"), FileSystem.APFS
        )

        assert args == ["create", "-size", "1g", "-volname", "Data", "-fs", "APFS", "img"]

    def test_from_folder(self):
        args = build_create(
            "out.dmg", create.Srcfolder("/tmp/src"), ImageFormat.UDZO, create.OVERWRITE
        )

        assert args == [
            "create",
            "-srcfolder",
            "/tmp/src",
            "-format",
            "UDZO",
            "-ov",
            "out.dmg",
        ]

    def test_accepts_path(self):
        args = build_create(Path("images/test"), create.Megabytes(1))

        assert args[-1] == str(Path("images/test"))

    def test_size_spec_required(self):
        with pytest.raises(IncompatibleOptionError):
            build_create("test", None)

    def test_option_as_size_spec_rejected(self):
        with pytest.raises(IncompatibleOptionError):
            build_create("test", FileSystem.APFS)

    def test_empty_image_rejected(self):
        with pytest.raises(MissingArgumentError, match="create"):
            build_create("", create.Megabytes(20))

    def test_attach_only_option_rejected(self):
        with pytest.raises(IncompatibleOptionError) as excinfo:
            build_create("test", create.Megabytes(20), attach.NO_BROWSE)

        assert excinfo.value.verb == "create"
        assert excinfo.value.option is attach.NO_BROWSE

    def test_two_filesystems_conflict(self):
        with pytest.raises(ConflictingOptionError) as excinfo:
            build_create("test", create.Megabytes(20), FileSystem.APFS, FileSystem.HFS_PLUS)

        assert excinfo.value.family == "FileSystem"

    def test_conflict_allowed_when_not_strict(self):
        args = build_create(
            "test",
            create.Megabytes(20),
            FileSystem.APFS,
            FileSystem.HFS_PLUS,
            strict=False,
        )

        assert args == ["create", "-megabytes", "20", "-fs", "APFS", "-fs", "HFS+", "test"]


class TestBuildAttach:
    """Tests for build_attach function."""

    def test_image_first_then_options(self):
        args = build_attach(
            "test.sparsebundle",
            attach.NO_VERIFY,
            attach.NO_AUTO_FSCK,
            attach.MountPoint("./test"),
        )

        assert args == [
            "attach",
            "test.sparsebundle",
            "-noverify",
            "-noautofsck",
            "-mountpoint",
            "./test",
        ]

    def test_no_options(self):
        assert build_attach("test.dmg") == ["attach", "test.dmg"]

    def test_repeated_option_is_kept(self):
        args = build_attach("test.dmg", attach.NO_BROWSE, attach.NO_BROWSE)

        assert args == ["attach", "test.dmg", "-nobrowse", "-nobrowse"]

    def test_readonly_and_readwrite_conflict(self):
        with pytest.raises(ConflictingOptionError):
            build_attach("test.dmg", attach.READONLY, attach.READWRITE)

    def test_two_mount_locations_conflict(self):
        with pytest.raises(ConflictingOptionError):
            build_attach("test.dmg", attach.MountPoint("/a"), attach.MountRoot("/b"))

    def test_nomount_conflicts_with_mount_mode(self):
        with pytest.raises(ConflictingOptionError):
            build_attach("test.dmg", attach.NO_MOUNT, attach.MOUNT_REQUIRED)

    def test_create_only_option_rejected(self):
        with pytest.raises(IncompatibleOptionError):
            build_attach("test.dmg", FileSystem.APFS)


class TestBuildDetach:
    """Tests for build_detach function."""

    def test_force(self):
        assert build_detach("/dev/disk4", detach.FORCE) == ["detach", "/dev/disk4", "-force"]

    def test_accepts_device_node(self):
        assert build_detach(DeviceNode("/dev/disk4")) == ["detach", "/dev/disk4"]

    def test_empty_device_node_rejected(self):
        with pytest.raises(MissingArgumentError, match="device node"):
            build_detach(DeviceNode())

    def test_attach_option_rejected(self):
        with pytest.raises(IncompatibleOptionError):
            build_detach("/dev/disk4", attach.READONLY)


class TestBuildVerifyConvertMakehybrid:
    """Tests for the remaining builders."""

    def test_verify(self):
        assert build_verify("test.dmg", verify.NO_CACHE, common.QUIET) == [
            "verify",
            "test.dmg",
            "-nocache",
            "-quiet",
        ]

    def test_convert(self):
        args = build_convert("in.dmg", ImageFormat.UDZO, "out.dmg", convert.OVERWRITE)

        assert args == ["convert", "in.dmg", "-format", "UDZO", "-o", "out.dmg", "-ov"]

    def test_convert_accepts_format_string(self):
        args = build_convert("in.dmg", "ULFO", "out.dmg")

        assert args == ["convert", "in.dmg", "-format", "ULFO", "-o", "out.dmg"]

    def test_convert_unknown_format(self):
        with pytest.raises(ValueError):
            build_convert("in.dmg", "ZIP", "out.dmg")

    def test_convert_requires_outfile(self):
        with pytest.raises(MissingArgumentError, match="outfile"):
            build_convert("in.dmg", ImageFormat.UDZO, "")

    def test_makehybrid(self):
        args = build_makehybrid(
            "cd.iso",
            "/tmp/src",
            makehybrid.ISO_FS,
            makehybrid.JOLIET_FS,
            makehybrid.DefaultVolumeName("CD"),
        )

        assert args == [
            "makehybrid",
            "-o",
            "cd.iso",
            "/tmp/src",
            "-iso",
            "-joliet",
            "-default-volume-name",
            "CD",
        ]

    def test_makehybrid_emulation_modes_conflict(self):
        with pytest.raises(ConflictingOptionError):
            build_makehybrid(
                "cd.iso", "/tmp/src", makehybrid.HARD_DISK_BOOT, makehybrid.NO_EMUL_BOOT
            )


class TestEncoding:
    """Tests for encode_for and encode_options."""

    def test_encode_for_uses_verb_capability(self):
        assert encode_for(common.VERBOSE, Verb.DETACH) == ["-verbose"]

    def test_encode_for_incompatible(self):
        with pytest.raises(IncompatibleOptionError):
            encode_for(detach.FORCE, Verb.ATTACH)

    def test_encode_for_rejects_plain_values(self):
        with pytest.raises(IncompatibleOptionError):
            encode_for("-nobrowse", Verb.ATTACH)

    def test_encode_options_concatenates(self):
        tokens = encode_options(Verb.ATTACH, [attach.READONLY, attach.Owners.OFF])

        assert tokens == ["-readonly", "-owners", "off"]

    def test_incompatible_rejected_even_when_not_strict(self):
        with pytest.raises(IncompatibleOptionError):
            encode_options(Verb.VERIFY, [detach.FORCE], strict=False)
