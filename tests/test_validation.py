"""Tests for build-time option validation."""

from pathlib import Path

import pytest

from pyhdiutil.domain.models import DeviceNode, Verb
from pyhdiutil.storage.exceptions import (
    ConflictingOptionError,
    IncompatibleOptionError,
    MissingArgumentError,
)
from pyhdiutil.storage.hdiutil import attach, common, create, detach
from pyhdiutil.storage.hdiutil.common import EncryptionType
from pyhdiutil.storage.hdiutil.create import FileSystem
from pyhdiutil.storage.validation import (
    option_family,
    supports,
    validate_compatibility,
    validate_exclusive,
    validate_options,
    validate_required,
)


class TestSupports:
    """Tests for supports function."""

    def test_supported(self):
        assert supports(detach.FORCE, Verb.DETACH)
        assert supports(common.VERBOSE, Verb.MAKEHYBRID)

    def test_unsupported(self):
        assert not supports(detach.FORCE, Verb.ATTACH)
        assert not supports("-force", Verb.DETACH)


class TestOptionFamily:
    """Tests for option_family function."""

    def test_enum_members_form_a_family(self):
        assert option_family(FileSystem.APFS) == "FileSystem"
        assert option_family(EncryptionType.AES128) == "EncryptionType"

    def test_explicit_family(self):
        assert option_family(attach.MountPoint("/a")) == "mount location"
        assert option_family(attach.NO_MOUNT) == "mount"
        assert option_family(attach.MOUNT_OPTIONAL) == "mount"

    def test_no_family(self):
        assert option_family(attach.NO_VERIFY) is None


class TestValidateCompatibility:
    """Tests for validate_compatibility function."""

    def test_all_compatible(self):
        validate_compatibility(Verb.CREATE, [FileSystem.APFS, create.Volname("x")])

    def test_first_incompatible_option_reported(self):
        with pytest.raises(IncompatibleOptionError) as excinfo:
            validate_compatibility(Verb.CREATE, [FileSystem.APFS, attach.NO_BROWSE, detach.FORCE])

        assert excinfo.value.option is attach.NO_BROWSE
        assert "create" in str(excinfo.value)


class TestValidateExclusive:
    """Tests for validate_exclusive function."""

    def test_different_families_allowed(self):
        validate_exclusive([FileSystem.APFS, EncryptionType.AES256, attach.READONLY])

    def test_same_member_repeated_allowed(self):
        validate_exclusive([FileSystem.APFS, FileSystem.APFS])

    def test_conflict(self):
        with pytest.raises(ConflictingOptionError) as excinfo:
            validate_exclusive([EncryptionType.AES128, EncryptionType.AES256])

        assert excinfo.value.family == "EncryptionType"
        assert excinfo.value.first is EncryptionType.AES128
        assert excinfo.value.second is EncryptionType.AES256

    def test_mount_location_conflict(self):
        with pytest.raises(ConflictingOptionError):
            validate_exclusive([attach.MountPoint("/a"), attach.MountPoint("/b")])


class TestValidateOptions:
    """Tests for validate_options function."""

    def test_strict_rejects_conflicts(self):
        with pytest.raises(ConflictingOptionError):
            validate_options(Verb.ATTACH, [attach.READONLY, attach.READWRITE])

    def test_lenient_allows_conflicts(self):
        validate_options(Verb.ATTACH, [attach.READONLY, attach.READWRITE], strict=False)

    def test_accepts_generator(self):
        validate_options(Verb.DETACH, (option for option in [detach.FORCE]))


class TestValidateRequired:
    """Tests for validate_required function."""

    def test_string(self):
        assert validate_required(Verb.ATTACH, "image", "test.dmg") == "test.dmg"

    def test_path(self):
        assert validate_required(Verb.ATTACH, "image", Path("a/b.dmg")) == str(Path("a/b.dmg"))

    def test_device_node(self):
        assert validate_required(Verb.DETACH, "device node", DeviceNode("/dev/disk2")) == (
            "/dev/disk2"
        )

    @pytest.mark.parametrize("value", [None, ""])
    def test_missing(self, value):
        with pytest.raises(MissingArgumentError) as excinfo:
            validate_required(Verb.VERIFY, "image", value)

        assert excinfo.value.verb == "verify"
        assert excinfo.value.argument == "image"
