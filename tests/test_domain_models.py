"""Tests for domain models."""

import pytest

from pyhdiutil.domain.models import AttachedEntity, AttachResult, DeviceNode, Verb


class TestVerb:
    """Tests for Verb enum."""

    def test_values(self):
        assert [verb.value for verb in Verb] == [
            "create",
            "attach",
            "detach",
            "convert",
            "verify",
            "makehybrid",
        ]

    def test_capability(self):
        assert Verb.ATTACH.capability == "attach_flag"
        assert Verb.MAKEHYBRID.capability == "makehybrid_flag"

    def test_str(self):
        assert str(Verb.DETACH) == "detach"


class TestDeviceNode:
    """Tests for DeviceNode dataclass."""

    def test_str(self):
        assert str(DeviceNode("/dev/disk4")) == "/dev/disk4"

    def test_raw_and_number(self):
        node = DeviceNode("/dev/disk12")

        assert node.raw == "/dev/rdisk12"
        assert node.number == 12

    def test_empty(self):
        node = DeviceNode()

        assert not node
        assert node.is_empty
        assert node.number == 0

    def test_frozen(self):
        node = DeviceNode("/dev/disk4")

        with pytest.raises(AttributeError):
            node.path = "/dev/disk5"

    def test_equality(self):
        assert DeviceNode("/dev/disk4") == DeviceNode("/dev/disk4")
        assert DeviceNode("/dev/disk4") != DeviceNode("/dev/disk5")


class TestAttachResult:
    """Tests for AttachedEntity and AttachResult."""

    def test_whole_disk(self):
        assert AttachedEntity("/dev/disk4").is_whole_disk
        assert not AttachedEntity("/dev/disk4s1").is_whole_disk

    def test_mount_points(self):
        result = AttachResult(
            DeviceNode("/dev/disk4"),
            (
                AttachedEntity("/dev/disk4", "GUID_partition_scheme"),
                AttachedEntity("/dev/disk4s1", "Apple_HFS", "/Volumes/test"),
            ),
        )

        assert result.mount_points == ["/Volumes/test"]

    def test_output_not_in_repr(self):
        result = AttachResult(DeviceNode("/dev/disk4"), output="long output")

        assert "long output" not in repr(result)
