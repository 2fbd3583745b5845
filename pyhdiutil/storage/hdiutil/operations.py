"""Disk image operations: create, attach, detach, verify, convert, makehybrid.

``Hdiutil`` binds the executable path at construction so tests and
alternative installs can inject their own binary:

    hdiutil = Hdiutil("/usr/bin/hdiutil")
    node = hdiutil.attach("test.sparsebundle", NO_VERIFY, NO_AUTO_FSCK, MountPoint("./test"))
    print(node.raw, node.number)
    hdiutil.detach(node)

Failures raise CommandFailedError carrying hdiutil's diagnostic text.
Side effects of a failed command (a partially written image, an attached
device) are not undone.

The module-level functions build a fresh ``Hdiutil`` from settings on
every call.
"""

from __future__ import annotations

from pyhdiutil.config import settings
from pyhdiutil.domain.models import AttachResult, DeviceNode, Verb
from pyhdiutil.logging import EventLogger, operation_context
from pyhdiutil.storage.devices import DEVICE_NODE_PATTERN, extract_attach_result

from . import builder
from .builder import PathArg
from .command_runners import run_checked_command, run_command
from .convert import ImageFormat
from .flags import SizeFlag


class Hdiutil:
    """hdiutil façade bound to one executable path."""

    def __init__(self, path: str | None = None, *, strict: bool | None = None):
        self.path = path or settings.get_hdiutil_path()
        if strict is None:
            strict = settings.get_bool("strict_options", True)
        self.strict = strict

    def __repr__(self) -> str:
        return f"Hdiutil(path={self.path!r}, strict={self.strict!r})"

    def command(self, args: list[str]) -> list[str]:
        """Prefix an argument vector with the executable path."""
        return [self.path, *args]

    # ------------------------------------------------------------------
    # Argument vectors
    # ------------------------------------------------------------------

    def build_create(self, image: PathArg, size_spec: SizeFlag, *options) -> list[str]:
        return builder.build_create(image, size_spec, *options, strict=self.strict)

    def build_attach(self, image: PathArg, *options) -> list[str]:
        return builder.build_attach(image, *options, strict=self.strict)

    def build_detach(self, device_node: str | DeviceNode, *options) -> list[str]:
        return builder.build_detach(device_node, *options, strict=self.strict)

    def build_verify(self, image: PathArg, *options) -> list[str]:
        return builder.build_verify(image, *options, strict=self.strict)

    def build_convert(
        self, image: PathArg, image_format: ImageFormat | str, outfile: PathArg, *options
    ) -> list[str]:
        return builder.build_convert(
            image, image_format, outfile, *options, strict=self.strict
        )

    def build_makehybrid(self, image: PathArg, source: PathArg, *options) -> list[str]:
        return builder.build_makehybrid(image, source, *options, strict=self.strict)

    # ------------------------------------------------------------------
    # Execution
    # ------------------------------------------------------------------

    def create(
        self, image: PathArg, size_spec: SizeFlag, *options, passphrase: str | None = None
    ) -> None:
        """Create a new image of the given size or from the given source."""
        args = self.build_create(image, size_spec, *options)
        with operation_context(Verb.CREATE.value, image=str(image)) as log:
            run_checked_command(self.command(args), input_text=passphrase)
            EventLogger.log_image_written(log, Verb.CREATE.value, str(image))

    def attach_result(
        self, image: PathArg, *options, passphrase: str | None = None
    ) -> AttachResult:
        """Attach an image and return everything hdiutil reported."""
        args = self.build_attach(image, *options)
        with operation_context(Verb.ATTACH.value, image=str(image)) as log:
            output = run_checked_command(self.command(args), input_text=passphrase)
            result = extract_attach_result(output)
            EventLogger.log_image_attached(log, str(image), result.device_node.path)
        return result

    def attach(self, image: PathArg, *options, passphrase: str | None = None) -> DeviceNode:
        """Attach an image and return its device node.

        The node is empty when hdiutil printed no ``/dev/diskN`` (e.g. with
        ``-quiet``); callers must check before detaching.
        """
        return self.attach_result(image, *options, passphrase=passphrase).device_node

    def detach(self, device_node: str | DeviceNode, *options) -> None:
        """Detach an attached image and terminate any associated process."""
        args = self.build_detach(device_node, *options)
        with operation_context(Verb.DETACH.value, device_node=str(device_node)) as log:
            run_checked_command(self.command(args))
            EventLogger.log_image_detached(log, str(device_node))

    def verify(self, image: PathArg, *options, passphrase: str | None = None) -> None:
        """Verify the checksum of a read-only or compressed image."""
        args = self.build_verify(image, *options)
        with operation_context(Verb.VERIFY.value, image=str(image)) as log:
            run_checked_command(self.command(args), input_text=passphrase)
            log.info(f"Verified {image}")

    def convert(
        self,
        image: PathArg,
        image_format: ImageFormat | str,
        outfile: PathArg,
        *options,
        passphrase: str | None = None,
    ) -> None:
        """Convert an image to another format, writing it to outfile."""
        args = self.build_convert(image, image_format, outfile, *options)
        with operation_context(
            Verb.CONVERT.value, image=str(image), format=str(image_format)
        ) as log:
            run_checked_command(self.command(args), input_text=passphrase)
            EventLogger.log_image_written(log, Verb.CONVERT.value, str(outfile))

    def makehybrid(
        self, image: PathArg, source: PathArg, *options, passphrase: str | None = None
    ) -> None:
        """Generate a hybrid filesystem image from a source directory."""
        args = self.build_makehybrid(image, source, *options)
        with operation_context(Verb.MAKEHYBRID.value, image=str(image)) as log:
            run_checked_command(self.command(args), input_text=passphrase)
            EventLogger.log_image_written(log, Verb.MAKEHYBRID.value, str(image))

    def is_attached(self, device_node: str | DeviceNode) -> bool:
        """Return True if ``hdiutil info`` lists the device node."""
        node = str(device_node)
        if not node:
            return False
        result = run_command(self.command(["info"]))
        if result.returncode != 0:
            return False
        return node in DEVICE_NODE_PATTERN.findall(result.stdout or "")


def default_hdiutil() -> Hdiutil:
    return Hdiutil()


def create(
    image: PathArg, size_spec: SizeFlag, *options, passphrase: str | None = None
) -> None:
    default_hdiutil().create(image, size_spec, *options, passphrase=passphrase)


def attach(image: PathArg, *options, passphrase: str | None = None) -> DeviceNode:
    return default_hdiutil().attach(image, *options, passphrase=passphrase)


def attach_result(
    image: PathArg, *options, passphrase: str | None = None
) -> AttachResult:
    return default_hdiutil().attach_result(image, *options, passphrase=passphrase)


def detach(device_node: str | DeviceNode, *options) -> None:
    default_hdiutil().detach(device_node, *options)


def verify(image: PathArg, *options, passphrase: str | None = None) -> None:
    default_hdiutil().verify(image, *options, passphrase=passphrase)


def convert(
    image: PathArg,
    image_format: ImageFormat | str,
    outfile: PathArg,
    *options,
    passphrase: str | None = None,
) -> None:
    default_hdiutil().convert(image, image_format, outfile, *options, passphrase=passphrase)


def makehybrid(
    image: PathArg, source: PathArg, *options, passphrase: str | None = None
) -> None:
    default_hdiutil().makehybrid(image, source, *options, passphrase=passphrase)
