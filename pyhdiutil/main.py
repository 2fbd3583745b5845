import argparse
import sys

from pyhdiutil.__version__ import __version__
from pyhdiutil.domain.models import DeviceNode
from pyhdiutil.logging import LoggerFactory, setup_logging
from pyhdiutil.storage.devices import parse_device_number
from pyhdiutil.storage.exceptions import DeviceNumberError, HdiutilError
from pyhdiutil.storage.hdiutil import attach as attach_options
from pyhdiutil.storage.hdiutil import common, create as create_options, detach as detach_options
from pyhdiutil.storage.hdiutil.convert import ImageFormat
from pyhdiutil.storage.hdiutil.create import CreateType, FileSystem
from pyhdiutil.storage.hdiutil.operations import Hdiutil


def build_parser():
    parser = argparse.ArgumentParser(
        prog="pyhdiutil", description="Create, attach and detach disk images with hdiutil"
    )
    parser.add_argument("-d", "--debug", action="store_true", help="Enable verbose debug output")
    parser.add_argument("--hdiutil", metavar="PATH", help="Path to the hdiutil executable")
    parser.add_argument(
        "--no-strict",
        action="store_true",
        help="Do not reject conflicting options before running hdiutil",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="verb", required=True)

    create_parser = subparsers.add_parser("create", help="Create a new image")
    create_parser.add_argument("image")
    size_group = create_parser.add_mutually_exclusive_group(required=True)
    size_group.add_argument("--size", help="Size spec such as 20m or 1g")
    size_group.add_argument("--megabytes", type=int)
    size_group.add_argument("--srcfolder", help="Populate the image from a folder")
    create_parser.add_argument(
        "--fs", choices=[member.value for member in FileSystem], help="Filesystem"
    )
    create_parser.add_argument(
        "--type", choices=[member.value for member in CreateType], dest="image_type"
    )
    create_parser.add_argument("--volname")
    create_parser.add_argument(
        "--encryption", choices=[member.value for member in common.EncryptionType]
    )
    create_parser.add_argument("--ov", action="store_true", help="Overwrite an existing file")

    attach_parser = subparsers.add_parser("attach", help="Attach an image")
    attach_parser.add_argument("image")
    attach_parser.add_argument("--mountpoint")
    attach_parser.add_argument("--readonly", action="store_true")
    attach_parser.add_argument("--nobrowse", action="store_true")
    attach_parser.add_argument("--noverify", action="store_true")
    attach_parser.add_argument("--noautofsck", action="store_true")

    detach_parser = subparsers.add_parser("detach", help="Detach an attached image")
    detach_parser.add_argument("device_node")
    detach_parser.add_argument("--force", action="store_true")

    verify_parser = subparsers.add_parser("verify", help="Verify an image checksum")
    verify_parser.add_argument("image")

    convert_parser = subparsers.add_parser("convert", help="Convert an image to another format")
    convert_parser.add_argument("image")
    convert_parser.add_argument(
        "--format", required=True, choices=[member.value for member in ImageFormat]
    )
    convert_parser.add_argument("-o", "--outfile", required=True)

    info_parser = subparsers.add_parser("info", help="Show raw node and number of a device node")
    info_parser.add_argument("device_node")

    return parser


def run(args, hdiutil):
    if args.verb == "create":
        if args.size:
            size_spec = create_options.Size(args.size)
        elif args.megabytes is not None:
            size_spec = create_options.Megabytes(args.megabytes)
        else:
            size_spec = create_options.Srcfolder(args.srcfolder)
        options = []
        if args.fs:
            options.append(FileSystem(args.fs))
        if args.image_type:
            options.append(CreateType(args.image_type))
        if args.volname:
            options.append(create_options.Volname(args.volname))
        if args.encryption:
            options.append(common.EncryptionType(args.encryption))
        if args.ov:
            options.append(create_options.OVERWRITE)
        hdiutil.create(args.image, size_spec, *options)
        return 0

    if args.verb == "attach":
        options = []
        if args.readonly:
            options.append(attach_options.READONLY)
        if args.nobrowse:
            options.append(attach_options.NO_BROWSE)
        if args.noverify:
            options.append(attach_options.NO_VERIFY)
        if args.noautofsck:
            options.append(attach_options.NO_AUTO_FSCK)
        if args.mountpoint:
            options.append(attach_options.MountPoint(args.mountpoint))
        node = hdiutil.attach(args.image, *options)
        if not node:
            print("No device node reported", file=sys.stderr)
            return 1
        print(node)
        return 0

    if args.verb == "detach":
        options = [detach_options.FORCE] if args.force else []
        hdiutil.detach(args.device_node, *options)
        return 0

    if args.verb == "verify":
        hdiutil.verify(args.image)
        return 0

    if args.verb == "convert":
        hdiutil.convert(args.image, ImageFormat(args.format), args.outfile)
        return 0

    if args.verb == "info":
        node = DeviceNode(args.device_node)
        try:
            number = parse_device_number(node.path)
        except DeviceNumberError as error:
            print(error, file=sys.stderr)
            return 1
        print(f"device: {node}")
        print(f"raw:    {node.raw}")
        print(f"number: {number}")
        return 0

    return 2


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(debug=args.debug, file_logging=False)
    log = LoggerFactory.for_system()

    hdiutil = Hdiutil(args.hdiutil, strict=False if args.no_strict else None)
    log.debug(f"Using {hdiutil!r}")
    try:
        return run(args, hdiutil)
    except HdiutilError as error:
        print(f"pyhdiutil: {error}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
