"""Argument vector composition for hdiutil verbs.

Each builder returns ``[verb, positional..., option tokens...]`` without
the executable path. Options are encoded through the verb's capability
and appended in caller order; nothing is deduplicated or reordered.

    build_create("test", Megabytes(20), FileSystem.HFS_PLUS, CreateType.SPARSEBUNDLE)
    ["create", "-megabytes", "20", "-fs", "HFS+", "-type", "SPARSEBUNDLE", "test"]

``create`` is the exception to positional-first: hdiutil expects the image
path after the size specification and options.
"""

from __future__ import annotations

from os import PathLike
from typing import Iterable, Union

from pyhdiutil.domain.models import DeviceNode, Verb
from pyhdiutil.logging import LoggerFactory
from pyhdiutil.storage.exceptions import IncompatibleOptionError
from pyhdiutil.storage.validation import validate_options, validate_required

from .convert import ImageFormat


PathArg = Union[str, PathLike]

log = LoggerFactory.for_hdiutil()


def encode_for(option: object, verb: Verb) -> list[str]:
    """Encode one option through the verb's capability."""
    encoder = getattr(option, verb.capability, None)
    if not callable(encoder):
        raise IncompatibleOptionError(option, verb.value)
    return list(encoder())


def encode_options(verb: Verb, options: Iterable[object], *, strict: bool = True) -> list[str]:
    options = list(options)
    validate_options(verb, options, strict=strict)
    tokens: list[str] = []
    for option in options:
        encoded = encode_for(option, verb)
        log.trace(f"{option!r} -> {encoded}")
        tokens.extend(encoded)
    return tokens


def build_create(image: PathArg, size_spec, *options, strict: bool = True) -> list[str]:
    image = validate_required(Verb.CREATE, "image", image)
    if size_spec is None:
        raise IncompatibleOptionError(size_spec, "create size")
    size_flag = getattr(size_spec, "size_flag", None)
    if not callable(size_flag):
        raise IncompatibleOptionError(size_spec, "create size")
    return [
        Verb.CREATE.value,
        *size_flag(),
        *encode_options(Verb.CREATE, options, strict=strict),
        image,
    ]


def build_attach(image: PathArg, *options, strict: bool = True) -> list[str]:
    image = validate_required(Verb.ATTACH, "image", image)
    return [Verb.ATTACH.value, image, *encode_options(Verb.ATTACH, options, strict=strict)]


def build_detach(
    device_node: str | DeviceNode, *options, strict: bool = True
) -> list[str]:
    device_node = validate_required(Verb.DETACH, "device node", device_node)
    return [
        Verb.DETACH.value,
        device_node,
        *encode_options(Verb.DETACH, options, strict=strict),
    ]


def build_verify(image: PathArg, *options, strict: bool = True) -> list[str]:
    image = validate_required(Verb.VERIFY, "image", image)
    return [Verb.VERIFY.value, image, *encode_options(Verb.VERIFY, options, strict=strict)]


def build_convert(
    image: PathArg,
    image_format: ImageFormat | str,
    outfile: PathArg,
    *options,
    strict: bool = True,
) -> list[str]:
    image = validate_required(Verb.CONVERT, "image", image)
    outfile = validate_required(Verb.CONVERT, "outfile", outfile)
    if not isinstance(image_format, ImageFormat):
        image_format = ImageFormat(image_format)
    return [
        Verb.CONVERT.value,
        image,
        *image_format.format_flag(),
        "-o",
        outfile,
        *encode_options(Verb.CONVERT, options, strict=strict),
    ]


def build_makehybrid(
    image: PathArg, source: PathArg, *options, strict: bool = True
) -> list[str]:
    image = validate_required(Verb.MAKEHYBRID, "image", image)
    source = validate_required(Verb.MAKEHYBRID, "source", source)
    return [
        Verb.MAKEHYBRID.value,
        "-o",
        image,
        source,
        *encode_options(Verb.MAKEHYBRID, options, strict=strict),
    ]
