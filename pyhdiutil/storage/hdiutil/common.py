"""Options shared by several hdiutil verbs.

A shared option implements its encoding once and exposes it under each
verb capability it supports, e.g. ``Verbose`` is accepted by attach,
detach, create, convert, verify and makehybrid alike.
"""

from __future__ import annotations

from enum import Enum

from .flags import (
    AttachFlag,
    BoolOption,
    ConvertFlag,
    CreateFlag,
    DetachFlag,
    KeyValueOption,
    MakehybridFlag,
    StringOption,
    VerifyFlag,
    string_flag,
)


class EncryptionType(AttachFlag, CreateFlag, ConvertFlag, VerifyFlag, MakehybridFlag, Enum):
    """Cipher used for an encrypted image (``-encryption``)."""

    AES128 = "AES-128"
    AES256 = "AES-256"

    def __str__(self) -> str:
        return self.value

    @property
    def display_name(self) -> str:
        return self.value

    @property
    def description(self) -> str:
        return _ENCRYPTION_DESCRIPTIONS[self]

    def encode(self) -> list[str]:
        return string_flag("encryption", self.value)


_ENCRYPTION_DESCRIPTIONS = {
    EncryptionType.AES128: "AES cipher in CBC mode, 128-bit key (recommended)",
    EncryptionType.AES256: "AES cipher in CBC mode, 256-bit key (slower)",
}


# ==============================================================================
# Output and diagnostics
# ==============================================================================


class Plist(BoolOption, AttachFlag, CreateFlag, ConvertFlag, VerifyFlag):
    """Provide result output in plist format."""

    flag_name = "plist"


class Puppetstrings(BoolOption, AttachFlag, CreateFlag, ConvertFlag, VerifyFlag, MakehybridFlag):
    """Provide progress output that is easy for another program to parse."""

    flag_name = "puppetstrings"


class Verbose(
    BoolOption, AttachFlag, DetachFlag, CreateFlag, ConvertFlag, VerifyFlag, MakehybridFlag
):
    flag_name = "verbose"


class Quiet(BoolOption, AttachFlag, DetachFlag, CreateFlag, VerifyFlag, MakehybridFlag):
    """Close stdout and stderr. No /dev entries will be printed by attach."""

    flag_name = "quiet"


class Debug(
    BoolOption, AttachFlag, DetachFlag, CreateFlag, ConvertFlag, VerifyFlag, MakehybridFlag
):
    flag_name = "debug"


# ==============================================================================
# Passphrases and keys
# ==============================================================================


class Stdinpass(BoolOption, AttachFlag, CreateFlag, ConvertFlag, VerifyFlag, MakehybridFlag):
    """Read a null-terminated passphrase from standard input."""

    flag_name = "stdinpass"


class Agentpass(BoolOption, AttachFlag, CreateFlag, ConvertFlag, VerifyFlag):
    """Force the default behaviour of prompting for a passphrase."""

    flag_name = "agentpass"


class Recover(StringOption, AttachFlag, VerifyFlag):
    """Keychain holding the secret for the image's access certificate."""

    flag_name = "recover"


class Certificate(StringOption, CreateFlag, ConvertFlag):
    """Secondary access certificate (DER-encoded) for an encrypted image."""

    flag_name = "certificate"


class Pubkey(StringOption, CreateFlag, ConvertFlag):
    """Public keys, by hexadecimal hash, protecting a new encrypted image.

    hdiutil takes the hashes as one comma-separated argument.
    """

    flag_name = "pubkey"

    def __init__(self, *hashes: str):
        object.__setattr__(self, "value", ",".join(hashes))


# ==============================================================================
# Image keys
# ==============================================================================


class Srcimagekey(KeyValueOption, AttachFlag, CreateFlag, ConvertFlag, MakehybridFlag):
    """Key/value pair for the disk image recognition system."""

    flag_name = "srcimagekey"


class Tgtimagekey(KeyValueOption, AttachFlag, CreateFlag, ConvertFlag):
    """Key/value pair for any image created."""

    flag_name = "tgtimagekey"


class Imagekey(KeyValueOption, AttachFlag, CreateFlag):
    """Synonym of ``-srcimagekey`` (``-tgtimagekey`` when there is no input image)."""

    flag_name = "imagekey"


# ==============================================================================
# Input images
# ==============================================================================


class Shadow(StringOption, AttachFlag, ConvertFlag, VerifyFlag, MakehybridFlag):
    """Redirect writes to a shadow file instead of the base image."""

    flag_name = "shadow"


class Cacert(StringOption, AttachFlag, ConvertFlag, VerifyFlag, MakehybridFlag):
    """Certificate authority certificate (PEM file or c_rehash directory)."""

    flag_name = "cacert"


class Insecurehttp(BoolOption, AttachFlag, ConvertFlag, VerifyFlag, MakehybridFlag):
    """Ignore SSL host validation failures."""

    flag_name = "insecurehttp"


PLIST = Plist()
PUPPETSTRINGS = Puppetstrings()
VERBOSE = Verbose()
QUIET = Quiet()
DEBUG = Debug()
STDINPASS = Stdinpass()
AGENTPASS = Agentpass()
INSECUREHTTP = Insecurehttp()
