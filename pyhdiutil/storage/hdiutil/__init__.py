"""hdiutil command composition and execution.

Option values encode themselves for each verb they support; the builder
assembles argument vectors and the runner executes them.

Modules:
    - flags: Encoding kinds and verb capability mixins
    - common: Options shared by several verbs, EncryptionType
    - create / attach / detach / convert / verify / makehybrid: Verb option sets
    - builder: Argument vector composition
    - command_runners: Process execution and failure translation
    - operations: Hdiutil façade and module-level verb functions
"""

from . import attach, common, convert, create, detach, makehybrid, verify
from .attach import MountMode, Owners, ReadWriteMode
from .builder import (
    build_attach,
    build_convert,
    build_create,
    build_detach,
    build_makehybrid,
    build_verify,
    encode_for,
    encode_options,
)
from .command_runners import run_checked_command, run_command
from .common import EncryptionType
from .convert import ImageFormat
from .create import CreateType, FileSystem
from .operations import Hdiutil, default_hdiutil


__all__ = [
    # Verb option modules
    "attach",
    "common",
    "convert",
    "create",
    "detach",
    "makehybrid",
    "verify",
    # Enumerations
    "CreateType",
    "EncryptionType",
    "FileSystem",
    "ImageFormat",
    "MountMode",
    "Owners",
    "ReadWriteMode",
    # Builders
    "build_attach",
    "build_convert",
    "build_create",
    "build_detach",
    "build_makehybrid",
    "build_verify",
    "encode_for",
    "encode_options",
    # Execution
    "Hdiutil",
    "default_hdiutil",
    "run_checked_command",
    "run_command",
]
