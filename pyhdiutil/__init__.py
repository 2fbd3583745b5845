"""pyhdiutil: a typed façade over macOS ``hdiutil``.

Create, attach, convert, verify and detach disk images without building
command lines by hand. Options are typed values; each encodes itself for
the verbs it supports.

Example:
    >>> from pyhdiutil import Hdiutil
    >>> from pyhdiutil.storage.hdiutil.attach import NO_AUTO_FSCK, NO_VERIFY, MountPoint
    >>> hdiutil = Hdiutil()
    >>> node = hdiutil.attach("test.sparsebundle", NO_VERIFY, NO_AUTO_FSCK, MountPoint("./test"))
    >>> node.raw, node.number
    ('/dev/rdisk5', 5)
    >>> hdiutil.detach(node)
"""

from __future__ import annotations

from loguru import logger

from .__version__ import __version__
from .domain.models import AttachedEntity, AttachResult, DeviceNode, Verb
from .storage.devices import (
    device_number,
    find_device_node,
    parse_device_number,
    raw_device_node,
)
from .storage.exceptions import (
    CommandFailedError,
    ConflictingOptionError,
    DeviceNodeError,
    DeviceNumberError,
    HdiutilError,
    HdiutilNotFoundError,
    IncompatibleOptionError,
    InvocationError,
    MissingArgumentError,
    OptionError,
)
from .storage.hdiutil.attach import MountMode, Owners, ReadWriteMode
from .storage.hdiutil.common import EncryptionType
from .storage.hdiutil.convert import ImageFormat
from .storage.hdiutil.create import CreateType, FileSystem
from .storage.hdiutil.operations import (
    Hdiutil,
    attach,
    attach_result,
    convert,
    create,
    detach,
    makehybrid,
    verify,
)


# Library logging stays silent until setup_logging() is called.
logger.disable(__name__)


__all__ = [
    "__version__",
    # Operations
    "Hdiutil",
    "attach",
    "attach_result",
    "convert",
    "create",
    "detach",
    "makehybrid",
    "verify",
    # Domain
    "AttachedEntity",
    "AttachResult",
    "DeviceNode",
    "Verb",
    # Result extraction
    "device_number",
    "find_device_node",
    "parse_device_number",
    "raw_device_node",
    # Enumerations
    "CreateType",
    "EncryptionType",
    "FileSystem",
    "ImageFormat",
    "MountMode",
    "Owners",
    "ReadWriteMode",
    # Exceptions
    "CommandFailedError",
    "ConflictingOptionError",
    "DeviceNodeError",
    "DeviceNumberError",
    "HdiutilError",
    "HdiutilNotFoundError",
    "IncompatibleOptionError",
    "InvocationError",
    "MissingArgumentError",
    "OptionError",
]
