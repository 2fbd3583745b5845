"""Custom exceptions for disk image operations.

This module defines a hierarchy of exceptions raised while composing and
running hdiutil commands, so callers can tell a bad request apart from a
failure reported by the external tool.

Exception Hierarchy:
    HdiutilError (base)
        ├── OptionError
        │   ├── IncompatibleOptionError
        │   └── ConflictingOptionError
        ├── MissingArgumentError
        ├── InvocationError
        │   └── HdiutilNotFoundError
        ├── CommandFailedError
        └── DeviceNodeError
            └── DeviceNumberError

Usage:
    from pyhdiutil.storage.exceptions import CommandFailedError

    try:
        hdiutil.detach(device_node)
    except CommandFailedError as error:
        print(error.stderr)
"""

from __future__ import annotations

from typing import Sequence


class HdiutilError(Exception):
    """Base exception for all disk image operations."""


class OptionError(HdiutilError):
    """Base exception for option composition errors."""


class IncompatibleOptionError(OptionError):
    """Option has no encoding for the requested verb."""

    def __init__(self, option: object, verb: str):
        self.option = option
        self.verb = verb
        super().__init__(f"Option {option!r} is not supported by '{verb}'")


class ConflictingOptionError(OptionError):
    """Two members of the same mutually exclusive family were supplied."""

    def __init__(self, family: str, first: object, second: object):
        self.family = family
        self.first = first
        self.second = second
        super().__init__(
            f"Conflicting {family} options: {first!r} and {second!r}"
        )


class MissingArgumentError(HdiutilError):
    """A required positional argument was empty or missing."""

    def __init__(self, verb: str, argument: str):
        self.verb = verb
        self.argument = argument
        super().__init__(f"'{verb}' requires a non-empty {argument}")


class InvocationError(HdiutilError):
    """The external executable could not be started."""

    def __init__(self, executable: str, reason: str = ""):
        self.executable = executable
        self.reason = reason
        msg = f"Cannot execute {executable}"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)


class HdiutilNotFoundError(InvocationError):
    """The configured hdiutil executable does not exist."""

    def __init__(self, executable: str):
        super().__init__(executable, "no such file")


class CommandFailedError(HdiutilError):
    """hdiutil exited with a non-zero status."""

    def __init__(
        self,
        command: Sequence[str],
        returncode: int,
        stderr: str = "",
        stdout: str = "",
    ):
        self.command = list(command)
        self.returncode = returncode
        self.stderr = stderr
        self.stdout = stdout
        message = stderr.strip() or stdout.strip() or "Command failed"
        super().__init__(
            f"Command failed ({' '.join(self.command)}) "
            f"with exit status {returncode}: {message}"
        )

    @property
    def diagnostic(self) -> str:
        """The external tool's error text."""
        return self.stderr.strip() or self.stdout.strip()


class DeviceNodeError(HdiutilError):
    """Base exception for device node errors."""


class DeviceNumberError(DeviceNodeError):
    """Device node does not end in a parseable device number."""

    def __init__(self, device_node: str):
        self.device_node = device_node
        super().__init__(f"No device number in device node: {device_node!r}")
