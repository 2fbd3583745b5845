"""Build-time validation of hdiutil options.

hdiutil itself resolves conflicting flags by its own parsing rules, which
differ between verbs and OS releases. These checks reject requests that
cannot mean anything sensible before a process is started:

- an option with no encoding for the verb in use
- two members of one mutually exclusive family (image format, filesystem,
  encryption, read/write mode, mount location, ...)

Repeating the same option, or combining options from different families,
is passed through unchanged in caller order.

Example:
    from pyhdiutil.storage.validation import validate_options

    validate_options(Verb.CREATE, [FileSystem.APFS, FileSystem.HFS_PLUS])
    # ConflictingOptionError
"""

from __future__ import annotations

from enum import Enum
from os import PathLike, fspath
from typing import Iterable

from pyhdiutil.domain.models import Verb
from pyhdiutil.storage.exceptions import (
    ConflictingOptionError,
    IncompatibleOptionError,
    MissingArgumentError,
)


def supports(option: object, verb: Verb) -> bool:
    """Return True if the option provides an encoding for the verb."""
    return callable(getattr(option, verb.capability, None))


def option_family(option: object) -> str | None:
    """Name of the option's mutually exclusive family, if it has one.

    Members of an enumeration form a family named after the enumeration
    unless the enumeration says otherwise.
    """
    family = getattr(option, "family", None)
    if family:
        return family
    if isinstance(option, Enum):
        return type(option).__name__
    return None


def validate_compatibility(verb: Verb, options: Iterable[object]) -> None:
    """
    Raises:
        IncompatibleOptionError: If an option has no encoding for the verb
    """
    for option in options:
        if not supports(option, verb):
            raise IncompatibleOptionError(option, verb.value)


def validate_exclusive(options: Iterable[object]) -> None:
    """
    Raises:
        ConflictingOptionError: If two different members of a family are given
    """
    seen: dict[str, object] = {}
    for option in options:
        family = option_family(option)
        if family is None:
            continue
        previous = seen.get(family)
        if previous is not None and previous != option:
            raise ConflictingOptionError(family, previous, option)
        seen[family] = option


def validate_options(verb: Verb, options: Iterable[object], *, strict: bool = True) -> None:
    """Validate options for one command.

    Compatibility is always enforced, since an incompatible option has no
    encoding. Exclusive families are only checked when ``strict`` is set.
    """
    options = list(options)
    validate_compatibility(verb, options)
    if strict:
        validate_exclusive(options)


def validate_required(verb: Verb, name: str, value: str | PathLike | None) -> str:
    """Return the positional value as a string, rejecting empty values.

    Raises:
        MissingArgumentError: If the value is None or empty
    """
    if value is None:
        raise MissingArgumentError(verb.value, name)
    text = fspath(value) if isinstance(value, PathLike) else str(value)
    if not text:
        raise MissingArgumentError(verb.value, name)
    return text
