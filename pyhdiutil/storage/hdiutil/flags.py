"""Encoding of typed option values into hdiutil argument tokens.

hdiutil flags take a single leading hyphen. Every option value maps to
exactly one token sequence:

    plain bool       -name            (nothing when false)
    negatable bool   -name / -noname  (always emitted)
    string           -name value
    int              -name 42
    string list      -name a b c
    key/value        -name key=value

The encoders are pure and never fail. Verb capabilities are layered on top
of the option base types as small mixins, one per verb, each exposing a
``<verb>_flag()`` method that returns the option's encoding.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Iterable, Mapping


def bool_flag(name: str, value: bool) -> list[str]:
    if value:
        return [f"-{name}"]
    return []


def bool_no_flag(name: str, value: bool) -> list[str]:
    if value:
        return [f"-{name}"]
    return [f"-no{name}"]


def string_flag(name: str, value: str) -> list[str]:
    return [f"-{name}", str(value)]


def int_flag(name: str, value: int) -> list[str]:
    return [f"-{name}", str(int(value))]


def string_list_flag(name: str, values: Iterable[str]) -> list[str]:
    return [f"-{name}", *(str(value) for value in values)]


def key_value_flag(name: str, mapping: Mapping[str, str]) -> list[str]:
    """Encode a single ``key=value`` pair.

    hdiutil accepts one pair per flag, so only one entry is read; with
    several entries the last one wins.
    """
    pair = None
    for key, value in mapping.items():
        pair = f"{key}={value}"
    if pair is None:
        return []
    return [f"-{name}", pair]


# ==============================================================================
# Option base types
# ==============================================================================


class Option:
    """Base for every option value.

    ``family`` names a group of mutually exclusive options; two options
    sharing a family cannot be supplied to one command.
    """

    flag_name: ClassVar[str] = ""
    family: ClassVar[str | None] = None

    def encode(self) -> list[str]:
        raise NotImplementedError


@dataclass(frozen=True)
class BoolOption(Option):
    enabled: bool = True

    def encode(self) -> list[str]:
        return bool_flag(self.flag_name, self.enabled)


@dataclass(frozen=True)
class NegatableOption(Option):
    """Boolean that always asserts an explicit choice.

    Some hdiutil defaults depend on the OS release; the ``-no`` form pins
    the behaviour either way.
    """

    enabled: bool = True

    def encode(self) -> list[str]:
        return bool_no_flag(self.flag_name, self.enabled)


@dataclass(frozen=True)
class StringOption(Option):
    value: str

    def encode(self) -> list[str]:
        return string_flag(self.flag_name, self.value)


@dataclass(frozen=True)
class IntOption(Option):
    value: int

    def encode(self) -> list[str]:
        return int_flag(self.flag_name, self.value)


@dataclass(frozen=True, init=False)
class StringListOption(Option):
    values: tuple[str, ...]

    def __init__(self, *values: str):
        object.__setattr__(self, "values", tuple(str(value) for value in values))

    def encode(self) -> list[str]:
        return string_list_flag(self.flag_name, self.values)


@dataclass(frozen=True, init=False)
class KeyValueOption(Option):
    """Key/value pair, built from ``(key, value)`` or a one-entry mapping."""

    items: tuple[tuple[str, str], ...]

    def __init__(self, key: str | Mapping[str, str], value: str | None = None):
        if isinstance(key, Mapping):
            items = tuple((str(k), str(v)) for k, v in key.items())
        else:
            items = ((str(key), "" if value is None else str(value)),)
        object.__setattr__(self, "items", items)

    def encode(self) -> list[str]:
        return key_value_flag(self.flag_name, dict(self.items))


# ==============================================================================
# Verb capabilities
# ==============================================================================


class CreateFlag:
    def create_flag(self) -> list[str]:
        return self.encode()


class AttachFlag:
    def attach_flag(self) -> list[str]:
        return self.encode()


class DetachFlag:
    def detach_flag(self) -> list[str]:
        return self.encode()


class ConvertFlag:
    def convert_flag(self) -> list[str]:
        return self.encode()


class VerifyFlag:
    def verify_flag(self) -> list[str]:
        return self.encode()


class MakehybridFlag:
    def makehybrid_flag(self) -> list[str]:
        return self.encode()


class SizeFlag:
    """Size specification accepted as the first argument of ``create``."""

    def size_flag(self) -> list[str]:
        return self.encode()
