"""Options for ``hdiutil verify``."""

from __future__ import annotations

from .flags import NegatableOption, VerifyFlag


class Cache(NegatableOption, VerifyFlag):
    """Cache the result of checksum verification."""

    flag_name = "cache"


CACHE = Cache(True)
NO_CACHE = Cache(False)
