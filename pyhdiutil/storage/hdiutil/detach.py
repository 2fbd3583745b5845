"""Options for ``hdiutil detach``."""

from __future__ import annotations

from .flags import BoolOption, DetachFlag


class Force(BoolOption, DetachFlag):
    """Ignore open files on mounted volumes."""

    flag_name = "force"


FORCE = Force()
