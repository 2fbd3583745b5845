"""Command execution for hdiutil.

Commands run synchronously with output captured; there is no timeout and
no retry. A failed command may already have created files or attached a
device, so recovery is left to the caller.
"""

from __future__ import annotations

import subprocess
from typing import Sequence

from pyhdiutil.logging import LoggerFactory
from pyhdiutil.storage.exceptions import (
    CommandFailedError,
    HdiutilNotFoundError,
    InvocationError,
)


log = LoggerFactory.for_hdiutil()


def run_command(command: Sequence[str], input_text: str | None = None):
    """Run a command and return the CompletedProcess, whatever its exit status.

    Raises:
        HdiutilNotFoundError: If the executable does not exist
        InvocationError: If the executable cannot be started
    """
    command = [str(part) for part in command]
    log.debug(f"Running command: {' '.join(command)}")
    try:
        result = subprocess.run(
            command,
            input=input_text,
            text=True,
            capture_output=True,
        )
    except FileNotFoundError as error:
        log.error(f"Executable not found: {command[0]}")
        raise HdiutilNotFoundError(command[0]) from error
    except OSError as error:
        log.error(f"Cannot execute {command[0]}: {error}")
        raise InvocationError(command[0], error.strerror or str(error)) from error
    if result.stdout:
        log.debug(f"stdout: {result.stdout.strip()}")
    if result.stderr:
        log.debug(f"stderr: {result.stderr.strip()}")
    log.debug(f"Command completed with return code {result.returncode}")
    return result


def run_checked_command(command: Sequence[str], input_text: str | None = None) -> str:
    """Run a command and raise CommandFailedError if it exits non-zero.

    Returns:
        The captured standard output
    """
    result = run_command(command, input_text=input_text)
    if result.returncode != 0:
        stderr = result.stderr or ""
        stdout = result.stdout or ""
        log.error(
            f"Command failed ({' '.join(str(part) for part in command)}): "
            f"{stderr.strip() or stdout.strip() or 'no output'}"
        )
        raise CommandFailedError(command, result.returncode, stderr, stdout)
    return result.stdout or ""


__all__ = [
    "run_command",
    "run_checked_command",
]
