"""
Pytest configuration and shared fixtures for pyhdiutil tests.

This module provides common fixtures and utilities used across all test modules.
"""

import stat
from pathlib import Path
from unittest.mock import Mock

import pytest
from loguru import logger

from pyhdiutil.config import settings


# ==============================================================================
# hdiutil Output Fixtures
# ==============================================================================


@pytest.fixture
def attach_output() -> str:
    """
    Fixture providing typical ``hdiutil attach`` output.

    Returns:
        Tab separated table of the device entries of an attached image.
    """
    return (
        "/dev/disk4          \tGUID_partition_scheme          \t\n"
        "/dev/disk4s1        \tApple_HFS                      \t/Volumes/test\n"
    )


@pytest.fixture
def attach_plist_output() -> str:
    """Fixture providing ``hdiutil attach -plist`` output."""
    return """<?xml version="1.0" encoding="UTF-8"?>
<!DOCTYPE plist PUBLIC "-//Apple//DTD PLIST 1.0//EN" "http://www.apple.com/DTDs/PropertyList-1.0.dtd">
<plist version="1.0">
<dict>
    <key>system-entities</key>
    <array>
        <dict>
            <key>content-hint</key>
            <string>GUID_partition_scheme</string>
            <key>dev-entry</key>
            <string>/dev/disk7</string>
        </dict>
        <dict>
            <key>content-hint</key>
            <string>Apple_HFS</string>
            <key>dev-entry</key>
            <string>/dev/disk7s1</string>
            <key>mount-point</key>
            <string>/Volumes/test</string>
        </dict>
    </array>
</dict>
</plist>
"""


# ==============================================================================
# Subprocess Fixtures
# ==============================================================================


@pytest.fixture
def mock_subprocess_run(mocker):
    """
    Fixture providing a mock for subprocess.run.

    Returns:
        Mock object for subprocess.run
    """
    return mocker.patch("subprocess.run")


@pytest.fixture
def mock_subprocess_success(mocker, attach_output) -> Mock:
    """
    Fixture providing a successful subprocess.run mock.

    Returns:
        Mock that returns attach output with exit status 0.
    """
    mock_result = Mock()
    mock_result.returncode = 0
    mock_result.stdout = attach_output
    mock_result.stderr = ""
    return mocker.patch("subprocess.run", return_value=mock_result)


@pytest.fixture
def mock_subprocess_failure(mocker) -> Mock:
    """
    Fixture providing a failing subprocess.run mock.

    Returns:
        Mock that returns exit status 1 with hdiutil's diagnostic on stderr.
    """
    mock_result = Mock()
    mock_result.returncode = 1
    mock_result.stdout = ""
    mock_result.stderr = "hdiutil: attach failed - No such file or directory\n"
    return mocker.patch("subprocess.run", return_value=mock_result)


# ==============================================================================
# Fake Executable Fixtures
# ==============================================================================


def _write_script(path: Path, body: str) -> Path:
    path.write_text(body, encoding="utf-8")
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return path


@pytest.fixture
def fake_hdiutil(tmp_path) -> Path:
    """
    Fixture providing an executable standing in for hdiutil.

    The script records its arguments, one per line, in ``args.txt`` next
    to itself and prints attach-style output.

    Returns:
        Path to the executable.
    """
    script = tmp_path / "hdiutil"
    return _write_script(
        script,
        "#!/bin/sh\n"
        f'printf "%s\\n" "$@" > "{tmp_path / "args.txt"}"\n'
        'printf "/dev/disk5\\tGUID_partition_scheme\\t\\n"\n'
        'printf "/dev/disk5s1\\tApple_HFS\\t/Volumes/test\\n"\n',
    )


@pytest.fixture
def failing_hdiutil(tmp_path) -> Path:
    """Fixture providing an executable that prints a diagnostic and exits 1."""
    script = tmp_path / "hdiutil-failing"
    return _write_script(
        script,
        "#!/bin/sh\n"
        'echo "hdiutil: attach failed - No such file or directory" >&2\n'
        "exit 1\n",
    )


@pytest.fixture
def truncated_plist_hdiutil(tmp_path) -> Path:
    """
    Fixture providing an executable whose ``-plist`` attach output is cut off.

    hdiutil has already attached the image when such output is read.
    """
    script = tmp_path / "hdiutil-truncated"
    return _write_script(
        script,
        "#!/bin/sh\n"
        "cat <<'PLIST'\n"
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        '<plist version="1.0"><dict><key>system-entities</key>'
        "<array><dict><key>dev-entry</key><string>/dev/disk5</string>\n"
        "PLIST\n",
    )


@pytest.fixture
def recorded_args(tmp_path):
    """
    Fixture returning a reader for the arguments recorded by fake_hdiutil.

    Returns:
        Callable returning the recorded argument list.
    """

    def read() -> list:
        return (tmp_path / "args.txt").read_text(encoding="utf-8").splitlines()

    return read


# ==============================================================================
# Settings Fixtures
# ==============================================================================


@pytest.fixture
def temp_settings_file(tmp_path, monkeypatch) -> Path:
    """
    Fixture pointing the settings store at a temporary file.

    Args:
        tmp_path: pytest's built-in temporary directory fixture.

    Returns:
        Path to the (not yet existing) settings file.
    """
    settings_file = tmp_path / "settings.json"
    monkeypatch.setattr(settings, "SETTINGS_PATH", settings_file)
    monkeypatch.delenv("PYHDIUTIL_HDIUTIL_PATH", raising=False)
    yield settings_file
    monkeypatch.undo()
    settings.load_settings()


# ==============================================================================
# Logging Fixtures
# ==============================================================================


@pytest.fixture(autouse=True)
def silence_package_logging():
    """Restore the package's default of logging nothing after each test."""
    yield
    logger.disable("pyhdiutil")

