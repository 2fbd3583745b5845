"""Device node extraction from hdiutil output.

``hdiutil attach`` prints one row per device entry, tab separated:

    /dev/disk4          GUID_partition_scheme
    /dev/disk4s1        Apple_HFS                       /Volumes/test

The first ``/dev/diskN`` found is the whole-disk node used to detach the
image later. Missing device paths are not errors: ``find_device_node``
returns an empty string and callers must check for it.

Operations:
    - find_device_node(): First ``/dev/diskN`` in attach output
    - raw_device_node(): ``/dev/diskN`` -> ``/dev/rdiskN``
    - device_number(): ``/dev/diskN`` -> N (0 when unparseable)
    - parse_device_number(): Like device_number() but raises on failure
    - parse_attach_output(): Rows of the attach table
    - parse_attach_plist(): ``system-entities`` of ``attach -plist`` output
    - extract_attach_result(): AttachResult from either output style
"""

from __future__ import annotations

import plistlib
import re
from xml.parsers.expat import ExpatError

from pyhdiutil.domain.models import AttachedEntity, AttachResult, DeviceNode
from pyhdiutil.logging import LoggerFactory
from pyhdiutil.storage.exceptions import DeviceNumberError


DEVICE_PREFIX = "/dev/disk"
DEVICE_NODE_PATTERN = re.compile(r"/dev/disk\d+")

log = LoggerFactory.for_devices()


def find_device_node(output: str) -> str:
    match = DEVICE_NODE_PATTERN.search(output or "")
    if not match:
        log.debug("No device node found in attach output")
        return ""
    return match.group(0)


def raw_device_node(device_node: str) -> str:
    """Rewrite the first ``disk`` segment to ``rdisk``.

    A pure string transform: ``raw_device_node("/dev/disk3") == "/dev/rdisk3"``.
    Applying it twice is not meaningful.
    """
    return device_node.replace("disk", "rdisk", 1)


def parse_device_number(device_node: str) -> int:
    """Return the trailing device number.

    Raises:
        DeviceNumberError: If the node is not ``/dev/disk`` followed by digits
    """
    remainder = device_node
    if device_node.startswith(DEVICE_PREFIX):
        remainder = device_node[len(DEVICE_PREFIX):]
    if not re.fullmatch(r"[0-9]+", remainder):
        raise DeviceNumberError(device_node)
    return int(remainder)


def device_number(device_node: str) -> int:
    """Return the trailing device number, or 0 if it cannot be parsed.

    0 is also a genuine device number; use parse_device_number() to tell
    the two apart.
    """
    try:
        return parse_device_number(device_node)
    except DeviceNumberError:
        log.debug(f"Unparseable device node {device_node!r}, reporting 0")
        return 0


def parse_attach_output(output: str) -> list[AttachedEntity]:
    """Split the attach table into entities, skipping non-device lines."""
    entities = []
    for line in (output or "").splitlines():
        line = line.strip()
        if not line.startswith(DEVICE_PREFIX):
            continue
        if "\t" in line:
            columns = [column.strip() for column in line.split("\t")]
        else:
            columns = re.split(r"\s{2,}", line)
        dev_entry = columns[0]
        content_hint = columns[1] if len(columns) > 1 and columns[1] else None
        mount_point = columns[2] if len(columns) > 2 and columns[2] else None
        entities.append(AttachedEntity(dev_entry, content_hint, mount_point))
    return entities


def parse_attach_plist(output: str) -> list[AttachedEntity]:
    """Read ``system-entities`` from ``hdiutil attach -plist`` output.

    Entries that are not dictionaries or carry no ``dev-entry`` are skipped.

    Raises:
        ValueError: If the output is not a plist dictionary
    """
    try:
        data = plistlib.loads(output.encode("utf-8"))
    except (ValueError, ExpatError) as error:
        raise ValueError(f"Invalid plist output: {error}") from error
    if not isinstance(data, dict):
        raise ValueError("Attach plist output is not a dictionary")
    system_entities = data.get("system-entities", [])
    if not isinstance(system_entities, list):
        return []
    entities = []
    for entry in system_entities:
        if not isinstance(entry, dict):
            continue
        dev_entry = entry.get("dev-entry")
        if not dev_entry or not isinstance(dev_entry, str):
            continue
        entities.append(
            AttachedEntity(
                dev_entry,
                entry.get("content-hint"),
                entry.get("mount-point"),
            )
        )
    return entities


def extract_attach_result(output: str) -> AttachResult:
    """Build an AttachResult from plain or ``-plist`` attach output.

    Never raises: the image is already attached when this runs. Plist
    output that cannot be read falls back to a scan of the raw text.
    """
    output = output or ""
    if output.lstrip().startswith("<?xml"):
        try:
            entities = parse_attach_plist(output)
        except ValueError as error:
            log.warning(f"Unreadable attach plist, scanning raw output: {error}")
            return AttachResult(DeviceNode(find_device_node(output)), (), output)
        whole = [entity.dev_entry for entity in entities if entity.is_whole_disk]
        node = whole[0] if whole else find_device_node("\n".join(e.dev_entry for e in entities))
    else:
        entities = parse_attach_output(output)
        node = find_device_node(output)
    return AttachResult(DeviceNode(node), tuple(entities), output)
