from __future__ import annotations

import logging
from dataclasses import dataclass

from .models import DEFAULT_SOURCE, UpdateRecord

LOGGER = logging.getLogger(__name__)

NO_UPGRADES_SENTINELS = ("No available upgrades", "No updates available")
HEADER_LABELS = ("Name", "Version", "Available")
SEPARATOR_MARKER = "---"
SKIP_PREFIXES = ("No",)
SKIP_MARKERS = ("upgrades available",)
FOOTER_PREFIXES = ("--", "The", "Found")


@dataclass(frozen=True, slots=True)
class ColumnLayout:
    """Start offsets of the listing columns, ``-1`` where a label is missing.

    winget pads every row to the header's fixed-width grid, so the offsets
    found in the header line are reused unchanged for each data row.
    """

    name: int
    id: int
    version: int
    available: int
    source: int

    @classmethod
    def from_header(cls, header: str) -> ColumnLayout:
        return cls(
            name=header.find("Name"),
            id=header.find("Id"),
            version=header.find("Version"),
            available=header.find("Available"),
            source=header.find("Source"),
        )


def is_header_line(line: str) -> bool:
    return all(label in line for label in HEADER_LABELS)


def parse_row(layout: ColumnLayout, line: str) -> UpdateRecord | None:
    """Slice one data row into a record, or return None if it does not fit."""
    length = len(line)
    if length < layout.available:
        return None

    if not (0 <= layout.name < layout.id <= length):
        return None
    name = line[layout.name : layout.id].strip()
    if not name:
        return None

    # The Available column holds the upgrade target; the installed Version is ignored.
    if not (0 <= layout.version < layout.available < length):
        return None
    end = layout.source if layout.source > layout.available else length
    version = line[layout.available : min(end, length)].strip()

    source = DEFAULT_SOURCE
    if 0 <= layout.source < length:
        source = line[layout.source :].strip() or DEFAULT_SOURCE

    return UpdateRecord(name=name, version=version, source=source)


def parse_upgrade_output(output: str) -> list[UpdateRecord]:
    """Parse ``winget upgrade`` text into update records in listing order.

    Never raises: missing headers, malformed rows and unexpected layouts
    degrade to fewer (or zero) records.
    """
    if any(sentinel in output for sentinel in NO_UPGRADES_SENTINELS):
        return []

    lines = output.splitlines()
    header_index = next((i for i, line in enumerate(lines) if is_header_line(line)), -1)
    if header_index == -1:
        LOGGER.debug("No header line found in %s lines of output", len(lines))
        return []

    separator_index = header_index + 1
    if separator_index >= len(lines) or SEPARATOR_MARKER not in lines[separator_index]:
        LOGGER.debug("Header at line %s is not followed by a separator", header_index)
        return []

    layout = ColumnLayout.from_header(lines[header_index])
    updates: list[UpdateRecord] = []
    for line in lines[separator_index + 1 :]:
        if not line.strip() or line.startswith(SKIP_PREFIXES) or any(m in line for m in SKIP_MARKERS):
            continue
        if line.startswith(FOOTER_PREFIXES):
            break
        try:
            record = parse_row(layout, line)
        except Exception as exc:  # noqa: BLE001
            LOGGER.debug("Skipping row %r: %s", line, exc)
            continue
        if record is None:
            LOGGER.debug("Skipping row %r: does not match header columns", line)
            continue
        updates.append(record)
    return updates
