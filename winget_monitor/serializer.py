from __future__ import annotations

from typing import Iterable

from .models import Report, UpdateRecord

# Backslash must go first so later substitutions are not escaped twice.
_ESCAPES = (
    ("\\", "\\\\"),
    ('"', '\\"'),
    ("\b", "\\b"),
    ("\n", "\\n"),
    ("\r", "\\r"),
    ("\t", "\\t"),
)


def escape_json_string(value: str) -> str:
    for raw, escaped in _ESCAPES:
        value = value.replace(raw, escaped)
    # Any other control character would make the document invalid JSON.
    return "".join(f"\\u{ord(ch):04x}" if ord(ch) < 0x20 else ch for ch in value)


def _quote(value: str) -> str:
    return f'"{escape_json_string(value)}"'


def _render_update(update: UpdateRecord) -> list[str]:
    return [
        "    {",
        f'      "name": {_quote(update.name)},',
        f'      "version": {_quote(update.version)},',
        f'      "source": {_quote(update.source)}',
        "    }",
    ]


def serialize_report(timestamp: str, updates: Iterable[UpdateRecord]) -> str:
    """Render the update snapshot as pretty-printed JSON with a fixed key order."""
    updates = list(updates)
    lines = [
        "{",
        f'  "timestamp": {_quote(timestamp)},',
        f'  "updateCount": {len(updates)},',
    ]
    if not updates:
        lines.append('  "updates": []')
    else:
        lines.append('  "updates": [')
        for idx, update in enumerate(updates):
            rendered = _render_update(update)
            if idx < len(updates) - 1:
                rendered[-1] += ","
            lines.extend(rendered)
        lines.append("  ]")
    lines.append("}")
    return "\n".join(lines) + "\n"


def render_report(report: Report) -> str:
    return serialize_report(report.timestamp, report.updates)
