from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any

DEFAULT_SOURCE = "winget"


@dataclass(frozen=True, slots=True)
class UpdateRecord:
    name: str
    version: str
    source: str = DEFAULT_SOURCE


@dataclass(slots=True)
class Report:
    timestamp: str
    updates: list[UpdateRecord] = field(default_factory=list)

    @property
    def update_count(self) -> int:
        return len(self.updates)

    def to_dict(self) -> dict[str, Any]:
        return {
            "timestamp": self.timestamp,
            "updateCount": self.update_count,
            "updates": [asdict(update) for update in self.updates],
        }
