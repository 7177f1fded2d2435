from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path


def setup_logging(level: str = "WARNING") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


def now_utc_iso() -> str:
    return datetime.now(timezone.utc).replace(microsecond=0).isoformat().replace("+00:00", "Z")


def now_local_iso() -> str:
    return datetime.now().replace(microsecond=0).isoformat()


def ensure_dir(path: Path) -> Path:
    path.mkdir(parents=True, exist_ok=True)
    return path


def resolve_home_path(value: str | Path | None, default_name: str) -> Path:
    if value:
        return Path(value).expanduser()
    return Path.home() / default_name


def write_text(path: Path, content: str) -> None:
    # Plain create-or-truncate; readers may observe a partial file mid-write.
    ensure_dir(path.parent)
    with path.open("w", encoding="utf-8") as handle:
        handle.write(content)


def append_line(path: Path, line: str) -> None:
    ensure_dir(path.parent)
    with path.open("a", encoding="utf-8") as handle:
        handle.write(line + "\n")
