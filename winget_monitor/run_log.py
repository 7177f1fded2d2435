from __future__ import annotations

import sys
from pathlib import Path
from typing import TextIO

from .utils import append_line, now_local_iso


class RunLogger:
    """Timestamped run log echoed to stdout and appended to a file.

    File errors never propagate: the line is written to stderr instead.
    """

    def __init__(
        self,
        log_path: Path,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
    ) -> None:
        self.log_path = log_path
        self._stdout = stdout
        self._stderr = stderr

    def format(self, message: str) -> str:
        return f"[{now_local_iso()}] {message}"

    def log(self, message: str) -> None:
        line = self.format(message)
        out = self._stdout or sys.stdout
        print(line, file=out, flush=True)
        try:
            append_line(self.log_path, line)
        except OSError as exc:
            err = self._stderr or sys.stderr
            print(f"Failed to write to log file: {exc}", file=err)
            print(line, file=err)
