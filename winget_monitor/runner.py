from __future__ import annotations

import logging
import subprocess
from typing import Any, Sequence

from .run_log import RunLogger

LOGGER = logging.getLogger(__name__)


class CommandUnavailable(Exception):
    """The package manager could not be run or exited with a failure status.

    A missing executable and a crashed run are deliberately reported the same
    way; ``cause`` carries the human-readable reason.
    """

    def __init__(self, cause: str) -> None:
        super().__init__(cause)
        self.cause = cause


def build_command_args(command_cfg: dict[str, Any]) -> list[str]:
    line = str(command_cfg["line"])
    shell = [str(part) for part in command_cfg.get("shell") or []]
    if not shell:
        return line.split()
    return [*shell, f"&{{{line}}}"]


def run_command(args: Sequence[str], run_log: RunLogger | None = None) -> str:
    """Run ``args`` once and return its combined stdout/stderr text."""
    if run_log is not None:
        run_log.log(f"Executing command: {' '.join(args)}")
    try:
        with subprocess.Popen(
            list(args),
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            stdin=subprocess.DEVNULL,
            text=True,
            encoding="utf-8",
            errors="replace",
        ) as proc:
            # Drain before waiting so a full pipe buffer cannot stall the child.
            output = proc.stdout.read() if proc.stdout is not None else ""
            exit_code = proc.wait()
    except OSError as exc:
        raise CommandUnavailable(f"Failed to run winget: {exc}") from exc

    LOGGER.info("Command exited with code %s (%s chars of output)", exit_code, len(output))
    if exit_code != 0:
        raise CommandUnavailable(f"Winget command failed with exit code {exit_code}")
    return output
