from __future__ import annotations

import logging
from typing import Any

from .config import output_path
from .models import Report
from .parser import parse_upgrade_output
from .run_log import RunLogger
from .runner import CommandUnavailable, build_command_args, run_command
from .serializer import render_report
from .utils import now_utc_iso, write_text

LOGGER = logging.getLogger(__name__)


def run_monitor(cfg: dict[str, Any], run_log: RunLogger) -> int:
    """Run one check and write the snapshot; returns the process exit code.

    A missing or failing winget still produces an empty snapshot and exit 0.
    Any other error is fatal and returns 1 without guaranteeing an output file.
    """
    timestamp = now_utc_iso()
    out_path = output_path(cfg)
    run_log.log(f"Starting Winget Update Monitor at {timestamp}")

    try:
        raw = run_command(build_command_args(cfg["command"]), run_log)
        report = Report(timestamp=timestamp, updates=parse_upgrade_output(raw))
        write_text(out_path, render_report(report))

        run_log.log(f"Found {report.update_count} updates")
        run_log.log("Finished Winget Update Monitor")
        return 0
    except CommandUnavailable as exc:
        run_log.log(f"Error: Winget is not installed or failed to run: {exc.cause}")
        try:
            write_text(out_path, render_report(Report(timestamp=timestamp)))
        except Exception as write_exc:  # noqa: BLE001
            run_log.log(f"Internal error: {write_exc}")
            LOGGER.exception("Failed to write empty snapshot to %s", out_path)
            return 1
        return 0
    except Exception as exc:  # noqa: BLE001
        run_log.log(f"Internal error: {exc}")
        LOGGER.exception("Winget update monitor failed")
        return 1
