from __future__ import annotations

import argparse
from pathlib import Path

from . import __version__
from .config import apply_cli_overrides, load_config, log_path
from .monitor import run_monitor
from .run_log import RunLogger
from .utils import setup_logging


def _create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="winget-monitor",
        description="Snapshot available winget upgrades to a JSON file",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--config", type=Path, help="Optional YAML file overriding defaults")
    parser.add_argument("--output", type=Path, default=None, help="Snapshot path (default ~/.winget-monitor)")
    parser.add_argument("--log-file", type=Path, default=None, help="Run log path (default ~/.winget-monitor.log)")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = _create_parser()
    args = parser.parse_args(argv)

    try:
        cfg = load_config(args.config)
    except (FileNotFoundError, ValueError) as exc:
        parser.error(str(exc))
        return 2
    cfg = apply_cli_overrides(
        cfg,
        {
            "paths": {
                "output_file": str(args.output) if args.output else None,
                "log_file": str(args.log_file) if args.log_file else None,
            }
        },
    )
    setup_logging(cfg.get("runtime", {}).get("log_level", "WARNING"))

    run_log = RunLogger(log_path(cfg))
    return run_monitor(cfg, run_log)


if __name__ == "__main__":
    raise SystemExit(main())
