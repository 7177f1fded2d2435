import json
from pathlib import Path

import pytest

from winget_monitor import cli, monitor
from winget_monitor.runner import CommandUnavailable


def test_main_writes_to_overridden_paths(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    def _missing(args, run_log=None):
        raise CommandUnavailable("Failed to run winget: not found")

    monkeypatch.setattr(monitor, "run_command", _missing)
    out = tmp_path / "snapshot.json"
    log = tmp_path / "monitor.log"

    code = cli.main(["--output", str(out), "--log-file", str(log)])

    assert code == 0
    assert json.loads(out.read_text(encoding="utf-8"))["updateCount"] == 0
    assert "Failed to run winget: not found" in log.read_text(encoding="utf-8")


def test_main_rejects_missing_config(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--config", str(tmp_path / "absent.yml")])
    assert excinfo.value.code == 2
