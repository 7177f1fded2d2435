from pathlib import Path

import pytest

from winget_monitor.config import apply_cli_overrides, load_config, log_path, output_path


def test_defaults_point_at_home_directory(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setattr(Path, "home", classmethod(lambda cls: tmp_path))
    cfg = load_config(None)
    assert output_path(cfg) == tmp_path / ".winget-monitor"
    assert log_path(cfg) == tmp_path / ".winget-monitor.log"


def test_yaml_file_overrides_nested_values(tmp_path: Path) -> None:
    cfg_file = tmp_path / "monitor.yml"
    cfg_file.write_text("command:\n  line: winget upgrade --include-unknown\n", encoding="utf-8")
    cfg = load_config(cfg_file)
    assert cfg["command"]["line"] == "winget upgrade --include-unknown"
    assert cfg["command"]["shell"] == ["powershell.exe", "-Command"]


def test_missing_or_invalid_config_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "absent.yml")
    bad = tmp_path / "bad.yml"
    bad.write_text("- just\n- a list\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(bad)


def test_apply_cli_overrides_ignores_none_values() -> None:
    cfg = apply_cli_overrides(load_config(None), {"paths": {"output_file": None, "log_file": "x.log"}})
    assert cfg["paths"]["output_file"] is None
    assert cfg["paths"]["log_file"] == "x.log"
