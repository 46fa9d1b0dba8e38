from pathlib import Path
from typing import Any

import pytest

from pencil.config import load_config
from pencil.utils.errors import ConfigError


def test_env_log_level(monkeypatch: Any) -> None:
    monkeypatch.setenv("PENCIL_LOG_LEVEL", "debug")
    cfg = load_config()
    assert cfg.logging.level == "DEBUG"


def test_custom_env_override(monkeypatch: Any, tmp_path: Path) -> None:
    cfg_file = tmp_path / "cfg.yml"
    cfg_file.write_text('logging:\n  level_env: "CUSTOM_LEVEL"\n', encoding="utf-8")
    monkeypatch.setenv("CUSTOM_LEVEL", "ERROR")
    cfg = load_config(cfg_file)
    assert cfg.logging.level_env == "CUSTOM_LEVEL"
    assert cfg.logging.level == "ERROR"


def test_explicit_env_mapping_wins_over_process_env(monkeypatch: Any) -> None:
    monkeypatch.setenv("PENCIL_LOG_LEVEL", "DEBUG")
    cfg = load_config(env={"PENCIL_LOG_LEVEL": "INFO"})
    assert cfg.logging.level == "INFO"


def test_bad_env_level_rejected() -> None:
    with pytest.raises(ConfigError):
        load_config(env={"PENCIL_LOG_LEVEL": "chatty"})
