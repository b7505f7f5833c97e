"""Tests for config discovery and loading."""

from pathlib import Path

import pytest

from lambdaplay.config.discovery import CONFIG_ENV_VAR, CONFIG_FILENAME, find_config, load_config
from lambdaplay.config.models import LambdaplayConfig


class TestFindConfig:
    def test_finds_in_current_dir(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text("[reduce]\npartitions = 2\n")
        assert find_config(tmp_path) == config_file

    def test_walks_up(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text("")
        child = tmp_path / "a" / "b" / "c"
        child.mkdir(parents=True)
        assert find_config(child) == config_file

    def test_returns_none_when_not_found(self, tmp_path: Path) -> None:
        assert find_config(tmp_path) is None

    def test_defaults_to_cwd(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text("")
        assert find_config() == config_file.resolve()

    def test_env_var_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        custom = tmp_path / "custom.toml"
        custom.write_text("")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(custom))
        assert find_config(tmp_path) == custom

    def test_env_var_missing_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "missing.toml"))
        assert find_config(tmp_path) is None


class TestLoadConfig:
    def test_defaults_when_missing(self, tmp_path: Path) -> None:
        assert load_config(cwd=tmp_path) == LambdaplayConfig()

    def test_sparse_override(self, tmp_path: Path) -> None:
        path = tmp_path / CONFIG_FILENAME
        path.write_text("[reduce]\nparallel = true\n")
        cfg = load_config(path)
        assert cfg.reduce.parallel is True
        assert cfg.reduce.partitions == 1
        assert cfg.output.width == 120
