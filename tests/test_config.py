"""Tests for caseconv.config (caseconv.yaml loading)."""

import logging
from pathlib import Path

import pytest

from caseconv.config import DEFAULT_CONFIG, load_config, resolve_config


class TestResolveConfig:
    def test_none_gives_defaults(self) -> None:
        assert resolve_config(None) == DEFAULT_CONFIG
        assert resolve_config(None) is not DEFAULT_CONFIG

    def test_drops_unknown_keys_and_coerces_values(self) -> None:
        assert resolve_config({"style": "kebab", "other": 1}) == {"style": "kebab"}
        assert resolve_config({"style": None}) == {"style": "camel"}


class TestLoadConfig:
    def test_missing_default_file_gives_defaults(self, config_dir: Path) -> None:
        assert load_config() == {"style": "camel"}

    def test_reads_default_file_in_cwd(self, config_dir: Path) -> None:
        (config_dir / "caseconv.yaml").write_text("style: dot\n")
        assert load_config() == {"style": "dot"}

    def test_reads_explicit_path(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.yaml"
        path.write_text("style: pascal\nunused: true\n")
        assert load_config(path) == {"style": "pascal"}

    def test_missing_explicit_path_warns(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING, logger="caseconv.config"):
            assert load_config(tmp_path / "nope.yaml") == {"style": "camel"}
        assert "Config file not found" in caplog.text

    def test_empty_file_gives_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "caseconv.yaml"
        path.write_text("")
        assert load_config(path) == {"style": "camel"}

    def test_malformed_yaml_raises_value_error(self, tmp_path: Path) -> None:
        path = tmp_path / "caseconv.yaml"
        path.write_text("style: [kebab\n")
        with pytest.raises(ValueError, match="Failed to parse config"):
            load_config(path)

    def test_non_mapping_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "caseconv.yaml"
        path.write_text("- kebab\n- dot\n")
        with pytest.raises(ValueError, match="Config must be a mapping"):
            load_config(path)
