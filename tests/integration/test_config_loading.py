"""Integration tests for configuration loading with layered precedence.

Tests the real load_config() function with actual YAML files, environment
variables, and CLI overrides to verify precedence: defaults < YAML < ENV < CLI.
"""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from indexarr.infrastructure.config.load import load_config

pytestmark = pytest.mark.integration


@pytest.fixture()
def yaml_config(tmp_path: Path) -> Path:
    """Write a minimal YAML config and return its path."""
    config = {
        "app_name": "indexarr-test",
        "environment": "test",
        "http": {
            "timeout_seconds": 15.0,
            "user_agent": "TestAgent/1.0",
        },
        "logging": {"level": "DEBUG", "format": "console"},
        "diagnostics": {"parse_error_dump_dir": str(tmp_path / "dumps")},
        "indexers": {
            "XtremeZone": {
                "username_env": "XZ_USER",
                "password_env": "XZ_PASS",
                "request_delay_seconds": 3.0,
            },
            "magictorrent": {"enabled": False},
        },
    }
    path = tmp_path / "config.yaml"
    path.write_text(yaml.dump(config), encoding="utf-8")
    return path


class TestDefaultsOnly:
    """Load with no YAML, no ENV, no CLI: pure defaults."""

    def test_defaults_produce_valid_config(self) -> None:
        config = load_config()
        assert config.app_name == "indexarr"
        assert config.environment == "dev"
        assert config.http_timeout_seconds == 30.0
        assert config.log_level == "INFO"
        assert config.log_format == "console"  # dev -> console
        assert config.indexers == {}

    def test_defaults_derive_log_format_from_environment(self) -> None:
        config = load_config(cli_overrides={"environment": "prod"})
        assert config.log_format == "json"


class TestYamlOverrides:
    """YAML values override defaults."""

    def test_yaml_overrides_defaults(self, yaml_config: Path, tmp_path: Path) -> None:
        config = load_config(config_path=yaml_config)
        assert config.app_name == "indexarr-test"
        assert config.environment == "test"
        assert config.http_timeout_seconds == 15.0
        assert config.http_user_agent == "TestAgent/1.0"
        assert config.log_level == "DEBUG"
        assert config.parse_error_dump_dir == tmp_path / "dumps"

    def test_indexer_sections(self, yaml_config: Path) -> None:
        config = load_config(config_path=yaml_config)
        assert set(config.indexers) == {"xtremezone", "magictorrent"}
        xz = config.indexers["xtremezone"]
        assert xz.username_env == "XZ_USER"
        assert xz.request_delay_seconds == 3.0
        assert list(config.enabled_indexers()) == ["xtremezone"]

    def test_yaml_file_not_found_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_config(config_path=tmp_path / "nonexistent.yaml")

    def test_yaml_must_be_mapping(self, tmp_path: Path) -> None:
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(ValueError, match="mapping"):
            load_config(config_path=path)

    def test_invalid_base_url_rejected(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.yaml"
        path.write_text(
            yaml.dump({"indexers": {"xtremezone": {"base_url": "ftp://x"}}}),
            encoding="utf-8",
        )
        with pytest.raises(ValidationError):
            load_config(config_path=path)

    def test_yaml_partial_override_preserves_defaults(
        self, tmp_path: Path
    ) -> None:
        """YAML that only sets http.timeout_seconds keeps other defaults."""
        path = tmp_path / "partial.yaml"
        path.write_text(yaml.dump({"http": {"timeout_seconds": 99.0}}), encoding="utf-8")

        config = load_config(config_path=path)
        assert config.http_timeout_seconds == 99.0
        assert config.http_follow_redirects is True  # default preserved
        assert config.app_name == "indexarr"  # default preserved

    def test_sectioned_dump_hides_credentials(self, tmp_path: Path) -> None:
        path = tmp_path / "creds.yaml"
        path.write_text(
            yaml.dump({"indexers": {"xtremezone": {"username": "u", "password": "p"}}}),
            encoding="utf-8",
        )
        dumped = load_config(config_path=path).to_sectioned_dict()
        assert "password" not in dumped["indexers"]["xtremezone"]
        assert "username" not in dumped["indexers"]["xtremezone"]


class TestEnvOverrides:
    """Environment variables override YAML and defaults."""

    def test_env_overrides_yaml(
        self, yaml_config: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("INDEXARR_LOG_LEVEL", "WARNING")
        monkeypatch.setenv("INDEXARR_HTTP_TIMEOUT_SECONDS", "60.0")

        config = load_config(config_path=yaml_config)
        assert config.log_level == "WARNING"
        assert config.http_timeout_seconds == 60.0
        # YAML values not overridden by ENV stay
        assert config.app_name == "indexarr-test"

    def test_env_overrides_defaults(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("INDEXARR_ENVIRONMENT", "prod")

        config = load_config()
        assert config.environment == "prod"
        assert config.log_format == "json"  # prod -> json

    def test_dotenv_file_participates_as_env(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        dotenv = tmp_path / ".env"
        dotenv.write_text("INDEXARR_LOG_LEVEL=ERROR\n", encoding="utf-8")
        # load_dotenv writes into os.environ; let monkeypatch restore it.
        monkeypatch.setenv("INDEXARR_LOG_LEVEL", "")
        monkeypatch.delenv("INDEXARR_LOG_LEVEL")

        config = load_config(dotenv_path=dotenv)
        assert config.log_level == "ERROR"

    def test_missing_dotenv_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_config(dotenv_path=tmp_path / "missing.env")


class TestCliOverrides:
    """CLI overrides beat everything (highest precedence)."""

    def test_cli_overrides_yaml_and_env(
        self, yaml_config: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("INDEXARR_LOG_LEVEL", "WARNING")

        config = load_config(
            config_path=yaml_config,
            cli_overrides={"log_level": "ERROR"},
        )
        assert config.log_level == "ERROR"

    def test_cli_overrides_with_sectioned_format(
        self, yaml_config: Path
    ) -> None:
        config = load_config(
            config_path=yaml_config,
            cli_overrides={"http": {"timeout_seconds": 5.0}},
        )
        assert config.http_timeout_seconds == 5.0
        assert config.http_user_agent == "TestAgent/1.0"

    def test_cli_overrides_defaults_without_yaml(self) -> None:
        config = load_config(
            cli_overrides={"app_name": "custom-app", "environment": "prod"},
        )
        assert config.app_name == "custom-app"
        assert config.environment == "prod"
        assert config.log_format == "json"
