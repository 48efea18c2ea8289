"""Tests for configuration loading and merging."""

from pathlib import Path

import pytest
import yaml

from strategic_claude.config.loader import (
    ENV_LANGUAGE,
    ENV_TEMPLATE,
    get_home_config_path,
    get_local_config_path,
    home_config_exists,
    load_config,
    load_yaml_config,
    local_config_exists,
    save_config,
)
from strategic_claude.config.schema import DEFAULT_CONFIG, CliConfig


class TestCliConfig:
    """Tests for CliConfig dataclass."""

    def test_default_config_values(self) -> None:
        """Test that DEFAULT_CONFIG has expected values."""
        assert DEFAULT_CONFIG.show_deprecated is False
        assert DEFAULT_CONFIG.default_template is None
        assert DEFAULT_CONFIG.language is None

    def test_merge_prefers_other_values(self) -> None:
        """Test that merge prefers values from 'other' when set."""
        base = CliConfig(default_template="main", language="go")
        override = CliConfig(default_template="ccr", language="python")
        merged = base.merge(override)

        assert merged.default_template == "ccr"
        assert merged.language == "python"

    def test_merge_preserves_base_when_other_is_none(self) -> None:
        """Test that merge preserves base values when other is None."""
        base = CliConfig(default_template="main", show_deprecated=True)
        merged = base.merge(CliConfig(language="go"))

        assert merged.default_template == "main"
        assert merged.show_deprecated is True
        assert merged.language == "go"

    def test_merge_returns_new_instance(self) -> None:
        """Test that merge does not mutate either side."""
        base = CliConfig(default_template="main")
        override = CliConfig(language="go")
        merged = base.merge(override)

        assert merged is not base
        assert base.language is None
        assert override.default_template is None

    def test_to_dict_excludes_none(self) -> None:
        """Test that to_dict only includes set values."""
        assert CliConfig(language="go").to_dict() == {"language": "go"}

    def test_from_dict_ignores_unknown_keys(self) -> None:
        """Test that unknown keys are dropped."""
        config = CliConfig.from_dict({"language": "go", "unknown": 1})

        assert config.language == "go"
        assert config.default_template is None

    def test_from_dict_coerces_types(self) -> None:
        """Test that values are coerced to their declared types."""
        config = CliConfig.from_dict({"default_template": 42, "show_deprecated": 1})

        assert config.default_template == "42"
        assert config.show_deprecated is True

    def test_from_dict_treats_empty_strings_as_unset(self) -> None:
        """Test that empty strings in a config file do not become filters."""
        config = CliConfig.from_dict({"default_template": "", "language": ""})

        assert config.default_template is None
        assert config.language is None


class TestConfigLoader:
    """Tests for config file loading."""

    def test_config_paths(self, isolated_config: Path) -> None:
        """Test that config paths live under .strategic-claude."""
        assert get_home_config_path() == (
            Path.home() / ".strategic-claude" / "config.yaml"
        )
        assert get_local_config_path() == (
            isolated_config / ".strategic-claude" / "config.yaml"
        )

    def test_load_yaml_config_missing(self, tmp_path: Path) -> None:
        """Test that a missing file yields None."""
        assert load_yaml_config(tmp_path / "missing.yaml") is None

    def test_load_yaml_config_invalid_yaml(self, tmp_path: Path) -> None:
        """Test that invalid YAML yields None."""
        path = tmp_path / "config.yaml"
        path.write_text("default_template: [unclosed\n")

        assert load_yaml_config(path) is None

    def test_load_yaml_config_non_mapping(self, tmp_path: Path) -> None:
        """Test that a YAML list is treated as absent."""
        path = tmp_path / "config.yaml"
        path.write_text("- a\n- b\n")

        assert load_yaml_config(path) is None

    def test_load_config_defaults(self) -> None:
        """Test that load_config returns defaults when no files exist."""
        assert not home_config_exists()
        assert not local_config_exists()
        assert load_config() == DEFAULT_CONFIG

    def test_local_overrides_home(self) -> None:
        """Test that local config wins over global config."""
        save_config(
            CliConfig(default_template="ccr", language="go"), get_home_config_path()
        )
        save_config(CliConfig(language="python"), get_local_config_path())

        config = load_config()

        assert config.default_template == "ccr"
        assert config.language == "python"
        assert config.show_deprecated is False

    def test_env_overrides_files(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that environment variables take highest precedence."""
        save_config(CliConfig(default_template="ccr"), get_local_config_path())
        monkeypatch.setenv(ENV_TEMPLATE, "web-explorer")
        monkeypatch.setenv(ENV_LANGUAGE, "rust")

        config = load_config()

        assert config.default_template == "web-explorer"
        assert config.language == "rust"

    def test_empty_env_is_ignored(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that empty environment variables do not override files."""
        save_config(CliConfig(default_template="ccr"), get_local_config_path())
        monkeypatch.setenv(ENV_TEMPLATE, "")

        assert load_config().default_template == "ccr"

    def test_save_config_writes_yaml(self, tmp_path: Path) -> None:
        """Test that save_config creates parent dirs and writes set values."""
        path = tmp_path / "nested" / "config.yaml"
        save_config(CliConfig(default_template="main", show_deprecated=True), path)

        data = yaml.safe_load(path.read_text())

        assert data == {"default_template": "main", "show_deprecated": True}

    def test_empty_language_in_file_keeps_all_templates(self) -> None:
        """Test that an empty language in YAML behaves like an empty env var."""
        get_local_config_path().parent.mkdir(parents=True)
        get_local_config_path().write_text('language: ""\n')

        assert load_config().language is None
