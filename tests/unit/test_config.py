"""Unit tests for configuration loading and profile management."""

import os
from pathlib import Path
from unittest import mock

import pytest
import yaml

from logcake.config import AppConfig, StorageConfig
from logcake.config.loader import (
    YAMLConfigLoader,
    deep_merge,
    dict_to_config,
    load_config,
    load_yaml_with_inheritance,
)
from logcake.config.profiles import (
    DEFAULT_CONFIG_DIR,
    Platform,
    Profile,
    default_data_dir,
    detect_platform,
    detect_profile,
    get_profile_path,
)

CONFIG_DIR = Path(__file__).parent.parent.parent / "config"


class TestDeepMerge:
    """Tests for deep_merge function."""

    def test_simple_merge(self) -> None:
        """Test merging flat dictionaries."""
        result = deep_merge({"a": 1, "b": 2}, {"b": 3, "c": 4})
        assert result == {"a": 1, "b": 3, "c": 4}

    def test_nested_merge(self) -> None:
        """Test merging nested dictionaries."""
        base = {"outer": {"a": 1, "b": 2}}
        override = {"outer": {"b": 3, "c": 4}}
        assert deep_merge(base, override) == {"outer": {"a": 1, "b": 3, "c": 4}}

    def test_override_replaces_non_dict(self) -> None:
        """Test that non-dict values are replaced."""
        assert deep_merge({"a": {"nested": 1}}, {"a": "replaced"}) == {"a": "replaced"}

    def test_base_not_mutated(self) -> None:
        """Test the base dictionary is left untouched."""
        base = {"outer": {"a": 1}}
        deep_merge(base, {"outer": {"a": 2}})
        assert base == {"outer": {"a": 1}}


class TestYAMLLoading:
    """Tests for YAML config loading."""

    def test_load_simple_yaml(self, tmp_path: Path) -> None:
        """Test loading a simple YAML file."""
        path = tmp_path / "simple.yaml"
        path.write_text(yaml.dump({"logcake": {"logging": {"level": "WARNING"}}}))

        result = load_yaml_with_inheritance(path)
        assert result["logcake"]["logging"]["level"] == "WARNING"

    def test_load_with_inheritance(self, tmp_path: Path) -> None:
        """Test loading YAML with extends keyword."""
        (tmp_path / "base.yaml").write_text(
            yaml.dump(
                {
                    "logcake": {
                        "storage": {"data_dir": "/base", "entries_file": "base.json"},
                        "schedule": {"autosave_interval": 60},
                    }
                }
            )
        )
        child = tmp_path / "child.yaml"
        child.write_text(
            yaml.dump({"extends": "base.yaml", "logcake": {"storage": {"data_dir": "/child"}}})
        )

        result = load_yaml_with_inheritance(child)

        # Child overrides data_dir
        assert result["logcake"]["storage"]["data_dir"] == "/child"
        # Base values preserved
        assert result["logcake"]["storage"]["entries_file"] == "base.json"
        assert result["logcake"]["schedule"]["autosave_interval"] == 60
        assert "extends" not in result

    def test_empty_file(self, tmp_path: Path) -> None:
        """Test an empty file loads as an empty dict."""
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_yaml_with_inheritance(path) == {}

    def test_file_not_found(self) -> None:
        """Test FileNotFoundError for missing config."""
        with pytest.raises(FileNotFoundError):
            load_yaml_with_inheritance(Path("/nonexistent/config.yaml"))


class TestDictToConfig:
    """Tests for converting dict to AppConfig."""

    def test_empty_dict(self) -> None:
        """Test conversion of empty dict uses defaults."""
        config = dict_to_config({})
        assert config.storage.entries_file == "timeEntries.json"
        assert config.storage.session_file == "currentTracking.json"
        assert config.schedule.autosave_interval == 60.0
        assert config.schedule.live_update_interval == 1.0
        assert config.logging.level == "INFO"

    def test_partial_override(self) -> None:
        """Test partial config override."""
        config = dict_to_config({"logcake": {"schedule": {"day_check_interval": 5}}})
        assert config.schedule.day_check_interval == 5
        assert config.schedule.autosave_interval == 60.0  # Default preserved

    def test_empty_sections(self) -> None:
        """Test sections left empty in YAML fall back to defaults."""
        config = dict_to_config({"logcake": {"storage": None, "logging": None}})
        assert config.storage == StorageConfig()

    def test_unknown_key_rejected(self) -> None:
        """Test misspelled keys fail loudly."""
        with pytest.raises(TypeError):
            dict_to_config({"logcake": {"schedule": {"autosave_intervall": 5}}})


class TestAppConfigPaths:
    """Tests for data and report directory resolution."""

    def test_explicit_data_dir(self, tmp_path: Path) -> None:
        """Test a configured data directory is used as is."""
        config = AppConfig(storage=StorageConfig(data_dir=str(tmp_path)))
        assert config.resolve_data_dir() == tmp_path

    def test_data_dir_expands_user(self) -> None:
        """Test ~ is expanded."""
        config = AppConfig(storage=StorageConfig(data_dir="~/logcake"))
        assert config.resolve_data_dir() == Path.home() / "logcake"

    def test_report_dir_defaults_to_data_dir(self, tmp_path: Path) -> None:
        """Test reports land beside the data files unless configured."""
        config = AppConfig(storage=StorageConfig(data_dir=str(tmp_path)))
        assert config.resolve_report_dir() == tmp_path

    def test_explicit_report_dir(self, tmp_path: Path) -> None:
        """Test a configured report directory wins."""
        config = AppConfig(
            storage=StorageConfig(data_dir=str(tmp_path), report_dir=str(tmp_path / "reports"))
        )
        assert config.resolve_report_dir() == tmp_path / "reports"

    def test_empty_data_dir_uses_platform_default(self, tmp_path: Path) -> None:
        """Test an empty data directory falls back to the documents folder."""
        with mock.patch("logcake.config.profiles.default_data_dir", return_value=tmp_path):
            assert AppConfig().resolve_data_dir() == tmp_path


class TestYAMLConfigLoader:
    """Tests for YAMLConfigLoader class."""

    def test_load_dev_profile(self) -> None:
        """Test loading dev profile from actual config directory."""
        if not CONFIG_DIR.exists():
            pytest.skip("Config directory not found")

        config = YAMLConfigLoader(CONFIG_DIR).load_profile("dev")

        assert isinstance(config, AppConfig)
        assert config.logging.level == "DEBUG"
        assert config.storage.data_dir == "~/.logcake/dev"

    def test_load_prod_profile(self) -> None:
        """Test loading prod profile from actual config directory."""
        if not CONFIG_DIR.exists():
            pytest.skip("Config directory not found")

        config = YAMLConfigLoader(CONFIG_DIR).load_profile("prod")

        assert config.logging.level == "INFO"
        assert config.storage.data_dir == ""
        assert config.schedule.autosave_report is True

    def test_load_test_profile(self) -> None:
        """Test the test profile disables autosave reports."""
        if not CONFIG_DIR.exists():
            pytest.skip("Config directory not found")

        config = YAMLConfigLoader(CONFIG_DIR).load_profile("test")

        assert config.schedule.autosave_report is False
        assert config.schedule.autosave_interval == 60

    def test_config_dir(self) -> None:
        """Test the loader reports its profile directory."""
        custom_dir = Path("/custom/config")
        assert YAMLConfigLoader(custom_dir).config_dir == custom_dir
        assert YAMLConfigLoader().config_dir == DEFAULT_CONFIG_DIR

    def test_load_profile_enum(self) -> None:
        """Test profiles can be passed as enum members."""
        if not CONFIG_DIR.exists():
            pytest.skip("Config directory not found")

        config = YAMLConfigLoader(CONFIG_DIR).load_profile(Profile.DEV)
        assert config.logging.level == "DEBUG"

    def test_load_profile_detected(self) -> None:
        """Test an omitted profile is detected from LOGCAKE_PROFILE."""
        if not CONFIG_DIR.exists():
            pytest.skip("Config directory not found")

        with mock.patch.dict(os.environ, {"LOGCAKE_PROFILE": "test"}):
            config = YAMLConfigLoader(CONFIG_DIR).load_profile()

        assert config.schedule.autosave_report is False

    def test_load_profile_from_custom_dir(self, tmp_path: Path) -> None:
        """Test profile files are looked up in the loader's directory."""
        (tmp_path / "dev.yaml").write_text(yaml.dump({"logcake": {"logging": {"level": "ERROR"}}}))

        config = YAMLConfigLoader(tmp_path).load_profile("dev")

        assert config.logging.level == "ERROR"

    def test_unknown_profile(self, tmp_path: Path) -> None:
        """Test unknown profile names are rejected."""
        with pytest.raises(ValueError):
            YAMLConfigLoader(tmp_path).load_profile("staging")

    def test_missing_profile_file(self, tmp_path: Path) -> None:
        """Test a known profile without a file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            YAMLConfigLoader(tmp_path).load_profile("prod")


class TestLoadConfigFunction:
    """Tests for convenience load_config function."""

    def test_load_by_profile(self) -> None:
        """Test loading config by profile name."""
        if not CONFIG_DIR.exists():
            pytest.skip("Config directory not found")

        assert isinstance(load_config(profile="dev"), AppConfig)

    def test_load_detects_profile(self) -> None:
        """Test load_config() without arguments follows LOGCAKE_PROFILE."""
        if not CONFIG_DIR.exists():
            pytest.skip("Config directory not found")

        with mock.patch.dict(os.environ, {"LOGCAKE_PROFILE": "dev"}):
            config = load_config()

        assert config.storage.data_dir == "~/.logcake/dev"

    def test_load_by_path(self, tmp_path: Path) -> None:
        """Test an explicit path takes precedence."""
        path = tmp_path / "custom.yaml"
        path.write_text(yaml.dump({"logcake": {"logging": {"level": "ERROR"}}}))

        config = load_config(path=path, profile="dev")
        assert config.logging.level == "ERROR"


class TestProfileDetection:
    """Tests for profile detection."""

    def test_detect_profile_from_env(self) -> None:
        """Test profile detection from environment variable."""
        with mock.patch.dict(os.environ, {"LOGCAKE_PROFILE": "dev"}):
            assert detect_profile() == Profile.DEV

        with mock.patch.dict(os.environ, {"LOGCAKE_PROFILE": "TEST"}):
            assert detect_profile() == Profile.TEST

    def test_detect_profile_default_prod(self) -> None:
        """Test production is the default."""
        with mock.patch.dict(os.environ, {}, clear=True):
            assert detect_profile() == Profile.PROD

    def test_detect_profile_unknown_value(self) -> None:
        """Test unknown values fall back to production."""
        with mock.patch.dict(os.environ, {"LOGCAKE_PROFILE": "staging"}):
            assert detect_profile() == Profile.PROD


class TestPlatformDetection:
    """Tests for platform detection."""

    def test_detect_macos(self) -> None:
        """Test macOS detection."""
        with mock.patch("platform.system", return_value="Darwin"):
            assert detect_platform() == Platform.MACOS

    def test_detect_linux(self) -> None:
        """Test Linux detection."""
        with mock.patch("platform.system", return_value="Linux"):
            assert detect_platform() == Platform.LINUX

    def test_detect_unknown(self) -> None:
        """Test unrecognized systems."""
        with mock.patch("platform.system", return_value="Plan9"):
            assert detect_platform() == Platform.UNKNOWN


class TestDefaultDataDir:
    """Tests for the platform documents folder."""

    def test_documents_folder(self, tmp_path: Path) -> None:
        """Test ~/Documents is used when present."""
        (tmp_path / "Documents").mkdir()
        with mock.patch("pathlib.Path.home", return_value=tmp_path), mock.patch(
            "logcake.config.profiles.detect_platform", return_value=Platform.MACOS
        ):
            assert default_data_dir() == tmp_path / "Documents"

    def test_falls_back_to_home(self, tmp_path: Path) -> None:
        """Test the home directory is used without a documents folder."""
        with mock.patch("pathlib.Path.home", return_value=tmp_path), mock.patch(
            "logcake.config.profiles.detect_platform", return_value=Platform.MACOS
        ):
            assert default_data_dir() == tmp_path

    def test_linux_xdg_documents(self, tmp_path: Path) -> None:
        """Test XDG_DOCUMENTS_DIR wins on Linux."""
        xdg = tmp_path / "Dokumente"
        with mock.patch.dict(os.environ, {"XDG_DOCUMENTS_DIR": str(xdg)}), mock.patch(
            "logcake.config.profiles.detect_platform", return_value=Platform.LINUX
        ):
            assert default_data_dir() == xdg


class TestGetProfilePath:
    """Tests for get_profile_path function."""

    def test_explicit_profile(self) -> None:
        """Test getting path for explicit profile."""
        assert get_profile_path(Profile.DEV, Path("/config")) == Path("/config/dev.yaml")

    def test_auto_detect_profile(self) -> None:
        """Test auto-detecting profile for path."""
        with mock.patch(
            "logcake.config.profiles.detect_profile",
            return_value=Profile.TEST,
        ):
            path = get_profile_path(config_dir=Path("/config"))
            assert path == Path("/config/test.yaml")
