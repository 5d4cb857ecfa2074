"""Tests for EvrySettings."""

from __future__ import annotations

from pathlib import Path

import pytest

from evry.config.settings import EvrySettings, user_data_dir


class TestDefaults:
    def test_all_defaults(self) -> None:
        settings = EvrySettings.from_env()
        assert settings.app_name == "evry"
        assert settings.dir is None
        assert settings.debug is False
        assert settings.json_output is False
        assert settings.parse_error_log is None
        assert settings.show_debug is False

    def test_frozen(self) -> None:
        settings = EvrySettings.from_env()
        with pytest.raises(Exception):
            settings.debug = True  # type: ignore[misc]


class TestEnvVars:
    def test_evry_dir(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("EVRY_DIR", str(tmp_path))
        settings = EvrySettings.from_env()
        assert settings.data_root == tmp_path

    @pytest.mark.parametrize("value", ["1", "", "yes", "true", "anything"])
    def test_debug_set_by_presence(self, monkeypatch: pytest.MonkeyPatch, value: str) -> None:
        monkeypatch.setenv("EVRY_DEBUG", value)
        assert EvrySettings.from_env().debug is True

    @pytest.mark.parametrize("value", ["0", "false", "No", "off"])
    def test_debug_explicitly_off(self, monkeypatch: pytest.MonkeyPatch, value: str) -> None:
        monkeypatch.setenv("EVRY_DEBUG", value)
        assert EvrySettings.from_env().debug is False

    def test_json_implies_debug(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("EVRY_JSON", "1")
        settings = EvrySettings.from_env()
        assert settings.json_output is True
        assert settings.debug is False
        assert settings.show_debug is True

    def test_parse_error_log(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("EVRY_PARSE_ERROR_LOG", str(tmp_path / "errors.log"))
        assert EvrySettings.from_env().parse_error_log == tmp_path / "errors.log"

    def test_blank_paths_are_unset(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("EVRY_DIR", "")
        monkeypatch.setenv("EVRY_PARSE_ERROR_LOG", "  ")
        settings = EvrySettings.from_env()
        assert settings.dir is None
        assert settings.parse_error_log is None


class TestOverrides:
    def test_override_beats_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("EVRY_DEBUG", "1")
        settings = EvrySettings.from_env(debug=False, dir=tmp_path)
        assert settings.debug is False
        assert settings.data_root == tmp_path

    def test_none_override_is_ignored(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("EVRY_DEBUG", "1")
        assert EvrySettings.from_env(debug=None).debug is True

    def test_json_output_by_name(self) -> None:
        assert EvrySettings.from_env(json_output=True).json_output is True


class TestUserDataDir:
    def test_xdg_data_home(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("sys.platform", "linux")
        monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path))
        assert user_data_dir("evry") == tmp_path / "evry"

    def test_home_fallback(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("sys.platform", "linux")
        monkeypatch.delenv("XDG_DATA_HOME", raising=False)
        monkeypatch.setenv("HOME", str(tmp_path))
        assert user_data_dir("evry") == tmp_path / ".local" / "share" / "evry"

    def test_app_name_drives_data_root(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setattr("sys.platform", "linux")
        monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path))
        settings = EvrySettings.from_env(app_name="evry-test")
        assert settings.data_root == tmp_path / "evry-test"
