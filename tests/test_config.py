"""Unit tests for Settings and ClipboardSettings (designprompt.config).

Tests cover:
- ClipboardSettings defaults and validation
- Settings defaults
- Settings save/load round trip and error cases
- Settings.from_env
"""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from designprompt.config import ClipboardSettings, Settings


# ---------------------------------------------------------------------------
# ClipboardSettings
# ---------------------------------------------------------------------------


class TestClipboardSettings:
    @pytest.mark.unit
    def test_defaults(self):
        clipboard = ClipboardSettings()
        assert clipboard.fallback_command == ["xclip", "-selection", "clipboard"]
        assert clipboard.timeout == 5

    @pytest.mark.unit
    def test_timeout_below_minimum_rejected(self):
        with pytest.raises(ValidationError):
            ClipboardSettings(timeout=0)

    @pytest.mark.unit
    def test_empty_command_rejected(self):
        with pytest.raises(ValidationError):
            ClipboardSettings(fallback_command=[])

    @pytest.mark.unit
    def test_default_command_not_shared(self):
        first = ClipboardSettings()
        first.fallback_command.append("-i")
        assert ClipboardSettings().fallback_command == ["xclip", "-selection", "clipboard"]


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------


class TestSettingsDefaults:
    @pytest.mark.unit
    def test_defaults(self):
        settings = Settings()
        assert settings.syntax_theme == "monokai"
        assert settings.line_numbers is False
        assert settings.output_path == Path("./index.html")
        assert isinstance(settings.clipboard, ClipboardSettings)


class TestSettingsSaveLoad:
    @pytest.mark.unit
    def test_round_trip(self, tmp_path: Path):
        original = Settings(
            syntax_theme="dracula",
            line_numbers=True,
            output_path=Path("site/index.html"),
            clipboard=ClipboardSettings(fallback_command=["wl-copy"], timeout=2),
        )
        path = original.save(tmp_path / "nested" / "settings.json")
        assert path.exists()
        assert Settings.load(path) == original

    @pytest.mark.unit
    def test_load_missing_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            Settings.load(tmp_path / "missing.json")

    @pytest.mark.unit
    def test_load_invalid_content(self, tmp_path: Path):
        path = tmp_path / "settings.json"
        path.write_text('{"clipboard": {"timeout": 0}}', encoding="utf-8")
        with pytest.raises(ValidationError):
            Settings.load(path)


class TestSettingsFromEnv:
    @pytest.mark.unit
    def test_defaults_when_no_env(self):
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings.from_env()
        assert settings == Settings()

    @pytest.mark.unit
    def test_display_values(self):
        env = {"DP_SYNTAX_THEME": "github-dark", "DP_LINE_NUMBERS": "yes"}
        with patch.dict(os.environ, env, clear=True):
            settings = Settings.from_env()
        assert settings.syntax_theme == "github-dark"
        assert settings.line_numbers is True

    @pytest.mark.unit
    def test_line_numbers_false_values(self):
        with patch.dict(os.environ, {"DP_LINE_NUMBERS": "off"}, clear=True):
            assert Settings.from_env().line_numbers is False

    @pytest.mark.unit
    def test_output_path(self):
        with patch.dict(os.environ, {"DP_OUTPUT_PATH": "/tmp/site/index.html"}, clear=True):
            settings = Settings.from_env()
        assert settings.output_path == Path("/tmp/site/index.html")

    @pytest.mark.unit
    def test_clipboard_values(self):
        env = {"DP_CLIPBOARD_COMMAND": "xsel --clipboard --input", "DP_CLIPBOARD_TIMEOUT": "9"}
        with patch.dict(os.environ, env, clear=True):
            settings = Settings.from_env()
        assert settings.clipboard.fallback_command == ["xsel", "--clipboard", "--input"]
        assert settings.clipboard.timeout == 9

    @pytest.mark.unit
    def test_invalid_timeout(self):
        with patch.dict(os.environ, {"DP_CLIPBOARD_TIMEOUT": "soon"}, clear=True):
            with pytest.raises(ValueError):
                Settings.from_env()
