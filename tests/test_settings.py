"""Tests for configuration lookup."""

import json
import logging

from voicify_vscode.config import (
    DEFAULT_COMMIT_DELAY,
    DEFAULT_WINDOW_SIGNATURE,
    get_commit_delay,
    get_config,
    get_log_level,
    get_window_signature,
    load_config,
)


class TestGetConfig:

    def test_defaults_without_file_or_env(self):
        assert load_config() == {}
        assert get_window_signature() == DEFAULT_WINDOW_SIGNATURE
        assert get_commit_delay() == DEFAULT_COMMIT_DELAY
        assert get_log_level() == "INFO"

    def test_env_var(self, monkeypatch):
        monkeypatch.setenv("VOICIFY_VSCODE_WINDOW_SIGNATURE", "Code - OSS")

        assert get_window_signature() == "Code - OSS"

    def test_file_beats_env(self, isolated_config, monkeypatch):
        isolated_config.write_text(json.dumps({"window_signature": "Cursor"}))
        monkeypatch.setenv("VOICIFY_VSCODE_WINDOW_SIGNATURE", "Code - OSS")

        assert get_window_signature() == "Cursor"

    def test_unknown_key_default(self):
        assert get_config("missing", 42) == 42

    def test_invalid_json_ignored(self, isolated_config, caplog):
        isolated_config.write_text("{not json")

        with caplog.at_level(logging.WARNING, logger="voicify_vscode"):
            assert load_config() == {}

        assert "Failed to load config" in caplog.text

    def test_non_object_json_ignored(self, isolated_config):
        isolated_config.write_text("[1, 2]")

        assert load_config() == {}


class TestTypedGetters:

    def test_commit_delay_from_string(self, monkeypatch):
        monkeypatch.setenv("VOICIFY_VSCODE_COMMIT_DELAY", "0.1")

        assert get_commit_delay() == 0.1

    def test_commit_delay_invalid(self, monkeypatch):
        monkeypatch.setenv("VOICIFY_VSCODE_COMMIT_DELAY", "soon")

        assert get_commit_delay() == DEFAULT_COMMIT_DELAY

    def test_commit_delay_negative(self, isolated_config):
        isolated_config.write_text(json.dumps({"commit_delay": -1}))

        assert get_commit_delay() == DEFAULT_COMMIT_DELAY

    def test_empty_signature_falls_back(self, isolated_config):
        isolated_config.write_text(json.dumps({"window_signature": ""}))

        assert get_window_signature() == DEFAULT_WINDOW_SIGNATURE

    def test_log_level_normalized(self, monkeypatch):
        monkeypatch.setenv("VOICIFY_VSCODE_LOG_LEVEL", " debug ")

        assert get_log_level() == "DEBUG"
