"""Tests for configuration loader behavior."""
from __future__ import annotations

import pytest
import yaml

from code_translator import config

USER_MAX_LENGTH = 12


def test_load_settings_creates_file_when_missing(tmp_path):
    cfg_path = tmp_path / "code-translator.config.yaml"

    settings = config.load_settings(cfg_path)

    assert cfg_path.exists()
    assert settings.lookup.platform_lookup is True
    assert settings.lookup.input_max_length == 30
    data = yaml.safe_load(cfg_path.read_text())
    assert data["version"] == config.DEFAULT_SETTINGS["version"]


def test_load_settings_merges_and_preserves_unknown_keys(tmp_path):
    cfg_path = tmp_path / "code-translator.config.yaml"
    initial = {
        "lookup": {"input_max_length": USER_MAX_LENGTH, "custom_note": "keep"},
        "extra_top_level": {"foo": "bar"},
    }
    cfg_path.write_text(yaml.safe_dump(initial, sort_keys=False))

    settings = config.load_settings(cfg_path)

    assert settings.lookup.input_max_length == USER_MAX_LENGTH
    data = yaml.safe_load(cfg_path.read_text())
    assert data["lookup"]["platform_lookup"] is True
    assert data["lookup"]["custom_note"] == "keep"
    assert data["extra_top_level"] == {"foo": "bar"}
    assert data["ui"]["output_background"] == "#007481"


def test_invalid_values_fall_back_to_defaults(tmp_path):
    cfg_path = tmp_path / "code-translator.config.yaml"
    cfg_path.write_text(
        yaml.safe_dump({"lookup": {"input_max_length": 0}, "ui": {"output_foreground": ""}})
    )

    settings = config.load_settings(cfg_path)

    assert settings.lookup.input_max_length == 30
    assert settings.ui.output_foreground == "#FFFFFF"


def test_empty_file_loads_defaults(tmp_path):
    cfg_path = tmp_path / "code-translator.config.yaml"
    cfg_path.write_text("")

    settings = config.load_settings(cfg_path)

    assert settings.ui.project_url == config.DEFAULT_SETTINGS["ui"]["project_url"]


def test_non_mapping_document_raises(tmp_path):
    cfg_path = tmp_path / "code-translator.config.yaml"
    cfg_path.write_text("- just\n- a list\n")

    with pytest.raises(config.ConfigurationError):
        config.load_settings(cfg_path)


def test_broken_yaml_raises(tmp_path):
    cfg_path = tmp_path / "code-translator.config.yaml"
    cfg_path.write_text("lookup: [unterminated\n")

    with pytest.raises(config.ConfigurationError):
        config.load_settings(cfg_path)


def test_reset_settings_cache_allows_reload(tmp_path, monkeypatch):
    cfg_path = tmp_path / "code-translator.config.yaml"
    monkeypatch.chdir(tmp_path)
    cfg_path.write_text(yaml.safe_dump(config.DEFAULT_SETTINGS))
    config.reset_settings_cache()
    loaded_first = config.get_settings()
    cfg_path.write_text(
        yaml.safe_dump({**config.DEFAULT_SETTINGS, "version": 99}, sort_keys=False)
    )
    config.reset_settings_cache()
    loaded_second = config.get_settings()
    assert loaded_first.raw["version"] != loaded_second.raw["version"]
    config.reset_settings_cache()


def test_null_and_non_mapping_sections_use_defaults(tmp_path):
    cfg_path = tmp_path / "code-translator.config.yaml"
    cfg_path.write_text("lookup: null\nui: plain text\n")

    settings = config.load_settings(cfg_path)

    assert settings.lookup.platform_lookup is True
    assert settings.lookup.input_max_length == 30
    assert settings.ui.output_background == "#007481"
    assert yaml.safe_load(cfg_path.read_text())["lookup"] == config.DEFAULT_SETTINGS["lookup"]


def test_write_default_config(tmp_path):
    target = config.write_default_config(tmp_path / "nested" / "defaults.yaml")

    assert yaml.safe_load(target.read_text()) == config.DEFAULT_SETTINGS
