from __future__ import annotations

from pathlib import Path

import pytest

from f3client import config


def write_profiles_yaml(path: Path, *, base_url: str = "http://localhost:8080") -> None:
    content = f"""
profiles:
  local:
    base_url: {base_url}
    organisation_id: eb0bd6f5-c3f5-44b2-b677-acd23cdde73c
  staging:
    base_url: https://staging.example.com
"""
    path.write_text(content.strip(), encoding="utf-8")


def test_load_profiles_parses_yaml(tmp_path: Path) -> None:
    yaml_path = tmp_path / "profiles.yaml"
    write_profiles_yaml(yaml_path)
    profiles = config.load_profiles(str(yaml_path))
    assert set(profiles) == {"local", "staging"}
    assert profiles["local"].organisation_id == "eb0bd6f5-c3f5-44b2-b677-acd23cdde73c"
    assert profiles["staging"].organisation_id is None


def test_select_profile_lists_available(tmp_path: Path) -> None:
    yaml_path = tmp_path / "profiles.yaml"
    write_profiles_yaml(yaml_path)
    profiles = config.load_profiles(str(yaml_path))
    with pytest.raises(ValueError, match="Available: local, staging"):
        config.select_profile(profiles, "prod")


def test_missing_base_url_raises(tmp_path: Path) -> None:
    yaml_path = tmp_path / "profiles.yaml"
    yaml_path.write_text("profiles:\n  local:\n    organisation_id: abc\n", encoding="utf-8")
    with pytest.raises(ValueError, match="base_url"):
        config.load_profiles(str(yaml_path))


def test_missing_top_level_key_raises(tmp_path: Path) -> None:
    yaml_path = tmp_path / "profiles.yaml"
    yaml_path.write_text("accounts: {}\n", encoding="utf-8")
    with pytest.raises(ValueError):
        config.load_profiles(str(yaml_path))


def test_resolve_config_defaults() -> None:
    resolved = config.resolve_config()
    assert resolved.base_url == config.DEFAULT_BASE_URL
    assert resolved.profile_name == config.DEFAULT_PROFILE_NAME
    assert resolved.organisation_id is None
    assert resolved.settings.request_timeout_seconds == 30.0
    assert resolved.settings.debug_logging is False


def test_resolve_config_uses_profile(tmp_path: Path) -> None:
    yaml_path = tmp_path / "profiles.yaml"
    write_profiles_yaml(yaml_path)
    profile = config.select_profile(config.load_profiles(str(yaml_path)), "staging")
    resolved = config.resolve_config(profile)
    assert resolved.base_url == "https://staging.example.com"
    assert resolved.profile_name == "staging"


def test_resolve_config_env_overrides(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    yaml_path = tmp_path / "profiles.yaml"
    write_profiles_yaml(yaml_path)
    monkeypatch.setenv("F3C_API_BASE", "http://accountapi:8080")
    monkeypatch.setenv("F3C_ORGANISATION_ID", "11111111-2222-3333-4444-555555555555")
    monkeypatch.setenv("F3C_REQUEST_TIMEOUT_SECONDS", "2.5")
    monkeypatch.setenv("F3C_DEBUG_LOGGING", "true")
    profile = config.select_profile(config.load_profiles(str(yaml_path)), "local")
    resolved = config.resolve_config(profile)
    assert resolved.base_url == "http://accountapi:8080"
    assert resolved.organisation_id == "11111111-2222-3333-4444-555555555555"
    assert resolved.settings.request_timeout_seconds == 2.5
    assert resolved.settings.debug_logging is True


def test_env_file_does_not_override_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    env_path = tmp_path / ".env"
    env_path.write_text("F3C_API_BASE='http://from-file:8080'\nF3C_DEBUG_LOGGING=1\n", encoding="utf-8")
    # Record F3C_API_BASE as unset so teardown removes the file-loaded value.
    monkeypatch.setenv("F3C_API_BASE", "placeholder")
    monkeypatch.delenv("F3C_API_BASE")
    monkeypatch.setenv("F3C_DEBUG_LOGGING", "0")
    monkeypatch.setattr(config, "_ENV_LOADED", False)
    config._load_env_file(str(env_path))
    assert config._read_env("F3C_API_BASE") == "http://from-file:8080"
    assert config._read_bool("F3C_DEBUG_LOGGING", True) is False
