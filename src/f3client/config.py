"""
Configuration loader and profile resolver.

Purpose:
- Centralize how the API base URL and client settings are assembled.
- Keep tracing simple: YAML -> dataclasses -> resolved config -> HTTP client.

Sources:
- profiles.yaml (local file, optional): named API targets.
- environment variables (.env is recommended, gitignored): overrides.

Logic flow (high level):
1) load_profiles() reads profiles.yaml and builds Profile entries.
2) select_profile() picks a profile by name.
3) resolve_config() converts that selection (or no profile at all) into
   AppConfig by applying environment overrides and defaults.
4) AppConfig is consumed by app.py -> http.py -> endpoints/*.

Tracing notes:
- If a value is malformed, errors are raised where it is first read so the
  caller knows which source (YAML vs env) is at fault.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import os

import yaml

DEFAULT_BASE_URL = "http://localhost:8080"
DEFAULT_PROFILE_NAME = "default"
_ENV_LOADED = False


@dataclass(frozen=True)
class Profile:
    """
    One named API target.

    Fields map 1:1 to YAML keys for easy tracing.
    """

    name: str
    base_url: str
    organisation_id: str | None = None


@dataclass(frozen=True)
class ClientSettings:
    """
    Runtime knobs forwarded to the HTTP client.
    """

    request_timeout_seconds: float
    debug_logging: bool


@dataclass(frozen=True)
class AppConfig:
    """
    Resolved runtime config.

    This is derived from an optional Profile + environment variables.
    """

    profile_name: str
    base_url: str
    organisation_id: str | None
    settings: ClientSettings


def _read_env(var_name: str) -> str | None:
    value = os.getenv(var_name)
    return value or None


def _read_float(var_name: str, default: float) -> float:
    value = os.getenv(var_name)
    if value is None or value == "":
        return default
    return float(value)


def _read_bool(var_name: str, default: bool) -> bool:
    value = os.getenv(var_name)
    if value is None or value == "":
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _load_env_file(path: str = ".env") -> None:
    # Minimal .env loader; existing environment variables always win.
    global _ENV_LOADED
    if _ENV_LOADED:
        return
    if not os.path.exists(path):
        _ENV_LOADED = True
        return

    with open(path, "r", encoding="utf-8") as handle:
        for raw_line in handle:
            line = raw_line.strip()
            if not line or line.startswith("#") or "=" not in line:
                continue
            key, value = line.split("=", 1)
            key = key.strip()
            value = value.strip().strip("'\"")
            if key and value and key not in os.environ:
                os.environ[key] = value

    _ENV_LOADED = True


def _parse_profiles(raw: Any) -> dict[str, Profile]:
    if not isinstance(raw, dict) or "profiles" not in raw:
        raise ValueError("profiles.yaml must contain a top-level 'profiles' mapping.")

    entries = raw["profiles"]
    if not isinstance(entries, dict):
        raise ValueError("'profiles' must be a mapping of profile names to definitions.")

    parsed: dict[str, Profile] = {}
    for name, entry in entries.items():
        if not isinstance(entry, dict):
            raise ValueError(f"Profile '{name}' must be a mapping.")
        try:
            base_url = str(entry["base_url"])
        except KeyError as exc:
            raise ValueError(f"Profile '{name}' missing required key: {exc}") from exc
        organisation_id = entry.get("organisation_id")
        parsed[str(name)] = Profile(
            name=str(name),
            base_url=base_url,
            # Keep ids as strings so UUID formatting is never lost.
            organisation_id=str(organisation_id) if organisation_id is not None else None,
        )

    return parsed


def load_profiles(path: str) -> dict[str, Profile]:
    """
    Load API profiles from profiles.yaml.

    Inputs:
    - path: path to profiles.yaml.

    Outputs:
    - Dict mapping profile name -> Profile.
    """

    with open(path, "r", encoding="utf-8") as handle:
        raw = yaml.safe_load(handle) or {}
    return _parse_profiles(raw)


def select_profile(profiles: dict[str, Profile], name: str) -> Profile:
    """
    Find a profile by name, listing the alternatives when it is missing.
    """

    profile = profiles.get(name)
    if profile is None:
        available = ", ".join(sorted(profiles.keys()))
        raise ValueError(f"Profile '{name}' not found. Available: {available}")
    return profile


def resolve_config(profile: Profile | None = None) -> AppConfig:
    """
    Resolve an optional profile into a concrete AppConfig.

    Precedence for base URL and organisation id: environment variable,
    then profile, then default.

    Environment:
    - F3C_API_BASE
    - F3C_ORGANISATION_ID
    - F3C_REQUEST_TIMEOUT_SECONDS (default 30)
    - F3C_DEBUG_LOGGING (default false)
    """

    _load_env_file()

    base_url = _read_env("F3C_API_BASE")
    if not base_url:
        base_url = profile.base_url if profile else DEFAULT_BASE_URL

    organisation_id = _read_env("F3C_ORGANISATION_ID")
    if not organisation_id and profile:
        organisation_id = profile.organisation_id

    settings = ClientSettings(
        request_timeout_seconds=_read_float("F3C_REQUEST_TIMEOUT_SECONDS", 30.0),
        debug_logging=_read_bool("F3C_DEBUG_LOGGING", False),
    )

    return AppConfig(
        profile_name=profile.name if profile else DEFAULT_PROFILE_NAME,
        base_url=base_url,
        organisation_id=organisation_id,
        settings=settings,
    )
