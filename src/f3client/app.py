"""
Runtime assembly helpers.

Purpose:
- Keep wiring logic (config -> client -> endpoints) in one place.
- Make it easy to trace how a profiles.yaml entry becomes an API call.

Logic flow:
1) load_account_client() reads profiles.yaml (when given).
2) It selects the profile by name and validates it.
3) resolve_config() applies environment overrides.
4) build_account_client() creates the HTTP client and endpoint group.
5) The caller invokes endpoint methods (create, fetch, list, delete).
"""

from __future__ import annotations

from .async_http import F3AsyncHttpClient
from .config import AppConfig, Profile, load_profiles, resolve_config, select_profile
from .endpoints.accounts import AccountsAPI
from .endpoints.accounts_async import AccountsAsyncAPI
from .http import F3HttpClient
from .validation import validate_connectivity, validate_profiles


def build_account_client(config: AppConfig) -> AccountsAPI:
    """
    Create an AccountsAPI client for a resolved configuration.
    """

    http_client = F3HttpClient(
        base_url=config.base_url,
        timeout_seconds=config.settings.request_timeout_seconds,
        debug_logging=config.settings.debug_logging,
    )
    return AccountsAPI(http_client)


def build_account_client_async(config: AppConfig) -> AccountsAsyncAPI:
    """
    Create an async AccountsAPI client for a resolved configuration.
    """

    http_client = F3AsyncHttpClient(
        base_url=config.base_url,
        timeout_seconds=config.settings.request_timeout_seconds,
        debug_logging=config.settings.debug_logging,
    )
    return AccountsAsyncAPI(http_client)


def load_config(profiles_path: str | None = None, profile_name: str | None = None) -> AppConfig:
    """
    Resolve AppConfig from an optional profiles.yaml entry plus environment.
    """

    profile: Profile | None = None
    if profiles_path and profile_name:
        profiles = load_profiles(profiles_path)
        warnings = validate_profiles(profiles)
        if warnings:
            # Fail fast so bad URLs are fixed before HTTP calls.
            raise ValueError("profiles.yaml validation warnings: " + "; ".join(warnings))
        profile = select_profile(profiles, profile_name)
    return resolve_config(profile)


def load_account_client(
    profiles_path: str | None = None, profile_name: str | None = None
) -> AccountsAPI:
    """
    Resolve a profile and return an AccountsAPI client.
    """

    return build_account_client(load_config(profiles_path, profile_name))


def validate_profile_connection(
    profiles_path: str | None = None, profile_name: str | None = None
) -> dict[str, object]:
    """
    Validate profile + server reachability by listing one account.
    """

    api = load_account_client(profiles_path, profile_name)
    try:
        return validate_connectivity(api)
    finally:
        api.close()
