"""
Client library for the Form3 organisation accounts API.

The package is segmented so each concern stays small: models.py describes
the wire types, payload.py marshals envelopes, http.py/async_http.py talk
HTTP, and endpoints/ maps CRUD calls onto routes. Import paths are exported
here to keep the public surface area obvious.
"""

from .config import (
    AppConfig,
    ClientSettings,
    Profile,
    load_profiles,
    resolve_config,
    select_profile,
)
from .errors import F3ClientError, F3HTTPError, PayloadDecodeError
from .models import (
    Account,
    AccountXL,
    Actor,
    Attributes,
    OrganisationIdentification,
    PayloadIn,
    PayloadInArr,
    PayloadOut,
    PrivateIdentification,
    Rel,
    Relationships,
    new_account,
)
from .payload import from_payload, from_payload_arr, to_payload
from .http import F3HttpClient
from .async_http import F3AsyncHttpClient
from .endpoints.accounts import AccountsAPI
from .endpoints.accounts_async import AccountsAsyncAPI
from .validation import validate_connectivity, validate_profiles
from .app import (
    build_account_client,
    build_account_client_async,
    load_account_client,
    load_config,
    validate_profile_connection,
)
from .logging_config import setup_logging

__all__ = [
    "AppConfig",
    "ClientSettings",
    "Profile",
    "load_profiles",
    "resolve_config",
    "select_profile",
    "F3ClientError",
    "F3HTTPError",
    "PayloadDecodeError",
    "Account",
    "AccountXL",
    "Actor",
    "Attributes",
    "OrganisationIdentification",
    "PayloadIn",
    "PayloadInArr",
    "PayloadOut",
    "PrivateIdentification",
    "Rel",
    "Relationships",
    "new_account",
    "from_payload",
    "from_payload_arr",
    "to_payload",
    "F3HttpClient",
    "F3AsyncHttpClient",
    "AccountsAPI",
    "AccountsAsyncAPI",
    "validate_connectivity",
    "validate_profiles",
    "build_account_client",
    "build_account_client_async",
    "load_account_client",
    "load_config",
    "validate_profile_connection",
    "setup_logging",
]
