"""
Domain models for the organisation accounts resource.

Purpose:
- Let the JSON shape of the accounts API dictate the Python types.
- Keep every wire key in one place so encoding and decoding stay symmetric.

Notes:
- from_dict() is lenient: missing keys fall back to empty values and unknown
  keys are ignored, matching how the API omits unset attributes.
- to_dict() always emits every field so a round-trip is lossless.
- AccountXL composes an Account instead of flattening it; the flat wire
  shape is rebuilt in to_dict()/from_dict().
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

ACCOUNT_TYPE = "accounts"


def _mapping(raw: Any, what: str) -> dict[str, Any]:
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise TypeError(f"{what} must be a JSON object, got {type(raw).__name__}.")
    return raw


def _str(raw: dict[str, Any], key: str) -> str:
    value = raw.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise TypeError(f"'{key}' must be a string, got {type(value).__name__}.")
    return value


def _bool(raw: dict[str, Any], key: str) -> bool:
    value = raw.get(key)
    if value is None:
        return False
    if not isinstance(value, bool):
        raise TypeError(f"'{key}' must be a boolean, got {type(value).__name__}.")
    return value


def _str_list(raw: dict[str, Any], key: str) -> list[str]:
    value = raw.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise TypeError(f"'{key}' must be a list, got {type(value).__name__}.")
    items: list[str] = []
    for item in value:
        if item is None:
            items.append("")
        elif isinstance(item, str):
            items.append(item)
        else:
            raise TypeError(f"'{key}' items must be strings, got {type(item).__name__}.")
    return items


@dataclass(frozen=True)
class PrivateIdentification:
    """
    Personal identification data of the account holder.
    """

    birth_date: str = ""
    birth_country: str = ""
    identification: str = ""
    address: list[str] = field(default_factory=list)
    city: str = ""
    country: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "birth_date": self.birth_date,
            "birth_country": self.birth_country,
            "identification": self.identification,
            "address": list(self.address),
            "city": self.city,
            "country": self.country,
        }

    @classmethod
    def from_dict(cls, raw: Any) -> "PrivateIdentification":
        raw = _mapping(raw, "private_identification")
        return cls(
            birth_date=_str(raw, "birth_date"),
            birth_country=_str(raw, "birth_country"),
            identification=_str(raw, "identification"),
            address=_str_list(raw, "address"),
            city=_str(raw, "city"),
            country=_str(raw, "country"),
        )


@dataclass(frozen=True)
class Actor:
    name: list[str] = field(default_factory=list)
    birth_date: str = ""
    residency: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": list(self.name),
            "birth_date": self.birth_date,
            "residency": self.residency,
        }

    @classmethod
    def from_dict(cls, raw: Any) -> "Actor":
        raw = _mapping(raw, "actor")
        return cls(
            name=_str_list(raw, "name"),
            birth_date=_str(raw, "birth_date"),
            residency=_str(raw, "residency"),
        )


@dataclass(frozen=True)
class OrganisationIdentification:
    """
    Identification data when the account holder is an organisation.
    """

    identification: str = ""
    actors: list[Actor] = field(default_factory=list)
    address: list[str] = field(default_factory=list)
    city: str = ""
    country: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "identification": self.identification,
            "actors": [actor.to_dict() for actor in self.actors],
            "address": list(self.address),
            "city": self.city,
            "country": self.country,
        }

    @classmethod
    def from_dict(cls, raw: Any) -> "OrganisationIdentification":
        raw = _mapping(raw, "organisation_identification")
        actors = raw.get("actors")
        if actors is None:
            actors = []
        if not isinstance(actors, list):
            raise TypeError("'actors' must be a list.")
        return cls(
            identification=_str(raw, "identification"),
            actors=[Actor.from_dict(item) for item in actors],
            address=_str_list(raw, "address"),
            city=_str(raw, "city"),
            country=_str(raw, "country"),
        )


@dataclass(frozen=True)
class Attributes:
    """
    Account attributes as sent to and returned by the API.

    Values are passed through untouched; the server is the only validator.
    `status` is assigned by the server and is normally left empty on create.
    """

    country: str = ""
    base_currency: str = ""
    account_number: str = ""
    bank_id: str = ""
    bank_id_code: str = ""
    bic: str = ""
    iban: str = ""
    name: list[str] = field(default_factory=list)
    alternative_names: list[str] = field(default_factory=list)
    account_classification: str = ""
    joint_account: bool = False
    account_matching_opt_out: bool = False
    secondary_identification: str = ""
    switched: bool = False
    private_identification: PrivateIdentification = field(
        default_factory=PrivateIdentification
    )
    organisation_identification: OrganisationIdentification = field(
        default_factory=OrganisationIdentification
    )
    status: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "country": self.country,
            "base_currency": self.base_currency,
            "account_number": self.account_number,
            "bank_id": self.bank_id,
            "bank_id_code": self.bank_id_code,
            "bic": self.bic,
            "iban": self.iban,
            "name": list(self.name),
            "alternative_names": list(self.alternative_names),
            "account_classification": self.account_classification,
            "joint_account": self.joint_account,
            "account_matching_opt_out": self.account_matching_opt_out,
            "secondary_identification": self.secondary_identification,
            "switched": self.switched,
            "private_identification": self.private_identification.to_dict(),
            "organisation_identification": self.organisation_identification.to_dict(),
            "status": self.status,
        }

    @classmethod
    def from_dict(cls, raw: Any) -> "Attributes":
        raw = _mapping(raw, "attributes")
        return cls(
            country=_str(raw, "country"),
            base_currency=_str(raw, "base_currency"),
            account_number=_str(raw, "account_number"),
            bank_id=_str(raw, "bank_id"),
            bank_id_code=_str(raw, "bank_id_code"),
            bic=_str(raw, "bic"),
            iban=_str(raw, "iban"),
            name=_str_list(raw, "name"),
            alternative_names=_str_list(raw, "alternative_names"),
            account_classification=_str(raw, "account_classification"),
            joint_account=_bool(raw, "joint_account"),
            account_matching_opt_out=_bool(raw, "account_matching_opt_out"),
            secondary_identification=_str(raw, "secondary_identification"),
            switched=_bool(raw, "switched"),
            private_identification=PrivateIdentification.from_dict(
                raw.get("private_identification")
            ),
            organisation_identification=OrganisationIdentification.from_dict(
                raw.get("organisation_identification")
            ),
            status=_str(raw, "status"),
        )


@dataclass(frozen=True)
class Account:
    """
    A bank account as the caller describes it.

    Build it with new_account() so `type` is set correctly.
    """

    type: str
    id: str
    organisation_id: str
    attributes: Attributes = field(default_factory=Attributes)

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type,
            "id": self.id,
            "organisation_id": self.organisation_id,
            "attributes": self.attributes.to_dict(),
        }

    @classmethod
    def from_dict(cls, raw: Any) -> "Account":
        raw = _mapping(raw, "account")
        return cls(
            type=_str(raw, "type"),
            id=_str(raw, "id"),
            organisation_id=_str(raw, "organisation_id"),
            attributes=Attributes.from_dict(raw.get("attributes")),
        )


def new_account(account_id: str, organisation_id: str, attributes: Attributes) -> Account:
    """
    Create an account that can be used as input to CRUD operations.
    """

    return Account(
        type=ACCOUNT_TYPE,
        id=account_id,
        organisation_id=organisation_id,
        attributes=attributes,
    )


@dataclass(frozen=True)
class Rel:
    type: str = ""
    id: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "id": self.id}

    @classmethod
    def from_dict(cls, raw: Any) -> "Rel":
        raw = _mapping(raw, "relationship")
        return cls(type=_str(raw, "type"), id=_str(raw, "id"))


def _rels(raw: Any, key: str) -> list[Rel]:
    # Each relationship is itself a {"data": [...]} envelope.
    data = _mapping(raw, key).get("data")
    if data is None:
        return []
    if not isinstance(data, list):
        raise TypeError(f"'{key}.data' must be a list.")
    return [Rel.from_dict(item) for item in data]


@dataclass(frozen=True)
class Relationships:
    """
    Links from an account to its master account and account events.
    """

    master_account: list[Rel] = field(default_factory=list)
    account_events: list[Rel] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "master_account": {"data": [rel.to_dict() for rel in self.master_account]},
            "account_events": {"data": [rel.to_dict() for rel in self.account_events]},
        }

    @classmethod
    def from_dict(cls, raw: Any) -> "Relationships":
        raw = _mapping(raw, "relationships")
        return cls(
            master_account=_rels(raw.get("master_account"), "master_account"),
            account_events=_rels(raw.get("account_events"), "account_events"),
        )


@dataclass(frozen=True)
class AccountXL:
    """
    An account as returned by the server, with metadata attached.

    `version` is the optimistic concurrency token required by delete; treat it
    as opaque and pass it back unchanged.
    """

    account: Account
    version: int = 0
    relationships: Relationships = field(default_factory=Relationships)

    @property
    def type(self) -> str:
        return self.account.type

    @property
    def id(self) -> str:
        return self.account.id

    @property
    def organisation_id(self) -> str:
        return self.account.organisation_id

    @property
    def attributes(self) -> Attributes:
        return self.account.attributes

    def to_dict(self) -> dict[str, Any]:
        payload = self.account.to_dict()
        payload["version"] = self.version
        payload["relationships"] = self.relationships.to_dict()
        return payload

    @classmethod
    def from_dict(cls, raw: Any) -> "AccountXL":
        raw = _mapping(raw, "account")
        version = raw.get("version")
        if isinstance(version, bool) or not isinstance(version, (int, type(None))):
            raise TypeError(f"'version' must be an integer, got {version!r}.")
        return cls(
            account=Account.from_dict(raw),
            version=version or 0,
            relationships=Relationships.from_dict(raw.get("relationships")),
        )


@dataclass(frozen=True)
class PayloadOut:
    """
    Envelope for the body the client sends.
    """

    account: Account

    def to_dict(self) -> dict[str, Any]:
        return {"data": self.account.to_dict()}


@dataclass(frozen=True)
class PayloadIn:
    """
    Envelope for a single account the client receives.
    """

    account: AccountXL

    def to_dict(self) -> dict[str, Any]:
        return {"data": self.account.to_dict()}

    @classmethod
    def from_dict(cls, raw: Any) -> "PayloadIn":
        raw = _mapping(raw, "payload")
        if not isinstance(raw.get("data"), dict):
            raise TypeError("payload 'data' must be a JSON object.")
        return cls(account=AccountXL.from_dict(raw["data"]))


@dataclass(frozen=True)
class PayloadInArr:
    """
    Envelope for a page of accounts the client receives.
    """

    accounts: list[AccountXL] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"data": [account.to_dict() for account in self.accounts]}

    @classmethod
    def from_dict(cls, raw: Any) -> "PayloadInArr":
        raw = _mapping(raw, "payload")
        data = raw.get("data")
        if data is None:
            return cls()
        if not isinstance(data, list):
            raise TypeError("payload 'data' must be a JSON array.")
        return cls(accounts=[AccountXL.from_dict(item) for item in data])
