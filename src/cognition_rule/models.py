"""
Domain Models

Pydantic models for the records exchanged during a login decision:

- User and Context, as supplied by the hosting rule environment
- ScoringRequest, the payload sent to the scoring service
- ScoringResponse, the scoring service's answer
- DecisionOptions, per-call options

Design Goals
------------
- Wire names (Auth0 records, Precognitive API) live in aliases only
- Host records are frozen and tolerant of extra keys
- Scoring payloads are strict about their shape (extra="forbid")
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


# ---------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------

class ContextProtocol(str, Enum):
    """Authentication protocols reported by the host in ``context.protocol``."""

    OIDC_BASIC_PROFILE = "oidc-basic-profile"
    OIDC_IMPLICIT_PROFILE = "oidc-implicit-profile"
    OAUTH2_RESOURCE_OWNER = "oauth2-resource-owner"
    OAUTH2_RESOURCE_OWNER_JWT_BEARER = "oauth2-resource-owner-jwt-bearer"
    OAUTH2_PASSWORD = "oauth2-password"
    OAUTH2_REFRESH_TOKEN = "oauth2-refresh-token"
    SAMLP = "samlp"
    WSFED = "wsfed"
    WSTRUST_USERNAME_MIXED = "wstrust-usernamemixed"
    DELEGATION = "delegation"
    REDIRECT_CALLBACK = "redirect-callback"


class AuthenticationType(str, Enum):
    CLIENT_STORAGE = "client_storage"
    PASSWORD = "password"
    TWO_FACTOR = "two_factor"
    SINGLE_SIGN_ON = "single_sign_on"
    KEY = "key"
    OTHER = "other"


class Channel(str, Enum):
    WEB = "web"
    DESKTOP = "desktop"
    APP = "app"


class LoginStatus(str, Enum):
    SUCCESS = "success"
    FAILURE = "failure"


class DecisionStatus(str, Enum):
    ALLOW = "allow"
    REVIEW = "review"
    REJECT = "reject"


class ApiVersion(str, Enum):
    V1 = "v1"


# ---------------------------------------------------------------------
# Host Records
# ---------------------------------------------------------------------

class User(BaseModel):
    """
    User record supplied by the host for the authenticating account.

    Only ``user_id`` is required. Metadata maps are opaque and never
    interpreted by the client.
    """

    user_id: str = Field(..., min_length=1)
    email: Optional[str] = None
    username: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    last_login: Optional[datetime] = None
    last_ip: Optional[str] = None
    logins_count: Optional[int] = Field(default=None, ge=0)
    last_password_reset: Optional[datetime] = None
    password_set_date: Optional[datetime] = None
    app_metadata: Dict[str, Any] = Field(default_factory=dict)
    user_metadata: Dict[str, Any] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True, extra="ignore")


class GeoIP(BaseModel):
    country_code: Optional[str] = None
    country_code3: Optional[str] = None
    country_name: Optional[str] = None
    city_name: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    time_zone: Optional[str] = None
    continent_code: Optional[str] = None

    model_config = ConfigDict(frozen=True, extra="ignore")


class RequestInfo(BaseModel):
    """Metadata about the end user's HTTP request."""

    ip: Optional[str] = None
    user_agent: Optional[str] = Field(default=None, alias="userAgent")
    hostname: Optional[str] = None
    query: Optional[Any] = None
    geoip: Optional[GeoIP] = None

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)


class Context(BaseModel):
    """
    Per-authentication-event record supplied by the host.

    ``protocol`` is kept as a plain string: hosts may report protocols this
    client does not know, and those must degrade to an unknown
    authentication type rather than fail validation.
    """

    session_id: str = Field(..., alias="sessionID")
    protocol: Optional[str] = None
    request: RequestInfo = Field(default_factory=RequestInfo)

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)


# ---------------------------------------------------------------------
# Scoring Service Payloads
# ---------------------------------------------------------------------

_WIRE_CONFIG = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    extra="forbid",
)


class LoginRecord(BaseModel):
    user_id: str
    channel: Channel = Channel.WEB
    used_captcha: bool = False
    authentication_type: Optional[AuthenticationType] = None
    status: LoginStatus = LoginStatus.SUCCESS
    password_update_time: Optional[datetime] = None
    user_name_update_time: Optional[datetime] = None

    model_config = _WIRE_CONFIG


class ScoringRequest(BaseModel):
    """
    Canonical login-decision payload for the scoring service.

    Serialize with ``to_payload()``; optional extras that were never set are
    left out, while ``login.authenticationType`` is always present (null when
    the protocol could not be mapped).
    """

    api_key: str
    event_id: str
    date_time: datetime
    ip_address: Optional[str] = None
    custom: Optional[Dict[str, Any]] = Field(default=None, alias="_custom")
    client_payload: Optional[Dict[str, Any]] = None
    login: LoginRecord

    model_config = _WIRE_CONFIG

    def to_payload(self) -> Dict[str, Any]:
        """Return the JSON-ready wire representation."""
        payload = self.model_dump(mode="json", by_alias=True)
        for key in ("_custom", "clientPayload"):
            if payload.get(key) is None:
                payload.pop(key, None)
        if payload["login"].get("userNameUpdateTime") is None:
            payload["login"].pop("userNameUpdateTime", None)
        return payload


class ScoringResponse(BaseModel):
    """
    Decision returned by the scoring service.

    ``decision`` is a plain string on purpose: values outside
    DecisionStatus must reach the policy intact so they can be rejected.
    The other fields are advisory and coerced to their defaults when
    malformed, so a bad score or signal list can never hide a "reject".
    """

    score: float = 0
    confidence: float = 0
    decision: Optional[str] = None
    signals: List[str] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True, extra="ignore")

    @field_validator("score", "confidence", mode="before")
    @classmethod
    def _coerce_number(cls, v: Any) -> float:
        if isinstance(v, bool):
            return 0
        try:
            return float(v)
        except (TypeError, ValueError):
            return 0

    @field_validator("decision", mode="before")
    @classmethod
    def _coerce_decision(cls, v: Any) -> Optional[str]:
        if v is None or isinstance(v, str):
            return v
        # non-string decisions are unrecognized, the policy rejects them
        return str(v)

    @field_validator("signals", mode="before")
    @classmethod
    def _coerce_signals(cls, v: Any) -> List[str]:
        if not isinstance(v, list):
            return []
        return [signal for signal in v if isinstance(signal, str)]


class DecisionOptions(BaseModel):
    """
    Per-call options.

    ``overrides`` is a partial ScoringRequest in wire (camelCase) names,
    deep-merged over the computed defaults.
    """

    overrides: Dict[str, Any] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True, extra="forbid")
