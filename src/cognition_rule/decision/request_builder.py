"""
Scoring Request Builder

Assembles the login-decision payload from the host's user and context
records, then deep-merges caller overrides on top of the computed defaults.

Merge rules
-----------
- mapping over mapping: merged key by key, recursively
- anything else (scalars, lists, None): the override replaces the default
- the merged result is validated against ScoringRequest, so only known
  fields can be overridden

Inputs are never mutated, and every call stamps a fresh ``dateTime``.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Callable, Dict, Mapping, Optional

from pydantic import ValidationError

from ..config import ClientConfig
from ..core.log import DecisionLogger
from ..models import (
    Channel,
    Context,
    LoginRecord,
    LoginStatus,
    ScoringRequest,
    User,
)
from .auth_type import map_authentication_type


class RequestBuildError(ValueError):
    """Raised when overrides do not fit the ScoringRequest schema."""


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def deep_merge(base: Mapping[str, Any], overrides: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Return a new dict with ``overrides`` merged over ``base``.

    Neither argument is modified; nested mappings in the result are fresh
    copies wherever a merge happened.
    """
    merged: Dict[str, Any] = dict(base)
    for key, value in overrides.items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = deep_merge(current, value)
        elif isinstance(value, Mapping):
            merged[key] = deep_merge({}, value)
        elif isinstance(value, list):
            merged[key] = list(value)
        else:
            merged[key] = value
    return merged


def build_request(
    config: ClientConfig,
    user: User,
    context: Context,
    overrides: Optional[Mapping[str, Any]] = None,
    *,
    logger: Optional[DecisionLogger] = None,
    clock: Callable[[], datetime] = _utcnow,
) -> ScoringRequest:
    """
    Build the ScoringRequest for one decision attempt.

    Parameters
    ----------
    config : ClientConfig
        Supplies the API key.

    user : User
        The authenticating account.

    context : Context
        The authentication event; its session id becomes the event id.

    overrides : Optional[Mapping[str, Any]]
        Partial request in wire (camelCase) names, merged over the defaults.

    logger : Optional[DecisionLogger]
        Receives a warning when the protocol has no authentication type.

    clock : Callable[[], datetime]
        Source of the request timestamp.

    Returns
    -------
    ScoringRequest

    Raises
    ------
    RequestBuildError
        If the merged request is not a valid ScoringRequest.
    """
    authentication_type = map_authentication_type(context.protocol)
    if authentication_type is None and logger is not None:
        logger.warn(
            "Unable to determine AuthenticationType for protocol %r",
            context.protocol,
        )

    defaults = ScoringRequest(
        api_key=config.api_key,
        event_id=context.session_id,
        date_time=clock(),
        ip_address=context.request.ip,
        login=LoginRecord(
            user_id=user.user_id,
            channel=Channel.WEB,
            used_captcha=False,
            authentication_type=authentication_type,
            status=LoginStatus.SUCCESS,
            password_update_time=user.last_password_reset,
        ),
    )

    if not overrides:
        return defaults

    merged = deep_merge(
        defaults.model_dump(by_alias=True, exclude_none=False),
        overrides,
    )
    try:
        return ScoringRequest.model_validate(merged)
    except ValidationError as exc:
        raise RequestBuildError(
            f"Invalid scoring request overrides: {exc.error_count()} error(s)"
        ) from exc
