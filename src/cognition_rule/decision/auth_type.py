"""
Authentication type mapping.

Translates the host's authentication protocol into the coarse
authentication-type category understood by the scoring model. The lookup is
by exact protocol value; anything not in the table is unknown (None).
"""

from __future__ import annotations

from typing import Dict, Optional, Union

from ..models import AuthenticationType, ContextProtocol

PROTOCOL_AUTHENTICATION_TYPES: Dict[str, AuthenticationType] = {
    ContextProtocol.OIDC_BASIC_PROFILE.value: AuthenticationType.PASSWORD,
    ContextProtocol.OIDC_IMPLICIT_PROFILE.value: AuthenticationType.PASSWORD,
    ContextProtocol.OAUTH2_RESOURCE_OWNER.value: AuthenticationType.PASSWORD,
    ContextProtocol.OAUTH2_PASSWORD.value: AuthenticationType.PASSWORD,
    ContextProtocol.SAMLP.value: AuthenticationType.SINGLE_SIGN_ON,
    ContextProtocol.WSFED.value: AuthenticationType.SINGLE_SIGN_ON,
    ContextProtocol.WSTRUST_USERNAME_MIXED.value: AuthenticationType.SINGLE_SIGN_ON,
    ContextProtocol.OAUTH2_REFRESH_TOKEN.value: AuthenticationType.KEY,
    ContextProtocol.OAUTH2_RESOURCE_OWNER_JWT_BEARER.value: AuthenticationType.KEY,
}


def map_authentication_type(
    protocol: Union[ContextProtocol, str, None],
) -> Optional[AuthenticationType]:
    """
    Return the authentication type for a protocol, or None if unmapped.

    Never raises; non-string input is simply unknown.
    """
    if isinstance(protocol, ContextProtocol):
        protocol = protocol.value
    if not isinstance(protocol, str):
        return None
    return PROTOCOL_AUTHENTICATION_TYPES.get(protocol)
