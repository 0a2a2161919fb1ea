"""
Decision Package

Login-decision client, request building, authentication type mapping and
the auto-decision policy.
"""

from .auth_type import map_authentication_type
from .client import DECISION_TIMEOUT_SECONDS, DecisionCallback, DecisionClient
from .policy import is_good_login
from .request_builder import RequestBuildError, build_request, deep_merge
from .results import (
    UNABLE_TO_DECISION_SIGNAL,
    DecisionOutcome,
    RejectionError,
    TransportError,
    fail_open_response,
)

__all__ = [
    "map_authentication_type",
    "DECISION_TIMEOUT_SECONDS",
    "DecisionCallback",
    "DecisionClient",
    "is_good_login",
    "RequestBuildError",
    "build_request",
    "deep_merge",
    "UNABLE_TO_DECISION_SIGNAL",
    "DecisionOutcome",
    "RejectionError",
    "TransportError",
    "fail_open_response",
]
