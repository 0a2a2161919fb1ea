"""Cognition rule: fraud-risk login decisions against the Precognitive API."""

__version__ = "1.0.0"

from .config import BasicAuth, ClientConfig, Settings, get_settings
from .core.log import DecisionLogger, LogLevel
from .decision import (
    DecisionClient,
    DecisionOutcome,
    RejectionError,
    is_good_login,
    map_authentication_type,
)
from .models import Context, DecisionOptions, ScoringRequest, ScoringResponse, User

__all__ = [
    "BasicAuth",
    "ClientConfig",
    "Settings",
    "get_settings",
    "DecisionLogger",
    "LogLevel",
    "DecisionClient",
    "DecisionOutcome",
    "RejectionError",
    "is_good_login",
    "map_authentication_type",
    "Context",
    "DecisionOptions",
    "ScoringRequest",
    "ScoringResponse",
    "User",
]
