"""
API Models for the rule endpoint.

Request/response contracts for hosts that run the login-decision rule over
HTTP instead of in-process.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..decision.results import RejectionError
from ..models import Context, ScoringResponse, User


class RuleRequest(BaseModel):
    """
    Login-decision request: the host's user and context records plus
    optional scoring request overrides (camelCase wire names).
    """
    user: User
    context: Context
    overrides: Dict[str, Any] = Field(default_factory=dict)

    model_config = ConfigDict(extra="forbid")


class RuleResponse(BaseModel):
    """
    Result of the rule. A rejection is a normal 200 response with
    ``allowed`` false and ``error`` set.
    """
    allowed: bool
    error: Optional[RejectionError] = None
    decision: ScoringResponse

    model_config = ConfigDict(extra="forbid")
