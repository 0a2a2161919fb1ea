"""
Decision Results

Tagged error variants and the canonical outcome of a login decision.

Two error kinds exist, distinguished by ``kind``:

- ``"transport"``: the scoring call failed (non-200, network error,
  timeout, unreadable body). Only ever produced and consumed inside
  DecisionClient.decision(), where it is logged and replaced by the
  fail-open response.
- ``"rejection"``: the scoring service classified the login as unsafe.
  This is the only error handed back to the host.
"""

from __future__ import annotations

from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..models import DecisionStatus, ScoringResponse

UNABLE_TO_DECISION_SIGNAL = "unable-to-decision"


class RejectionError(BaseModel):
    """Signals that the login should be denied."""

    kind: Literal["rejection"] = "rejection"
    is_fraudulent: bool = True
    message: str = "Precognitive: Reject Authentication"

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return self.message


class TransportError(BaseModel):
    """A failed scoring call. ``status_code`` is None when no response arrived."""

    kind: Literal["transport"] = "transport"
    status_code: Optional[int] = None
    response_headers: Dict[str, str] = Field(default_factory=dict)
    body: Any = None
    message: str

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_status(
        cls,
        status_code: int,
        response_headers: Optional[Dict[str, str]] = None,
        body: Any = None,
    ) -> "TransportError":
        return cls(
            status_code=status_code,
            response_headers=response_headers or {},
            body=body,
            message=f"Cognition - HTTP Error [{status_code}]",
        )

    @classmethod
    def from_exception(cls, exc: BaseException) -> "TransportError":
        detail = str(exc) or type(exc).__name__
        return cls(message=f"Cognition - {type(exc).__name__}: {detail}")

    def __str__(self) -> str:
        return self.message


def fail_open_response() -> ScoringResponse:
    """The response substituted whenever the scoring service cannot answer."""
    return ScoringResponse(
        score=0,
        confidence=0,
        decision=DecisionStatus.ALLOW.value,
        signals=[UNABLE_TO_DECISION_SIGNAL],
    )


class DecisionOutcome(BaseModel):
    """
    Result of one auto-decision.

    ``error`` is None when the login may proceed, otherwise the rejection to
    hand to the host.
    """

    response: ScoringResponse
    error: Optional[RejectionError] = None

    model_config = ConfigDict(frozen=True)

    @property
    def allowed(self) -> bool:
        return self.error is None
