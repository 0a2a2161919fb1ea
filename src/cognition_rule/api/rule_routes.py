"""
Rule Routes

Runs the login-decision rule for a host that calls it as a webhook. The
route never turns a scoring outage into an HTTP error: the decision client
fails open, and a fraud rejection is reported in the response body.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from .dependencies import get_decision_client
from .models import RuleRequest, RuleResponse
from ..decision.client import DecisionClient
from ..models import DecisionOptions

router = APIRouter(prefix="/rules", tags=["rules"])


@router.post(
    "/login-decision",
    response_model=RuleResponse,
    summary="Decide whether an authenticated login may proceed",
    status_code=status.HTTP_200_OK,
)
async def login_decision(
    req: RuleRequest,
    client: Annotated[DecisionClient, Depends(get_decision_client)],
) -> RuleResponse:
    """
    Score the login and apply the auto-decision policy.

    Parameters
    ----------
    req : RuleRequest
        User and context records, plus optional request overrides.

    Returns
    -------
    RuleResponse
        ``allowed`` with the rejection error (if any) and the scoring
        response the decision was based on.
    """
    outcome = await client.evaluate(
        req.user,
        req.context,
        DecisionOptions(overrides=req.overrides),
    )
    return RuleResponse(
        allowed=outcome.allowed,
        error=outcome.error,
        decision=outcome.response,
    )
