"""Auto-decision policy: which scoring decisions let a login proceed."""

from __future__ import annotations

from typing import FrozenSet

from ..models import DecisionStatus, ScoringResponse

GOOD_LOGIN_DECISIONS: FrozenSet[str] = frozenset(
    {DecisionStatus.ALLOW.value, DecisionStatus.REVIEW.value}
)


def is_good_login(response: ScoringResponse) -> bool:
    """
    True iff the scoring decision is "allow" or "review".

    Whitelist semantics: "reject", a missing decision and any unrecognized
    value are all treated as a bad login.
    """
    decision = response.decision
    if isinstance(decision, DecisionStatus):
        decision = decision.value
    return decision in GOOD_LOGIN_DECISIONS
