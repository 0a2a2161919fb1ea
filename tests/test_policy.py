import pytest

from cognition_rule.decision.policy import is_good_login
from cognition_rule.decision.results import fail_open_response
from cognition_rule.models import ScoringResponse


@pytest.mark.parametrize("decision", ["allow", "review"])
def test_allow_and_review_are_good(decision):
    assert is_good_login(ScoringResponse(score=10, confidence=80, decision=decision))


def test_reject_is_bad():
    assert not is_good_login(ScoringResponse(score=95, confidence=90, decision="reject"))


@pytest.mark.parametrize("decision", ["ALLOW", "block", "", "allowed", None])
def test_unrecognized_decisions_fail_closed(decision):
    """Unknown classifications reject, unlike transport failures which fail open."""
    assert not is_good_login(ScoringResponse(decision=decision))


def test_fail_open_response_is_good():
    response = fail_open_response()
    assert response.score == 0
    assert response.confidence == 0
    assert response.decision == "allow"
    assert response.signals == ["unable-to-decision"]
    assert is_good_login(response)


def test_malformed_advisory_fields_are_coerced():
    response = ScoringResponse.model_validate(
        {"decision": "reject", "score": None, "confidence": "n/a", "signals": ["a", 3, None]}
    )

    assert response.score == 0
    assert response.confidence == 0
    assert response.signals == ["a"]
    assert not is_good_login(response)


def test_non_list_signals_become_empty():
    assert ScoringResponse.model_validate({"decision": "allow", "signals": "a"}).signals == []


def test_non_string_decision_is_unrecognized():
    response = ScoringResponse.model_validate({"decision": 0})

    assert response.decision == "0"
    assert not is_good_login(response)
