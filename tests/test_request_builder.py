import copy
import logging
from datetime import datetime, timedelta, timezone

import pytest

from cognition_rule.core.log import DecisionLogger, LogLevel
from cognition_rule.decision.request_builder import (
    RequestBuildError,
    build_request,
    deep_merge,
)
from cognition_rule.models import AuthenticationType, Channel, Context, LoginStatus


def test_defaults_are_computed_from_user_and_context(config, user, context):
    request = build_request(config, user, context)

    assert request.api_key == "test-api-key"
    assert request.event_id == "sess-8f2e1c"
    assert request.ip_address == "198.51.100.7"
    assert request.login.user_id == "auth0|5c1d2f"
    assert request.login.channel is Channel.WEB
    assert request.login.used_captcha is False
    assert request.login.authentication_type is AuthenticationType.PASSWORD
    assert request.login.status is LoginStatus.SUCCESS
    assert request.login.password_update_time == user.last_password_reset


def test_payload_uses_wire_names(config, user, context):
    payload = build_request(config, user, context).to_payload()

    assert set(payload) == {"apiKey", "eventId", "dateTime", "ipAddress", "login"}
    assert payload["login"] == {
        "userId": "auth0|5c1d2f",
        "channel": "web",
        "usedCaptcha": False,
        "authenticationType": "password",
        "status": "success",
        "passwordUpdateTime": "2018-11-05T12:30:00Z",
    }


def test_unmapped_protocol_sends_null_and_warns(config, user, context, caplog):
    caplog.set_level(logging.DEBUG, logger="cognition")
    delegation = context.model_copy(update={"protocol": "delegation"})

    request = build_request(
        config, user, delegation, logger=DecisionLogger(LogLevel.WARN)
    )

    assert request.login.authentication_type is None
    assert request.to_payload()["login"]["authenticationType"] is None
    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert len(warnings) == 1
    assert "Unable to determine AuthenticationType" in warnings[0].getMessage()


def test_channel_override_keeps_other_defaults(config, user, context):
    base = build_request(config, user, context)
    request = build_request(config, user, context, {"login": {"channel": "app"}})

    assert request.login.channel is Channel.APP
    assert request.model_dump(exclude={"date_time": True, "login": {"channel"}}) == base.model_dump(
        exclude={"date_time": True, "login": {"channel"}}
    )


def test_overrides_targeting_fixed_fields_win(config, user, context):
    request = build_request(
        config,
        user,
        context,
        {"login": {"status": "failure", "usedCaptcha": True}},
    )

    assert request.login.status is LoginStatus.FAILURE
    assert request.login.used_captcha is True
    assert request.login.channel is Channel.WEB


def test_top_level_and_optional_overrides(config, user, context):
    request = build_request(
        config,
        user,
        context,
        {
            "ipAddress": "203.0.113.99",
            "_custom": {"tenant": "acme"},
            "clientPayload": {"fingerprint": "abc"},
            "login": {"userNameUpdateTime": "2019-02-01T00:00:00+00:00"},
        },
    )
    payload = request.to_payload()

    assert payload["ipAddress"] == "203.0.113.99"
    assert payload["_custom"] == {"tenant": "acme"}
    assert payload["clientPayload"] == {"fingerprint": "abc"}
    assert payload["login"]["userNameUpdateTime"] == "2019-02-01T00:00:00Z"


def test_unknown_override_fields_are_rejected(config, user, context):
    with pytest.raises(RequestBuildError):
        build_request(config, user, context, {"login": {"riskHint": "low"}})

    with pytest.raises(RequestBuildError):
        build_request(config, user, context, {"notAField": 1})


def test_timestamp_is_fresh_per_build(config, user, context):
    first = datetime(2019, 1, 1, tzinfo=timezone.utc)
    times = iter([first, first + timedelta(milliseconds=1)])

    def clock():
        return next(times)

    a = build_request(config, user, context, clock=clock)
    b = build_request(config, user, context, clock=clock)

    assert a.date_time != b.date_time
    assert a.model_dump(exclude={"date_time"}) == b.model_dump(exclude={"date_time"})


def test_default_clock_is_timezone_aware(config, user, context):
    request = build_request(config, user, context)
    assert request.date_time.tzinfo is not None


def test_build_does_not_mutate_inputs(config, user, context):
    overrides = {"login": {"channel": "desktop"}, "_custom": {"tags": ["a"]}}
    snapshot = copy.deepcopy(overrides)
    user_before = user.model_dump()
    context_before = context.model_dump()

    build_request(config, user, context, overrides)

    assert overrides == snapshot
    assert user.model_dump() == user_before
    assert context.model_dump() == context_before


class TestDeepMerge:
    def test_nested_mappings_merge(self):
        base = {"a": 1, "nested": {"x": 1, "y": 2}}
        assert deep_merge(base, {"nested": {"y": 3, "z": 4}}) == {
            "a": 1,
            "nested": {"x": 1, "y": 3, "z": 4},
        }

    def test_lists_replace_wholesale(self):
        assert deep_merge({"tags": [1, 2, 3]}, {"tags": [9]}) == {"tags": [9]}

    def test_scalar_and_none_replace(self):
        assert deep_merge({"a": {"b": 1}, "c": 2}, {"a": 5, "c": None}) == {"a": 5, "c": None}

    def test_inputs_untouched(self):
        base = {"nested": {"x": 1}}
        override = {"nested": {"y": 2}}
        merged = deep_merge(base, override)

        merged["nested"]["x"] = 100
        assert base == {"nested": {"x": 1}}
        assert override == {"nested": {"y": 2}}
