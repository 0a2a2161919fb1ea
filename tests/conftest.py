from datetime import datetime, timezone

import pytest

from cognition_rule.config import BasicAuth, ClientConfig
from cognition_rule.core.log import LogLevel
from cognition_rule.models import Context, User

TEST_API_KEY = "test-api-key"
TEST_USERNAME = "rule-user"
TEST_PASSWORD = "rule-password"


def make_config(log_level=LogLevel.DEBUG, **kwargs) -> ClientConfig:
    return ClientConfig(
        api_key=TEST_API_KEY,
        auth=BasicAuth(user_name=TEST_USERNAME, password=TEST_PASSWORD),
        log_level=log_level,
        **kwargs,
    )


@pytest.fixture
def config() -> ClientConfig:
    return make_config()


@pytest.fixture
def user() -> User:
    return User(
        user_id="auth0|5c1d2f",
        email="jane@example.com",
        created_at=datetime(2018, 3, 1, tzinfo=timezone.utc),
        last_login=datetime(2019, 1, 10, tzinfo=timezone.utc),
        last_password_reset=datetime(2018, 11, 5, 12, 30, tzinfo=timezone.utc),
        app_metadata={"plan": "gold"},
    )


@pytest.fixture
def context() -> Context:
    return Context(
        sessionID="sess-8f2e1c",
        protocol="oidc-basic-profile",
        request={
            "ip": "198.51.100.7",
            "userAgent": "Mozilla/5.0",
            "hostname": "login.example.com",
            "geoip": {"country_code": "US", "city_name": "Austin"},
        },
    )
