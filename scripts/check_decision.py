"""
Send one sample login decision to the Precognitive API.

Usage:
    export PYTHONPATH=src
    export PRECOGNITIVE_API_KEY=... PRECOGNITIVE_USERNAME=... PRECOGNITIVE_PASSWORD=...
    python3 scripts/check_decision.py [protocol]

Prints the scoring response and whether the login would be allowed.
"""

import asyncio
import logging
import sys
import uuid

from cognition_rule.config import get_settings
from cognition_rule.core.log import LogLevel
from cognition_rule.decision import DecisionClient
from cognition_rule.models import Context, User


async def main(protocol: str) -> None:
    settings = get_settings()
    client = DecisionClient.from_settings(settings)
    client.logger.level = max(client.logger.level, LogLevel.ERROR)

    user = User(user_id="auth0|check-decision")
    context = Context(
        sessionID=f"check-{uuid.uuid4().hex[:12]}",
        protocol=protocol,
        request={"ip": "203.0.113.10", "userAgent": "check-decision/1.0"},
    )

    outcome = await client.evaluate(user, context)

    print(f"Endpoint:   {client.decision_url}")
    print(f"Decision:   {outcome.response.decision}")
    print(f"Score:      {outcome.response.score}")
    print(f"Confidence: {outcome.response.confidence}")
    print(f"Signals:    {', '.join(outcome.response.signals) or '-'}")
    print(f"Allowed:    {outcome.allowed}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)
    asyncio.run(main(sys.argv[1] if len(sys.argv) > 1 else "oidc-basic-profile"))
