"""
Decision Client

Asynchronous client for the Precognitive login-decision API.

Behavior
--------
- One POST per decision, bounded by a 2 second client-side timeout.
- Any failure of the scoring call (non-200 status, network error, timeout,
  unreadable body) is logged and replaced by a fail-open "allow" response.
  A scoring outage must never block authentication.
- Only an explicit bad decision from the service produces a RejectionError.

The client holds no mutable state and can be shared across requests.
"""

from __future__ import annotations

import asyncio
import json
from typing import Callable, Optional, Union

import httpx

from ..config import ClientConfig, Settings
from ..core.log import DecisionLogger, LogLevel
from ..models import Context, DecisionOptions, ScoringRequest, ScoringResponse, User
from .policy import is_good_login
from .request_builder import build_request
from .results import DecisionOutcome, RejectionError, TransportError, fail_open_response

DECISION_TIMEOUT_SECONDS = 2.0

DecisionCallback = Callable[[Optional[RejectionError], User, Context], None]


class DecisionClient:
    """
    Login-decision client bound to one immutable ClientConfig.
    """

    def __init__(
        self,
        config: ClientConfig,
        logger: Optional[DecisionLogger] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: float = DECISION_TIMEOUT_SECONDS,
    ) -> None:
        """
        Parameters
        ----------
        config : ClientConfig
            API key, version, base URL and credentials.

        logger : Optional[DecisionLogger]
            Explicit logger. Falls back to ``config.logger``, then to a
            DecisionLogger at ``config.log_level``.

        transport : Optional[httpx.AsyncBaseTransport]
            Custom httpx transport (used by tests to stub the service).

        timeout : float
            Upper bound in seconds for the whole scoring call.
        """
        self.config = config
        self.logger = logger or config.logger or DecisionLogger(config.log_level)
        self.timeout = timeout
        self._transport = transport

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs) -> "DecisionClient":
        return cls(ClientConfig.from_settings(settings), **kwargs)

    @property
    def decision_url(self) -> str:
        return f"{self.config.api_url}/{self.config.version.value}/decision/login"

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    async def decision(
        self,
        user: User,
        context: Context,
        options: Optional[DecisionOptions] = None,
    ) -> ScoringResponse:
        """
        Request a decision for this login and return the raw response.

        Scoring failures do not raise: they are logged at error level and
        the fail-open response is returned instead.

        Raises
        ------
        RequestBuildError
            If ``options.overrides`` does not fit the request schema.
        """
        overrides = options.overrides if options is not None else None
        request = build_request(
            self.config,
            user,
            context,
            overrides,
            logger=self.logger,
        )
        if self.logger.is_enabled(LogLevel.DEBUG):
            self.logger.debug("REQUEST BODY - %s", json.dumps(request.to_payload()))

        result = await self._send(request)
        if isinstance(result, TransportError):
            self.logger.error(
                "%s (status=%s, body=%r)",
                result.message,
                result.status_code,
                result.body,
            )
            return fail_open_response()

        if self.logger.is_enabled(LogLevel.DEBUG):
            self.logger.debug("RESPONSE BODY - %s", result.model_dump_json())
        return result

    async def evaluate(
        self,
        user: User,
        context: Context,
        options: Optional[DecisionOptions] = None,
    ) -> DecisionOutcome:
        """
        Decide whether the login may proceed.

        Never raises: anything that goes wrong before a decision is reached
        is logged and the login is allowed.
        """
        try:
            response = await self.decision(user, context, options)
        except Exception as exc:
            self.logger.error(
                "Auto-Decision failed, allowing login: %s: %s",
                type(exc).__name__,
                exc,
            )
            return DecisionOutcome(response=fail_open_response())

        if is_good_login(response):
            return DecisionOutcome(response=response)

        self.logger.info("Auto-Decision - reject")
        return DecisionOutcome(
            response=response,
            error=RejectionError(is_fraudulent=True),
        )

    async def auto_decision(
        self,
        user: User,
        context: Context,
        callback: DecisionCallback,
        options: Optional[DecisionOptions] = None,
    ) -> None:
        """
        Callback-style decision for rule hosts.

        ``callback(error, user, context)`` is invoked exactly once, with
        ``error`` None to let the login proceed or a RejectionError to deny
        it. Exceptions raised by the callback propagate to the caller.
        """
        outcome = await self.evaluate(user, context, options)
        callback(outcome.error, user, context)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    async def _send(self, request: ScoringRequest) -> Union[ScoringResponse, TransportError]:
        auth = httpx.BasicAuth(
            self.config.auth.user_name,
            self.config.auth.password.get_secret_value(),
        )
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                transport=self._transport,
            ) as client:
                response = await asyncio.wait_for(
                    client.post(self.decision_url, json=request.to_payload(), auth=auth),
                    timeout=self.timeout,
                )
        except asyncio.TimeoutError as exc:
            return TransportError.from_exception(exc)
        except httpx.HTTPError as exc:
            return TransportError.from_exception(exc)

        if response.status_code != 200:
            return TransportError.from_status(
                response.status_code,
                dict(response.headers),
                response.text,
            )

        return self._parse_response(response)

    @staticmethod
    def _parse_response(response: httpx.Response) -> Union[ScoringResponse, TransportError]:
        try:
            body = response.json()
        except ValueError:
            return TransportError(
                status_code=response.status_code,
                response_headers=dict(response.headers),
                body=response.text,
                message="Cognition - Unreadable response body",
            )

        if not isinstance(body, dict):
            return TransportError(
                status_code=response.status_code,
                response_headers=dict(response.headers),
                body=body,
                message="Cognition - Response body is not an object",
            )

        # only decision drives the policy; malformed advisory fields are coerced
        return ScoringResponse.model_validate(body)
