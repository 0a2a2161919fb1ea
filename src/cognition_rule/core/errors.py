"""
Rule Adapter Error Handling

Last-resort handler for exceptions that escape a route.

A host calling the login-decision rule over HTTP must never have the login
blocked by a failure inside this service, so an unexpected error on a
``/rules`` path is answered with the same fail-open decision the client
substitutes for a scoring outage. Any other path gets a minimal 500. In
both cases the traceback is logged here and never sent to the caller.
"""

from __future__ import annotations

import logging

from fastapi import Request, status
from fastapi.responses import JSONResponse

from ..api.models import RuleResponse
from ..decision.results import fail_open_response

logger = logging.getLogger("cognition.errors")

RULE_PATH_PREFIX = "/rules"


async def unhandled_exception_handler(
    request: Request,
    exc: Exception,
) -> JSONResponse:
    """
    Convert an uncaught exception into a response.

    Returns
    -------
    JSONResponse
        200 with ``allowed: true`` and the fail-open decision for rule
        routes; 500 with a generic error body elsewhere.
    """
    if request.url.path.startswith(RULE_PATH_PREFIX):
        logger.exception(
            "Rule failed, allowing login: %s %s",
            request.method,
            request.url.path,
            exc_info=exc,
        )
        fallback = RuleResponse(allowed=True, error=None, decision=fail_open_response())
        return JSONResponse(
            status_code=status.HTTP_200_OK,
            content=fallback.model_dump(mode="json"),
        )

    logger.exception(
        "Unhandled exception during request: %s %s",
        request.method,
        request.url.path,
        exc_info=exc,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "internal_server_error", "detail": "Internal server error"},
    )
