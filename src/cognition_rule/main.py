"""
Rule Host Application

FastAPI application exposing the login-decision rule over HTTP, with a
test-friendly application factory.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI

from .api import health_routes, rule_routes
from .core.errors import unhandled_exception_handler

logger = logging.getLogger("cognition.api")


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Settings are not touched here; they load on the first request that
    needs the decision client, so tests can override ``get_decision_client``
    without any PRECOGNITIVE_* environment.

    Returns
    -------
    FastAPI
        Fully configured application.
    """
    app = FastAPI(
        title="cognition-rule",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    app.add_exception_handler(Exception, unhandled_exception_handler)

    app.include_router(health_routes.router)
    app.include_router(rule_routes.router)

    logger.info("cognition-rule application created")
    return app


app = create_app()
