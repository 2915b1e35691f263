from __future__ import annotations

"""Application factory for the helper HTTP surface.

Exposes the library functions to non-Python clients. All behaviour lives in
``client_helpers.utils``; this module only wires middleware, handlers and
routers together.
"""

from fastapi import FastAPI

from client_helpers.api.routes import (
    formatting_router,
    generation_router,
    health_router,
    validation_router,
)
from client_helpers.core.config import settings
from client_helpers.core.exception_handlers import setup_exception_handlers
from client_helpers.core.logging import configure_logging
from client_helpers.core.middleware import request_id_middleware
from client_helpers.core.openapi import apply_openapi_customizations


def create_app() -> FastAPI:
    """Create and configure the FastAPI application instance.

    Returns:
        Configured FastAPI app with middleware, handlers, routers and docs.
    """
    # Logging first so subsequent init logs are formatted as desired
    configure_logging(settings.log)

    app = FastAPI(
        title="Client Helpers API",
        description=(
            "Validation, formatting and generation helpers for client "
            "applications: email/URL/IP/card/SSN/ZIP/password checks, coupon "
            "and password generation, phone and currency formatting."
        ),
        version="0.1.0",
        debug=settings.app.debug,
    )

    app.middleware("http")(request_id_middleware)

    setup_exception_handlers(app)

    app.include_router(validation_router, prefix=settings.app.api_prefix)
    app.include_router(generation_router, prefix=settings.app.api_prefix)
    app.include_router(formatting_router, prefix=settings.app.api_prefix)
    app.include_router(health_router)

    apply_openapi_customizations(app)

    return app
