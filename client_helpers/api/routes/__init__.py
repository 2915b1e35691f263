from __future__ import annotations

from client_helpers.api.routes.formatting import router as formatting_router
from client_helpers.api.routes.generation import router as generation_router
from client_helpers.api.routes.health import router as health_router
from client_helpers.api.routes.validation import router as validation_router

__all__ = ["formatting_router", "generation_router", "health_router", "validation_router"]
