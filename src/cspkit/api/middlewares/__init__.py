"""Application middlewares."""

from typing import Any

from asgi_correlation_id import CorrelationIdMiddleware
from fastapi import FastAPI

from src.cspkit.core.config import Settings

from .content_security_policy import ContentSecurityPolicyMiddleware, RequestResponseContext
from .logging_context import logging_context_middleware

__all__ = [
    "setup_middlewares",
    "ContentSecurityPolicyMiddleware",
    "RequestResponseContext",
    "logging_context_middleware",
]


def setup_middlewares(app: FastAPI, settings: Settings, csp_config: Any = None) -> None:
    """Configure all application middlewares.

    Starlette wraps each added middleware around the previous ones, so the
    last one added runs first on the request.
    """
    # Content Security Policy - innermost, nonces are on request.state for the endpoint
    app.add_middleware(ContentSecurityPolicyMiddleware, config=csp_config, settings=settings)

    # Logging context - binds request_id to structlog context for CSP diagnostics
    @app.middleware("http")
    async def _logging_context(request, call_next):  # type: ignore[no-untyped-def]
        return await logging_context_middleware(request, call_next)

    # Correlation ID - outermost, generates/propagates X-Request-ID
    app.add_middleware(CorrelationIdMiddleware)
