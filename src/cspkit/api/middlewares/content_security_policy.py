"""Content Security Policy middleware with per-request nonces."""

from typing import Any

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from src.cspkit.core.config import Settings
from src.cspkit.core.diagnostics import DiagnosticsSink
from src.cspkit.policy import ContentSecurityPolicy


class RequestResponseContext:
    """Bridges the policy pipeline to a Starlette request/response pair.

    Assigned values land on ``request.state`` before the endpoint runs so
    templates can read them; headers are queued and written once the response
    exists.
    """

    def __init__(self, request: Request):
        self.request = request
        self.headers: dict[str, str] = {}

    def put_header(self, name: str, value: str) -> None:
        self.headers[name.lower()] = value

    def assign(self, key: str, value: Any) -> None:
        setattr(self.request.state, key, value)

    def get_header(self, name: str) -> str | None:
        return self.headers.get(name.lower())

    def write_headers(self, response: Response) -> Response:
        for name, value in self.headers.items():
            response.headers[name] = value
        return response


class ContentSecurityPolicyMiddleware(BaseHTTPMiddleware):
    """Attach a Content-Security-Policy (or report-only) header to every response.

    The configuration is resolved once here; when it needs no nonces the
    header string is built once and reused.
    """

    def __init__(
        self,
        app: ASGIApp,
        config: Any = None,
        settings: Settings | None = None,
        sink: DiagnosticsSink | None = None,
    ):
        super().__init__(app)
        self.csp = ContentSecurityPolicy(config, settings=settings, sink=sink)

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        context = self.csp.apply(RequestResponseContext(request))
        # Read by the 500 handler, which runs outside this middleware
        request.state.csp_headers = context.headers
        response = await call_next(request)
        return context.write_headers(response)
