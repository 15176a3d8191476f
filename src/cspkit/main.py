from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI
from fastapi.responses import HTMLResponse

from src.cspkit.api.dependencies import ScriptNonce, StyleNonce
from src.cspkit.api.middlewares import setup_middlewares
from src.cspkit.core.config import Settings, get_settings
from src.cspkit.core.exceptions import setup_exception_handlers
from src.cspkit.core.logging import get_logger, setup_logging

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Application lifespan - startup and shutdown."""
    settings = get_settings()
    setup_logging(settings.debug)
    logger.info(f"Starting {settings.app_name}")
    yield
    logger.info("Shutdown complete")


def _nonce_attr(nonce: str | None) -> str:
    return f' nonce="{nonce}"' if nonce else ""


def create_app(settings: Settings | None = None, csp_config: Any = None) -> FastAPI:
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Content Security Policy middleware with per-request nonces",
        version="0.1.0",
        lifespan=lifespan,
    )

    setup_exception_handlers(app)
    setup_middlewares(app, settings, csp_config)

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "healthy"}

    @app.get("/", response_class=HTMLResponse)
    async def index(script_nonce: ScriptNonce, style_nonce: StyleNonce) -> str:
        """Demo page: inline code only runs when tagged with the request's nonce."""
        return (
            "<!doctype html><html><head>"
            f"<style{_nonce_attr(style_nonce)}>body {{ font-family: sans-serif; }}</style>"
            "</head><body><p id='status'>blocked</p>"
            f"<script{_nonce_attr(script_nonce)}>"
            "document.getElementById('status').textContent = 'allowed';"
            "</script></body></html>"
        )

    return app


app = create_app()
