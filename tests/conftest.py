"""Root test fixtures shared across all test types."""

import os

# Set APP_ENV to testing before any app imports
os.environ.setdefault("APP_ENV", "testing")

# ruff: noqa: E402 - Imports must be after env var setup
import pytest
import structlog
from structlog.testing import CapturingLogger

from src.cspkit.core.config import Settings, get_settings
from src.cspkit.core.diagnostics import CollectingSink
from src.cspkit.core.logging import clear_request_context

# Clear settings cache to ensure test environment variables are picked up
get_settings.cache_clear()


@pytest.fixture
def sink() -> CollectingSink:
    """In-memory diagnostics sink."""
    return CollectingSink()


@pytest.fixture
def settings() -> Settings:
    """Settings with no CSP overrides, independent of the process environment."""
    return Settings(
        _env_file=None,
        app_env="testing",
        csp_directives=None,
        csp_nonces_for=[],
        csp_report_only=False,
    )


@pytest.fixture
def capturing_logger():
    """Route structlog output to a CapturingLogger for the duration of a test."""
    cap_logger = CapturingLogger()
    old_config = structlog.get_config()

    structlog.configure(
        processors=[structlog.contextvars.merge_contextvars],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=lambda *args, **kwargs: cap_logger,
        cache_logger_on_first_use=False,
    )

    clear_request_context()
    yield cap_logger
    clear_request_context()
    structlog.configure(**old_config)
