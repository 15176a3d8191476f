"""Content Security Policy resolution, nonce injection and header building.

Re-exports the public API for convenience.
"""

from src.cspkit.policy.context import ResponseContext, SimpleResponseContext
from src.cspkit.policy.csp import ContentSecurityPolicy, apply_policy
from src.cspkit.policy.directives import (
    DEFAULT_DIRECTIVES,
    FIELD_NAME,
    NONCE_TARGETS,
    REPORT_ONLY_FIELD_NAME,
    serialize_directives,
)
from src.cspkit.policy.models import DefaultConfig, PrecomputedHeader, ResolvedConfig
from src.cspkit.policy.nonces import generate_nonce
from src.cspkit.policy.resolver import default_config, resolve

__all__ = [
    # Pipeline
    "ContentSecurityPolicy",
    "apply_policy",
    "default_config",
    "resolve",
    # Values
    "DefaultConfig",
    "PrecomputedHeader",
    "ResolvedConfig",
    # Context
    "ResponseContext",
    "SimpleResponseContext",
    # Directives
    "DEFAULT_DIRECTIVES",
    "FIELD_NAME",
    "NONCE_TARGETS",
    "REPORT_ONLY_FIELD_NAME",
    "generate_nonce",
    "serialize_directives",
]
