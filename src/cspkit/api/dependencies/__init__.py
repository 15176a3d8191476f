"""FastAPI dependency injection definitions."""

from src.cspkit.api.dependencies.nonces import (
    ScriptNonce,
    StyleNonce,
    get_request_nonce,
    get_script_src_nonce,
    get_style_src_nonce,
)

__all__ = [
    "ScriptNonce",
    "StyleNonce",
    "get_request_nonce",
    "get_script_src_nonce",
    "get_style_src_nonce",
]
