"""Nonce dependencies for route handlers and templates."""

from typing import Annotated

from fastapi import Depends, Request

from src.cspkit.policy.nonces import nonce_assign_key


def get_request_nonce(request: Request, directive: str) -> str | None:
    """Return the nonce generated for ``directive`` on this request, if any."""
    return getattr(request.state, nonce_assign_key(directive), None)


def get_script_src_nonce(request: Request) -> str | None:
    return get_request_nonce(request, "script_src")


def get_style_src_nonce(request: Request) -> str | None:
    return get_request_nonce(request, "style_src")


ScriptNonce = Annotated[str | None, Depends(get_script_src_nonce)]
StyleNonce = Annotated[str | None, Depends(get_style_src_nonce)]
