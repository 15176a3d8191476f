"""Per-request nonce generation and injection."""

import secrets
from collections.abc import Iterable

from src.cspkit.core.diagnostics import (
    DiagnosticKind,
    DiagnosticsSink,
    invalid_nonce_target_message,
)
from src.cspkit.policy.directives import (
    NONCE_TARGETS,
    DirectiveMap,
    as_tokens,
    canonical_name,
    find_directive,
)

NONCE_BYTES = 32


def generate_nonce() -> str:
    """Return 32 bytes from the OS CSPRNG as unpadded URL-safe base64 (43 chars)."""
    return secrets.token_urlsafe(NONCE_BYTES)


def nonce_source(nonce: str) -> str:
    return f"'nonce-{nonce}'"


def nonce_assign_key(name: str) -> str:
    """Context key under which a directive's raw nonce is stored (``script_src_nonce``)."""
    return f"{canonical_name(name)}_nonce"


def _nonce_target(name: object) -> str | None:
    if not isinstance(name, str):
        return None
    canonical = canonical_name(name)
    return canonical if canonical in NONCE_TARGETS else None


def insert_nonces(
    directives: DirectiveMap, nonces_for: Iterable[object], sink: DiagnosticsSink
) -> dict[str, str]:
    """Prepend a fresh nonce to each requested directive of ``directives`` in place.

    Returns the generated nonces keyed by snake_case directive name. Invalid
    targets are reported and skipped; a target listed twice gets one nonce.
    """
    nonces: dict[str, str] = {}
    for name in nonces_for:
        target = _nonce_target(name)
        if target is None:
            sink.warn(invalid_nonce_target_message(name), DiagnosticKind.INVALID_NONCE_TARGET)
            continue
        if target in nonces:
            continue

        nonce = generate_nonce()
        key = find_directive(directives, target) or target
        directives[key] = [nonce_source(nonce), *as_tokens(directives.get(key))]
        nonces[target] = nonce
    return nonces
