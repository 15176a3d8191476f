"""Directive maps and their wire-format serialization."""

from collections.abc import Iterable, Mapping
from typing import TypeAlias

DirectiveValue: TypeAlias = str | list[str]
DirectiveMap: TypeAlias = dict[str, DirectiveValue]

FIELD_NAME = "content-security-policy"
REPORT_ONLY_FIELD_NAME = "content-security-policy-report-only"

# Built-in fallback when neither the caller nor the settings store supplies directives
DEFAULT_DIRECTIVES: Mapping[str, tuple[str, ...]] = {
    "default_src": ("'none'",),
    "connect_src": ("'self'",),
    "child_src": ("'self'",),
    "img_src": ("'self'",),
    "script_src": ("'self'",),
    "style_src": ("'self'",),
}

NONCE_TARGETS = frozenset({"script_src", "style_src"})


def wire_name(name: str) -> str:
    """Convert a directive identifier to its header form (``script_src`` -> ``script-src``)."""
    return str(name).replace("_", "-")


def canonical_name(name: str) -> str:
    """Convert a directive identifier to its snake_case form."""
    return str(name).replace("-", "_")


def as_tokens(value: object) -> list[str]:
    """Return a fresh token list for a directive value."""
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Iterable):
        return [str(token) for token in value]
    return [str(value)]


def copy_directives(directives: Mapping[str, object]) -> DirectiveMap:
    """Per-request working copy; token lists are never shared with the source map."""
    return {name: as_tokens(value) for name, value in directives.items()}


def find_directive(directives: Mapping[str, object], name: str) -> str | None:
    """Find the key for ``name`` regardless of whether it was written snake or kebab case."""
    target = canonical_name(name)
    for key in directives:
        if canonical_name(key) == target:
            return key
    return None


def serialize_directive(name: str, value: object) -> str:
    return " ".join([wire_name(name), *as_tokens(value)])


def serialize_directives(directives: Mapping[str, object]) -> str:
    """Build the header field value.

    Entries are emitted in mapping order, joined with ``"; "`` and terminated
    with ``";"``. An empty map yields ``";"``.
    """
    return "; ".join(serialize_directive(name, value) for name, value in directives.items()) + ";"
