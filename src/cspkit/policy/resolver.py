"""Configuration resolution.

Runs once, when a middleware is set up. A raw configuration (mapping, list of
key/value pairs, ``CSPConfig`` or ``None``) is merged over the defaults. If no
nonces are needed the header is serialized right away and the same
``PrecomputedHeader`` is reused for every request.
"""

from collections.abc import Mapping, Set
from typing import Any

from pydantic import BaseModel, TypeAdapter, ValidationError

from src.cspkit.core.config import Settings
from src.cspkit.core.diagnostics import (
    INVALID_CONFIG_MESSAGE,
    DiagnosticKind,
    DiagnosticsSink,
    LoggingSink,
)
from src.cspkit.policy.directives import DEFAULT_DIRECTIVES, copy_directives
from src.cspkit.policy.header import build_header
from src.cspkit.policy.models import DefaultConfig, PrecomputedHeader, ResolvedConfig

CONFIG_KEYS = ("directives", "nonces_for", "report_only")

BUILTIN_DEFAULTS = DefaultConfig(directives=DEFAULT_DIRECTIVES)

_BOOL = TypeAdapter(bool)


class InvalidConfigShape(ValueError):
    """Raised internally when a configuration value cannot be normalized."""


def default_config(settings: Settings | None = None) -> DefaultConfig:
    """Project host settings onto the default configuration.

    Settings left unset fall back to the built-in defaults.
    """
    if settings is None:
        return BUILTIN_DEFAULTS
    directives = settings.csp_directives
    return DefaultConfig(
        directives=DEFAULT_DIRECTIVES if directives is None else directives,
        nonces_for=tuple(settings.csp_nonces_for),
        report_only=settings.csp_report_only,
    )


def _is_pair(item: Any) -> bool:
    return isinstance(item, (list, tuple)) and len(item) == 2


def _as_mapping(value: Any) -> dict[Any, Any]:
    """Normalize a mapping or a sequence of key/value pairs."""
    if isinstance(value, Mapping):
        return dict(value)
    if isinstance(value, (list, tuple)):
        if not all(_is_pair(item) for item in value):
            raise InvalidConfigShape(f"not a list of key/value pairs: {value!r}")
        try:
            return dict(value)
        except TypeError as exc:  # unhashable key
            raise InvalidConfigShape(f"invalid key in key/value pairs: {value!r}") from exc
    raise InvalidConfigShape(f"expected a mapping or key/value pairs, got {type(value).__name__}")


def normalize_config(raw: Any) -> dict[str, Any]:
    """Turn any accepted raw configuration into a plain dict of recognized keys."""
    if raw is None:
        return {}
    if isinstance(raw, BaseModel):
        raw = raw.model_dump(exclude_unset=True, exclude_none=True)
    config = _as_mapping(raw)
    return {key: config[key] for key in CONFIG_KEYS if key in config}


def _normalize_nonces_for(value: Any) -> tuple[Any, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,)
    if isinstance(value, (list, tuple, Set)):
        return tuple(value)
    raise InvalidConfigShape(f"nonces_for must be a list, got {type(value).__name__}")


def _normalize_report_only(value: Any) -> bool:
    # Same lax coercion as CSPConfig: "false", "0" and "no" are False
    if value is None:
        return False
    try:
        return _BOOL.validate_python(value)
    except ValidationError as exc:
        raise InvalidConfigShape(f"report_only must be a boolean, got {value!r}") from exc


def _merge(raw: Any, defaults: DefaultConfig) -> ResolvedConfig:
    # Shallow merge: a supplied ``directives`` replaces the default map entirely
    merged = {**defaults.as_dict(), **normalize_config(raw)}
    return ResolvedConfig(
        directives=copy_directives(_as_mapping(merged["directives"])),
        nonces_for=_normalize_nonces_for(merged["nonces_for"]),
        report_only=_normalize_report_only(merged["report_only"]),
    )


def resolve(
    raw: Any,
    defaults: DefaultConfig | None = None,
    sink: DiagnosticsSink | None = None,
) -> ResolvedConfig | PrecomputedHeader:
    """Resolve a raw configuration, precomputing the header when no nonces are needed.

    Never raises: a configuration that cannot be normalized is reported once
    and replaced by the defaults. Defaults that are themselves malformed give
    way to the built-in ones.
    """
    defaults = defaults or BUILTIN_DEFAULTS
    sink = sink or LoggingSink()

    try:
        config = _merge(raw, defaults)
    except InvalidConfigShape:
        sink.warn(INVALID_CONFIG_MESSAGE, DiagnosticKind.INVALID_CONFIG_SHAPE)
        try:
            config = _merge({}, defaults)
        except InvalidConfigShape:
            config = _merge({}, BUILTIN_DEFAULTS)

    if config.nonces_for:
        return config
    return build_header(config.directives, config.report_only, sink)
